# cg2d/points.py
"""
Читання точок із текстового потоку.

Формат: одна точка на рядок, `(x, y)` або `x, y`; дужки і пробіли довкола
необов'язкові, роздільник: кома.
"""
from __future__ import annotations
import sys
from math import isfinite
from typing import Iterable, List, Optional

from .geom import Pt
from .utils import create_logger

log = create_logger(__name__)

_TRIM = " \t\r\n()"


class ParseError(ValueError):
    """Рядок не розбирається на два скінченні float."""

    def __init__(self, message: str, lineno: Optional[int] = None, text: str = ""):
        if lineno is not None:
            message = f"line {lineno}: {message}"
        super().__init__(message)
        self.lineno = lineno
        self.text = text


class EmptyInputError(ValueError):
    """Із потоку не прочитано жодної точки."""


def parse_point(text: str, lineno: Optional[int] = None) -> Pt:
    """Один рядок `(x, y)` -> Pt."""
    parts = text.strip(_TRIM).split(",")
    if len(parts) != 2:
        raise ParseError(f"expected 2 comma-separated numbers, got {len(parts)}: {text.strip()!r}",
                         lineno, text)
    try:
        x, y = (float(s.strip()) for s in parts)
    except ValueError:
        raise ParseError(f"cannot parse numbers in {text.strip()!r}", lineno, text) from None
    if not (isfinite(x) and isfinite(y)):
        raise ParseError(f"coordinates must be finite: {text.strip()!r}", lineno, text)
    return Pt(x, y)


def read_points(lines: Iterable[str]) -> List[Pt]:
    """
    Парсить усі рядки по порядку. Порожні рядки пропускаються
    (у первісній утиліті порожній рядок обривав розбір).
    Перший поганий рядок -> ParseError (часткових результатів немає);
    жодної точки -> EmptyInputError.
    """
    points: List[Pt] = []
    for lineno, line in enumerate(lines, start=1):
        if not line.strip():
            continue
        points.append(parse_point(line, lineno))
    if not points:
        raise EmptyInputError("Can not parse points from input")
    log.debug("parsed %d points", len(points))
    return points


def read_points_from_stdin() -> List[Pt]:
    return read_points(sys.stdin)
