from __future__ import annotations
from typing import Iterable, List

import numpy as np

from .geom import Pt, points_from_array, to_array
from .hull import build_hull
from .points import EmptyInputError, read_points


def hull_from_lines(lines: Iterable[str]) -> List[Pt]:
    """
    Повний пайплайн для тексту:
      - парсить рядки `(x, y)` у Pt (ParseError / EmptyInputError);
      - будує оболонку подарунковим обгортанням.
    """
    points = read_points(lines)
    hull = build_hull(points)
    assert hull is not None, "non-empty input produced no hull"
    return hull


def hull_from_array(arr) -> np.ndarray:
    """
    Те саме для масиву форми (n, 2): повертає вершини оболонки
    масивом форми (h, 2) у порядку обходу.
    """
    pts = points_from_array(arr)
    if not pts:
        raise EmptyInputError("empty point array")
    return to_array(build_hull(pts))
