from __future__ import annotations
from dataclasses import dataclass
from math import sqrt
from typing import Iterable, List, Sequence, Tuple

import numpy as np


@dataclass(frozen=True)
class Pt:
    x: float
    y: float
    def __iter__(self):
        yield self.x; yield self.y

def sub(a: Pt, b: Pt) -> Pt:
    return Pt(a.x - b.x, a.y - b.y)

def dot(a: Pt, b: Pt) -> float:
    return a.x*b.x + a.y*b.y

def norm(a: Pt) -> float:
    return sqrt(dot(a, a))

def dist2(a: Pt, b: Pt) -> float:
    """Квадрат відстані (без sqrt, для порівнянь)."""
    d = sub(a, b)
    return dot(d, d)

def as_points(points: Iterable[Tuple[float, float]]) -> List[Pt]:
    """(x, y)-пари -> список Pt. Готові Pt не копіюються."""
    out: List[Pt] = []
    for p in points:
        if isinstance(p, Pt):
            out.append(p)
        else:
            x, y = p
            out.append(Pt(float(x), float(y)))
    return out

def points_from_array(arr) -> List[Pt]:
    """
    Масив форми (n, 2) -> список Pt.
    Приймає все, що їсть np.asarray (списки, кортежі, ndarray).
    """
    a = np.asarray(arr, dtype=float)
    if a.size == 0:
        return []
    if a.ndim != 2 or a.shape[1] != 2:
        raise ValueError(f"expected an (n, 2) array, got shape {a.shape}")
    if not np.isfinite(a).all():
        raise ValueError("coordinates must be finite")
    return [Pt(float(x), float(y)) for x, y in a]

def to_array(points: Sequence[Pt]) -> np.ndarray:
    """Список Pt -> ndarray форми (n, 2)."""
    return np.array([(p.x, p.y) for p in points], dtype=float).reshape(-1, 2)
