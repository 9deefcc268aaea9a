from __future__ import annotations
from typing import Dict, List, Optional, Sequence, Set

from .geom import Pt, as_points, dist2, dot, norm, sub
from .predicates import EPS, cross, left_of, same_ray, signed_distance_to_line
from .utils import create_logger

log = create_logger(__name__)

_EAST = Pt(1.0, 0.0)  # стартовий напрямок: усі точки не нижче за bottom


def _bottommost_index(points: Sequence[Pt]) -> Optional[int]:
    if len(points) < 1:
        return None
    b = 0
    for i, p in enumerate(points):
        if p.y < points[b].y:  # строго: при рівності лишається перша
            b = i
    return b


def find_bottommost(points: Sequence[Pt]) -> Optional[Pt]:
    """Точка з мінімальним y (перша з таких у порядку вводу) або None."""
    i = _bottommost_index(points)
    return None if i is None else points[i]


def _beats(o: Pt, a: Pt, b: Pt, heading: Pt) -> bool:
    """
    Чи кандидат b кращий за a для якоря o (b «правіше» за a).
    Колінеарні на одному промені: перемагає дальший;
    на протилежних: той, що йде вперед за напрямком heading.
    """
    c = cross(o, a, b)
    if c < 0.0:
        return True
    if c > 0.0:
        return False
    if same_ray(o, a, b):
        return dist2(o, b) > dist2(o, a)
    return dot(sub(b, o), heading) > 0.0


def _wrap(points: Sequence[Pt]) -> List[int]:
    """
    Jarvis march. Повертає індекси вершин оболонки проти годинникової
    стрілки, починаючи з найнижчої точки.
    """
    start = _bottommost_index(points)
    assert start is not None, "Bottommost found None!"

    bottom = points[start]
    hull = [start]
    on_hull: Set[Pt] = {bottom}
    o = bottom
    heading = _EAST
    log.debug("start at #%d %s", start, tuple(bottom))

    while True:
        best: Optional[int] = None
        for i, b in enumerate(points):
            if b == o:
                continue
            if best is None or _beats(o, points[best], b, heading):
                best = i
        if best is None:
            # усі точки збігаються з якорем
            break
        nxt = points[best]
        if nxt == bottom:
            # повернулись у стартову точку
            break
        if nxt in on_hull:
            # bottom лежав усередині нижнього ребра і більше не вибирається
            log.debug("closed at #%d, bottom is not a corner", best)
            break
        hull.append(best)
        on_hull.add(nxt)
        log.debug("vertex #%d %s", best, tuple(nxt))
        heading = sub(nxt, o)
        o = nxt

    log.debug("hull: %d of %d points", len(hull), len(points))
    return hull


def build_hull(points: Sequence[Pt]) -> Optional[List[Pt]]:
    """
    Опукла оболонка подарунковим обгортанням.

    Повертає самі об'єкти Pt із `points` (без копій) у порядку обходу
    проти годинникової стрілки від найнижчої точки; None для порожнього
    набору.
    """
    if len(points) < 1:
        return None
    if len(points) < 2:
        return [points[0]]
    return [points[i] for i in _wrap(points)]


class ConvexHull2D:
    """
    2D опукла оболонка (gift wrapping) з діагностикою й експортом.

    Вхід: послідовність Pt або (x, y), мінімум 1 точка.
    self.P: індексована копія входу; vertices(): індекси вершин у P.
    """

    def __init__(self, points: Sequence[Pt], eps: float = EPS):
        if len(points) < 1:
            raise ValueError("Need at least 1 point")
        self.P: List[Pt] = as_points(points)
        self.eps = eps
        self.hull_idx: List[int] = [0] if len(self.P) == 1 else _wrap(self.P)

    # ---------------- Публічний API ----------------
    def vertices(self) -> List[int]:
        return self.hull_idx[:]

    def points(self) -> List[Pt]:
        return [self.P[i] for i in self.hull_idx]

    def area(self) -> float:
        """Площа за формулою шнурівки (для CCW-обходу додатна)."""
        pts = self.points()
        s = 0.0
        for i, p in enumerate(pts):
            q = pts[(i + 1) % len(pts)]
            s += p.x * q.y - q.x * p.y
        return 0.5 * s

    def perimeter(self) -> float:
        pts = self.points()
        if len(pts) < 2:
            return 0.0
        return sum(norm(sub(pts[(i + 1) % len(pts)], p)) for i, p in enumerate(pts))

    def contains(self, p: Pt) -> bool:
        """Чи лежить p усередині або на межі оболонки (з допуском eps)."""
        pts = self.points()
        if len(pts) == 1:
            return p == pts[0]
        if len(pts) == 2:
            a, b = pts
            return (abs(signed_distance_to_line(a, b, p)) <= self.eps
                    and dot(sub(p, a), sub(b, a)) >= 0.0
                    and dot(sub(p, b), sub(a, b)) >= 0.0)
        return all(left_of(a, pts[(i + 1) % len(pts)], p, self.eps)
                   for i, a in enumerate(pts))

    # ---------------- Діагностика / Експорт ----------------
    def validate(self) -> dict:
        """
        Перевірка коректності:
          - старт є першою точкою з мінімальним y;
          - вершини не повторюються (за значенням);
          - кожна трійка сусідніх вершин повертає ліворуч або пряма;
          - жодна точка входу не лежить зовні.
        Повертає словник із діагностикою (порожні списки = все ок).
        """
        pts = self.points()
        h = len(pts)

        bad_start: List[int] = []
        if self.hull_idx[0] != _bottommost_index(self.P):
            bad_start.append(self.hull_idx[0])

        seen: Dict[Pt, int] = {}
        duplicates: List[int] = []
        for i in self.hull_idx:
            if self.P[i] in seen:
                duplicates.append(i)
            seen.setdefault(self.P[i], i)

        bad_turns: List[int] = []
        if h >= 3:
            for k in range(h):
                a, b, c = pts[k - 1], pts[k], pts[(k + 1) % h]
                if signed_distance_to_line(a, b, c) < -self.eps:
                    bad_turns.append(self.hull_idx[k])

        outside = [i for i, p in enumerate(self.P) if not self.contains(p)]

        return {
            "vertices": h,
            "points": len(self.P),
            "bad_start": bad_start,
            "duplicates": duplicates,
            "bad_turns": bad_turns,
            "outside_points": outside,
        }

    def to_off(self) -> str:
        """
        Експорт оболонки у формат OFF: один багатокутник у площині z = 0.
        """
        pts = self.points()
        lines = ["OFF", f"{len(pts)} 1 0"]
        for p in pts:
            lines.append(f"{p.x} {p.y} 0.0")
        lines.append(" ".join([str(len(pts))] + [str(i) for i in range(len(pts))]))
        return "\n".join(lines)
