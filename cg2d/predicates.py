# cg2d/predicates.py
from __future__ import annotations
from .geom import Pt, sub, dot, norm

EPS = 1e-10  # допуск лише для діагностики (validate/contains), не для побудови

def cross(o: Pt, a: Pt, b: Pt) -> float:
    """
    Векторний добуток OA x OB.
      >0  b лівіше променя o->a (поворот проти годинникової),
      <0  b правіше (за годинниковою),
       0  колінеарні.
    """
    return (a.x - o.x) * (b.y - o.y) - (a.y - o.y) * (b.x - o.x)

def same_ray(o: Pt, a: Pt, b: Pt) -> bool:
    """Для колінеарних a, b: чи лежать вони по один бік від o."""
    return dot(sub(a, o), sub(b, o)) > 0

def signed_distance_to_line(a: Pt, b: Pt, p: Pt) -> float:
    length = norm(sub(b, a))
    if length == 0.0:
        return 0.0
    return cross(a, b, p) / length

def left_of(a: Pt, b: Pt, p: Pt, eps: float = EPS) -> bool:
    """p лежить лівіше або на прямій a->b (з допуском eps)."""
    return signed_distance_to_line(a, b, p) >= -eps
