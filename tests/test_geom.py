import numpy as np
import pytest

from cg2d.geom import Pt, as_points, dist2, points_from_array, to_array
from cg2d.predicates import cross, left_of, same_ray, signed_distance_to_line


def test_pt_is_frozen_and_hashable():
    p = Pt(1.0, 2.0)
    assert tuple(p) == (1.0, 2.0)
    assert p == Pt(1.0, 2.0)
    assert len({p, Pt(1.0, 2.0), Pt(2.0, 1.0)}) == 2
    with pytest.raises(AttributeError):
        p.x = 3.0


def test_as_points_keeps_existing_objects():
    p = Pt(0.0, 0.0)
    out = as_points([p, (1, 2)])
    assert out[0] is p
    assert out[1] == Pt(1.0, 2.0)


def test_array_conversion():
    arr = np.array([[0.0, 1.0], [2.0, 3.0]])
    pts = points_from_array(arr)
    assert pts == [Pt(0.0, 1.0), Pt(2.0, 3.0)]
    np.testing.assert_array_equal(to_array(pts), arr)
    assert points_from_array([]) == []
    assert to_array([]).shape == (0, 2)


def test_points_from_array_rejects_bad_shape():
    with pytest.raises(ValueError):
        points_from_array([[1.0, 2.0, 3.0]])


@pytest.mark.parametrize(
    "b,sign",
    [
        (Pt(0.0, 1.0), 1),   # ліворуч
        (Pt(0.0, -1.0), -1),  # праворуч
        (Pt(2.0, 0.0), 0),
        (Pt(-1.0, 0.0), 0),
    ]
)
def test_cross_sign(b, sign):
    o, a = Pt(0.0, 0.0), Pt(1.0, 0.0)
    c = cross(o, a, b)
    assert (c > 0) - (c < 0) == sign


def test_cross_formula():
    o, a, b = Pt(1.0, 1.0), Pt(3.0, 2.0), Pt(2.0, 4.0)
    assert cross(o, a, b) == (3 - 1) * (4 - 1) - (2 - 1) * (2 - 1)


def test_same_ray_and_distances():
    o = Pt(0.0, 0.0)
    assert same_ray(o, Pt(1.0, 1.0), Pt(3.0, 3.0))
    assert not same_ray(o, Pt(1.0, 1.0), Pt(-1.0, -1.0))
    assert dist2(o, Pt(3.0, 4.0)) == 25.0


def test_signed_distance_and_left_of():
    a, b = Pt(0.0, 0.0), Pt(2.0, 0.0)
    assert signed_distance_to_line(a, b, Pt(1.0, 3.0)) == pytest.approx(3.0)
    assert signed_distance_to_line(a, b, Pt(1.0, -3.0)) == pytest.approx(-3.0)
    assert signed_distance_to_line(a, a, Pt(1.0, 1.0)) == 0.0
    assert left_of(a, b, Pt(1.0, 0.0))
    assert not left_of(a, b, Pt(1.0, -1e-3))


@pytest.mark.parametrize("bad", [np.nan, np.inf, -np.inf])
def test_points_from_array_rejects_non_finite(bad):
    with pytest.raises(ValueError):
        points_from_array([[0.0, 0.0], [1.0, 0.0], [bad, 0.5], [0.0, 1.0]])
