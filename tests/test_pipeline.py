import numpy as np
import pytest

from cg2d.geom import Pt
from cg2d.pipeline import hull_from_array, hull_from_lines
from cg2d.points import EmptyInputError, ParseError

LINES = [
    "(0, 0)", "(0, 3)", "(4, 4)", "(1, 3)", "(0, 1)",
    "(3, 6)", "(-3, 6)", "(-4, 4)", "(1, 5)", "(-1, 5)",
]


def test_hull_from_lines():
    hull = hull_from_lines(LINES)
    assert hull == [Pt(0.0, 0.0), Pt(4.0, 4.0), Pt(3.0, 6.0), Pt(-3.0, 6.0), Pt(-4.0, 4.0)]


def test_hull_from_lines_errors():
    with pytest.raises(ParseError):
        hull_from_lines(["(0, 0)", "1.0, abc"])
    with pytest.raises(EmptyInputError):
        hull_from_lines([])


def test_hull_from_array():
    arr = np.array([[0, 0], [2, 0], [1, 1], [2, 2], [0, 2]])
    out = hull_from_array(arr)
    assert out.shape == (4, 2)
    np.testing.assert_array_equal(out, [[0, 0], [2, 0], [2, 2], [0, 2]])


def test_hull_from_array_empty():
    with pytest.raises(EmptyInputError):
        hull_from_array(np.empty((0, 2)))


def test_hull_from_array_rejects_nan():
    with pytest.raises(ValueError):
        hull_from_array([[0, 0], [1, 0], [np.nan, 0.5], [0, 1]])
