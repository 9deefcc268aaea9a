"""
cg2d: мінімальна бібліотека для 2D опуклої оболонки.
Зараз: подарункове обгортання (Jarvis march) + читання точок із тексту.
"""

__version__ = "0.1.0"

from cg2d.geom import Pt, as_points, points_from_array, to_array
from cg2d.predicates import EPS, cross, left_of, signed_distance_to_line
from cg2d.points import ParseError, EmptyInputError, parse_point, read_points, read_points_from_stdin
from cg2d.hull import ConvexHull2D, build_hull, find_bottommost
from cg2d.pipeline import hull_from_array, hull_from_lines
from cg2d.utils import create_logger, set_log_level, get_log_level

__all__ = [
    "Pt", "as_points", "points_from_array", "to_array",
    "EPS", "cross", "left_of", "signed_distance_to_line",
    "ParseError", "EmptyInputError", "parse_point", "read_points", "read_points_from_stdin",
    "ConvexHull2D", "build_hull", "find_bottommost",
    "hull_from_array", "hull_from_lines",
    "create_logger", "set_log_level", "get_log_level",
    "__version__",
]
