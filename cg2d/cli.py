# cg2d/cli.py
from __future__ import annotations
import sys

from .pipeline import hull_from_lines
from .utils import create_logger

log = create_logger(__name__)


def main() -> int:
    """
    stdin: по точці на рядок -> stdout: вершини оболонки, по одній на рядок.
    Помилка вводу -> повідомлення в stderr, код виходу 1.
    """
    try:
        hull = hull_from_lines(sys.stdin)
    except ValueError as e:
        # ParseError, EmptyInputError, UnicodeDecodeError
        log.error("Error: %s", e)
        return 1

    for p in hull:
        print(tuple(p))
    return 0


if __name__ == "__main__":
    sys.exit(main())
