"""
Brute-Force Path Enumeration
============================

Reference answers for small triangles by walking every apex-to-base path.

A path is a tuple of column indices, one per row, starting at (0, 0):
each step keeps the column (down-left) or adds one (down-right).
There are 2**(height-1) of them, so this is for verification only.
"""

from itertools import product
from typing import Iterator, List, Sequence, Tuple

from ..spec.constants import BRUTE_FORCE_MAX_HEIGHT
from ..spec.structures import Triangle, EmptyTriangleError


def enumerate_paths(triangle: Triangle) -> Iterator[Tuple[int, ...]]:
    """Yield the column tuple of every apex-to-base path."""
    height = triangle.height()
    if height == 0:
        raise EmptyTriangleError("enumerate_paths expects a non-empty triangle")

    for moves in product((0, 1), repeat=height - 1):
        columns = [0]
        for step in moves:
            columns.append(columns[-1] + step)
        yield tuple(columns)


def path_values(triangle: Triangle, columns: Sequence[int]) -> List[int]:
    """Values visited by a path given as column indices."""
    return [triangle.at(row, col) for row, col in enumerate(columns)]


def brute_force_max_path(triangle: Triangle) -> int:
    """
    Maximum path sum by exhaustive enumeration.

    Raises:
        EmptyTriangleError: height 0
        ValueError: height > BRUTE_FORCE_MAX_HEIGHT
    """
    if triangle.height() > BRUTE_FORCE_MAX_HEIGHT:
        raise ValueError(
            f"Brute force limited to height <= {BRUTE_FORCE_MAX_HEIGHT}, "
            f"got {triangle.height()} ({2 ** (triangle.height() - 1)} paths)"
        )
    return max(sum(path_values(triangle, cols)) for cols in enumerate_paths(triangle))
