"""
Combine Policies
================

Concrete aggregations built on fold_triangle. Each policy is just a
(leaf, combine) pair; the traversal lives in fold.py.

    max_path           v + max(l, r)               Project Euler 18/67
    max_odd_even_path  parity-restricted max path  (see below)
    min_path           v + min(l, r)
    count_paths        l + r, leaf = 1             2**(height-1)
    best_path          max path plus the route taken

PARITY RULE (max_odd_even_path):
    The path may only step down-left onto an odd result and down-right onto
    an even result. A branch that fails its test contributes 0:

        combine(v, l, r) = v + max(l if l is odd else 0,
                                   r if r is even else 0)

    If neither branch qualifies the path simply ends at v. The test is
    applied to the accumulated value below, not the raw cell value.
"""

from dataclasses import dataclass
from typing import Tuple

from .fold import fold_triangle
from ..spec.structures import Triangle


def _identity(value: int) -> int:
    return value


def _is_even(n: int) -> bool:
    return n % 2 == 0


def max_path(triangle: Triangle) -> int:
    """
    Maximum apex-to-base path sum.

    Bottom-up: each value keeps the greater of the two results below it.
    """
    def combine(value: int, left: int, right: int) -> int:
        return value + max(left, right)

    return fold_triangle(triangle, _identity, combine)


def max_odd_even_path(triangle: Triangle) -> int:
    """Maximum path sum under the parity rule (module docstring)."""
    def combine(value: int, left: int, right: int) -> int:
        return value + max(0 if _is_even(left) else left,
                           right if _is_even(right) else 0)

    return fold_triangle(triangle, _identity, combine)


def min_path(triangle: Triangle) -> int:
    """Minimum apex-to-base path sum."""
    def combine(value: int, left: int, right: int) -> int:
        return value + min(left, right)

    return fold_triangle(triangle, _identity, combine)


def count_paths(triangle: Triangle) -> int:
    """Number of apex-to-base paths; 2**(height-1) for any valid triangle."""
    return fold_triangle(triangle, lambda value: 1, lambda value, left, right: left + right)


@dataclass
class PathResult:
    """A maximum path and where it goes."""
    total: int
    columns: Tuple[int, ...]  # column index in each row, apex first
    values: Tuple[int, ...]   # value visited in each row


def best_path(triangle: Triangle) -> PathResult:
    """
    Maximum path sum together with the route that achieves it.

    Folds to (total, route) where route is a linked list of
    (step, rest) pairs, step 0 for down-left and 1 for down-right, None at
    the bottom row. Sharing the tail keeps each combine O(1). Ties go left,
    so the route is deterministic; the total is the same as max_path()
    whichever side wins a tie.
    """
    def leaf(value: int):
        return value, None

    def combine(value, left, right):
        if left[0] >= right[0]:
            return value + left[0], (0, left[1])
        return value + right[0], (1, right[1])

    total, route = fold_triangle(triangle, leaf, combine)

    columns = [0]
    while route is not None:
        step, route = route
        columns.append(columns[-1] + step)
    values = tuple(triangle.at(row, col) for row, col in enumerate(columns))

    return PathResult(total=total, columns=tuple(columns), values=values)
