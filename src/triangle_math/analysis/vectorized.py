"""
Vectorized Max-Path Solvers
===========================

numpy versions of the two main policies. Each row is processed with one
array expression instead of a Python loop:

    acc = row + max(acc[:-1], acc[1:])

Used to cross-check the generic fold on large triangles where brute force
is out of reach.

WARNING - int64 OVERFLOW:
    The fold works on Python ints and never overflows. These solvers stay
    in int64. If height * max|value| could exceed the int64 range a
    UserWarning is issued and the result may wrap.
"""

import warnings

import numpy as np

from ..spec.constants import INT_DTYPE
from ..spec.structures import Triangle, EmptyTriangleError


def _bottom_up_rows(triangle: Triangle):
    """Rows bottom first, after the empty and overflow checks."""
    if triangle.height() == 0:
        raise EmptyTriangleError("vectorized solvers expect a non-empty triangle")

    rows = triangle.rows()
    peak = max(int(np.abs(row).max()) for row in rows)
    if peak * len(rows) > np.iinfo(INT_DTYPE).max:
        warnings.warn(
            f"Path sums may overflow {np.dtype(INT_DTYPE).name}: "
            f"height={len(rows)}, max|value|={peak}",
            UserWarning
        )
    return rows[::-1]


def max_path_vectorized(triangle: Triangle) -> int:
    """Maximum path sum, one numpy expression per row."""
    rows = _bottom_up_rows(triangle)

    acc = rows[0].copy()
    for row in rows[1:]:
        acc = row + np.maximum(acc[:-1], acc[1:])
    return int(acc[0])


def max_odd_even_path_vectorized(triangle: Triangle) -> int:
    """Parity-restricted maximum path sum (see operators/policies.py)."""
    rows = _bottom_up_rows(triangle)

    acc = rows[0].copy()
    for row in rows[1:]:
        left = acc[:-1]
        right = acc[1:]
        left = np.where(left % 2 != 0, left, 0)
        right = np.where(right % 2 == 0, right, 0)
        acc = row + np.maximum(left, right)
    return int(acc[0])
