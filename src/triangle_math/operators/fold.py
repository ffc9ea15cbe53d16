"""
Bottom-Up Triangle Fold
=======================

Reduce a whole Triangle to one value of any type T.

DEFINITION:
    fold_triangle(tri, leaf, combine) -> T

    1. Every value of the bottom row becomes a T via leaf():

           3
          7 4        ==>   acc = [leaf(2), leaf(4), leaf(6)]
         2 4 6  <-

    2. Each value of the next row up is combined with the two T's
       directly below it:

           3
          7 4   <-   ==>   acc = [combine(7, acc[0], acc[1]),
         2 4 6                    combine(4, acc[1], acc[2])]

    3. Repeat until the apex; acc[0] is the result.

IN-PLACE ACCUMULATOR:
    Position i reads acc[i] and acc[i+1] and is written left to right, so
    acc[i+1] is still the value from the row below when position i reads
    it. One buffer of size width is enough.

    After a row of length n only acc[:n] is meaningful. The tail is stale
    and never read again.

PROPERTIES:
    - combine is never called for a one-row triangle
    - the triangle is not modified
    - O(total elements) time, O(width) extra space
"""

from typing import Callable, List, TypeVar

from ..spec.structures import Triangle, EmptyTriangleError

T = TypeVar('T')


def fold_triangle(triangle: Triangle,
                  leaf_fn: Callable[[int], T],
                  combine_fn: Callable[[int, T, T], T]) -> T:
    """
    Fold a triangle from the bottom row up.

    Args:
        triangle: non-empty Triangle (read only)
        leaf_fn: value -> T, applied to each bottom-row value
        combine_fn: (value, below_left, below_right) -> T

    Returns:
        The single T left after processing the apex.

    Raises:
        EmptyTriangleError: if triangle.height() == 0
    """
    if triangle.height() == 0:
        raise EmptyTriangleError("fold_triangle expects a non-empty triangle")

    rows = triangle.rows()

    accum: List[T] = [leaf_fn(value) for value in rows[-1].tolist()]

    for row in reversed(rows[:-1]):
        for i, value in enumerate(row.tolist()):
            accum[i] = combine_fn(value, accum[i], accum[i + 1])

    return accum[0]


# Self-test when run directly
# Run with: python -m triangle_math.operators.fold (from src/)
if __name__ == "__main__":
    from ..spec.constants import EXAMPLE_ROWS, EXAMPLE_MAX_PATH

    print("=" * 60)
    print("BOTTOM-UP FOLD - VERIFICATION")
    print("=" * 60)

    tri = Triangle.from_rows(EXAMPLE_ROWS)
    result = fold_triangle(tri, lambda v: v, lambda v, l, r: v + max(l, r))
    print(f"\nExample triangle: height={tri.height()}")
    print(f"max path = {result} (should be {EXAMPLE_MAX_PATH})")

    n_paths = fold_triangle(tri, lambda v: 1, lambda v, l, r: l + r)
    print(f"path count = {n_paths} (should be {2 ** (tri.height() - 1)})")

    print("\n" + "=" * 60)
    print("All fold verifications passed." if result == EXAMPLE_MAX_PATH else "FOLD MISMATCH")
    print("=" * 60)
