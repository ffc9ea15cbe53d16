"""
Triangle builders - example and random triangles.

build_random_triangle uses numpy's PCG64 generator so a (height, seed)
pair always gives the same triangle.
"""

from numpy.random import Generator, PCG64
from typing import Optional

from ..spec.constants import DEFAULT_SEED, VALUE_LOW, VALUE_HIGH, EXAMPLE_ROWS, INT_DTYPE
from ..spec.structures import Triangle


def build_example_triangle() -> Triangle:
    """The 4-row triangle from the problem statement (max path 23)."""
    return Triangle.from_rows(EXAMPLE_ROWS)


def build_random_triangle(height: int,
                          low: int = VALUE_LOW,
                          high: int = VALUE_HIGH,
                          seed: Optional[int] = DEFAULT_SEED) -> Triangle:
    """
    Build a triangle of uniformly random integers in [low, high].

    Args:
        height: number of rows (0 gives an empty triangle)
        low, high: inclusive value range
        seed: PCG64 seed (None = fresh entropy)

    Returns:
        Triangle with `height` rows
    """
    if height < 0:
        raise ValueError(f"height must be >= 0, got {height}")
    if low > high:
        raise ValueError(f"Need low <= high, got low={low}, high={high}")

    rng = Generator(PCG64(seed))
    triangle = Triangle()
    for i in range(height):
        triangle.append_row(rng.integers(low, high, size=i + 1, endpoint=True, dtype=INT_DTYPE))
    return triangle
