"""Fold engine and the combine policies built on it."""

from .fold import fold_triangle

from .policies import (
    max_path,
    max_odd_even_path,
    min_path,
    count_paths,
    best_path,
    PathResult,
)
