"""
Max-Path Report
===============

QUESTION: What is the maximum path value through a number triangle, and
what is it if the path may only turn left onto odd and right onto even?

INPUTS
------

  - Triangle file, one row per line (default: p067_triangle.txt,
    https://projecteuler.net/project/resources/p067_triangle.txt)

OUTPUTS
-------

  - Row count
  - max_path and max_odd_even_path
  - --path: the route of the maximum path
  - --check: agreement with the numpy solver (and brute force when small)

EXPECTED OUTPUT (4-row example):
    Loaded triangle with 4 rows.
    The maximum path value is 23.
    If you may only move left onto an odd number or right onto an even number, the
    maximum path value is 10.

EXIT CODES:
    0 ok, 1 cannot open input, 2 malformed triangle, 3 --check mismatch

Usage:
    triangle-fold [path] [--path] [--check]
    python -m triangle_math.report [path]
"""

import argparse
import sys
from typing import List, Optional

from .spec.constants import (
    DEFAULT_TRIANGLE_FILE,
    BRUTE_FORCE_MAX_HEIGHT,
    EXIT_OK,
    EXIT_NO_INPUT,
    EXIT_BAD_SHAPE,
    EXIT_CHECK_FAILED,
)
from .spec.structures import Triangle
from .builders.parse import load_triangle
from .operators.policies import max_path, max_odd_even_path, best_path
from .analysis.brute_force import brute_force_max_path
from .analysis.vectorized import max_path_vectorized, max_odd_even_path_vectorized


def format_report(height: int, max_value: int, odd_even_value: int) -> str:
    """Render the three numbers as the human-readable report."""
    return (
        f"Loaded triangle with {height} rows.\n"
        f"The maximum path value is {max_value}.\n"
        "If you may only move left onto an odd number or right onto an even"
        " number, the\n"
        f"maximum path value is {odd_even_value}."
    )


def format_path(triangle: Triangle) -> str:
    """One line per row: row, column, value of the maximum path."""
    result = best_path(triangle)
    lines = [f"Best path (total {result.total}):"]
    for row, (col, value) in enumerate(zip(result.columns, result.values)):
        lines.append(f"  row {row:4d}  col {col:4d}  value {value}")
    return "\n".join(lines)


def check_triangle(triangle: Triangle, max_value: int, odd_even_value: int) -> bool:
    """
    Cross-check the fold results against the reference solvers.

    Prints one line per comparison. Brute force only runs for
    height <= BRUTE_FORCE_MAX_HEIGHT.
    """
    checks = [
        ("max_path vs numpy", max_value, max_path_vectorized(triangle)),
        ("max_odd_even_path vs numpy", odd_even_value, max_odd_even_path_vectorized(triangle)),
    ]
    if triangle.height() <= BRUTE_FORCE_MAX_HEIGHT:
        checks.append(("max_path vs brute force", max_value, brute_force_max_path(triangle)))

    all_ok = True
    for name, got, expected in checks:
        ok = got == expected
        all_ok = all_ok and ok
        mark = "✓" if ok else "✗"
        print(f"{mark} {name}: {got} / {expected}")
    return all_ok


def main(argv: Optional[List[str]] = None) -> int:
    parser = argparse.ArgumentParser(description="Maximum path through a number triangle")
    parser.add_argument("input", nargs="?", default=DEFAULT_TRIANGLE_FILE,
                        help=f"Triangle file (default: {DEFAULT_TRIANGLE_FILE})")
    parser.add_argument("--path", action="store_true", help="Print the route of the maximum path")
    parser.add_argument("--check", action="store_true", help="Cross-check against reference solvers")
    args = parser.parse_args(argv)

    try:
        triangle = load_triangle(args.input)
    except OSError:
        print(f"Failed to open {args.input}", file=sys.stderr)
        return EXIT_NO_INPUT
    except ValueError as exc:
        # InvalidShapeError is a ValueError too
        print(f"Malformed triangle in {args.input}: {exc}", file=sys.stderr)
        return EXIT_BAD_SHAPE

    if triangle.height() == 0:
        print(f"Malformed triangle in {args.input}: no rows", file=sys.stderr)
        return EXIT_BAD_SHAPE

    max_value = max_path(triangle)
    odd_even_value = max_odd_even_path(triangle)
    print(format_report(triangle.height(), max_value, odd_even_value))

    if args.path:
        print()
        print(format_path(triangle))

    if args.check:
        print()
        if not check_triangle(triangle, max_value, odd_even_value):
            return EXIT_CHECK_FAILED

    return EXIT_OK


if __name__ == "__main__":
    sys.exit(main())
