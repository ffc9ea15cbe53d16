"""
Triangle Parsing
================

Read triangles in the Project Euler 18/67 text format:

    3
    7 4
    2 4 6
    8 5 9 3

One row per line, top row first, values separated by whitespace.

RULES:
    - trailing blank lines are ignored (files usually end with a newline)
    - a blank line before the last row is an empty row -> InvalidShapeError
    - a token that is not an integer -> ValueError naming the line
    - rows are validated against the contract (spec/structures.py) before
      the Triangle is built, so every bad line is reported at once

Content is not checked beyond "is an integer".
"""

from pathlib import Path
from typing import Iterable, List, Union

from ..spec.structures import Triangle, validate_rows


def read_rows(lines: Iterable[str]) -> List[List[int]]:
    """
    Split lines into integer rows, dropping trailing blank lines.

    Raises:
        ValueError: a token is not an integer (message has the 1-based line)
    """
    rows = []
    for lineno, line in enumerate(lines, start=1):
        tokens = line.split()
        try:
            rows.append([int(tok) for tok in tokens])
        except ValueError as exc:
            raise ValueError(f"Line {lineno}: {exc}") from exc

    while rows and not rows[-1]:
        rows.pop()

    return rows


def parse_triangle(lines: Iterable[str]) -> Triangle:
    """
    Parse an iterable of text lines (e.g. an open file) into a Triangle.

    Raises:
        InvalidShapeError: one or more rows have the wrong length
        ValueError: non-integer token
    """
    rows = read_rows(lines)
    validate_rows(rows, strict=True)
    return Triangle.from_rows(rows)


def parse_triangle_text(text: str) -> Triangle:
    """Parse a triangle held in a string."""
    return parse_triangle(text.splitlines())


def load_triangle(path: Union[str, Path]) -> Triangle:
    """
    Load a triangle file.

    Raises:
        OSError: file cannot be opened (FileNotFoundError etc.)
        InvalidShapeError, ValueError: see parse_triangle
    """
    with open(path, 'r') as f:
        return parse_triangle(f)
