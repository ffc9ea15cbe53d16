"""
Triangle builders - everything that produces a Triangle.

EXPORTS:
- Text input: parse_triangle, parse_triangle_text, load_triangle
- Generated: build_example_triangle, build_random_triangle
"""

# === Text input ===
from .parse import read_rows, parse_triangle, parse_triangle_text, load_triangle

# === Generated ===
from .random_triangle import build_example_triangle, build_random_triangle
