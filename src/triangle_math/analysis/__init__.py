"""
Analysis functions - reference solvers used to cross-check the fold.

Separated from operators to keep layering clean:
    builders → spec
    operators → spec
    analysis → spec

Includes:
- brute_force: exhaustive path enumeration (small triangles only)
- vectorized: numpy max-path solvers
"""

from .brute_force import enumerate_paths, path_values, brute_force_max_path
from .vectorized import max_path_vectorized, max_odd_even_path_vectorized
