"""
TRIANGLE_MATH - Bottom-up folds over number triangles
=====================================================

Structure:
    spec/       - Constants and the Triangle contract
    operators/  - fold_triangle and the combine policies
    builders/   - Parsing and generated triangles
    analysis/   - Brute-force and numpy reference solvers
    report      - Text report and the triangle-fold command

Requirements:
    Python >= 3.9
    numpy >= 1.20
"""

import sys

# Python version check
if sys.version_info < (3, 9):
    raise ImportError(f"triangle_math requires Python >= 3.9, got {sys.version}")

# numpy version check
import numpy as np
_numpy_version = tuple(int(p) for p in np.__version__.split('.')[:2] if p.isdigit())
if _numpy_version < (1, 20):
    raise ImportError(f"triangle_math requires numpy >= 1.20, got {np.__version__}")

from . import spec
from . import operators
from . import builders
from . import analysis

from .spec import Triangle, InvalidShapeError, EmptyTriangleError
from .operators import fold_triangle, max_path, max_odd_even_path
