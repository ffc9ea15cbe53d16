"""Constants and the Triangle contract."""

from .constants import (
    INT_DTYPE,
    DEFAULT_TRIANGLE_FILE,
    DEFAULT_SEED,
    VALUE_LOW,
    VALUE_HIGH,
    BRUTE_FORCE_MAX_HEIGHT,
    EXAMPLE_ROWS,
    EXAMPLE_MAX_PATH,
)

from .structures import (
    Triangle,
    InvalidShapeError,
    EmptyTriangleError,
    validate_rows,
)
