"""
Core math modules для timepoint

Целочисленные границы и насыщающие примитивы.
"""

from timepoint.core.math.int_ranges import (
    INT64_MAX,
    INT64_MIN,
    UINT64_MAX,
    DurationOverflowError,
    checked_int64,
    saturate_int64,
    saturate_uint64,
    trunc_divide,
    validate_uint64,
)

__all__ = [
    # Constants
    "INT64_MAX",
    "INT64_MIN",
    "UINT64_MAX",
    # Exceptions
    "DurationOverflowError",
    # Functions
    "checked_int64",
    "saturate_int64",
    "saturate_uint64",
    "trunc_divide",
    "validate_uint64",
]
