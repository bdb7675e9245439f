"""Internal utilities for Kalends.

This module contains private implementation details:
    - Constants and unit factors
    - Calendar math (ordinals, leap years, ISO weeks)
    - Normalization of out-of-range components
    - Constructor argument validation

Note: This module is not part of the public API.
"""

from __future__ import annotations

from kalends._internal.normalize import (
    normalize_date,
    normalize_datetime,
    normalize_interval,
    normalize_pair,
)
from kalends._internal.validation import (
    validate_date,
    validate_day,
    validate_month,
    validate_time,
    validate_year,
)

__all__: list[str] = [
    "normalize_date",
    "normalize_datetime",
    "normalize_interval",
    "normalize_pair",
    "validate_date",
    "validate_day",
    "validate_month",
    "validate_time",
    "validate_year",
]
