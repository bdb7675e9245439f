"""Internal constants for Kalends.

These constants define the limits and magic numbers used throughout
the library. This module is not part of the public API.
"""

from __future__ import annotations

# Time unit conversions
US_PER_MILLISECOND: int = 1_000
US_PER_SECOND: int = 1_000_000

SECONDS_PER_MINUTE: int = 60
SECONDS_PER_HOUR: int = 60 * SECONDS_PER_MINUTE
SECONDS_PER_DAY: int = 24 * SECONDS_PER_HOUR  # 86_400

# Year limits
MIN_YEAR: int = 1
MAX_YEAR: int = 9999

# Ordinal of 9999-12-31
MAX_ORDINAL: int = 3_652_059

# Interval day-count limit (inclusive, both signs)
MAX_DELTA_DAYS: int = 999_999_999

# Days in each month (non-leap year)
DAYS_IN_MONTH: tuple[int, ...] = (
    0,   # Placeholder for 1-indexed access
    31,  # January
    28,  # February (non-leap)
    31,  # March
    30,  # April
    31,  # May
    30,  # June
    31,  # July
    31,  # August
    30,  # September
    31,  # October
    30,  # November
    31,  # December
)

# Days before each month (cumulative, non-leap year)
DAYS_BEFORE_MONTH: tuple[int, ...] = (
    0,  # Placeholder for 1-indexed access
    0, 31, 59, 90, 120, 151, 181, 212, 243, 273, 304, 334,
)

# Days in 400, 100 and 4 year cycles
DAYS_IN_400_YEARS: int = 146_097
DAYS_IN_100_YEARS: int = 36_524
DAYS_IN_4_YEARS: int = 1_461

# Unix epoch: 1970-01-01 is ordinal 719163
EPOCH_ORDINAL: int = 719_163
EPOCH_SECONDS: int = EPOCH_ORDINAL * SECONDS_PER_DAY

# Largest backward clock jump in the IANA database is 23 hours
# (Kwajalein, 1969-09-30), so a one-day window finds both solutions.
MAX_FOLD_SECONDS: int = SECONDS_PER_DAY


__all__ = [
    "US_PER_MILLISECOND",
    "US_PER_SECOND",
    "SECONDS_PER_MINUTE",
    "SECONDS_PER_HOUR",
    "SECONDS_PER_DAY",
    "MIN_YEAR",
    "MAX_YEAR",
    "MAX_ORDINAL",
    "MAX_DELTA_DAYS",
    "DAYS_IN_MONTH",
    "DAYS_BEFORE_MONTH",
    "DAYS_IN_400_YEARS",
    "DAYS_IN_100_YEARS",
    "DAYS_IN_4_YEARS",
    "EPOCH_ORDINAL",
    "EPOCH_SECONDS",
    "MAX_FOLD_SECONDS",
]
