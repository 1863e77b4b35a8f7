"""Internal constants for Eonix.

These constants define the limits and magic numbers used throughout
the library. This module is not part of the public API.
"""

from __future__ import annotations

# Time unit conversions
MILLIS_PER_SECOND: int = 1_000
MILLIS_PER_MINUTE: int = 60 * MILLIS_PER_SECOND
MILLIS_PER_HOUR: int = 60 * MILLIS_PER_MINUTE
MILLIS_PER_DAY: int = 24 * MILLIS_PER_HOUR  # 86_400_000
MILLIS_PER_WEEK: int = 7 * MILLIS_PER_DAY  # 604_800_000

# Instants are limited to 100,000,000 days either side of the epoch
MAX_EPOCH_MILLIS: int = 8_640_000_000_000_000
MIN_EPOCH_MILLIS: int = -MAX_EPOCH_MILLIS

# Ordinal of 1970-01-01 (ordinal 1 = 0001-01-01)
UNIX_EPOCH_ORDINAL: int = 719_163

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

# Units reported by Diff.in_units() when none are requested
DEFAULT_DIFF_UNITS: tuple[str, ...] = (
    "years",
    "months",
    "days",
    "hours",
    "minutes",
    "seconds",
    "milliseconds",
)

# Fields accepted by Moment.add(), in application order
AMOUNT_FIELDS: tuple[str, ...] = (
    "years",
    "months",
    "weeks",
    "days",
    "hours",
    "minutes",
    "seconds",
    "milliseconds",
)


__all__ = [
    "MILLIS_PER_SECOND",
    "MILLIS_PER_MINUTE",
    "MILLIS_PER_HOUR",
    "MILLIS_PER_DAY",
    "MILLIS_PER_WEEK",
    "MAX_EPOCH_MILLIS",
    "MIN_EPOCH_MILLIS",
    "UNIX_EPOCH_ORDINAL",
    "DAYS_IN_MONTH",
    "DEFAULT_DIFF_UNITS",
    "AMOUNT_FIELDS",
]
