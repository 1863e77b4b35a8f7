"""Eonix: calendar-aware date arithmetic and differences.

Eonix wraps a millisecond-precision instant in a Moment and measures the
span between two Moments in years, months, weeks, days and smaller units,
honoring leap years and month lengths.

Core Types:
    Moment: A point in time with field-wise addition and calendar queries
    Amount: Years/months/weeks/days/hours/minutes/seconds/milliseconds to add
    Diff: Calendar-aware difference between two points in time

Units:
    TimeUnit: The units Diff can measure (YEARS ... MILLISECONDS)

Functions:
    sort: Sort date-like values into ascending Moments
    diff: Build a Diff between two date-like values

Exceptions:
    EonixError: Base exception
    InvalidDateError: Input is not a valid instant
    EmptyInputError: No dates were given
    InvalidArgumentError: Malformed argument

Example:
    >>> import eonix
    >>> eonix.diff("2023-01-01", "2023-06-30").in_units(["months", "days"])
    {'months': 5, 'days': 29}
    >>> eonix.Moment("2024-01-31").add({"months": 1}).to_iso_format()
    '2024-03-02T00:00:00.000Z'
"""

from __future__ import annotations

import logging
from typing import Any

__version__ = "0.1.0"

# Core types
from eonix.core.amount import Amount
from eonix.core.diff import Diff
from eonix.core.moment import DateLike, Moment

# Units
from eonix.units.timeunit import TimeUnit

# Exceptions
from eonix.errors import (
    EmptyInputError,
    EonixError,
    InvalidArgumentError,
    InvalidDateError,
)

# Format functions
from eonix.format import format_iso8601, parse_iso8601

logging.getLogger(__name__).addHandler(logging.NullHandler())


def sort(*dates: Any) -> list[Moment]:
    """Return new Moments for ``dates`` in ascending order.

    Raises:
        EmptyInputError: If no dates are given.
        InvalidDateError: If any value cannot be turned into a Moment.
    """
    return Moment.sort(*dates)


def diff(start: DateLike, end: DateLike) -> Diff:
    """Return a Diff measuring from ``start`` to ``end``.

    Raises:
        InvalidDateError: If either value cannot be turned into a Moment.
    """
    return Diff(start, end)


__all__: list[str] = [
    "__version__",
    # Core types
    "Amount",
    "Diff",
    "Moment",
    "DateLike",
    # Units
    "TimeUnit",
    # Functions
    "sort",
    "diff",
    # Exceptions
    "EonixError",
    "InvalidDateError",
    "EmptyInputError",
    "InvalidArgumentError",
    # Format functions
    "parse_iso8601",
    "format_iso8601",
]
