"""ISO 8601 formatting and parsing.

This module converts between ISO 8601 strings and epoch milliseconds,
the internal representation of a Moment.

Functions:
    parse_iso8601: Parse an ISO 8601 string into epoch milliseconds.
    format_iso8601: Format a Moment or epoch milliseconds as ISO 8601.

Supported input formats:

Dates:
    - YYYY
    - YYYY-MM
    - YYYY-MM-DD
    - +YYYYYY-MM-DD / -YYYYYY-MM-DD (extended years)

DateTimes (``T`` or a space between date and time):
    - YYYY-MM-DDTHH:MM
    - YYYY-MM-DDTHH:MM:SS
    - YYYY-MM-DDTHH:MM:SS.f (any number of digits, truncated to millis)
    - any of the above followed by Z, +HH:MM, -HH:MM, +HHMM or +HH

Strings without an offset are read as UTC.

Examples:
    >>> parse_iso8601("1970-01-01T00:00:01Z")
    1000

    >>> parse_iso8601("1970-01-01T02:00:00+02:00")
    0

    >>> format_iso8601(0)
    '1970-01-01T00:00:00.000Z'
"""

from __future__ import annotations

import re
from typing import TYPE_CHECKING, Union

from eonix._internal.calendar import (
    compose_epoch_millis,
    days_in_month,
    split_epoch_millis,
)
from eonix._internal.constants import MILLIS_PER_MINUTE
from eonix.errors import InvalidDateError

if TYPE_CHECKING:
    from eonix.core.moment import Moment

_ISO_PATTERN = re.compile(
    r"""
    ^(?P<year>[+-]\d{6}|\d{4})
    (?:-(?P<month>\d{2})
        (?:-(?P<day>\d{2})
            (?:[T\s]
                (?P<hour>\d{2}):(?P<minute>\d{2})
                (?::(?P<second>\d{2})(?:[.,](?P<fraction>\d+))?)?
                (?P<offset>Z|[+-]\d{2}(?::?\d{2})?)?
            )?
        )?
    )?$
    """,
    re.VERBOSE | re.IGNORECASE,
)


def _parse_offset_minutes(text: str) -> int:
    """Return the UTC offset designated by ``text`` in minutes."""
    if text.upper() == "Z":
        return 0

    sign = -1 if text[0] == "-" else 1
    digits = text[1:].replace(":", "")
    hours = int(digits[:2])
    minutes = int(digits[2:4]) if len(digits) > 2 else 0
    if hours > 23 or minutes > 59:
        raise InvalidDateError(f"invalid UTC offset: {text!r}")
    return sign * (hours * 60 + minutes)


def parse_iso8601(s: str) -> int:
    """Parse an ISO 8601 string into epoch milliseconds.

    Args:
        s: The ISO 8601 string to parse.

    Returns:
        Milliseconds since 1970-01-01T00:00:00Z.

    Raises:
        InvalidDateError: If the string is not valid ISO 8601 or names an
            impossible date or time (e.g. February 30th, hour 25).

    Examples:
        >>> parse_iso8601("2024-01-15")
        1705276800000

        >>> parse_iso8601("2024-02-30")
        Traceback (most recent call last):
        ...
        eonix.errors.InvalidDateError: day must be 1-29 for 2024-02, got 30
    """
    if not isinstance(s, str):
        raise InvalidDateError(f"expected str, got {type(s).__name__}")

    match = _ISO_PATTERN.match(s.strip())
    if not match:
        raise InvalidDateError(
            f"Invalid ISO 8601 date: {s!r}. "
            "Expected YYYY-MM-DD or YYYY-MM-DDTHH:MM:SS[.fff][Z|+HH:MM]"
        )

    fields = match.groupdict()
    year = int(fields["year"])
    month = int(fields["month"] or 1)
    day = int(fields["day"] or 1)
    hour = int(fields["hour"] or 0)
    minute = int(fields["minute"] or 0)
    second = int(fields["second"] or 0)
    fraction = fields["fraction"] or ""
    millisecond = int(fraction[:3].ljust(3, "0")) if fraction else 0

    if fields["year"] == "-000000":
        raise InvalidDateError("year -000000 is not a valid extended year")
    if month < 1 or month > 12:
        raise InvalidDateError(f"month must be 1-12, got {month}")
    max_day = days_in_month(year, month)
    if day < 1 or day > max_day:
        raise InvalidDateError(f"day must be 1-{max_day} for {year}-{month:02d}, got {day}")
    if hour > 23 or minute > 59 or second > 59:
        raise InvalidDateError(f"invalid time of day in {s!r}")

    millis = compose_epoch_millis(year, month - 1, day, hour, minute, second, millisecond)

    if fields["offset"]:
        millis -= _parse_offset_minutes(fields["offset"]) * MILLIS_PER_MINUTE

    return millis


def format_iso8601(value: Union["Moment", int]) -> str:
    """Format a Moment or epoch milliseconds as an ISO 8601 UTC string.

    Years outside 0000-9999 use the six-digit signed extended form.

    Args:
        value: A Moment or an integer count of epoch milliseconds.

    Returns:
        A string such as ``2024-01-15T14:30:45.000Z``.

    Examples:
        >>> format_iso8601(1705329045123)
        '2024-01-15T14:30:45.123Z'
    """
    from eonix.core.moment import Moment

    if isinstance(value, Moment):
        millis = value.epoch_millis
    elif isinstance(value, int) and not isinstance(value, bool):
        millis = value
    else:
        raise TypeError(f"expected Moment or int, got {type(value).__name__}")

    year, month, day, hour, minute, second, millisecond = split_epoch_millis(millis)
    if 0 <= year <= 9999:
        year_str = f"{year:04d}"
    else:
        year_str = f"{'-' if year < 0 else '+'}{abs(year):06d}"

    return (
        f"{year_str}-{month:02d}-{day:02d}"
        f"T{hour:02d}:{minute:02d}:{second:02d}.{millisecond:03d}Z"
    )


__all__ = ["parse_iso8601", "format_iso8601"]
