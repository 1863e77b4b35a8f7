"""Conversions between Moments and the standard library's datetime types.

Moment stores an integer instant rather than subclassing datetime; these
functions are the explicit bridge between the two.

Functions:
    datetime_to_millis: Epoch milliseconds for a datetime or date.
    to_datetime: Convert a Moment to an aware UTC datetime.
    from_datetime: Create a Moment from a datetime or date.

Naive datetimes and plain dates are read as UTC.
"""

from __future__ import annotations

import datetime as _datetime
from typing import TYPE_CHECKING

from eonix.errors import InvalidDateError

if TYPE_CHECKING:
    from eonix.core.moment import Moment

_UTC_EPOCH = _datetime.datetime(1970, 1, 1, tzinfo=_datetime.timezone.utc)
_ONE_MILLISECOND = _datetime.timedelta(milliseconds=1)


def datetime_to_millis(value: _datetime.date) -> int:
    """Return epoch milliseconds for a datetime or date.

    Sub-millisecond precision is floored away.

    Examples:
        >>> datetime_to_millis(_datetime.date(1970, 1, 2))
        86400000
        >>> datetime_to_millis(_datetime.datetime(1970, 1, 1, 0, 0, 1))
        1000
    """
    if isinstance(value, _datetime.datetime):
        if value.tzinfo is None or value.utcoffset() is None:
            value = value.replace(tzinfo=_datetime.timezone.utc)
    elif isinstance(value, _datetime.date):
        value = _datetime.datetime(
            value.year, value.month, value.day, tzinfo=_datetime.timezone.utc
        )
    else:
        raise TypeError(f"expected date or datetime, got {type(value).__name__}")

    return (value - _UTC_EPOCH) // _ONE_MILLISECOND


def to_datetime(moment: "Moment") -> _datetime.datetime:
    """Convert a Moment to an aware datetime in UTC.

    Raises:
        InvalidDateError: If the instant falls outside datetime's year range.

    Examples:
        >>> from eonix import Moment
        >>> to_datetime(Moment("2024-01-15T14:30:45.123Z"))
        datetime.datetime(2024, 1, 15, 14, 30, 45, 123000, tzinfo=datetime.timezone.utc)
    """
    try:
        return _UTC_EPOCH + moment.epoch_millis * _ONE_MILLISECOND
    except OverflowError as exc:
        raise InvalidDateError(
            f"{moment} cannot be represented as a datetime.datetime"
        ) from exc


def from_datetime(value: _datetime.date) -> "Moment":
    """Create a Moment from a datetime or date.

    Examples:
        >>> import datetime
        >>> str(from_datetime(datetime.date(2024, 1, 15)))
        '2024-01-15T00:00:00.000Z'
    """
    from eonix.core.moment import Moment

    return Moment(value)


__all__ = [
    "datetime_to_millis",
    "to_datetime",
    "from_datetime",
]
