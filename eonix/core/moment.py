"""Moment class: a point in time with calendar-aware helpers.

This module provides the Moment class, the value type every other part of
Eonix works with. A Moment owns an integer count of milliseconds since
1970-01-01T00:00:00Z and reads its calendar fields in UTC.
"""

from __future__ import annotations

import datetime as _datetime
import logging
import math
from typing import TYPE_CHECKING, Any, Mapping, Union

from eonix._internal.calendar import (
    day_of_year,
    epoch_day_to_weekday,
    is_leap_year,
    split_epoch_millis,
    week_number,
)
from eonix._internal.constants import MILLIS_PER_DAY, MILLIS_PER_HOUR
from eonix._internal.validation import validate_amount, validate_offset
from eonix.arithmetic.comparisons import in_range as _in_range
from eonix.arithmetic.comparisons import sort_ascending
from eonix.arithmetic.field_ops import add_amount_to_millis, check_epoch_range
from eonix.convert.native import datetime_to_millis, to_datetime
from eonix.errors import InvalidArgumentError, InvalidDateError
from eonix.format.iso8601 import format_iso8601, parse_iso8601

if TYPE_CHECKING:
    from eonix.core.amount import Amount
    from eonix.core.diff import Diff

logger = logging.getLogger(__name__)

DateLike = Union["Moment", str, int, float, _datetime.date]


def _to_epoch_millis(value: Any) -> int:
    """Turn any supported date-like input into epoch milliseconds."""
    if isinstance(value, Moment):
        return value._millis
    if isinstance(value, bool) or value is None:
        raise InvalidDateError(f"cannot create a Moment from {value!r}")
    if isinstance(value, int):
        return check_epoch_range(value)
    if isinstance(value, float):
        if not math.isfinite(value):
            raise InvalidDateError(f"timestamp must be finite, got {value!r}")
        return check_epoch_range(math.trunc(value))
    if isinstance(value, str):
        return check_epoch_range(parse_iso8601(value))
    if isinstance(value, _datetime.date):
        return check_epoch_range(datetime_to_millis(value))
    raise InvalidDateError(
        f"cannot create a Moment from {type(value).__name__}; "
        "expected ISO 8601 str, epoch milliseconds, datetime or Moment"
    )


class Moment:
    """A mutable point in time with calendar-aware arithmetic.

    Moment wraps an absolute instant (milliseconds since the Unix epoch)
    and exposes its UTC calendar fields. Two Moments are equal when they
    hold the same instant, whatever they were built from.

    The add() family mutates the receiver and returns it so calls can be
    chained; plus() and clone() leave the receiver untouched.

    A Moment may also carry a logical UTC offset in hours, recorded by
    convert_to_time_zone() and undone by convert_to_utc(). The offset
    never takes part in comparisons.

    Attributes:
        epoch_millis: Milliseconds since 1970-01-01T00:00:00Z.
        offset: Logical offset in hours, or None.
        year: The UTC year.
        month: The UTC month (1-12).
        day: The UTC day of month.
        hour: The UTC hour (0-23).
        minute: The UTC minute (0-59).
        second: The UTC second (0-59).
        millisecond: The millisecond within the second (0-999).

    Examples:
        >>> m = Moment("2020-01-01T00:00:00Z")
        >>> m.add({"years": 1}).to_iso_format()
        '2021-01-01T00:00:00.000Z'

        >>> Moment("2023-01-01") == Moment(1672531200000)
        True

        >>> Moment("2025-03-24").weekday()
        1
    """

    __slots__ = ("_millis", "_offset")

    def __init__(self, value: DateLike) -> None:
        """Create a Moment from a date-like value.

        Args:
            value: An ISO 8601 string, epoch milliseconds (int or float,
                floats are truncated), a datetime.datetime or
                datetime.date (naive values are read as UTC), or another
                Moment (copied, including its logical offset).

        Raises:
            InvalidDateError: If the value does not describe a finite
                instant within the supported range.
        """
        self._millis: int = _to_epoch_millis(value)
        self._offset: int | float | None = value._offset if isinstance(value, Moment) else None

    @classmethod
    def now(cls) -> Moment:
        """Return a Moment for the current instant."""
        return cls(_datetime.datetime.now(_datetime.timezone.utc))

    @classmethod
    def from_datetime(cls, value: _datetime.date) -> Moment:
        """Create a Moment from a datetime or date (naive values are UTC)."""
        return cls(value)

    @staticmethod
    def sort(*values: Any) -> list[Moment]:
        """Return new Moments for ``values`` in ascending order.

        Raises:
            EmptyInputError: If no dates are given.

        Examples:
            >>> [m.day for m in Moment.sort("2023-06-30", "2023-06-01")]
            [1, 30]
        """
        return sort_ascending(*values)

    @staticmethod
    def diff(start: DateLike, end: DateLike) -> Diff:
        """Return a Diff measuring from ``start`` to ``end``."""
        from eonix.core.diff import Diff

        return Diff(start, end)

    # Properties

    @property
    def epoch_millis(self) -> int:
        """Return milliseconds since 1970-01-01T00:00:00Z."""
        return self._millis

    @property
    def offset(self) -> int | float | None:
        """Return the logical UTC offset in hours, or None."""
        return self._offset

    @property
    def year(self) -> int:
        return split_epoch_millis(self._millis)[0]

    @property
    def month(self) -> int:
        return split_epoch_millis(self._millis)[1]

    @property
    def day(self) -> int:
        return split_epoch_millis(self._millis)[2]

    @property
    def hour(self) -> int:
        return split_epoch_millis(self._millis)[3]

    @property
    def minute(self) -> int:
        return split_epoch_millis(self._millis)[4]

    @property
    def second(self) -> int:
        return split_epoch_millis(self._millis)[5]

    @property
    def millisecond(self) -> int:
        return split_epoch_millis(self._millis)[6]

    # Copying and offsets

    def clone(self, *, offset: int | float | None = None) -> Moment:
        """Return an independent copy of this Moment.

        Args:
            offset: If given, the copy is additionally shifted with
                convert_to_time_zone(offset).

        Returns:
            A new Moment; this one is left unchanged.

        Examples:
            >>> m = Moment("2025-03-21T12:00:00Z")
            >>> m.clone(offset=4).hour
            8
            >>> m.hour
            12
        """
        cloned = Moment(self)
        if offset is not None:
            cloned.convert_to_time_zone(offset)
        return cloned

    def convert_to_time_zone(self, hours: int | float) -> Moment:
        """Shift this Moment so its UTC fields read as wall-clock in ``hours``.

        The instant moves by ``-hours`` hours and ``hours`` is added to the
        logical offset, so repeated shifts accumulate and convert_to_utc()
        undoes all of them. Mutates and returns self.

        Raises:
            InvalidArgumentError: If hours is not a finite number.

        Examples:
            >>> Moment("2025-03-21T12:00:00Z").convert_to_time_zone(6).hour
            6
            >>> Moment("2025-03-21T12:00:00Z").convert_to_time_zone(-3).hour
            15
            >>> Moment("2025-03-21T12:00:00Z").convert_to_time_zone(2).convert_to_time_zone(3).offset
            5
        """
        validate_offset(hours)
        offset = (self._offset or 0) + hours
        self._millis = check_epoch_range(self._millis - math.trunc(hours * MILLIS_PER_HOUR))
        self._offset = offset
        logger.debug("shifted moment by %s hours to offset %s: %s", hours, offset, self)
        return self

    def convert_to_utc(self) -> Moment:
        """Undo every shift recorded by convert_to_time_zone().

        Mutates and returns self; a Moment without an offset is unchanged.

        Examples:
            >>> m = Moment("2025-03-21T12:00:00Z").convert_to_time_zone(5)
            >>> m.convert_to_utc().hour, m.offset
            (12, None)
        """
        if self._offset:
            self._millis = check_epoch_range(
                self._millis + math.trunc(self._offset * MILLIS_PER_HOUR)
            )
            logger.debug("shifted moment back from offset %s: %s", self._offset, self)
        self._offset = None
        return self

    def is_utc(self) -> bool:
        """Return True unless a non-zero logical offset is recorded."""
        return not self._offset

    # Field-wise addition

    def add(self, amount: Amount | Mapping[str, int | float] | None = None) -> Moment:
        """Add calendar fields to this Moment in place.

        Fields are applied largest first: years, months, then weeks and
        days together, then hours, minutes, seconds and milliseconds.
        Each step works on the fields produced by the previous one and
        lets overflow carry, so adding one month to January 31st lands in
        early March, and adding one year to February 29th gives March 1st.

        Args:
            amount: An Amount or a mapping with any of the keys years,
                months, weeks, days, hours, minutes, seconds,
                milliseconds. Fractional values are truncated per field.

        Returns:
            self, to allow chaining.

        Raises:
            InvalidArgumentError: If amount is missing, not a mapping,
                empty, or holds unknown keys or non-numeric values.
            InvalidDateError: If the result leaves the supported range.

        Examples:
            >>> Moment("2020-02-29").add({"years": 1}).to_iso_format()
            '2021-03-01T00:00:00.000Z'
            >>> Moment("2020-01-01").add({"years": -1, "months": -1, "days": -10}).to_iso_format()
            '2018-11-21T00:00:00.000Z'
        """
        values = validate_amount(amount)
        self._millis = add_amount_to_millis(self._millis, values)
        return self

    def plus(self, amount: Amount | Mapping[str, int | float] | None = None, **fields: int | float) -> Moment:
        """Return a new Moment with ``amount`` added, leaving self unchanged.

        The amount may be given as a mapping/Amount or as keyword fields,
        but not both.

        Raises:
            InvalidArgumentError: If both an amount and keyword fields are
                given, or the amount is invalid as for add().

        Examples:
            >>> m = Moment("2024-01-31")
            >>> m.plus(days=1).day, m.day
            (1, 31)
        """
        if amount is not None and fields:
            raise InvalidArgumentError(
                "pass the amount either as a mapping or as keyword fields, not both"
            )
        return self.clone().add(amount if amount is not None else fields)

    def add_date(
        self,
        years: int | float = 0,
        months: int | float = 0,
        weeks: int | float = 0,
        days: int | float = 0,
    ) -> Moment:
        """Add date fields in place; see add()."""
        return self.add({"years": years, "months": months, "weeks": weeks, "days": days})

    def add_time(
        self,
        hours: int | float = 0,
        minutes: int | float = 0,
        seconds: int | float = 0,
        milliseconds: int | float = 0,
    ) -> Moment:
        """Add time fields in place; see add()."""
        return self.add(
            {"hours": hours, "minutes": minutes, "seconds": seconds, "milliseconds": milliseconds}
        )

    def add_years(self, years: int | float) -> Moment:
        return self.add({"years": years})

    def add_months(self, months: int | float) -> Moment:
        return self.add({"months": months})

    def add_weeks(self, weeks: int | float) -> Moment:
        return self.add({"weeks": weeks})

    def add_days(self, days: int | float) -> Moment:
        return self.add({"days": days})

    def add_hours(self, hours: int | float) -> Moment:
        return self.add({"hours": hours})

    def add_minutes(self, minutes: int | float) -> Moment:
        return self.add({"minutes": minutes})

    def add_seconds(self, seconds: int | float) -> Moment:
        return self.add({"seconds": seconds})

    def add_milliseconds(self, milliseconds: int | float) -> Moment:
        return self.add({"milliseconds": milliseconds})

    # Calendar queries

    def weekday(self) -> int:
        """Return the ISO weekday, Monday=1 through Sunday=7.

        Examples:
            >>> Moment("2024-02-29").weekday()
            4
        """
        return epoch_day_to_weekday(self._millis // MILLIS_PER_DAY)

    def day_of_year(self) -> int:
        """Return the 1-based day within the year.

        Examples:
            >>> Moment("2024-12-31").day_of_year()
            366
        """
        year, month, day = split_epoch_millis(self._millis)[:3]
        return day_of_year(year, month, day)

    def week_number(self) -> int:
        """Return the ISO style week number within this Moment's year.

        Week 1 starts on the Monday of the week holding January 4th. The
        count stays within the year, so late December can be week 53 and
        early January days before the first week give 0.

        Examples:
            >>> Moment("2025-01-08").week_number()
            2
            >>> Moment("2024-12-31").week_number()
            53
        """
        year, month, day = split_epoch_millis(self._millis)[:3]
        return week_number(year, month, day)

    def is_leap_year(self) -> bool:
        """Return True if this Moment's UTC year is a Gregorian leap year."""
        return is_leap_year(self.year)

    def in_range(
        self,
        start: DateLike,
        end: DateLike,
        *,
        include_start: bool = True,
        include_end: bool = True,
    ) -> bool:
        """Return True if this Moment lies between ``start`` and ``end``.

        Examples:
            >>> Moment("2023-06-30").in_range("2023-06-01", "2023-06-30")
            True
            >>> Moment("2023-06-30").in_range("2023-06-01", "2023-06-30", include_end=False)
            False
        """
        return _in_range(
            self, start, end, include_start=include_start, include_end=include_end
        )

    # Conversions

    def to_iso_format(self) -> str:
        """Return the instant as ``YYYY-MM-DDTHH:MM:SS.mmmZ``."""
        return format_iso8601(self._millis)

    def to_datetime(self) -> _datetime.datetime:
        """Return the instant as an aware UTC datetime."""
        return to_datetime(self)

    # Comparison operators

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Moment):
            return NotImplemented
        return self._millis == other._millis

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, Moment):
            return NotImplemented
        return self._millis < other._millis

    def __le__(self, other: object) -> bool:
        if not isinstance(other, Moment):
            return NotImplemented
        return self._millis <= other._millis

    def __gt__(self, other: object) -> bool:
        if not isinstance(other, Moment):
            return NotImplemented
        return self._millis > other._millis

    def __ge__(self, other: object) -> bool:
        if not isinstance(other, Moment):
            return NotImplemented
        return self._millis >= other._millis

    # Moments are mutable, so they are not hashable
    __hash__ = None  # type: ignore[assignment]

    def __copy__(self) -> Moment:
        return self.clone()

    def __deepcopy__(self, memo: dict) -> Moment:
        return self.clone()

    def __repr__(self) -> str:
        """Return a detailed string representation."""
        if self._offset is not None:
            return f"Moment({self.to_iso_format()!r}, offset={self._offset})"
        return f"Moment({self.to_iso_format()!r})"

    def __str__(self) -> str:
        """Return the ISO 8601 representation."""
        return self.to_iso_format()


__all__ = ["Moment", "DateLike"]
