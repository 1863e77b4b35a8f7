"""TimeUnit enumeration for difference and addition units.

This module provides the TimeUnit enum naming the eight units Eonix can
add and measure, declared in canonical descending-magnitude order.
"""

from __future__ import annotations

from enum import Enum

from eonix._internal.constants import (
    MILLIS_PER_DAY,
    MILLIS_PER_HOUR,
    MILLIS_PER_MINUTE,
    MILLIS_PER_SECOND,
    MILLIS_PER_WEEK,
)
from eonix.errors import InvalidArgumentError


class TimeUnit(Enum):
    """Units of calendar arithmetic, largest first.

    Iterating over TimeUnit yields the canonical decomposition order
    used by Diff.in_units(). The value of each member is the key it
    takes in difference results and addition amounts.

    Note:
        YEARS and MONTHS do not have fixed millisecond sizes because
        months and years vary in length. to_millis() returns None for
        these units.

    Examples:
        >>> TimeUnit.HOURS.to_millis()
        3600000

        >>> TimeUnit.MONTHS.to_millis() is None
        True

        >>> [unit.value for unit in TimeUnit][:3]
        ['years', 'months', 'weeks']
    """

    YEARS = "years"
    MONTHS = "months"
    WEEKS = "weeks"
    DAYS = "days"
    HOURS = "hours"
    MINUTES = "minutes"
    SECONDS = "seconds"
    MILLISECONDS = "milliseconds"

    def to_millis(self) -> int | None:
        """Return the length of one unit in milliseconds.

        Returns:
            The number of milliseconds in one unit, or None for the
            variable-length units (MONTHS and YEARS).
        """
        return _FIXED_MILLIS.get(self)

    @property
    def is_calendar(self) -> bool:
        """Return True for units whose length depends on the calendar."""
        return self.to_millis() is None

    @classmethod
    def parse(cls, value: TimeUnit | str) -> TimeUnit:
        """Coerce a unit name or TimeUnit to a TimeUnit.

        Singular names ("day") and any letter case are accepted.

        Raises:
            InvalidArgumentError: If the value does not name a unit.

        Examples:
            >>> TimeUnit.parse("days")
            <TimeUnit.DAYS: 'days'>
            >>> TimeUnit.parse("Hour")
            <TimeUnit.HOURS: 'hours'>
        """
        if isinstance(value, TimeUnit):
            return value
        if isinstance(value, str):
            name = value.strip().lower()
            if not name.endswith("s"):
                name += "s"
            try:
                return cls(name)
            except ValueError:
                pass
        raise InvalidArgumentError(
            f"unknown unit {value!r}; expected one of "
            f"{', '.join(unit.value for unit in cls)}"
        )


_FIXED_MILLIS: dict[TimeUnit, int] = {
    TimeUnit.WEEKS: MILLIS_PER_WEEK,
    TimeUnit.DAYS: MILLIS_PER_DAY,
    TimeUnit.HOURS: MILLIS_PER_HOUR,
    TimeUnit.MINUTES: MILLIS_PER_MINUTE,
    TimeUnit.SECONDS: MILLIS_PER_SECOND,
    TimeUnit.MILLISECONDS: 1,
}


__all__ = ["TimeUnit"]
