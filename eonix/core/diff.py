"""Diff class: calendar-aware difference between two Moments.

This module provides the Diff class. A Diff is built once from two
date-like values and can then report the span between them in any unit,
or decomposed over several units largest first:

    >>> Diff("2023-01-01", "2023-06-30").in_units()
    {'years': 0, 'months': 5, 'days': 29, 'hours': 0, 'minutes': 0, 'seconds': 0, 'milliseconds': 0}

Every count is a whole number of units. Calendar units (years, months)
honor leap years and month lengths; the others divide the millisecond gap
by a fixed unit size. Results are negative when the first argument is the
later one.
"""

from __future__ import annotations

import logging
from typing import Iterable, Union

from eonix._internal.calendar import split_epoch_millis
from eonix._internal.constants import DEFAULT_DIFF_UNITS
from eonix.arithmetic.comparisons import sort_ascending
from eonix.core.amount import Amount
from eonix.core.moment import DateLike, Moment
from eonix.errors import InvalidDateError
from eonix.units.timeunit import TimeUnit

logger = logging.getLogger(__name__)

UnitLike = Union[TimeUnit, str]


def _passes(start: Moment, end: Moment, **fields: int) -> bool:
    """Return True if ``start`` moved by ``fields`` lands after ``end``.

    A move that leaves the supported range lands after any valid ``end``.
    """
    try:
        return start.plus(**fields) > end
    except InvalidDateError:
        return True


def _whole_years(start: Moment, end: Moment) -> int:
    """Return the whole years from ``start`` to a later ``end``.

    The naive year difference is reduced by one when moving ``start``
    that many years (overflowing Feb 29th into March) passes ``end``.
    """
    years = end.year - start.year
    if years == 0:
        return 0

    if _passes(start, end, years=years):
        years -= 1
    return years


def _whole_months(start: Moment, end: Moment) -> int:
    """Return the whole months from ``start`` to a later ``end``.

    The count is twelve per year of difference plus the month-of-year
    delta, less one while the day of month (and time of day) of ``start``
    has not come round yet. A negative month-of-year delta borrows from
    the years, so 2022-11-15 to 2023-02-15 is 3 months, and a leap day
    measured to Feb 28th of a common year falls one short of a full
    year (11 months).

    Months overflow like additions do (Jan 31st + 1 month = early March).
    When ``start`` moved by the count overflows past ``end`` the count is
    lowered until it no longer does.
    """
    start_fields = split_epoch_millis(start.epoch_millis)
    end_fields = split_epoch_millis(end.epoch_millis)

    total = (end_fields[0] - start_fields[0]) * 12 + end_fields[1] - start_fields[1]
    if start_fields[2:] > end_fields[2:]:
        total -= 1

    months = total
    while months > 0 and _passes(start, end, months=months):
        months -= 1

    if months != total:
        logger.debug("month overflow from %s to %s: %d -> %d", start, end, total, months)
    return months


def _count_whole_units(unit: TimeUnit, start: Moment, end: Moment) -> int:
    """Return how many whole ``unit`` fit from ``start`` to a later ``end``."""
    if unit is TimeUnit.YEARS:
        return _whole_years(start, end)
    if unit is TimeUnit.MONTHS:
        return _whole_months(start, end)
    return (end.epoch_millis - start.epoch_millis) // unit.to_millis()


def _resolve_units(units: Iterable[UnitLike] | UnitLike | None) -> set[TimeUnit]:
    if units is None:
        return {TimeUnit(name) for name in DEFAULT_DIFF_UNITS}
    if isinstance(units, (str, TimeUnit)):
        units = [units]

    resolved = {TimeUnit.parse(unit) for unit in units}
    if not resolved:
        return {TimeUnit(name) for name in DEFAULT_DIFF_UNITS}
    return resolved


class Diff:
    """The calendar-aware difference between two points in time.

    Construction normalizes both inputs to Moments, records whether the
    first is later than the second (``is_inversed``) and keeps them in
    chronological order. All measurements run on the ordered pair and are
    negated afterwards when ``is_inversed`` is set.

    Attributes:
        start: The earlier of the two Moments.
        end: The later of the two Moments.
        is_inversed: True if the first argument was the later one.

    Examples:
        >>> Diff("2020-02-29", "2021-02-28").in_months()
        11
        >>> Diff("2025-01-01", "2023-01-01").in_years()
        -2
        >>> Diff("2025-01-01", "2023-01-01").in_years(absolute=True)
        2
    """

    __slots__ = ("_start", "_end", "_is_inversed")

    def __init__(self, start: DateLike, end: DateLike) -> None:
        """Create a Diff measuring from ``start`` to ``end``.

        Raises:
            InvalidDateError: If either value cannot be turned into a Moment.
        """
        first = Moment(start)
        second = Moment(end)

        self._is_inversed: bool = first > second
        self._start, self._end = sort_ascending(first, second)
        logger.debug(
            "diff from %s to %s (inversed=%s)", self._start, self._end, self._is_inversed
        )

    @property
    def start(self) -> Moment:
        """Return a copy of the earlier Moment."""
        return self._start.clone()

    @property
    def end(self) -> Moment:
        """Return a copy of the later Moment."""
        return self._end.clone()

    @property
    def is_inversed(self) -> bool:
        return self._is_inversed

    def _signed(self, value: int, absolute: bool) -> int:
        if absolute or not self._is_inversed:
            return value
        return -value

    def in_units(self, units: Iterable[UnitLike] | UnitLike | None = None) -> dict[str, int]:
        """Decompose the difference over ``units``, largest unit first.

        A cursor starts at the earlier Moment. For each requested unit, in
        the order years, months, weeks, days, hours, minutes, seconds,
        milliseconds, the cursor is moved forward by as many whole units as
        fit before the later Moment. Units that are not requested are left
        out of the result and do not move the cursor, so their share spills
        into the next smaller requested unit.

        Args:
            units: Unit names or TimeUnits. None or an empty sequence means
                years, months, days, hours, minutes, seconds, milliseconds
                (weeks are left out by default).

        Returns:
            A dict of unit name to count in canonical order. Counts are
            negative when the Diff is inversed.

        Raises:
            InvalidArgumentError: If a unit name is not recognised.

        Examples:
            >>> Diff("2023-06-01", "2023-08-15").in_units(["months", "weeks", "days"])
            {'months': 2, 'weeks': 2, 'days': 0}
            >>> Diff("2023-06-30", "2023-01-01").in_units(["months", "days"])
            {'months': -5, 'days': -29}
        """
        requested = _resolve_units(units)
        cursor = self._start.clone()
        result: dict[str, int] = {}

        for unit in TimeUnit:
            if unit not in requested:
                continue
            count = _count_whole_units(unit, cursor, self._end)
            result[unit.value] = count
            cursor.add({unit.value: count})

        if self._is_inversed:
            result = {name: -count for name, count in result.items()}

        logger.debug("decomposed %s -> %s as %s", self._start, self._end, result)
        return result

    def as_amount(self, units: Iterable[UnitLike] | UnitLike | None = None) -> Amount:
        """Return in_units() as an Amount.

        Adding the Amount to the earlier Moment (or its negation to the
        later one) reproduces the other Moment.

        Examples:
            >>> d = Diff("2020-02-29", "2021-02-28")
            >>> d.start.add(d.as_amount()) == d.end
            True
        """
        counts = self.in_units(units)
        if self._is_inversed:
            counts = {name: -count for name, count in counts.items()}
        return Amount(**counts)

    def in_unit(self, unit: UnitLike, *, absolute: bool = False) -> int:
        """Return the whole number of ``unit`` across the full span.

        Args:
            unit: A unit name or TimeUnit.
            absolute: If True, return the unsigned magnitude even when the
                Diff is inversed.

        Raises:
            InvalidArgumentError: If the unit name is not recognised.
        """
        count = _count_whole_units(TimeUnit.parse(unit), self._start, self._end)
        return self._signed(count, absolute)

    def in_years(self, *, absolute: bool = False) -> int:
        """Return the number of full years between the two dates.

        Examples:
            >>> Diff("2020-02-29", "2021-03-01").in_years()
            1
        """
        return self.in_unit(TimeUnit.YEARS, absolute=absolute)

    def in_months(self, *, absolute: bool = False) -> int:
        """Return the number of full months between the two dates.

        Examples:
            >>> Diff("2022-11-15", "2023-02-15").in_months()
            3
        """
        return self.in_unit(TimeUnit.MONTHS, absolute=absolute)

    def in_weeks(self, *, absolute: bool = False) -> int:
        """Return the number of full weeks between the two dates."""
        return self.in_unit(TimeUnit.WEEKS, absolute=absolute)

    def in_days(self, *, absolute: bool = False) -> int:
        """Return the number of full days between the two dates."""
        return self.in_unit(TimeUnit.DAYS, absolute=absolute)

    def in_hours(self, *, absolute: bool = False) -> int:
        """Return the number of full hours between the two dates."""
        return self.in_unit(TimeUnit.HOURS, absolute=absolute)

    def in_minutes(self, *, absolute: bool = False) -> int:
        """Return the number of full minutes between the two dates."""
        return self.in_unit(TimeUnit.MINUTES, absolute=absolute)

    def in_seconds(self, *, absolute: bool = False) -> int:
        """Return the number of full seconds between the two dates."""
        return self.in_unit(TimeUnit.SECONDS, absolute=absolute)

    def in_milliseconds(self, *, absolute: bool = False) -> int:
        """Return the number of milliseconds between the two dates."""
        return self.in_unit(TimeUnit.MILLISECONDS, absolute=absolute)

    def __repr__(self) -> str:
        return (
            f"Diff(start={self._start.to_iso_format()!r}, "
            f"end={self._end.to_iso_format()!r}, is_inversed={self._is_inversed})"
        )


__all__ = ["Diff"]
