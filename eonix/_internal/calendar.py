"""Calendar utilities for Eonix.

This module provides internal functions for proleptic Gregorian calendar
calculations: leap years, ordinal conversions, epoch day arithmetic and
week numbering.

Epoch day 0 = 1970-01-01 (a Thursday).

This module is not part of the public API.
"""

from __future__ import annotations

from eonix._internal.constants import (
    DAYS_IN_MONTH,
    MILLIS_PER_DAY,
    MILLIS_PER_HOUR,
    MILLIS_PER_MINUTE,
    MILLIS_PER_SECOND,
    UNIX_EPOCH_ORDINAL,
)


def is_leap_year(year: int) -> bool:
    """Check if a year is a leap year in the proleptic Gregorian calendar.

    A year is a leap year if:
    - Divisible by 4, AND
    - NOT divisible by 100, unless also divisible by 400

    Args:
        year: The year to check (can be negative for BCE).

    Returns:
        True if the year is a leap year.

    Examples:
        >>> is_leap_year(2000)  # Divisible by 400
        True
        >>> is_leap_year(1900)  # Divisible by 100 but not 400
        False
        >>> is_leap_year(2024)  # Divisible by 4 but not 100
        True
        >>> is_leap_year(2023)  # Not divisible by 4
        False
    """
    return year % 4 == 0 and (year % 100 != 0 or year % 400 == 0)


def days_in_month(year: int, month: int) -> int:
    """Return the number of days in a given month.

    Args:
        year: The year (needed for February in leap years).
        month: The month (1-12).

    Returns:
        Number of days in the month.

    Raises:
        ValueError: If month is not in 1-12.
    """
    if month < 1 or month > 12:
        raise ValueError(f"month must be 1-12, got {month}")

    if month == 2 and is_leap_year(year):
        return 29
    return DAYS_IN_MONTH[month]


def days_in_year(year: int) -> int:
    """Return 366 for leap years, 365 otherwise."""
    return 366 if is_leap_year(year) else 365


# Days before each month (cumulative), for non-leap years
# Index 0 is unused, months are 1-indexed
_DAYS_BEFORE_MONTH = (0, 0, 31, 59, 90, 120, 151, 181, 212, 243, 273, 304, 334)


def days_before_month(year: int, month: int) -> int:
    """Return the number of days in the year before the first of the month."""
    result = _DAYS_BEFORE_MONTH[month]
    if month > 2 and is_leap_year(year):
        result += 1
    return result


def ymd_to_ordinal(year: int, month: int, day: int) -> int:
    """Convert year, month, day to ordinal (days since year 1).

    The ordinal for 0001-01-01 is 1. Years before 1 give ordinals <= 0;
    floor division keeps the formula valid for them.

    Args:
        year: The year (astronomical, can be 0 or negative).
        month: The month (1-12).
        day: The day (1-31).

    Returns:
        The ordinal day number.
    """
    y = year - 1
    days_before_year = y * 365 + y // 4 - y // 100 + y // 400
    return days_before_year + days_before_month(year, month) + day


def ordinal_to_ymd(ordinal: int) -> tuple[int, int, int]:
    """Convert ordinal (days since year 1) to year, month, day.

    Args:
        ordinal: The ordinal day number (ordinal 1 = 0001-01-01).

    Returns:
        Tuple of (year, month, day).
    """
    # n is 0-indexed (n=0 means ordinal=1); divmod floors, so the
    # 400-year cycle decomposition also holds for negative ordinals
    n = ordinal - 1

    # 400-year cycles: each has 146097 days
    n400, n = divmod(n, 146097)

    # 100-year cycles within the 400: each has 36524 days (except last which has 36525)
    n100, n = divmod(n, 36524)

    # 4-year cycles within the 100: each has 1461 days
    n4, n = divmod(n, 1461)

    # Years within the 4-year cycle: each has 365 days (except leap year)
    n1, n = divmod(n, 365)

    year = n400 * 400 + n100 * 100 + n4 * 4 + n1 + 1

    # Last day of a 4-year or 400-year cycle
    if n1 == 4 or n100 == 4:
        return (year - 1, 12, 31)

    doy = n + 1
    month, day = _doy_to_md(year, doy)
    return (year, month, day)


def _doy_to_md(year: int, doy: int) -> tuple[int, int]:
    for month in range(1, 13):
        dim = days_in_month(year, month)
        if doy <= dim:
            return (month, doy)
        doy -= dim

    raise ValueError(f"Invalid day of year: {doy} for year {year}")


def make_epoch_day(year: int, month_index: int, day: int) -> int:
    """Return the epoch day for possibly out-of-range calendar fields.

    ``month_index`` is zero-based and may be negative or above 11; it
    carries into the year. ``day`` may exceed the month length or be
    zero/negative; it carries into neighbouring months. This is the
    normalization classic date setters apply (Feb 30 -> Mar 1/2).

    Examples:
        >>> make_epoch_day(1970, 0, 1)
        0
        >>> make_epoch_day(2021, 1, 29) == make_epoch_day(2021, 2, 1)
        True
        >>> make_epoch_day(2023, 13, 1) == make_epoch_day(2024, 1, 1)
        True
    """
    year += month_index // 12
    month = month_index % 12 + 1
    return ymd_to_ordinal(year, month, 1) - UNIX_EPOCH_ORDINAL + day - 1


def epoch_day_to_ymd(epoch_day: int) -> tuple[int, int, int]:
    """Convert days since 1970-01-01 to (year, month, day)."""
    return ordinal_to_ymd(epoch_day + UNIX_EPOCH_ORDINAL)


def split_epoch_millis(millis: int) -> tuple[int, int, int, int, int, int, int]:
    """Split epoch milliseconds into UTC calendar fields.

    Returns:
        Tuple of (year, month, day, hour, minute, second, millisecond)
        with month 1-12.

    Examples:
        >>> split_epoch_millis(0)
        (1970, 1, 1, 0, 0, 0, 0)
        >>> split_epoch_millis(-1)
        (1969, 12, 31, 23, 59, 59, 999)
    """
    epoch_day, time_millis = divmod(millis, MILLIS_PER_DAY)
    year, month, day = epoch_day_to_ymd(epoch_day)
    hour, time_millis = divmod(time_millis, MILLIS_PER_HOUR)
    minute, time_millis = divmod(time_millis, MILLIS_PER_MINUTE)
    second, millisecond = divmod(time_millis, MILLIS_PER_SECOND)
    return (year, month, day, hour, minute, second, millisecond)


def compose_epoch_millis(
    year: int,
    month_index: int,
    day: int,
    hour: int = 0,
    minute: int = 0,
    second: int = 0,
    millisecond: int = 0,
) -> int:
    """Build epoch milliseconds from calendar fields, normalizing overflow.

    Every field may be out of its usual range; excess carries into the
    next larger field. ``month_index`` is zero-based.
    """
    time_millis = (
        hour * MILLIS_PER_HOUR
        + minute * MILLIS_PER_MINUTE
        + second * MILLIS_PER_SECOND
        + millisecond
    )
    return make_epoch_day(year, month_index, day) * MILLIS_PER_DAY + time_millis


def epoch_day_to_weekday(epoch_day: int) -> int:
    """Return the ISO weekday (Monday=1, Sunday=7) for an epoch day.

    Epoch day 0 (1970-01-01) was a Thursday.
    """
    return (epoch_day + 3) % 7 + 1


def day_of_year(year: int, month: int, day: int) -> int:
    """Return the 1-based ordinal day within the year."""
    return days_before_month(year, month) + day


def week_number(year: int, month: int, day: int) -> int:
    """Return the ISO style week number counted within ``year``.

    Week 1 starts on the Monday of the week containing January 4th.
    The count is not carried across years: days before that Monday give
    0 and trailing December days keep counting up to 53.

    Examples:
        >>> week_number(2025, 1, 1)
        1
        >>> week_number(2024, 12, 31)
        53
        >>> week_number(2021, 1, 1)
        0
    """
    jan4 = make_epoch_day(year, 0, 4)
    first_monday = jan4 - (epoch_day_to_weekday(jan4) - 1)
    target = make_epoch_day(year, month - 1, day)
    return (target - first_monday) // 7 + 1


__all__ = [
    "is_leap_year",
    "days_in_month",
    "days_in_year",
    "days_before_month",
    "ymd_to_ordinal",
    "ordinal_to_ymd",
    "make_epoch_day",
    "epoch_day_to_ymd",
    "split_epoch_millis",
    "compose_epoch_millis",
    "epoch_day_to_weekday",
    "day_of_year",
    "week_number",
]
