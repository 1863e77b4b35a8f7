"""Comparison operations for Moments.

This module provides explicit comparison and ordering functions. They
complement the rich comparison operators on Moment and accept any input
Moment() accepts (ISO strings, epoch milliseconds, datetimes).

Comparison Rules:
    - Moments compare by absolute instant only
    - The logical offset recorded by convert_to_time_zone() is ignored

Supported Operations:
    - compare: Return -1, 0, or 1
    - sort_ascending: Stable ascending sort of any number of dates
    - min_value, max_value: Find extremes
    - in_range: Test membership of a closed or half-open range
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Iterable

from eonix.errors import EmptyInputError

if TYPE_CHECKING:
    from eonix.core.moment import Moment


def _flatten(values: Iterable[Any]) -> list[Any]:
    flat: list[Any] = []
    for value in values:
        if isinstance(value, (list, tuple)):
            flat.extend(_flatten(value))
        else:
            flat.append(value)
    return flat


def compare(left: Any, right: Any) -> int:
    """Compare two date-like values by instant.

    Returns:
        -1 if left is earlier, 0 if equal, 1 if later.

    Raises:
        InvalidDateError: If either value cannot be turned into a Moment.

    Examples:
        >>> compare("2024-01-15", "2024-01-16")
        -1
        >>> compare("2024-01-15T00:00:00+00:00", "2024-01-15")
        0
    """
    from eonix.core.moment import Moment

    left_millis = Moment(left).epoch_millis
    right_millis = Moment(right).epoch_millis
    if left_millis < right_millis:
        return -1
    if left_millis > right_millis:
        return 1
    return 0


def sort_ascending(*values: Any) -> list[Moment]:
    """Return new Moments for ``values`` ordered by instant.

    Lists and tuples among the arguments are flattened. The sort is stable:
    equal instants keep their argument order. Every returned Moment is a
    fresh copy, so mutating it never touches a Moment that was passed in.

    Raises:
        EmptyInputError: If no dates are given.
        InvalidDateError: If any value cannot be turned into a Moment.

    Examples:
        >>> [str(m) for m in sort_ascending("2023-06-30", "2023-01-01")]
        ['2023-01-01T00:00:00.000Z', '2023-06-30T00:00:00.000Z']
    """
    from eonix.core.moment import Moment

    flat = _flatten(values)
    if not flat:
        raise EmptyInputError("Nothing to sort. Provide one or more date arguments.")

    return sorted((Moment(value) for value in flat), key=lambda m: m.epoch_millis)


def min_value(*values: Any) -> Moment:
    """Return the earliest of the given dates as a new Moment.

    Raises:
        EmptyInputError: If no dates are given.
    """
    return sort_ascending(*values)[0]


def max_value(*values: Any) -> Moment:
    """Return the latest of the given dates as a new Moment.

    When several dates share the latest instant, the last one given wins.

    Raises:
        EmptyInputError: If no dates are given.
    """
    return sort_ascending(*values)[-1]


def in_range(
    value: Any,
    start: Any,
    end: Any,
    *,
    include_start: bool = True,
    include_end: bool = True,
) -> bool:
    """Test whether ``value`` lies between ``start`` and ``end``.

    A range whose start is after its end contains nothing.

    Examples:
        >>> in_range("2023-06-15", "2023-06-01", "2023-06-30")
        True
        >>> in_range("2023-06-01", "2023-06-01", "2023-06-30", include_start=False)
        False
        >>> in_range("2023-06-15", "2023-06-30", "2023-06-01")
        False
    """
    from eonix.core.moment import Moment

    millis = Moment(value).epoch_millis
    start_millis = Moment(start).epoch_millis
    end_millis = Moment(end).epoch_millis

    if start_millis > end_millis:
        return False

    after_start = millis >= start_millis if include_start else millis > start_millis
    before_end = millis <= end_millis if include_end else millis < end_millis
    return after_start and before_end


__all__ = [
    "compare",
    "sort_ascending",
    "min_value",
    "max_value",
    "in_range",
]
