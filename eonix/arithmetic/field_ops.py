"""Field-wise calendar addition on epoch milliseconds.

This module implements the arithmetic behind Moment.add(). An amount is
applied one calendar field at a time, largest first, and every step reads
the UTC fields produced by the previous one:

    1. years
    2. months
    3. weeks * 7 + days (as a single day adjustment)
    4. hours
    5. minutes
    6. seconds
    7. milliseconds

Overflow behavior:
    A step sets its field to ``trunc(field + delta)`` and lets any
    out-of-range value carry into the neighbouring fields, the way a
    classic date setter does. Day-of-month overflow is not clamped.

Examples:
    2020-02-29 + years=1            -> 2021-03-01
    2023-01-31 + months=1           -> 2023-03-03
    2023-01-31 + months=1, days=31  -> 2023-04-03
    2020-01-01 + days=1.5           -> 2020-01-02
"""

from __future__ import annotations

import math
from typing import Mapping

from eonix._internal.calendar import compose_epoch_millis, split_epoch_millis
from eonix._internal.constants import MAX_EPOCH_MILLIS, MIN_EPOCH_MILLIS
from eonix.errors import InvalidDateError


def check_epoch_range(millis: int) -> int:
    """Return ``millis`` unchanged if it is a representable instant.

    Raises:
        InvalidDateError: If millis lies outside MIN/MAX_EPOCH_MILLIS.
    """
    if millis < MIN_EPOCH_MILLIS or millis > MAX_EPOCH_MILLIS:
        raise InvalidDateError(
            f"instant {millis} ms is outside the supported range "
            f"[{MIN_EPOCH_MILLIS}, {MAX_EPOCH_MILLIS}]"
        )
    return millis


def _set_field(millis: int, index: int, delta: int | float) -> int:
    """Add ``delta`` to one calendar field and renormalize.

    ``index`` selects the field in split_epoch_millis() order
    (0=year, 1=month, 2=day, 3=hour, 4=minute, 5=second, 6=millisecond).
    """
    fields = list(split_epoch_millis(millis))
    fields[1] -= 1  # compose_epoch_millis takes a zero-based month
    fields[index] = math.trunc(fields[index] + delta)
    return check_epoch_range(compose_epoch_millis(*fields))


def add_amount_to_millis(millis: int, amount: Mapping[str, int | float]) -> int:
    """Apply a validated amount to epoch milliseconds.

    Args:
        millis: The starting instant.
        amount: A mapping holding every field of AMOUNT_FIELDS, as
            returned by validate_amount().

    Returns:
        The resulting instant in epoch milliseconds.

    Raises:
        InvalidDateError: If any intermediate result leaves the
            supported range.

    Examples:
        >>> from eonix.format import parse_iso8601, format_iso8601
        >>> start = parse_iso8601("2020-02-29")
        >>> format_iso8601(add_amount_to_millis(start, {
        ...     "years": 1, "months": 0, "weeks": 0, "days": 0,
        ...     "hours": 0, "minutes": 0, "seconds": 0, "milliseconds": 0,
        ... }))
        '2021-03-01T00:00:00.000Z'
    """
    steps = (
        (0, amount["years"]),
        (1, amount["months"]),
        (2, amount["weeks"] * 7 + amount["days"]),
        (3, amount["hours"]),
        (4, amount["minutes"]),
        (5, amount["seconds"]),
        (6, amount["milliseconds"]),
    )
    for index, delta in steps:
        if delta:
            millis = _set_field(millis, index, delta)
    return millis


__all__ = [
    "add_amount_to_millis",
    "check_epoch_range",
]
