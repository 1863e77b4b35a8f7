"""Epoch conversion utilities for Moments.

This module provides functions for converting between Moments and Unix
timestamps in seconds or milliseconds.

The Unix epoch is 1970-01-01 00:00:00 UTC.

Examples:
    >>> from eonix.convert import to_unix_seconds, from_unix_seconds
    >>> to_unix_seconds(from_unix_seconds(86400))
    86400
"""

from __future__ import annotations

import math
from typing import TYPE_CHECKING

from eonix._internal.constants import MILLIS_PER_SECOND
from eonix.errors import InvalidDateError

if TYPE_CHECKING:
    from eonix.core.moment import Moment


def to_unix_seconds(moment: "Moment") -> int:
    """Return whole Unix seconds for a Moment, flooring any milliseconds.

    Examples:
        >>> from eonix import Moment
        >>> to_unix_seconds(Moment(1500))
        1
        >>> to_unix_seconds(Moment(-1500))
        -2
    """
    return moment.epoch_millis // MILLIS_PER_SECOND


def from_unix_seconds(seconds: int | float) -> "Moment":
    """Create a Moment from Unix seconds.

    Fractional seconds are kept to millisecond precision.

    Raises:
        InvalidDateError: If seconds is not finite or out of range.
    """
    from eonix.core.moment import Moment

    if isinstance(seconds, float) and not math.isfinite(seconds):
        raise InvalidDateError(f"timestamp must be finite, got {seconds!r}")
    return Moment(seconds * MILLIS_PER_SECOND)


def to_unix_millis(moment: "Moment") -> int:
    """Return the Unix timestamp in milliseconds."""
    return moment.epoch_millis


def from_unix_millis(millis: int | float) -> "Moment":
    """Create a Moment from Unix milliseconds.

    Raises:
        InvalidDateError: If millis is not finite or out of range.
    """
    from eonix.core.moment import Moment

    return Moment(millis)


__all__ = [
    "to_unix_seconds",
    "from_unix_seconds",
    "to_unix_millis",
    "from_unix_millis",
]
