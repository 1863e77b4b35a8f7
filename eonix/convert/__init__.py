"""Temporal conversion utilities.

This module provides functions for converting Moments to and from
other representations:
    - datetime.datetime / datetime.date
    - Unix epoch timestamps (seconds, milliseconds)

Examples:
    >>> from eonix import Moment
    >>> from eonix.convert import to_datetime, from_datetime

    >>> m = Moment("2024-01-15T14:30:45Z")
    >>> from_datetime(to_datetime(m)) == m
    True
"""

from __future__ import annotations

from eonix.convert.native import datetime_to_millis, from_datetime, to_datetime
from eonix.convert.epoch import (
    from_unix_millis,
    from_unix_seconds,
    to_unix_millis,
    to_unix_seconds,
)

__all__ = [
    # datetime
    "datetime_to_millis",
    "to_datetime",
    "from_datetime",
    # Epoch
    "to_unix_seconds",
    "from_unix_seconds",
    "to_unix_millis",
    "from_unix_millis",
]
