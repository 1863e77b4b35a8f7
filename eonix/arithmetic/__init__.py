"""Temporal arithmetic operations.

This module provides the function-based APIs behind Moment's methods:

Field Operations (from eonix.arithmetic.field_ops):
    - add_amount_to_millis: Apply years...milliseconds to an instant
    - check_epoch_range: Reject instants outside the supported range

Comparison Operations (from eonix.arithmetic.comparisons):
    - compare: Return -1, 0, or 1 for comparison
    - sort_ascending: Stable ascending sort
    - min_value, max_value: Find extremes
    - in_range: Range membership test
"""

from __future__ import annotations

from eonix.arithmetic.field_ops import (
    add_amount_to_millis,
    check_epoch_range,
)
from eonix.arithmetic.comparisons import (
    compare,
    sort_ascending,
    min_value,
    max_value,
    in_range,
)

__all__ = [
    # Field operations
    "add_amount_to_millis",
    "check_epoch_range",
    # Comparison operations
    "compare",
    "sort_ascending",
    "min_value",
    "max_value",
    "in_range",
]
