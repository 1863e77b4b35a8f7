"""Core temporal types.

This module provides the fundamental types:
    - Moment: A point in time with calendar-aware arithmetic
    - Amount: Field-wise addition amount (years ... milliseconds)
    - Diff: Calendar-aware difference between two Moments
"""

from __future__ import annotations

from eonix.core.amount import Amount
from eonix.core.moment import Moment
from eonix.core.diff import Diff

__all__: list[str] = [
    "Amount",
    "Diff",
    "Moment",
]
