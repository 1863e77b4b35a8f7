"""Temporal units.

This module provides:
    - TimeUnit: The units Eonix adds and measures (YEARS ... MILLISECONDS)
"""

from __future__ import annotations

from eonix.units.timeunit import TimeUnit

__all__: list[str] = [
    "TimeUnit",
]
