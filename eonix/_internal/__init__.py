"""Internal utilities for Eonix.

This module contains private implementation details:
    - Calendar arithmetic
    - Constants and magic numbers
    - Argument validation

Note: This module is not part of the public API.
"""

from __future__ import annotations

from eonix._internal.validation import (
    is_number,
    validate_amount,
    validate_offset,
)

__all__: list[str] = [
    "is_number",
    "validate_amount",
    "validate_offset",
]
