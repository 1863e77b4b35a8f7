"""Validation utilities for Eonix.

This module checks the shape of arguments passed to the public API
before any arithmetic runs, so that failures surface with a clear
message and no partial mutation.

This module is not part of the public API.
"""

from __future__ import annotations

import math
from collections.abc import Mapping
from numbers import Real
from typing import Any

from eonix._internal.constants import AMOUNT_FIELDS
from eonix.errors import InvalidArgumentError


def is_number(value: object) -> bool:
    """Return True for real numbers, excluding booleans.

    Examples:
        >>> is_number(3)
        True
        >>> is_number(1.5)
        True
        >>> is_number(True)
        False
        >>> is_number("3")
        False
    """
    return isinstance(value, Real) and not isinstance(value, bool)


def validate_amount(amount: Any) -> dict[str, int | float]:
    """Validate an addition amount and return it with defaults filled in.

    Args:
        amount: A mapping (or any object with a ``to_dict`` method such as
            Amount) whose keys are a subset of AMOUNT_FIELDS.

    Returns:
        A dict with every field of AMOUNT_FIELDS, missing ones set to 0.

    Raises:
        InvalidArgumentError: If amount is missing, not a mapping, empty,
            has unknown keys, or holds non-numeric or non-finite values.

    Examples:
        >>> validate_amount({"days": 2})["days"]
        2
        >>> validate_amount({})
        Traceback (most recent call last):
        ...
        eonix.errors.InvalidArgumentError: The argument must be a non-empty mapping
    """
    if amount is not None and hasattr(amount, "to_dict"):
        amount = amount.to_dict()

    if not isinstance(amount, Mapping) or len(amount) == 0:
        raise InvalidArgumentError("The argument must be a non-empty mapping")

    unknown = [key for key in amount if key not in AMOUNT_FIELDS]
    if unknown:
        raise InvalidArgumentError(
            f"unknown amount field(s): {', '.join(map(str, unknown))}; "
            f"expected any of {', '.join(AMOUNT_FIELDS)}"
        )

    result: dict[str, int | float] = {}
    for field in AMOUNT_FIELDS:
        value = amount.get(field, 0)
        if not is_number(value):
            raise InvalidArgumentError(
                f"All parameters must be numbers, got {field}={value!r}"
            )
        if not math.isfinite(value):
            raise InvalidArgumentError(f"{field} must be finite, got {value!r}")
        result[field] = value

    return result


def validate_offset(hours: Any) -> int | float:
    """Validate a UTC offset given in hours.

    Raises:
        InvalidArgumentError: If hours is not a finite real number.
    """
    if not is_number(hours) or not math.isfinite(hours):
        raise InvalidArgumentError(f"offset must be a finite number of hours, got {hours!r}")
    return hours


__all__ = [
    "is_number",
    "validate_amount",
    "validate_offset",
]
