"""Eonix exception hierarchy.

All Eonix-specific exceptions inherit from EonixError.
"""

from __future__ import annotations


class EonixError(Exception):
    """Base exception for all Eonix errors."""

    pass


class InvalidDateError(EonixError):
    """Input could not be turned into a valid instant.

    Raised when constructing a Moment from a value that does not
    describe a finite point in time.

    Examples:
        - Malformed ISO 8601 string
        - NaN or infinite timestamp
        - Instant outside the supported range
    """

    pass


class EmptyInputError(EonixError):
    """An operation that needs dates was given none.

    Examples:
        - sort() called without arguments
    """

    pass


class InvalidArgumentError(EonixError):
    """An argument has the wrong shape or type.

    Examples:
        - add() called without an amount
        - add() called with an empty mapping
        - add() called with a non-numeric field value
        - in_units() called with an unknown unit name
    """

    pass


__all__ = [
    "EonixError",
    "InvalidDateError",
    "EmptyInputError",
    "InvalidArgumentError",
]
