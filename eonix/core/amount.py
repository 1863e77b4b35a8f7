"""Amount class describing a field-wise addition.

An Amount names how many of each calendar unit to add to a Moment. It is
a typed alternative to the plain mapping accepted by Moment.add().
"""

from __future__ import annotations

from typing import Any, Mapping

from eonix._internal.constants import AMOUNT_FIELDS
from eonix._internal.validation import validate_amount


class Amount:
    """Years, months, weeks, days, hours, minutes, seconds and milliseconds.

    Components are stored as given, without normalization: Amount(months=14)
    stays 14 months. Values may be negative or fractional; fractional values
    are truncated field by field when the amount is applied.

    Attributes:
        years: Number of years.
        months: Number of months.
        weeks: Number of weeks.
        days: Number of days.
        hours: Number of hours.
        minutes: Number of minutes.
        seconds: Number of seconds.
        milliseconds: Number of milliseconds.

    Examples:
        >>> a = Amount(months=1, days=31)
        >>> a.months, a.days
        (1, 31)

        >>> from eonix import Moment
        >>> str(Moment("2023-01-31").add(a))
        '2023-04-03T00:00:00.000Z'
    """

    __slots__ = tuple(f"_{name}" for name in AMOUNT_FIELDS)

    def __init__(
        self,
        years: int | float = 0,
        months: int | float = 0,
        weeks: int | float = 0,
        days: int | float = 0,
        hours: int | float = 0,
        minutes: int | float = 0,
        seconds: int | float = 0,
        milliseconds: int | float = 0,
    ) -> None:
        """Create an Amount from component parts.

        Raises:
            InvalidArgumentError: If any component is not a finite number.
        """
        values = validate_amount(
            {
                "years": years,
                "months": months,
                "weeks": weeks,
                "days": days,
                "hours": hours,
                "minutes": minutes,
                "seconds": seconds,
                "milliseconds": milliseconds,
            }
        )
        for name, value in values.items():
            setattr(self, f"_{name}", value)

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any]) -> Amount:
        """Create an Amount from a mapping of field names to values.

        Raises:
            InvalidArgumentError: If the mapping is empty or malformed.

        Examples:
            >>> Amount.from_mapping({"years": 1, "days": 2})
            Amount(years=1, days=2)
        """
        return cls(**validate_amount(data))

    @property
    def years(self) -> int | float:
        return self._years

    @property
    def months(self) -> int | float:
        return self._months

    @property
    def weeks(self) -> int | float:
        return self._weeks

    @property
    def days(self) -> int | float:
        return self._days

    @property
    def hours(self) -> int | float:
        return self._hours

    @property
    def minutes(self) -> int | float:
        return self._minutes

    @property
    def seconds(self) -> int | float:
        return self._seconds

    @property
    def milliseconds(self) -> int | float:
        return self._milliseconds

    @property
    def is_zero(self) -> bool:
        """Return True if every component is zero."""
        return not any(self.to_dict().values())

    def to_dict(self) -> dict[str, int | float]:
        """Return every component as a dict in application order.

        Examples:
            >>> Amount(days=3).to_dict()["days"]
            3
        """
        return {name: getattr(self, f"_{name}") for name in AMOUNT_FIELDS}

    def __add__(self, other: object) -> Amount:
        """Add two Amounts component by component."""
        if not isinstance(other, Amount):
            return NotImplemented
        mine, theirs = self.to_dict(), other.to_dict()
        return Amount(**{name: mine[name] + theirs[name] for name in AMOUNT_FIELDS})

    def __neg__(self) -> Amount:
        """Return the negation of this amount.

        Examples:
            >>> -Amount(years=1, hours=2)
            Amount(years=-1, hours=-2)
        """
        return Amount(**{name: -value for name, value in self.to_dict().items()})

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Amount):
            return NotImplemented
        return self.to_dict() == other.to_dict()

    def __hash__(self) -> int:
        return hash(tuple(self.to_dict().values()))

    def __repr__(self) -> str:
        """Return a representation listing the non-zero components."""
        parts = [f"{name}={value}" for name, value in self.to_dict().items() if value]
        return f"Amount({', '.join(parts)})"

    def __bool__(self) -> bool:
        return not self.is_zero


__all__ = ["Amount"]
