"""Tests for the TimeUnit enumeration."""

import pytest

from eonix import InvalidArgumentError, TimeUnit


class TestTimeUnit:
    """Tests for TimeUnit."""

    def test_canonical_order(self):
        """Test members iterate largest first."""
        assert [unit.value for unit in TimeUnit] == [
            "years",
            "months",
            "weeks",
            "days",
            "hours",
            "minutes",
            "seconds",
            "milliseconds",
        ]

    def test_to_millis(self):
        """Test fixed unit sizes."""
        assert TimeUnit.WEEKS.to_millis() == 604_800_000
        assert TimeUnit.DAYS.to_millis() == 86_400_000
        assert TimeUnit.HOURS.to_millis() == 3_600_000
        assert TimeUnit.MINUTES.to_millis() == 60_000
        assert TimeUnit.SECONDS.to_millis() == 1000
        assert TimeUnit.MILLISECONDS.to_millis() == 1

    def test_calendar_units(self):
        """Test years and months have no fixed size."""
        assert TimeUnit.YEARS.to_millis() is None
        assert TimeUnit.MONTHS.is_calendar
        assert not TimeUnit.DAYS.is_calendar

    @pytest.mark.parametrize(
        "value,expected",
        [
            ("days", TimeUnit.DAYS),
            ("day", TimeUnit.DAYS),
            ("Hours", TimeUnit.HOURS),
            (" MONTH ", TimeUnit.MONTHS),
            ("millisecond", TimeUnit.MILLISECONDS),
            (TimeUnit.YEARS, TimeUnit.YEARS),
        ],
    )
    def test_parse(self, value, expected):
        """Test names are parsed leniently."""
        assert TimeUnit.parse(value) is expected

    @pytest.mark.parametrize("value", ["fortnight", "", 3, None])
    def test_parse_invalid(self, value):
        """Test unknown names raise InvalidArgumentError."""
        with pytest.raises(InvalidArgumentError):
            TimeUnit.parse(value)
