"""Tests for the function-based arithmetic and comparison APIs.

This module covers sorting, comparison and range membership on
date-like values, and the field-wise addition behind Moment.add().
"""

import random

import pytest

import eonix
from eonix import EmptyInputError, InvalidDateError, Moment
from eonix.arithmetic import (
    add_amount_to_millis,
    check_epoch_range,
    compare,
    in_range,
    max_value,
    min_value,
    sort_ascending,
)
from eonix.format import format_iso8601, parse_iso8601


# =============================================================================
# Sort Tests
# =============================================================================


class TestSort:
    """Tests for eonix.sort / Moment.sort / sort_ascending."""

    def test_sort_strings(self):
        """Test ISO strings come back as ascending Moments."""
        result = eonix.sort("2023-06-30", "2023-01-01", "2023-03-15")
        assert [m.to_iso_format()[:10] for m in result] == [
            "2023-01-01",
            "2023-03-15",
            "2023-06-30",
        ]

    def test_sort_mixed_inputs(self):
        """Test mixed date-like inputs."""
        result = Moment.sort(86_400_000, "1970-01-01", Moment("1970-01-03"))
        assert [m.epoch_millis for m in result] == [0, 86_400_000, 172_800_000]

    def test_sort_single(self):
        """Test a single date."""
        assert eonix.sort("2023-01-01") == [Moment("2023-01-01")]

    def test_sort_duplicates(self):
        """Test sorting the same date twice."""
        d = Moment("2023-01-01")
        assert eonix.sort(d, d) == [d, d]

    def test_sort_flattens_lists(self):
        """Test list and tuple arguments are flattened."""
        result = sort_ascending(["2023-03-01", ("2023-01-01",)], "2023-02-01")
        assert [m.month for m in result] == [1, 2, 3]

    def test_sort_empty(self):
        """Test sorting nothing raises EmptyInputError."""
        with pytest.raises(EmptyInputError):
            eonix.sort()
        with pytest.raises(EmptyInputError):
            sort_ascending([])

    def test_sort_invalid(self):
        """Test invalid dates raise InvalidDateError."""
        with pytest.raises(InvalidDateError):
            eonix.sort("2023-01-01", "garbage")

    def test_sort_random_is_non_decreasing(self):
        """Test random input comes back in non-decreasing order."""
        rng = random.Random(20230101)
        values = [rng.randint(-10**12, 10**12) for _ in range(200)]
        result = eonix.sort(*values)
        assert len(result) == len(values)
        assert all(a <= b for a, b in zip(result, result[1:]))
        assert [m.epoch_millis for m in result] == sorted(values)

    def test_sort_returns_copies(self):
        """Test mutating a sorted Moment leaves the input untouched."""
        original = Moment("2023-01-01")
        result = eonix.sort(original)
        result[0].add({"days": 1})
        assert original == Moment("2023-01-01")

    def test_sort_is_stable(self):
        """Test equal instants keep their argument order."""
        shifted = Moment(3_600_000).convert_to_time_zone(1)
        plain = Moment(0)
        assert [m.offset for m in eonix.sort(shifted, plain)] == [1, None]
        assert [m.offset for m in eonix.sort(plain, shifted)] == [None, 1]


# =============================================================================
# Comparison Tests
# =============================================================================


class TestCompare:
    """Tests for compare, min_value and max_value."""

    def test_compare(self):
        """Test -1/0/1 results."""
        assert compare("2024-01-15", "2024-01-16") == -1
        assert compare("2024-01-16", "2024-01-15") == 1
        assert compare("2024-01-15T00:00:00+00:00", "2024-01-15") == 0

    def test_min_max(self):
        """Test extremes of several dates."""
        values = ["2023-06-30", "2023-01-01", "2023-03-15"]
        assert min_value(*values) == Moment("2023-01-01")
        assert max_value(*values) == Moment("2023-06-30")

    def test_min_max_empty(self):
        """Test extremes of nothing raise EmptyInputError."""
        with pytest.raises(EmptyInputError):
            min_value()
        with pytest.raises(EmptyInputError):
            max_value()


class TestInRange:
    """Tests for in_range."""

    @pytest.mark.parametrize(
        "value,include_start,include_end,expected",
        [
            ("2023-06-01", True, True, True),
            ("2023-06-01", False, True, False),
            ("2023-06-30", True, True, True),
            ("2023-06-30", True, False, False),
            ("2023-06-15", False, False, True),
            ("2023-05-31", True, True, False),
            ("2023-07-01", True, True, False),
        ],
    )
    def test_bounds(self, value, include_start, include_end, expected):
        """Test inclusive and exclusive bounds."""
        result = in_range(
            value,
            "2023-06-01",
            "2023-06-30",
            include_start=include_start,
            include_end=include_end,
        )
        assert result is expected

    def test_reversed_range(self):
        """Test a start after the end contains nothing."""
        assert in_range("2023-06-15", "2023-06-30", "2023-06-01") is False


# =============================================================================
# Field Operation Tests
# =============================================================================


def _amount(**fields):
    amount = dict.fromkeys(
        ("years", "months", "weeks", "days", "hours", "minutes", "seconds", "milliseconds"), 0
    )
    amount.update(fields)
    return amount


class TestFieldOps:
    """Tests for add_amount_to_millis and check_epoch_range."""

    def test_zero_amount(self):
        """Test a zero amount leaves the instant unchanged."""
        start = parse_iso8601("2023-01-31")
        assert add_amount_to_millis(start, _amount()) == start

    def test_weeks_and_days_combine(self):
        """Test weeks and days form a single day adjustment."""
        start = parse_iso8601("2023-01-01")
        assert format_iso8601(add_amount_to_millis(start, _amount(weeks=1, days=-7))) == (
            "2023-01-01T00:00:00.000Z"
        )

    def test_fractions_truncate_per_field(self):
        """Test each field's fraction is truncated separately."""
        start = parse_iso8601("2023-01-01")
        result = add_amount_to_millis(start, _amount(days=1.9, hours=-1.9))
        assert format_iso8601(result) == "2023-01-01T23:00:00.000Z"

    def test_negative_months_borrow_years(self):
        """Test negative month deltas carry into the year."""
        start = parse_iso8601("2023-03-31")
        assert format_iso8601(add_amount_to_millis(start, _amount(months=-1))) == (
            "2023-03-03T00:00:00.000Z"
        )
        assert format_iso8601(add_amount_to_millis(start, _amount(months=-15))) == (
            "2021-12-31T00:00:00.000Z"
        )

    def test_check_epoch_range(self):
        """Test the supported range limits."""
        assert check_epoch_range(0) == 0
        assert check_epoch_range(8_640_000_000_000_000) == 8_640_000_000_000_000
        with pytest.raises(InvalidDateError):
            check_epoch_range(8_640_000_000_000_001)
        with pytest.raises(InvalidDateError):
            check_epoch_range(-8_640_000_000_000_001)
