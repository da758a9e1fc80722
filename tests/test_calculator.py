"""
Tests for the working days calculator.
"""

from datetime import date

import pytest

from working_days.core.calculator import (
    WorkingDaysCalculator,
    count_weekdays,
    days_in_month,
    is_leap_year,
    is_weekend,
)
from working_days.core.errors import InvalidInput
from tests.conftest import TODAY, holiday


class TestCalendarHelpers:
    """Tests for the calendar helper functions."""

    @pytest.mark.parametrize(
        "year, expected",
        [(2024, True), (2023, False), (2000, True), (1900, False), (2100, False)],
    )
    def test_is_leap_year(self, year, expected):
        assert is_leap_year(year) is expected

    def test_days_in_february(self):
        assert days_in_month(2, 2024) == 29
        assert days_in_month(2, 2023) == 28
        assert days_in_month(2, 1900) == 28
        assert days_in_month(2, 2000) == 29

    def test_days_in_other_months(self):
        assert days_in_month(1, 2024) == 31
        assert days_in_month(4, 2024) == 30
        assert days_in_month(12, 2023) == 31

    def test_is_weekend(self):
        assert is_weekend(date(2024, 8, 17)) is True   # Saturday
        assert is_weekend(date(2024, 8, 18)) is True   # Sunday
        assert is_weekend(date(2024, 12, 25)) is False  # Wednesday

    def test_count_weekdays(self):
        assert count_weekdays(1, 2024) == 23
        assert count_weekdays(8, 2024) == 22
        assert count_weekdays(12, 2024) == 22

    def test_february_weekdays_depend_on_leap_year(self):
        # Feb 29, 2024 is a Thursday
        assert count_weekdays(2, 2024) == 21
        assert count_weekdays(2, 2023) == 20


class TestWorkingDaysCalculator:
    """Tests for WorkingDaysCalculator.compute."""

    def test_empty_holidays_gives_weekday_count(self, calculator):
        """January 2024 starts on a Monday and has 23 weekdays."""
        result = calculator.compute(1, 2024, [])

        assert result.calendar_days == 31
        assert result.weekday_count == 23
        assert result.national_holiday_count == 0
        assert result.total_working_days == 23
        assert result.holidays == []
        assert result.warnings == []

    def test_weekend_national_holiday_not_subtracted(self, calculator):
        """Independence Day 2024 falls on a Saturday."""
        holidays = [holiday("2024-08-17", "Independence Day")]

        result = calculator.compute(8, 2024, holidays)

        assert result.national_holiday_count == 0
        assert result.total_working_days == 22
        assert result.holidays == []

    def test_weekday_national_holiday_subtracted(self, calculator):
        """Christmas 2024 falls on a Wednesday."""
        holidays = [holiday("2024-12-25", "Christmas")]

        result = calculator.compute(12, 2024, holidays)

        assert result.national_holiday_count == 1
        assert result.total_working_days == 21
        assert [h.name for h in result.holidays] == ["Christmas"]

    def test_non_national_holiday_ignored(self, calculator, december_2024):
        result = calculator.compute(12, 2024, december_2024)

        assert result.national_holiday_count == 1
        assert result.total_working_days == 21
        assert all(h.is_national_holiday for h in result.holidays)

    def test_holidays_sorted_by_date(self, calculator):
        holidays = [
            holiday("2025-05-29", "Kenaikan Yesus Kristus"),
            holiday("2025-05-01", "Hari Buruh Internasional"),
            holiday("2025-05-12", "Hari Raya Waisak"),
        ]

        result = calculator.compute(5, 2025, holidays)

        assert [h.holiday_date.day for h in result.holidays] == [1, 12, 29]
        assert result.total_working_days == result.weekday_count - 3

    def test_duplicate_dates_are_kept(self, calculator):
        holidays = [
            holiday("2024-12-25", "Hari Raya Natal"),
            holiday("2024-12-25", "Christmas Day"),
        ]

        result = calculator.compute(12, 2024, holidays)

        assert result.national_holiday_count == 2
        assert len(result.holidays) == 2
        assert [h.name for h in result.holidays] == ["Hari Raya Natal", "Christmas Day"]

    def test_holiday_outside_month_is_ignored_with_warning(self, calculator):
        holidays = [
            holiday("2024-12-25", "Hari Raya Natal"),
            holiday("2025-01-01", "Tahun Baru"),
        ]

        result = calculator.compute(12, 2024, holidays)

        assert result.national_holiday_count == 1
        assert len(result.warnings) == 1
        assert "Tahun Baru" in result.warnings[0]

    def test_negative_total_is_not_clamped(self, calculator):
        """Inconsistent data surfaces as a warning instead of being hidden."""
        holidays = [holiday("2024-12-25", f"Duplicate {i}") for i in range(25)]

        result = calculator.compute(12, 2024, holidays)

        assert result.total_working_days == 22 - 25
        assert any("negative" in w for w in result.warnings)

    def test_invariant_holds(self, calculator, december_2024):
        result = calculator.compute(12, 2024, december_2024)

        assert result.total_working_days == result.weekday_count - result.national_holiday_count

    def test_compute_is_idempotent(self, calculator, december_2024):
        first = calculator.compute(12, 2024, december_2024)
        second = calculator.compute(12, 2024, december_2024)

        assert first == second


class TestValidation:
    """Tests for month and year validation."""

    @pytest.mark.parametrize("month", [0, 13, -1])
    def test_month_out_of_range(self, calculator, month):
        with pytest.raises(InvalidInput, match="month out of range"):
            calculator.compute(month, 2024, [])

    @pytest.mark.parametrize("month", [True, "1", 1.0, None])
    def test_month_must_be_integer(self, calculator, month):
        with pytest.raises(InvalidInput, match="month out of range"):
            calculator.compute(month, 2024, [])

    def test_year_below_minimum(self, calculator):
        with pytest.raises(InvalidInput, match="year out of range"):
            calculator.compute(1, 1899, [])

    def test_min_year_is_accepted(self, calculator):
        result = calculator.compute(1, 1900, [])

        # Jan 1, 1900 is a Monday
        assert result.total_working_days == 23

    def test_year_above_margin(self, calculator):
        assert calculator.max_year == TODAY.year + 2
        calculator.compute(1, TODAY.year + 2, [])

        with pytest.raises(InvalidInput, match="year out of range"):
            calculator.compute(1, TODAY.year + 3, [])

    def test_custom_bounds(self):
        calculator = WorkingDaysCalculator(min_year=2000, year_margin=0, today=TODAY)

        with pytest.raises(InvalidInput):
            calculator.compute(1, 1999, [])
        with pytest.raises(InvalidInput):
            calculator.compute(1, TODAY.year + 1, [])

    def test_invalid_input_is_value_error(self, calculator):
        with pytest.raises(ValueError):
            calculator.compute(13, 2024, [])
