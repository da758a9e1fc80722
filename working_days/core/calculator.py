"""
Main working day calculator logic.
"""

import calendar
from datetime import date
from typing import List, Optional, Sequence

from working_days.core.errors import InvalidInput
from working_days.data.schemas import CalculationResult, HolidayRecord

MIN_YEAR = 1900
YEAR_MARGIN = 2


def is_leap_year(year: int) -> bool:
    """Gregorian rule: divisible by 4, except centuries not divisible by 400."""
    return year % 4 == 0 and (year % 100 != 0 or year % 400 == 0)


def days_in_month(month: int, year: int) -> int:
    """Return the number of calendar days in a month."""
    if month == 2:
        return 29 if is_leap_year(year) else 28
    return calendar.monthrange(year, month)[1]


def is_weekend(day: date) -> bool:
    """Return True for Saturday and Sunday."""
    return day.weekday() >= 5


def count_weekdays(month: int, year: int) -> int:
    """Count Monday to Friday days in a month."""
    return sum(
        1
        for day in range(1, days_in_month(month, year) + 1)
        if not is_weekend(date(year, month, day))
    )


class WorkingDaysCalculator:
    """Calculates working days in a month, excluding weekends and national holidays."""

    def __init__(
        self,
        min_year: int = MIN_YEAR,
        year_margin: int = YEAR_MARGIN,
        today: Optional[date] = None,
    ):
        """
        Initialize the working days calculator.

        Args:
            min_year: Earliest accepted year.
            year_margin: Number of years after the current year that are accepted.
            today: Reference date for the upper year bound. Defaults to the
                current date at calculation time.
        """
        self.min_year = min_year
        self.year_margin = year_margin
        self.today = today

    @property
    def max_year(self) -> int:
        """Latest accepted year."""
        reference = self.today or date.today()
        return reference.year + self.year_margin

    def validate(self, month: int, year: int) -> None:
        """
        Check month and year bounds.

        Raises:
            InvalidInput: If month or year is not an integer in range.
        """
        if isinstance(month, bool) or not isinstance(month, int) or not 1 <= month <= 12:
            raise InvalidInput(f"month out of range: {month!r} (expected 1-12)")
        if isinstance(year, bool) or not isinstance(year, int):
            raise InvalidInput(f"year out of range: {year!r}")
        if not self.min_year <= year <= self.max_year:
            raise InvalidInput(
                f"year out of range: {year} (expected {self.min_year}-{self.max_year})"
            )

    def compute(
        self, month: int, year: int, holidays: Sequence[HolidayRecord]
    ) -> CalculationResult:
        """
        Calculate working days for a month.

        Only national holidays falling on a weekday reduce the count; a
        holiday on a weekend is already excluded with the weekend. Records
        dated outside the requested month are ignored and reported as
        warnings. Duplicate dates are kept as delivered.

        Args:
            month: Month number (1-12).
            year: Four-digit year.
            holidays: Holiday records for the month, possibly empty.

        Returns:
            CalculationResult with the counts and the qualifying holidays.

        Raises:
            InvalidInput: If month or year is out of range.
        """
        self.validate(month, year)

        calendar_days = days_in_month(month, year)
        weekday_count = count_weekdays(month, year)

        warnings: List[str] = []
        weekday_holidays: List[HolidayRecord] = []
        for holiday in holidays:
            hdate = holiday.holiday_date
            if (hdate.year, hdate.month) != (year, month):
                warnings.append(
                    f"Ignored holiday outside {year}-{month:02d}: "
                    f"{holiday.name} ({hdate.isoformat()})"
                )
                continue
            if holiday.is_national_holiday and not is_weekend(hdate):
                weekday_holidays.append(holiday)

        weekday_holidays.sort(key=lambda h: h.holiday_date)
        national_holiday_count = len(weekday_holidays)
        total_working_days = weekday_count - national_holiday_count

        if total_working_days < 0:
            warnings.append(
                f"Calculated working days is negative ({total_working_days}); "
                f"holiday data for {year}-{month:02d} looks inconsistent."
            )

        return CalculationResult(
            month=month,
            year=year,
            calendar_days=calendar_days,
            weekday_count=weekday_count,
            total_working_days=total_working_days,
            national_holiday_count=national_holiday_count,
            holidays=weekday_holidays,
            warnings=warnings,
        )
