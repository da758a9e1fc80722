"""
Calculation entry point tying the holiday provider to the calculator.
"""

from datetime import date
from typing import List, Optional, Union

from working_days.core.calculator import WorkingDaysCalculator
from working_days.core.errors import InvalidInput
from working_days.core.holiday_provider import HolidayProvider
from working_days.data.calendar_names import month_number
from working_days.data.schemas import CalculationReport, HolidayRecord

MonthInput = Union[int, str]
YearInput = Union[int, str]


def parse_month(month: MonthInput) -> int:
    """
    Normalize a month name or number.

    Raises:
        InvalidInput: If the value is not a known month name or number.
    """
    if isinstance(month, bool):
        raise InvalidInput(f"month out of range: {month!r}")
    if isinstance(month, int):
        return month
    if isinstance(month, str):
        number = month_number(month)
        if number is not None:
            return number
    raise InvalidInput(f"month out of range: unknown month {month!r}")


def parse_year(year: YearInput) -> int:
    """
    Normalize a year given as number or numeric string.

    Raises:
        InvalidInput: If the value is not an integer year.
    """
    if isinstance(year, bool):
        raise InvalidInput(f"year out of range: {year!r}")
    if isinstance(year, int):
        return year
    if isinstance(year, str) and year.strip().isdecimal():
        return int(year.strip())
    raise InvalidInput(f"year out of range: {year!r} is not a year")


def year_options(today: Optional[date] = None, span: int = 2) -> List[int]:
    """
    Years offered for selection, centred on the current year, newest first.

    Args:
        today: Reference date. Defaults to today.
        span: Number of years on each side of the current year.
    """
    current = (today or date.today()).year
    return [current + offset for offset in range(span, -span - 1, -1)]


class WorkingDaysService:
    """Validates input, fetches holidays and runs the calculation."""

    def __init__(
        self,
        holiday_provider: HolidayProvider,
        calculator: Optional[WorkingDaysCalculator] = None,
    ):
        """
        Initialize the service.

        Args:
            holiday_provider: Source of holiday records.
            calculator: Calculator to use. A default one is created if omitted.
        """
        self.holiday_provider = holiday_provider
        self.calculator = calculator or WorkingDaysCalculator()

    def holidays(self, month: MonthInput, year: YearInput) -> List[HolidayRecord]:
        """Fetch all holidays of a month, sorted by date."""
        month_num, year_num = self._validated(month, year)
        records = self.holiday_provider.fetch(month_num, year_num)
        return sorted(records, key=lambda h: h.holiday_date)

    def calculate(self, month: MonthInput, year: YearInput) -> CalculationReport:
        """
        Calculate working days for a month.

        Input is validated before the holiday API is contacted, so invalid
        input never triggers a request.

        Args:
            month: Month number or English/Indonesian month name.
            year: Four-digit year.

        Returns:
            CalculationReport with the result and all fetched holidays.

        Raises:
            InvalidInput: If month or year is invalid.
            FetchError: If holiday data is unavailable.
            MalformedData: If the holiday data is malformed.
        """
        month_num, year_num = self._validated(month, year)
        records = self.holiday_provider.fetch(month_num, year_num)
        result = self.calculator.compute(month_num, year_num, records)
        return CalculationReport(
            result=result,
            all_holidays=sorted(records, key=lambda h: h.holiday_date),
        )

    def _validated(self, month: MonthInput, year: YearInput):
        month_num = parse_month(month)
        year_num = parse_year(year)
        self.calculator.validate(month_num, year_num)
        return month_num, year_num
