"""
Core business logic for working day calculation.
"""

from working_days.core.calculator import WorkingDaysCalculator
from working_days.core.errors import (
    FetchError,
    InvalidInput,
    MalformedData,
    WorkingDaysError,
)
from working_days.core.holiday_provider import ApiHolidayProvider, HolidayProvider
from working_days.core.service import WorkingDaysService
from working_days.core.session import CalculationSession

__all__ = [
    "ApiHolidayProvider",
    "CalculationSession",
    "FetchError",
    "HolidayProvider",
    "InvalidInput",
    "MalformedData",
    "WorkingDaysCalculator",
    "WorkingDaysError",
    "WorkingDaysService",
]
