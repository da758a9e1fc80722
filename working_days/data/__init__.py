"""
Data models and schemas for the working days calculator.
"""

from working_days.data.schemas import (
    CalculationReport,
    CalculationResult,
    Config,
    HolidayRecord,
    RequestState,
)

__all__ = [
    "CalculationReport",
    "CalculationResult",
    "Config",
    "HolidayRecord",
    "RequestState",
]
