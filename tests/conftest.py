"""
Shared fixtures for the working days calculator tests.
"""

from datetime import date
from typing import Dict, List, Tuple

import pytest

from working_days.core.calculator import WorkingDaysCalculator
from working_days.core.holiday_provider import HolidayProvider
from working_days.core.service import WorkingDaysService
from working_days.data.schemas import HolidayRecord

TODAY = date(2026, 10, 19)


def holiday(day: str, name: str, national: bool = True) -> HolidayRecord:
    """Build a holiday record from an ISO date string."""
    return HolidayRecord(
        holiday_date=date.fromisoformat(day),
        name=name,
        is_national_holiday=national,
    )


class FakeHolidayProvider(HolidayProvider):
    """In-memory provider that records every fetch."""

    def __init__(self, data: Dict[Tuple[int, int], List[HolidayRecord]] = None, error: Exception = None):
        self.data = data or {}
        self.error = error
        self.calls: List[Tuple[int, int]] = []

    def fetch(self, month: int, year: int) -> List[HolidayRecord]:
        self.calls.append((month, year))
        if self.error is not None:
            raise self.error
        return list(self.data.get((month, year), []))


@pytest.fixture
def calculator():
    """Create a WorkingDaysCalculator pinned to a fixed date."""
    return WorkingDaysCalculator(today=TODAY)


@pytest.fixture
def december_2024():
    """Holidays of December 2024 as the API reports them."""
    return [
        holiday("2024-12-26", "Cuti Bersama Hari Raya Natal", national=False),
        holiday("2024-12-25", "Hari Raya Natal"),
    ]


@pytest.fixture
def provider(december_2024):
    """Create a fake provider with December 2024 and August 2024 data."""
    return FakeHolidayProvider({
        (12, 2024): december_2024,
        (8, 2024): [holiday("2024-08-17", "Hari Kemerdekaan Republik Indonesia")],
    })


@pytest.fixture
def service(provider, calculator):
    """Create a WorkingDaysService backed by the fake provider."""
    return WorkingDaysService(provider, calculator)
