"""
Month and weekday names used for parsing input and rendering output.
"""

from datetime import date
from typing import Dict, List, Optional

ENGLISH_MONTHS: List[str] = [
    "January", "February", "March", "April", "May", "June",
    "July", "August", "September", "October", "November", "December",
]

INDONESIAN_MONTHS: List[str] = [
    "Januari", "Februari", "Maret", "April", "Mei", "Juni",
    "Juli", "Agustus", "September", "Oktober", "November", "Desember",
]

# Indexed by date.weekday(): Monday == 0
ENGLISH_WEEKDAYS: List[str] = [
    "Monday", "Tuesday", "Wednesday", "Thursday", "Friday", "Saturday", "Sunday",
]

INDONESIAN_WEEKDAYS: List[str] = [
    "Senin", "Selasa", "Rabu", "Kamis", "Jumat", "Sabtu", "Minggu",
]

MONTH_NUMBERS: Dict[str, int] = {
    **{name.lower(): number for number, name in enumerate(ENGLISH_MONTHS, start=1)},
    **{name.lower(): number for number, name in enumerate(INDONESIAN_MONTHS, start=1)},
}


def month_number(value: str) -> Optional[int]:
    """
    Convert a month name or number string to its number.

    Args:
        value: English or Indonesian month name (any case) or a number.

    Returns:
        Month number, or None if the value is not recognised. Numeric strings
        are returned as-is so the caller can report out-of-range values.
    """
    cleaned = value.strip()
    if cleaned.isdecimal():
        return int(cleaned)
    return MONTH_NUMBERS.get(cleaned.lower())


def month_name(month: int, language: str = "id") -> str:
    """Return the display name of a month (1-12)."""
    names = INDONESIAN_MONTHS if language == "id" else ENGLISH_MONTHS
    return names[month - 1]


def weekday_name(day: date, language: str = "id") -> str:
    """Return the display name of the weekday of a date."""
    names = INDONESIAN_WEEKDAYS if language == "id" else ENGLISH_WEEKDAYS
    return names[day.weekday()]


def format_long_date(day: date, language: str = "id") -> str:
    """
    Format a date as a full date string without relying on the system locale.

    ``id`` gives ``Rabu, 25 Desember 2024``; ``en`` gives
    ``Wednesday, December 25, 2024``.
    """
    if language == "id":
        return f"{weekday_name(day, language)}, {day.day} {month_name(day.month, language)} {day.year}"
    return f"{weekday_name(day, language)}, {month_name(day.month, language)} {day.day}, {day.year}"
