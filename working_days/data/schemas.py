"""
Data models for the working days calculator using Pydantic.
"""

import re
from datetime import date, datetime
from enum import Enum
from typing import List

from pydantic import BaseModel, ConfigDict, Field, field_validator

_ISO_DATE = re.compile(r"(\d{4})-(\d{1,2})-(\d{1,2})")


class RequestState(str, Enum):
    """Lifecycle of a single calculation request."""

    IDLE = "idle"
    LOADING = "loading"
    SUCCEEDED = "succeeded"
    FAILED = "failed"


class HolidayRecord(BaseModel):
    """One holiday as delivered by the holiday API."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    holiday_date: date = Field(..., description="Calendar date of the holiday")
    name: str = Field(..., alias="holiday_name", description="Human-readable label")
    is_national_holiday: bool = Field(..., description="Whether the holiday is nationally observed")

    @field_validator("holiday_date", mode="before")
    @classmethod
    def parse_calendar_date(cls, v):
        """
        Read ``YYYY-MM-DD`` as a plain calendar day.

        The API does not always zero-pad month and day, and the value must never
        go through a timezone conversion, so the string is split by hand.
        """
        if isinstance(v, str):
            match = _ISO_DATE.fullmatch(v.strip())
            if not match:
                raise ValueError(f"holiday_date must be YYYY-MM-DD, got {v!r}")
            year, month, day = (int(part) for part in match.groups())
            return date(year, month, day)
        return v


class CalculationResult(BaseModel):
    """Outcome of a working day calculation for one month."""

    model_config = ConfigDict(frozen=True)

    month: int = Field(..., ge=1, le=12, description="Month number (1-12)")
    year: int = Field(..., description="Four-digit year")
    calendar_days: int = Field(..., ge=28, le=31, description="Days in the month")
    weekday_count: int = Field(..., ge=0, description="Monday to Friday days in the month")
    total_working_days: int = Field(
        ..., description="Weekdays minus national holidays on weekdays (not clamped)"
    )
    national_holiday_count: int = Field(..., ge=0, description="National holidays on weekdays")
    holidays: List[HolidayRecord] = Field(
        default_factory=list, description="National holidays on weekdays, ascending by date"
    )
    warnings: List[str] = Field(default_factory=list, description="Data quality warnings")


class CalculationReport(BaseModel):
    """A calculation result together with the holiday data it was derived from."""

    model_config = ConfigDict(frozen=True)

    result: CalculationResult
    all_holidays: List[HolidayRecord] = Field(
        default_factory=list, description="Every record returned by the provider, sorted by date"
    )
    calculated_at: datetime = Field(
        default_factory=datetime.now, description="When the calculation was performed"
    )


class Config(BaseModel):
    """Configuration for the working days calculator."""

    holiday_api_url: str = Field(
        default="https://api-harilibur.vercel.app/api", description="Holiday API endpoint"
    )
    request_timeout: float = Field(default=10, gt=0, le=120, description="HTTP timeout in seconds")
    min_year: int = Field(default=1900, ge=1, description="Earliest accepted year")
    year_margin: int = Field(
        default=2, ge=0, le=50, description="Years past the current year that are accepted"
    )
    language: str = Field(default="id", pattern="^(id|en)$", description="Display language")
    output_format: str = Field(default="json", description="Default output format: json or csv")
    output_directory: str = Field(default="results", description="Directory for output files")
    api_host: str = Field(default="0.0.0.0", description="API server host")
    api_port: int = Field(default=8000, ge=1, le=65535, description="API server port")
