"""
FastAPI REST API for the working days calculator.
"""

from datetime import date
from typing import List

from fastapi import FastAPI, HTTPException, Query
from pydantic import BaseModel

from working_days import __version__
from working_days.config.manager import ConfigManager
from working_days.core.calculator import WorkingDaysCalculator
from working_days.core.errors import FetchError, InvalidInput, MalformedData
from working_days.core.holiday_provider import ApiHolidayProvider
from working_days.core.service import WorkingDaysService, year_options
from working_days.output.exporter import holiday_to_dict, report_to_dict
from working_days.output.formatter import headline


# Load configuration
config_manager = ConfigManager()
config = config_manager.load_config()

# Initialize components
holiday_provider = ApiHolidayProvider(config.holiday_api_url, config.request_timeout)
calculator = WorkingDaysCalculator(min_year=config.min_year, year_margin=config.year_margin)
service = WorkingDaysService(holiday_provider, calculator)


class HolidayResponse(BaseModel):
    """Response model for a single holiday."""

    holiday_date: date
    holiday_name: str
    is_national_holiday: bool


class YearOptionsResponse(BaseModel):
    """Selectable years for the calculation form."""

    current_year: int
    years: List[int]


# FastAPI app
app = FastAPI(
    title="Working Days Calculator API",
    description="Calculate working days in a month excluding weekends and national holidays",
    version=__version__,
)


def _raise_http(error: Exception) -> None:
    """Translate calculator errors into HTTP errors."""
    if isinstance(error, InvalidInput):
        raise HTTPException(status_code=400, detail=str(error))
    if isinstance(error, (FetchError, MalformedData)):
        raise HTTPException(status_code=502, detail=f"Holiday data unavailable: {error}")
    raise HTTPException(status_code=500, detail=f"Calculation error: {error}")


@app.get("/")
async def root():
    """API root endpoint with basic info."""
    return {
        "name": "Working Days Calculator API",
        "version": __version__,
        "endpoints": {
            "GET /calculate?month=&year=": "Calculate working days in a month",
            "GET /holidays?month=&year=": "List holidays in a month",
            "GET /years": "List selectable years",
        },
    }


@app.get("/calculate")
def calculate_working_days(
    month: str = Query(..., description="Month number (1-12) or English/Indonesian name"),
    year: str = Query(..., description="Four-digit year"),
    language: str = Query(config.language, pattern="^(id|en)$", description="Summary language"),
):
    """
    Calculate working days for a month.

    Only national holidays falling on a weekday are subtracted.
    """
    try:
        report = service.calculate(month, year)
    except Exception as e:
        _raise_http(e)

    body = report_to_dict(report)
    body["summary"] = headline(report.result, language)
    return body


@app.get("/holidays", response_model=List[HolidayResponse])
def get_holidays(
    month: str = Query(..., description="Month number (1-12) or English/Indonesian name"),
    year: str = Query(..., description="Four-digit year"),
):
    """Get every holiday of a month, sorted by date."""
    try:
        holidays = service.holidays(month, year)
    except Exception as e:
        _raise_http(e)

    return [HolidayResponse(**holiday_to_dict(h)) for h in holidays]


@app.get("/years", response_model=YearOptionsResponse)
async def list_years():
    """List the selectable years, centred on the current year."""
    return YearOptionsResponse(current_year=date.today().year, years=year_options())


@app.get("/health")
async def health_check():
    """Health check endpoint."""
    return {"status": "healthy", "version": __version__}
