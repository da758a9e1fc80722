"""
Export functionality for working day calculation reports.
"""

import csv
import json
import logging
from datetime import datetime
from pathlib import Path
from typing import List, Optional, Tuple

from working_days.data.schemas import CalculationReport, HolidayRecord

logger = logging.getLogger(__name__)


class ResultExporter:
    """Exports working day calculation reports to various formats."""

    def __init__(
        self,
        output_directory: str = "results",
        timestamp_format: str = "%Y%m%d_%H%M%S",
    ):
        """
        Initialize the result exporter.

        Args:
            output_directory: Directory for output files.
            timestamp_format: Format string for timestamps in filenames.
        """
        self.output_directory = output_directory
        self.timestamp_format = timestamp_format

    def _resolve_path(self, prefix: str, extension: str, output_path: Optional[str]) -> Path:
        """Use the given path, or a timestamped file in the output directory."""
        if output_path:
            file_path = Path(output_path)
            file_path.parent.mkdir(parents=True, exist_ok=True)
            return file_path

        output_dir = Path(self.output_directory)
        output_dir.mkdir(parents=True, exist_ok=True)
        timestamp = datetime.now().strftime(self.timestamp_format)
        return output_dir / f"{prefix}_{timestamp}.{extension}"

    def export_json(
        self, report: CalculationReport, output_path: Optional[str] = None
    ) -> str:
        """
        Export report to JSON file.

        Args:
            report: CalculationReport to export.
            output_path: Optional specific output path.

        Returns:
            Path to the exported file.
        """
        file_path = self._resolve_path("workdays", "json", output_path)

        with open(file_path, "w", encoding="utf-8") as f:
            json.dump(report_to_dict(report), f, indent=2, ensure_ascii=False)

        logger.info(f"Exported result to: {file_path}")
        return str(file_path)

    def export_csv(
        self, report: CalculationReport, output_path: Optional[str] = None
    ) -> str:
        """
        Export report summary to CSV file.

        Args:
            report: CalculationReport to export.
            output_path: Optional specific output path.

        Returns:
            Path to the exported file.
        """
        file_path = self._resolve_path("workdays", "csv", output_path)
        result = report.result

        with open(file_path, "w", newline="", encoding="utf-8") as f:
            writer = csv.writer(f)
            writer.writerow([
                "Year",
                "Month",
                "Calendar Days",
                "Weekdays",
                "National Holidays",
                "Working Days",
            ])
            writer.writerow([
                result.year,
                result.month,
                result.calendar_days,
                result.weekday_count,
                result.national_holiday_count,
                result.total_working_days,
            ])

        logger.info(f"Exported result to: {file_path}")
        return str(file_path)

    def export_holidays_csv(
        self, holidays: List[HolidayRecord], output_path: Optional[str] = None
    ) -> str:
        """
        Export holidays list to CSV file.

        Args:
            holidays: List of holidays to export.
            output_path: Optional specific output path.

        Returns:
            Path to the exported file.
        """
        file_path = self._resolve_path("holidays", "csv", output_path)

        with open(file_path, "w", newline="", encoding="utf-8") as f:
            writer = csv.writer(f)
            writer.writerow(["Date", "Name", "Is National"])
            for holiday in holidays:
                writer.writerow([
                    holiday.holiday_date.isoformat(),
                    holiday.name,
                    holiday.is_national_holiday,
                ])

        logger.info(f"Exported holidays to: {file_path}")
        return str(file_path)

    def export_both(
        self, report: CalculationReport, output_path: Optional[str] = None
    ) -> Tuple[str, str]:
        """
        Export report to both JSON and CSV.

        Args:
            report: CalculationReport to export.
            output_path: Optional base path. Its suffix is replaced with
                .json and .csv for the two files.

        Returns:
            Tuple of (json_path, csv_path).
        """
        if output_path:
            base = Path(output_path)
            return (
                self.export_json(report, str(base.with_suffix(".json"))),
                self.export_csv(report, str(base.with_suffix(".csv"))),
            )
        return self.export_json(report), self.export_csv(report)


def holiday_to_dict(holiday: HolidayRecord) -> dict:
    """Serialize a holiday using the API's field names."""
    return {
        "holiday_date": holiday.holiday_date.isoformat(),
        "holiday_name": holiday.name,
        "is_national_holiday": holiday.is_national_holiday,
    }


def report_to_dict(report: CalculationReport) -> dict:
    """
    Convert a CalculationReport to a JSON-serializable dictionary.

    Shared by the exporter, the REST API and the MCP server.
    """
    result = report.result
    return {
        "month": result.month,
        "year": result.year,
        "calculation": {
            "calendar_days": result.calendar_days,
            "weekday_count": result.weekday_count,
            "national_holiday_count": result.national_holiday_count,
            "total_working_days": result.total_working_days,
        },
        "national_holidays_on_weekdays": [holiday_to_dict(h) for h in result.holidays],
        "all_holidays": [holiday_to_dict(h) for h in report.all_holidays],
        "metadata": {
            "calculated_at": report.calculated_at.isoformat(),
            "warnings": list(result.warnings),
        },
    }
