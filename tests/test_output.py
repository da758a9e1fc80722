"""
Tests for console formatting and result export.
"""

import csv
import json
from datetime import date

import pytest
from rich.console import Console

from working_days.data.calendar_names import format_long_date, month_name, month_number
from working_days.output.exporter import ResultExporter, report_to_dict
from working_days.output.formatter import ConsoleFormatter, headline, holiday_line
from tests.conftest import holiday


@pytest.fixture
def report(service):
    """Calculation report for December 2024."""
    return service.calculate(12, 2024)


class TestCalendarNames:
    """Tests for month and weekday names."""

    def test_month_number(self):
        assert month_number("agustus") == 8
        assert month_number("AUGUST") == 8
        assert month_number("3") == 3
        assert month_number("Augustus") is None
        assert month_number("²") is None

    def test_month_name(self):
        assert month_name(8) == "Agustus"
        assert month_name(8, "en") == "August"

    def test_format_long_date_indonesian(self):
        assert format_long_date(date(2024, 12, 25)) == "Rabu, 25 Desember 2024"
        assert format_long_date(date(2024, 8, 17)) == "Sabtu, 17 Agustus 2024"

    def test_format_long_date_english(self):
        assert format_long_date(date(2024, 12, 25), "en") == "Wednesday, December 25, 2024"


class TestFormatter:
    """Tests for ConsoleFormatter."""

    def test_headline(self, report):
        assert headline(report.result) == "Total hari kerja di bulan Desember 2024 adalah: 21 hari"
        assert headline(report.result, "en") == "Total working days in December 2024: 21 days"

    def test_holiday_line(self):
        line = holiday_line(holiday("2024-12-25", "Hari Raya Natal"))

        assert line == "Hari Raya Natal - Rabu, 25 Desember 2024"

    def test_print_report_lists_weekday_holidays(self, report):
        console = Console(record=True, width=100)

        ConsoleFormatter(console=console).print_report(report)

        text = console.export_text()
        assert "Total hari kerja di bulan Desember 2024 adalah: 21 hari" in text
        assert "Daftar hari libur nasional pada hari kerja:" in text
        assert "Hari Raya Natal - Rabu, 25 Desember 2024" in text
        assert "Cuti Bersama" not in text

    def test_print_report_without_holidays(self, service):
        console = Console(record=True, width=100)

        ConsoleFormatter(console=console).print_report(service.calculate(8, 2024))

        text = console.export_text()
        assert "Tidak ada hari libur nasional pada hari kerja di bulan ini." in text

    def test_print_holidays_shows_all(self, report):
        console = Console(record=True, width=120)

        ConsoleFormatter(language="en", console=console).print_holidays(12, 2024, report.all_holidays)

        text = console.export_text()
        assert "Holidays December 2024" in text
        assert "Cuti Bersama Hari Raya Natal" in text
        assert "25.12.2024" in text

    def test_print_year_options_title_on_one_line(self):
        console = Console(record=True, width=80)

        ConsoleFormatter(console=console).print_year_options([2028, 2027, 2026, 2025, 2024], 2026)

        text = console.export_text()
        assert "Pilihan Tahun" in text
        assert "2028" in text and "2024" in text


class TestResultExporter:
    """Tests for ResultExporter."""

    def test_report_to_dict(self, report):
        data = report_to_dict(report)

        assert data["month"] == 12
        assert data["calculation"]["total_working_days"] == 21
        assert data["national_holidays_on_weekdays"] == [
            {
                "holiday_date": "2024-12-25",
                "holiday_name": "Hari Raya Natal",
                "is_national_holiday": True,
            }
        ]
        assert len(data["all_holidays"]) == 2

    def test_export_json(self, report, tmp_path):
        path = ResultExporter(str(tmp_path)).export_json(report)

        with open(path, encoding="utf-8") as f:
            data = json.load(f)
        assert path.endswith(".json")
        assert data["calculation"]["weekday_count"] == 22

    def test_export_csv_to_given_path(self, report, tmp_path):
        target = tmp_path / "nested" / "december.csv"

        path = ResultExporter().export_csv(report, str(target))

        with open(path, newline="", encoding="utf-8") as f:
            rows = list(csv.reader(f))
        assert rows[0][-1] == "Working Days"
        assert rows[1] == ["2024", "12", "31", "22", "1", "21"]

    def test_export_both_uses_output_base_path(self, report, tmp_path):
        json_path, csv_path = ResultExporter(str(tmp_path / "unused")).export_both(
            report, str(tmp_path / "december.out")
        )

        assert json_path == str(tmp_path / "december.json")
        assert csv_path == str(tmp_path / "december.csv")
        with open(json_path, encoding="utf-8") as f:
            assert json.load(f)["calculation"]["total_working_days"] == 21
        assert not (tmp_path / "unused").exists()

    def test_export_holidays_csv(self, report, tmp_path):
        path = ResultExporter(str(tmp_path)).export_holidays_csv(report.all_holidays)

        with open(path, newline="", encoding="utf-8") as f:
            rows = list(csv.reader(f))
        assert rows[1] == ["2024-12-25", "Hari Raya Natal", "True"]
        assert len(rows) == 3
