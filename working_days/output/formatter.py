"""
Console output formatting using Rich.
"""

from typing import Dict, List, Optional

from rich.console import Console
from rich.markup import escape
from rich.panel import Panel
from rich.status import Status
from rich.table import Table
from rich.text import Text

from working_days.data.calendar_names import format_long_date, month_name, weekday_name
from working_days.data.schemas import CalculationReport, CalculationResult, HolidayRecord

TEXTS: Dict[str, Dict[str, str]] = {
    "id": {
        "headline": "Total hari kerja di bulan {month} {year} adalah: {days} hari",
        "holiday_header": "Daftar hari libur nasional pada hari kerja:",
        "no_holidays": "Tidak ada hari libur nasional pada hari kerja di bulan ini.",
        "loading": "Menghitung...",
        "title": "Hasil Perhitungan Hari Kerja",
        "calendar_days": "Jumlah hari:",
        "weekdays": "Hari Senin-Jumat:",
        "national_holidays": "Libur nasional (hari kerja):",
        "working_days": "Hari kerja:",
        "holidays_title": "Hari Libur {month} {year}",
        "date": "Tanggal",
        "day": "Hari",
        "name": "Nama",
        "national": "Nasional",
        "yes": "Ya",
        "no": "Tidak",
        "none_found": "Tidak ada hari libur pada bulan ini.",
        "years_title": "Pilihan Tahun",
        "warning": "Peringatan:",
    },
    "en": {
        "headline": "Total working days in {month} {year}: {days} days",
        "holiday_header": "National holidays falling on weekdays:",
        "no_holidays": "No national holidays fall on a weekday this month.",
        "loading": "Calculating...",
        "title": "Working Days Result",
        "calendar_days": "Calendar days:",
        "weekdays": "Monday-Friday days:",
        "national_holidays": "National holidays (weekdays):",
        "working_days": "Working days:",
        "holidays_title": "Holidays {month} {year}",
        "date": "Date",
        "day": "Day",
        "name": "Name",
        "national": "National",
        "yes": "Yes",
        "no": "No",
        "none_found": "No holidays found for this month.",
        "years_title": "Year Options",
        "warning": "Warning:",
    },
}


def headline(result: CalculationResult, language: str = "id") -> str:
    """Return the one-line summary of a result."""
    return TEXTS[language]["headline"].format(
        month=month_name(result.month, language),
        year=result.year,
        days=result.total_working_days,
    )


def holiday_line(holiday: HolidayRecord, language: str = "id") -> str:
    """Return ``<name> - <long date>`` for a holiday list entry."""
    return f"{holiday.name} - {format_long_date(holiday.holiday_date, language)}"


class ConsoleFormatter:
    """Formats output for console display using Rich."""

    def __init__(self, language: str = "id", console: Optional[Console] = None):
        """
        Initialize the console formatter.

        Args:
            language: Display language ('id' or 'en').
            console: Optional Rich console to print to.
        """
        self.language = language
        self.texts = TEXTS[language]
        self.console = console or Console()

    def loading(self) -> Status:
        """Spinner shown while a calculation is in flight."""
        return self.console.status(self.texts["loading"])

    def print_report(self, report: CalculationReport) -> None:
        """
        Print a working day calculation report.

        Args:
            report: CalculationReport to display.
        """
        result = report.result

        self.console.print()
        self.console.rule(f"[bold blue]{self.texts['title']}[/bold blue]")
        self.console.print()

        calc_table = Table(show_header=False, box=None)
        calc_table.add_column("Label", style="cyan", width=30)
        calc_table.add_column("Value", style="white", justify="right", width=8)

        calc_table.add_row(self.texts["calendar_days"], str(result.calendar_days))
        calc_table.add_row(self.texts["weekdays"], str(result.weekday_count))
        calc_table.add_row(self.texts["national_holidays"], f"- {result.national_holiday_count}")
        calc_table.add_row("", "─" * 8)
        calc_table.add_row(
            Text(self.texts["working_days"], style="bold green"),
            Text(str(result.total_working_days), style="bold green"),
        )

        self.console.print(
            Panel(calc_table, title=f"[bold]{month_name(result.month, self.language)} {result.year}[/bold]")
        )
        self.console.print(Text(headline(result, self.language), style="bold"))

        if result.holidays:
            self.console.print(self.texts["holiday_header"])
            for holiday in result.holidays:
                self.console.print(f"  • {escape(holiday_line(holiday, self.language))}")
        else:
            self.console.print(f"[dim]{self.texts['no_holidays']}[/dim]")

        for warning in result.warnings:
            self.console.print(f"[yellow]{self.texts['warning']}[/yellow] {escape(warning)}")

        self.console.print()

    def print_holidays(self, month: int, year: int, holidays: List[HolidayRecord]) -> None:
        """
        Print every holiday of a month, national or not.

        Args:
            month: Month number.
            year: Year.
            holidays: Holidays sorted by date.
        """
        title = self.texts["holidays_title"].format(
            month=month_name(month, self.language), year=year
        )
        self.console.print()
        self.console.rule(f"[bold blue]{title}[/bold blue]")
        self.console.print()

        if not holidays:
            self.console.print(f"[dim]{self.texts['none_found']}[/dim]")
            self.console.print()
            return

        table = Table()
        table.add_column(self.texts["date"], style="cyan", width=12)
        table.add_column(self.texts["day"], style="dim", width=10)
        table.add_column(self.texts["name"], style="white")
        table.add_column(self.texts["national"], justify="center")

        for holiday in holidays:
            table.add_row(
                holiday.holiday_date.strftime("%d.%m.%Y"),
                weekday_name(holiday.holiday_date, self.language),
                escape(holiday.name),
                self.texts["yes"] if holiday.is_national_holiday else self.texts["no"],
            )

        self.console.print(table)
        self.console.print()

    def print_year_options(self, years: List[int], current_year: int) -> None:
        """Print the selectable years, highlighting the current one."""
        self.console.print()
        self.console.rule(f"[bold blue]{self.texts['years_title']}[/bold blue]")
        self.console.print()

        table = Table(show_header=False)
        table.add_column("Year", justify="right")
        for year in years:
            style = "bold green" if year == current_year else "white"
            table.add_row(Text(str(year), style=style))
        self.console.print(table)
        self.console.print()

    def print_error(self, message: str) -> None:
        """
        Print an error message.

        Args:
            message: Error message to display.
        """
        self.console.print(f"[bold red]Error:[/bold red] {escape(message)}")

    def print_success(self, message: str) -> None:
        """
        Print a success message.

        Args:
            message: Success message to display.
        """
        self.console.print(f"[bold green]Success:[/bold green] {escape(message)}")
