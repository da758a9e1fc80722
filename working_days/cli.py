"""
CLI interface for the working days calculator.
"""

import logging
import sys
from datetime import date
from typing import Optional

import click

from working_days import __version__
from working_days.config.manager import ConfigManager
from working_days.core.calculator import WorkingDaysCalculator
from working_days.core.errors import FetchError, InvalidInput, MalformedData
from working_days.core.holiday_provider import ApiHolidayProvider
from working_days.core.service import WorkingDaysService, parse_month, year_options
from working_days.core.session import CalculationSession
from working_days.data.schemas import Config
from working_days.output.exporter import ResultExporter
from working_days.output.formatter import ConsoleFormatter

# Configure logging
logging.basicConfig(
    level=logging.WARNING,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)
logger = logging.getLogger(__name__)


def load_config(config_path: Optional[str]) -> Config:
    """Load configuration from file and environment."""
    return ConfigManager(config_path).load_config()


def build_service(cfg: Config, provider: ApiHolidayProvider) -> WorkingDaysService:
    """Wire the calculator and provider according to the configuration."""
    calculator = WorkingDaysCalculator(min_year=cfg.min_year, year_margin=cfg.year_margin)
    return WorkingDaysService(provider, calculator)


language_option = click.option(
    "--language", "-l",
    type=click.Choice(["id", "en"]),
    default=None,
    help="Display language (default: from config, id)",
)
config_option = click.option(
    "--config", "-c",
    type=click.Path(exists=True),
    help="Path to config file (optional)",
)
verbose_option = click.option(
    "--verbose", "-v",
    is_flag=True,
    help="Enable debug logging",
)


@click.group()
@click.version_option(version=__version__, prog_name="workdays")
def main():
    """Working Days Calculator - count working days excluding weekends and national holidays."""
    pass


@main.command()
@click.argument("month")
@click.argument("year", required=False)
@click.option(
    "--output", "-o",
    type=click.Path(),
    help="Output file path (optional; with --format both, the base path for .json and .csv)",
)
@click.option(
    "--format", "-f",
    type=click.Choice(["json", "csv", "both", "console"]),
    default="console",
    help="Output format (default: console)",
)
@language_option
@config_option
@verbose_option
def calculate(month, year, output, format, language, config, verbose):
    """
    Calculate working days for MONTH of YEAR.

    MONTH is a number or an English/Indonesian month name. YEAR defaults to
    the current year.

    Example:
        workdays calculate agustus 2024
    """
    if verbose:
        logging.getLogger().setLevel(logging.DEBUG)

    formatter = ConsoleFormatter(language=language or "id")

    try:
        cfg = load_config(config)
        formatter = ConsoleFormatter(language=language or cfg.language)

        if year is None:
            year = date.today().year

        with ApiHolidayProvider(cfg.holiday_api_url, cfg.request_timeout) as provider:
            session = CalculationSession(build_service(cfg, provider))
            with formatter.loading():
                report = session.calculate(month, year)

        if format in ("console", "both"):
            formatter.print_report(report)

        if format in ("json", "csv", "both"):
            exporter = ResultExporter(output_directory=cfg.output_directory)

            if format == "json":
                path = exporter.export_json(report, output)
                formatter.print_success(f"Result saved to {path}")
            elif format == "csv":
                path = exporter.export_csv(report, output)
                formatter.print_success(f"Result saved to {path}")
            else:  # both
                json_path, csv_path = exporter.export_both(report, output)
                formatter.print_success(f"Results saved to:\n  - {json_path}\n  - {csv_path}")

    except InvalidInput as e:
        formatter.print_error(str(e))
        sys.exit(1)
    except (FetchError, MalformedData) as e:
        formatter.print_error(f"Holiday data unavailable: {e}")
        sys.exit(1)
    except ValueError as e:
        formatter.print_error(str(e))
        sys.exit(1)
    except Exception as e:
        formatter.print_error(f"Unexpected error: {e}")
        if verbose:
            logger.exception("Detailed error:")
        sys.exit(1)


@main.command()
@click.argument("month")
@click.argument("year", required=False)
@click.option(
    "--output", "-o",
    type=click.Path(),
    help="Output CSV file path (optional)",
)
@language_option
@config_option
@verbose_option
def holidays(month, year, output, language, config, verbose):
    """List every holiday of MONTH in YEAR, national or not."""
    if verbose:
        logging.getLogger().setLevel(logging.DEBUG)

    formatter = ConsoleFormatter(language=language or "id")

    try:
        cfg = load_config(config)
        formatter = ConsoleFormatter(language=language or cfg.language)

        if year is None:
            year = date.today().year

        month_num = parse_month(month)
        with ApiHolidayProvider(cfg.holiday_api_url, cfg.request_timeout) as provider:
            service = build_service(cfg, provider)
            with formatter.loading():
                holiday_list = service.holidays(month_num, year)

        formatter.print_holidays(month_num, int(year), holiday_list)

        if output:
            exporter = ResultExporter(output_directory=cfg.output_directory)
            path = exporter.export_holidays_csv(holiday_list, output)
            formatter.print_success(f"Holidays saved to {path}")

    except Exception as e:
        formatter.print_error(str(e))
        if verbose:
            logger.exception("Detailed error:")
        sys.exit(1)


@main.command()
@language_option
@config_option
def years(language, config):
    """List the selectable years, centred on the current year."""
    formatter = ConsoleFormatter(language=language or "id")

    try:
        cfg = load_config(config)
    except ValueError as e:
        formatter.print_error(str(e))
        sys.exit(1)

    formatter = ConsoleFormatter(language=language or cfg.language)
    formatter.print_year_options(year_options(), date.today().year)


@main.command()
@click.option(
    "--host", "-h",
    default=None,
    help="Host to bind to (default: from config or 0.0.0.0)",
)
@click.option(
    "--port", "-p",
    type=int,
    default=None,
    help="Port to bind to (default: from config or 8000)",
)
@config_option
def serve(host, port, config):
    """Start the FastAPI server."""
    formatter = ConsoleFormatter()

    try:
        import uvicorn

        cfg = load_config(config)

        # Use provided values or fall back to config
        api_host = host or cfg.api_host
        api_port = port or cfg.api_port

        formatter.console.print(f"Starting API server at http://{api_host}:{api_port}")
        formatter.console.print("Press Ctrl+C to stop")
        formatter.console.print()

        uvicorn.run(
            "working_days.api:app",
            host=api_host,
            port=api_port,
            reload=False,
        )

    except ImportError:
        formatter.print_error("uvicorn is required for the API server. Install it with: pip install uvicorn")
        sys.exit(1)
    except Exception as e:
        formatter.print_error(f"Error starting server: {e}")
        sys.exit(1)


if __name__ == "__main__":
    main()
