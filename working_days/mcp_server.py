"""
MCP Server for the Working Days Calculator.

This module provides an MCP (Model Context Protocol) server that exposes
the working days calculator to MCP clients.

Supports two transport modes:
- stdio: For local desktop integration
- sse: For HTTP-based integration (Docker, remote servers)
"""

import argparse
import logging
import os
from datetime import date
from typing import Union

from mcp.server.fastmcp import FastMCP

from working_days.config.manager import ConfigManager
from working_days.core.calculator import WorkingDaysCalculator
from working_days.core.errors import FetchError, InvalidInput, MalformedData
from working_days.core.holiday_provider import ApiHolidayProvider
from working_days.core.service import WorkingDaysService, parse_month, parse_year, year_options
from working_days.output.exporter import holiday_to_dict, report_to_dict
from working_days.output.formatter import headline

logger = logging.getLogger(__name__)

# Load configuration
config_manager = ConfigManager()
config = config_manager.load_config()

# Initialize components
holiday_provider = ApiHolidayProvider(config.holiday_api_url, config.request_timeout)
calculator = WorkingDaysCalculator(min_year=config.min_year, year_margin=config.year_margin)
service = WorkingDaysService(holiday_provider, calculator)


def calculate_working_days(month: Union[int, str], year: Union[int, str]) -> dict:
    """
    Calculate the number of working days in a month.

    Working days are Monday to Friday, minus national holidays that fall
    on a weekday. Holidays on a weekend do not reduce the count.

    Args:
        month: Month number (1-12) or month name in English or Indonesian
               (e.g., 8, "August", "Agustus")
        year: Four-digit year (e.g., 2024)

    Returns:
        Dictionary with:
        - calculation: calendar_days, weekday_count, national_holiday_count,
          total_working_days
        - national_holidays_on_weekdays: holidays that were subtracted
        - all_holidays: every holiday returned by the holiday API
        - summary: one-line summary in the configured language

    Example:
        >>> calculate_working_days(12, 2024)
    """
    try:
        report = service.calculate(month, year)
    except InvalidInput as e:
        return {"error": str(e)}
    except (FetchError, MalformedData) as e:
        logger.error(f"Holiday data unavailable: {e}")
        return {"error": f"Holiday data unavailable: {e}"}

    body = report_to_dict(report)
    body["summary"] = headline(report.result, config.language)
    return body


def get_holidays(month: Union[int, str], year: Union[int, str]) -> dict:
    """
    Get every holiday of a month, national or regional.

    Args:
        month: Month number (1-12) or month name
        year: Four-digit year

    Returns:
        Dictionary with the month number, year, holiday_count and holidays list.
    """
    try:
        month_num = parse_month(month)
        year_num = parse_year(year)
        holidays = service.holidays(month_num, year_num)
    except InvalidInput as e:
        return {"error": str(e)}
    except (FetchError, MalformedData) as e:
        logger.error(f"Holiday data unavailable: {e}")
        return {"error": f"Holiday data unavailable: {e}"}

    return {
        "month": month_num,
        "year": year_num,
        "holiday_count": len(holidays),
        "holidays": [holiday_to_dict(h) for h in holidays],
    }


def list_year_options() -> dict:
    """
    List the selectable years, centred on the current year (newest first).
    """
    return {"current_year": date.today().year, "years": year_options()}


def create_mcp_server(host: str = "127.0.0.1", port: int = 8000) -> FastMCP:
    """Create and configure the MCP server with tools."""
    mcp = FastMCP("Working Days Calculator", host=host, port=port)

    mcp.tool()(calculate_working_days)
    mcp.tool()(get_holidays)
    mcp.tool()(list_year_options)

    return mcp


def main():
    """Run the MCP server with configurable transport.

    Transport can be set via:
    - Command line: --transport sse --port 8080
    - Environment: MCP_TRANSPORT=sse MCP_PORT=8080 MCP_HOST=0.0.0.0
    """
    parser = argparse.ArgumentParser(description="Working Days Calculator MCP Server")
    parser.add_argument(
        "--transport",
        choices=["stdio", "sse"],
        default=os.environ.get("MCP_TRANSPORT", "stdio"),
        help="Transport mode: stdio (default) or sse for HTTP",
    )
    parser.add_argument(
        "--host",
        default=os.environ.get("MCP_HOST", os.environ.get("FASTMCP_HOST", "0.0.0.0")),
        help="Host to bind to (SSE mode only, default: 0.0.0.0)",
    )
    parser.add_argument(
        "--port",
        type=int,
        default=int(os.environ.get("MCP_PORT", os.environ.get("FASTMCP_PORT", "8080"))),
        help="Port to listen on (SSE mode only, default: 8080)",
    )
    parser.add_argument(
        "--debug",
        action="store_true",
        help="Enable debug logging",
    )

    args = parser.parse_args()

    logging.basicConfig(
        level=logging.DEBUG if args.debug else logging.INFO,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )

    # Create MCP server with configured host/port
    mcp = create_mcp_server(host=args.host, port=args.port)

    logger.info(f"Starting MCP server with {args.transport} transport")
    if args.transport == "sse":
        # Run with SSE transport for HTTP access
        mcp.run(transport="sse")
    else:
        # Run with stdio transport
        mcp.run(transport="stdio")


if __name__ == "__main__":
    main()
