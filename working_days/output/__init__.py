"""
Output formatting and export functionality.
"""

from working_days.output.formatter import ConsoleFormatter
from working_days.output.exporter import ResultExporter

__all__ = ["ConsoleFormatter", "ResultExporter"]
