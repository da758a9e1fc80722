"""
Configuration loading for the working days calculator.
"""

from working_days.config.manager import ConfigManager

__all__ = ["ConfigManager"]
