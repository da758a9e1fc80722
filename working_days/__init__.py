"""
Working Days Calculator - count working days in a month, excluding weekends
and national holidays.
"""

__version__ = "0.1.0"
