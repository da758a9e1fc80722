"""
Exceptions raised by the working days calculator.
"""

from typing import Optional


class WorkingDaysError(Exception):
    """Base class for all working days errors."""


class InvalidInput(WorkingDaysError, ValueError):
    """Month or year outside the accepted bounds."""


class FetchError(WorkingDaysError):
    """Holiday data could not be retrieved from the holiday API."""

    def __init__(self, message: str, status_code: Optional[int] = None):
        super().__init__(message)
        self.status_code = status_code


class MalformedData(WorkingDaysError, ValueError):
    """The holiday API returned data that does not match the record shape."""

    def __init__(self, message: str, index: Optional[int] = None):
        super().__init__(message)
        self.index = index
