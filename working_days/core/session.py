"""
Request state tracking for calculations started from a single UI surface.

A session keeps at most one result. Each calculation takes a ticket and only
the most recent ticket may write the session state, so a slow request that
finishes after a newer one is discarded instead of overwriting it.
"""

import logging
import threading
from typing import Optional

from working_days.core.service import MonthInput, WorkingDaysService, YearInput
from working_days.data.schemas import CalculationReport, RequestState

logger = logging.getLogger(__name__)


class CalculationSession:
    """Tracks the state of the latest calculation request."""

    def __init__(self, service: WorkingDaysService):
        self.service = service
        self._lock = threading.Lock()
        self._latest_ticket = 0
        self._state = RequestState.IDLE
        self._report: Optional[CalculationReport] = None
        self._error: Optional[Exception] = None

    @property
    def state(self) -> RequestState:
        return self._state

    @property
    def report(self) -> Optional[CalculationReport]:
        """Report of the latest successful request, if any."""
        return self._report

    @property
    def error(self) -> Optional[Exception]:
        """Error of the latest failed request, if any."""
        return self._error

    @property
    def is_busy(self) -> bool:
        return self._state == RequestState.LOADING

    def begin(self) -> int:
        """Start a new request and return its ticket."""
        with self._lock:
            self._latest_ticket += 1
            self._state = RequestState.LOADING
            self._error = None
            return self._latest_ticket

    def complete(self, ticket: int, report: CalculationReport) -> bool:
        """
        Record a successful result.

        Returns:
            False if the ticket was superseded and the result was discarded.
        """
        with self._lock:
            if ticket != self._latest_ticket:
                logger.debug(f"Discarding stale result for request {ticket}")
                return False
            self._state = RequestState.SUCCEEDED
            self._report = report
            self._error = None
            return True

    def fail(self, ticket: int, error: Exception) -> bool:
        """
        Record a failed request.

        Returns:
            False if the ticket was superseded and the error was discarded.
        """
        with self._lock:
            if ticket != self._latest_ticket:
                logger.debug(f"Discarding stale error for request {ticket}: {error}")
                return False
            self._state = RequestState.FAILED
            self._report = None
            self._error = error
            return True

    def calculate(self, month: MonthInput, year: YearInput) -> CalculationReport:
        """
        Run a calculation through the service and record its outcome.

        Errors are recorded on the session and re-raised to the caller.
        """
        ticket = self.begin()
        try:
            report = self.service.calculate(month, year)
        except Exception as e:
            self.fail(ticket, e)
            raise
        self.complete(ticket, report)
        return report
