"""
Holiday providers backed by a remote holiday API.
"""

import logging
from abc import ABC, abstractmethod
from typing import Any, List, Optional

import httpx
from pydantic import ValidationError

from working_days.core.errors import FetchError, MalformedData
from working_days.data.schemas import HolidayRecord

logger = logging.getLogger(__name__)

DEFAULT_API_URL = "https://api-harilibur.vercel.app/api"


class HolidayProvider(ABC):
    """Supplies the holiday records of one month."""

    @abstractmethod
    def fetch(self, month: int, year: int) -> List[HolidayRecord]:
        """
        Fetch holidays for a month.

        Args:
            month: Month number (1-12).
            year: Four-digit year.

        Returns:
            List of HolidayRecord objects.

        Raises:
            FetchError: If the data cannot be retrieved.
            MalformedData: If a record is missing required fields.
        """


def parse_holidays(payload: Any) -> List[HolidayRecord]:
    """
    Validate a decoded JSON payload into holiday records.

    Args:
        payload: Decoded response body, expected to be a JSON array.

    Returns:
        List of HolidayRecord objects in payload order.

    Raises:
        MalformedData: If the payload is not a list or an item is invalid.
    """
    if not isinstance(payload, list):
        raise MalformedData(
            f"Expected a JSON array of holidays, got {type(payload).__name__}"
        )

    records = []
    for index, item in enumerate(payload):
        try:
            records.append(HolidayRecord.model_validate(item))
        except ValidationError as e:
            raise MalformedData(f"Invalid holiday record at index {index}: {e}", index=index) from e
    return records


class ApiHolidayProvider(HolidayProvider):
    """Fetches holidays over HTTP from an api-harilibur compatible endpoint."""

    def __init__(
        self,
        base_url: str = DEFAULT_API_URL,
        timeout: float = 10,
        client: Optional[httpx.Client] = None,
    ):
        """
        Initialize the API holiday provider.

        Args:
            base_url: Endpoint receiving ``month`` and ``year`` query parameters.
            timeout: Request timeout in seconds.
            client: Optional preconfigured httpx client. The provider only
                closes clients it created itself.
        """
        self.base_url = base_url
        self.timeout = timeout
        self._owns_client = client is None
        self._client = client or httpx.Client(timeout=timeout)

    def fetch(self, month: int, year: int) -> List[HolidayRecord]:
        params = {"month": month, "year": year}
        logger.info(f"Fetching holidays for {year}-{month:02d} from {self.base_url}")

        try:
            response = self._client.get(self.base_url, params=params, timeout=self.timeout)
        except httpx.HTTPError as e:
            raise FetchError(f"Failed to fetch holiday data: {e}") from e

        if not response.is_success:
            raise FetchError(
                f"Failed to fetch holiday data: HTTP {response.status_code}",
                status_code=response.status_code,
            )

        try:
            payload = response.json()
        except ValueError as e:
            raise MalformedData(f"Holiday API returned invalid JSON: {e}") from e

        records = parse_holidays(payload)
        logger.debug(f"Received {len(records)} holiday records for {year}-{month:02d}")
        return records

    def close(self) -> None:
        """Close the underlying HTTP client if this provider created it."""
        if self._owns_client:
            self._client.close()

    def __enter__(self) -> "ApiHolidayProvider":
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()
