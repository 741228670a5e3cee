"""
Garmin pilotweb client: airport lookup and METAR by coordinates.

Free, no authentication required. Returns JSON.
"""

import logging
from typing import Optional

import httpx

from models.common import Number
from models.metar import AirportResponse, MetarResponse
from utils.errors import UpstreamError

logger = logging.getLogger(__name__)

GARMIN_BASE_URL = "https://pilotweb.garmin.com/api/v1"


class GarminClient:
    """Fetches airport and METAR data from Garmin pilotweb."""

    def __init__(self, timeout: float = 30.0, transport: Optional[httpx.AsyncBaseTransport] = None):
        self.base_url = GARMIN_BASE_URL
        self.timeout = timeout
        self._transport = transport

    def _client(self) -> httpx.AsyncClient:
        return httpx.AsyncClient(timeout=self.timeout, transport=self._transport)

    async def get_airport_info(self, airport_id: str) -> AirportResponse:
        """Look up an airport by identifier."""
        url = f"{self.base_url}/airports/{airport_id}"
        logger.info(f"Fetching airport info for {airport_id}")

        async with self._client() as client:
            response = await client.get(url)

        if not response.is_success:
            raise UpstreamError(
                f"Failed to fetch airport data: {response.text}",
                status_code=response.status_code,
            )

        return AirportResponse(**response.json())

    async def get_metar(self, lat: Number, lon: Number) -> MetarResponse:
        """Fetch the METAR nearest to the given coordinates."""
        url = f"{self.base_url}/wx/metar"
        params = {"lat": str(lat), "lon": str(lon)}
        logger.info(f"Fetching METAR near {lat},{lon}")

        async with self._client() as client:
            response = await client.get(url, params=params)

        if not response.is_success:
            raise UpstreamError(
                f"Failed to fetch METAR data: {response.text}",
                status_code=response.status_code,
            )

        return MetarResponse(**response.json())
