"""
National Weather Service (api.weather.gov) hourly forecast client.

Two steps: resolve lat/lon to a forecast grid point, then fetch the hourly
forecast for that grid. The API requires a User-Agent header.
"""

import logging
from typing import List, Optional, Union

import httpx

from models.nws import NWSForecastResponse, NWSPointsResponse
from utils.errors import UpstreamError

logger = logging.getLogger(__name__)

NWS_BASE_URL = "https://api.weather.gov"
USER_AGENT = "weather-api"

Coordinate = Union[str, List[str]]


def _first(value: Coordinate) -> str:
    """Repeated query parameters arrive as lists; use the first value."""
    return value[0] if isinstance(value, list) else value


class NWSClient:
    """Fetches hourly forecasts from api.weather.gov."""

    def __init__(self, timeout: float = 30.0, transport: Optional[httpx.AsyncBaseTransport] = None):
        self.base_url = NWS_BASE_URL
        self.timeout = timeout
        self._transport = transport

    async def get_hourly_forecast(self, lat: Coordinate, lon: Coordinate) -> NWSForecastResponse:
        lat_str = _first(lat)
        lon_str = _first(lon)
        headers = {"User-Agent": USER_AGENT}

        async with httpx.AsyncClient(timeout=self.timeout, transport=self._transport, headers=headers) as client:
            logger.info(f"Resolving NWS grid point for {lat_str},{lon_str}")
            points_res = await client.get(f"{self.base_url}/points/{lat_str},{lon_str}")
            if not points_res.is_success:
                raise UpstreamError(
                    f"NWS API error getting grid point: {points_res.status_code}",
                    status_code=points_res.status_code,
                )

            grid = NWSPointsResponse(**points_res.json()).properties
            logger.info(f"Fetching hourly forecast for {grid.gridId}/{grid.gridX},{grid.gridY}")

            forecast_res = await client.get(
                f"{self.base_url}/gridpoints/{grid.gridId}/{grid.gridX},{grid.gridY}/forecast/hourly"
            )
            if not forecast_res.is_success:
                raise UpstreamError(
                    f"NWS API error getting hourly forecast: {forecast_res.status_code}",
                    status_code=forecast_res.status_code,
                )

        return NWSForecastResponse(**forecast_res.json())
