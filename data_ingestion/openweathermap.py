"""
OpenWeatherMap One Call API 3.0 client.

Requires an API key (OPENWEATHERMAP_API_KEY).
"""

import json
import logging
from typing import List, Optional, Union

import httpx

from models.weather import WeatherResponse
from utils.errors import ConfigError, UpstreamError

logger = logging.getLogger(__name__)

ONECALL_URL = "https://api.openweathermap.org/data/3.0/onecall"
EXCLUDE_BLOCKS = "minutely,hourly,alerts"

Coordinate = Union[str, List[str]]


class OpenWeatherMapClient:
    """Fetches current conditions and the daily summary for a location."""

    def __init__(
        self,
        api_key: Optional[str],
        timeout: float = 30.0,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        if not api_key:
            raise ConfigError("OPENWEATHERMAP_API_KEY environment variable is not set")
        self.api_key = api_key
        self.timeout = timeout
        self._transport = transport

    async def get_current_weather(
        self, lat: Coordinate, lon: Coordinate, units: str = "metric"
    ) -> WeatherResponse:
        lat_str = lat[0] if isinstance(lat, list) else lat
        lon_str = lon[0] if isinstance(lon, list) else lon

        params = {
            "lat": lat_str,
            "lon": lon_str,
            "units": units,
            "exclude": EXCLUDE_BLOCKS,
            "appid": self.api_key,
        }
        logger.info(f"Fetching OpenWeatherMap data for {lat_str},{lon_str} ({units})")

        async with httpx.AsyncClient(timeout=self.timeout, transport=self._transport) as client:
            response = await client.get(ONECALL_URL, params=params)

        if not response.is_success:
            try:
                error_body = json.dumps(response.json(), separators=(",", ":"))
            except ValueError:
                error_body = json.dumps(response.text)
            raise UpstreamError(
                f"Failed to fetch weather data: {error_body}",
                status_code=response.status_code,
            )

        return WeatherResponse(**response.json())
