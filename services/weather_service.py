"""
Formatting for OpenWeatherMap One Call data.

Produces a short title/message pair suitable for a notification or widget.
"""

import logging
from typing import List, Union

from data_ingestion.openweathermap import OpenWeatherMapClient
from models.weather import WeatherOutput, WeatherResponse
from utils.formatting import round_half_up

logger = logging.getLogger(__name__)

DEFAULT_UNITS = "metric"


def format_weather(data: WeatherResponse) -> WeatherOutput:
    current = data.current
    today = data.daily[0]

    temperature = round_half_up(current.temp)
    feels_like = round_half_up(current.feels_like)
    title = f"{temperature}° and {current.weather[0].description}. Feels like {feels_like}°."

    high = round_half_up(today.temp.max)
    low = round_half_up(today.temp.min)
    message = f"Today: High {high}°, low {low}°, {today.weather[0].description}"

    return WeatherOutput(
        icon=f"{temperature}°",
        message=message,
        title=title,
        temperature=temperature,
    )


async def get_weather_summary(
    lat: Union[str, List[str]],
    lon: Union[str, List[str]],
    units: str,
    client: OpenWeatherMapClient,
) -> WeatherOutput:
    data = await client.get_current_weather(lat, lon, units)
    logger.debug(f"Formatting OpenWeatherMap data for {lat},{lon}")
    return format_weather(data)
