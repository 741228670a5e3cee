"""
Formatting for National Weather Service hourly forecast periods.

The NWS start times already carry local wall-clock time with a UTC offset,
so times are read straight out of the string without converting zones.
"""

import logging
import re
from typing import List, Union

from data_ingestion.nws import NWSClient
from models.nws import NWSForecastPeriod, NWSHourlyPeriod
from utils.errors import DataShapeError

logger = logging.getLogger(__name__)

_TIME_RE = re.compile(r"T(\d{2}):(\d{2})")
_DATETIME_RE = re.compile(r"^(\d{4})-(\d{2})-(\d{2})T(\d{2}):(\d{2})")


def _to_12_hour(hour: int, minute: str) -> str:
    ampm = "PM" if hour >= 12 else "AM"
    hour12 = hour % 12 or 12
    return f"{hour12:02d}:{minute} {ampm}"


def format_time(iso_string: str) -> str:
    """``2026-02-27T13:00:00-05:00`` -> ``01:00 PM``."""
    match = _TIME_RE.search(iso_string)
    if not match:
        return iso_string

    return _to_12_hour(int(match.group(1)), match.group(2))


def format_datetime(iso_string: str) -> str:
    """``2026-02-27T13:00:00-05:00`` -> ``02/27/2026 01:00 PM``."""
    match = _DATETIME_RE.match(iso_string)
    if not match:
        return iso_string

    year, month, day, hour, minute = match.groups()
    return f"{month}/{day}/{year} {_to_12_hour(int(hour), minute)}"


def sentence_case(text: str) -> str:
    lowered = text.lower()
    return lowered[:1].upper() + lowered[1:]


def format_period(period: NWSForecastPeriod) -> NWSHourlyPeriod:
    """Map a raw forecast period to the output shared by both NWS endpoints."""
    return NWSHourlyPeriod(
        start_time=period.startTime,
        start_time_formatted_time=format_time(period.startTime),
        start_time_formatted_datetime=format_datetime(period.startTime),
        is_daytime=period.isDaytime,
        temperature=period.temperature,
        temperature_unit=period.temperatureUnit,
        wind_speed=period.windSpeed,
        wind_direction=period.windDirection,
        short_forecast=sentence_case(period.shortForecast),
        probability_of_precipitation=period.probabilityOfPrecipitation.value,
        relative_humidity=period.relativeHumidity.value,
    )


async def get_current_period(
    lat: Union[str, List[str]], lon: Union[str, List[str]], client: NWSClient
) -> NWSHourlyPeriod:
    """Format the nearest-term hourly period; later periods are dropped."""
    forecast = await client.get_hourly_forecast(lat, lon)
    periods = forecast.properties.periods

    if not periods:
        raise DataShapeError("NWS hourly forecast contained no periods")

    return format_period(periods[0])
