"""
METAR formatting.

Turns a Garmin METAR record into the simplified METAR output with
human readable sky condition and wind descriptions.
"""

import logging
import re
from datetime import datetime
from typing import Any, Optional, Tuple

from data_ingestion.garmin import GarminClient
from models.common import Number
from models.metar import AirportResponse, CloudLayer, MetarData, MetarOutput, SkyCondition, Wind
from utils.errors import DataShapeError
from utils.formatting import format_fixed, format_number, round_half_up

logger = logging.getLogger(__name__)

DEFAULT_AIRPORT_ID = "KUMP"

# Coverage code -> long form. Codes not listed are shown as reported.
_COVER_NAMES = {
    "SCT": "Scattered",
    "BKN": "Broken",
    "OVC": "Overcast",
    "FEW": "Few",
}

_LEADING_INT = re.compile(r"\s*([+-]?\d+)")


def resolve_airport_id(value: Any) -> str:
    """Upper-case the requested airport, falling back to KUMP."""
    if not isinstance(value, str):
        return DEFAULT_AIRPORT_ID
    return value.upper()


def extract_coordinates(airport_data: AirportResponse, airport_id: str) -> Tuple[Number, Number]:
    entry = airport_data.AirportEntry
    airport = entry.CcAirportInfoList[0] if entry and entry.CcAirportInfoList else None

    if airport is None or airport.latDeg is None or airport.lonDeg is None:
        raise DataShapeError(f"Airport coordinates not found for {airport_id}")

    return airport.latDeg, airport.lonDeg


def format_observation_time(issue_time: int) -> str:
    """Unix seconds -> ``HH:MM L`` in the server's local time zone."""
    observed = datetime.fromtimestamp(issue_time)
    return f"{observed.hour:02d}:{observed.minute:02d} L"


def format_sky_condition(layer: CloudLayer) -> SkyCondition:
    base = round_half_up(layer.height)

    if layer.type == "CLR":
        description = "Clear"
    else:
        cover_display = _COVER_NAMES.get(layer.type, layer.type)
        description = f"{cover_display} at {base}ft"

    return SkyCondition(base=base, cover=layer.type, description=description)


def format_wind_description(direction: Number, speed: Number) -> str:
    if direction == 0 and speed == 0:
        return "Wind calm"
    return f"{format_number(direction)}° at {format_number(speed)} kt"


def parse_visibility(raw: str) -> Optional[int]:
    """``"10SM"`` -> 10. Reports without a leading whole number give None."""
    match = _LEADING_INT.match(raw.replace("SM", "", 1))
    if not match:
        return None
    return int(match.group(1))


def format_metar(metar: MetarData) -> MetarOutput:
    return MetarOutput(
        altimeter=format_fixed(metar.pressure, 2),
        dewpoint=metar.dewPointC,
        id=metar.station,
        flight_category=metar.visibilityRating,
        observation_time=format_observation_time(metar.issueTime),
        raw_text=metar.rawReport,
        sky_conditions=[format_sky_condition(layer) for layer in metar.CloudLayers],
        temperature=metar.tempC,
        visibility=parse_visibility(metar.visibilityRaw),
        wind=Wind(
            description=format_wind_description(metar.windDir, metar.windSpeed),
            direction=metar.windDir,
            speed=metar.windSpeed,
        ),
    )


async def get_metar_report(airport_id: str, client: GarminClient) -> MetarOutput:
    """Look up the airport, then format the METAR reported nearest to it."""
    airport_data = await client.get_airport_info(airport_id)
    lat, lon = extract_coordinates(airport_data, airport_id)

    metar_response = await client.get_metar(lat, lon)
    logger.info(f"Formatting METAR from {metar_response.metar.station} for {airport_id}")
    return format_metar(metar_response.metar)
