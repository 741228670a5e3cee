"""
Weather router.

Current conditions and today's summary from OpenWeatherMap.
"""

import logging
from typing import List

from fastapi import APIRouter, Depends, Query, Request

from data_ingestion.openweathermap import OpenWeatherMapClient
from models.weather import WeatherOutput
from services.weather_service import DEFAULT_UNITS, get_weather_summary
from utils.config import Settings, get_settings
from utils.endpoint import ERROR_RESPONSES, OTHER_METHODS, RequestContext, handle_request

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api", tags=["Weather"])

REQUIRED_PARAMS: List[str] = ["lat", "lon"]


@router.get(
    "/weather",
    response_model=WeatherOutput,
    summary="Get current weather",
    description="Current temperature and conditions plus today's high and low, from OpenWeatherMap.",
    responses=ERROR_RESPONSES,
)
@router.api_route("/weather", methods=OTHER_METHODS, include_in_schema=False)
async def get_weather(
    request: Request,
    lat: str = Query(None, description="Latitude in decimal degrees"),
    lon: str = Query(None, description="Longitude in decimal degrees"),
    units: str = Query(DEFAULT_UNITS, description="metric or imperial"),
    settings: Settings = Depends(get_settings),
):
    """Get current weather for a location."""

    async def process(context: RequestContext) -> WeatherOutput:
        client = OpenWeatherMapClient(settings.openweathermap_api_key, timeout=settings.upstream_timeout)
        return await get_weather_summary(
            context.query["lat"],
            context.query["lon"],
            context.first("units", DEFAULT_UNITS),
            client,
        )

    context = RequestContext.from_request(request)
    return await handle_request(context, settings, REQUIRED_PARAMS, process, name="weather")
