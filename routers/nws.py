"""
National Weather Service routers.

``/api/nws-current`` and ``/api/nws-forecast`` both return the nearest-term
hourly period for a location in the same output shape.
"""

import logging
from typing import List

from fastapi import APIRouter, Depends, Query, Request

from data_ingestion.nws import NWSClient
from models.nws import NWSHourlyPeriod
from services.nws_service import get_current_period
from utils.config import Settings, get_settings
from utils.endpoint import ERROR_RESPONSES, OTHER_METHODS, RequestContext, handle_request

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api", tags=["NWS"])

REQUIRED_PARAMS: List[str] = ["lat", "lon"]


def _process_with(settings: Settings):
    async def process(context: RequestContext) -> NWSHourlyPeriod:
        client = NWSClient(timeout=settings.upstream_timeout)
        return await get_current_period(context.query["lat"], context.query["lon"], client)

    return process


@router.get(
    "/nws-current",
    response_model=NWSHourlyPeriod,
    summary="Get current NWS conditions",
    description="Returns the current hourly forecast period from api.weather.gov. US locations only.",
    responses=ERROR_RESPONSES,
)
@router.api_route("/nws-current", methods=OTHER_METHODS, include_in_schema=False)
async def get_nws_current(
    request: Request,
    lat: str = Query(None, description="Latitude in decimal degrees"),
    lon: str = Query(None, description="Longitude in decimal degrees"),
    settings: Settings = Depends(get_settings),
):
    context = RequestContext.from_request(request)
    return await handle_request(context, settings, REQUIRED_PARAMS, _process_with(settings), name="nws-current")


@router.get(
    "/nws-forecast",
    response_model=NWSHourlyPeriod,
    summary="Get the next NWS hourly forecast period",
    description=(
        "Resolves the location to an NWS grid point and returns the first hourly forecast "
        "period. US locations only."
    ),
    responses=ERROR_RESPONSES,
)
@router.api_route("/nws-forecast", methods=OTHER_METHODS, include_in_schema=False)
async def get_nws_forecast(
    request: Request,
    lat: str = Query(None, description="Latitude in decimal degrees"),
    lon: str = Query(None, description="Longitude in decimal degrees"),
    settings: Settings = Depends(get_settings),
):
    context = RequestContext.from_request(request)
    return await handle_request(context, settings, REQUIRED_PARAMS, _process_with(settings), name="nws-forecast")
