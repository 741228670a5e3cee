"""
METAR router.

Current METAR for an airport, looked up through Garmin pilotweb.
"""

import logging
from typing import List

from fastapi import APIRouter, Depends, Query, Request

from data_ingestion.garmin import GarminClient
from models.metar import MetarOutput
from services.metar_service import get_metar_report, resolve_airport_id
from utils.config import Settings, get_settings
from utils.endpoint import ERROR_RESPONSES, OTHER_METHODS, RequestContext, handle_request

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api", tags=["METAR"])

# id is optional and defaults to KUMP
REQUIRED_PARAMS: List[str] = []


@router.get(
    "/metar",
    response_model=MetarOutput,
    summary="Get the current METAR for an airport",
    description=(
        "Looks up the airport's coordinates, then returns the nearest METAR with decoded "
        "sky conditions, wind and visibility.\n\n"
        "Requires the `x-api-token` header."
    ),
    responses=ERROR_RESPONSES,
)
@router.api_route("/metar", methods=OTHER_METHODS, include_in_schema=False)
async def get_metar(
    request: Request,
    airport_id: str = Query("KUMP", alias="id", description="Airport identifier (e.g. KUMP, KJFK)"),
    settings: Settings = Depends(get_settings),
):
    """Get the current METAR for an airport."""

    async def process(context: RequestContext) -> MetarOutput:
        airport_id = resolve_airport_id(context.query.get("id"))
        client = GarminClient(timeout=settings.upstream_timeout)
        return await get_metar_report(airport_id, client)

    context = RequestContext.from_request(request)
    return await handle_request(context, settings, REQUIRED_PARAMS, process, name="metar")
