"""
Shared request lifecycle for every ``/api`` endpoint.

method check -> auth check -> required parameter check -> process.
The first failing check answers the request. Anything raised while
processing becomes a 500 with a generic ``Internal server error`` body.
"""

import logging
from dataclasses import dataclass, field
from typing import Any, Awaitable, Callable, Dict, Optional, Sequence

from fastapi import Request, status
from fastapi.encoders import jsonable_encoder
from fastapi.responses import JSONResponse

from models.common import ErrorResponse, InternalErrorResponse
from utils.config import Settings
from utils.middleware import (
    HeaderValue,
    QueryValue,
    validate_auth,
    validate_method,
    validate_params,
)

logger = logging.getLogger(__name__)

# Routed to the same handler as GET (hidden from the docs) so wrong methods
# get the 405 body from validate_method.
OTHER_METHODS = ["POST", "PUT", "PATCH", "DELETE", "HEAD", "OPTIONS"]

ERROR_RESPONSES = {
    400: {"model": ErrorResponse, "description": "Missing required parameters"},
    401: {"model": ErrorResponse, "description": "Invalid or missing API token"},
    405: {"model": ErrorResponse, "description": "Method not allowed"},
    500: {"model": InternalErrorResponse, "description": "Configuration error or upstream failure"},
}


@dataclass
class RequestContext:
    """The parts of an HTTP request the endpoints look at."""

    method: Optional[str]
    headers: Dict[str, HeaderValue] = field(default_factory=dict)
    query: Dict[str, QueryValue] = field(default_factory=dict)

    @classmethod
    def from_request(cls, request: Request) -> "RequestContext":
        """Collapse single values to strings; repeated keys become lists."""
        headers: Dict[str, HeaderValue] = {}
        for key in request.headers.keys():
            values = request.headers.getlist(key)
            headers[key] = values[0] if len(values) == 1 else values

        query: Dict[str, QueryValue] = {}
        for key in request.query_params.keys():
            values = request.query_params.getlist(key)
            query[key] = values[0] if len(values) == 1 else values

        return cls(method=request.method, headers=headers, query=query)

    def first(self, name: str, default: Optional[str] = None) -> Optional[str]:
        """Query value as a single string (first element for repeated keys)."""
        value = self.query.get(name)
        if isinstance(value, list):
            return value[0] if value else default
        return default if value is None else value


ProcessFn = Callable[[RequestContext], Awaitable[Any]]


def error_message(exc: BaseException) -> str:
    """The exception's own text, or ``"Unknown error"`` when it carries none."""
    return str(exc) or "Unknown error"


async def handle_request(
    context: RequestContext,
    settings: Settings,
    required_params: Sequence[str],
    process: ProcessFn,
    name: str = "endpoint",
) -> JSONResponse:
    """Run the validation chain, then ``process``, and wrap the result."""
    try:
        failure = validate_method(context.method)
        if failure is None:
            failure = validate_auth(context.headers, settings)
        if failure is None and len(required_params) > 0:
            failure = validate_params(context.query, required_params)

        if failure is not None:
            logger.info(f"{name}: rejected request with {failure.status}: {failure.error}")
            return JSONResponse(status_code=failure.status, content={"error": failure.error})

        data = await process(context)
        return JSONResponse(status_code=status.HTTP_200_OK, content=jsonable_encoder(data))

    except Exception as e:
        logger.exception(f"Error in {name}: {e}")
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={"error": "Internal server error", "message": error_message(e)},
        )
