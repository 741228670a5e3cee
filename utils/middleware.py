"""
Request checks run before every endpoint.

Each check returns ``None`` when the request passes, or a
``ValidationFailure`` carrying the status code and message to send back.
"""

import logging
from typing import List, Mapping, Optional, Sequence, Union

from fastapi import status

from models.common import ValidationFailure
from utils.config import Settings

logger = logging.getLogger(__name__)

API_TOKEN_HEADER = "x-api-token"

HeaderValue = Union[str, List[str]]
QueryValue = Optional[Union[str, List[str]]]


def validate_method(method: Optional[str]) -> Optional[ValidationFailure]:
    """Only GET is allowed."""
    if method != "GET":
        return ValidationFailure(
            status=status.HTTP_405_METHOD_NOT_ALLOWED,
            error="Method not allowed",
        )
    return None


def validate_auth(
    headers: Mapping[str, HeaderValue], settings: Settings
) -> Optional[ValidationFailure]:
    """
    Compare the ``x-api-token`` header with the configured token.

    A header sent more than once arrives as a list and is always rejected,
    even when one of the values is the right token.
    """
    api_token = settings.api_token
    request_token = headers.get(API_TOKEN_HEADER)

    if not api_token:
        logger.error("API_TOKEN is not configured; rejecting request")
        return ValidationFailure(
            status=status.HTTP_500_INTERNAL_SERVER_ERROR,
            error="Server configuration error: API token not set",
        )

    if not request_token or not isinstance(request_token, str) or request_token != api_token:
        return ValidationFailure(
            status=status.HTTP_401_UNAUTHORIZED,
            error="Unauthorized: Invalid or missing API token",
        )

    return None


def validate_params(
    query: Mapping[str, QueryValue], required_params: Sequence[str]
) -> Optional[ValidationFailure]:
    """Report every required parameter that is absent or empty, in declared order."""
    # Lists count as present whatever they contain.
    missing = [name for name in required_params if query.get(name) in (None, "")]

    if missing:
        return ValidationFailure(
            status=status.HTTP_400_BAD_REQUEST,
            error=f"Missing required parameters: {', '.join(missing)}",
        )

    return None
