"""Exceptions raised while processing a request.

Client mistakes (bad method, token or parameters) are not exceptions; the
validation middleware returns them as ``ValidationFailure`` values. Everything
here ends up as a 500 response.
"""

from typing import Optional


class GatewayError(Exception):
    """Base class for server-side failures."""


class ConfigError(GatewayError):
    """A required setting is missing from the deployment."""


class UpstreamError(GatewayError):
    """An upstream provider answered with a non-success status."""

    def __init__(self, message: str, status_code: Optional[int] = None):
        super().__init__(message)
        self.status_code = status_code


class DataShapeError(GatewayError):
    """An upstream payload is missing data we need."""
