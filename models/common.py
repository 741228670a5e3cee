"""Pydantic models shared by every endpoint."""

from typing import Union

from pydantic import BaseModel, Field

# Keeps integers from upstream JSON as integers instead of coercing to float.
Number = Union[int, float]


class ValidationFailure(BaseModel):
    """A failed request check, returned to the client as ``{"error": ...}``."""

    status: int = Field(..., description="HTTP status code to respond with")
    error: str = Field(..., description="Client-facing error message")


class ErrorResponse(BaseModel):
    """Body of a 4xx response."""

    error: str = Field(..., description="Error message")

    class Config:
        json_schema_extra = {
            "example": {"error": "Unauthorized: Invalid or missing API token"}
        }


class InternalErrorResponse(BaseModel):
    """Body of a 500 response raised while processing a request."""

    error: str = Field("Internal server error", description="Error type")
    message: str = Field(..., description="Detailed error message")

    class Config:
        json_schema_extra = {
            "example": {
                "error": "Internal server error",
                "message": "NWS API error getting grid point: 404",
            }
        }
