"""
Process-wide configuration.

Values come from the environment (optionally a ``.env`` file loaded by
python-dotenv in ``main.py``) and are read exactly once. Routers receive the
settings through ``Depends(get_settings)``; nothing else reads ``os.environ``.
"""

import os
from functools import lru_cache
from typing import Optional

from pydantic import BaseModel, Field


class Settings(BaseModel):
    """Read-only configuration shared by every request."""

    model_config = {"frozen": True}

    api_token: Optional[str] = Field(None, description="Shared secret expected in the x-api-token header")
    openweathermap_api_key: Optional[str] = Field(None, description="OpenWeatherMap One Call API key")
    debug: bool = Field(False, description="Enable debug mode and auto-reload")
    port: int = Field(8000, description="Port used when running main.py directly")
    upstream_timeout: float = Field(30.0, description="Timeout in seconds for upstream HTTP calls")

    @classmethod
    def from_env(cls) -> "Settings":
        return cls(
            api_token=os.getenv("API_TOKEN") or None,
            openweathermap_api_key=os.getenv("OPENWEATHERMAP_API_KEY") or None,
            debug=os.getenv("DEBUG", "false").lower() == "true",
            port=int(os.getenv("PORT", "8000")),
            upstream_timeout=float(os.getenv("UPSTREAM_TIMEOUT", "30")),
        )


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Return the settings instance, built on first use."""
    return Settings.from_env()
