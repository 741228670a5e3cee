import logging
from contextlib import asynccontextmanager
from typing import Dict, Any

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from dotenv import load_dotenv

from routers.metar import router as metar_router
from routers.nws import router as nws_router
from routers.weather import router as weather_router
from utils.config import get_settings

# Load environment variables
load_dotenv()

# Configure logging
logging.basicConfig(
    level=logging.INFO,
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
)
logging.getLogger("httpx").setLevel(logging.WARNING)

logger = logging.getLogger(__name__)

VERSION = "1.0.0"


def _add_cors(application: FastAPI):
    """Add CORS middleware to an app."""
    application.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )


@asynccontextmanager
async def lifespan(main_app: FastAPI):
    """Application lifespan events"""
    settings = get_settings()
    logger.info("Weather Gateway API starting up...")

    if not settings.api_token:
        logger.warning("API_TOKEN is not set; every /api request will fail with 500")
    if not settings.openweathermap_api_key:
        logger.warning("OPENWEATHERMAP_API_KEY is not set; /api/weather will fail with 500")

    yield

    logger.info("Weather Gateway API shutting down...")


app = FastAPI(
    title="Weather Gateway API",
    description=(
        "## Weather Gateway API\n\n"
        "Token-authenticated access to simplified weather data:\n\n"
        "- **METAR** — Current airport observations via Garmin pilotweb\n"
        "- **NWS** — Hourly forecast periods from the US National Weather Service\n"
        "- **Weather** — Current conditions and today's summary from OpenWeatherMap\n\n"
        "Every `/api` endpoint requires the `x-api-token` header."
    ),
    version=VERSION,
    lifespan=lifespan,
    openapi_version="3.0.2",
)
_add_cors(app)

app.include_router(metar_router)
app.include_router(nws_router)
app.include_router(weather_router)


# ── Root-level endpoints ──────────────────────────────────────────────────────

@app.get("/")
async def root() -> Dict[str, Any]:
    """API information"""
    return {
        "name": "Weather Gateway API",
        "version": VERSION,
        "status": "operational",
        "endpoints": ["/api/metar", "/api/nws-current", "/api/nws-forecast", "/api/weather"],
        "documentation": "/docs",
    }


@app.get("/health")
async def health_check() -> Dict[str, str]:
    """Simple health check endpoint"""
    return {"status": "healthy", "version": VERSION}


# Application entry point
if __name__ == "__main__":
    import uvicorn
    settings = get_settings()
    uvicorn.run(
        "main:app",
        host="0.0.0.0",
        port=settings.port,
        reload=settings.debug,
        access_log=settings.debug
    )
