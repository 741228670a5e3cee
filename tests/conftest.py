import pytest
from fastapi.testclient import TestClient

from main import app
from utils.config import Settings, get_settings

TEST_TOKEN = "test-token"


@pytest.fixture
def settings():
    return Settings(api_token=TEST_TOKEN, openweathermap_api_key="test-owm-key")


@pytest.fixture
def client(settings):
    app.dependency_overrides[get_settings] = lambda: settings
    yield TestClient(app)
    app.dependency_overrides.clear()


@pytest.fixture
def auth_headers():
    return {"x-api-token": TEST_TOKEN}


@pytest.fixture
def airport_payload():
    return {
        "AirportEntry": {
            "CcAirportInfoList": [
                {
                    "code": "KUMP",
                    "name": "Indianapolis Metropolitan Airport",
                    "city": "Indianapolis",
                    "state": "IN",
                    "latDeg": 39.9342,
                    "lonDeg": -86.0445,
                    "elevation": 811,
                }
            ]
        }
    }


@pytest.fixture
def metar_payload():
    return {
        "metar": {
            "station": "KUMP",
            "issueTime": 1609459200,
            "tempC": 5,
            "dewPointC": 2,
            "pressure": 30.12,
            "windDir": 180,
            "windSpeed": 10,
            "visibilityRaw": "10SM",
            "visibilityRating": "VFR",
            "rawReport": "KUMP 010000Z 18010KT 10SM OVC050 05/02 A3012",
            "CloudLayers": [{"type": "OVC", "height": 5000}],
        }
    }


@pytest.fixture
def period_payload():
    return {
        "number": 1,
        "startTime": "2026-02-27T12:00:00-05:00",
        "endTime": "2026-02-27T13:00:00-05:00",
        "isDaytime": True,
        "temperature": 45,
        "temperatureUnit": "F",
        "windSpeed": "10 mph",
        "windDirection": "NW",
        "shortForecast": "Partly Cloudy",
        "probabilityOfPrecipitation": {"value": 20, "unitCode": "wmoUnit:percent"},
        "relativeHumidity": {"value": 65, "unitCode": "wmoUnit:percent"},
        "dewpoint": {"value": 2.2, "unitCode": "wmoUnit:degC"},
    }


@pytest.fixture
def forecast_payload(period_payload):
    second = dict(period_payload, number=2, startTime="2026-02-27T13:00:00-05:00", shortForecast="Sunny")
    return {
        "properties": {
            "generatedAt": "2026-02-27T12:00:00+00:00",
            "periods": [period_payload, second],
        }
    }


@pytest.fixture
def weather_payload():
    return {
        "current": {
            "temp": 22.7,
            "feels_like": 20.4,
            "weather": [{"description": "clear sky"}],
        },
        "daily": [
            {
                "temp": {"max": 28.6, "min": 17.3},
                "weather": [{"description": "light rain"}],
            }
        ],
    }
