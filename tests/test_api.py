import pytest
from fastapi.testclient import TestClient

import routers.metar
import routers.nws
import routers.weather
from models.metar import AirportResponse, MetarResponse
from models.nws import NWSForecastResponse
from models.weather import WeatherResponse
from utils.config import Settings, get_settings
from utils.errors import UpstreamError
from main import app


@pytest.fixture
def garmin(monkeypatch, airport_payload, metar_payload):
    calls = []

    class FakeGarmin:
        def __init__(self, timeout=30.0):
            pass

        async def get_airport_info(self, airport_id):
            calls.append(("airport", airport_id))
            return AirportResponse(**airport_payload)

        async def get_metar(self, lat, lon):
            calls.append(("metar", lat, lon))
            return MetarResponse(**metar_payload)

    monkeypatch.setattr(routers.metar, "GarminClient", FakeGarmin)
    return calls


@pytest.fixture
def nws(monkeypatch, forecast_payload):
    calls = []
    state = {"error": None}

    class FakeNWS:
        def __init__(self, timeout=30.0):
            pass

        async def get_hourly_forecast(self, lat, lon):
            calls.append((lat, lon))
            if state["error"]:
                raise state["error"]
            return NWSForecastResponse(**forecast_payload)

    monkeypatch.setattr(routers.nws, "NWSClient", FakeNWS)
    return calls, state


@pytest.fixture
def owm(monkeypatch, weather_payload):
    calls = []

    class FakeOpenWeatherMap(routers.weather.OpenWeatherMapClient):
        async def get_current_weather(self, lat, lon, units="metric"):
            calls.append((lat, lon, units))
            return WeatherResponse(**weather_payload)

    monkeypatch.setattr(routers.weather, "OpenWeatherMapClient", FakeOpenWeatherMap)
    return calls


class TestMetarEndpoint:
    def test_default_airport(self, client, auth_headers, garmin):
        response = client.get("/api/metar", headers=auth_headers)

        assert response.status_code == 200
        assert garmin == [("airport", "KUMP"), ("metar", 39.9342, -86.0445)]
        data = response.json()
        assert data["altimeter"] == "30.12"
        assert data["sky_conditions"] == [{"base": 5000, "cover": "OVC", "description": "Overcast at 5000ft"}]
        assert data["wind"] == {"description": "180° at 10 kt", "direction": 180, "speed": 10}
        assert data["visibility"] == 10
        assert data["observation_time"].endswith(" L")

    def test_airport_id_is_upper_cased(self, client, auth_headers, garmin):
        client.get("/api/metar", params={"id": "kjfk"}, headers=auth_headers)
        assert garmin[0] == ("airport", "KJFK")

    def test_repeated_id_falls_back_to_default(self, client, auth_headers, garmin):
        client.get("/api/metar?id=kjfk&id=klax", headers=auth_headers)
        assert garmin[0] == ("airport", "KUMP")

    def test_missing_coordinates_is_server_error(self, client, auth_headers, monkeypatch):
        class NoCoordinates:
            def __init__(self, timeout=30.0):
                pass

            async def get_airport_info(self, airport_id):
                return AirportResponse(AirportEntry={"CcAirportInfoList": [{"code": airport_id}]})

        monkeypatch.setattr(routers.metar, "GarminClient", NoCoordinates)
        response = client.get("/api/metar", params={"id": "kxyz"}, headers=auth_headers)

        assert response.status_code == 500
        assert response.json() == {
            "error": "Internal server error",
            "message": "Airport coordinates not found for KXYZ",
        }

    def test_malformed_metar_reports_validation_message(self, client, auth_headers, monkeypatch, airport_payload):
        class MalformedMetar:
            def __init__(self, timeout=30.0):
                pass

            async def get_airport_info(self, airport_id):
                return AirportResponse(**airport_payload)

            async def get_metar(self, lat, lon):
                return MetarResponse(**{"metar": {"station": "KUMP"}})

        monkeypatch.setattr(routers.metar, "GarminClient", MalformedMetar)
        response = client.get("/api/metar", headers=auth_headers)

        assert response.status_code == 500
        body = response.json()
        assert body["error"] == "Internal server error"
        assert body["message"] != "Unknown error"
        assert "validation error" in body["message"]

    def test_requires_token(self, client, garmin):
        response = client.get("/api/metar")
        assert response.status_code == 401
        assert garmin == []


@pytest.mark.parametrize("path", ["/api/nws-current", "/api/nws-forecast"])
class TestNWSEndpoints:
    def test_first_period(self, client, auth_headers, nws, path):
        calls, _ = nws
        response = client.get(path, params={"lat": "40.7128", "lon": "-74.0060"}, headers=auth_headers)

        assert response.status_code == 200
        assert calls == [("40.7128", "-74.0060")]
        assert response.json() == {
            "start_time": "2026-02-27T12:00:00-05:00",
            "start_time_formatted_time": "12:00 PM",
            "start_time_formatted_datetime": "02/27/2026 12:00 PM",
            "is_daytime": True,
            "temperature": 45,
            "temperature_unit": "F",
            "wind_speed": "10 mph",
            "wind_direction": "NW",
            "short_forecast": "Partly cloudy",
            "probability_of_precipitation": 20,
            "relative_humidity": 65,
        }

    def test_missing_lat(self, client, auth_headers, nws, path):
        response = client.get(path, params={"lon": "-74.0060"}, headers=auth_headers)
        assert response.status_code == 400
        assert response.json() == {"error": "Missing required parameters: lat"}

    def test_missing_both(self, client, auth_headers, nws, path):
        response = client.get(path, headers=auth_headers)
        assert response.status_code == 400
        assert response.json() == {"error": "Missing required parameters: lat, lon"}

    def test_empty_value_is_missing(self, client, auth_headers, nws, path):
        response = client.get(f"{path}?lat=&lon=1", headers=auth_headers)
        assert response.json() == {"error": "Missing required parameters: lat"}

    def test_upstream_error(self, client, auth_headers, nws, path):
        _, state = nws
        state["error"] = UpstreamError("NWS API error getting grid point: 404", status_code=404)

        response = client.get(path, params={"lat": "0", "lon": "0"}, headers=auth_headers)

        assert response.status_code == 500
        assert response.json() == {
            "error": "Internal server error",
            "message": "NWS API error getting grid point: 404",
        }


class TestWeatherEndpoint:
    def test_summary(self, client, auth_headers, owm):
        response = client.get("/api/weather", params={"lat": "40.7", "lon": "-74.0"}, headers=auth_headers)

        assert response.status_code == 200
        assert owm == [("40.7", "-74.0", "metric")]
        data = response.json()
        assert data["temperature"] == 23
        assert data["icon"] == "23°"
        assert "Feels like 20°" in data["title"]
        assert "High 29°, low 17°" in data["message"]

    def test_units_forwarded(self, client, auth_headers, owm):
        client.get("/api/weather", params={"lat": "40.7", "lon": "-74.0", "units": "imperial"}, headers=auth_headers)
        assert owm[0][2] == "imperial"

    def test_missing_api_key(self, auth_headers, owm):
        app.dependency_overrides[get_settings] = lambda: Settings(api_token="test-token")
        try:
            response = TestClient(app).get(
                "/api/weather", params={"lat": "40.7", "lon": "-74.0"}, headers=auth_headers
            )
        finally:
            app.dependency_overrides.clear()

        assert response.status_code == 500
        assert response.json() == {
            "error": "Internal server error",
            "message": "OPENWEATHERMAP_API_KEY environment variable is not set",
        }
        assert owm == []


class TestRequestPipeline:
    @pytest.mark.parametrize("method", ["POST", "PUT", "PATCH", "DELETE"])
    def test_wrong_method(self, client, auth_headers, method):
        response = client.request(method, "/api/weather", params={"lat": "1", "lon": "2"}, headers=auth_headers)
        assert response.status_code == 405
        assert response.json() == {"error": "Method not allowed"}

    def test_method_checked_before_auth_and_params(self, client):
        response = client.post("/api/nws-forecast")
        assert response.status_code == 405
        assert response.json() == {"error": "Method not allowed"}

    def test_auth_checked_before_params(self, client):
        response = client.get("/api/nws-forecast", headers={"x-api-token": "wrong"})
        assert response.status_code == 401
        assert response.json() == {"error": "Unauthorized: Invalid or missing API token"}

    def test_repeated_token_header_rejected(self, client, nws):
        headers = [("x-api-token", "test-token"), ("x-api-token", "test-token")]
        response = client.get("/api/nws-current", params={"lat": "1", "lon": "2"}, headers=headers)
        assert response.status_code == 401

    def test_unconfigured_token(self, auth_headers):
        app.dependency_overrides[get_settings] = lambda: Settings(api_token=None)
        try:
            response = TestClient(app).get("/api/metar", headers=auth_headers)
        finally:
            app.dependency_overrides.clear()

        assert response.status_code == 500
        assert response.json() == {"error": "Server configuration error: API token not set"}


def test_health_is_public(client):
    response = client.get("/health")
    assert response.status_code == 200
    assert response.json()["status"] == "healthy"
