"""Pydantic models for National Weather Service responses and the NWS endpoint output."""

from typing import List, Optional

from pydantic import BaseModel, Field

from models.common import Number


class NWSQuantitativeValue(BaseModel):
    value: Optional[Number] = None
    unitCode: Optional[str] = None


class NWSPointsProperties(BaseModel):
    gridId: str
    gridX: int
    gridY: int


class NWSPointsResponse(BaseModel):
    properties: NWSPointsProperties


class NWSForecastPeriod(BaseModel):
    number: Optional[int] = None
    startTime: str = Field(..., description="ISO 8601 start time with UTC offset")
    endTime: Optional[str] = None
    isDaytime: bool
    temperature: Number
    temperatureUnit: str
    windSpeed: str
    windDirection: str
    shortForecast: str
    probabilityOfPrecipitation: NWSQuantitativeValue = Field(default_factory=NWSQuantitativeValue)
    relativeHumidity: NWSQuantitativeValue = Field(default_factory=NWSQuantitativeValue)
    dewpoint: Optional[NWSQuantitativeValue] = None


class NWSForecastProperties(BaseModel):
    generatedAt: Optional[str] = None
    periods: List[NWSForecastPeriod] = Field(default_factory=list)


class NWSForecastResponse(BaseModel):
    properties: NWSForecastProperties


class NWSHourlyPeriod(BaseModel):
    start_time: str = Field(..., description="Start time exactly as reported")
    start_time_formatted_time: str = Field(..., description="Local start time as HH:MM AM/PM")
    start_time_formatted_datetime: str = Field(..., description="Local start as MM/DD/YYYY HH:MM AM/PM")
    is_daytime: bool
    temperature: Number
    temperature_unit: str
    wind_speed: str
    wind_direction: str
    short_forecast: str = Field(..., description="Forecast text in sentence case")
    probability_of_precipitation: Optional[Number] = None
    relative_humidity: Optional[Number] = None

    class Config:
        json_schema_extra = {
            "example": {
                "start_time": "2026-02-27T13:00:00-05:00",
                "start_time_formatted_time": "01:00 PM",
                "start_time_formatted_datetime": "02/27/2026 01:00 PM",
                "is_daytime": True,
                "temperature": 45,
                "temperature_unit": "F",
                "wind_speed": "10 mph",
                "wind_direction": "NW",
                "short_forecast": "Partly cloudy and windy",
                "probability_of_precipitation": 20,
                "relative_humidity": 65,
            }
        }
