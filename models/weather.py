"""Pydantic models for OpenWeatherMap One Call data and the weather endpoint output."""

from typing import List

from pydantic import BaseModel, Field

from models.common import Number


class WeatherCondition(BaseModel):
    description: str


class CurrentConditions(BaseModel):
    temp: Number
    feels_like: Number
    weather: List[WeatherCondition]


class DailyTemperature(BaseModel):
    max: Number
    min: Number


class DailyForecast(BaseModel):
    temp: DailyTemperature
    weather: List[WeatherCondition]


class WeatherResponse(BaseModel):
    current: CurrentConditions
    daily: List[DailyForecast]


class WeatherOutput(BaseModel):
    icon: str = Field(..., description="Rounded temperature with a degree sign")
    message: str = Field(..., description="Today's high, low and conditions")
    title: str = Field(..., description="Current temperature, conditions and feels-like")
    temperature: int = Field(..., description="Rounded current temperature")

    class Config:
        json_schema_extra = {
            "example": {
                "icon": "23°",
                "message": "Today: High 29°, low 17°, light rain",
                "title": "23° and clear sky. Feels like 20°.",
                "temperature": 23,
            }
        }
