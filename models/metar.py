"""Pydantic models for Garmin airport/METAR data and the METAR endpoint output."""

from typing import List, Optional

from pydantic import BaseModel, Field

from models.common import Number


class AirportInfo(BaseModel):
    code: Optional[str] = Field(None, description="Airport identifier")
    name: Optional[str] = Field(None, description="Airport name")
    city: Optional[str] = Field(None, description="City")
    state: Optional[str] = Field(None, description="State or region")
    latDeg: Optional[Number] = Field(None, description="Latitude in decimal degrees")
    lonDeg: Optional[Number] = Field(None, description="Longitude in decimal degrees")
    elevation: Optional[Number] = Field(None, description="Field elevation in feet")


class AirportInfoList(BaseModel):
    CcAirportInfoList: List[AirportInfo] = Field(default_factory=list)


class AirportResponse(BaseModel):
    AirportEntry: Optional[AirportInfoList] = None


class CloudLayer(BaseModel):
    type: str = Field(..., description="Coverage code (FEW, SCT, BKN, OVC, CLR, ...)")
    height: Number = Field(0, description="Layer base in feet AGL")


class MetarData(BaseModel):
    station: str = Field(..., description="Reporting station identifier")
    issueTime: int = Field(..., description="Observation time, unix seconds")
    tempC: Number = Field(..., description="Temperature in Celsius")
    dewPointC: Number = Field(..., description="Dewpoint in Celsius")
    pressure: Number = Field(..., description="Altimeter setting in inHg")
    windDir: Number = Field(..., description="Wind direction in degrees")
    windSpeed: Number = Field(..., description="Wind speed in knots")
    visibilityRaw: str = Field(..., description="Visibility as reported, e.g. 10SM")
    visibilityRating: str = Field(..., description="Flight category (VFR, MVFR, IFR, LIFR)")
    rawReport: str = Field(..., description="Raw METAR text")
    CloudLayers: List[CloudLayer] = Field(default_factory=list, description="Reported cloud layers")


class MetarResponse(BaseModel):
    metar: MetarData


class SkyCondition(BaseModel):
    base: int = Field(..., description="Layer base in feet")
    cover: str = Field(..., description="Coverage code as reported")
    description: str = Field(..., description="Human readable layer, e.g. 'Broken at 2500ft'")


class Wind(BaseModel):
    description: str = Field(..., description="e.g. '180° at 10 kt' or 'Wind calm'")
    direction: Number = Field(..., description="Wind direction in degrees")
    speed: Number = Field(..., description="Wind speed in knots")


class MetarOutput(BaseModel):
    altimeter: str = Field(..., description="Altimeter setting, two decimals")
    dewpoint: Number
    id: str = Field(..., description="Station identifier")
    flight_category: str
    observation_time: str = Field(..., description="Local observation time as HH:MM L")
    raw_text: str
    sky_conditions: List[SkyCondition] = Field(default_factory=list)
    temperature: Number
    visibility: Optional[int] = Field(None, description="Visibility in statute miles")
    wind: Wind

    class Config:
        json_schema_extra = {
            "example": {
                "altimeter": "30.12",
                "dewpoint": 2,
                "id": "KUMP",
                "flight_category": "VFR",
                "observation_time": "19:00 L",
                "raw_text": "KUMP 010000Z 18010KT 10SM OVC050 05/02 A3012",
                "sky_conditions": [
                    {"base": 5000, "cover": "OVC", "description": "Overcast at 5000ft"}
                ],
                "temperature": 5,
                "visibility": 10,
                "wind": {"description": "180° at 10 kt", "direction": 180, "speed": 10},
            }
        }
