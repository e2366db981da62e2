"""
Pydantic models for weather data.
"""
from datetime import datetime
from typing import Optional

from pydantic import BaseModel, Field

from src.utils.helpers import utc_now


class OpenWeatherRecord(BaseModel):
    """Current weather for one city, flattened from an OpenWeather response."""

    # Basic information
    city_name: Optional[str] = Field(None, description="City name")
    country: Optional[str] = Field(None, description="Country code")

    # Main weather data
    temperature: Optional[float] = Field(None, description="Temperature (°C)")
    feels_like: Optional[float] = Field(None, description="Perceived temperature (°C)")
    temp_min: Optional[float] = Field(None, description="Minimum observed temperature (°C)")
    temp_max: Optional[float] = Field(None, description="Maximum observed temperature (°C)")
    pressure: Optional[float] = Field(None, description="Atmospheric pressure (hPa)")
    humidity: Optional[float] = Field(None, description="Humidity (%)")

    # Wind, visibility and clouds
    wind_speed: Optional[float] = Field(None, description="Wind speed (m/s)")
    wind_direction: Optional[float] = Field(None, description="Wind direction (degrees)")
    visibility: Optional[float] = Field(None, description="Visibility (m)")
    cloudiness: Optional[float] = Field(None, description="Cloudiness (%)")

    # Weather description
    weather_description: Optional[str] = Field(None, description="Condition description")
    weather_main: Optional[str] = Field(None, description="Condition group")
    weather_icon: Optional[str] = Field(None, description="Condition icon id")

    # Coordinates
    latitude: Optional[float] = Field(None, description="Latitude coordinate")
    longitude: Optional[float] = Field(None, description="Longitude coordinate")

    # Timestamps
    timezone: Optional[float] = Field(None, description="Shift from UTC in seconds")
    timestamp: Optional[datetime] = Field(None, description="Time of the observation")
    sunrise: Optional[datetime] = Field(None, description="Sunrise time")
    sunset: Optional[datetime] = Field(None, description="Sunset time")
    created_at: datetime = Field(default_factory=utc_now, description="Time the record was created")
