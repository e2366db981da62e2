"""
Pydantic models for environmental sensor data.
"""
from datetime import datetime

from pydantic import BaseModel, Field, field_validator

from src.utils.helpers import to_float, utc_now


class EnvironmentalDataRequest(BaseModel):
    """Request body posted by a sensor."""

    temperature: float = Field(..., description="Air temperature in Celsius")
    humidity: float = Field(..., description="Relative humidity percentage")
    pressure: float = Field(..., description="Air pressure in hPa")
    co2: float = Field(..., description="CO2 concentration in ppm")
    created: datetime = Field(..., description="Time the reading was measured (ISO 8601 format)")

    @field_validator("temperature", "humidity", "pressure", "co2", mode="before")
    @classmethod
    def coerce_measurement(cls, v):
        """Coerce any present value to float; null stays missing."""
        if v is None:
            return v
        return to_float(v)

    model_config = {
        "json_schema_extra": {
            "examples": [
                {
                    "temperature": 21.4,
                    "humidity": 45.0,
                    "pressure": 1013.2,
                    "co2": 612,
                    "created": "2025-11-19T17:55:00Z"
                }
            ]
        }
    }


class EnvironmentalDataRecord(BaseModel):
    """A sensor reading ready to be written to storage."""

    temperature: float
    humidity: float
    pressure: float
    co2: float
    measured_at: datetime
    created_at: datetime = Field(default_factory=utc_now)

    @classmethod
    def from_request(cls, request: EnvironmentalDataRequest) -> "EnvironmentalDataRecord":
        return cls(
            temperature=request.temperature,
            humidity=request.humidity,
            pressure=request.pressure,
            co2=request.co2,
            measured_at=request.created,
        )


class MessageResponse(BaseModel):
    """Acknowledgment returned after a successful write."""

    message: str = Field(..., description="Success message")


class ErrorResponse(BaseModel):
    """Error body returned for rejected payloads."""

    error: str = Field(..., description="Error message")
