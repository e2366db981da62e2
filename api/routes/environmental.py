"""
Environmental data endpoint for storing sensor readings.
"""
from json import JSONDecodeError

from fastapi import APIRouter, Depends, Request, status
from fastapi.responses import JSONResponse
from pydantic import ValidationError

from api.database.repositories import EnvironmentalDataRepository
from api.dependencies import get_environmental_repository
from api.models.environmental import (
    EnvironmentalDataRecord,
    EnvironmentalDataRequest,
    ErrorResponse,
    MessageResponse,
)
from src.utils.logger import get_logger

router = APIRouter()
logger = get_logger("envdata_api.ingestion")

INVALID_DATA = {"error": "Invalid data"}


@router.post(
    "/data",
    status_code=status.HTTP_201_CREATED,
    response_model=MessageResponse,
    responses={400: {"model": ErrorResponse}},
    summary="Store environmental data",
    description="Store one temperature/humidity/pressure/CO2 reading"
)
async def save_data(
    request: Request,
    repository: EnvironmentalDataRepository = Depends(get_environmental_repository)
):
    """
    Store a sensor reading.

    The body must carry temperature, humidity, pressure, co2 and created.
    Measurements are coerced to float the loose way (a non-numeric string
    becomes 0.0). A missing or null key, or an unparseable created timestamp,
    gives the 400 response.

    Returns:
        201: {"message": "Data saved successfully"}

    Raises:
        400: {"error": "Invalid data"}
    """
    try:
        payload = await request.json()
        reading = EnvironmentalDataRequest.model_validate(payload)
    except (JSONDecodeError, UnicodeDecodeError, ValidationError) as e:
        logger.warning(f"Rejected environmental data: {e}")
        return JSONResponse(INVALID_DATA, status_code=status.HTTP_400_BAD_REQUEST)

    record = EnvironmentalDataRecord.from_request(reading)
    await repository.save(record)
    logger.info(f"Stored environmental data measured at {record.measured_at.isoformat()}")

    return JSONResponse(
        {"message": "Data saved successfully"},
        status_code=status.HTTP_201_CREATED
    )
