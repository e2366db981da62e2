"""
Weather endpoint for fetching current conditions from OpenWeather.
"""
from fastapi import APIRouter, Depends, HTTPException, status
from fastapi.encoders import jsonable_encoder
from fastapi.responses import JSONResponse

from api.dependencies import WeatherConfigError, get_weather_service
from api.models.weather import OpenWeatherRecord
from api.services.weather_service import OpenWeatherDataService, WeatherAPIError

router = APIRouter()


def weather_service_dependency() -> OpenWeatherDataService:
    try:
        return get_weather_service()
    except WeatherConfigError as e:
        raise HTTPException(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            detail=str(e)
        )


@router.get(
    "/weather/{city_name}",
    response_model=OpenWeatherRecord,
    summary="Get current weather",
    description="Fetch current weather for a city, optionally storing it"
)
async def get_current_weather(
    city_name: str,
    save: bool = False,
    service: OpenWeatherDataService = Depends(weather_service_dependency)
):
    """
    Fetch current weather for a city.

    Args:
        city_name: City to query
        save: Also store the mapped record when true

    Returns:
        OpenWeatherRecord: Mapped weather data

    Raises:
        502: OpenWeather answered with a non-200 status
        503: API key not configured
    """
    try:
        record = await service.fetch_weather_data(city_name)
    except WeatherAPIError as e:
        raise HTTPException(
            status_code=status.HTTP_502_BAD_GATEWAY,
            detail=str(e)
        )

    if save:
        await service.save_weather_data(record)

    # Mapped values are unvalidated, so skip response_model re-validation
    return JSONResponse(jsonable_encoder(record))
