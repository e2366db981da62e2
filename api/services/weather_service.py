"""
Async service for fetching current weather from the OpenWeather API.
"""
import httpx
from typing import Any, Dict, Optional

from api.database.models import OpenWeatherData
from api.database.repositories import OpenWeatherDataRepository
from api.models.weather import OpenWeatherRecord
from src.utils.helpers import from_unix_timestamp, utc_now
from src.utils.logger import get_logger


OPEN_WEATHER_API_URL = "https://api.openweathermap.org/data/2.5/weather"


class WeatherAPIError(RuntimeError):
    """Raised when the OpenWeather API answers with a non-200 status."""

    def __init__(self, status_code: int, city_name: str):
        self.status_code = status_code
        self.city_name = city_name
        super().__init__(
            f"Failed to fetch weather data from OpenWeather API for '{city_name}': {status_code}"
        )


def _lookup(data: Any, *path: Any) -> Any:
    """Walk nested dicts/lists along path, returning None at the first gap."""
    current = data
    for key in path:
        if isinstance(current, dict):
            current = current.get(key)
        elif isinstance(current, list) and isinstance(key, int):
            current = current[key] if -len(current) <= key < len(current) else None
        else:
            return None
        if current is None:
            return None
    return current


def create_open_weather_data_from_dict(data: Dict[str, Any]) -> OpenWeatherRecord:
    """
    Map an OpenWeather current-weather response to a flat record.

    Every lookup falls back to None, so a partial payload gives a partially
    populated record instead of an error. Values are taken as-is without
    validation.

    Args:
        data: Decoded JSON body from the API

    Returns:
        OpenWeatherRecord with a fresh created_at
    """
    return OpenWeatherRecord.model_construct(
        # Basic information
        city_name=_lookup(data, "name"),
        country=_lookup(data, "sys", "country"),

        # Main weather data
        temperature=_lookup(data, "main", "temp"),
        feels_like=_lookup(data, "main", "feels_like"),
        temp_min=_lookup(data, "main", "temp_min"),
        temp_max=_lookup(data, "main", "temp_max"),
        pressure=_lookup(data, "main", "pressure"),
        humidity=_lookup(data, "main", "humidity"),

        # Wind data
        wind_speed=_lookup(data, "wind", "speed"),
        wind_direction=_lookup(data, "wind", "deg"),
        visibility=_lookup(data, "visibility"),
        cloudiness=_lookup(data, "clouds", "all"),

        # Weather description
        weather_description=_lookup(data, "weather", 0, "description"),
        weather_main=_lookup(data, "weather", 0, "main"),
        weather_icon=_lookup(data, "weather", 0, "icon"),

        # Coordinates
        latitude=_lookup(data, "coord", "lat"),
        longitude=_lookup(data, "coord", "lon"),

        # Timestamps
        timezone=_lookup(data, "timezone"),
        timestamp=from_unix_timestamp(_lookup(data, "dt")),
        sunrise=from_unix_timestamp(_lookup(data, "sys", "sunrise")),
        sunset=from_unix_timestamp(_lookup(data, "sys", "sunset")),
        created_at=utc_now(),
    )


class OpenWeatherDataService:
    """
    Fetches current weather for a city and maps it to an OpenWeatherRecord.
    """

    def __init__(
        self,
        api_key: str,
        repository: OpenWeatherDataRepository,
        http_client: Optional[httpx.AsyncClient] = None,
        base_url: str = OPEN_WEATHER_API_URL,
        units: str = "metric",
        logger=None
    ):
        """
        Initialize weather service.

        Args:
            api_key: OpenWeather API key
            repository: Storage used by save_weather_data
            http_client: Shared client; a short-lived one with httpx defaults is opened per call when None
            base_url: Current-weather endpoint
            units: Unit system requested from the API
            logger: Logger instance
        """
        self.api_key = api_key
        self.repository = repository
        self.http_client = http_client
        self.base_url = base_url
        self.units = units
        self.logger = logger or get_logger("envdata_api.weather")

    async def fetch_weather_data(self, city_name: str) -> OpenWeatherRecord:
        """
        Fetch current weather for a city.

        Args:
            city_name: City to query

        Returns:
            OpenWeatherRecord mapped from the response

        Raises:
            WeatherAPIError: If the API does not answer 200
            httpx.HTTPError: On transport failures
            ValueError: If the body is not valid JSON
        """
        params = {
            "q": city_name,
            "appid": self.api_key,
            "units": self.units
        }

        self.logger.info(f"Fetching current weather for {city_name}")

        if self.http_client is not None:
            response = await self.http_client.get(self.base_url, params=params)
        else:
            async with httpx.AsyncClient() as client:
                response = await client.get(self.base_url, params=params)

        if response.status_code != 200:
            self.logger.error(
                f"OpenWeather request for {city_name} failed: {response.status_code}"
            )
            raise WeatherAPIError(response.status_code, city_name)

        return create_open_weather_data_from_dict(response.json())

    async def save_weather_data(self, data: OpenWeatherRecord) -> OpenWeatherData:
        """
        Save a weather record through the repository.

        Args:
            data: Record to persist

        Returns:
            OpenWeatherData: The stored row
        """
        stored = await self.repository.save(data)
        self.logger.info(f"Stored weather data for {data.city_name}")
        return stored
