"""
Dependency injection for FastAPI.
Handles configuration loading and service construction.
"""
import os
from functools import lru_cache
from typing import Any, Dict

from dotenv import load_dotenv

from api.database.repositories import EnvironmentalDataRepository, OpenWeatherDataRepository
from api.services.weather_service import OPEN_WEATHER_API_URL, OpenWeatherDataService
from src.utils.helpers import load_yaml

load_dotenv()


class WeatherConfigError(RuntimeError):
    """Raised when the OpenWeather API key is not configured."""


@lru_cache()
def get_api_config() -> Dict[str, Any]:
    """
    Load API configuration once and cache in memory.

    Returns:
        dict: The `api` section of config/api.yaml
    """
    config_path = os.path.join(os.path.dirname(__file__), "../config/api.yaml")
    return load_yaml(config_path)['api']


def get_openweather_api_key() -> str:
    """Read the OpenWeather API key from the environment."""
    return os.getenv("OPENWEATHER_API_KEY", "")


def get_environmental_repository() -> EnvironmentalDataRepository:
    return EnvironmentalDataRepository()


def get_weather_repository() -> OpenWeatherDataRepository:
    return OpenWeatherDataRepository()


@lru_cache()
def get_weather_service() -> OpenWeatherDataService:
    """
    Build the OpenWeather service once and cache in memory.

    Returns:
        OpenWeatherDataService: Service configured from config/api.yaml

    Raises:
        WeatherConfigError: If OPENWEATHER_API_KEY is not set
    """
    api_key = get_openweather_api_key()
    if not api_key:
        raise WeatherConfigError("OPENWEATHER_API_KEY is not set")

    weather_config = get_api_config().get('openweather', {})
    return OpenWeatherDataService(
        api_key=api_key,
        repository=get_weather_repository(),
        base_url=weather_config.get('base_url', OPEN_WEATHER_API_URL),
        units=weather_config.get('units', 'metric'),
    )
