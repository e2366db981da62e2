"""
Repositories for writing records to the database.
"""
from api.database.models import EnvironmentalData, OpenWeatherData
from api.models.environmental import EnvironmentalDataRecord
from api.models.weather import OpenWeatherRecord


class EnvironmentalDataRepository:
    """
    Persists sensor readings.
    """

    async def save(self, record: EnvironmentalDataRecord) -> EnvironmentalData:
        """
        Write one sensor reading.

        Args:
            record: Validated reading with its server-assigned creation time

        Returns:
            EnvironmentalData: The stored row
        """
        return await EnvironmentalData.create(**record.model_dump())


class OpenWeatherDataRepository:
    """
    Persists mapped OpenWeather records.
    """

    async def save(self, record: OpenWeatherRecord) -> OpenWeatherData:
        """
        Write one weather record as-is.

        Args:
            record: Mapped weather record

        Returns:
            OpenWeatherData: The stored row
        """
        return await OpenWeatherData.create(**record.model_dump())
