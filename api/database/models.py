"""
Tortoise ORM models for the environmental data database.
"""
from tortoise import fields
from tortoise.models import Model


class EnvironmentalData(Model):
    """Sensor readings submitted to the ingestion endpoint."""

    id = fields.BigIntField(pk=True)
    temperature = fields.FloatField()
    humidity = fields.FloatField()
    pressure = fields.FloatField()
    co2 = fields.FloatField()
    measured_at = fields.DatetimeField(index=True)
    created_at = fields.DatetimeField()

    class Meta:
        table = "environmental_data"

    def __str__(self):
        return f"EnvironmentalData(measured_at={self.measured_at}, temperature={self.temperature})"


class OpenWeatherData(Model):
    """Current weather conditions fetched from the OpenWeather API."""

    id = fields.BigIntField(pk=True)

    # Location
    city_name = fields.CharField(max_length=100, null=True, index=True)
    country = fields.CharField(max_length=10, null=True)
    latitude = fields.FloatField(null=True)
    longitude = fields.FloatField(null=True)
    timezone = fields.FloatField(null=True)

    # Main readings
    temperature = fields.FloatField(null=True)
    feels_like = fields.FloatField(null=True)
    temp_min = fields.FloatField(null=True)
    temp_max = fields.FloatField(null=True)
    pressure = fields.FloatField(null=True)
    humidity = fields.FloatField(null=True)

    # Wind, visibility and clouds
    wind_speed = fields.FloatField(null=True)
    wind_direction = fields.FloatField(null=True)
    visibility = fields.FloatField(null=True)
    cloudiness = fields.FloatField(null=True)

    # Conditions
    weather_description = fields.CharField(max_length=255, null=True)
    weather_main = fields.CharField(max_length=100, null=True)
    weather_icon = fields.CharField(max_length=20, null=True)

    # Timestamps
    timestamp = fields.DatetimeField(null=True)
    sunrise = fields.DatetimeField(null=True)
    sunset = fields.DatetimeField(null=True)
    created_at = fields.DatetimeField()

    class Meta:
        table = "open_weather_data"
        indexes = [("city_name", "timestamp")]

    def __str__(self):
        return f"OpenWeatherData(city_name={self.city_name}, timestamp={self.timestamp})"
