from datetime import UTC, datetime

from api.services.weather_service import create_open_weather_data_from_dict

from .utils import LONDON_RESPONSE

OPTIONAL_FIELDS = [
    "city_name",
    "country",
    "temperature",
    "feels_like",
    "temp_min",
    "temp_max",
    "pressure",
    "humidity",
    "wind_speed",
    "wind_direction",
    "visibility",
    "cloudiness",
    "weather_description",
    "weather_main",
    "weather_icon",
    "latitude",
    "longitude",
    "timezone",
    "timestamp",
    "sunrise",
    "sunset",
]


def test_empty_payload_gives_empty_record() -> None:
    record = create_open_weather_data_from_dict({})

    for field in OPTIONAL_FIELDS:
        assert getattr(record, field) is None, field
    assert isinstance(record.created_at, datetime)


def test_sample_payload() -> None:
    data = {
        "name": "London",
        "main": {"temp": 15.0, "humidity": 80},
        "wind": {"speed": 3.1},
        "weather": [{"description": "clear sky"}],
        "dt": 1700000000,
    }

    record = create_open_weather_data_from_dict(data)

    assert record.city_name == "London"
    assert record.temperature == 15.0
    assert record.humidity == 80
    assert record.wind_speed == 3.1
    assert record.weather_description == "clear sky"
    assert record.timestamp == datetime.fromtimestamp(1700000000, tz=UTC)
    assert record.timestamp == datetime(2023, 11, 14, 22, 13, 20, tzinfo=UTC)
    # Keys absent from the payload stay empty
    assert record.country is None
    assert record.weather_main is None
    assert record.sunrise is None
    assert record.sunset is None


def test_full_payload() -> None:
    record = create_open_weather_data_from_dict(LONDON_RESPONSE)

    assert record.city_name == "London"
    assert record.country == "GB"
    assert record.feels_like == 14.2
    assert record.temp_min == 13.9
    assert record.temp_max == 16.1
    assert record.pressure == 1012
    assert record.wind_direction == 240
    assert record.visibility == 10000
    assert record.cloudiness == 0
    assert record.weather_main == "Clear"
    assert record.weather_icon == "01d"
    assert record.latitude == 51.5085
    assert record.longitude == -0.1257
    assert record.timezone == 0
    assert record.sunrise == datetime.fromtimestamp(1699945200, tz=UTC)
    assert record.sunset == datetime.fromtimestamp(1699977600, tz=UTC)


def test_empty_weather_list() -> None:
    record = create_open_weather_data_from_dict({"name": "Oslo", "weather": []})

    assert record.city_name == "Oslo"
    assert record.weather_description is None
    assert record.weather_main is None
    assert record.weather_icon is None


def test_null_and_scalar_sections() -> None:
    record = create_open_weather_data_from_dict({"main": None, "sys": "GB", "wind": {"speed": None}})

    assert record.temperature is None
    assert record.country is None
    assert record.sunrise is None
    assert record.wind_speed is None


def test_each_record_gets_its_own_created_at() -> None:
    first = create_open_weather_data_from_dict({})
    second = create_open_weather_data_from_dict({})

    assert first.created_at.tzinfo is not None
    assert second.created_at >= first.created_at


def test_values_pass_through_without_validation() -> None:
    data = {
        "name": 12345,
        "main": {"temp": "n/a", "pressure": 1013.5, "humidity": 80.5},
        "wind": {"deg": 247.5},
        "visibility": 9999.9,
        "clouds": {"all": 12.5},
        "timezone": 3600.5,
    }

    record = create_open_weather_data_from_dict(data)

    assert record.city_name == 12345
    assert record.temperature == "n/a"
    assert record.pressure == 1013.5
    assert record.humidity == 80.5
    assert record.wind_direction == 247.5
    assert record.visibility == 9999.9
    assert record.cloudiness == 12.5
    assert record.timezone == 3600.5
    assert record.country is None
