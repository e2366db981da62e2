import json
from typing import Any

import httpx

from api.services.weather_service import OpenWeatherDataService

LONDON_RESPONSE: dict[str, Any] = {
    "coord": {"lon": -0.1257, "lat": 51.5085},
    "weather": [{"id": 800, "main": "Clear", "description": "clear sky", "icon": "01d"}],
    "base": "stations",
    "main": {
        "temp": 15.0,
        "feels_like": 14.2,
        "temp_min": 13.9,
        "temp_max": 16.1,
        "pressure": 1012,
        "humidity": 80,
    },
    "visibility": 10000,
    "wind": {"speed": 3.1, "deg": 240},
    "clouds": {"all": 0},
    "dt": 1700000000,
    "sys": {"type": 2, "id": 2075535, "country": "GB", "sunrise": 1699945200, "sunset": 1699977600},
    "timezone": 0,
    "id": 2643743,
    "name": "London",
    "cod": 200,
}


def json_transport(
    status_code: int,
    body: Any,
    requests: list[httpx.Request] | None = None,
) -> httpx.MockTransport:
    def handler(request: httpx.Request) -> httpx.Response:
        if requests is not None:
            requests.append(request)
        return httpx.Response(status_code, content=json.dumps(body).encode(), headers={"Content-Type": "application/json"})

    return httpx.MockTransport(handler)


def make_service(
    http_client: httpx.AsyncClient,
    repository: Any,
    api_key: str = "test-key",
) -> OpenWeatherDataService:
    return OpenWeatherDataService(api_key=api_key, repository=repository, http_client=http_client)


