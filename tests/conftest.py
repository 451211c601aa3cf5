"""Shared fixtures: an in-process fake of the two Open-Meteo endpoints."""

from collections.abc import Callable, Iterator

import httpx
import pytest

from weathernow.config import Config

GEO_URL = "https://geo.test/v1/search"
FORECAST_URL = "https://forecast.test/v1/forecast"

Handler = Callable[[httpx.Request], httpx.Response]


class FakeOpenMeteo:
    """Routes requests by host and records them in order."""

    def __init__(self) -> None:
        self.requests: list[httpx.Request] = []
        self.geocoding: Handler = lambda req: httpx.Response(200, json={})
        self.forecast: Handler = lambda req: httpx.Response(200, json={})

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if request.url.host == "geo.test":
            return self.geocoding(request)
        return self.forecast(request)

    def hosts(self) -> list[str]:
        return [r.url.host for r in self.requests]


@pytest.fixture
def config() -> Config:
    return Config(geocoding_url=GEO_URL, forecast_url=FORECAST_URL, timeout=5.0)


@pytest.fixture
def fake_api() -> FakeOpenMeteo:
    return FakeOpenMeteo()


@pytest.fixture
def client(fake_api: FakeOpenMeteo) -> Iterator[httpx.Client]:
    with httpx.Client(transport=httpx.MockTransport(fake_api)) as c:
        yield c


@pytest.fixture
def forecast_url() -> str:
    return FORECAST_URL


@pytest.fixture
def sao_paulo_geo() -> dict:
    return {
        "results": [
            {
                "latitude": -23.5,
                "longitude": -46.6,
                "name": "São Paulo",
                "admin1": "SP",
                "country_code": "BR",
            }
        ]
    }


@pytest.fixture
def sao_paulo_forecast() -> dict:
    return {"current": {"temperature_2m": 21.4, "weather_code": 3}}
