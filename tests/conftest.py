"""
Common test fixtures and configuration.
"""

import os

# Settings refuse to load without an API key; provide one before the
# application modules are imported.
os.environ.setdefault("WEATHER_API_KEY", "test-api-key")

from typing import Callable  # noqa: E402

import httpx  # noqa: E402
import pytest  # noqa: E402
from fastapi.testclient import TestClient  # noqa: E402

from weather_tracker.main import app  # noqa: E402
from weather_tracker.services.external_api import WeatherAPIClient  # noqa: E402
from weather_tracker.utils.dependencies import get_weather_api_client  # noqa: E402

TEST_API_URL = "https://weather.test/data/2.5/weather"
TEST_API_KEY = "test-api-key"


@pytest.fixture
def london_payload():
    """Trimmed OpenWeatherMap response for London."""
    return {
        "coord": {"lon": -0.1257, "lat": 51.5085},
        "weather": [
            {"id": 800, "main": "Clear", "description": "clear sky", "icon": "01d"}
        ],
        "main": {"temp": 15.5, "feels_like": 14.8, "pressure": 1021, "humidity": 62},
        "name": "London",
        "cod": 200,
    }


@pytest.fixture
def make_api_client() -> Callable[[Callable[[httpx.Request], httpx.Response]], WeatherAPIClient]:
    """
    Build a WeatherAPIClient whose HTTP traffic is answered by ``handler``.

    Returns:
        Callable taking an httpx MockTransport handler
    """

    def factory(handler):
        client = httpx.AsyncClient(transport=httpx.MockTransport(handler))
        return WeatherAPIClient(client, api_key=TEST_API_KEY, base_url=TEST_API_URL)

    return factory


@pytest.fixture
def upstream():
    """
    Recorder and responder for the fake weather provider.

    Tests set ``upstream.respond`` to a handler; every request is appended to
    ``upstream.requests``.
    """

    class FakeUpstream:
        def __init__(self):
            self.requests = []
            self.respond = lambda request: httpx.Response(500)

        def __call__(self, request: httpx.Request) -> httpx.Response:
            self.requests.append(request)
            return self.respond(request)

    return FakeUpstream()


@pytest.fixture
def client(upstream, make_api_client):
    """
    FastAPI test client with the weather provider replaced by ``upstream``.

    Yields:
        TestClient: Client for the application under test
    """
    api_client = make_api_client(upstream)
    app.dependency_overrides[get_weather_api_client] = lambda: api_client
    try:
        yield TestClient(app)
    finally:
        app.dependency_overrides.clear()
