"""
Tests for the request tracker middleware.
"""

from fastapi import FastAPI
from fastapi.testclient import TestClient

from weather_tracker.middleware.request_tracker import RequestTrackerMiddleware


def build_app() -> FastAPI:
    test_app = FastAPI()
    test_app.add_middleware(RequestTrackerMiddleware)

    @test_app.get("/ok")
    async def ok():
        return {"ok": True}

    @test_app.get("/boom")
    async def boom():
        raise RuntimeError("boom")

    return test_app


class TestRequestTrackerMiddleware:
    """Test cases for RequestTrackerMiddleware."""

    def test_adds_tracking_headers(self):
        """Test request ID and timing headers are set on responses."""
        client = TestClient(build_app())

        response = client.get("/ok")

        assert response.status_code == 200
        assert response.headers["X-Request-ID"].startswith("req_")
        assert float(response.headers["X-Process-Time"]) >= 0

    def test_request_ids_are_unique(self):
        """Test every request gets its own ID."""
        client = TestClient(build_app())

        first = client.get("/ok").headers["X-Request-ID"]
        second = client.get("/ok").headers["X-Request-ID"]

        assert first != second

    def test_unhandled_error_returns_500(self):
        """Test unhandled exceptions become a JSON 500 instead of crashing."""
        client = TestClient(build_app(), raise_server_exceptions=False)

        response = client.get("/boom")

        assert response.status_code == 500
        assert response.json()["error"] == "Internal server error"
        assert response.json()["request_id"] == response.headers["X-Request-ID"]
