"""
Tests for the main application module.
"""

import httpx
from fastapi.testclient import TestClient

from weather_tracker.main import app


class TestMainApplication:
    """Test suite for main FastAPI application configuration.

    Validates application setup, middleware configuration,
    router registration, and API documentation endpoints.
    """

    def test_app_creation(self):
        """Test FastAPI application initialization."""
        assert app.title == "Weather Tracker API"
        assert app.version == "1.0.0"
        assert app.docs_url == "/docs"
        assert app.redoc_url == "/redoc"
        assert app.openapi_url == "/openapi.json"

    def test_cors_middleware_added(self):
        """Test CORS middleware integration."""
        middleware_classes = [m.cls.__name__ for m in app.user_middleware]
        assert "CORSMiddleware" in middleware_classes

    def test_request_tracker_middleware_added(self):
        """Test request tracking middleware integration."""
        middleware_classes = [m.cls.__name__ for m in app.user_middleware]
        assert "RequestTrackerMiddleware" in middleware_classes

    def test_routers_included(self):
        """Test API router registration."""
        routes = [getattr(route, "path", None) for route in app.routes]

        assert "/api/weather" in routes
        assert "/api/health" in routes

    def test_prometheus_metrics_endpoint(self):
        """Test Prometheus metrics endpoint availability."""
        routes = [getattr(route, "path", None) for route in app.routes]
        assert "/prometheus-metrics" in routes

    def test_lifespan_manages_http_client(self):
        """Test the shared outbound client is opened on startup and closed on shutdown."""
        with TestClient(app):
            http_client = app.state.http_client
            assert isinstance(http_client, httpx.AsyncClient)
            assert not http_client.is_closed

        assert http_client.is_closed
