"""
Posts API — Middleware and Health Tests
=========================================

What:  Request ID propagation, rate limiting, and the /health endpoint.
"""

from unittest.mock import MagicMock, patch

import pytest
from fastapi import FastAPI
from httpx import AsyncClient, ASGITransport

from app.middleware.rate_limit import RateLimitMiddleware
from app.middleware.request_id import RequestIDMiddleware


class TestRequestID:

    @pytest.mark.asyncio
    async def test_generated_request_id_header(self, test_client):
        """Requests without an ID should get a short generated one."""
        response = await test_client.get("/api/posts")

        assert len(response.headers["X-Request-ID"]) == 8

    @pytest.mark.asyncio
    async def test_client_request_id_is_echoed(self, test_client):
        """A client ID should be echoed in the header and in error bodies."""
        response = await test_client.get(
            "/api/posts/404", headers={"X-Request-ID": "trace-abc"}
        )

        assert response.headers["X-Request-ID"] == "trace-abc"
        assert response.json()["request_id"] == "trace-abc"

    @pytest.mark.asyncio
    async def test_app_assigns_request_id_before_rate_limit(self, test_client):
        """In the assembled app a 429 should already carry the request ID."""
        with patch("app.middleware.rate_limit.settings") as mock_settings:
            mock_settings.rate_limit_enabled = True
            mock_settings.rate_limit_requests = 1
            mock_settings.rate_limit_window = 60

            await test_client.get("/api/posts")
            response = await test_client.get(
                "/api/posts", headers={"X-Request-ID": "limited-1"}
            )

        assert response.status_code == 429
        assert response.json()["request_id"] == "limited-1"
        assert response.headers["X-Request-ID"] == "limited-1"


class TestRateLimit:

    @pytest.fixture
    def limited_app(self):
        app = FastAPI()
        # Same order as create_app: request ID assigned before the limiter runs
        app.add_middleware(RateLimitMiddleware)
        app.add_middleware(RequestIDMiddleware)

        @app.get("/ping")
        async def ping():
            return {"ok": True}

        @app.get("/health")
        async def health():
            return {"status": "healthy"}

        return app

    @pytest.mark.asyncio
    async def test_requests_over_limit_get_429(self, limited_app):
        """Requests past the window limit should get 429, excluded paths should not."""
        with patch("app.middleware.rate_limit.settings") as mock_settings:
            mock_settings.rate_limit_enabled = True
            mock_settings.rate_limit_requests = 2
            mock_settings.rate_limit_window = 60

            transport = ASGITransport(app=limited_app)
            async with AsyncClient(transport=transport, base_url="http://test") as client:
                assert (await client.get("/ping")).status_code == 200
                assert (await client.get("/ping")).status_code == 200
                blocked = await client.get("/ping")
                health = await client.get("/health")

        assert blocked.status_code == 429
        assert blocked.json()["error"] == "rate_limit_exceeded"
        assert int(blocked.headers["Retry-After"]) > 0
        assert health.status_code == 200

    @pytest.mark.asyncio
    async def test_rejection_carries_request_id(self, limited_app):
        """The 429 body and header should carry the request's correlation ID."""
        with patch("app.middleware.rate_limit.settings") as mock_settings:
            mock_settings.rate_limit_enabled = True
            mock_settings.rate_limit_requests = 1
            mock_settings.rate_limit_window = 60

            transport = ASGITransport(app=limited_app)
            async with AsyncClient(transport=transport, base_url="http://test") as client:
                await client.get("/ping")
                blocked = await client.get("/ping", headers={"X-Request-ID": "rl-7"})

        assert blocked.status_code == 429
        assert blocked.json()["request_id"] == "rl-7"
        assert blocked.headers["X-Request-ID"] == "rl-7"

    @pytest.mark.asyncio
    async def test_disabled_limiter_lets_everything_through(self, limited_app):
        """With the limiter switched off no request should be rejected."""
        with patch("app.middleware.rate_limit.settings") as mock_settings:
            mock_settings.rate_limit_enabled = False
            mock_settings.rate_limit_requests = 1
            mock_settings.rate_limit_window = 60

            transport = ASGITransport(app=limited_app)
            async with AsyncClient(transport=transport, base_url="http://test") as client:
                statuses = [(await client.get("/ping")).status_code for _ in range(3)]

        assert statuses == [200, 200, 200]


class TestHealth:

    @pytest.mark.asyncio
    async def test_health_reports_connected_database(self, test_client):
        """A reachable database should report healthy."""
        response = await test_client.get("/health")

        assert response.status_code == 200
        body = response.json()
        assert body["status"] == "healthy"
        assert body["database"] == "connected"

    @pytest.mark.asyncio
    async def test_health_reports_unreachable_database(self, test_client):
        """A failing connection should report unhealthy instead of erroring."""
        broken_engine = MagicMock()
        broken_engine.connect.side_effect = OSError("connection refused")

        with patch("app.database.engine", broken_engine):
            response = await test_client.get("/health")

        assert response.json()["status"] == "unhealthy"
        assert response.json()["database"] == "disconnected"
