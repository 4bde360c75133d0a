"""Shared fixtures for gateway tests.

Settings are built with ``_env_file=None`` and every credential passed
explicitly, so a developer's shell or ``.env`` never leaks into a test.
"""

from __future__ import annotations

from collections.abc import Callable, Iterator

import httpx
import pytest
from fastapi.testclient import TestClient

from athena_gateway.core.config import GatewaySettings, get_settings
from athena_gateway.core.http import get_http_client
from athena_gateway.main import app

_UNSET_ENV = {
    "github_token": None,
    "openai_api_key": None,
    "claude_api_key": None,
    "vercel_token": None,
    "vercel_team_id": None,
    "render_api_key": None,
    "groq_api_key": None,
    "openrouter_api_key": None,
    "fireworks_api_key": None,
    "fireworks_image_model": None,
    "fireworks_image_models": None,
    "nanobanana_image_model": None,
    "nanobanana_image_models": None,
    "ideogram_image_model": None,
    "ideogram_image_models": None,
    "vercel": None,
    "render": None,
    "render_service_id": None,
    "node_env": None,
    "os_remote_mode": None,
    "os_public_url": None,
    "ollama_base_url": "http://localhost:11434",
    "vercel_api_url": "https://api.vercel.com",
}


def make_settings(**overrides) -> GatewaySettings:
    return GatewaySettings(_env_file=None, **{**_UNSET_ENV, **overrides})


class RecordingTransport(httpx.MockTransport):
    """Mock transport that keeps every request it served."""

    def __init__(self, handler: Callable[[httpx.Request], httpx.Response]):
        self.requests: list[httpx.Request] = []

        def record(request: httpx.Request) -> httpx.Response:
            self.requests.append(request)
            return handler(request)

        super().__init__(record)

    def hosts(self) -> list[str]:
        return [request.url.host for request in self.requests]


@pytest.fixture
def settings_factory() -> Callable[..., GatewaySettings]:
    return make_settings


@pytest.fixture
def api() -> Iterator[Callable[..., TestClient]]:
    """Build a TestClient wired to injected settings and an outbound transport."""

    def build(
        settings: GatewaySettings | None = None,
        transport: httpx.MockTransport | None = None,
    ) -> TestClient:
        config = settings or make_settings()
        app.dependency_overrides[get_settings] = lambda: config
        if transport is not None:

            async def _client():
                async with httpx.AsyncClient(
                    transport=transport, follow_redirects=True
                ) as client:
                    yield client

            app.dependency_overrides[get_http_client] = _client
        return TestClient(app)

    yield build
    app.dependency_overrides.clear()
