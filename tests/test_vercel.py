"""Tests for the Vercel deployment lookup."""

from __future__ import annotations

import httpx
import pytest

from athena_gateway.services.vercel_client import VercelClient, resolve_vercel_token
from tests.conftest import RecordingTransport, make_settings

DEPLOYMENT = {"uid": "dpl_123", "readyState": "READY", "url": "athena.vercel.app"}


def _vercel_handler(request: httpx.Request) -> httpx.Response:
    if request.url.path == "/v13/deployments/dpl_123":
        return httpx.Response(200, json=DEPLOYMENT)
    return httpx.Response(404, json={"error": {"code": "not_found"}})


def test_token_prefers_header():
    config = make_settings(vercel_token="env-token")
    assert resolve_vercel_token("header-token", config) == "header-token"


def test_token_falls_back_to_environment():
    config = make_settings(vercel_token="env-token")
    assert resolve_vercel_token("  ", config) == "env-token"
    assert resolve_vercel_token(None, config) == "env-token"


def test_token_missing_everywhere():
    assert resolve_vercel_token(None, make_settings()) is None


@pytest.mark.asyncio
async def test_client_sends_bearer_and_team():
    transport = RecordingTransport(_vercel_handler)
    async with httpx.AsyncClient(transport=transport) as http:
        client = VercelClient(http, "tok", team_id="team_9")
        deployment = await client.get_deployment("dpl_123")

    assert deployment == DEPLOYMENT
    (request,) = transport.requests
    assert request.headers["Authorization"] == "Bearer tok"
    assert request.url.params["teamId"] == "team_9"


@pytest.mark.asyncio
async def test_client_returns_none_for_unknown_deployment():
    async with httpx.AsyncClient(transport=RecordingTransport(_vercel_handler)) as http:
        assert await VercelClient(http, "tok").get_deployment("missing") is None


@pytest.mark.asyncio
async def test_client_raises_on_server_error():
    transport = RecordingTransport(lambda request: httpx.Response(502))
    async with httpx.AsyncClient(transport=transport) as http:
        with pytest.raises(httpx.HTTPStatusError):
            await VercelClient(http, "tok").get_deployment("dpl_123")


def test_route_requires_deployment_id(api, settings_factory):
    transport = RecordingTransport(_vercel_handler)
    client = api(settings_factory(vercel_token="env-token"), transport)

    response = client.get("/api/vercel/deployments/")

    assert response.status_code == 400
    assert response.json() == {"error": "Deployment ID is required"}
    assert transport.requests == []


def test_route_without_any_token_is_401(api):
    transport = RecordingTransport(_vercel_handler)
    client = api(transport=transport)

    response = client.get("/api/vercel/deployments/dpl_123")

    assert response.status_code == 401
    assert "Vercel token not provided" in response.json()["error"]
    assert transport.requests == []


def test_route_uses_header_token(api):
    transport = RecordingTransport(_vercel_handler)
    client = api(transport=transport)

    response = client.get(
        "/api/vercel/deployments/dpl_123",
        headers={"X-API-Key-Vercel": "header-token"},
    )

    assert response.status_code == 200
    assert response.json() == {"deployment": DEPLOYMENT}
    assert transport.requests[0].headers["Authorization"] == "Bearer header-token"


def test_route_unknown_deployment_is_404(api, settings_factory):
    client = api(settings_factory(vercel_token="env-token"), RecordingTransport(_vercel_handler))

    response = client.get("/api/vercel/deployments/nope")

    assert response.status_code == 404
    assert response.json() == {"error": "Deployment not found"}


def test_route_empty_record_is_404(api, settings_factory):
    transport = RecordingTransport(lambda request: httpx.Response(200, json={}))
    client = api(settings_factory(vercel_token="env-token"), transport)

    response = client.get("/api/vercel/deployments/dpl_123")

    assert response.status_code == 404


def test_route_network_failure_is_500(api, settings_factory):
    def handler(request: httpx.Request) -> httpx.Response:
        raise httpx.ConnectError("connection refused")

    client = api(settings_factory(vercel_token="env-token"), RecordingTransport(handler))

    response = client.get("/api/vercel/deployments/dpl_123")

    assert response.status_code == 500
    assert response.json() == {"error": "connection refused"}


def test_route_malformed_response_is_500(api, settings_factory):
    transport = RecordingTransport(lambda request: httpx.Response(200, text="<html>"))
    client = api(settings_factory(vercel_token="env-token"), transport)

    response = client.get("/api/vercel/deployments/dpl_123")

    assert response.status_code == 500
    assert response.json()["error"]
