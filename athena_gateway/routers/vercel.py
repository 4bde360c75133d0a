"""Athena gateway — Vercel deployment lookup (forwards to the Vercel API)."""

from __future__ import annotations

from typing import Any

import httpx
import structlog
from fastapi import APIRouter, Depends, Header, status

from athena_gateway.core.config import GatewaySettings, get_settings
from athena_gateway.core.http import get_http_client
from athena_gateway.services.vercel_client import VercelClient, resolve_vercel_token
from athena_shared.errors import ApiError

router = APIRouter(prefix="/api/vercel", tags=["Vercel"])
logger = structlog.get_logger()


# ":path" lets an empty trailing segment reach the handler so it can answer 400.
@router.get("/deployments/{deployment_id:path}")
async def get_deployment(
    deployment_id: str,
    x_api_key_vercel: str | None = Header(None, alias="X-API-Key-Vercel"),
    config: GatewaySettings = Depends(get_settings),
    http_client: httpx.AsyncClient = Depends(get_http_client),
) -> dict[str, Any]:
    """Look up one deployment by ID."""
    if not deployment_id.strip():
        raise ApiError(status.HTTP_400_BAD_REQUEST, "Deployment ID is required")

    token = resolve_vercel_token(x_api_key_vercel, config)
    if token is None:
        raise ApiError(
            status.HTTP_401_UNAUTHORIZED,
            "Vercel token not provided. Please configure it in Settings.",
        )

    client = VercelClient(
        http_client,
        token,
        base_url=config.vercel_api_url,
        team_id=config.vercel_team_id,
    )
    try:
        deployment = await client.get_deployment(deployment_id)
    except Exception as exc:
        logger.exception("vercel_deployment_lookup_failed", deployment_id=deployment_id)
        raise ApiError(
            status.HTTP_500_INTERNAL_SERVER_ERROR,
            str(exc) or "Failed to get deployment",
        ) from exc

    if not deployment:
        raise ApiError(status.HTTP_404_NOT_FOUND, "Deployment not found")

    return {"deployment": deployment}
