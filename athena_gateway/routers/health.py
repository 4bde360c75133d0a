"""Athena gateway — health-check endpoints.

``/health/live`` reports that the process is up. ``/api/health`` probes the
external services and always answers 200; individual failures are encoded in
the payload.
"""

from __future__ import annotations

import httpx
from fastapi import APIRouter, Depends

from athena_gateway.core.config import GatewaySettings, get_settings
from athena_gateway.core.http import get_http_client
from athena_gateway.schemas.health import HealthSnapshot
from athena_gateway.services.health_service import collect_health_snapshot
from athena_gateway.services.probe import ProbeFn, bounded_probe

router = APIRouter(tags=["health"])


def get_probe(config: GatewaySettings = Depends(get_settings)) -> ProbeFn:
    """FastAPI dependency — the probe used for each service check."""
    return bounded_probe(config.probe_timeout_seconds)


@router.get("/health/live", summary="Liveness probe")
async def liveness() -> dict[str, str]:
    return {"status": "alive"}


@router.get(
    "/api/health",
    response_model=HealthSnapshot,
    response_model_exclude_none=True,
    summary="External service status",
)
async def service_health(
    config: GatewaySettings = Depends(get_settings),
    client: httpx.AsyncClient = Depends(get_http_client),
    probe_fn: ProbeFn = Depends(get_probe),
) -> HealthSnapshot:
    return await collect_health_snapshot(config, client, probe_fn)
