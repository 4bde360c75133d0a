"""Athena gateway — diagnostics and runtime-mode endpoints."""

from __future__ import annotations

import httpx
from fastapi import APIRouter, Depends

from athena_gateway.core.config import GatewaySettings, get_settings
from athena_gateway.core.http import get_http_client
from athena_gateway.schemas.status import DiagnosticsSummary, RuntimeMode
from athena_gateway.services.diagnostics import collect_diagnostics, runtime_mode

router = APIRouter(prefix="/api", tags=["Status"])


@router.get("/status/diagnostics", response_model=DiagnosticsSummary)
async def diagnostics(
    config: GatewaySettings = Depends(get_settings),
    client: httpx.AsyncClient = Depends(get_http_client),
) -> DiagnosticsSummary:
    """Runtime environment, provider key presence and Ollama reachability."""
    return await collect_diagnostics(config, client)


@router.get("/env/mode", response_model=RuntimeMode)
async def env_mode(config: GatewaySettings = Depends(get_settings)) -> RuntimeMode:
    return runtime_mode(config)
