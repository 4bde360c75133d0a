"""Athena gateway — outbound HTTP client dependency."""

from __future__ import annotations

from collections.abc import AsyncIterator

import httpx
from fastapi import Depends

from athena_gateway.core.config import GatewaySettings, get_settings


async def get_http_client(
    config: GatewaySettings = Depends(get_settings),
) -> AsyncIterator[httpx.AsyncClient]:
    """Yield a client scoped to one request, closed once the response is sent."""
    async with httpx.AsyncClient(
        timeout=config.probe_timeout_seconds,
        follow_redirects=True,
    ) as client:
        yield client
