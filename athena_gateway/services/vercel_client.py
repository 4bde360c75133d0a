"""Athena gateway — Vercel REST client."""

from __future__ import annotations

from typing import Any
from urllib.parse import quote

import httpx
import structlog

from athena_gateway.core.config import GatewaySettings, has_value

logger = structlog.get_logger()


class VercelClient:
    """Thin async wrapper over the Vercel deployments API."""

    def __init__(
        self,
        http_client: httpx.AsyncClient,
        token: str,
        *,
        base_url: str = "https://api.vercel.com",
        team_id: str | None = None,
    ):
        self._http = http_client
        self._token = token
        self._base_url = base_url.rstrip("/")
        self._team_id = team_id

    async def get_deployment(self, deployment_id: str) -> dict[str, Any] | None:
        """Fetch one deployment; ``None`` when Vercel does not know the ID."""
        params = {"teamId": self._team_id} if has_value(self._team_id) else None
        response = await self._http.get(
            f"{self._base_url}/v13/deployments/{quote(deployment_id, safe='')}",
            headers={"Authorization": f"Bearer {self._token}"},
            params=params,
        )
        if response.status_code == 404:
            logger.info("vercel_deployment_missing", deployment_id=deployment_id)
            return None
        response.raise_for_status()

        data = response.json()
        logger.info(
            "vercel_deployment_fetched",
            deployment_id=deployment_id,
            state=data.get("readyState") if isinstance(data, dict) else None,
        )
        return data or None


def resolve_vercel_token(header_token: str | None, config: GatewaySettings) -> str | None:
    """Prefer the per-request header, then the process-wide token."""
    if has_value(header_token):
        return header_token
    if has_value(config.vercel_token):
        return config.vercel_token
    return None
