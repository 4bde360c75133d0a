"""Athena gateway — runtime and provider diagnostics."""

from __future__ import annotations

import sys
import time

import httpx
import structlog

from athena_gateway.core.config import GatewaySettings, has_value
from athena_gateway.schemas.status import (
    DiagnosticsMeta,
    DiagnosticsSummary,
    OllamaSummary,
    ProviderKeySummary,
    RuntimeInfo,
    RuntimeMode,
)

logger = structlog.get_logger()

_PLATFORM_HINTS = {"linux": "linux", "darwin": "macos", "win32": "windows"}


def platform_hint(platform: str | None = None) -> str:
    return _PLATFORM_HINTS.get(platform or sys.platform, "unknown")


def runtime_info(config: GatewaySettings) -> RuntimeInfo:
    on_vercel = config.vercel == "1"
    on_render = config.render == "true" or has_value(config.render_service_id)
    return RuntimeInfo(
        node_env=config.node_env or "production",
        platform_hint=platform_hint(),
        on_cloud=on_vercel or on_render,
        on_vercel=on_vercel,
        on_render=on_render,
    )


def provider_keys(config: GatewaySettings) -> dict[str, ProviderKeySummary]:
    keys = {
        "anthropic": config.claude_api_key,
        "openai": config.openai_api_key,
        "groq": config.groq_api_key,
        "openrouter": config.openrouter_api_key,
        "fireworks": config.fireworks_api_key,
    }
    return {
        name: ProviderKeySummary(configured=True, source="env")
        if has_value(key)
        else ProviderKeySummary(configured=False, source="none")
        for name, key in keys.items()
    }


async def ollama_reachable(
    client: httpx.AsyncClient, base_url: str, timeout: float
) -> bool:
    """GET ``/api/tags`` on the Ollama runtime; any failure means unreachable."""
    try:
        response = await client.get(
            f"{base_url.rstrip('/')}/api/tags",
            headers={"Cache-Control": "no-store"},
            timeout=timeout,
        )
    except Exception as exc:
        logger.info("ollama_unreachable", base_url=base_url, error=str(exc) or repr(exc))
        return False
    return response.is_success


async def collect_diagnostics(
    config: GatewaySettings, client: httpx.AsyncClient
) -> DiagnosticsSummary:
    reachable = await ollama_reachable(
        client, config.ollama_base_url, config.diagnostics_ollama_timeout_seconds
    )
    providers: dict[str, ProviderKeySummary | OllamaSummary] = {
        **provider_keys(config),
        "ollama": OllamaSummary(base_url=config.ollama_base_url, reachable=reachable),
    }
    return DiagnosticsSummary(
        runtime=runtime_info(config),
        providers=providers,
        meta=DiagnosticsMeta(refreshed_at=int(time.time() * 1000)),
    )


def runtime_mode(config: GatewaySettings) -> RuntimeMode:
    return RuntimeMode(
        remote_mode=config.os_remote_mode == "true",
        public_url=config.os_public_url or None,
    )
