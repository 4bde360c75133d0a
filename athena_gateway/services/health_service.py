"""Athena gateway — external service health aggregation.

Each service is described by a ``ServiceCheck``. A check whose credential is
required but missing resolves to ``not_configured`` without touching the
network; all remaining checks are probed concurrently and joined into one
``HealthSnapshot``.
"""

from __future__ import annotations

import asyncio
import time
from dataclasses import dataclass, field

import httpx
import structlog

from athena_gateway.core.config import GatewaySettings, has_value
from athena_gateway.schemas.health import HealthSnapshot, ProbeResult, ProbeStatus
from athena_gateway.services.probe import ProbeFn, probe

logger = structlog.get_logger()

GITHUB_URL = "https://api.github.com"
OPENAI_URL = "https://api.openai.com/v1/models"
ANTHROPIC_URL = "https://api.anthropic.com/v1/messages"
ANTHROPIC_VERSION = "2023-06-01"
VERCEL_PROJECTS_URL = "https://api.vercel.com/v9/projects"
RENDER_SERVICES_URL = "https://api.render.com/v1/services"


@dataclass(frozen=True)
class ServiceCheck:
    """How to probe one external service."""

    name: str
    url: str
    headers: dict[str, str] = field(default_factory=dict)
    credential: str | None = None
    requires_credential: bool = True

    @property
    def configured(self) -> bool:
        return not self.requires_credential or has_value(self.credential)


def _bearer(token: str | None) -> dict[str, str]:
    return {"Authorization": f"Bearer {token}"} if has_value(token) else {}


def build_service_checks(config: GatewaySettings) -> list[ServiceCheck]:
    """Describe every monitored service, in snapshot order."""
    github_headers = (
        {"Authorization": f"token {config.github_token}"}
        if has_value(config.github_token)
        else {}
    )
    anthropic_headers = (
        {"x-api-key": config.claude_api_key, "anthropic-version": ANTHROPIC_VERSION}
        if has_value(config.claude_api_key)
        else {}
    )
    ollama_url = f"{config.ollama_base_url.rstrip('/')}/api/tags"

    return [
        ServiceCheck(
            "github",
            GITHUB_URL,
            github_headers,
            config.github_token,
            requires_credential=False,
        ),
        ServiceCheck(
            "openai", OPENAI_URL, _bearer(config.openai_api_key), config.openai_api_key
        ),
        ServiceCheck(
            "anthropic", ANTHROPIC_URL, anthropic_headers, config.claude_api_key
        ),
        ServiceCheck(
            "vercel",
            VERCEL_PROJECTS_URL,
            _bearer(config.vercel_token),
            config.vercel_token,
        ),
        ServiceCheck(
            "render",
            RENDER_SERVICES_URL,
            _bearer(config.render_api_key),
            config.render_api_key,
        ),
        # Local model runtime on loopback: no auth.
        ServiceCheck("ollama", ollama_url, requires_credential=False),
    ]


async def resolve_check(
    client: httpx.AsyncClient,
    check: ServiceCheck,
    probe_fn: ProbeFn = probe,
) -> ProbeResult:
    """Probe ``check`` unless its credential is missing."""
    if not check.configured:
        return ProbeResult(status=ProbeStatus.NOT_CONFIGURED)
    return await probe_fn(client, check.url, check.headers)


async def collect_health_snapshot(
    config: GatewaySettings,
    client: httpx.AsyncClient,
    probe_fn: ProbeFn = probe,
) -> HealthSnapshot:
    """Run every service check concurrently and wait for all of them."""
    checks = build_service_checks(config)
    results = await asyncio.gather(
        *(resolve_check(client, check, probe_fn) for check in checks)
    )
    snapshot = HealthSnapshot(
        timestamp=int(time.time() * 1000),
        checks={check.name: result for check, result in zip(checks, results)},
    )
    logger.info(
        "health_snapshot_collected",
        **{name: result.status.value for name, result in snapshot.checks.items()},
    )
    return snapshot
