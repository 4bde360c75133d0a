"""Pydantic schemas for the health endpoints."""

from __future__ import annotations

import enum

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class ProbeStatus(str, enum.Enum):
    """Outcome of a single reachability probe."""

    HEALTHY = "healthy"
    UNHEALTHY = "unhealthy"
    OFFLINE = "offline"
    NOT_CONFIGURED = "not_configured"


class ProbeResult(BaseModel):
    """Result of probing one external service.

    Unset fields are left out of the JSON body, so an unconfigured service
    serialises as ``{"status": "not_configured"}``.
    """

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        frozen=True,
    )

    status: ProbeStatus
    latency_ms: int | None = None
    http_code: int | None = None
    error_message: str | None = None


class HealthSnapshot(BaseModel):
    """All probe results taken during one request."""

    timestamp: int
    checks: dict[str, ProbeResult]
