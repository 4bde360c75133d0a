"""Athena gateway — application lifespan (startup / shutdown hooks)."""

from __future__ import annotations

from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

import structlog
from fastapi import FastAPI

from athena_gateway.core.config import has_value, settings

log = structlog.get_logger()


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Log the effective configuration on startup and shutdown."""
    log.info(
        "athena_gateway starting up",
        app_name=settings.next_public_app_name,
        app_version=settings.next_public_app_version,
        environment=settings.environment,
        ollama_base_url=settings.ollama_base_url,
        probe_timeout_seconds=settings.probe_timeout_seconds,
        vercel_token_configured=has_value(settings.vercel_token),
    )

    yield

    log.info("athena_gateway shutting down")
