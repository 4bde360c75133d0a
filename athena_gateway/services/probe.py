"""Athena gateway — single-URL reachability probe."""

from __future__ import annotations

import asyncio
import functools
import time
from collections.abc import Awaitable, Callable, Mapping

import httpx
import structlog

from athena_gateway.schemas.health import ProbeResult, ProbeStatus

logger = structlog.get_logger()

CONNECTION_FAILED = "Connection failed"
DEFAULT_TIMEOUT_SECONDS = 5.0

ProbeFn = Callable[
    [httpx.AsyncClient, str, Mapping[str, str] | None], Awaitable[ProbeResult]
]


async def probe(
    client: httpx.AsyncClient,
    url: str,
    headers: Mapping[str, str] | None = None,
    *,
    timeout: float = DEFAULT_TIMEOUT_SECONDS,
) -> ProbeResult:
    """HEAD ``url`` once and classify the outcome.

    Any failure to get a response (DNS, refused connection, TLS, timeout)
    is reported as ``offline`` with no further detail. ``timeout`` bounds the
    whole exchange, not just each socket operation. A response below 400
    is ``healthy``, anything else ``unhealthy``.
    """
    request_headers = {**(headers or {}), "Cache-Control": "no-store"}
    start = time.monotonic()
    try:
        response = await asyncio.wait_for(
            client.head(url, headers=request_headers), timeout
        )
    except Exception as exc:
        logger.warning(
            "health_probe_failed",
            url=url,
            error_type=type(exc).__name__,
            error=str(exc) or repr(exc),
        )
        return ProbeResult(
            status=ProbeStatus.OFFLINE,
            latency_ms=0,
            error_message=CONNECTION_FAILED,
        )

    latency_ms = int((time.monotonic() - start) * 1000)
    status = (
        ProbeStatus.HEALTHY if response.status_code < 400 else ProbeStatus.UNHEALTHY
    )
    logger.debug(
        "health_probe_completed",
        url=url,
        status=status.value,
        http_code=response.status_code,
        latency_ms=latency_ms,
    )
    return ProbeResult(
        status=status,
        latency_ms=latency_ms,
        http_code=response.status_code,
    )


def bounded_probe(timeout: float) -> ProbeFn:
    """A ``probe`` whose total duration is capped at ``timeout`` seconds."""
    return functools.partial(probe, timeout=timeout)
