"""API error type and its JSON rendering.

Routes raise ``ApiError``; the handler installed by ``install_error_handlers``
turns it into ``{"error": message}`` with the matching status code.
"""

from __future__ import annotations

import structlog
from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

logger = structlog.get_logger()


class ApiError(Exception):
    """An error scoped to a single request, with the HTTP status to answer."""

    def __init__(self, status_code: int, message: str):
        super().__init__(message)
        self.status_code = status_code
        self.message = message


async def api_error_handler(request: Request, exc: ApiError) -> JSONResponse:
    logger.info(
        "api_error",
        path=request.url.path,
        status=exc.status_code,
        error=exc.message,
    )
    return JSONResponse(status_code=exc.status_code, content={"error": exc.message})


def install_error_handlers(application: FastAPI) -> None:
    """Register the ``ApiError`` handler on an application."""
    application.add_exception_handler(ApiError, api_error_handler)
