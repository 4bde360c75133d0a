"""Athena gateway — FastAPI application factory.

Backs the desktop/web front-end with service health, image model
configuration, diagnostics and a Vercel deployment lookup.
"""

from __future__ import annotations

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from athena_gateway.core.config import settings
from athena_gateway.core.events import lifespan
from athena_gateway.routers import health
from athena_gateway.routers.images import router as images_router
from athena_gateway.routers.status import router as status_router
from athena_gateway.routers.vercel import router as vercel_router
from athena_shared.errors import install_error_handlers
from athena_shared.logging import setup_logging
from athena_shared.middleware import RequestContextMiddleware


def create_app() -> FastAPI:
    setup_logging(
        log_level=settings.log_level,
        json_logs=settings.json_logs,
        service_name=settings.service_name,
        app_version=settings.next_public_app_version,
    )

    application = FastAPI(
        title=settings.next_public_app_name,
        version=settings.next_public_app_version,
        docs_url="/docs" if settings.debug else None,
        redoc_url="/redoc" if settings.debug else None,
        lifespan=lifespan,
    )

    # The Electron shell and browser clients call from other origins
    application.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    application.add_middleware(RequestContextMiddleware)
    install_error_handlers(application)

    # Routers
    application.include_router(health.router)
    application.include_router(images_router)
    application.include_router(vercel_router)
    application.include_router(status_router)

    return application


app = create_app()
