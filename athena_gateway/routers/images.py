"""Athena gateway — image model configuration."""

from __future__ import annotations

from fastapi import APIRouter, Depends

from athena_gateway.core.config import GatewaySettings, get_settings
from athena_gateway.schemas.images import ImageModelsResponse
from athena_gateway.services.model_catalog import build_image_providers

router = APIRouter(prefix="/api/images", tags=["Images"])


@router.get("/models", response_model=ImageModelsResponse)
async def image_models(
    config: GatewaySettings = Depends(get_settings),
) -> ImageModelsResponse:
    """Model catalogs for every image provider."""
    return ImageModelsResponse(providers=build_image_providers(config))
