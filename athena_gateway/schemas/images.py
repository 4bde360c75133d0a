"""Pydantic schemas for image-model configuration."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class ModelCatalog(BaseModel):
    """Deduplicated, sorted model names of one provider plus its default."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    models: list[str] = Field(default_factory=list)
    default_model: str = ""


class ImageModelsResponse(BaseModel):
    providers: dict[str, ModelCatalog]
