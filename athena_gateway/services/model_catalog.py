"""Athena gateway — image model catalogs built from environment values."""

from __future__ import annotations

import re

import icu

from athena_gateway.core.config import GatewaySettings
from athena_gateway.schemas.images import ModelCatalog

# Comma, the two-character escape "\n" (as written in .env files), or a real newline.
_SEPARATORS = re.compile(r",|\\n|\n")


def parse_model_list(value: str | None) -> list[str]:
    """Split a model list string into trimmed, non-empty names."""
    if not value:
        return []
    return [entry.strip() for entry in _SEPARATORS.split(value) if entry.strip()]


def _base_collator() -> icu.Collator:
    # Root-locale collation at primary strength ignores case and accents.
    collator = icu.Collator.createInstance(icu.Locale.getRoot())
    collator.setStrength(icu.Collator.PRIMARY)
    return collator


_COLLATOR = _base_collator()


def build_model_catalog(model_env: str | None, models_env: str | None) -> ModelCatalog:
    """Merge a provider's default model and model list into a catalog.

    The default is prepended when it is not already listed. Names are
    deduplicated, then collated ignoring case and accents. Without a default, the first
    sorted name becomes the default.
    """
    listed = parse_model_list(models_env)
    default_model = (model_env or "").strip()
    if default_model and default_model not in listed:
        listed = [default_model, *listed]

    models = sorted(dict.fromkeys(listed), key=_COLLATOR.getSortKey)
    return ModelCatalog(
        models=models,
        default_model=default_model or (models[0] if models else ""),
    )


def build_image_providers(config: GatewaySettings) -> dict[str, ModelCatalog]:
    return {
        "fireworks": build_model_catalog(
            config.fireworks_image_model, config.fireworks_image_models
        ),
        "nanobanana": build_model_catalog(
            config.nanobanana_image_model, config.nanobanana_image_models
        ),
        "ideogram": build_model_catalog(
            config.ideogram_image_model, config.ideogram_image_models
        ),
    }
