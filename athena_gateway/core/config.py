"""Athena gateway — environment-based configuration."""

from __future__ import annotations

from athena_shared.config import BaseServiceSettings


class GatewaySettings(BaseServiceSettings):
    """Settings specific to the Athena gateway."""

    service_name: str = "athena_gateway"
    service_port: int = 8000

    # App metadata (shared with the desktop/web front-end)
    next_public_app_name: str = "OS Athena"
    next_public_app_version: str = "0.0.0"
    next_public_updates_owner: str = "raynaythegreat"
    next_public_updates_repo: str = "AI-Gatekeep"

    # Service credentials — a blank value counts as unset
    github_token: str | None = None
    openai_api_key: str | None = None
    claude_api_key: str | None = None
    vercel_token: str | None = None
    vercel_team_id: str | None = None
    render_api_key: str | None = None
    groq_api_key: str | None = None
    openrouter_api_key: str | None = None
    fireworks_api_key: str | None = None

    # Endpoints
    ollama_base_url: str = "http://localhost:11434"
    vercel_api_url: str = "https://api.vercel.com"

    # Outbound HTTP
    probe_timeout_seconds: float = 5.0
    diagnostics_ollama_timeout_seconds: float = 1.5

    # Image model catalogs: a default plus a comma/newline separated list
    fireworks_image_model: str | None = None
    fireworks_image_models: str | None = None
    nanobanana_image_model: str | None = None
    nanobanana_image_models: str | None = None
    ideogram_image_model: str | None = None
    ideogram_image_models: str | None = None

    # Runtime mode reported to the front-end
    node_env: str | None = None

    # Hosting platform markers
    vercel: str | None = None
    render: str | None = None
    render_service_id: str | None = None

    # Remote access mode
    os_remote_mode: str | None = None
    os_public_url: str | None = None


def get_settings() -> GatewaySettings:
    """FastAPI dependency — settings resolved fresh for each request."""
    return GatewaySettings()


def has_value(value: str | None) -> bool:
    """True when an environment value is present and not blank."""
    return bool(value and value.strip())


settings = GatewaySettings()
