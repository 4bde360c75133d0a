"""Settings common to every Athena service.

Read from the process environment first, then from a ``.env`` file in the
working directory. Unknown keys are ignored, since the same ``.env`` is shared
with the Next.js/Electron front-end.
"""

from __future__ import annotations

from pydantic_settings import BaseSettings, SettingsConfigDict


class BaseServiceSettings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    environment: str = "development"
    debug: bool = False
    log_level: str = "INFO"
    service_name: str = "athena"
    service_port: int = 8000

    # Comma-separated; "*" lets the Electron shell and any browser origin in
    cors_allow_origins: str = "*"

    @property
    def is_production(self) -> bool:
        return self.environment.lower() == "production"

    @property
    def json_logs(self) -> bool:
        return self.is_production

    @property
    def cors_origins(self) -> list[str]:
        return [o.strip() for o in self.cors_allow_origins.split(",") if o.strip()]
