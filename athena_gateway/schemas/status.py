"""Pydantic schemas for the status and runtime-mode endpoints."""

from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class _CamelModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class RuntimeInfo(_CamelModel):
    node_env: str
    platform_hint: str
    on_cloud: bool
    on_vercel: bool
    on_render: bool


class ProviderKeySummary(_CamelModel):
    configured: bool
    source: Literal["env", "none"] = "none"


class OllamaSummary(_CamelModel):
    base_url: str
    reachable: bool


class DiagnosticsMeta(_CamelModel):
    refreshed_at: int


class DiagnosticsSummary(_CamelModel):
    runtime: RuntimeInfo
    providers: dict[str, ProviderKeySummary | OllamaSummary]
    meta: DiagnosticsMeta


class RuntimeMode(_CamelModel):
    remote_mode: bool
    public_url: str | None = None
