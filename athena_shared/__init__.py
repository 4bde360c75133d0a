"""Athena shared utilities package."""

from athena_shared.config import BaseServiceSettings
from athena_shared.errors import ApiError
from athena_shared.logging import setup_logging

__all__ = ["setup_logging", "BaseServiceSettings", "ApiError"]
