"""Library configuration using pydantic-settings."""

from __future__ import annotations

from functools import lru_cache
from typing import Literal

from pydantic_settings import BaseSettings


class NrnSettings(BaseSettings):
    """Settings for date construction, adulthood and logging."""

    model_config = {"env_prefix": "BELGIAN_NRN_"}

    timezone: str = "Europe/Brussels"  # civil calendar birth dates are anchored to
    legal_adult_age: int = 18
    log_level: str = "INFO"
    log_format: Literal["console", "json"] = "console"


@lru_cache(maxsize=1)
def get_settings() -> NrnSettings:
    """Return the process-wide settings, read once from the environment."""
    return NrnSettings()
