"""Settings for nats_json, read from ``NATS_JSON_*`` environment variables."""

from __future__ import annotations

from functools import lru_cache
from typing import Literal

from pydantic import Field, ValidationError
from pydantic_settings import BaseSettings, SettingsConfigDict

from .errors import ConfigurationError


class CodecSettings(BaseSettings):
    """Process-wide defaults. Every operation also takes explicit overrides."""

    zone: str | None = Field(
        None,
        description="Zone parsed timestamps are converted to (host zone when unset)",
    )
    object_scan: Literal["first_brace", "balanced"] = Field(
        "first_brace",
        description="How get_json_object finds the end of an object",
    )

    model_config = SettingsConfigDict(env_prefix="NATS_JSON_")


@lru_cache(maxsize=1)
def get_settings() -> CodecSettings:
    """Return the cached settings instance.

    Invalid ``NATS_JSON_*`` values raise ConfigurationError.
    """
    try:
        return CodecSettings()
    except ValidationError as exc:
        raise ConfigurationError(f"invalid NATS_JSON_* settings: {exc}") from exc
