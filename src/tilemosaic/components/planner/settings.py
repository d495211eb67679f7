"""Frame planner settings and configuration."""

from __future__ import annotations

import logging

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

# Default values
_DEFAULT_BASE_TILE_PX = 512
_DEFAULT_PIXEL_RATIO = 1.0
_DEFAULT_MAX_ZOOM = 6
_DEFAULT_LOG_LEVEL = "INFO"

# Configuration
_ENV_PREFIX = "MOSAIC_"
_ENV_FILE = "config/examples/.env.mosaic"
_ENV_FILE_ENCODING = "utf-8"


class PlannerSettings(BaseSettings):
    """Settings for the frame planner.

    All settings can be overridden via environment variables with MOSAIC_ prefix.
    Example: MOSAIC_PIXEL_RATIO=2
    """

    base_tile_px: int = Field(
        default=_DEFAULT_BASE_TILE_PX,
        description="On-screen tile edge in CSS pixels at magnification 1",
        gt=0,
    )
    pixel_ratio: float = Field(
        default=_DEFAULT_PIXEL_RATIO,
        description="Device pixels per CSS pixel",
        gt=0,
    )
    max_zoom: int = Field(
        default=_DEFAULT_MAX_ZOOM,
        description="Deepest pyramid level available",
        ge=0,
    )
    log_level: str = Field(
        default=_DEFAULT_LOG_LEVEL,
        description="Logging level for the CLI",
    )

    model_config = SettingsConfigDict(
        env_prefix=_ENV_PREFIX,
        env_file=_ENV_FILE,
        env_file_encoding=_ENV_FILE_ENCODING,
        case_sensitive=False,
        extra="ignore",
    )

    @field_validator("log_level")
    @classmethod
    def _known_log_level(cls, value: str) -> str:
        level = value.strip().upper()
        if not isinstance(logging.getLevelName(level), int):
            raise ValueError(f"Unknown log level: {value}")
        return level
