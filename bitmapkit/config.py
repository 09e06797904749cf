"""
Configuration for bitmapkit.

Settings are pydantic models grouped by concern and populated from
``BITMAPKIT_*`` environment variables:

    BITMAPKIT_ENVIRONMENT      free-form environment name
    BITMAPKIT_LOG_LEVEL        DEBUG, INFO, WARNING, ERROR or CRITICAL
    BITMAPKIT_JPEG_QUALITY     default JPEG quality (0-100)
    BITMAPKIT_SEPIA_MODE       chained or standard
    BITMAPKIT_BLUR_PRECISION   exact or fixed_point
"""

import logging
import os
from functools import lru_cache
from typing import Mapping, Optional

from pydantic import BaseModel, Field, ValidationError, field_validator

from bitmapkit.core.constants import CodecConstants, SystemConstants
from bitmapkit.core.enums import BlurPrecision, SepiaMode
from bitmapkit.core.exceptions import ConfigurationError

logger = logging.getLogger(__name__)


class SystemSettings(BaseModel):
    """Logging settings"""

    log_level: str = SystemConstants.LOG_LEVEL_DEFAULT
    log_format: str = SystemConstants.LOG_FORMAT

    @field_validator("log_level")
    @classmethod
    def _check_level(cls, value: str) -> str:
        level = value.strip().upper()
        if level not in SystemConstants.LOG_LEVELS:
            raise ValueError(f"log_level must be one of {SystemConstants.LOG_LEVELS}")
        return level


class CodecSettings(BaseModel):
    """Encoder defaults"""

    default_quality: int = Field(
        default=CodecConstants.DEFAULT_QUALITY,
        ge=CodecConstants.MIN_QUALITY,
        le=CodecConstants.MAX_QUALITY,
    )


class FilterSettings(BaseModel):
    sepia_mode: SepiaMode = SepiaMode.CHAINED


class BlurSettings(BaseModel):
    precision: BlurPrecision = BlurPrecision.EXACT


class Settings(BaseModel):
    """Top-level settings"""

    environment: str = SystemConstants.ENVIRONMENT_DEFAULT
    system: SystemSettings = Field(default_factory=SystemSettings)
    codec: CodecSettings = Field(default_factory=CodecSettings)
    filters: FilterSettings = Field(default_factory=FilterSettings)
    blur: BlurSettings = Field(default_factory=BlurSettings)


# Environment variable -> (group, field)
_ENV_FIELDS = {
    "ENVIRONMENT": (None, "environment"),
    "LOG_LEVEL": ("system", "log_level"),
    "JPEG_QUALITY": ("codec", "default_quality"),
    "SEPIA_MODE": ("filters", "sepia_mode"),
    "BLUR_PRECISION": ("blur", "precision"),
}


def load_settings(environ: Optional[Mapping[str, str]] = None) -> Settings:
    """
    Build Settings from environment variables.

    Args:
        environ: Mapping to read from (defaults to os.environ)

    Returns:
        Validated Settings

    Raises:
        ConfigurationError: If a variable holds an invalid value
    """
    environ = os.environ if environ is None else environ
    raw: dict = {}

    for name, (group, field) in _ENV_FIELDS.items():
        value = environ.get(SystemConstants.ENV_PREFIX + name)
        if value is None:
            continue
        if group is None:
            raw[field] = value
        else:
            raw.setdefault(group, {})[field] = value.strip().lower() if group != "system" else value

    try:
        return Settings(**raw)
    except ValidationError as e:
        raise ConfigurationError(f"Invalid bitmapkit settings: {e}") from e


@lru_cache()
def get_settings() -> Settings:
    """Process-wide settings, loaded once from the environment."""
    return load_settings()


def configure_logging(settings: Optional[Settings] = None) -> None:
    """Configure root logging from settings."""
    settings = settings or get_settings()

    logging.basicConfig(
        level=getattr(logging, settings.system.log_level),
        format=settings.system.log_format,
    )
    logger.info(f"Logging configured (environment: {settings.environment})")
