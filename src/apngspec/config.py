"""
Consolidated configuration system for apngspec.

This module provides a Pydantic-based configuration system holding the delay
defaults, the image extension used by path resolution and reader behaviour
switches, with environment variable support and validation.
"""

from __future__ import annotations

from typing import Annotated

from pydantic import BaseModel, Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

# Largest value an APNG fcTL delay field can hold
UINT_MAX = 0xFFFFFFFF

# =============================================================================
# DELAY SETTINGS
# =============================================================================

class DelaySettings(BaseModel):
    """Fallback numerator/denominator used whenever a delay token is missing or malformed."""

    default_numerator: Annotated[int, Field(
        ge=0,
        le=UINT_MAX,
        description="Frame delay numerator used when none is given"
    )] = 100

    default_denominator: Annotated[int, Field(
        ge=0,
        le=UINT_MAX,
        description="Frame delay denominator used when none is given"
    )] = 1000


# =============================================================================
# PATH SETTINGS
# =============================================================================

class PathSettings(BaseModel):
    """Path resolution settings."""

    image_extension: Annotated[str, Field(
        description="Extension appended to bare frame paths and required of wildcard matches"
    )] = ".png"

    @field_validator('image_extension')
    @classmethod
    def validate_extension_format(cls, v):
        """Ensure extension starts with dot."""
        if not v.startswith('.') or len(v) < 2:
            raise ValueError(f"Extension must start with dot, got: {v}")
        return v


# =============================================================================
# READER SETTINGS
# =============================================================================

class ReaderSettings(BaseModel):
    """Spec document reader behaviour."""

    require_delays: Annotated[bool, Field(
        description="Treat a document without a 'delays' list as structurally broken"
    )] = False

    json_suffix: Annotated[str, Field(
        description="Filename suffix that selects the JSON reader (case-insensitive)"
    )] = ".json"


# =============================================================================
# MAIN APPLICATION CONFIGURATION
# =============================================================================

class AppConfig(BaseSettings):
    """
    Main application configuration with environment variable support.

    All settings can be overridden via environment variables with APNGSPEC_ prefix.
    Example: APNGSPEC_DELAY__DEFAULT_DENOMINATOR=100
    """

    model_config = SettingsConfigDict(
        env_prefix="APNGSPEC_",
        env_nested_delimiter="__",
        case_sensitive=False,
    )

    delay: DelaySettings = DelaySettings()
    paths: PathSettings = PathSettings()
    reader: ReaderSettings = ReaderSettings()

    def default_delay_values(self) -> tuple[int, int]:
        """Return the configured (numerator, denominator) fallback pair."""
        return self.delay.default_numerator, self.delay.default_denominator

    def is_json_spec(self, file_name: str) -> bool:
        """Check if a spec filename selects the JSON reader."""
        return file_name.lower().endswith(self.reader.json_suffix.lower())


# =============================================================================
# DEFAULT INSTANCE
# =============================================================================

app_config = AppConfig()

DEFAULT_FRAME_NUMERATOR = app_config.delay.default_numerator
DEFAULT_FRAME_DENOMINATOR = app_config.delay.default_denominator
IMAGE_EXTENSION = app_config.paths.image_extension


def create_config_from_env() -> AppConfig:
    """Create a new configuration instance from environment variables."""
    return AppConfig()
