"""
Pydantic schemas for configuration validation.

Provides type-safe, declarative validation with clear error messages.
"""

from pydantic import BaseModel, ConfigDict, Field, field_validator

from ..models import DEFAULT_SOUND_FILES, ObstacleCategory
from ..utils.constants import (
    DEFAULT_JPEG_QUALITY,
    DEFAULT_MAX_LABELS,
    DEFAULT_MAX_OBJECTS,
    DEFAULT_REQUEST_TIMEOUT,
    DEFAULT_SCAN_INTERVAL,
    DEFAULT_VISION_ENDPOINT,
)


class StrictModel(BaseModel):
    """Base model that rejects unknown fields."""

    model_config = ConfigDict(extra="forbid")


class VisionConfig(StrictModel):
    """Vision API settings."""

    api_key: str = Field(default="", description="Vision API key")
    endpoint: str = Field(default=DEFAULT_VISION_ENDPOINT, min_length=1)
    timeout_seconds: float = Field(default=DEFAULT_REQUEST_TIMEOUT, gt=0)
    max_objects: int = Field(default=DEFAULT_MAX_OBJECTS, ge=1, le=100)
    max_labels: int = Field(default=DEFAULT_MAX_LABELS, ge=1, le=100)

    @field_validator("endpoint")
    @classmethod
    def validate_endpoint(cls, v: str) -> str:
        if not v.startswith(("http://", "https://")):
            raise ValueError("endpoint must be an http(s) URL")
        return v


class CameraConfig(StrictModel):
    """Camera settings."""

    source: str | int = Field(
        default=0, description="Device index, device path or stream URL"
    )
    jpeg_quality: int = Field(default=DEFAULT_JPEG_QUALITY, ge=1, le=100)


class AudioConfig(StrictModel):
    """Alert sound settings."""

    sounds_dir: str = Field(default="assets/sounds", min_length=1)
    sounds: dict[ObstacleCategory, str] = Field(
        default_factory=lambda: dict(DEFAULT_SOUND_FILES)
    )

    @field_validator("sounds")
    @classmethod
    def validate_sounds(
        cls, v: dict[ObstacleCategory, str]
    ) -> dict[ObstacleCategory, str]:
        if ObstacleCategory.DEFAULT not in v:
            raise ValueError("sounds must include a 'default' entry")
        return v


class RuntimeConfig(StrictModel):
    """Runtime settings."""

    scan_interval_seconds: float = Field(
        default=DEFAULT_SCAN_INTERVAL,
        ge=0,
        description="Seconds between automatic scans, 0 = manual trigger",
    )


class Config(StrictModel):
    """Complete configuration schema."""

    vision: VisionConfig = Field(default_factory=VisionConfig)
    camera: CameraConfig = Field(default_factory=CameraConfig)
    audio: AudioConfig = Field(default_factory=AudioConfig)
    runtime: RuntimeConfig = Field(default_factory=RuntimeConfig)


def validate_config_pydantic(config: dict) -> Config:
    """
    Validate configuration using Pydantic.

    Args:
        config: Raw configuration dictionary

    Returns:
        Validated Config object

    Raises:
        pydantic.ValidationError: If validation fails
    """
    return Config(**config)
