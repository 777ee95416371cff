"""
Utility modules for constants.
"""

from .constants import (
    DEFAULT_JPEG_QUALITY,
    DEFAULT_MAX_LABELS,
    DEFAULT_MAX_OBJECTS,
    DEFAULT_REQUEST_TIMEOUT,
    DEFAULT_VISION_ENDPOINT,
    ENV_API_KEY,
    ENV_CAMERA_URL,
)

__all__ = [
    "DEFAULT_JPEG_QUALITY",
    "DEFAULT_MAX_LABELS",
    "DEFAULT_MAX_OBJECTS",
    "DEFAULT_REQUEST_TIMEOUT",
    "DEFAULT_VISION_ENDPOINT",
    # Environment variables
    "ENV_API_KEY",
    "ENV_CAMERA_URL",
]
