"""
Obstacle Alert

Camera-driven obstacle alerts for vision-impaired users. Each scan sends a
still image to a cloud vision API, classifies the dominant obstacle by
keyword and plays an alert whose volume grows with the obstacle's size.

Package structure:
  core/      - Camera capture and the scan session
  vision/    - Vision API client and response parsing
  pipeline/  - Classification, volume and confidence heuristics
  audio/     - Alert sound playback
  ui/        - Console display
  config/    - Configuration loading and validation
  models/    - Data models and the obstacle category table
  utils/     - Constants
"""

__version__ = "1.0.0"

from .config import (
    Config,
    ConfigValidationError,
    ValidationResult,
    load_config,
    validate_config_full,
)
from .core import ScanReport, ScanSession, ScanStatus
from .models import (
    Annotations,
    DetectedLabel,
    DetectedObject,
    DetectionResult,
    NormalizedVertex,
    ObstacleCategory,
)
from .pipeline import classify, confidence_score, evaluate, volume_from_vertices

__all__ = [
    # Models
    "Annotations",
    # Config
    "Config",
    "ConfigValidationError",
    "DetectedLabel",
    "DetectedObject",
    "DetectionResult",
    "NormalizedVertex",
    "ObstacleCategory",
    # Session
    "ScanReport",
    "ScanSession",
    "ScanStatus",
    "ValidationResult",
    # Pipeline
    "classify",
    "confidence_score",
    "evaluate",
    "load_config",
    "validate_config_full",
    "volume_from_vertices",
]
