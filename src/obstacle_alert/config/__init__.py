"""
Configuration loading and validation.

- load_config: Find and read config.yaml, apply environment overrides
- validate_config_full: Validation with errors/warnings
- print_validation_result: Terraform-like report for --validate

Pydantic schemas available for type-safe validation:
- Config: Complete configuration schema
- validate_config_pydantic: Validate and parse config to Pydantic model
"""

from .loader import (
    ConfigValidationError,
    find_config_file,
    load_config,
    load_config_with_env,
    read_config_file,
)
from .schemas import (
    AudioConfig,
    CameraConfig,
    Config,
    RuntimeConfig,
    VisionConfig,
    validate_config_pydantic,
)
from .validator import (
    ValidationResult,
    print_validation_result,
    validate_config_full,
)

__all__ = [
    "AudioConfig",
    "CameraConfig",
    # Pydantic validation
    "Config",
    # Exception
    "ConfigValidationError",
    "RuntimeConfig",
    "ValidationResult",
    "VisionConfig",
    # Config loading
    "find_config_file",
    "load_config",
    "load_config_with_env",
    # Display
    "print_validation_result",
    "read_config_file",
    # Validation
    "validate_config_full",
    "validate_config_pydantic",
]
