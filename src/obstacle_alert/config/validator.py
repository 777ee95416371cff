"""
Configuration Validator - Validates config syntax and semantic correctness.

Provides comprehensive validation with detailed error messages.
"""

import logging
import sys
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

from pydantic import ValidationError

from ..models import ObstacleCategory
from ..utils.constants import ENV_API_KEY
from .schemas import Config, validate_config_pydantic

logger = logging.getLogger(__name__)


# ANSI color codes for terminal output
class Colors:
    GREEN = "\033[92m"
    RED = "\033[91m"
    YELLOW = "\033[93m"
    CYAN = "\033[96m"
    BOLD = "\033[1m"
    RESET = "\033[0m"

    @classmethod
    def disable(cls):
        """Disable colors for non-TTY output."""
        cls.GREEN = cls.RED = cls.YELLOW = ""
        cls.CYAN = cls.BOLD = cls.RESET = ""


if not sys.stdout.isatty():
    Colors.disable()


@dataclass
class ValidationResult:
    """Result of config validation."""

    valid: bool
    errors: list[str] = field(default_factory=list)
    warnings: list[str] = field(default_factory=list)
    derived: dict[str, Any] = field(default_factory=dict)
    config: Config | None = None


def _format_pydantic_errors(error: ValidationError) -> list[str]:
    messages = []
    for item in error.errors():
        location = ".".join(str(part) for part in item["loc"]) or "config"
        messages.append(f"{location}: {item['msg']}")
    return messages


def validate_config_full(config: dict, require_camera: bool = True) -> ValidationResult:
    """
    Comprehensive config validation with detailed error messages.

    Args:
        config: Configuration dictionary to validate
        require_camera: False when scanning an image file instead of a camera

    Returns:
        ValidationResult with errors, warnings, derived settings and the
        parsed Config when valid.
    """
    result = ValidationResult(valid=True)

    try:
        parsed = validate_config_pydantic(config)
    except ValidationError as e:
        result.errors.extend(_format_pydantic_errors(e))
        result.valid = False
        return result

    if not parsed.vision.api_key:
        result.errors.append(
            f"vision.api_key is required (or set {ENV_API_KEY} in the environment)"
        )

    _validate_sounds(parsed, result)

    result.derived["camera_source"] = (
        parsed.camera.source if require_camera else "image file"
    )
    result.derived["mode"] = (
        f"every {parsed.runtime.scan_interval_seconds:g}s"
        if parsed.runtime.scan_interval_seconds > 0
        else "manual trigger"
    )

    if result.errors:
        result.valid = False
    else:
        result.config = parsed

    return result


def _validate_sounds(parsed: Config, result: ValidationResult) -> None:
    """Check that sound files exist. Missing files are warnings except default."""
    sounds_dir = Path(parsed.audio.sounds_dir)
    if not sounds_dir.is_dir():
        result.errors.append(f"audio.sounds_dir not found: {sounds_dir}")
        return

    available = []
    for category, filename in parsed.audio.sounds.items():
        if (sounds_dir / filename).exists():
            available.append(category.value)
        elif category is ObstacleCategory.DEFAULT:
            result.errors.append(f"Default sound not found: {sounds_dir / filename}")
        else:
            result.warnings.append(
                f"Sound for '{category.value}' not found: {sounds_dir / filename} "
                "(default sound will be used)"
            )
    result.derived["sounds"] = available


def print_validation_result(result: ValidationResult) -> None:
    """Print validation result in Terraform-like format."""
    print()
    print(f"{Colors.BOLD}Configuration Validation{Colors.RESET}")
    print("=" * 60)

    if result.valid:
        print(f"\n{Colors.GREEN}✓ Configuration is valid{Colors.RESET}")
    else:
        print(f"\n{Colors.RED}✗ Configuration has errors{Colors.RESET}")

    if result.errors:
        print(f"\n{Colors.RED}Errors:{Colors.RESET}")
        for error in result.errors:
            print(f"  {Colors.RED}✗{Colors.RESET} {error}")

    if result.warnings:
        print(f"\n{Colors.YELLOW}Warnings:{Colors.RESET}")
        for warning in result.warnings:
            print(f"  {Colors.YELLOW}!{Colors.RESET} {warning}")

    if result.valid and result.derived:
        print(f"\n{Colors.CYAN}Derived Configuration:{Colors.RESET}")
        print(f"  Camera: {result.derived.get('camera_source')}")
        print(f"  Mode: {result.derived.get('mode')}")
        sounds = result.derived.get("sounds", [])
        if sounds:
            print(f"  Sounds: {', '.join(sounds)}")

    print()
