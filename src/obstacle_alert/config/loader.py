"""
Configuration loading - YAML files, pointer files and environment overrides.
"""

import logging
import os
from pathlib import Path

import yaml

from ..utils.constants import ENV_API_KEY, ENV_CAMERA_URL

logger = logging.getLogger(__name__)

DEFAULT_CONFIG_NAME = "config.yaml"


class ConfigValidationError(Exception):
    """Raised when config cannot be found, parsed or validated."""


def find_config_file(config_path: str | None = None) -> Path | None:
    """
    Find config file in standard locations.

    Search order:
    1. Specified path (if provided)
    2. Current directory (config.yaml)
    3. ~/.config/obstacle-alert/config.yaml

    Args:
        config_path: User-specified config path

    Returns:
        Path to config file, or None if no standard location has one

    Raises:
        ConfigValidationError: If a specified path does not exist
    """
    if config_path:
        specified = Path(config_path)
        if specified.exists():
            return specified
        raise ConfigValidationError(f"Specified config file not found: {config_path}")

    search_paths = [
        Path.cwd() / DEFAULT_CONFIG_NAME,
        Path.home() / ".config" / "obstacle-alert" / DEFAULT_CONFIG_NAME,
    ]

    for path in search_paths:
        if path.exists():
            logger.info(f"Using config: {path}")
            return path

    logger.info("No config file found, using defaults and environment")
    return None


def read_config_file(config_file: Path) -> dict:
    """
    Read a YAML config file.

    Supports pointer files: if config only contains `use: path/to/config.yaml`,
    that file is loaded instead.

    Raises:
        ConfigValidationError: If the YAML is invalid or not a mapping
    """
    try:
        with open(config_file, encoding="utf-8") as f:
            config = yaml.safe_load(f) or {}

        # Support pointer files: { use: "path/to/actual/config.yaml" }
        if isinstance(config, dict) and list(config.keys()) == ["use"]:
            pointer_path = Path(config_file).parent / config["use"]
            logger.info(f"Config pointer: {config_file} -> {pointer_path}")
            with open(pointer_path, encoding="utf-8") as f:
                config = yaml.safe_load(f) or {}
            config_file = pointer_path

    except yaml.YAMLError as e:
        raise ConfigValidationError(f"Invalid YAML in {config_file}: {e}") from e
    except OSError as e:
        raise ConfigValidationError(f"Cannot read {config_file}: {e}") from e

    if not isinstance(config, dict):
        raise ConfigValidationError(f"Config must be a mapping: {config_file}")

    logger.info(f"Configuration loaded from {config_file}")
    return config


def load_config_with_env(config: dict) -> dict:
    """
    Apply environment variable overrides to config.

    Args:
        config: Base configuration dictionary

    Returns:
        Configuration with environment variables applied
    """
    if os.environ.get(ENV_API_KEY):
        logger.info(f"Using API key from environment: {ENV_API_KEY}")
        config.setdefault("vision", {})["api_key"] = os.environ[ENV_API_KEY]

    if os.environ.get(ENV_CAMERA_URL):
        logger.info(f"Using camera source from environment: {ENV_CAMERA_URL}")
        config.setdefault("camera", {})["source"] = os.environ[ENV_CAMERA_URL]

    return config


def load_config(config_path: str | None = None) -> dict:
    """
    Load configuration from file (if any) and apply environment overrides.

    Args:
        config_path: Optional explicit config path

    Returns:
        Raw configuration dictionary (not yet validated)
    """
    config_file = find_config_file(config_path)
    config = read_config_file(config_file) if config_file else {}
    return load_config_with_env(config)
