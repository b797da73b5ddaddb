"""Configuration loading utilities with JSON and YAML support."""

from __future__ import annotations

import json
import logging
import os
from pathlib import Path
from typing import Any

import yaml

from springkit.core.config.models import AppConfig, LoggingConfig
from springkit.core.curves.library import PresetRegistry, build_default_registry
from springkit.core.utils.json import read_json
from springkit.core.utils.logging import configure_logging as _configure_root_logging

logger = logging.getLogger(__name__)

# Default app config path (can be overridden)
_DEFAULT_APP_CONFIG_PATH = AppConfig.default_path()
_app_config_cache: AppConfig | None = None

LOG_LEVEL_ENV_VAR = "SPRINGKIT_LOG_LEVEL"


def detect_format(file_path: Path | str) -> str:
    """Detect config file format from extension.

    Raises:
        ValueError: If format cannot be determined

    Example:
        >>> detect_format("springkit.json")
        'json'
        >>> detect_format("springkit.yml")
        'yaml'
    """
    suffix = Path(file_path).suffix.lower()

    if suffix == ".json":
        return "json"
    elif suffix in [".yaml", ".yml"]:
        return "yaml"
    else:
        raise ValueError(f"Unsupported config format: {suffix}")


def load_config(path: str | Path) -> dict[str, Any]:
    """Load and return raw configuration dictionary.

    Format is auto-detected from the file extension.

    Raises:
        FileNotFoundError: If config file does not exist
        ValueError: If format is not supported or file content is invalid
    """
    path = Path(path)

    if not path.exists():
        raise FileNotFoundError(f"Config file does not exist: {path}")

    fmt = detect_format(path)

    if fmt == "json":
        try:
            content = read_json(path)
        except json.JSONDecodeError as e:
            raise ValueError(f"Invalid JSON in {path}: {e}") from e
    else:
        try:
            with path.open("r", encoding="utf-8") as f:
                content = yaml.safe_load(f)
        except yaml.YAMLError as e:
            raise ValueError(f"Invalid YAML in {path}: {e}") from e
    # safe_load returns None for empty files
    if content is None:
        return {}
    if not isinstance(content, dict):
        raise ValueError(f"Config root in {path} must be a mapping")
    return content


def _load_env_overrides(config: AppConfig) -> None:
    level = os.getenv(LOG_LEVEL_ENV_VAR)
    if level:
        config.logging = LoggingConfig.model_validate(
            {**config.logging.model_dump(), "level": level.upper()}
        )


def load_app_config(path: str | Path | None = None) -> AppConfig:
    """Load and validate application configuration.

    A missing file yields the defaults. The SPRINGKIT_LOG_LEVEL environment
    variable overrides logging.level.

    Args:
        path: Path to app config file (.json, .yaml, or .yml).
              Defaults to springkit.yaml

    Raises:
        ValidationError: If config is invalid
    """
    global _app_config_cache

    if path is None:
        path = _DEFAULT_APP_CONFIG_PATH
    path = Path(path)

    if _app_config_cache is not None and path == _DEFAULT_APP_CONFIG_PATH:
        return _app_config_cache

    if path.exists():
        config = AppConfig.load_or_default(path)
        logger.debug("Loaded app config from %s", path)
    else:
        config = AppConfig()

    _load_env_overrides(config)

    if path == _DEFAULT_APP_CONFIG_PATH:
        _app_config_cache = config

    return config


def clear_app_config_cache() -> None:
    global _app_config_cache
    _app_config_cache = None


def configure_logging(config: AppConfig | None = None) -> None:
    """Configure Python logging from app config.

    Args:
        config: AppConfig instance (loads default if None)
    """
    if config is None:
        config = load_app_config()

    _configure_root_logging(
        level=config.logging.level,
        format_string=config.logging.format,
        filename=config.logging.filename,
        structured=config.logging.structured,
    )


def build_preset_registry(config: AppConfig) -> PresetRegistry:
    """Built-in presets plus the presets declared in config.

    Raises:
        ValueError: If a configured preset reuses a built-in name.
    """
    registry = build_default_registry()
    for name, preset in config.presets.items():
        registry.register(preset.to_definition(name))
    return registry
