"""Configuration management for springkit."""

from springkit.core.config.loader import (
    build_preset_registry,
    configure_logging,
    load_app_config,
    load_config,
)
from springkit.core.config.models import (
    AppConfig,
    LoggingConfig,
    PresetConfig,
    TimingConfig,
)

__all__ = [
    # Loaders
    "load_config",
    "load_app_config",
    "configure_logging",
    "build_preset_registry",
    # Models
    "AppConfig",
    "LoggingConfig",
    "PresetConfig",
    "TimingConfig",
]
