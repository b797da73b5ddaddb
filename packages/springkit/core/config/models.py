"""Configuration models for springkit."""

from __future__ import annotations

from pathlib import Path
from typing import Self

from pydantic import BaseModel, ConfigDict, Field

from springkit.core.curves.keyframes import DEFAULT_KEYFRAME_COUNT
from springkit.core.curves.library import PresetDefinition
from springkit.core.curves.timing import (
    DEFAULT_DURATION,
    DEFAULT_SAMPLE_COUNT,
    TIMING_ANGULAR_FREQUENCY,
)


class ConfigBase(BaseModel):
    """Base class for file-backed configurations.

    Subclasses must implement default_path() to specify their default location.
    """

    model_config = ConfigDict(extra="ignore")  # Forward compatibility

    @classmethod
    def default_path(cls) -> Path:
        """Return the default config file path for this config type."""
        raise NotImplementedError(f"{cls.__name__} must implement default_path()")

    @classmethod
    def load_or_default(cls, path: Path | str | None = None) -> Self:
        """Load config from path, falling back to the default path.

        Raises:
            FileNotFoundError: If config file doesn't exist
            ValidationError: If config is invalid
        """
        from springkit.core.config.loader import load_config

        if path is None:
            path = cls.default_path()
        raw = load_config(path)
        return cls.model_validate(raw)


class LoggingConfig(BaseModel):
    """Logging configuration."""

    level: str = Field(default="INFO", pattern="^(DEBUG|INFO|WARNING|ERROR|CRITICAL)$")
    format: str = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
    structured: bool = Field(default=False, description="Emit JSON log lines")
    filename: str | None = Field(default=None, description="Log file (stdout if unset)")


class TimingConfig(BaseModel):
    """Defaults for timing curve generation."""

    sample_count: int = Field(
        default=DEFAULT_SAMPLE_COUNT, ge=2, description="Samples per timing table"
    )
    keyframe_count: int = Field(
        default=DEFAULT_KEYFRAME_COUNT, ge=2, description="Keyframes per exported animation"
    )
    default_duration: float = Field(
        default=DEFAULT_DURATION, gt=0.0, description="Animation duration (s)"
    )


class PresetConfig(BaseModel):
    """A user-defined timing preset."""

    model_config = ConfigDict(extra="forbid")

    damping_ratio: float = Field(..., gt=0.0, allow_inf_nan=False)
    duration: float = Field(..., gt=0.0, allow_inf_nan=False)
    angular_frequency: float = Field(
        default=TIMING_ANGULAR_FREQUENCY, gt=0.0, allow_inf_nan=False
    )
    description: str | None = None

    def to_definition(self, name: str) -> PresetDefinition:
        return PresetDefinition(name=name, **self.model_dump())


class AppConfig(ConfigBase):
    """Application-level configuration."""

    logging: LoggingConfig = LoggingConfig()
    timing: TimingConfig = TimingConfig()
    presets: dict[str, PresetConfig] = Field(default_factory=dict)

    @classmethod
    def default_path(cls) -> Path:
        """Default path for application config."""
        return Path("springkit.yaml")
