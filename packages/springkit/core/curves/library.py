"""Named spring timing presets and the preset registry."""

from __future__ import annotations

from enum import Enum
from functools import lru_cache

from pydantic import BaseModel, ConfigDict, Field

from springkit.core.curves.timing import (
    DEFAULT_SAMPLE_COUNT,
    TIMING_ANGULAR_FREQUENCY,
    TIMING_THRESHOLD,
    SpringTimingFunction,
)
from springkit.core.spring.models import SpringConfiguration
from springkit.core.utils.logging import get_logger


class SpringPreset(str, Enum):
    """Identifiers for built-in timing presets."""

    INTERFACE = "interface"  # Snappy, responsive UI transitions
    DRAG = "drag"  # Fluid follow-through after a drag
    GENTLE = "gentle"  # Subtle, barely-there settle
    BOUNCY = "bouncy"  # Playful overshoot
    STIFF = "stiff"  # Quick and precise


class PresetDefinition(BaseModel):
    """A named (damping ratio, duration) pair.

    Example:
        >>> PresetDefinition(name="soft", damping_ratio=0.95, duration=1.2).name
        'soft'
    """

    model_config = ConfigDict(extra="forbid", frozen=True)

    name: str = Field(..., min_length=1)
    damping_ratio: float = Field(..., gt=0.0, allow_inf_nan=False)
    duration: float = Field(..., gt=0.0, allow_inf_nan=False)
    angular_frequency: float = Field(
        default=TIMING_ANGULAR_FREQUENCY, gt=0.0, allow_inf_nan=False
    )
    description: str | None = None

    def configuration(self) -> SpringConfiguration:
        return SpringConfiguration(
            angular_frequency=self.angular_frequency,
            damping_ratio=self.damping_ratio,
            threshold=TIMING_THRESHOLD,
            stop_when_hit_target=True,
        )

    def timing_function(self, sample_count: int = DEFAULT_SAMPLE_COUNT) -> SpringTimingFunction:
        return SpringTimingFunction(
            configuration=self.configuration(),
            duration=self.duration,
            sample_count=sample_count,
        )


BUILTIN_PRESETS: dict[SpringPreset, PresetDefinition] = {
    SpringPreset.INTERFACE: PresetDefinition(
        name=SpringPreset.INTERFACE.value,
        damping_ratio=0.75,
        duration=0.5,
        description="Snappy, responsive feel for interface animations",
    ),
    SpringPreset.DRAG: PresetDefinition(
        name=SpringPreset.DRAG.value,
        damping_ratio=0.7,
        duration=0.6,
        description="Fluid, natural motion for drag animations",
    ),
    SpringPreset.GENTLE: PresetDefinition(
        name=SpringPreset.GENTLE.value,
        damping_ratio=0.9,
        duration=0.8,
        description="Subtle, non-intrusive motion",
    ),
    SpringPreset.BOUNCY: PresetDefinition(
        name=SpringPreset.BOUNCY.value,
        damping_ratio=0.5,
        duration=0.7,
        description="Playful, attention-grabbing bounce",
    ),
    SpringPreset.STIFF: PresetDefinition(
        name=SpringPreset.STIFF.value,
        damping_ratio=0.85,
        duration=0.4,
        description="Quick, precise motion",
    ),
}


@lru_cache(maxsize=None)
def get_preset_timing(preset: SpringPreset) -> SpringTimingFunction:
    """Timing function for a built-in preset (built once, then cached)."""
    return BUILTIN_PRESETS[SpringPreset(preset)].timing_function()


class PresetRegistry:
    """Registry of named timing presets."""

    def __init__(self) -> None:
        self._registry: dict[str, PresetDefinition] = {}

    def __contains__(self, name: object) -> bool:
        return name in self._registry

    def __len__(self) -> int:
        return len(self._registry)

    def register(self, definition: PresetDefinition) -> None:
        if definition.name in self._registry:
            raise ValueError(f"Preset '{definition.name}' already registered")
        self._registry[definition.name] = definition

    def get(self, name: str) -> PresetDefinition:
        try:
            return self._registry[name]
        except KeyError as exc:
            raise ValueError(f"Preset '{name}' is not registered") from exc

    def names(self) -> list[str]:
        return list(self._registry)

    def definitions(self) -> list[PresetDefinition]:
        return list(self._registry.values())

    def resolve(self, name: str, *, sample_count: int | None = None) -> SpringTimingFunction:
        """Resolve a preset name into a timing function.

        Args:
            name: Registered preset name.
            sample_count: Optional override for the table size.
        """
        definition = self.get(name)
        get_logger(__name__, preset=name).debug("Resolving preset %s", name)
        return definition.timing_function(
            sample_count if sample_count is not None else DEFAULT_SAMPLE_COUNT
        )


def build_default_registry() -> PresetRegistry:
    """Construct a registry containing all built-in presets."""
    registry = PresetRegistry()
    for definition in BUILTIN_PRESETS.values():
        registry.register(definition)
    return registry
