"""Spring timing functions.

A SpringTimingFunction maps the fraction of an animation's duration to
spring progress, so keyframe-based animation systems can play physically
derived motion. The full spring trajectory (up to its estimated settling
time) is remapped onto the requested duration.
"""

from __future__ import annotations

from dataclasses import dataclass, field
import logging
import math

import numpy as np

from springkit.core.curves.sampling import (
    MIN_SAMPLE_COUNT,
    build_timing_table,
    interpolate_table,
)
from springkit.core.spring.models import SpringConfiguration

logger = logging.getLogger(__name__)

DEFAULT_DURATION = 1.0
DEFAULT_SAMPLE_COUNT = 256
# Angular frequency is redundant once the curve is fitted to a duration.
TIMING_ANGULAR_FREQUENCY = 10.0
TIMING_THRESHOLD = 0.0001


def generation_duration(config: SpringConfiguration, duration: float) -> float:
    """Simulated span for the table: the settling estimate when usable, else duration."""
    settling = config.settling_duration
    if 0.0 < settling < math.inf:
        return settling
    return duration


@dataclass(frozen=True)
class SpringTimingFunction:
    """Timing curve backed by a sampled spring response.

    Attributes:
        configuration: Spring configuration the curve is sampled from.
        duration: Animation duration in seconds.
        sample_count: Number of table samples (at least 2).

    Example:
        >>> timing = SpringTimingFunction.from_damping_ratio(0.75, duration=0.5)
        >>> timing.value_at(1.0)
        1.0
    """

    configuration: SpringConfiguration = field(default_factory=SpringConfiguration)
    duration: float = DEFAULT_DURATION
    sample_count: int = DEFAULT_SAMPLE_COUNT
    _values: tuple[float, ...] = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        sample_count = max(MIN_SAMPLE_COUNT, self.sample_count)
        object.__setattr__(self, "sample_count", sample_count)
        values = build_timing_table(
            self.configuration,
            generation_duration(self.configuration, self.duration),
            sample_count,
        )
        object.__setattr__(self, "_values", values)

    @classmethod
    def from_damping_ratio(
        cls,
        damping_ratio: float,
        duration: float = DEFAULT_DURATION,
        sample_count: int = DEFAULT_SAMPLE_COUNT,
    ) -> SpringTimingFunction:
        """Build a timing function from the damping ratio alone."""
        configuration = SpringConfiguration(
            angular_frequency=TIMING_ANGULAR_FREQUENCY,
            damping_ratio=damping_ratio,
            threshold=TIMING_THRESHOLD,
            stop_when_hit_target=True,
        )
        return cls(configuration=configuration, duration=duration, sample_count=sample_count)

    @property
    def values(self) -> tuple[float, ...]:
        """The sampled table, from fraction 0 to fraction 1."""
        return self._values

    def as_array(self) -> np.ndarray:
        return np.asarray(self._values, dtype=float)

    def value_at(self, fraction: float) -> float:
        """Timing value at a fraction of the duration (clamped to [0, 1])."""
        return interpolate_table(self._values, fraction)

    def value_at_time(self, time: float) -> float:
        """Timing value at time seconds from the start of the animation."""
        if self.duration <= 0.0:
            logger.debug("Non-positive duration %s; returning end value", self.duration)
            return self.value_at(1.0)
        return self.value_at(time / self.duration)

    def values_at(self, fractions: np.ndarray | list[float]) -> np.ndarray:
        """Vectorized value_at over an array of fractions."""
        clipped = np.clip(np.asarray(fractions, dtype=float), 0.0, 1.0)
        grid = np.linspace(0.0, 1.0, len(self._values))
        return np.interp(clipped, grid, self.as_array())
