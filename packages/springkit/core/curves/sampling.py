"""Timing table sampling.

This module builds the sampled spring response that backs a timing curve
and interpolates between the stored samples.
"""

from __future__ import annotations

from collections.abc import Sequence
import logging

from springkit.core.spring.engine import SpringInterpolation
from springkit.core.spring.models import SpringConfiguration
from springkit.core.utils.logging import log_performance
from springkit.core.utils.math import clamp

logger = logging.getLogger(__name__)

MIN_SAMPLE_COUNT = 2


@log_performance
def build_timing_table(
    config: SpringConfiguration,
    duration: float,
    sample_count: int,
) -> tuple[float, ...]:
    """Sample a spring moving from 0 to 1.

    The spring always stops on arrival while sampling, whatever the
    configuration says, so the table is deterministic. The last sample is
    forced to exactly 1.0 so the curve reaches its endpoint even when the
    duration is too short for the spring to settle.

    Args:
        config: Spring configuration.
        duration: Simulated time spanned by the table, in seconds.
        sample_count: Number of samples; values below 2 are raised to 2.

    Returns:
        Tuple of sample_count values, first the rest value 0.0, last 1.0.

    Example:
        >>> table = build_timing_table(SpringConfiguration(), 2.0, 5)
        >>> (table[0], table[-1])
        (0.0, 1.0)
    """
    if sample_count < MIN_SAMPLE_COUNT:
        logger.debug("sample_count %s raised to %s", sample_count, MIN_SAMPLE_COUNT)
        sample_count = MIN_SAMPLE_COUNT

    spring = SpringInterpolation(config.replace(stop_when_hit_target=True))
    spring.set_current(0.0)
    spring.set_target(1.0)

    delta_time = duration / (sample_count - 1)
    values: list[float] = []
    for _ in range(sample_count):
        values.append(spring.value)
        spring.step(delta_time)

    values[-1] = 1.0
    return tuple(values)


def interpolate_table(values: Sequence[float], fraction: float) -> float:
    """Linearly interpolate a uniformly spaced table at fraction.

    Args:
        values: Samples spanning fraction 0 to 1.
        fraction: Lookup position; clamped to [0, 1].

    Returns:
        Interpolated value. An empty table returns the fraction unchanged.

    Example:
        >>> interpolate_table([0.0, 1.0], 0.25)
        0.25
    """
    if not values:
        return fraction

    clamped = clamp(fraction, 0.0, 1.0)
    index = clamped * (len(values) - 1)
    lower = int(index)
    upper = min(lower + 1, len(values) - 1)

    if lower == upper:
        return values[lower]

    alpha = index - lower
    return values[lower] + (values[upper] - values[lower]) * alpha
