"""Settling duration estimation.

The estimate follows the decay envelope of the dominant root for each
damping regime and is an approximation, not an exact settling time. The
critically damped branch ignores the (1 + omega*t) prefactor of the true
response, so it under-estimates; timing curves built on it rely on this
value and it is kept as is.
"""

from __future__ import annotations

import math
import sys
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from springkit.core.spring.models import SpringConfiguration

EPSILON = sys.float_info.epsilon


def estimate_settling_duration(config: SpringConfiguration) -> float:
    """Estimate the time for the response envelope to decay within threshold.

    Args:
        config: Spring configuration. The threshold is floored at machine
            epsilon to keep the logarithm finite.

    Returns:
        Duration in seconds. May be math.inf when the spring never settles.

    Example:
        >>> estimate_settling_duration(
        ...     SpringConfiguration(angular_frequency=4.0, damping_ratio=1.0)
        ... )  # -ln(1e-4) / 4
        2.302585092994046
    """
    omega = config.angular_frequency
    zeta = config.damping_ratio
    threshold = max(config.threshold, EPSILON)

    if omega < EPSILON:
        return math.inf

    if zeta < 1.0 - EPSILON:
        if zeta == 0.0:
            return math.inf
        return -math.log(threshold) / (zeta * omega)

    if zeta > 1.0 + EPSILON:
        # Slowest (dominant) real root.
        decay_rate = -omega * (zeta - math.sqrt(zeta * zeta - 1.0))
        return math.log(threshold) / decay_rate

    return -math.log(threshold) / omega
