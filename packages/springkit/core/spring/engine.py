"""Spring interpolation engine.

SpringInterpolation owns one immutable SpringConfiguration and one mutable
SpringContext. Callers advance it once per frame with the elapsed time and
read back position, velocity and acceleration for rendering.
"""

from __future__ import annotations

import logging

from springkit.core.spring.coefficients import generate_coefficients
from springkit.core.spring.models import (
    SpringConfiguration,
    SpringContext,
    TransitionCoefficients,
)

logger = logging.getLogger(__name__)


class SpringInterpolation:
    """Scalar spring that moves a position toward a target.

    Args:
        config: Spring configuration (defaults to SpringConfiguration()).
        current_pos: Initial position.
        current_vel: Initial velocity.
        target_pos: Initial target.

    Example:
        >>> spring = SpringInterpolation(SpringConfiguration(angular_frequency=10))
        >>> spring.set_target(1.0)
        >>> spring.step(1 / 60) > 0.0
        True
    """

    def __init__(
        self,
        config: SpringConfiguration | None = None,
        current_pos: float = 0.0,
        current_vel: float = 0.0,
        target_pos: float = 0.0,
    ) -> None:
        self._config = config if config is not None else SpringConfiguration()
        self._context = SpringContext(
            current_pos=current_pos,
            current_vel=current_vel,
            target_pos=target_pos,
        )
        self._coefficients: TransitionCoefficients | None = None

    def __repr__(self) -> str:
        return (
            f"SpringInterpolation(pos={self.current_pos!r}, vel={self.current_vel!r}, "
            f"target={self.target_pos!r})"
        )

    @property
    def config(self) -> SpringConfiguration:
        return self._config

    @property
    def context(self) -> SpringContext:
        """Snapshot of the current state (a copy)."""
        return self._context.copy()

    @property
    def value(self) -> float:
        return self._context.current_pos

    @property
    def current_pos(self) -> float:
        return self._context.current_pos

    @property
    def current_vel(self) -> float:
        return self._context.current_vel

    @property
    def target_pos(self) -> float:
        return self._context.target_pos

    @property
    def acceleration(self) -> float:
        return self._context.current_acceleration

    @property
    def velocity_delta(self) -> float:
        return self._context.velocity_delta

    @property
    def acceleration_delta(self) -> float:
        return self._context.acceleration_delta

    @property
    def last_delta_time(self) -> float:
        return self._context.last_delta_time

    @property
    def completed(self) -> bool:
        """True when the position is within threshold of the target."""
        return abs(self._context.target_pos - self._context.current_pos) <= self._config.threshold

    def deformation(self, scale: float) -> float:
        """Speed normalized to [0, 1] against scale, for squash/stretch feedback."""
        if scale <= 0.0:
            return 0.0
        return min(1.0, abs(self._context.current_vel) / scale)

    def copy(self) -> SpringInterpolation:
        """Return an independent engine with the same configuration and state."""
        clone = SpringInterpolation(self._config)
        clone._context = self._context.copy()
        return clone

    def set_config(self, config: SpringConfiguration) -> None:
        """Replace the configuration, keeping position and velocity."""
        self._config = config
        self._coefficients = None

    def set_threshold(self, threshold: float) -> None:
        self._config = self._config.with_threshold(threshold)

    def set_current(self, pos: float, vel: float = 0.0) -> None:
        """Teleport to pos with velocity vel and clear the diagnostics."""
        self._context.current_pos = pos
        self._context.current_vel = vel
        self._context.reset_diagnostics()

    def set_target(self, pos: float) -> None:
        """Move the target. Velocity is kept so motion redirects in flight."""
        self._context.target_pos = pos

    def _coefficients_for(self, delta_time: float) -> TransitionCoefficients:
        cached = self._coefficients
        if cached is None or cached.delta_time != delta_time:
            cached = generate_coefficients(self._config, delta_time)
            self._coefficients = cached
        return cached

    def step(self, delta_time: float) -> float:
        """Advance the spring by delta_time seconds.

        Args:
            delta_time: Elapsed time. Negative values are clamped to 0.

        Returns:
            The new position.
        """
        if delta_time < 0.0:
            logger.debug("Negative delta_time %s clamped to 0", delta_time)
            delta_time = 0.0

        ctx = self._context
        coefficients = self._coefficients_for(delta_time)

        rel_pos, new_vel = coefficients.apply(ctx.current_pos - ctx.target_pos, ctx.current_vel)
        new_pos = rel_pos + ctx.target_pos

        new_acceleration = (new_vel - ctx.current_vel) / delta_time if delta_time > 0.0 else 0.0
        ctx.velocity_delta = abs(new_vel - ctx.current_vel)
        ctx.acceleration_delta = abs(new_acceleration - ctx.current_acceleration)
        ctx.current_acceleration = new_acceleration
        ctx.current_pos = new_pos
        ctx.current_vel = new_vel
        ctx.last_delta_time = delta_time

        if abs(new_pos - ctx.target_pos) < self._config.threshold:
            ctx.current_pos = ctx.target_pos
            if self._config.stop_when_hit_target:
                if ctx.current_vel != 0.0:
                    logger.debug("Spring arrived at target %s", ctx.target_pos)
                ctx.current_vel = 0.0
                ctx.reset_diagnostics()

        return ctx.current_pos
