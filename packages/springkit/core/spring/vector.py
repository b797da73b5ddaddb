"""Multi-axis springs built from independent scalar springs.

SpringVector drives N SpringInterpolation axes that share one configuration;
each axis keeps its own state. SpringInterpolation2D is the 2D facade used
for on-screen points, with squash/stretch feedback derived from velocity.
"""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass
import math
from typing import NamedTuple

from springkit.core.spring.engine import SpringInterpolation
from springkit.core.spring.models import SpringConfiguration

# Speed (units/s) at which deformation saturates at 1.0.
DEFAULT_DEFORMATION_SCALE = 1000.0


class Vec2D(NamedTuple):
    """A 2D value (position, velocity or target)."""

    x: float
    y: float


@dataclass(frozen=True)
class DeformationVisualState:
    """Squash/stretch parameters for drawing a moving point.

    Attributes:
        scale_x: Stretch along the direction of motion.
        scale_y: Squash across the direction of motion.
        angle: Direction of motion in radians.
        amount: Deformation magnitude in [0, 1].
    """

    scale_x: float
    scale_y: float
    angle: float
    amount: float


class SpringVector:
    """N independent spring axes sharing one configuration.

    Args:
        config: Shared configuration (defaults to SpringConfiguration()).
        dimensions: Number of axes, >= 1.
        deformation_scale: Speed at which per-axis deformation saturates.

    Raises:
        ValueError: If dimensions < 1.
    """

    def __init__(
        self,
        config: SpringConfiguration | None = None,
        dimensions: int = 2,
        *,
        deformation_scale: float = DEFAULT_DEFORMATION_SCALE,
    ) -> None:
        if dimensions < 1:
            raise ValueError("dimensions must be >= 1")
        self._config = config if config is not None else SpringConfiguration()
        self._axes = tuple(SpringInterpolation(self._config) for _ in range(dimensions))
        self.deformation_scale = deformation_scale

    @property
    def config(self) -> SpringConfiguration:
        return self._config

    @property
    def axes(self) -> tuple[SpringInterpolation, ...]:
        return self._axes

    @property
    def dimensions(self) -> int:
        return len(self._axes)

    def _check_length(self, values: Sequence[float], name: str) -> None:
        if len(values) != len(self._axes):
            raise ValueError(
                f"{name} has {len(values)} components, expected {len(self._axes)}"
            )

    def set_config(self, config: SpringConfiguration) -> None:
        self._config = config
        for axis in self._axes:
            axis.set_config(config)

    def set_threshold(self, threshold: float) -> None:
        self.set_config(self._config.with_threshold(threshold))

    def set_current(
        self, values: Sequence[float], velocities: Sequence[float] | None = None
    ) -> None:
        self._check_length(values, "values")
        if velocities is None:
            velocities = [0.0] * len(self._axes)
        self._check_length(velocities, "velocities")
        for axis, pos, vel in zip(self._axes, values, velocities, strict=True):
            axis.set_current(pos, vel)

    def set_target(self, values: Sequence[float]) -> None:
        self._check_length(values, "values")
        for axis, pos in zip(self._axes, values, strict=True):
            axis.set_target(pos)

    def step(self, delta_time: float) -> tuple[float, ...]:
        """Advance every axis by delta_time and return the new position."""
        return tuple(axis.step(delta_time) for axis in self._axes)

    @property
    def position(self) -> tuple[float, ...]:
        return tuple(axis.current_pos for axis in self._axes)

    @property
    def velocity(self) -> tuple[float, ...]:
        return tuple(axis.current_vel for axis in self._axes)

    @property
    def target(self) -> tuple[float, ...]:
        return tuple(axis.target_pos for axis in self._axes)

    @property
    def completed(self) -> bool:
        return all(axis.completed for axis in self._axes)

    def axis_deformations(self) -> tuple[float, ...]:
        return tuple(axis.deformation(self.deformation_scale) for axis in self._axes)

    @property
    def deformation_magnitude(self) -> float:
        """Combined deformation of all axes, capped at 1.0."""
        return min(1.0, math.hypot(*self.axis_deformations()))


class SpringInterpolation2D:
    """Two-axis spring for points on screen.

    Example:
        >>> spring = SpringInterpolation2D(SpringConfiguration(angular_frequency=8))
        >>> spring.set_target(Vec2D(100.0, 50.0))
        >>> pos = spring.step(1 / 60)
    """

    def __init__(
        self,
        config: SpringConfiguration | None = None,
        *,
        deformation_scale: float = DEFAULT_DEFORMATION_SCALE,
    ) -> None:
        self._vector = SpringVector(config, dimensions=2, deformation_scale=deformation_scale)

    @property
    def config(self) -> SpringConfiguration:
        return self._vector.config

    @property
    def x(self) -> SpringInterpolation:
        return self._vector.axes[0]

    @property
    def y(self) -> SpringInterpolation:
        return self._vector.axes[1]

    def set_config(self, config: SpringConfiguration) -> None:
        self._vector.set_config(config)

    def set_threshold(self, threshold: float) -> None:
        self._vector.set_threshold(threshold)

    def set_current(self, position: Vec2D, velocity: Vec2D | None = None) -> None:
        self._vector.set_current(position, velocity)

    def set_target(self, target: Vec2D) -> None:
        self._vector.set_target(target)

    def step(self, delta_time: float) -> Vec2D:
        return Vec2D(*self._vector.step(delta_time))

    @property
    def position(self) -> Vec2D:
        return Vec2D(*self._vector.position)

    @property
    def velocity(self) -> Vec2D:
        return Vec2D(*self._vector.velocity)

    @property
    def target(self) -> Vec2D:
        return Vec2D(*self._vector.target)

    @property
    def completed(self) -> bool:
        return self._vector.completed

    @property
    def deformation_magnitude(self) -> float:
        return self._vector.deformation_magnitude

    def deformation_visual_state(self) -> DeformationVisualState:
        """Stretch along the motion direction and squash across it."""
        amount = self.deformation_magnitude
        vx, vy = self.velocity
        angle = math.atan2(vy, vx) if math.hypot(vx, vy) > 0.0001 else 0.0
        return DeformationVisualState(
            scale_x=1.0 + amount * 0.85,
            scale_y=max(0.55, 1.0 - amount * 0.65),
            angle=angle,
            amount=amount,
        )
