"""Value types for the spring interpolation engine.

This module defines the data the engine works with:
- SpringConfiguration: immutable physical parameters, validated on construction
- SpringContext: mutable position/velocity state plus smoothness diagnostics
- TransitionCoefficients: the 2x2 state-transition matrix for one time step

Configurations are pydantic models so invalid physical parameters are refused
at construction instead of producing misleading motion later.
"""

from __future__ import annotations

import dataclasses
from dataclasses import dataclass
from typing import Any, Self

from pydantic import BaseModel, ConfigDict, Field

from springkit.core.spring.settling import estimate_settling_duration

DEFAULT_ANGULAR_FREQUENCY = 4.0
DEFAULT_DAMPING_RATIO = 1.0
DEFAULT_THRESHOLD = 0.0001


class SpringConfiguration(BaseModel):
    """Physical parameters of a damped spring.

    The model is frozen; use replace() or with_threshold() to derive
    a modified copy. Copies are re-validated.

    Attributes:
        angular_frequency: Natural frequency of the undamped spring (rad/s), > 0.
        damping_ratio: Dimensionless damping; < 1 oscillates, 1 is critical,
            > 1 approaches without overshoot.
        threshold: Arrival tolerance around the target, >= 0.
        stop_when_hit_target: If True, arriving zeroes velocity (full stop).

    Example:
        >>> config = SpringConfiguration(angular_frequency=10, damping_ratio=0.75)
        >>> config.stop_when_hit_target
        False
    """

    model_config = ConfigDict(extra="forbid", frozen=True)

    angular_frequency: float = Field(
        default=DEFAULT_ANGULAR_FREQUENCY,
        gt=0.0,
        allow_inf_nan=False,
        description="Angular frequency (rad/s)",
    )
    damping_ratio: float = Field(
        default=DEFAULT_DAMPING_RATIO,
        gt=0.0,
        allow_inf_nan=False,
        description="Damping ratio (zeta)",
    )
    threshold: float = Field(
        default=DEFAULT_THRESHOLD,
        ge=0.0,
        allow_inf_nan=False,
        description="Arrival tolerance",
    )
    stop_when_hit_target: bool = Field(
        default=False, description="Zero velocity when the target is reached"
    )

    @classmethod
    def for_interface_animation(cls) -> SpringConfiguration:
        """Snappy configuration for interface transitions."""
        return cls(
            angular_frequency=10.0,
            damping_ratio=0.75,
            threshold=1.0,
            stop_when_hit_target=True,
        )

    @classmethod
    def for_drag_animation(cls) -> SpringConfiguration:
        """Fluid configuration for following a dragged target."""
        return cls(
            angular_frequency=8.0,
            damping_ratio=0.7,
            threshold=1.0,
            stop_when_hit_target=False,
        )

    def replace(self, **changes: Any) -> Self:
        """Return a validated copy with the given fields changed."""
        return self.model_validate({**self.model_dump(), **changes})

    def with_threshold(self, threshold: float) -> Self:
        return self.replace(threshold=threshold)

    @property
    def settling_duration(self) -> float:
        """Approximate time (s) for the response to settle within threshold."""
        return estimate_settling_duration(self)


@dataclass
class SpringContext:
    """Mutable state of a single spring axis.

    The diagnostic fields are derived by each step and are only meaningful
    for visual feedback (smoothness of motion), not for the simulation.
    """

    current_pos: float = 0.0
    current_vel: float = 0.0
    target_pos: float = 0.0
    current_acceleration: float = 0.0
    velocity_delta: float = 0.0
    acceleration_delta: float = 0.0
    last_delta_time: float = 0.0

    def copy(self) -> SpringContext:
        return dataclasses.replace(self)

    def reset_diagnostics(self) -> None:
        self.current_acceleration = 0.0
        self.velocity_delta = 0.0
        self.acceleration_delta = 0.0


@dataclass(frozen=True)
class TransitionCoefficients:
    """State-transition matrix for one time step.

    Maps a (position, velocity) pair relative to the target at time t onto
    the pair at t + delta_time. Only valid for the delta_time it was
    generated for.
    """

    delta_time: float
    pos_pos_coef: float
    pos_vel_coef: float
    vel_pos_coef: float
    vel_vel_coef: float

    def apply(self, rel_pos: float, rel_vel: float) -> tuple[float, float]:
        """Advance a relative (position, velocity) pair by delta_time."""
        new_pos = rel_pos * self.pos_pos_coef + rel_vel * self.pos_vel_coef
        new_vel = rel_pos * self.vel_pos_coef + rel_vel * self.vel_vel_coef
        return new_pos, new_vel
