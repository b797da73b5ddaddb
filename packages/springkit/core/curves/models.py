"""Keyframe models for spring timing curves.

- Keyframe: a scalar value at a normalized key time
- VectorKeyframe: a multi-component value (point, size, frame) at a key time

Key times are normalized to [0, 1]. Values are unbounded because spring
curves overshoot their endpoints.
"""

from pydantic import BaseModel, ConfigDict, Field


class Keyframe(BaseModel):
    """A single scalar keyframe.

    Example:
        >>> frame = Keyframe(key_time=0.5, value=12.0)
        >>> frame.key_time
        0.5
    """

    model_config = ConfigDict(extra="forbid", frozen=True)

    key_time: float = Field(..., ge=0.0, le=1.0, description="Normalized time [0,1]")
    value: float = Field(..., allow_inf_nan=False)


class VectorKeyframe(BaseModel):
    """A keyframe carrying one value per component."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    key_time: float = Field(..., ge=0.0, le=1.0, description="Normalized time [0,1]")
    values: tuple[float, ...] = Field(..., min_length=1)
