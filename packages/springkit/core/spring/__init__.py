"""Closed-form damped spring engine."""

from springkit.core.spring.coefficients import generate_coefficients
from springkit.core.spring.engine import SpringInterpolation
from springkit.core.spring.models import (
    SpringConfiguration,
    SpringContext,
    TransitionCoefficients,
)
from springkit.core.spring.settling import estimate_settling_duration
from springkit.core.spring.vector import (
    DeformationVisualState,
    SpringInterpolation2D,
    SpringVector,
    Vec2D,
)

__all__ = [
    "DeformationVisualState",
    "SpringConfiguration",
    "SpringContext",
    "SpringInterpolation",
    "SpringInterpolation2D",
    "SpringVector",
    "TransitionCoefficients",
    "Vec2D",
    "estimate_settling_duration",
    "generate_coefficients",
]
