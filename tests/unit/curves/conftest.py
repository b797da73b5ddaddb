"""Shared pytest fixtures for curve tests."""

from __future__ import annotations

import pytest

from springkit.core.curves.timing import SpringTimingFunction


class LinearTiming:
    """Identity timing curve."""

    def value_at(self, fraction: float) -> float:
        return fraction


@pytest.fixture
def linear_timing() -> LinearTiming:
    """Timing function whose progress equals the fraction."""
    return LinearTiming()


@pytest.fixture
def bouncy_timing() -> SpringTimingFunction:
    """Underdamped timing curve with visible overshoot."""
    return SpringTimingFunction.from_damping_ratio(0.5, duration=0.7, sample_count=128)


@pytest.fixture
def critical_timing() -> SpringTimingFunction:
    """Critically damped timing curve."""
    return SpringTimingFunction.from_damping_ratio(1.0, duration=1.0)
