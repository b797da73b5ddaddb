"""Keyframe sampling from timing functions.

Any animation system with a keyframe primitive (linear interpolation
between key times) can play spring motion from these samples.
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import Protocol

from springkit.core.curves.models import Keyframe, VectorKeyframe
from springkit.core.utils.math import lerp

DEFAULT_KEYFRAME_COUNT = 60
DEFAULT_PROGRESS_COUNT = 10


class TimingFunction(Protocol):
    """Anything mapping an animation fraction to progress."""

    def value_at(self, fraction: float) -> float: ...


def keyframe_fractions(count: int) -> list[float]:
    """Evenly spaced key times covering [0, 1], endpoints included.

    Example:
        >>> keyframe_fractions(5)
        [0.0, 0.25, 0.5, 0.75, 1.0]
    """
    if count <= 0:
        return []
    if count == 1:
        return [1.0]
    return [i / (count - 1) for i in range(count)]


def progress_values(timing: TimingFunction, count: int = DEFAULT_PROGRESS_COUNT) -> list[float]:
    """Timing values at count evenly spaced fractions."""
    return [timing.value_at(fraction) for fraction in keyframe_fractions(count)]


def sample_keyframes(
    timing: TimingFunction,
    start: float,
    end: float,
    count: int = DEFAULT_KEYFRAME_COUNT,
) -> list[Keyframe]:
    """Keyframes animating a scalar from start to end.

    Args:
        timing: Timing function to sample.
        start: Value at progress 0.
        end: Value at progress 1.
        count: Number of keyframes.

    Returns:
        Keyframes with linear key times; values follow the timing curve
        (including any overshoot past end).
    """
    return [
        Keyframe(key_time=fraction, value=lerp(start, end, timing.value_at(fraction)))
        for fraction in keyframe_fractions(count)
    ]


def sample_vector_keyframes(
    timing: TimingFunction,
    start: Sequence[float],
    end: Sequence[float],
    count: int = DEFAULT_KEYFRAME_COUNT,
) -> list[VectorKeyframe]:
    """Keyframes animating each component of a vector from start to end.

    Raises:
        ValueError: If start and end differ in length or are empty.
    """
    if len(start) != len(end):
        raise ValueError(f"start has {len(start)} components but end has {len(end)}")
    if not start:
        raise ValueError("start and end must have at least one component")

    frames: list[VectorKeyframe] = []
    for fraction in keyframe_fractions(count):
        progress = timing.value_at(fraction)
        frames.append(
            VectorKeyframe(
                key_time=fraction,
                values=tuple(lerp(a, b, progress) for a, b in zip(start, end, strict=True)),
            )
        )
    return frames
