"""Spring timing curves, presets and keyframe sampling."""

from springkit.core.curves.keyframes import (
    keyframe_fractions,
    progress_values,
    sample_keyframes,
    sample_vector_keyframes,
)
from springkit.core.curves.library import (
    PresetDefinition,
    PresetRegistry,
    SpringPreset,
    build_default_registry,
    get_preset_timing,
)
from springkit.core.curves.models import Keyframe, VectorKeyframe
from springkit.core.curves.sampling import build_timing_table, interpolate_table
from springkit.core.curves.timing import SpringTimingFunction

__all__ = [
    "Keyframe",
    "PresetDefinition",
    "PresetRegistry",
    "SpringPreset",
    "SpringTimingFunction",
    "VectorKeyframe",
    "build_default_registry",
    "build_timing_table",
    "get_preset_timing",
    "interpolate_table",
    "keyframe_fractions",
    "progress_values",
    "sample_keyframes",
    "sample_vector_keyframes",
]
