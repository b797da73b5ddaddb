"""Shared utilities for springkit."""

from springkit.core.utils.json import read_json, write_json
from springkit.core.utils.math import clamp, lerp

__all__ = [
    "clamp",
    "lerp",
    "read_json",
    "write_json",
]
