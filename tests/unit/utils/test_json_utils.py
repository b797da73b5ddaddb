"""Tests for JSON utility functions."""

from __future__ import annotations

from pathlib import Path

import numpy as np
import pytest

from springkit.core.spring.models import SpringConfiguration
from springkit.core.utils.json import read_json, write_json


@pytest.fixture
def temp_json_file(tmp_path):
    """Create a temporary JSON file path."""
    return tmp_path / "test.json"


def test_write_and_read_json(temp_json_file):
    """Test writing and reading JSON files."""
    data = {
        "string": "value",
        "number": 42,
        "float": 3.14,
        "bool": True,
        "list": [1, 2, 3],
        "nested": {"key": "value"},
    }

    write_json(temp_json_file, data)

    assert read_json(temp_json_file) == data


def test_write_json_creates_parent_dirs(tmp_path):
    """Test that write_json creates parent directories."""
    nested_path = tmp_path / "subdir" / "nested" / "test.json"
    write_json(nested_path, {"test": "value"})
    assert nested_path.exists()


def test_write_json_numpy_and_paths(temp_json_file):
    """Test that numpy values and paths are converted."""
    write_json(
        temp_json_file,
        {
            "array": np.array([0.0, 0.5, 1.0]),
            "int": np.int64(7),
            "float": np.float32(0.25),
            "path": Path("curves/bouncy.json"),
        },
    )
    assert read_json(temp_json_file) == {
        "array": [0.0, 0.5, 1.0],
        "int": 7,
        "float": 0.25,
        "path": "curves/bouncy.json",
    }


def test_write_json_pydantic_models(temp_json_file):
    """Test that pydantic models are dumped as objects."""
    write_json(temp_json_file, {"config": SpringConfiguration()})
    assert read_json(temp_json_file)["config"] == {
        "angular_frequency": 4.0,
        "damping_ratio": 1.0,
        "threshold": 0.0001,
        "stop_when_hit_target": False,
    }


def test_read_json_missing_file(tmp_path):
    """Test reading a file that does not exist."""
    with pytest.raises(FileNotFoundError):
        read_json(tmp_path / "missing.json")
