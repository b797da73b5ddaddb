"""Shared pytest fixtures for springkit tests."""

from __future__ import annotations

import logging
from pathlib import Path

import pytest

from springkit.core.config.loader import clear_app_config_cache
from springkit.core.spring.models import SpringConfiguration

# ============================================================================
# Path Fixtures
# ============================================================================


@pytest.fixture
def project_root() -> Path:
    """Get project root directory."""
    return Path(__file__).parent.parent


# ============================================================================
# Spring Configuration Fixtures
# ============================================================================


@pytest.fixture
def interface_config() -> SpringConfiguration:
    """Underdamped configuration used by interface animations (omega 10, zeta 0.75)."""
    return SpringConfiguration(
        angular_frequency=10.0,
        damping_ratio=0.75,
        threshold=0.0001,
        stop_when_hit_target=True,
    )


@pytest.fixture
def critical_config() -> SpringConfiguration:
    """Critically damped configuration with no arrival snapping."""
    return SpringConfiguration(angular_frequency=4.0, damping_ratio=1.0, threshold=0.0)


@pytest.fixture
def overdamped_config() -> SpringConfiguration:
    """Overdamped configuration (zeta 2)."""
    return SpringConfiguration(angular_frequency=10.0, damping_ratio=2.0, threshold=0.0)


@pytest.fixture(autouse=True)
def _reset_app_config_cache():
    """Keep the cached app config from leaking between tests."""
    clear_app_config_cache()
    yield
    clear_app_config_cache()


@pytest.fixture(autouse=True)
def _restore_root_logging():
    """Undo configure_logging() calls made by a test."""
    root = logging.getLogger()
    saved_handlers = list(root.handlers)
    saved_level = root.level
    yield
    for handler in root.handlers:
        if handler not in saved_handlers:
            handler.close()
    root.handlers = saved_handlers
    root.setLevel(saved_level)
