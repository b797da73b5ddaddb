"""Tests for timing table sampling."""

from __future__ import annotations

import pytest

from springkit.core.curves.sampling import build_timing_table, interpolate_table
from springkit.core.spring.engine import SpringInterpolation
from springkit.core.spring.models import SpringConfiguration


class TestBuildTimingTable:
    """Tests for build_timing_table function."""

    def test_returns_requested_count(self, interface_config: SpringConfiguration) -> None:
        """Returns one value per sample."""
        assert len(build_timing_table(interface_config, 1.0, 32)) == 32

    def test_starts_at_rest_and_ends_at_one(self, interface_config: SpringConfiguration) -> None:
        """First sample is the start value, last is forced to 1.0."""
        table = build_timing_table(interface_config, 1.0, 32)
        assert table[0] == 0.0
        assert table[-1] == 1.0

    def test_short_duration_still_ends_at_one(self) -> None:
        """The endpoint is exact even when the spring has no time to arrive."""
        table = build_timing_table(SpringConfiguration(), 0.01, 8)
        assert table[-2] < 0.5
        assert table[-1] == 1.0

    @pytest.mark.parametrize("count", [1, 0, -3])
    def test_count_below_two_is_raised(self, count: int) -> None:
        """Fewer than two samples yields the two endpoints."""
        assert build_timing_table(SpringConfiguration(), 1.0, count) == (0.0, 1.0)

    def test_records_value_before_each_step(self) -> None:
        """Sample i is the position after i steps of duration / (n - 1)."""
        config = SpringConfiguration(angular_frequency=10.0, damping_ratio=1.0)
        table = build_timing_table(config, 1.0, 3)
        spring = SpringInterpolation(config.replace(stop_when_hit_target=True), target_pos=1.0)
        assert table[1] == spring.step(0.5)

    def test_always_stops_on_arrival(self) -> None:
        """Sampling ignores stop_when_hit_target=False so the tail is flat."""
        config = SpringConfiguration(
            angular_frequency=10.0, damping_ratio=0.5, threshold=0.01, stop_when_hit_target=False
        )
        table = build_timing_table(config, 3.0, 181)
        first_arrival = next(i for i, value in enumerate(table) if value == 1.0)
        assert all(value == 1.0 for value in table[first_arrival:])

    def test_overdamped_table_is_monotone(self, overdamped_config: SpringConfiguration) -> None:
        """Overdamped springs produce a monotone curve."""
        table = build_timing_table(overdamped_config, 2.0, 64)
        assert all(b >= a for a, b in zip(table, table[1:]))

    def test_config_is_not_modified(self) -> None:
        """The caller's configuration keeps its own stop flag."""
        config = SpringConfiguration(stop_when_hit_target=False)
        build_timing_table(config, 1.0, 4)
        assert config.stop_when_hit_target is False


class TestInterpolateTable:
    """Tests for interpolate_table function."""

    def test_empty_table_returns_fraction(self) -> None:
        """An empty table acts as the identity curve."""
        assert interpolate_table([], 0.3) == 0.3

    def test_single_value_table(self) -> None:
        """A one-entry table is constant."""
        assert interpolate_table([0.7], 0.2) == 0.7

    def test_interpolates_between_samples(self) -> None:
        """Values between samples are linear."""
        table = [0.0, 1.0, 3.0]
        assert interpolate_table(table, 0.25) == pytest.approx(0.5)
        assert interpolate_table(table, 0.75) == pytest.approx(2.0)

    def test_hits_samples_exactly(self) -> None:
        """Fractions on the grid return stored samples."""
        table = [0.0, 1.0, 3.0]
        assert interpolate_table(table, 0.0) == 0.0
        assert interpolate_table(table, 0.5) == 1.0
        assert interpolate_table(table, 1.0) == 3.0

    def test_bracketed_by_neighbouring_samples(self, interface_config: SpringConfiguration) -> None:
        """Interpolated values lie between the two surrounding samples."""
        table = build_timing_table(interface_config, 1.0, 33)
        for i in range(len(table) - 1):
            value = interpolate_table(table, (i + 0.37) / (len(table) - 1))
            assert min(table[i], table[i + 1]) <= value <= max(table[i], table[i + 1])

    @pytest.mark.parametrize(("fraction", "expected"), [(-0.5, 0.0), (1.5, 3.0)])
    def test_clamps_fraction(self, fraction: float, expected: float) -> None:
        """Fractions outside [0, 1] are clamped."""
        assert interpolate_table([0.0, 1.0, 3.0], fraction) == expected
