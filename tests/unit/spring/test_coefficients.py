"""Tests for closed-form transition coefficients."""

from __future__ import annotations

import math

import pytest

from springkit.core.spring.coefficients import generate_coefficients
from springkit.core.spring.models import SpringConfiguration, TransitionCoefficients


def _as_tuple(coefs: TransitionCoefficients) -> tuple[float, float, float, float]:
    return (coefs.pos_pos_coef, coefs.pos_vel_coef, coefs.vel_pos_coef, coefs.vel_vel_coef)


def _compose(
    first: TransitionCoefficients, second: TransitionCoefficients
) -> tuple[float, float, float, float]:
    """Matrix product second @ first."""
    a = _as_tuple(first)
    b = _as_tuple(second)
    return (
        b[0] * a[0] + b[1] * a[2],
        b[0] * a[1] + b[1] * a[3],
        b[2] * a[0] + b[3] * a[2],
        b[2] * a[1] + b[3] * a[3],
    )


DAMPING_RATIOS = [0.2, 0.75, 1.0, 1.5, 3.0]


class TestGenerateCoefficients:
    """Tests for generate_coefficients."""

    @pytest.mark.parametrize("damping_ratio", DAMPING_RATIOS)
    def test_zero_step_is_identity(self, damping_ratio: float) -> None:
        """A zero-length step leaves the state unchanged in every regime."""
        config = SpringConfiguration(angular_frequency=10.0, damping_ratio=damping_ratio)
        coefs = generate_coefficients(config, 0.0)
        assert _as_tuple(coefs) == pytest.approx((1.0, 0.0, 0.0, 1.0), abs=1e-12)

    def test_negative_step_is_clamped(self) -> None:
        """Negative step lengths are treated as zero."""
        coefs = generate_coefficients(SpringConfiguration(), -0.5)
        assert coefs.delta_time == 0.0
        assert _as_tuple(coefs) == pytest.approx((1.0, 0.0, 0.0, 1.0))

    def test_records_delta_time(self) -> None:
        """Coefficients remember the step they were generated for."""
        assert generate_coefficients(SpringConfiguration(), 0.25).delta_time == 0.25

    def test_zero_frequency_is_identity(self) -> None:
        """A spring without stiffness never moves."""
        config = SpringConfiguration.model_construct(
            angular_frequency=0.0, damping_ratio=0.5, threshold=0.0, stop_when_hit_target=False
        )
        assert _as_tuple(generate_coefficients(config, 1.0)) == (1.0, 0.0, 0.0, 1.0)

    def test_critically_damped_matches_analytic_solution(self) -> None:
        """Released from rest, x(t) = (1 + wt) e^(-wt) and v(t) = -w^2 t e^(-wt)."""
        omega, dt = 4.0, 0.3
        coefs = generate_coefficients(
            SpringConfiguration(angular_frequency=omega, damping_ratio=1.0), dt
        )
        decay = math.exp(-omega * dt)
        assert coefs.pos_pos_coef == pytest.approx((1.0 + omega * dt) * decay)
        assert coefs.vel_pos_coef == pytest.approx(-omega * omega * dt * decay)
        assert coefs.pos_vel_coef == pytest.approx(dt * decay)

    def test_underdamped_matches_analytic_solution(self) -> None:
        """Released from rest, x(t) = e^(-zwt) (cos at + zw/a sin at)."""
        omega, zeta, dt = 10.0, 0.75, 0.1
        coefs = generate_coefficients(
            SpringConfiguration(angular_frequency=omega, damping_ratio=zeta), dt
        )
        alpha = omega * math.sqrt(1.0 - zeta * zeta)
        decay = math.exp(-zeta * omega * dt)
        expected = decay * (
            math.cos(alpha * dt) + zeta * omega / alpha * math.sin(alpha * dt)
        )
        assert coefs.pos_pos_coef == pytest.approx(expected)
        assert coefs.pos_vel_coef == pytest.approx(decay * math.sin(alpha * dt) / alpha)

    def test_overdamped_matches_analytic_solution(self) -> None:
        """Released from rest, x(t) = (z2 e^(z1 t) - z1 e^(z2 t)) / (z2 - z1)."""
        omega, zeta, dt = 10.0, 2.0, 0.05
        coefs = generate_coefficients(
            SpringConfiguration(angular_frequency=omega, damping_ratio=zeta), dt
        )
        root = omega * math.sqrt(zeta * zeta - 1.0)
        z1 = -omega * zeta - root
        z2 = -omega * zeta + root
        expected = (z2 * math.exp(z1 * dt) - z1 * math.exp(z2 * dt)) / (z2 - z1)
        assert coefs.pos_pos_coef == pytest.approx(expected)

    @pytest.mark.parametrize("damping_ratio", DAMPING_RATIOS)
    def test_two_half_steps_equal_one_full_step(self, damping_ratio: float) -> None:
        """The transition is exact, so steps compose without drift."""
        config = SpringConfiguration(angular_frequency=6.0, damping_ratio=damping_ratio)
        half = generate_coefficients(config, 0.05)
        full = generate_coefficients(config, 0.1)
        assert _compose(half, half) == pytest.approx(_as_tuple(full), abs=1e-12)

    @pytest.mark.parametrize("damping_ratio", [0.999, 1.001])
    def test_continuous_across_critical_damping(self, damping_ratio: float) -> None:
        """Near-critical ratios give nearly the critical coefficients."""
        critical = generate_coefficients(
            SpringConfiguration(angular_frequency=10.0, damping_ratio=1.0), 1 / 60
        )
        nearby = generate_coefficients(
            SpringConfiguration(angular_frequency=10.0, damping_ratio=damping_ratio), 1 / 60
        )
        assert _as_tuple(nearby) == pytest.approx(_as_tuple(critical), abs=1e-3)

    @pytest.mark.parametrize("damping_ratio", DAMPING_RATIOS)
    def test_huge_step_converges_to_target(self, damping_ratio: float) -> None:
        """Very large steps stay finite and decay to rest."""
        config = SpringConfiguration(angular_frequency=10.0, damping_ratio=damping_ratio)
        coefs = generate_coefficients(config, 100.0)
        for value in _as_tuple(coefs):
            assert math.isfinite(value)
            assert abs(value) < 1e-6
