"""Closed-form state-transition coefficients for a damped spring.

Solves x'' + 2*zeta*omega*x' + omega^2*x = omega^2*target exactly over a
time step of length dt. The solution is linear in the (position, velocity)
pair relative to the target, so one step reduces to a 2x2 matrix:

    pos(t+dt) = pos(t) * pos_pos + vel(t) * pos_vel
    vel(t+dt) = pos(t) * vel_pos + vel(t) * vel_vel

No numerical integration is involved, which keeps the result exact and
stable for arbitrarily large time steps.
"""

from __future__ import annotations

import math
import sys
from typing import TYPE_CHECKING

from springkit.core.spring.models import TransitionCoefficients

if TYPE_CHECKING:
    from springkit.core.spring.models import SpringConfiguration

EPSILON = sys.float_info.epsilon


def _identity(delta_time: float) -> TransitionCoefficients:
    return TransitionCoefficients(
        delta_time=delta_time,
        pos_pos_coef=1.0,
        pos_vel_coef=0.0,
        vel_pos_coef=0.0,
        vel_vel_coef=1.0,
    )


def _settled(delta_time: float) -> TransitionCoefficients:
    """Envelope fully decayed: the step lands exactly on target."""
    return TransitionCoefficients(
        delta_time=delta_time,
        pos_pos_coef=0.0,
        pos_vel_coef=0.0,
        vel_pos_coef=0.0,
        vel_vel_coef=0.0,
    )


def _overdamped(omega: float, zeta: float, delta_time: float) -> TransitionCoefficients:
    """Two distinct real roots z1 < z2 < 0."""
    za = -omega * zeta
    zb = omega * math.sqrt(zeta * zeta - 1.0)
    z1 = za - zb
    z2 = za + zb

    e1 = math.exp(z1 * delta_time)
    e2 = math.exp(z2 * delta_time)
    inv_two_zb = 1.0 / (2.0 * zb)

    e1_over_two_zb = e1 * inv_two_zb
    e2_over_two_zb = e2 * inv_two_zb
    z1e1_over_two_zb = z1 * e1_over_two_zb
    z2e2_over_two_zb = z2 * e2_over_two_zb

    return TransitionCoefficients(
        delta_time=delta_time,
        pos_pos_coef=e1_over_two_zb * z2 - z2e2_over_two_zb + e2,
        pos_vel_coef=-e1_over_two_zb + e2_over_two_zb,
        vel_pos_coef=(z1e1_over_two_zb - z2e2_over_two_zb + e2) * z2,
        vel_vel_coef=-z1e1_over_two_zb + z2e2_over_two_zb,
    )


def _underdamped(omega: float, zeta: float, delta_time: float) -> TransitionCoefficients:
    """Complex-conjugate roots; decaying sinusoid at alpha rad/s."""
    omega_zeta = omega * zeta
    alpha = omega * math.sqrt(1.0 - zeta * zeta)

    exp_term = math.exp(-omega_zeta * delta_time)
    if exp_term == 0.0:
        return _settled(delta_time)
    cos_term = math.cos(alpha * delta_time)
    sin_term = math.sin(alpha * delta_time)
    inv_alpha = 1.0 / alpha

    exp_sin = exp_term * sin_term
    exp_cos = exp_term * cos_term
    exp_omega_zeta_sin_over_alpha = exp_term * omega_zeta * sin_term * inv_alpha

    return TransitionCoefficients(
        delta_time=delta_time,
        pos_pos_coef=exp_cos + exp_omega_zeta_sin_over_alpha,
        pos_vel_coef=exp_sin * inv_alpha,
        vel_pos_coef=-exp_sin * alpha - omega_zeta * exp_omega_zeta_sin_over_alpha,
        vel_vel_coef=exp_cos - exp_omega_zeta_sin_over_alpha,
    )


def _critically_damped(omega: float, delta_time: float) -> TransitionCoefficients:
    """Repeated real root -omega."""
    exp_term = math.exp(-omega * delta_time)
    if exp_term == 0.0:
        return _settled(delta_time)
    time_exp = delta_time * exp_term
    time_exp_freq = time_exp * omega

    return TransitionCoefficients(
        delta_time=delta_time,
        pos_pos_coef=time_exp_freq + exp_term,
        pos_vel_coef=time_exp,
        vel_pos_coef=-omega * time_exp_freq,
        vel_vel_coef=-time_exp_freq + exp_term,
    )


def generate_coefficients(
    config: SpringConfiguration, delta_time: float
) -> TransitionCoefficients:
    """Generate the transition coefficients for one time step.

    Args:
        config: Spring configuration.
        delta_time: Step length in seconds. Negative values are treated as 0
            (a no-op step).

    Returns:
        TransitionCoefficients valid for exactly this delta_time.

    Example:
        >>> coefs = generate_coefficients(SpringConfiguration(), 0.0)
        >>> (coefs.pos_pos_coef, coefs.vel_vel_coef)
        (1.0, 1.0)
    """
    delta_time = max(0.0, delta_time)
    omega = config.angular_frequency
    zeta = config.damping_ratio

    if omega < EPSILON:
        return _identity(delta_time)
    if zeta > 1.0 + EPSILON:
        return _overdamped(omega, zeta, delta_time)
    if zeta < 1.0 - EPSILON:
        return _underdamped(omega, zeta, delta_time)
    return _critically_damped(omega, delta_time)
