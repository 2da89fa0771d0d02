"""Closed-form annuity formulas on monthly (per-period) rates.

Every payment falls at the END of its period. Growing streams pay
``payment * (1 + growth) ** (k - 1)`` in period ``k``.

All functions are total over finite floats: where Python would raise on
float overflow or division by zero they return the IEEE result instead.
"""

from __future__ import annotations

import math

# Below this distance between rate and growth the closed forms become 0/0,
# so each formula switches to its analytic limit. Tune here only.
NEAR_SINGULAR_TOLERANCE = 1e-9


def _is_near_singular(rate: float, growth: float) -> bool:
    return abs(rate - growth) < NEAR_SINGULAR_TOLERANCE


def _power(base: float, exponent: int) -> float:
    try:
        return base**exponent
    except ZeroDivisionError:
        # 0.0 ** negative
        return math.inf
    except OverflowError:
        if base < 0 and exponent % 2:
            return -math.inf
        return math.inf


def _divide(numerator: float, denominator: float) -> float:
    if denominator == 0:
        if numerator == 0 or math.isnan(numerator):
            return math.nan
        return math.copysign(math.inf, numerator)
    return numerator / denominator


def _future_value_factor(rate: float, growth: float, periods: int) -> float:
    """Future value at the horizon of a stream whose first payment is 1."""
    if _is_near_singular(rate, growth):
        return periods * _power(1 + rate, periods - 1)
    return (_power(1 + rate, periods) - _power(1 + growth, periods)) / (rate - growth)


def present_value_growing_annuity(
    payment: float, rate: float, growth: float, periods: int
) -> float:
    """Present value of ``periods`` payments growing by ``growth`` each period.

    PV = P / (r - g) * (1 - ((1 + g) / (1 + r)) ** N)
    """
    if periods <= 0:
        return 0.0
    if _is_near_singular(rate, growth):
        # first-order limit of the closed form as g -> r
        return _divide(payment * periods, 1 + rate)
    ratio = _divide(1 + growth, 1 + rate)
    return payment * (1 - _power(ratio, periods)) / (rate - growth)


def present_value_level_annuity(payment: float, rate: float, periods: int) -> float:
    """Present value of ``periods`` constant payments.

    Same value as the growing annuity at ``growth == 0``, but this is the
    path callers take whenever growth is (near) zero.
    """
    if periods <= 0:
        return 0.0
    if rate == 0:
        return payment * periods
    return payment * (1 - _power(1 + rate, -periods)) / rate


def future_value_growing_annuity(
    contribution: float, rate: float, growth: float, periods: int
) -> float:
    """Value at the end of period ``periods`` of a growing contribution stream.

    FV = R * ((1 + r) ** N - (1 + g) ** N) / (r - g)
    """
    if periods <= 0:
        return 0.0
    return contribution * _future_value_factor(rate, growth, periods)


def solve_first_contribution_for_target_future_value(
    target_future_value: float, rate: float, growth: float, periods: int
) -> float:
    """First-period contribution whose growing stream reaches ``target_future_value``.

    The future value is linear in the contribution, so this is a single
    division by the unit factor. A factor of exactly zero outside the
    near-singular band is not guarded against and yields ``inf``.
    """
    if periods <= 0 or target_future_value <= 0:
        return 0.0
    return _divide(target_future_value, _future_value_factor(rate, growth, periods))


__all__ = [
    "NEAR_SINGULAR_TOLERANCE",
    "present_value_growing_annuity",
    "present_value_level_annuity",
    "future_value_growing_annuity",
    "solve_first_contribution_for_target_future_value",
]
