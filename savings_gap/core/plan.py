from __future__ import annotations

from dataclasses import dataclass

from savings_gap.core.annuity import (
    NEAR_SINGULAR_TOLERANCE,
    present_value_growing_annuity,
    present_value_level_annuity,
    solve_first_contribution_for_target_future_value,
)
from savings_gap.core.conversions import (
    MONTHS_PER_YEAR,
    annual_percent_to_monthly_rate,
    years_to_periods,
)
from savings_gap.schemas.plan import PlanRequest
from savings_gap.utils.logging import get_logger

logger = get_logger(__name__)

PROJECTION_YEARS = 5


@dataclass(frozen=True)
class PlanResult:
    retirement_periods: int
    retirement_rate: float
    withdrawal_growth: float
    used_level_annuity: bool
    required_capital: float

    accumulation_periods: int
    accumulation_rate: float
    contribution_growth: float
    future_from_existing_capital: float
    residual_target: float
    first_month_contribution: float
    contribution_in_five_years: float


def uses_level_annuity(growth: float) -> bool:
    return abs(growth) < NEAR_SINGULAR_TOLERANCE


def required_capital(gap_monthly: float, rate: float, growth: float, periods: int) -> float:
    """Capital needed at retirement to pay the gap for ``periods`` months."""
    if uses_level_annuity(growth):
        return present_value_level_annuity(gap_monthly, rate, periods)
    return present_value_growing_annuity(gap_monthly, rate, growth, periods)


def future_from_existing_capital(
    initial_capital: float, lump_sum: float, rate: float, periods: int
) -> float:
    """Value at retirement of everything invested today."""
    return (initial_capital + lump_sum) * (1 + rate) ** periods


def residual_target(capital_needed: float, future_from_existing: float) -> float:
    return max(0.0, capital_needed) - future_from_existing


def required_first_contribution(
    capital_needed: float,
    future_from_existing: float,
    rate: float,
    growth: float,
    periods: int,
) -> float:
    """First monthly contribution that closes what existing capital does not cover."""
    residual = residual_target(capital_needed, future_from_existing)
    if residual <= 0:
        return 0.0
    return solve_first_contribution_for_target_future_value(residual, rate, growth, periods)


def projected_contribution(
    first_contribution: float,
    monthly_growth: float,
    months: int = PROJECTION_YEARS * MONTHS_PER_YEAR,
) -> float:
    """Monthly contribution after ``months`` of growth."""
    return first_contribution * (1 + monthly_growth) ** months


def calculate_plan(request: PlanRequest) -> PlanResult:
    """
    Run both stages of the calculator.

      1) Withdrawal phase: present value of the (growing) monthly gap
         = capital required at retirement.
      2) Accumulation phase: subtract what today's capital grows into,
         then solve for the first monthly contribution covering the rest.

    Everything is in real terms, so the capital target needs no
    inflation adjustment between the stages.
    """
    n_ret = years_to_periods(request.yearsInRetirement)
    r_ret = annual_percent_to_monthly_rate(request.retireAnnualRealReturn)
    g_wdr = annual_percent_to_monthly_rate(request.withdrawalGrowthAnnual)
    capital = required_capital(request.gapMonthly, r_ret, g_wdr, n_ret)

    n_acc = years_to_periods(request.yearsToRetirement)
    r_acc = annual_percent_to_monthly_rate(request.accumAnnualRealReturn)
    g_inc = annual_percent_to_monthly_rate(request.contribAnnualIncrease)
    from_existing = future_from_existing_capital(
        request.initialCapital, request.oneOffToday, r_acc, n_acc
    )
    first = required_first_contribution(capital, from_existing, r_acc, g_inc, n_acc)

    result = PlanResult(
        retirement_periods=n_ret,
        retirement_rate=r_ret,
        withdrawal_growth=g_wdr,
        used_level_annuity=uses_level_annuity(g_wdr),
        required_capital=capital,
        accumulation_periods=n_acc,
        accumulation_rate=r_acc,
        contribution_growth=g_inc,
        future_from_existing_capital=from_existing,
        residual_target=residual_target(capital, from_existing),
        first_month_contribution=first,
        contribution_in_five_years=projected_contribution(first, g_inc),
    )
    logger.debug(
        "plan n_ret=%s n_acc=%s required_capital=%.2f first_contribution=%.2f",
        n_ret,
        n_acc,
        capital,
        first,
    )
    return result
