"""Conversions from the annual inputs users enter to monthly engine inputs."""

from __future__ import annotations

import math

MONTHS_PER_YEAR = 12


def annual_percent_to_monthly_rate(percent: float) -> float:
    """Nominal split of an annual percentage into a monthly decimal rate (5.0 -> 0.004166...)."""
    return (percent / 100) / MONTHS_PER_YEAR


def years_to_periods(years: float) -> int:
    """Round a year count to whole months, never fewer than one.

    Halves round up (2.5 months -> 3), not to the nearest even number.
    """
    months = math.floor(years * MONTHS_PER_YEAR + 0.5)
    return max(1, int(months))
