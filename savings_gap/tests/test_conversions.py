from math import isclose

import pytest

from savings_gap.core.conversions import annual_percent_to_monthly_rate, years_to_periods


def test_annual_percent_to_monthly_rate():
    assert isclose(annual_percent_to_monthly_rate(6.0), 0.005)
    assert isclose(annual_percent_to_monthly_rate(1.0), 1.0 / 100 / 12)
    assert annual_percent_to_monthly_rate(0.0) == 0.0
    assert isclose(annual_percent_to_monthly_rate(-2.4), -0.002)


@pytest.mark.parametrize(
    "years, expected",
    [
        (25, 300),
        (30, 360),
        (1, 12),
        (0.375, 5),  # 4.5 months rounds up
        (0.125, 2),  # 1.5 months rounds up
        (2.49 / 12, 2),
    ],
)
def test_years_to_periods_rounds_half_up(years, expected):
    assert years_to_periods(years) == expected


@pytest.mark.parametrize("years", [0, 0.01, -3])
def test_years_to_periods_never_below_one(years):
    assert years_to_periods(years) == 1
