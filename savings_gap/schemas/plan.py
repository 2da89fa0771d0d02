"""Data contracts for the retirement gap calculation."""

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

# Upper bounds keep every compounding factor finite.
MAX_YEARS = 100
MAX_RATE_PERCENT = 100


class PlanRequest(BaseModel):
    """Inputs collected by the calculator form.

    Rates are annual percentages in real terms; amounts are in today's euros.
    """

    model_config = ConfigDict(extra="forbid", allow_inf_nan=False)

    # Stage 1: withdrawal phase
    gapMonthly: float = Field(1300.0, description="Monthly retirement gap in today's money.")
    yearsInRetirement: float = Field(
        25.0,
        ge=0,
        le=MAX_YEARS,
        description="Length of the withdrawal phase in years.",
    )
    retireAnnualRealReturn: float = Field(
        1.0,
        ge=-MAX_RATE_PERCENT,
        le=MAX_RATE_PERCENT,
        description="Real return p.a. during retirement, in percent.",
    )
    withdrawalGrowthAnnual: float = Field(
        0.0,
        ge=-MAX_RATE_PERCENT,
        le=MAX_RATE_PERCENT,
        description="Real growth p.a. of the monthly withdrawal, in percent.",
    )

    # Stage 2: accumulation phase
    yearsToRetirement: float = Field(
        30.0,
        ge=0,
        le=MAX_YEARS,
        description="Years left until retirement.",
    )
    accumAnnualRealReturn: float = Field(
        5.0,
        ge=-MAX_RATE_PERCENT,
        le=MAX_RATE_PERCENT,
        description="Real return p.a. while saving, in percent.",
    )
    initialCapital: float = Field(0.0, description="Capital already invested today.")
    oneOffToday: float = Field(0.0, description="One-off lump sum invested today.")
    contribAnnualIncrease: float = Field(
        0.0,
        ge=-MAX_RATE_PERCENT,
        le=MAX_RATE_PERCENT,
        description="Real increase p.a. of the monthly contribution, in percent.",
    )


class PlanDisplay(BaseModel):
    """Headline figures formatted for display."""

    requiredCapital: str
    firstMonthContribution: str
    contributionInFiveYears: str


class PlanResponse(BaseModel):
    """Both calculation stages with their intermediate values.

    Non-finite results serialise as ``null``.
    """

    retirementPeriods: int
    retirementMonthlyRate: float
    withdrawalMonthlyGrowth: float
    usedLevelAnnuity: bool
    requiredCapital: Optional[float]

    accumulationPeriods: int
    accumulationMonthlyRate: float
    contributionMonthlyGrowth: float
    futureFromExistingCapital: Optional[float]
    residualTarget: Optional[float]
    firstMonthContribution: Optional[float]
    contributionInFiveYears: Optional[float]

    display: PlanDisplay
