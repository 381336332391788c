"""Shock timing — per-month rate resolution and scheduled life shocks.

The projection loop never reads the six rate inputs directly. It asks a
resolver for the annual % of a variable in a given month, so a baseline
run and a time-bound shock run share one code path.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Mapping, Protocol

from rentbuy.models.inputs import (
    BuyScenario,
    FinancialProfile,
    MarketSentiment,
    RentScenario,
    StressTestParams,
)
from rentbuy.models.sensitivity import ShockDuration, ShockVariable


class ShockResolver(Protocol):
    def __call__(self, variable: ShockVariable, month: int) -> float: ...


def base_rates(
    profile: FinancialProfile,
    rent: RentScenario,
    buy: BuyScenario,
    sentiment: MarketSentiment,
) -> dict[ShockVariable, float]:
    """Unperturbed annual % for every shockable variable."""
    appreciation = (
        buy.home_appreciation if buy.home_appreciation is not None
        else sentiment.home_appreciation
    )
    return {
        ShockVariable.investment_return: sentiment.investment_return,
        ShockVariable.home_appreciation: appreciation,
        ShockVariable.rent_inflation: rent.rent_inflation,
        ShockVariable.salary_growth: profile.expected_salary_growth,
        ShockVariable.mortgage_rate: buy.mortgage_rate,
        ShockVariable.inflation: sentiment.inflation,
    }


@dataclass(frozen=True)
class BaselineResolver:
    """Every variable holds its base value in every month."""
    rates: Mapping[ShockVariable, float]

    def __call__(self, variable: ShockVariable, month: int) -> float:
        return self.rates[variable]


@dataclass(frozen=True)
class ShockedResolver:
    """Shifts one variable by `magnitude` points.

    Permanent shocks hold for every month; temporary shocks hold for months
    1..`temporary_months` and the variable is back at its base value after.
    """
    rates: Mapping[ShockVariable, float]
    variable: ShockVariable
    magnitude: float
    duration: ShockDuration = ShockDuration.permanent
    temporary_months: int = 60

    def is_active(self, month: int) -> bool:
        if self.duration == ShockDuration.permanent:
            return True
        return month <= self.temporary_months

    def __call__(self, variable: ShockVariable, month: int) -> float:
        base = self.rates[variable]
        if variable == self.variable and self.is_active(month):
            return base + self.magnitude
        return base


# ---------------------------------------------------------------------------
# Scheduled shocks from StressTestParams
# ---------------------------------------------------------------------------


def is_first_month_of_year(month: int, year: int) -> bool:
    return year > 0 and month == (year - 1) * 12 + 1


def job_loss_window(stress: StressTestParams) -> range:
    """Months with zero income; empty when no job loss is configured."""
    if stress.job_loss_year <= 0:
        return range(0)
    start = (stress.job_loss_year - 1) * 12 + 1
    return range(start, start + max(stress.job_loss_duration_months, 0))


def crash_multiplier(stress: StressTestParams, month: int) -> float:
    """Multiplier on this month's market growth (1.0 outside the crash month)."""
    if is_first_month_of_year(month, stress.stock_market_crash_year):
        return 1 - stress.stock_market_crash_drop / 100
    return 1.0


def cash_hit(stress: StressTestParams, month: int) -> float:
    """Amount withdrawn from both portfolios this month (negative adds cash)."""
    if is_first_month_of_year(month, stress.cash_hit_year):
        return stress.cash_hit_amount
    return 0.0
