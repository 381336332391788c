"""Risk scoring — six indicators read from one projected month.

Indicators:
    DTI          (housing + other debt) / income
    Runway       liquid portfolio / monthly spending, in months
    Leverage     total debt / total assets
    Price/Income home value / annual income (buy only)
    Shock        worst DTI under income −20 % or payment ×1.25 (buy only)
    Burn rate    unrecoverable housing cost / income

Each indicator maps to 100 / 70 / 30 and the composite is their mean.
"""
from __future__ import annotations

import logging
import math
from typing import Optional

from rentbuy.models.inputs import FinancialProfile
from rentbuy.models.projection import MonthlyCashFlow
from rentbuy.models.risk import RiskAssessment, RiskMetrics, RiskPath, RiskScores, RiskTier

logger = logging.getLogger(__name__)

_INCOME_SHOCK_FACTOR = 0.8
_PAYMENT_SHOCK_FACTOR = 1.25


def _ratio(numerator: float, denominator: float) -> float:
    if denominator == 0:
        if numerator == 0:
            return 0.0
        return math.copysign(math.inf, numerator)
    return numerator / denominator


def score_metric(value: float, low: float, high: float, higher_is_better: bool = False) -> int:
    """Map a metric onto 100 (low risk), 70 (medium) or 30 (high)."""
    if higher_is_better:
        if value > low:
            return 100
        if value >= high:
            return 70
        return 30
    if value < low:
        return 100
    if value <= high:
        return 70
    return 30


def risk_tier(total_score: float) -> RiskTier:
    if total_score >= 80:
        return "Secure"
    if total_score >= 60:
        return "Stable"
    return "Critical"


def resolve_snapshot(projections: list[MonthlyCashFlow], year: int) -> MonthlyCashFlow:
    """Record at index max(0, year*12 - 1); the first record if out of range."""
    if not projections:
        raise ValueError("risk scoring needs at least one projected month")
    index = max(0, year * 12 - 1)
    if index >= len(projections):
        return projections[0]
    return projections[index]


def projected_income(profile: FinancialProfile, year: int) -> float:
    return profile.monthly_income * (1 + profile.expected_salary_growth / 100) ** year


def compute_metrics(
    cf: MonthlyCashFlow,
    path: RiskPath,
    income: float,
    monthly_debt_payment: float,
    living_expenses: float,
    other_debt: float,
) -> RiskMetrics:
    buying = path == RiskPath.buy
    if buying:
        housing_cost = cf.mortgage_payment + cf.property_tax + cf.maintenance
        liquid = cf.buy_portfolio_value
        unrecoverable = cf.property_tax + cf.maintenance + cf.interest_payment
    else:
        housing_cost = cf.rent_total_outflow
        liquid = cf.rent_portfolio_value
        unrecoverable = cf.rent_total_outflow

    dti = _ratio(housing_cost + monthly_debt_payment, income) * 100
    runway = _ratio(liquid, housing_cost + monthly_debt_payment + living_expenses)

    total_assets = (cf.home_value if buying else 0.0) + liquid
    total_debt = (cf.remaining_loan if buying else 0.0) + other_debt
    leverage = total_debt / total_assets * 100 if total_assets > 0 else 0.0

    price_to_income = _ratio(cf.home_value, income * 12) if buying else 0.0

    income_shock_dti = _ratio(housing_cost + monthly_debt_payment, income * _INCOME_SHOCK_FACTOR) * 100
    rate_shock_dti = 0.0
    if buying:
        stressed_housing = cf.mortgage_payment * _PAYMENT_SHOCK_FACTOR + cf.property_tax + cf.maintenance
        rate_shock_dti = _ratio(stressed_housing + monthly_debt_payment, income) * 100

    return RiskMetrics(
        dti=dti,
        runway_months=runway,
        leverage=leverage,
        price_to_income=price_to_income,
        shock_dti=max(income_shock_dti, rate_shock_dti),
        burn_rate=_ratio(unrecoverable, income) * 100,
    )


def score_metrics(metrics: RiskMetrics, path: RiskPath) -> RiskScores:
    return RiskScores(
        cash_flow=score_metric(metrics.dti, 30, 40),
        liquidity=score_metric(metrics.runway_months, 12, 6, higher_is_better=True),
        leverage=score_metric(metrics.leverage, 40, 60),
        market=100 if path == RiskPath.rent else score_metric(metrics.price_to_income, 5, 8),
        shock=score_metric(metrics.shock_dti, 40, 50),
        holding=score_metric(metrics.burn_rate, 15, 25),
    )


def assess_risk(
    projections: list[MonthlyCashFlow],
    profile: FinancialProfile,
    year: int,
    path: RiskPath,
    monthly_debt_payment: float = 0.0,
    living_expenses: Optional[float] = None,
    default_living_expenses: float = 1500.0,
) -> RiskAssessment:
    """Score one path at an analysis year (0, 3, 5 or 10).

    Living expenses fall back to the profile's minimum living expenses and
    then to `default_living_expenses`.
    """
    if living_expenses is None:
        living_expenses = (
            profile.minimum_living_expenses
            if profile.minimum_living_expenses is not None
            else default_living_expenses
        )
    cf = resolve_snapshot(projections, year)
    income = projected_income(profile, year)

    metrics = compute_metrics(
        cf, path, income, monthly_debt_payment, living_expenses, profile.current_debt,
    )
    scores = score_metrics(metrics, path)
    total = sum(scores.values()) / len(scores.values())
    logger.debug("Risk %s year %d: score %.1f", path.value, year, total)

    return RiskAssessment(
        year=year,
        path=path,
        month=cf.month,
        projected_income=income,
        metrics=metrics,
        scores=scores,
        total_score=total,
        tier=risk_tier(total),
    )
