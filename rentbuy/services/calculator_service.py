"""Standalone what-if calculators: refinance savings, compound growth and leverage."""
from __future__ import annotations

from rentbuy.models.tools import GrowthPoint, LeverageOutcome, LoanCost, RefinanceComparison
from rentbuy.simulation.amortization import calculate_mortgage_payment


def _loan_cost(principal: float, annual_rate: float, term_years: int) -> LoanCost:
    payment = calculate_mortgage_payment(principal, annual_rate, term_years)
    return LoanCost(
        rate=annual_rate,
        payment=payment,
        total_interest=payment * term_years * 12 - principal,
    )


def compare_refinance(
    principal: float,
    term_years: int,
    current_rate: float,
    new_rate: float,
) -> RefinanceComparison:
    """Payment and lifetime interest at two rates. Savings never go below 0."""
    current = _loan_cost(principal, current_rate, term_years)
    new = _loan_cost(principal, new_rate, term_years)
    return RefinanceComparison(
        principal=principal,
        term_years=term_years,
        current=current,
        new=new,
        monthly_savings=max(0.0, current.payment - new.payment),
        total_savings=max(0.0, current.total_interest - new.total_interest),
    )


def compound_growth_schedule(
    initial: float,
    monthly_contribution: float,
    annual_rate: float,
    years: int,
) -> list[GrowthPoint]:
    """Yearly balance points (year 0 .. years) with monthly compounding.

    FV = P*(1+r/12)^(12t) + PMT*((1+r/12)^(12t) - 1)/(r/12)
    """
    monthly_rate = annual_rate / 100 / 12
    points = []
    for year in range(years + 1):
        contributions = initial + monthly_contribution * 12 * year
        if monthly_rate == 0:
            balance = contributions
        else:
            factor = (1 + monthly_rate) ** (12 * year)
            balance = initial * factor + monthly_contribution * (factor - 1) / monthly_rate
        points.append(GrowthPoint(
            year=year,
            contributions=contributions,
            balance=balance,
            interest=balance - contributions,
        ))
    return points


def leverage_outcome(
    home_price: float,
    down_payment_percent: float,
    price_change_percent: float,
) -> LeverageOutcome:
    """Return on the down payment after a price move.

    A 0 % down payment has no defined ROI or leverage ratio; both are reported as 0.
    """
    down_payment = home_price * down_payment_percent / 100
    loan_amount = home_price - down_payment
    new_home_value = home_price * (1 + price_change_percent / 100)
    equity = new_home_value - loan_amount
    if down_payment > 0:
        roi = (equity - down_payment) / down_payment * 100
        ratio = home_price / down_payment
    else:
        roi = ratio = 0.0
    return LeverageOutcome(
        home_price=home_price,
        down_payment=down_payment,
        loan_amount=loan_amount,
        new_home_value=new_home_value,
        equity=equity,
        roi_percent=roi,
        leverage_ratio=ratio,
    )
