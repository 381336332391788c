"""Projection summary — break-even, annual schedule, upfront cash and warnings."""
from __future__ import annotations

from typing import Optional

from rentbuy.models.inputs import ScenarioInputs
from rentbuy.models.options import EngineOptions
from rentbuy.models.projection import MonthlyCashFlow
from rentbuy.models.summary import (
    AffordabilityWarning,
    ProjectionSummary,
    ScheduleRow,
    UpfrontAllocation,
)
from rentbuy.simulation.amortization import calculate_mortgage_payment
from rentbuy.simulation.engine import project_inputs


def break_even_month(projections: list[MonthlyCashFlow]) -> Optional[int]:
    """First month in which buying is ahead of renting, if any."""
    return next((cf.month for cf in projections if cf.net_worth_buy > cf.net_worth_rent), None)


def annual_schedule(projections: list[MonthlyCashFlow]) -> list[ScheduleRow]:
    """Month 1, each year end, and the final month."""
    last = len(projections)
    return [
        ScheduleRow(
            month=cf.month,
            year=cf.year,
            net_worth_rent=cf.net_worth_rent,
            net_worth_buy=cf.net_worth_buy,
            difference=cf.net_worth_buy - cf.net_worth_rent,
            home_equity=cf.home_equity,
            remaining_loan=cf.remaining_loan,
        )
        for cf in projections
        if cf.month == 1 or cf.month % 12 == 0 or cf.month == last
    ]


def upfront_allocation(inputs: ScenarioInputs) -> list[UpfrontAllocation]:
    savings = inputs.profile.current_savings
    down = inputs.buy.down_payment_amount
    closing = inputs.buy.buying_closing_costs_amount
    fees = inputs.rent.one_time_fees
    return [
        UpfrontAllocation(
            path="buy",
            down_payment=down,
            closing_costs=closing,
            invested=max(0.0, savings - down - closing),
        ),
        UpfrontAllocation(
            path="rent",
            fees=fees,
            invested=max(0.0, savings - fees),
        ),
    ]


def affordability_warnings(inputs: ScenarioInputs) -> list[AffordabilityWarning]:
    """Month-0 checks on unshocked inputs: income vs housing cost, savings vs cash to close."""
    profile, rent, buy = inputs.profile, inputs.rent, inputs.buy
    income = profile.monthly_income
    warnings: list[AffordabilityWarning] = []

    rent_cost = rent.monthly_rent + rent.renters_insurance + rent.other_monthly_costs
    if income < rent_cost:
        warnings.append(AffordabilityWarning(
            code="rent_exceeds_income",
            message="Monthly income does not cover rent and renting costs.",
            shortfall=rent_cost - income,
        ))

    mortgage = calculate_mortgage_payment(buy.loan_amount, buy.mortgage_rate, buy.loan_term_years)
    tax = buy.home_price * buy.property_tax_rate / 100 / 12
    buy_cost = mortgage + tax + buy.maintenance_monthly
    if income < buy_cost:
        warnings.append(AffordabilityWarning(
            code="buy_exceeds_income",
            message="Monthly income does not cover mortgage, property tax and maintenance.",
            shortfall=buy_cost - income,
        ))

    required_cash = buy.down_payment_amount + buy.buying_closing_costs_amount
    if profile.current_savings < required_cash:
        warnings.append(AffordabilityWarning(
            code="insufficient_savings",
            message="Savings do not cover the down payment and closing costs.",
            shortfall=required_cash - profile.current_savings,
        ))
    return warnings


def summarize(
    inputs: ScenarioInputs,
    selected_month: int = 360,
    projections: Optional[list[MonthlyCashFlow]] = None,
    options: Optional[EngineOptions] = None,
) -> ProjectionSummary:
    if projections is None:
        projections = project_inputs(inputs, options)
    index = min(max(selected_month, 1), len(projections)) - 1
    cf = projections[index]

    if cf.net_worth_buy > cf.net_worth_rent:
        leader = "buy"
    elif cf.net_worth_rent > cf.net_worth_buy:
        leader = "rent"
    else:
        leader = None

    return ProjectionSummary(
        selected_month=cf.month,
        net_worth_rent=cf.net_worth_rent,
        net_worth_buy=cf.net_worth_buy,
        winner=leader,
        break_even_month=break_even_month(projections),
        upfront=upfront_allocation(inputs),
        warnings=affordability_warnings(inputs),
        schedule=annual_schedule(projections),
    )
