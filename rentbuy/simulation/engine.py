"""Core projection engine — 360 monthly snapshots of the rent and buy paths.

Each run is a pure function of its arguments. Month-0 state is derived
from the inputs and the T0 shocks, then every month is processed in a fixed
order: income, job loss, rent path, buy path, portfolio growth (with the
crash multiplier), cash hit, carried-state update, net worth.
"""
from __future__ import annotations

from typing import Optional

from rentbuy.models.inputs import (
    BuyScenario,
    FinancialProfile,
    MarketSentiment,
    RentScenario,
    ScenarioInputs,
    StressTestParams,
)
from rentbuy.models.options import EngineOptions, LegacyDebtPolicy
from rentbuy.models.projection import MonthlyCashFlow
from rentbuy.models.sensitivity import ShockDuration, ShockVariable
from rentbuy.simulation.amortization import calculate_mortgage_payment
from rentbuy.simulation.shocks import (
    BaselineResolver,
    ShockResolver,
    ShockedResolver,
    base_rates,
    cash_hit,
    crash_multiplier,
    job_loss_window,
)


PROJECTION_MONTHS = 360


def _monthly(annual_percent: float) -> float:
    return annual_percent / 100 / 12


def grow_balance(
    balance: float,
    monthly_return: float,
    contribution: float,
    monthly_penalty: float,
    crash: float = 1.0,
) -> float:
    """Advance a liquid balance by one month.

    A non-negative balance earns the market return (scaled by `crash` in a
    crash month); a negative balance accrues the debt penalty rate instead
    and is never crashed. The month's contribution is added afterwards.
    """
    if balance >= 0:
        return balance * (1 + monthly_return) * crash + contribution
    return balance * (1 + monthly_penalty) + contribution


def run_projection(
    profile: FinancialProfile,
    rent: RentScenario,
    buy: BuyScenario,
    sentiment: MarketSentiment,
    stress: StressTestParams,
    resolver: ShockResolver,
    options: EngineOptions,
) -> list[MonthlyCashFlow]:
    """Run the month loop with rate inputs supplied by `resolver`."""
    months = PROJECTION_MONTHS
    monthly_penalty = _monthly(options.debt_penalty_rate)
    selling_cost_pct = (
        buy.selling_closing_costs if buy.selling_closing_costs is not None
        else options.default_selling_cost_pct
    )
    investment_share = profile.investment_rate / 100
    extra_expenses = stress.additional_monthly_expenses

    # Month 0. The house-price shock moves market value only; the loan is
    # sized on the purchase price.
    home_value = buy.home_price * (1 + stress.house_price_shock / 100)
    loan_balance = buy.loan_amount
    mortgage_rate = max(0.0, resolver(ShockVariable.mortgage_rate, 1) + stress.interest_rate_shock)
    monthly_mortgage_rate = _monthly(mortgage_rate)
    fixed_payment = calculate_mortgage_payment(loan_balance, mortgage_rate, buy.loan_term_years)
    term_months = buy.loan_term_years * 12

    rent_portfolio = profile.current_savings - rent.one_time_fees
    buy_portfolio = (
        profile.current_savings - buy.down_payment_amount - buy.buying_closing_costs_amount
    )
    if options.legacy_debt_policy == LegacyDebtPolicy.subtract_both:
        rent_portfolio -= profile.current_debt
        buy_portfolio -= profile.current_debt

    current_rent = rent.monthly_rent * (1 + stress.rent_market_shock / 100)
    income = profile.monthly_income * (1 + (profile.income_fluctuation or 0.0) / 100)
    maintenance = buy.maintenance_monthly
    unemployed = job_loss_window(stress)

    cash_flows: list[MonthlyCashFlow] = []

    for month in range(1, months + 1):
        income *= 1 + _monthly(resolver(ShockVariable.salary_growth, month))
        effective_income = 0.0 if month in unemployed else income

        # Rent path
        rent_outflow = current_rent + rent.renters_insurance + rent.other_monthly_costs
        rent_investable = (effective_income - rent_outflow - extra_expenses) * investment_share

        # Buy path
        mortgage_payment = 0.0
        interest_payment = 0.0
        principal_payment = 0.0
        if loan_balance > 0:
            mortgage_payment = fixed_payment
            interest_payment = loan_balance * monthly_mortgage_rate
            principal_payment = mortgage_payment - interest_payment
            # Final scheduled payment settles any rounding residue.
            if principal_payment > loan_balance or month >= term_months:
                principal_payment = loan_balance
                mortgage_payment = principal_payment + interest_payment

        property_tax = home_value * buy.property_tax_rate / 100 / 12
        maintenance *= 1 + _monthly(resolver(ShockVariable.inflation, month))
        buy_outflow = mortgage_payment + property_tax + maintenance
        buy_investable = (effective_income - buy_outflow - extra_expenses) * investment_share

        # Portfolios
        monthly_return = _monthly(resolver(ShockVariable.investment_return, month))
        crash = crash_multiplier(stress, month)
        hit = cash_hit(stress, month)
        rent_portfolio = grow_balance(
            rent_portfolio, monthly_return, rent_investable, monthly_penalty, crash,
        ) - hit
        buy_portfolio = grow_balance(
            buy_portfolio, monthly_return, buy_investable, monthly_penalty, crash,
        ) - hit

        # Carry state into next month
        rent_payment = current_rent
        current_rent *= 1 + _monthly(resolver(ShockVariable.rent_inflation, month))
        home_value *= 1 + _monthly(resolver(ShockVariable.home_appreciation, month))
        loan_balance = max(loan_balance - principal_payment, 0.0)

        selling_costs = home_value * selling_cost_pct / 100
        home_equity = home_value - loan_balance

        cash_flows.append(MonthlyCashFlow(
            month=month,
            year=(month + 11) // 12,
            income=effective_income,
            rent_payment=rent_payment,
            rent_insurance=rent.renters_insurance,
            rent_total_outflow=rent_outflow,
            rent_invested=rent_investable,
            rent_portfolio_value=rent_portfolio,
            mortgage_payment=mortgage_payment,
            interest_payment=interest_payment,
            principal_payment=principal_payment,
            property_tax=property_tax,
            maintenance=maintenance,
            buy_total_outflow=buy_outflow,
            home_value=home_value,
            remaining_loan=loan_balance,
            home_equity=home_equity,
            selling_costs=selling_costs,
            buy_invested=buy_investable,
            buy_portfolio_value=buy_portfolio,
            net_worth_rent=rent_portfolio,
            net_worth_buy=buy_portfolio + home_equity - selling_costs,
        ))

    return cash_flows


def calculate_projections(
    profile: FinancialProfile,
    rent: RentScenario,
    buy: BuyScenario,
    sentiment: MarketSentiment,
    stress: StressTestParams,
    options: Optional[EngineOptions] = None,
) -> list[MonthlyCashFlow]:
    """Baseline projection: every rate input holds its configured value."""
    resolver = BaselineResolver(base_rates(profile, rent, buy, sentiment))
    return run_projection(
        profile, rent, buy, sentiment, stress, resolver, options or EngineOptions(),
    )


def calculate_projections_with_shock(
    profile: FinancialProfile,
    rent: RentScenario,
    buy: BuyScenario,
    sentiment: MarketSentiment,
    stress: StressTestParams,
    variable: ShockVariable,
    magnitude: float,
    duration: ShockDuration = ShockDuration.permanent,
    options: Optional[EngineOptions] = None,
) -> list[MonthlyCashFlow]:
    """Projection with one rate input shifted by `magnitude` points.

    The mortgage rate is resolved once, at month 1, so a mortgage-rate shock
    fixes the amortization schedule for the whole loan even when temporary.
    """
    options = options or EngineOptions()
    resolver = ShockedResolver(
        rates=base_rates(profile, rent, buy, sentiment),
        variable=variable,
        magnitude=magnitude,
        duration=duration,
        temporary_months=options.temporary_shock_months,
    )
    return run_projection(profile, rent, buy, sentiment, stress, resolver, options)


def project_inputs(
    inputs: ScenarioInputs,
    options: Optional[EngineOptions] = None,
) -> list[MonthlyCashFlow]:
    """calculate_projections() over a bundled ScenarioInputs."""
    return calculate_projections(
        inputs.profile, inputs.rent, inputs.buy, inputs.sentiment, inputs.stress, options,
    )
