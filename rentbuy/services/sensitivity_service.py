"""Sensitivity & elasticity analysis.

Re-runs the projection engine under single-variable shocks and compares the
month-360 net worths against a baseline run of the same inputs.
"""
from __future__ import annotations

import logging
from typing import Optional

from rentbuy.models.inputs import ScenarioInputs
from rentbuy.models.options import EngineOptions
from rentbuy.models.projection import MonthlyCashFlow
from rentbuy.models.sensitivity import (
    CustomShockRequest,
    CustomShockResult,
    PathRiskFlag,
    SensitivityReport,
    ShockDuration,
    ShockResult,
    ShockVariable,
    Winner,
)
from rentbuy.simulation.engine import calculate_projections_with_shock, project_inputs
from rentbuy.simulation.scenarios import StandardShock, list_standard_shocks, shock_for_variable

logger = logging.getLogger(__name__)

_HORIZON_MONTH = 360
_DTI_WARNING_RATIO = 0.5
_MAX_FLAGS_PER_PATH = 2


def percent_delta(new: float, base: float) -> float:
    """Percent change relative to |base|; a zero base yields 0 %."""
    if base == 0:
        return 0.0
    return (new - base) / abs(base) * 100


def winner(spread: float) -> Winner:
    return "buy" if spread >= 0 else "rent"


def horizon_snapshot(cash_flows: list[MonthlyCashFlow]) -> MonthlyCashFlow:
    """Month-360 record, or the last one for a shorter run."""
    if not cash_flows:
        raise ValueError("no projected months to compare")
    if len(cash_flows) >= _HORIZON_MONTH:
        return cash_flows[_HORIZON_MONTH - 1]
    return cash_flows[-1]


def path_risk_flags(
    cash_flows: list[MonthlyCashFlow],
) -> tuple[list[PathRiskFlag], list[PathRiskFlag]]:
    """First distinct years with a buy-side DTI breach or a negative rent portfolio."""
    buy_flags: list[PathRiskFlag] = []
    rent_flags: list[PathRiskFlag] = []
    for cf in cash_flows:
        if (len(buy_flags) < _MAX_FLAGS_PER_PATH
                and cf.buy_total_outflow > _DTI_WARNING_RATIO * cf.income
                and all(f.year != cf.year for f in buy_flags)):
            buy_flags.append(PathRiskFlag(type="dti", year=cf.year))
        if (len(rent_flags) < _MAX_FLAGS_PER_PATH
                and cf.rent_portfolio_value < 0
                and all(f.year != cf.year for f in rent_flags)):
            rent_flags.append(PathRiskFlag(type="liquidity", year=cf.year))
    return buy_flags, rent_flags


def _shocked_run(
    inputs: ScenarioInputs,
    variable: ShockVariable,
    magnitude: float,
    duration: ShockDuration,
    options: EngineOptions,
) -> list[MonthlyCashFlow]:
    return calculate_projections_with_shock(
        inputs.profile, inputs.rent, inputs.buy, inputs.sentiment, inputs.stress,
        variable, magnitude, duration, options,
    )


def run_shock(
    inputs: ScenarioInputs,
    shock: StandardShock,
    magnitude: Optional[float] = None,
    baseline: Optional[list[MonthlyCashFlow]] = None,
    options: Optional[EngineOptions] = None,
) -> ShockResult:
    """Compare one permanent single-variable shock against the baseline.

    `magnitude` defaults to the shock's standard delta.
    """
    options = options or EngineOptions()
    if baseline is None:
        baseline = project_inputs(inputs, options)
    magnitude = shock.delta if magnitude is None else magnitude

    base_end = horizon_snapshot(baseline)
    base_buy, base_rent = base_end.net_worth_buy, base_end.net_worth_rent
    base_spread = base_buy - base_rent

    stressed = _shocked_run(inputs, shock.variable, magnitude, ShockDuration.permanent, options)
    end = horizon_snapshot(stressed)
    new_spread = end.net_worth_buy - end.net_worth_rent
    delta_buy_pct = percent_delta(end.net_worth_buy, base_buy)
    delta_rent_pct = percent_delta(end.net_worth_rent, base_rent)
    buy_risk, rent_risk = path_risk_flags(stressed)

    return ShockResult(
        id=shock.id,
        name=shock.name,
        badge=shock.badge,
        variable=shock.variable,
        magnitude=magnitude,
        stressed_buy_net_worth=end.net_worth_buy,
        stressed_rent_net_worth=end.net_worth_rent,
        delta_buy_abs=end.net_worth_buy - base_buy,
        delta_buy_pct=delta_buy_pct,
        delta_rent_abs=end.net_worth_rent - base_rent,
        delta_rent_pct=delta_rent_pct,
        new_spread=new_spread,
        delta_spread=new_spread - base_spread,
        flipped=winner(new_spread) != winner(base_spread),
        elasticity=max(abs(delta_buy_pct), abs(delta_rent_pct)),
        buy_risk=buy_risk,
        rent_risk=rent_risk,
    )


def run_standard_sensitivity(
    inputs: ScenarioInputs,
    options: Optional[EngineOptions] = None,
) -> SensitivityReport:
    """Baseline plus the six standardized ±1 point shocks, each run in isolation."""
    options = options or EngineOptions()
    baseline = project_inputs(inputs, options)
    base_end = horizon_snapshot(baseline)
    base_spread = base_end.net_worth_buy - base_end.net_worth_rent

    results = [
        run_shock(inputs, shock, baseline=baseline, options=options)
        for shock in list_standard_shocks()
    ]
    flipped = [r.id for r in results if r.flipped]
    logger.info(
        "Sensitivity sweep: base spread %.2f, %d shocks, flipped: %s",
        base_spread, len(results), flipped or "none",
    )

    return SensitivityReport(
        base_buy_net_worth=base_end.net_worth_buy,
        base_rent_net_worth=base_end.net_worth_rent,
        base_spread=base_spread,
        base_winner=winner(base_spread),
        results=results,
    )


def run_custom_scenario(
    inputs: ScenarioInputs,
    request: CustomShockRequest,
    baseline: Optional[list[MonthlyCashFlow]] = None,
    options: Optional[EngineOptions] = None,
) -> Optional[CustomShockResult]:
    """Time-bound shock on one variable. Returns None for a zero magnitude."""
    if request.magnitude == 0:
        return None
    options = options or EngineOptions()
    if baseline is None:
        baseline = project_inputs(inputs, options)

    base_end = horizon_snapshot(baseline)
    base_spread = base_end.net_worth_buy - base_end.net_worth_rent

    custom = _shocked_run(inputs, request.variable, request.magnitude, request.duration, options)
    end = horizon_snapshot(custom)
    new_spread = end.net_worth_buy - end.net_worth_rent
    logger.debug(
        "Custom shock %s %+.2f (%s): spread %.2f -> %.2f",
        shock_for_variable(request.variable).name, request.magnitude,
        request.duration.value, base_spread, new_spread,
    )

    return CustomShockResult(
        request=request,
        custom_buy_net_worth=end.net_worth_buy,
        custom_rent_net_worth=end.net_worth_rent,
        new_spread=new_spread,
        delta_spread=new_spread - base_spread,
        delta_buy_abs=end.net_worth_buy - base_end.net_worth_buy,
        delta_rent_abs=end.net_worth_rent - base_end.net_worth_rent,
        flipped=winner(new_spread) != winner(base_spread),
        new_winner=winner(new_spread),
    )
