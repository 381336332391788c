"""Life event impact — month-360 net worth under a life event vs the baseline."""
from __future__ import annotations

import logging
from typing import Optional

from rentbuy.models.inputs import ScenarioInputs
from rentbuy.models.options import EngineOptions
from rentbuy.models.projection import MonthlyCashFlow
from rentbuy.models.sensitivity import NetWorthImpact
from rentbuy.services.sensitivity_service import horizon_snapshot
from rentbuy.simulation.engine import project_inputs
from rentbuy.simulation.life_events import get_life_event, list_life_events

logger = logging.getLogger(__name__)


def compare_net_worth(
    label: str,
    baseline: list[MonthlyCashFlow],
    alternative: list[MonthlyCashFlow],
    description: Optional[str] = None,
) -> NetWorthImpact:
    base_end = horizon_snapshot(baseline)
    new_end = horizon_snapshot(alternative)
    return NetWorthImpact(
        label=label,
        description=description,
        base_buy=base_end.net_worth_buy,
        base_rent=base_end.net_worth_rent,
        new_buy=new_end.net_worth_buy,
        new_rent=new_end.net_worth_rent,
        buy_net_worth_delta=new_end.net_worth_buy - base_end.net_worth_buy,
        rent_net_worth_delta=new_end.net_worth_rent - base_end.net_worth_rent,
    )


def run_life_event(
    inputs: ScenarioInputs,
    event_id: str,
    baseline: Optional[list[MonthlyCashFlow]] = None,
    options: Optional[EngineOptions] = None,
) -> NetWorthImpact:
    """Apply a life event to the inputs and compare against the baseline run."""
    event = get_life_event(event_id)
    options = options or EngineOptions()
    if baseline is None:
        baseline = project_inputs(inputs, options)
    alternative = project_inputs(event.apply(inputs), options)
    impact = compare_net_worth(event.label, baseline, alternative, event.description)
    logger.debug(
        "Life event %s: buy %+.2f, rent %+.2f",
        event.id, impact.buy_net_worth_delta, impact.rent_net_worth_delta,
    )
    return impact


def run_all_life_events(
    inputs: ScenarioInputs,
    options: Optional[EngineOptions] = None,
) -> dict[str, NetWorthImpact]:
    options = options or EngineOptions()
    baseline = project_inputs(inputs, options)
    return {
        event.id: run_life_event(inputs, event.id, baseline, options)
        for event in list_life_events()
    }
