"""Tests for life event transforms and their net worth impact."""
import pytest

from rentbuy.defaults import DEFAULT_INPUTS
from rentbuy.services.life_event_service import run_all_life_events, run_life_event
from rentbuy.simulation.engine import project_inputs
from rentbuy.simulation.life_events import get_life_event, list_life_events


def test_eighteen_events_with_unique_ids():
    events = list_life_events()
    assert len(events) == 18
    assert len({e.id for e in events}) == 18


def test_unknown_event_raises():
    with pytest.raises(KeyError):
        get_life_event("alien_abduction")


def test_events_never_mutate_inputs():
    before = DEFAULT_INPUTS.model_dump()
    for event in list_life_events():
        changed = event.apply(DEFAULT_INPUTS)
        assert changed is not DEFAULT_INPUTS
        assert DEFAULT_INPUTS.model_dump() == before, f"{event.id} mutated its inputs"


def test_partner_halves_rent_only():
    changed = get_life_event("partner").apply(DEFAULT_INPUTS)
    assert changed.rent.monthly_rent == pytest.approx(800.0)
    assert changed.buy == DEFAULT_INPUTS.buy
    assert changed.profile == DEFAULT_INPUTS.profile


def test_promotion_capped():
    inputs = DEFAULT_INPUTS.model_copy(update={
        "profile": DEFAULT_INPUTS.profile.model_copy(update={"income_fluctuation": 40.0}),
    })
    changed = get_life_event("promotion").apply(inputs)
    assert changed.profile.income_fluctuation == 50.0


def test_lump_sum_capped_at_full_price():
    inputs = DEFAULT_INPUTS.model_copy(update={
        "buy": DEFAULT_INPUTS.buy.model_copy(update={"home_price": 25_000.0}),
    })
    changed = get_life_event("lump_sum").apply(inputs)
    assert changed.buy.down_payment_percent == 100.0


def test_lump_sum_adds_to_down_payment():
    changed = get_life_event("lump_sum").apply(DEFAULT_INPUTS)
    assert changed.buy.down_payment_amount == pytest.approx(20_000.0 + 30_000.0)


def test_housing_crash_hurts_buyer_only():
    impact = run_life_event(DEFAULT_INPUTS, "housing_crash")
    assert impact.buy_net_worth_delta < 0.0
    assert impact.rent_net_worth_delta == 0.0
    assert impact.label == "Housing Crash (-30%)"


def test_inheritance_helps_both_paths():
    impact = run_life_event(DEFAULT_INPUTS, "inheritance")
    assert impact.buy_net_worth_delta > 0.0
    assert impact.rent_net_worth_delta > 0.0


def test_job_loss_hurts_both_paths():
    impact = run_life_event(DEFAULT_INPUTS, "job_loss")
    assert impact.buy_net_worth_delta < 0.0
    assert impact.rent_net_worth_delta < 0.0


def test_impact_deltas_consistent():
    end = project_inputs(DEFAULT_INPUTS)[-1]
    impact = run_life_event(DEFAULT_INPUTS, "childbirth")
    assert impact.base_buy == end.net_worth_buy
    assert impact.base_rent == end.net_worth_rent
    assert impact.buy_net_worth_delta == pytest.approx(impact.new_buy - impact.base_buy)
    assert impact.rent_net_worth_delta == pytest.approx(impact.new_rent - impact.base_rent)


def test_run_all_life_events():
    impacts = run_all_life_events(DEFAULT_INPUTS)
    assert set(impacts) == {e.id for e in list_life_events()}
    assert impacts["rate_spike"].rent_net_worth_delta == 0.0
