"""Tests for the standardized sensitivity sweep and custom scenarios."""
import pytest
from pydantic import ValidationError

from rentbuy.defaults import DEFAULT_INPUTS
from rentbuy.models.inputs import ScenarioInputs
from rentbuy.models.options import EngineOptions
from rentbuy.models.sensitivity import (
    CustomShockRequest,
    PathRiskFlag,
    ShockDuration,
    ShockVariable,
)
from rentbuy.services.sensitivity_service import (
    horizon_snapshot,
    path_risk_flags,
    percent_delta,
    run_custom_scenario,
    run_shock,
    run_standard_sensitivity,
    winner,
)
from rentbuy.simulation.engine import calculate_projections_with_shock, project_inputs
from rentbuy.simulation.scenarios import (
    get_standard_shock,
    list_standard_shocks,
    shock_for_variable,
)


def _make_inputs(**parts) -> ScenarioInputs:
    update = {}
    for name, changes in parts.items():
        update[name] = getattr(DEFAULT_INPUTS, name).model_copy(update=changes)
    return DEFAULT_INPUTS.model_copy(update=update)


# ---------------------------------------------------------------------------
# Shock catalogue
# ---------------------------------------------------------------------------


def test_six_standard_shocks_in_order():
    ids = [s.id for s in list_standard_shocks()]
    assert ids == [
        "return_shock", "appr_shock", "rent_infl_shock",
        "salary_shock", "rate_shock", "infl_shock",
    ]


def test_standard_shock_directions():
    expected = {
        "return_shock": -1.0,
        "appr_shock": -1.0,
        "rent_infl_shock": 1.0,
        "salary_shock": -1.0,
        "rate_shock": 1.0,
        "infl_shock": 1.0,
    }
    for shock_id, delta in expected.items():
        assert get_standard_shock(shock_id).delta == delta, f"{shock_id} has wrong delta"


def test_each_variable_has_one_shock():
    assert {s.variable for s in list_standard_shocks()} == set(ShockVariable)
    assert shock_for_variable(ShockVariable.inflation).id == "infl_shock"


def test_unknown_shock_raises():
    with pytest.raises(KeyError):
        get_standard_shock("meteor_strike")


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------


def test_percent_delta():
    assert percent_delta(110.0, 100.0) == pytest.approx(10.0)
    assert percent_delta(-90.0, -100.0) == pytest.approx(10.0)
    assert percent_delta(5.0, 0.0) == 0.0


def test_winner_tie_goes_to_buy():
    assert winner(0.0) == "buy"
    assert winner(-0.01) == "rent"


def test_horizon_snapshot_short_run():
    cfs = project_inputs(DEFAULT_INPUTS)
    assert horizon_snapshot(cfs).month == 360
    assert horizon_snapshot(cfs[:24]).month == 24


def test_risk_flags_for_job_loss():
    inputs = _make_inputs(stress={"job_loss_year": 3, "job_loss_duration_months": 12})
    buy_flags, rent_flags = path_risk_flags(project_inputs(inputs))
    assert buy_flags == [PathRiskFlag(type="dti", year=3)]
    assert rent_flags == []


def test_risk_flags_capped_and_distinct_years():
    inputs = _make_inputs(
        profile={"current_savings": 0.0, "monthly_income": 1000.0},
    )
    buy_flags, rent_flags = path_risk_flags(project_inputs(inputs))
    assert len(buy_flags) == 2 and len(rent_flags) == 2
    assert buy_flags[0].year != buy_flags[1].year
    assert [f.type for f in rent_flags] == ["liquidity", "liquidity"]


# ---------------------------------------------------------------------------
# Standard sweep
# ---------------------------------------------------------------------------


def test_standard_sensitivity_baseline_matches_projection():
    report = run_standard_sensitivity(DEFAULT_INPUTS)
    end = project_inputs(DEFAULT_INPUTS)[-1]
    assert report.base_buy_net_worth == end.net_worth_buy
    assert report.base_rent_net_worth == end.net_worth_rent
    assert report.base_spread == pytest.approx(end.net_worth_buy - end.net_worth_rent)
    assert report.base_winner == winner(report.base_spread)
    assert len(report.results) == 6


def test_tornado_sorted_by_spread_impact():
    report = run_standard_sensitivity(DEFAULT_INPUTS)
    impacts = [abs(r.delta_spread) for r in report.tornado()]
    assert impacts == sorted(impacts, reverse=True)


def test_result_fields_consistent():
    report = run_standard_sensitivity(DEFAULT_INPUTS)
    for r in report.results:
        assert r.new_spread == pytest.approx(r.stressed_buy_net_worth - r.stressed_rent_net_worth)
        assert r.delta_spread == pytest.approx(r.new_spread - report.base_spread)
        assert r.elasticity == pytest.approx(max(abs(r.delta_buy_pct), abs(r.delta_rent_pct)))
        assert r.flipped == (winner(r.new_spread) != report.base_winner), f"{r.id} flip mismatch"
    assert report.flipped == [r for r in report.results if r.flipped]


def test_rent_inflation_shock_hits_rent_path_only():
    result = run_shock(DEFAULT_INPUTS, get_standard_shock("rent_infl_shock"))
    assert result.delta_buy_abs == 0.0
    assert result.delta_rent_abs < 0.0


def test_appreciation_shock_hits_buy_path_only():
    result = run_shock(DEFAULT_INPUTS, get_standard_shock("appr_shock"))
    assert result.delta_rent_abs == 0.0
    assert result.delta_buy_abs < 0.0


def test_return_shock_hits_both_paths():
    result = run_shock(DEFAULT_INPUTS, get_standard_shock("return_shock"))
    assert result.delta_buy_abs < 0.0 and result.delta_rent_abs < 0.0


def test_rate_shock_raises_buy_cost():
    result = run_shock(DEFAULT_INPUTS, get_standard_shock("rate_shock"))
    assert result.delta_buy_abs < 0.0
    assert result.delta_rent_abs == 0.0


def test_run_shock_magnitude_override():
    shock = get_standard_shock("return_shock")
    assert run_shock(DEFAULT_INPUTS, shock, magnitude=0.0).delta_spread == 0.0


# ---------------------------------------------------------------------------
# Custom scenarios
# ---------------------------------------------------------------------------


def test_custom_zero_magnitude_returns_none():
    request = CustomShockRequest(variable=ShockVariable.inflation, magnitude=0.0)
    assert run_custom_scenario(DEFAULT_INPUTS, request) is None


def test_custom_magnitude_bounds():
    with pytest.raises(ValidationError):
        CustomShockRequest(variable=ShockVariable.inflation, magnitude=5.5)
    with pytest.raises(ValidationError):
        CustomShockRequest(variable=ShockVariable.inflation, magnitude=-6)


def test_custom_permanent_matches_standard_shock():
    request = CustomShockRequest(variable=ShockVariable.investment_return, magnitude=-1.0)
    custom = run_custom_scenario(DEFAULT_INPUTS, request)
    standard = run_shock(DEFAULT_INPUTS, get_standard_shock("return_shock"))
    assert custom.new_spread == standard.new_spread
    assert custom.delta_buy_abs == standard.delta_buy_abs


def test_custom_temporary_smaller_than_permanent():
    permanent = run_custom_scenario(
        DEFAULT_INPUTS,
        CustomShockRequest(variable=ShockVariable.rent_inflation, magnitude=3.0),
    )
    temporary = run_custom_scenario(
        DEFAULT_INPUTS,
        CustomShockRequest(
            variable=ShockVariable.rent_inflation, magnitude=3.0,
            duration=ShockDuration.temporary,
        ),
    )
    assert permanent.delta_rent_abs < temporary.delta_rent_abs < 0.0
    assert temporary.new_winner == winner(temporary.new_spread)


def test_custom_reuses_baseline():
    baseline = project_inputs(DEFAULT_INPUTS)
    request = CustomShockRequest(variable=ShockVariable.salary_growth, magnitude=-2.0)
    with_baseline = run_custom_scenario(DEFAULT_INPUTS, request, baseline=baseline)
    without = run_custom_scenario(DEFAULT_INPUTS, request)
    assert with_baseline == without


def test_appreciation_shock_applies_to_override():
    inputs = _make_inputs(buy={"home_appreciation": 5.0})
    cfs = calculate_projections_with_shock(
        inputs.profile, inputs.rent, inputs.buy, inputs.sentiment, inputs.stress,
        ShockVariable.home_appreciation, -1.0,
    )
    growth = cfs[1].home_value / cfs[0].home_value
    assert growth == pytest.approx(1 + 4.0 / 1200, rel=1e-12), (
        f"Override not shocked: monthly growth {growth}"
    )
    result = run_shock(inputs, get_standard_shock("appr_shock"))
    assert result.delta_buy_abs < 0.0
    assert result.delta_rent_abs == 0.0


# ---------------------------------------------------------------------------
# Horizon
# ---------------------------------------------------------------------------


def test_horizon_snapshot_empty_raises():
    with pytest.raises(ValueError):
        horizon_snapshot([])


def test_run_length_not_configurable():
    # Unknown option fields are ignored; every run is 360 months
    options = EngineOptions(projection_months=0)
    assert len(project_inputs(DEFAULT_INPUTS, options)) == 360
    report = run_standard_sensitivity(DEFAULT_INPUTS, options)
    assert len(report.results) == 6
    request = CustomShockRequest(variable=ShockVariable.inflation, magnitude=1.0)
    assert run_custom_scenario(DEFAULT_INPUTS, request, options=options) is not None
