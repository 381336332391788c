"""Tests for the refinance, compound growth and leverage calculators."""
import pytest

from rentbuy.services.calculator_service import (
    compare_refinance,
    compound_growth_schedule,
    leverage_outcome,
)
from rentbuy.simulation.amortization import calculate_mortgage_payment


# ---------------------------------------------------------------------------
# Refinance
# ---------------------------------------------------------------------------


def test_refinance_lower_rate_saves():
    result = compare_refinance(200_000, 25, 4.0, 3.0)
    assert result.current.payment == pytest.approx(calculate_mortgage_payment(200_000, 4.0, 25))
    assert result.monthly_savings == pytest.approx(result.current.payment - result.new.payment)
    assert result.total_savings == pytest.approx(
        result.current.total_interest - result.new.total_interest
    )
    assert result.monthly_savings > 0 and result.total_savings > 0


def test_refinance_savings_never_negative():
    result = compare_refinance(200_000, 25, 3.0, 4.0)
    assert result.monthly_savings == 0.0
    assert result.total_savings == 0.0


def test_refinance_zero_rate_has_no_interest():
    result = compare_refinance(120_000, 10, 2.0, 0.0)
    assert result.new.payment == pytest.approx(1000.0)
    assert result.new.total_interest == pytest.approx(0.0, abs=1e-6)


# ---------------------------------------------------------------------------
# Compound growth
# ---------------------------------------------------------------------------


def test_growth_schedule_has_year_zero_to_n():
    points = compound_growth_schedule(10_000, 500, 8.0, 20)
    assert [p.year for p in points] == list(range(21))
    assert points[0].balance == pytest.approx(10_000)
    assert points[0].interest == pytest.approx(0.0)


def test_growth_one_year_at_8_percent():
    year_one = compound_growth_schedule(10_000, 500, 8.0, 1)[1]
    assert year_one.contributions == pytest.approx(16_000)
    assert year_one.balance == pytest.approx(17_054.97, abs=0.1)
    assert year_one.interest == pytest.approx(year_one.balance - 16_000)


def test_growth_zero_rate_is_contributions():
    for p in compound_growth_schedule(1000, 100, 0.0, 5):
        assert p.balance == p.contributions
        assert p.interest == 0.0


def test_growth_balance_increasing():
    balances = [p.balance for p in compound_growth_schedule(0, 200, 5.0, 10)]
    assert balances == sorted(balances)


# ---------------------------------------------------------------------------
# Leverage
# ---------------------------------------------------------------------------


def test_leverage_gain():
    out = leverage_outcome(500_000, 20, 10)
    assert out.down_payment == pytest.approx(100_000)
    assert out.loan_amount == pytest.approx(400_000)
    assert out.new_home_value == pytest.approx(550_000)
    assert out.equity == pytest.approx(150_000)
    assert out.roi_percent == pytest.approx(50.0)
    assert out.leverage_ratio == pytest.approx(5.0)


def test_leverage_loss_magnified():
    out = leverage_outcome(500_000, 20, -10)
    assert out.equity == pytest.approx(50_000)
    assert out.roi_percent == pytest.approx(-50.0)


def test_leverage_no_down_payment():
    out = leverage_outcome(300_000, 0, 5)
    assert out.roi_percent == 0.0
    assert out.leverage_ratio == 0.0
    assert out.equity == pytest.approx(15_000)
