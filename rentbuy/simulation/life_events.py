"""Life events — one-click what-if transforms of a scenario.

Each event returns a new ScenarioInputs; the original is never modified.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Callable

from rentbuy.models.inputs import ScenarioInputs


@dataclass(frozen=True)
class LifeEvent:
    id: str
    label: str
    description: str
    apply: Callable[[ScenarioInputs], ScenarioInputs]
    is_hot: bool = False


def _update(inputs: ScenarioInputs, part: str, **changes) -> ScenarioInputs:
    record = getattr(inputs, part)
    return inputs.model_copy(update={part: record.model_copy(update=changes)})


def _housing_crash(inputs: ScenarioInputs) -> ScenarioInputs:
    return _update(inputs, "stress", house_price_shock=-30.0)


def _market_collapse(inputs: ScenarioInputs) -> ScenarioInputs:
    return _update(inputs, "stress", stock_market_crash_year=5, stock_market_crash_drop=40.0)


def _job_loss(inputs: ScenarioInputs) -> ScenarioInputs:
    return _update(inputs, "stress", job_loss_year=3, job_loss_duration_months=12)


def _childbirth(inputs: ScenarioInputs) -> ScenarioInputs:
    return _update(inputs, "stress", additional_monthly_expenses=1500.0)


def _rent_hyperinflation(inputs: ScenarioInputs) -> ScenarioInputs:
    return _update(inputs, "rent", rent_inflation=inputs.rent.rent_inflation + 5)


def _rate_spike(inputs: ScenarioInputs) -> ScenarioInputs:
    return _update(inputs, "stress", interest_rate_shock=3.0)


def _promotion(inputs: ScenarioInputs) -> ScenarioInputs:
    fluctuation = min((inputs.profile.income_fluctuation or 0.0) + 20, 50.0)
    return _update(inputs, "profile", income_fluctuation=fluctuation)


def _cash_hit(amount: float, year: int) -> Callable[[ScenarioInputs], ScenarioInputs]:
    def apply(inputs: ScenarioInputs) -> ScenarioInputs:
        return _update(inputs, "stress", cash_hit_amount=amount, cash_hit_year=year)
    return apply


def _tax_hike(inputs: ScenarioInputs) -> ScenarioInputs:
    return _update(inputs, "buy", property_tax_rate=inputs.buy.property_tax_rate * 2)


def _move_cheaper(inputs: ScenarioInputs) -> ScenarioInputs:
    moved = _update(inputs, "rent", monthly_rent=inputs.rent.monthly_rent * 0.7)
    return _update(moved, "profile", income_fluctuation=-10.0)


def _partner(inputs: ScenarioInputs) -> ScenarioInputs:
    # Rent only. Mortgage, tax and maintenance stay unsplit.
    return _update(inputs, "rent", monthly_rent=inputs.rent.monthly_rent / 2)


def _crypto_wipeout(inputs: ScenarioInputs) -> ScenarioInputs:
    return _update(inputs, "profile", current_savings=inputs.profile.current_savings * 0.8)


def _lump_sum(inputs: ScenarioInputs) -> ScenarioInputs:
    price = inputs.buy.home_price
    extra_percent = 30000 / price * 100 if price > 0 else 0.0
    down = min(inputs.buy.down_payment_percent + extra_percent, 100.0)
    return _update(inputs, "buy", down_payment_percent=down)


def _sabbatical(inputs: ScenarioInputs) -> ScenarioInputs:
    return _update(inputs, "stress", job_loss_year=4, job_loss_duration_months=12)


def _golden_decade(inputs: ScenarioInputs) -> ScenarioInputs:
    return _update(
        inputs, "sentiment", investment_return=inputs.sentiment.investment_return + 3,
    )


_EVENTS: dict[str, LifeEvent] = {e.id: e for e in [
    LifeEvent("housing_crash", "Housing Crash (-30%)",
              "Home value drops 30% immediately after purchase.", _housing_crash, True),
    LifeEvent("market_collapse", "Stock Market Collapse",
              "Investment portfolios lose 40% at the start of year 5.", _market_collapse, True),
    LifeEvent("job_loss", "Sudden Job Loss (1 Yr)",
              "No income for 12 months starting in year 3.", _job_loss, True),
    LifeEvent("childbirth", "Childbirth (+1.5k/mo)",
              "Adds 1,500 per month of childcare expense.", _childbirth, True),
    LifeEvent("rent_hyperinflation", "Rent Hyperinflation",
              "Rent inflation rises by 5 points.", _rent_hyperinflation),
    LifeEvent("rate_spike", "Interest Rate Spike (+3%)",
              "Mortgage rate rises by 3 points.", _rate_spike),
    LifeEvent("promotion", "Career Promotion (+20%)",
              "Income rises by 20%.", _promotion),
    LifeEvent("medical", "Medical Emergency (-20k)",
              "One-time 20,000 expense in year 2.", _cash_hit(20000.0, 2)),
    LifeEvent("new_car", "Buy New Car (-40k)",
              "One-time 40,000 expense in year 2.", _cash_hit(40000.0, 2)),
    LifeEvent("roof_repair", "Major Home Repair (-15k)",
              "One-time 15,000 expense in year 5.", _cash_hit(15000.0, 5)),
    LifeEvent("inheritance", "Inheritance (+50k)",
              "One-time 50,000 windfall in year 10.", _cash_hit(-50000.0, 10)),
    LifeEvent("tax_hike", "Property Tax Hike (2x)",
              "Property tax rate doubles.", _tax_hike),
    LifeEvent("move_cheaper", "Move Cheaper City",
              "Rent drops 30%, income drops 10%.", _move_cheaper),
    LifeEvent("partner", "Partner Moves In",
              "Rent is halved (shared).", _partner),
    LifeEvent("crypto_wipeout", "Crypto Wipeout (-20%)",
              "Lose 20% of current savings immediately.", _crypto_wipeout),
    LifeEvent("lump_sum", "Lump Sum Paydown (30k)",
              "Put an extra 30,000 towards the down payment.", _lump_sum),
    LifeEvent("sabbatical", "Sabbatical Year",
              "No income for 12 months starting in year 4.", _sabbatical),
    LifeEvent("golden_decade", "Golden Decade (+3%)",
              "Investment returns rise by 3 points.", _golden_decade),
]}


def get_life_event(event_id: str) -> LifeEvent:
    """Return a life event by id. Raises KeyError if unknown."""
    return _EVENTS[event_id]


def list_life_events() -> list[LifeEvent]:
    return list(_EVENTS.values())
