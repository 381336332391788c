"""Standardized sensitivity shocks — the six ±1 point perturbations.

Each shock moves exactly one rate input, in the direction that hurts the
projection, for the full horizon.
"""
from __future__ import annotations

from dataclasses import dataclass

from rentbuy.models.sensitivity import ShockVariable


@dataclass(frozen=True)
class StandardShock:
    """A single-variable perturbation used in the elasticity sweep."""
    id: str
    name: str
    badge: str
    variable: ShockVariable
    delta: float   # percentage points


_SHOCKS: dict[str, StandardShock] = {
    "return_shock": StandardShock(
        id="return_shock",
        name="Investment Return",
        badge="Inv. Return −1%",
        variable=ShockVariable.investment_return,
        delta=-1.0,
    ),
    "appr_shock": StandardShock(
        id="appr_shock",
        name="Home Appreciation",
        badge="Home Appr. −1%",
        variable=ShockVariable.home_appreciation,
        delta=-1.0,
    ),
    "rent_infl_shock": StandardShock(
        id="rent_infl_shock",
        name="Rent Inflation",
        badge="Rent Infl. +1%",
        variable=ShockVariable.rent_inflation,
        delta=1.0,
    ),
    "salary_shock": StandardShock(
        id="salary_shock",
        name="Salary Growth",
        badge="Salary Growth −1%",
        variable=ShockVariable.salary_growth,
        delta=-1.0,
    ),
    "rate_shock": StandardShock(
        id="rate_shock",
        name="Mortgage Rate",
        badge="Mortgage Rate +1%",
        variable=ShockVariable.mortgage_rate,
        delta=1.0,
    ),
    "infl_shock": StandardShock(
        id="infl_shock",
        name="General Inflation",
        badge="Inflation +1%",
        variable=ShockVariable.inflation,
        delta=1.0,
    ),
}

VARIABLE_LABELS: dict[ShockVariable, str] = {
    shock.variable: shock.name for shock in _SHOCKS.values()
}


def get_standard_shock(shock_id: str) -> StandardShock:
    """Return a standardized shock by id. Raises KeyError if unknown."""
    return _SHOCKS[shock_id]


def list_standard_shocks() -> list[StandardShock]:
    """All standardized shocks, in presentation order."""
    return list(_SHOCKS.values())


def shock_for_variable(variable: ShockVariable) -> StandardShock:
    for shock in _SHOCKS.values():
        if shock.variable == variable:
            return shock
    raise KeyError(variable)
