"""Simulation engine — amortization, shock timing, projections and scenarios."""
from rentbuy.simulation.amortization import calculate_mortgage_payment
from rentbuy.simulation.shocks import BaselineResolver, ShockedResolver, ShockResolver, base_rates
from rentbuy.simulation.engine import (
    calculate_projections,
    calculate_projections_with_shock,
    project_inputs,
    run_projection,
)
from rentbuy.simulation.scenarios import StandardShock, get_standard_shock, list_standard_shocks
from rentbuy.simulation.life_events import LifeEvent, get_life_event, list_life_events

__all__ = [
    "calculate_mortgage_payment",
    "ShockResolver",
    "BaselineResolver",
    "ShockedResolver",
    "base_rates",
    "run_projection",
    "calculate_projections",
    "calculate_projections_with_shock",
    "project_inputs",
    "StandardShock",
    "get_standard_shock",
    "list_standard_shocks",
    "LifeEvent",
    "get_life_event",
    "list_life_events",
]
