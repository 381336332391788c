from typing import Literal, Optional

from pydantic import BaseModel, ConfigDict


class ScheduleRow(BaseModel):
    model_config = ConfigDict(frozen=True)

    month: int
    year: int
    net_worth_rent: float
    net_worth_buy: float
    difference: float
    home_equity: float
    remaining_loan: float


class UpfrontAllocation(BaseModel):
    """Month-0 split of current savings for one path."""
    model_config = ConfigDict(frozen=True)

    path: Literal["buy", "rent"]
    down_payment: float = 0.0
    closing_costs: float = 0.0
    fees: float = 0.0
    invested: float


class AffordabilityWarning(BaseModel):
    model_config = ConfigDict(frozen=True)

    code: Literal["rent_exceeds_income", "buy_exceeds_income", "insufficient_savings"]
    message: str
    shortfall: float


class ProjectionSummary(BaseModel):
    model_config = ConfigDict(frozen=True)

    selected_month: int
    net_worth_rent: float
    net_worth_buy: float
    winner: Optional[Literal["buy", "rent"]]
    break_even_month: Optional[int]
    upfront: list[UpfrontAllocation]
    warnings: list[AffordabilityWarning]
    schedule: list[ScheduleRow]
