from enum import Enum
from typing import Literal, Optional

from pydantic import BaseModel, ConfigDict, Field


class ShockVariable(str, Enum):
    """Rate inputs the engine resolves month by month."""
    investment_return = "investment_return"
    home_appreciation = "home_appreciation"
    rent_inflation = "rent_inflation"
    salary_growth = "salary_growth"
    mortgage_rate = "mortgage_rate"
    inflation = "inflation"


class ShockDuration(str, Enum):
    permanent = "permanent"    # all projection months
    temporary = "temporary"    # first N months, then back to the base value


Winner = Literal["buy", "rent"]


class PathRiskFlag(BaseModel):
    model_config = ConfigDict(frozen=True)

    type: Literal["dti", "liquidity"]
    year: int


class ShockResult(BaseModel):
    """Month-360 comparison of one shocked run against the baseline."""
    model_config = ConfigDict(frozen=True)

    id: str
    name: str
    badge: str
    variable: ShockVariable
    magnitude: float
    stressed_buy_net_worth: float
    stressed_rent_net_worth: float
    delta_buy_abs: float
    delta_buy_pct: float
    delta_rent_abs: float
    delta_rent_pct: float
    new_spread: float
    delta_spread: float
    flipped: bool
    elasticity: float
    buy_risk: list[PathRiskFlag] = []
    rent_risk: list[PathRiskFlag] = []


class SensitivityReport(BaseModel):
    model_config = ConfigDict(frozen=True)

    base_buy_net_worth: float
    base_rent_net_worth: float
    base_spread: float
    base_winner: Winner
    results: list[ShockResult]

    def tornado(self) -> list[ShockResult]:
        """Results ordered by absolute spread impact, largest first."""
        return sorted(self.results, key=lambda r: abs(r.delta_spread), reverse=True)

    @property
    def flipped(self) -> list[ShockResult]:
        return [r for r in self.results if r.flipped]


class CustomShockRequest(BaseModel):
    model_config = ConfigDict(frozen=True)

    variable: ShockVariable
    magnitude: float = Field(ge=-5, le=5)
    duration: ShockDuration = ShockDuration.permanent


class CustomShockResult(BaseModel):
    model_config = ConfigDict(frozen=True)

    request: CustomShockRequest
    custom_buy_net_worth: float
    custom_rent_net_worth: float
    new_spread: float
    delta_spread: float
    delta_buy_abs: float
    delta_rent_abs: float
    flipped: bool
    new_winner: Winner


class NetWorthImpact(BaseModel):
    """Month-360 net worth of an alternative run against the baseline."""
    model_config = ConfigDict(frozen=True)

    label: str
    base_buy: float
    base_rent: float
    new_buy: float
    new_rent: float
    buy_net_worth_delta: float
    rent_net_worth_delta: float
    description: Optional[str] = None
