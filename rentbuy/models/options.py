from enum import Enum

from pydantic import BaseModel, ConfigDict, Field


class LegacyDebtPolicy(str, Enum):
    """How existing non-mortgage debt enters the starting balances."""
    exclude = "exclude"              # neither path starts net of the debt
    subtract_both = "subtract_both"  # both paths start net of the debt


class EngineOptions(BaseModel):
    """Engine-level knobs, passed explicitly into every entry point."""
    model_config = ConfigDict(frozen=True)

    legacy_debt_policy: LegacyDebtPolicy = LegacyDebtPolicy.exclude
    debt_penalty_rate: float = 10.0          # annual % charged on a negative balance
    default_selling_cost_pct: float = 6.0
    temporary_shock_months: int = Field(default=60, gt=0)
