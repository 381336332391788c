from enum import Enum
from typing import Literal

from pydantic import BaseModel, ConfigDict, field_validator

ANALYSIS_YEARS = (0, 3, 5, 10)


class RiskPath(str, Enum):
    buy = "buy"
    rent = "rent"


RiskTier = Literal["Secure", "Stable", "Critical"]


class RiskMetrics(BaseModel):
    """Raw indicators. Ratios are percentages, runway is in months."""
    model_config = ConfigDict(frozen=True)

    dti: float
    runway_months: float
    leverage: float
    price_to_income: float
    shock_dti: float
    burn_rate: float


class RiskScores(BaseModel):
    """Per-indicator tier score: 100 low risk, 70 medium, 30 high."""
    model_config = ConfigDict(frozen=True)

    cash_flow: int
    liquidity: int
    leverage: int
    market: int
    shock: int
    holding: int

    def values(self) -> list[int]:
        return [self.cash_flow, self.liquidity, self.leverage,
                self.market, self.shock, self.holding]


class RiskAssessment(BaseModel):
    model_config = ConfigDict(frozen=True)

    year: int
    path: RiskPath
    month: int
    projected_income: float
    metrics: RiskMetrics
    scores: RiskScores
    total_score: float
    tier: RiskTier

    @field_validator("year")
    @classmethod
    def _supported_year(cls, v: int) -> int:
        if v not in ANALYSIS_YEARS:
            raise ValueError(f"analysis year must be one of {ANALYSIS_YEARS}")
        return v
