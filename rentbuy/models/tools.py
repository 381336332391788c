from pydantic import BaseModel, ConfigDict


class LoanCost(BaseModel):
    model_config = ConfigDict(frozen=True)

    rate: float
    payment: float
    total_interest: float


class RefinanceComparison(BaseModel):
    model_config = ConfigDict(frozen=True)

    principal: float
    term_years: int
    current: LoanCost
    new: LoanCost
    monthly_savings: float
    total_savings: float


class GrowthPoint(BaseModel):
    model_config = ConfigDict(frozen=True)

    year: int
    contributions: float
    balance: float
    interest: float


class LeverageOutcome(BaseModel):
    model_config = ConfigDict(frozen=True)

    home_price: float
    down_payment: float
    loan_amount: float
    new_home_value: float
    equity: float
    roi_percent: float
    leverage_ratio: float
