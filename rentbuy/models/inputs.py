"""Input records for a projection run.

Percentages are percentage points (7.0 means 7 %), money is in currency
units. Every record is frozen; perturbed copies go through model_copy().
"""
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class FinancialProfile(BaseModel):
    model_config = ConfigDict(frozen=True)

    monthly_income: float
    current_savings: float
    current_debt: float = 0.0
    expected_salary_growth: float = 0.0   # annual %
    investment_rate: float = Field(default=50.0, ge=0, le=100)
    minimum_living_expenses: Optional[float] = None
    target_emergency_fund_months: Optional[float] = None
    income_fluctuation: Optional[float] = Field(default=None, ge=-50, le=50)


class MarketSentiment(BaseModel):
    model_config = ConfigDict(frozen=True)

    home_appreciation: float   # annual %
    investment_return: float   # annual %
    inflation: float           # annual %


class RentScenario(BaseModel):
    model_config = ConfigDict(frozen=True)

    monthly_rent: float
    renters_insurance: float = 0.0
    other_monthly_costs: float = 0.0
    one_time_fees: float = 0.0
    rent_inflation: float = 0.0   # annual %


class BuyScenario(BaseModel):
    model_config = ConfigDict(frozen=True)

    home_price: float
    down_payment_percent: float
    mortgage_rate: float          # annual %
    loan_term_years: int = Field(gt=0)
    property_tax_rate: float = 0.0
    maintenance_monthly: float = 0.0
    buying_closing_costs: float = 0.0        # % of home price
    selling_closing_costs: Optional[float] = None
    home_appreciation: Optional[float] = None

    @property
    def down_payment_amount(self) -> float:
        return self.home_price * (self.down_payment_percent / 100)

    @property
    def buying_closing_costs_amount(self) -> float:
        return self.home_price * (self.buying_closing_costs / 100)

    @property
    def loan_amount(self) -> float:
        return self.home_price - self.down_payment_amount


class StressTestParams(BaseModel):
    """Shock parameters. The defaults have no effect on a run."""
    model_config = ConfigDict(frozen=True)

    house_price_shock: float = 0.0        # % applied to home value at T0
    rent_market_shock: float = 0.0        # % applied to rent at T0
    interest_rate_shock: float = 0.0      # additive points on the mortgage rate
    stock_market_crash_year: int = 0      # 0 = no crash
    stock_market_crash_drop: float = 40.0
    job_loss_year: int = 0                # 0 = no job loss
    job_loss_duration_months: int = 12
    cash_hit_amount: float = 0.0          # negative = windfall
    cash_hit_year: int = 0
    additional_monthly_expenses: float = 0.0


class ScenarioInputs(BaseModel):
    """Everything a single engine invocation needs, bundled for services."""
    model_config = ConfigDict(frozen=True)

    profile: FinancialProfile
    rent: RentScenario
    buy: BuyScenario
    sentiment: MarketSentiment
    stress: StressTestParams = StressTestParams()
