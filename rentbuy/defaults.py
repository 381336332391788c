"""Default input records and market sentiment presets.

The records are frozen; callers derive their own with model_copy(update=...).
"""
from enum import Enum

from rentbuy.models.inputs import (
    BuyScenario,
    FinancialProfile,
    MarketSentiment,
    RentScenario,
    ScenarioInputs,
    StressTestParams,
)


class SentimentMode(str, Enum):
    pessimistic = "pessimistic"
    neutral = "neutral"
    optimistic = "optimistic"


class InvestmentStyle(str, Enum):
    conservative = "conservative"
    balanced = "balanced"
    aggressive = "aggressive"


DEFAULT_PROFILE = FinancialProfile(
    monthly_income=4500,
    current_savings=60000,
    current_debt=0,
    expected_salary_growth=3,
    investment_rate=50,
)

DEFAULT_SENTIMENT = MarketSentiment(
    home_appreciation=3,
    investment_return=7,
    inflation=2.5,
)

DEFAULT_RENT = RentScenario(
    monthly_rent=1600,
    renters_insurance=15,
    other_monthly_costs=0,
    one_time_fees=3200,     # two months deposit
    rent_inflation=2.5,
)

DEFAULT_BUY = BuyScenario(
    home_price=200000,
    down_payment_percent=10,
    mortgage_rate=3.5,
    loan_term_years=25,
    property_tax_rate=0.5,
    maintenance_monthly=300,
    buying_closing_costs=8,
    selling_closing_costs=4,
)

DEFAULT_STRESS = StressTestParams()

DEFAULT_INPUTS = ScenarioInputs(
    profile=DEFAULT_PROFILE,
    rent=DEFAULT_RENT,
    buy=DEFAULT_BUY,
    sentiment=DEFAULT_SENTIMENT,
    stress=DEFAULT_STRESS,
)

# (home appreciation, {style: investment return})
_SENTIMENT_PRESETS: dict[SentimentMode, tuple[float, dict[InvestmentStyle, float]]] = {
    SentimentMode.pessimistic: (0.0, {
        InvestmentStyle.conservative: 2.0,
        InvestmentStyle.balanced: 0.0,
        InvestmentStyle.aggressive: 15.0,
    }),
    SentimentMode.neutral: (2.0, {
        InvestmentStyle.conservative: 3.0,
        InvestmentStyle.balanced: 4.0,
        InvestmentStyle.aggressive: 5.0,
    }),
    SentimentMode.optimistic: (6.0, {
        InvestmentStyle.conservative: 5.0,
        InvestmentStyle.balanced: 8.0,
        InvestmentStyle.aggressive: 20.0,
    }),
}


def sentiment_preset(
    mode: SentimentMode,
    style: InvestmentStyle = InvestmentStyle.balanced,
    inflation: float = DEFAULT_SENTIMENT.inflation,
) -> MarketSentiment:
    """Build a MarketSentiment from a preset mode and investment style."""
    appreciation, returns = _SENTIMENT_PRESETS[SentimentMode(mode)]
    return MarketSentiment(
        home_appreciation=appreciation,
        investment_return=returns[InvestmentStyle(style)],
        inflation=inflation,
    )
