from pydantic import BaseModel, ConfigDict


class MonthlyCashFlow(BaseModel):
    """Snapshot of both paths for a single simulated month."""
    model_config = ConfigDict(frozen=True)

    month: int
    year: int
    income: float

    # Rent path
    rent_payment: float          # rent charged this month, before the month's inflation step
    rent_insurance: float
    rent_total_outflow: float
    rent_invested: float
    rent_portfolio_value: float

    # Buy path
    mortgage_payment: float
    interest_payment: float
    principal_payment: float
    property_tax: float
    maintenance: float
    buy_total_outflow: float
    home_value: float
    remaining_loan: float
    home_equity: float
    selling_costs: float
    buy_invested: float
    buy_portfolio_value: float

    net_worth_rent: float
    net_worth_buy: float

    @property
    def spread(self) -> float:
        """Buy net worth minus rent net worth."""
        return self.net_worth_buy - self.net_worth_rent
