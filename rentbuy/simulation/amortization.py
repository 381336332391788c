"""Fixed-rate amortization."""
from __future__ import annotations


def calculate_mortgage_payment(principal: float, annual_rate_percent: float, term_years: int) -> float:
    """Level monthly payment that retires `principal` over `term_years`.

    PMT = P * r(1+r)^n / ((1+r)^n - 1), r = annual % / 100 / 12, n = years * 12.
    A zero rate pays the principal down in equal straight-line instalments.
    """
    n = term_years * 12
    if annual_rate_percent == 0:
        return principal / n
    r = annual_rate_percent / 100 / 12
    growth = (1 + r) ** n
    return principal * r * growth / (growth - 1)
