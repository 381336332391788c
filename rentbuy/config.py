from pydantic_settings import BaseSettings

from rentbuy.models.options import EngineOptions, LegacyDebtPolicy


class Settings(BaseSettings):
    LOG_LEVEL: str = "INFO"
    LEGACY_DEBT_POLICY: LegacyDebtPolicy = LegacyDebtPolicy.exclude
    DEBT_PENALTY_RATE: float = 10.0
    DEFAULT_SELLING_COST_PCT: float = 6.0
    DEFAULT_LIVING_EXPENSES: float = 1500.0
    TEMPORARY_SHOCK_MONTHS: int = 60

    model_config = {"env_prefix": "RENTBUY_", "env_file": ".env", "env_file_encoding": "utf-8",
                    "extra": "ignore"}

    def engine_options(self) -> EngineOptions:
        """Snapshot the engine-relevant settings as an immutable value."""
        return EngineOptions(
            legacy_debt_policy=self.LEGACY_DEBT_POLICY,
            debt_penalty_rate=self.DEBT_PENALTY_RATE,
            default_selling_cost_pct=self.DEFAULT_SELLING_COST_PCT,
            temporary_shock_months=self.TEMPORARY_SHOCK_MONTHS,
        )


settings = Settings()
