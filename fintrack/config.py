from decimal import Decimal

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    model_config = {"env_file": ".env", "env_file_encoding": "utf-8", "env_prefix": "FINTRACK_"}

    # App
    debug: bool = False
    log_level: str = "INFO"

    # Debt-to-income policy (percent of gross monthly income)
    max_debt_to_income: Decimal = Decimal("36")  # Standard DTI ceiling
    low_risk_debt_to_income: Decimal = Decimal("20")

    # Budget health (50/30/20 rule variation)
    healthy_savings_rate: Decimal = Decimal("20")
    max_expense_ratio: Decimal = Decimal("70")

    # Budget alerts (utilization percent)
    budget_warning_threshold: Decimal = Decimal("80")
    budget_danger_threshold: Decimal = Decimal("100")

    # Emergency fund: 3-6 months of expenses is the usual range
    emergency_fund_months: int = 6


settings = Settings()
