from dataclasses import dataclass
from decimal import Decimal
from enum import Enum

from fintrack.models.common import Unbounded


class RiskLevel(Enum):
    LOW = "low"
    MODERATE = "moderate"
    HIGH = "high"


class AlertLevel(Enum):
    WARNING = "warning"
    DANGER = "danger"


@dataclass(frozen=True)
class BudgetRecommendations:
    increase_savings: bool
    reduce_expenses: bool
    emergency_fund: Decimal


@dataclass(frozen=True)
class BudgetHealth:
    savings_rate: Decimal  # Percent of income
    expense_ratio: Decimal  # Percent of income
    remaining_income: Decimal
    is_healthy: bool
    recommendations: BudgetRecommendations


@dataclass(frozen=True)
class LoanAffordability:
    debt_to_income_ratio: Decimal
    is_affordable: bool
    max_affordable_payment: Decimal
    risk_level: RiskLevel


@dataclass(frozen=True)
class SavingsGoalProgress:
    progress_percentage: Decimal
    remaining_amount: Decimal
    months_to_deadline: int
    required_monthly_contribution: Decimal
    current_contribution_sufficient: bool
    projected_completion_months: int | Unbounded
    on_track: bool


@dataclass(frozen=True)
class BudgetAlert:
    category: str
    level: AlertLevel
    amount: Decimal  # Overspend for DANGER, headroom left for WARNING
    percentage: Decimal
    month: str
