from dataclasses import dataclass, field
from datetime import date
from decimal import Decimal

from fintrack.models.common import Unbounded


@dataclass(frozen=True)
class SavingsGoalDetails:
    target_amount: Decimal
    current_amount: Decimal
    monthly_contribution: Decimal
    target_date: date
    interest_rate: Decimal | None = None  # Annual percent, compounded monthly


@dataclass(frozen=True)
class MonthlySavingsProjection:
    month: int
    date: date
    contribution: Decimal
    interest_earned: Decimal
    total_amount: Decimal


@dataclass(frozen=True)
class SavingsProjectionResult:
    months_to_goal: int | Unbounded
    projected_completion_date: date | None  # None when unreachable
    total_contributions: Decimal
    interest_earned: Decimal
    is_achievable: bool
    required_monthly_contribution: Decimal
    monthly_projections: tuple[MonthlySavingsProjection, ...] = field(default_factory=tuple)

    @property
    def is_reachable(self) -> bool:
        return self.months_to_goal is not Unbounded.UNBOUNDED
