from dataclasses import dataclass, field
from datetime import date
from decimal import Decimal

from fintrack.models.common import Unbounded


@dataclass(frozen=True)
class LoanDetails:
    principal: Decimal
    annual_rate: Decimal  # Percent, e.g. Decimal("5.5")
    monthly_payment: Decimal
    start_date: date


@dataclass(frozen=True)
class MonthlyPaymentBreakdown:
    month: int  # 1-indexed from the loan start
    date: date
    payment: Decimal
    principal: Decimal
    interest: Decimal
    remaining_balance: Decimal


@dataclass(frozen=True)
class LoanCalculationResult:
    remaining_balance: Decimal
    total_interest_paid: Decimal
    months_remaining: int | Unbounded
    payoff_date: date | None  # None when the loan never pays off
    monthly_breakdown: tuple[MonthlyPaymentBreakdown, ...] = field(default_factory=tuple)

    @property
    def is_unbounded(self) -> bool:
        return self.months_remaining is Unbounded.UNBOUNDED


@dataclass(frozen=True)
class LoanProjectionResult:
    total_interest: Decimal
    total_payments: Decimal  # Actual cash paid: principal + interest
    months_to_payoff: int | Unbounded
    payoff_date: date | None


@dataclass(frozen=True)
class AmortizationRow:
    month: int
    date: date
    payment: Decimal
    principal: Decimal
    interest: Decimal
    balance: Decimal
