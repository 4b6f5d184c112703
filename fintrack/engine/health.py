"""Dashboard health metrics built on the ratio and savings calculators.

Thresholds come from settings so policy can move without code changes.
"""

import math
from datetime import date
from decimal import Decimal, ROUND_HALF_UP

from fintrack.config import settings
from fintrack.engine.dates import months_until
from fintrack.engine.ratios import calculate_debt_to_income_ratio, calculate_emergency_fund_target
from fintrack.engine.savings import calculate_required_savings_contribution
from fintrack.engine.validation import require_finite
from fintrack.models.common import UNBOUNDED, Unbounded
from fintrack.models.health import (
    BudgetHealth,
    BudgetRecommendations,
    LoanAffordability,
    RiskLevel,
    SavingsGoalProgress,
)

TWO_PLACES = Decimal("0.01")
HUNDRED = Decimal("100")


def _percent_of(part: Decimal, whole: Decimal) -> Decimal:
    if whole <= 0:
        return Decimal("0")
    return (part / whole * HUNDRED).quantize(TWO_PLACES, ROUND_HALF_UP)


def monthly_budget_health(income: Decimal, expenses: Decimal, savings: Decimal) -> BudgetHealth:
    """Savings rate and expense ratio against a 50/30/20-style rule."""
    income = require_finite("income", income)
    expenses = require_finite("expenses", expenses)
    savings = require_finite("savings", savings)

    savings_rate = _percent_of(savings, income)
    expense_ratio = _percent_of(expenses, income)

    return BudgetHealth(
        savings_rate=savings_rate,
        expense_ratio=expense_ratio,
        remaining_income=income - expenses - savings,
        is_healthy=(
            savings_rate >= settings.healthy_savings_rate
            and expense_ratio <= settings.max_expense_ratio
        ),
        recommendations=BudgetRecommendations(
            increase_savings=savings_rate < settings.healthy_savings_rate,
            reduce_expenses=expense_ratio > settings.max_expense_ratio,
            emergency_fund=calculate_emergency_fund_target(expenses, settings.emergency_fund_months),
        ),
    )


def loan_affordability(
    monthly_income: Decimal,
    existing_debt_payments: Decimal,
    proposed_payment: Decimal,
) -> LoanAffordability:
    """Debt-to-income check for taking on one more monthly payment.

    Risk bands:
        low:      DTI <= 20%
        moderate: DTI <= 36%
        high:     above
    """
    monthly_income = require_finite("monthly_income", monthly_income)
    existing_debt_payments = require_finite("existing_debt_payments", existing_debt_payments)
    proposed_payment = require_finite("proposed_payment", proposed_payment)

    dti = calculate_debt_to_income_ratio(existing_debt_payments + proposed_payment, monthly_income)

    if dti <= settings.low_risk_debt_to_income:
        risk = RiskLevel.LOW
    elif dti <= settings.max_debt_to_income:
        risk = RiskLevel.MODERATE
    else:
        risk = RiskLevel.HIGH

    ceiling = monthly_income * settings.max_debt_to_income / HUNDRED
    return LoanAffordability(
        debt_to_income_ratio=dti,
        is_affordable=dti <= settings.max_debt_to_income,
        max_affordable_payment=max(Decimal("0"), ceiling - existing_debt_payments).quantize(
            TWO_PLACES, ROUND_HALF_UP
        ),
        risk_level=risk,
    )


def savings_goal_progress(
    current_amount: Decimal,
    target_amount: Decimal,
    monthly_contribution: Decimal,
    target_date: date,
    as_of: date | None = None,
) -> SavingsGoalProgress:
    """Where a goal stands today, without interest.

    Projected completion is the gap over the contribution, rounded up; a
    zero contribution with a gap never completes.
    """
    as_of = as_of or date.today()
    current_amount = require_finite("current_amount", current_amount)
    target_amount = require_finite("target_amount", target_amount)
    monthly_contribution = require_finite("monthly_contribution", monthly_contribution)

    remaining = max(Decimal("0"), target_amount - current_amount)
    months_to_deadline = months_until(as_of, target_date)

    if months_to_deadline > 0:
        required = calculate_required_savings_contribution(remaining, months_to_deadline).quantize(
            TWO_PLACES, ROUND_HALF_UP
        )
    else:
        required = Decimal("0")

    projected: int | Unbounded
    if remaining == 0:
        projected = 0
    elif monthly_contribution > 0:
        projected = math.ceil(remaining / monthly_contribution)
    else:
        projected = UNBOUNDED

    return SavingsGoalProgress(
        progress_percentage=_percent_of(current_amount, target_amount),
        remaining_amount=remaining,
        months_to_deadline=months_to_deadline,
        required_monthly_contribution=required,
        current_contribution_sufficient=monthly_contribution >= required,
        projected_completion_months=projected,
        on_track=projected is not UNBOUNDED and projected <= months_to_deadline,
    )
