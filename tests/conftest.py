"""Canonical fixtures shared across engine tests.

Every calculator takes an explicit as-of date here so results do not drift
with the calendar.
"""

import pytest
from datetime import date
from decimal import Decimal

from fintrack.models.budget import BudgetLimit, Expense
from fintrack.models.loan import LoanDetails
from fintrack.models.savings import SavingsGoalDetails


@pytest.fixture
def as_of() -> date:
    return date(2026, 1, 15)


@pytest.fixture
def amortizing_loan() -> LoanDetails:
    """1M loan at 12%, 50K/month, started 2024-01-01."""
    return LoanDetails(
        principal=Decimal("1000000"),
        annual_rate=Decimal("12"),
        monthly_payment=Decimal("50000"),
        start_date=date(2024, 1, 1),
    )


@pytest.fixture
def interest_only_loan() -> LoanDetails:
    """Payment exactly equals first month's interest: never amortizes."""
    return LoanDetails(
        principal=Decimal("120000"),
        annual_rate=Decimal("12"),
        monthly_payment=Decimal("1200"),
        start_date=date(2024, 1, 1),
    )


@pytest.fixture
def emergency_goal() -> SavingsGoalDetails:
    """1M goal, 100K saved, 50K/month at 6%, due in three years."""
    return SavingsGoalDetails(
        target_amount=Decimal("1000000"),
        current_amount=Decimal("100000"),
        monthly_contribution=Decimal("50000"),
        target_date=date(2029, 1, 15),
        interest_rate=Decimal("6"),
    )


@pytest.fixture
def household_budgets() -> list[BudgetLimit]:
    return [
        BudgetLimit(category="food", limit=Decimal("100000")),
        BudgetLimit(category="transport", limit=Decimal("50000")),
        BudgetLimit(category="rent", limit=Decimal("200000")),
    ]


@pytest.fixture
def june_expenses() -> list[Expense]:
    return [
        Expense(category="food", amount=Decimal("80000"), date=date(2024, 6, 15)),
        Expense(category="transport", amount=Decimal("60000"), date=date(2024, 6, 10)),
        Expense(category="rent", amount=Decimal("200000"), date=date(2024, 6, 1)),
    ]
