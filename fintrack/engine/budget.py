"""Monthly budget utilization: per-category and overall.

Pure functions. No I/O.
"""

from collections.abc import Iterable
from datetime import date
from decimal import Decimal, ROUND_HALF_UP

from fintrack.engine.dates import days_in_month, parse_year_month
from fintrack.engine.validation import InvalidInputError, require_finite
from fintrack.models.budget import BudgetAnalysis, BudgetLimit, CategoryBudgetAnalysis, Expense

TWO_PLACES = Decimal("0.01")
HUNDRED = Decimal("100")


def utilization(spent: Decimal, limit: Decimal) -> Decimal:
    """Spent as a percent of limit; 0 when there is no limit."""
    if limit <= 0:
        return Decimal("0")
    return (spent / limit * HUNDRED).quantize(TWO_PLACES, ROUND_HALF_UP)


def analyze_budget(
    budgets: Iterable[BudgetLimit],
    expenses: Iterable[Expense],
    month: str,
    today: date | None = None,
) -> BudgetAnalysis:
    """Compare one month of expenses against category budgets.

    Args:
        budgets: One limit per category
        expenses: Any dates; only those inside ``month`` count
        month: "YYYY-MM"
        today: Used to pace the current month (defaults to date.today())

    Expenses in categories with no budget are ignored entirely.
    """
    year, month_num = parse_year_month(month)
    today = today or date.today()

    spent_by_category: dict[str, Decimal] = {}
    for expense in expenses:
        if expense.date.year == year and expense.date.month == month_num:
            amount = require_finite("expense amount", expense.amount)
            spent_by_category[expense.category] = (
                spent_by_category.get(expense.category, Decimal("0")) + amount
            )

    breakdown: dict[str, CategoryBudgetAnalysis] = {}
    total_budget = Decimal("0")
    total_spent = Decimal("0")

    for budget in budgets:
        if budget.category in breakdown:
            raise InvalidInputError(f"Duplicate budget category: {budget.category!r}")
        limit = require_finite("budget limit", budget.limit)
        spent = spent_by_category.get(budget.category, Decimal("0"))

        breakdown[budget.category] = CategoryBudgetAnalysis(
            category=budget.category,
            budgeted=limit,
            spent=spent,
            remaining=limit - spent,
            utilization_percentage=utilization(spent, limit),
            is_over_budget=spent > limit,
        )
        total_budget += limit
        total_spent += spent

    # Pace the current month; past and future months are taken as complete
    month_length = days_in_month(year, month_num)
    if today.year == year and today.month == month_num:
        days_elapsed = today.day
    else:
        days_elapsed = month_length
    projected = (total_spent * month_length / days_elapsed).quantize(TWO_PLACES, ROUND_HALF_UP)

    return BudgetAnalysis(
        total_budget=total_budget,
        total_spent=total_spent,
        remaining_budget=total_budget - total_spent,
        utilization_percentage=utilization(total_spent, total_budget),
        is_over_budget=total_spent > total_budget,
        projected_monthly_spending=projected,
        category_breakdown=breakdown,
    )
