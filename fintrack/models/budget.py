from dataclasses import dataclass, field
from datetime import date
from decimal import Decimal


@dataclass(frozen=True)
class BudgetLimit:
    category: str
    limit: Decimal  # Monthly


@dataclass(frozen=True)
class Expense:
    category: str
    amount: Decimal
    date: date


@dataclass(frozen=True)
class CategoryBudgetAnalysis:
    category: str
    budgeted: Decimal
    spent: Decimal
    remaining: Decimal  # Negative when over budget
    utilization_percentage: Decimal
    is_over_budget: bool


@dataclass(frozen=True)
class BudgetAnalysis:
    total_budget: Decimal
    total_spent: Decimal
    remaining_budget: Decimal
    utilization_percentage: Decimal
    is_over_budget: bool
    projected_monthly_spending: Decimal
    # Keyed by category, in the order the budgets were given
    category_breakdown: dict[str, CategoryBudgetAnalysis] = field(default_factory=dict)

    @property
    def over_budget_categories(self) -> list[str]:
        return [c.category for c in self.category_breakdown.values() if c.is_over_budget]
