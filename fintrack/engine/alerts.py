"""Budget alert classification.

Turns a BudgetAnalysis into warning/danger alerts per category. Message text
and delivery belong to the caller.
"""

from decimal import Decimal

from fintrack.config import settings
from fintrack.engine.budget import HUNDRED
from fintrack.models.budget import BudgetAnalysis
from fintrack.models.health import AlertLevel, BudgetAlert


def generate_budget_alerts(
    analysis: BudgetAnalysis,
    month: str,
    warning_threshold: Decimal | None = None,
    danger_threshold: Decimal | None = None,
) -> list[BudgetAlert]:
    """One alert per category at or past the warning threshold.

    DANGER:  utilization above the danger threshold (default 100%)
    WARNING: utilization at or above the warning threshold (default 80%)
    """
    warning = warning_threshold if warning_threshold is not None else settings.budget_warning_threshold
    danger = danger_threshold if danger_threshold is not None else settings.budget_danger_threshold

    alerts: list[BudgetAlert] = []
    for category in analysis.category_breakdown.values():
        pct = category.utilization_percentage
        # Thresholds compare against the unrounded ratio
        if category.budgeted > 0:
            exact = category.spent / category.budgeted * HUNDRED
        else:
            exact = Decimal("0")
        if exact > danger:
            alerts.append(BudgetAlert(
                category=category.category,
                level=AlertLevel.DANGER,
                amount=abs(category.remaining),
                percentage=pct,
                month=month,
            ))
        elif exact >= warning:
            alerts.append(BudgetAlert(
                category=category.category,
                level=AlertLevel.WARNING,
                amount=category.remaining,
                percentage=pct,
                month=month,
            ))
    return alerts
