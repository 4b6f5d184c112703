from datetime import date
from decimal import Decimal

from fintrack.engine.alerts import generate_budget_alerts
from fintrack.engine.budget import analyze_budget
from fintrack.models.budget import BudgetLimit, Expense
from fintrack.models.health import AlertLevel


def _analysis():
    budgets = [
        BudgetLimit(category="food", limit=Decimal("50000")),
        BudgetLimit(category="transport", limit=Decimal("100000")),
        BudgetLimit(category="rent", limit=Decimal("200000")),
    ]
    expenses = [
        Expense(category="food", amount=Decimal("60000"), date=date(2024, 6, 3)),
        Expense(category="transport", amount=Decimal("85000"), date=date(2024, 6, 9)),
        Expense(category="rent", amount=Decimal("100000"), date=date(2024, 6, 1)),
    ]
    return analyze_budget(budgets, expenses, "2024-06", today=date(2026, 1, 15))


class TestBudgetAlerts:
    def test_default_thresholds(self):
        alerts = generate_budget_alerts(_analysis(), "2024-06")
        by_category = {a.category: a for a in alerts}
        assert set(by_category) == {"food", "transport"}

        food = by_category["food"]
        assert food.level is AlertLevel.DANGER
        assert food.amount == Decimal("10000")
        assert food.percentage == 120
        assert food.month == "2024-06"

        transport = by_category["transport"]
        assert transport.level is AlertLevel.WARNING
        assert transport.amount == Decimal("15000")

    def test_custom_warning_threshold(self):
        alerts = generate_budget_alerts(_analysis(), "2024-06", warning_threshold=Decimal("50"))
        assert {a.category for a in alerts} == {"food", "transport", "rent"}

    def test_exactly_at_limit_is_warning(self):
        analysis = analyze_budget(
            [BudgetLimit(category="food", limit=Decimal("100"))],
            [Expense(category="food", amount=Decimal("100"), date=date(2024, 6, 3))],
            "2024-06",
            today=date(2026, 1, 15),
        )
        alerts = generate_budget_alerts(analysis, "2024-06")
        assert [a.level for a in alerts] == [AlertLevel.WARNING]

    def test_overspend_hidden_by_rounding_is_danger(self):
        analysis = analyze_budget(
            [BudgetLimit(category="rent", limit=Decimal("1000000.00"))],
            [Expense(category="rent", amount=Decimal("1000000.04"), date=date(2024, 6, 1))],
            "2024-06",
            today=date(2026, 1, 15),
        )
        assert analysis.category_breakdown["rent"].utilization_percentage == Decimal("100.00")

        alerts = generate_budget_alerts(analysis, "2024-06")
        assert len(alerts) == 1
        assert alerts[0].level is AlertLevel.DANGER
        assert alerts[0].amount == Decimal("0.04")

    def test_just_under_warning_threshold(self):
        analysis = analyze_budget(
            [BudgetLimit(category="food", limit=Decimal("1000000.00"))],
            [Expense(category="food", amount=Decimal("799999.96"), date=date(2024, 6, 3))],
            "2024-06",
            today=date(2026, 1, 15),
        )
        assert analysis.category_breakdown["food"].utilization_percentage == Decimal("80.00")
        assert generate_budget_alerts(analysis, "2024-06") == []
