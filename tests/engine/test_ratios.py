from decimal import Decimal

import pytest

from fintrack.engine.ratios import (
    calculate_compound_interest,
    calculate_debt_to_income_ratio,
    calculate_emergency_fund_target,
    calculate_percentage_change,
)
from fintrack.engine.validation import InvalidInputError


class TestCompoundInterest:
    def test_two_years_monthly(self):
        """100K at 6% for 2 years beats simple interest of 12K."""
        interest = calculate_compound_interest(Decimal("100000"), Decimal("6"), 2)
        assert Decimal("12000") < interest < Decimal("13000")
        assert abs(interest - Decimal("12715.98")) <= Decimal("0.01")

    def test_half_year(self):
        interest = calculate_compound_interest(Decimal("1000"), Decimal("12"), Decimal("0.5"))
        assert interest == Decimal("61.52")

    def test_annual_compounding(self):
        interest = calculate_compound_interest(Decimal("1000"), Decimal("10"), 2, frequency=1)
        assert interest == Decimal("210.00")

    def test_zero_rate(self):
        assert calculate_compound_interest(Decimal("1000"), Decimal("0"), 5) == 0

    def test_rejects_zero_frequency(self):
        with pytest.raises(InvalidInputError):
            calculate_compound_interest(Decimal("1000"), Decimal("5"), 1, frequency=0)

    def test_rejects_negative_rate(self):
        with pytest.raises(InvalidInputError, match="rate"):
            calculate_compound_interest(Decimal("1000"), Decimal("-5"), 2)


class TestDebtToIncome:
    def test_basic(self):
        assert calculate_debt_to_income_ratio(Decimal("150000"), Decimal("500000")) == 30

    def test_zero_income(self):
        assert calculate_debt_to_income_ratio(Decimal("150000"), Decimal("0")) == 0
        assert calculate_debt_to_income_ratio(Decimal("0"), Decimal("0")) == 0

    def test_negative_income(self):
        assert calculate_debt_to_income_ratio(Decimal("150000"), Decimal("-10")) == 0

    def test_rounded_to_two_places(self):
        ratio = calculate_debt_to_income_ratio(Decimal("1"), Decimal("3"))
        assert ratio == Decimal("33.33")

    def test_rejects_nan(self):
        with pytest.raises(InvalidInputError):
            calculate_debt_to_income_ratio(Decimal("NaN"), Decimal("100"))


class TestEmergencyFund:
    def test_six_months(self):
        assert calculate_emergency_fund_target(Decimal("200000")) == Decimal("1200000")

    def test_three_months(self):
        assert calculate_emergency_fund_target(Decimal("200000"), 3) == Decimal("600000")


class TestPercentageChange:
    def test_increase(self):
        assert calculate_percentage_change(Decimal("100"), Decimal("150")) == 50

    def test_decrease(self):
        assert calculate_percentage_change(Decimal("200"), Decimal("150")) == -25

    def test_from_zero(self):
        assert calculate_percentage_change(Decimal("0"), Decimal("100")) == 100

    def test_to_zero(self):
        assert calculate_percentage_change(Decimal("100"), Decimal("0")) == -100

    def test_zero_to_zero(self):
        assert calculate_percentage_change(Decimal("0"), Decimal("0")) == 0

    def test_zero_to_negative(self):
        assert calculate_percentage_change(Decimal("0"), Decimal("-50")) == 0
