"""Closed-form ratio utilities: compound interest, DTI, emergency fund, % change.

Pure functions: Decimal in, Decimal out. No I/O.
"""

from decimal import Decimal, ROUND_HALF_UP

from fintrack.engine.validation import InvalidInputError, require_finite, require_non_negative

TWO_PLACES = Decimal("0.01")
HUNDRED = Decimal("100")


def calculate_compound_interest(
    principal: Decimal,
    rate: Decimal,
    time: Decimal | int,
    frequency: int = 12,
) -> Decimal:
    """Interest earned (not the final amount) on a compounding balance.

    Args:
        principal: Starting balance
        rate: Annual rate as percent (6 for 6%)
        time: Years, may be fractional
        frequency: Compounding periods per year
    """
    principal = require_finite("principal", principal)
    rate = require_non_negative("rate", rate)
    time = require_finite("time", time)
    if frequency <= 0:
        raise InvalidInputError(f"frequency must be positive, got {frequency}")

    # A = P * (1 + r/n)^(n*t)
    periods = frequency * time
    growth = 1 + rate / HUNDRED / frequency
    if periods == periods.to_integral_value():
        amount = principal * growth ** int(periods)
    else:
        amount = principal * growth ** periods
    return (amount - principal).quantize(TWO_PLACES, ROUND_HALF_UP)


def calculate_debt_to_income_ratio(monthly_debt: Decimal, monthly_income: Decimal) -> Decimal:
    """Monthly debt payments as a percent of monthly income.

    Zero income yields 0 rather than a division error.
    """
    monthly_debt = require_finite("monthly_debt", monthly_debt)
    monthly_income = require_finite("monthly_income", monthly_income)
    if monthly_income <= 0:
        return Decimal("0")
    return (monthly_debt / monthly_income * HUNDRED).quantize(TWO_PLACES, ROUND_HALF_UP)


def calculate_emergency_fund_target(monthly_expenses: Decimal, months: int = 6) -> Decimal:
    return require_finite("monthly_expenses", monthly_expenses) * months


def calculate_percentage_change(old_value: Decimal, new_value: Decimal) -> Decimal:
    """Percent change from old to new, 2 places.

    From a zero base: any increase counts as 100%, anything else as 0%.
    """
    old_value = require_finite("old_value", old_value)
    new_value = require_finite("new_value", new_value)
    if old_value == 0:
        return HUNDRED if new_value > 0 else Decimal("0")
    return ((new_value - old_value) / old_value * HUNDRED).quantize(TWO_PLACES, ROUND_HALF_UP)
