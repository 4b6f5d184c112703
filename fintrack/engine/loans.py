"""Loan amortization: balance as of a date, payoff horizon, schedules.

Pure functions: Decimal in, dataclass out. No I/O.

A loan whose payment never covers the interest accrued on its balance has no
payoff date. Every function here reports that as ``Unbounded.UNBOUNDED``
instead of a capped month count.
"""

import logging
import math
from datetime import date
from decimal import Decimal, ROUND_HALF_UP

from fintrack.engine.dates import add_months, whole_months_elapsed
from fintrack.engine.validation import (
    require_finite,
    require_non_negative,
    require_positive_int,
)
from fintrack.models.common import UNBOUNDED, Unbounded
from fintrack.models.loan import (
    AmortizationRow,
    LoanCalculationResult,
    LoanDetails,
    LoanProjectionResult,
    MonthlyPaymentBreakdown,
)

logger = logging.getLogger(__name__)

TWO_PLACES = Decimal("0.01")
HUNDRED = Decimal("100")
HALF_CENT = Decimal("0.005")

# Safety bound on month-by-month simulation (50 years), not a business rule.
# Loans that need longer are counted with the closed-form formula instead.
MAX_AMORTIZATION_MONTHS = 600


def _monthly_rate(annual_rate: Decimal) -> Decimal:
    return annual_rate / HUNDRED / 12


def _cents(amount: Decimal) -> Decimal:
    return amount.quantize(TWO_PLACES, ROUND_HALF_UP)


def calculate_minimum_payment(principal: Decimal, annual_rate: Decimal, term_months: int) -> Decimal:
    """Fixed monthly payment that retires the loan in ``term_months``.

    A zero rate falls back to straight division, unrounded.
    """
    principal = require_finite("principal", principal)
    annual_rate = require_non_negative("annual_rate", annual_rate)
    term_months = require_positive_int("term_months", term_months)

    r = _monthly_rate(annual_rate)
    if r == 0:
        return principal / term_months

    # M = P * [r(1+r)^n] / [(1+r)^n - 1]
    factor = (1 + r) ** term_months
    payment = principal * (r * factor) / (factor - 1)
    return payment.quantize(TWO_PLACES, ROUND_HALF_UP)


def _closed_form_payoff(
    balance: Decimal, rate: Decimal, payment: Decimal
) -> tuple[int | Unbounded, Decimal]:
    """Months and interest to retire ``balance`` without simulating each month.

    n = -ln(1 - rB/M) / ln(1 + r), then nudged so that the n-th payment is
    the first one to clear the balance.
    """
    if rate == 0:
        if payment <= 0:
            return UNBOUNDED, Decimal("0")
        return math.ceil(balance / payment), Decimal("0")
    if payment <= balance * rate:
        return UNBOUNDED, Decimal("0")

    growth = 1 + rate

    def balance_after(k: int) -> Decimal:
        factor = growth ** k
        return balance * factor - payment * (factor - 1) / rate

    n = math.ceil(-math.log(1 - float(rate * balance / payment)) / math.log1p(float(rate)))
    n = max(n, 1)
    while n > 1 and balance_after(n - 1) <= HALF_CENT:
        n -= 1
    while balance_after(n) > HALF_CENT:
        n += 1

    final_payment = balance_after(n - 1) * growth
    total_paid = payment * (n - 1) + final_payment
    return n, total_paid - balance


def _simulate_payoff(
    balance: Decimal, rate: Decimal, payment: Decimal
) -> tuple[int | Unbounded, Decimal]:
    """Months and total interest until ``balance`` reaches zero."""
    months = 0
    total_interest = Decimal("0")

    while balance > 0:
        if months >= MAX_AMORTIZATION_MONTHS:
            logger.debug(
                "Payoff exceeds %d simulated months, counting the rest in closed form",
                MAX_AMORTIZATION_MONTHS,
            )
            extra_months, extra_interest = _closed_form_payoff(balance, rate, payment)
            if extra_months is UNBOUNDED:
                return UNBOUNDED, total_interest
            return months + extra_months, total_interest + extra_interest

        interest = balance * rate
        principal_paid = min(payment - interest, balance)
        if principal_paid <= 0:
            logger.debug(
                "Payment %s does not cover interest %s on balance %s, loan never pays off",
                payment, interest, balance,
            )
            return UNBOUNDED, total_interest

        balance -= principal_paid
        total_interest += interest
        months += 1

    return months, total_interest


def calculate_loan_details(loan: LoanDetails, as_of: date | None = None) -> LoanCalculationResult:
    """Replay a loan from its start to ``as_of`` and estimate the payoff.

    Months elapsed use a 30.44-day average month. Each elapsed month
    contributes one breakdown row. The payoff horizon is counted from the
    as-of balance.
    """
    as_of = as_of or date.today()
    payment = require_finite("monthly_payment", loan.monthly_payment)
    balance = require_finite("principal", loan.principal)
    rate = _monthly_rate(require_non_negative("annual_rate", loan.annual_rate))

    months_elapsed = whole_months_elapsed(loan.start_date, as_of)

    total_interest = Decimal("0")
    breakdown: list[MonthlyPaymentBreakdown] = []

    for month in range(1, months_elapsed + 1):
        if balance <= 0:
            break
        interest = balance * rate
        principal_paid = min(payment - interest, balance)

        balance -= principal_paid
        total_interest += interest

        breakdown.append(MonthlyPaymentBreakdown(
            month=month,
            date=add_months(loan.start_date, month - 1),
            # Final payment only covers what is left
            payment=_cents(interest + principal_paid),
            principal=_cents(principal_paid),
            interest=_cents(interest),
            remaining_balance=_cents(max(Decimal("0"), balance)),
        ))

    months_remaining, _ = _simulate_payoff(balance, rate, payment)
    if months_remaining is UNBOUNDED:
        payoff_date = None
    else:
        payoff_date = add_months(as_of, months_remaining)

    return LoanCalculationResult(
        remaining_balance=_cents(max(Decimal("0"), balance)),
        total_interest_paid=_cents(total_interest),
        months_remaining=months_remaining,
        payoff_date=payoff_date,
        monthly_breakdown=tuple(breakdown),
    )


def calculate_loan_projection(
    principal: Decimal,
    monthly_payment: Decimal,
    annual_rate: Decimal,
    start_date: date,
) -> LoanProjectionResult:
    """Total cost and payoff date of a loan from its start.

    A payment that never covers interest short-circuits to zero totals and an
    unbounded payoff horizon.
    """
    principal = require_finite("principal", principal)
    monthly_payment = require_finite("monthly_payment", monthly_payment)
    rate = _monthly_rate(require_non_negative("annual_rate", annual_rate))

    if principal <= 0:
        return LoanProjectionResult(
            total_interest=Decimal("0"),
            total_payments=Decimal("0"),
            months_to_payoff=0,
            payoff_date=None,
        )

    months, interest = _simulate_payoff(principal, rate, monthly_payment)
    if months is UNBOUNDED:
        return LoanProjectionResult(
            total_interest=Decimal("0"),
            total_payments=Decimal("0"),
            months_to_payoff=UNBOUNDED,
            payoff_date=None,
        )

    return LoanProjectionResult(
        total_interest=_cents(interest),
        total_payments=_cents(principal + interest),
        months_to_payoff=months,
        payoff_date=add_months(start_date, months),
    )


def calculate_amortization_schedule(
    principal: Decimal,
    monthly_payment: Decimal,
    annual_rate: Decimal,
    start_date: date,
    max_months: int = 12,
) -> list[AmortizationRow]:
    """The next ``max_months`` payments, rounded to cents.

    Stops early once the loan is paid off or the payment no longer covers
    interest.
    """
    balance = require_finite("principal", principal)
    monthly_payment = require_finite("monthly_payment", monthly_payment)
    rate = _monthly_rate(require_non_negative("annual_rate", annual_rate))
    max_months = min(require_positive_int("max_months", max_months), MAX_AMORTIZATION_MONTHS)

    rows: list[AmortizationRow] = []
    for month in range(1, max_months + 1):
        if balance <= 0:
            break
        interest = balance * rate
        principal_paid = min(monthly_payment - interest, balance)
        if principal_paid <= 0:
            break

        balance -= principal_paid
        rows.append(AmortizationRow(
            month=month,
            date=add_months(start_date, month - 1),
            payment=_cents(interest + principal_paid),
            principal=_cents(principal_paid),
            interest=_cents(interest),
            balance=_cents(max(Decimal("0"), balance)),
        ))

    return rows
