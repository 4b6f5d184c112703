"""Savings-goal projection: months to goal, achievability, required contribution.

Pure functions. No I/O.
"""

import logging
from datetime import date
from decimal import Decimal, ROUND_HALF_UP

from fintrack.engine.dates import add_months, months_until
from fintrack.engine.validation import InvalidInputError, require_finite, require_non_negative
from fintrack.models.common import UNBOUNDED, Unbounded
from fintrack.models.savings import (
    MonthlySavingsProjection,
    SavingsGoalDetails,
    SavingsProjectionResult,
)

logger = logging.getLogger(__name__)

TWO_PLACES = Decimal("0.01")
HUNDRED = Decimal("100")

# Safety bound on the simulated horizon (50 years), not a business rule.
MAX_PROJECTION_MONTHS = 600
# Months simulated past the goal month for display smoothing
GOAL_GRACE_MONTHS = 12
# Cap on returned projection rows
MAX_DISPLAYED_PROJECTIONS = 60


def calculate_required_savings_contribution(
    remaining: Decimal,
    months: int,
    annual_rate: Decimal = Decimal("0"),
) -> Decimal | Unbounded:
    """Monthly deposit that grows to ``remaining`` in ``months``.

    Future value of an ordinary annuity solved for the payment:
        PMT = FV / [((1 + r)^n - 1) / r]

    No months left means no finite deposit can do it: returns UNBOUNDED.
    """
    remaining = require_finite("remaining", remaining)
    annual_rate = require_non_negative("annual_rate", annual_rate)
    if isinstance(months, bool) or not isinstance(months, int):
        raise InvalidInputError(f"months must be an integer, got {months!r}")

    if months <= 0:
        return UNBOUNDED

    r = annual_rate / HUNDRED / 12
    if r == 0:
        return (remaining / months).quantize(TWO_PLACES, ROUND_HALF_UP)

    contribution = remaining / (((1 + r) ** months - 1) / r)
    return contribution.quantize(TWO_PLACES, ROUND_HALF_UP)


def calculate_savings_projection(
    goal: SavingsGoalDetails,
    as_of: date | None = None,
) -> SavingsProjectionResult:
    """Project a savings goal month by month from ``as_of``.

    Each month earns interest on the running amount, then the contribution
    is added. The goal is reached at the first month whose amount meets the
    target; a goal already met is reached at month 0.
    """
    as_of = as_of or date.today()
    target = require_finite("target_amount", goal.target_amount)
    current = require_finite("current_amount", goal.current_amount)
    contribution = require_finite("monthly_contribution", goal.monthly_contribution)
    annual_rate = require_non_negative(
        "interest_rate",
        goal.interest_rate if goal.interest_rate is not None else Decimal("0"),
    )
    rate = annual_rate / HUNDRED / 12

    # Zero or negative once the deadline has passed
    max_months_to_target = months_until(as_of, goal.target_date)

    months_to_goal: int | Unbounded = 0 if current >= target else UNBOUNDED
    completion_date = as_of if months_to_goal == 0 else None

    total_contributions = Decimal("0")
    total_interest = Decimal("0")
    goal_contributions = Decimal("0")
    goal_interest = Decimal("0")
    projections: list[MonthlySavingsProjection] = []

    amount = current
    horizon = max(max_months_to_target, MAX_PROJECTION_MONTHS)
    for month in range(1, horizon + 1):
        if months_to_goal is not UNBOUNDED and month > months_to_goal + GOAL_GRACE_MONTHS:
            break

        interest = amount * rate
        amount += contribution + interest
        total_contributions += contribution
        total_interest += interest
        projection_date = add_months(as_of, month)

        if len(projections) < MAX_DISPLAYED_PROJECTIONS:
            projections.append(MonthlySavingsProjection(
                month=month,
                date=projection_date,
                contribution=contribution,
                interest_earned=interest.quantize(TWO_PLACES, ROUND_HALF_UP),
                total_amount=amount.quantize(TWO_PLACES, ROUND_HALF_UP),
            ))

        if months_to_goal is UNBOUNDED:
            if amount >= target:
                months_to_goal = month
                completion_date = projection_date
                goal_contributions = total_contributions
                goal_interest = total_interest
            elif contribution == 0 and interest == 0 and len(projections) >= MAX_DISPLAYED_PROJECTIONS:
                # Nothing moves the balance any more
                break

    if months_to_goal is UNBOUNDED:
        logger.debug("Savings goal of %s is not reached within %d months", target, horizon)
        is_achievable = False
        goal_contributions = total_contributions
        goal_interest = total_interest
        displayed = projections
    elif months_to_goal == 0:
        is_achievable = True
        displayed = projections
    else:
        is_achievable = 0 < max_months_to_target and months_to_goal <= max_months_to_target
        displayed = projections[:months_to_goal]

    remaining = max(Decimal("0"), target - current)
    if max_months_to_target > 0:
        required = calculate_required_savings_contribution(remaining, max_months_to_target, annual_rate)
    else:
        # No months left to spread the gap over
        required = remaining

    return SavingsProjectionResult(
        months_to_goal=months_to_goal,
        projected_completion_date=completion_date,
        total_contributions=goal_contributions.quantize(TWO_PLACES, ROUND_HALF_UP),
        interest_earned=goal_interest.quantize(TWO_PLACES, ROUND_HALF_UP),
        is_achievable=is_achievable,
        required_monthly_contribution=required,
        monthly_projections=tuple(displayed[:MAX_DISPLAYED_PROJECTIONS]),
    )
