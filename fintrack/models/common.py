"""Shared sentinel for horizons that never resolve."""

from enum import Enum


class Unbounded(Enum):
    """Marks a month count or amount with no finite answer.

    Used uniformly: a loan whose payment never covers interest, a savings
    goal that is never reached, a contribution spread over zero months.
    """
    UNBOUNDED = "unbounded"

    def __str__(self) -> str:
        return "never"


UNBOUNDED = Unbounded.UNBOUNDED
