"""Month arithmetic shared by the calculators."""

import calendar
import math
from datetime import date
from decimal import Decimal

from fintrack.engine.validation import InvalidInputError

# Average Gregorian month length; an approximation, not calendar-exact.
DAYS_PER_MONTH = Decimal("30.44")


def add_months(dt: date, months: int) -> date:
    """Return ``dt`` shifted by a number of calendar months.

    The day is clamped to the end of the target month (Jan 31 + 1 -> Feb 28/29).
    """
    year = dt.year + (dt.month - 1 + months) // 12
    month = (dt.month - 1 + months) % 12 + 1
    day = min(dt.day, calendar.monthrange(year, month)[1])
    return date(year, month, day)


def whole_months_elapsed(start: date, end: date) -> int:
    """Completed average-length months from start to end; never negative."""
    days = (end - start).days
    if days <= 0:
        return 0
    return math.floor(Decimal(days) / DAYS_PER_MONTH)


def months_until(start: date, end: date) -> int:
    """Average-length months from start to end, rounded up.

    Zero or negative when ``end`` is on or before ``start``.
    """
    return math.ceil(Decimal((end - start).days) / DAYS_PER_MONTH)


def parse_year_month(key: str) -> tuple[int, int]:
    """Parse a ``YYYY-MM`` key into (year, month)."""
    try:
        year_str, month_str = key.split("-")
        year, month = int(year_str), int(month_str)
    except (AttributeError, ValueError) as exc:
        raise InvalidInputError(f"Invalid year-month key: {key!r}") from exc
    if not 1 <= month <= 12:
        raise InvalidInputError(f"Invalid year-month key: {key!r}")
    return year, month


def days_in_month(year: int, month: int) -> int:
    return calendar.monthrange(year, month)[1]
