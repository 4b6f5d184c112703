"""Boundary checks for engine inputs.

Expected edge cases (zero income, unpayable loans, passed deadlines) are not
errors and never reach this module. Only malformed values raise.
"""

from decimal import Decimal


class InvalidInputError(ValueError):
    """Raised when an engine function receives a malformed value."""


def require_finite(name: str, value: Decimal | int) -> Decimal:
    """Coerce to Decimal and reject NaN and infinities."""
    if isinstance(value, float):
        value = Decimal(str(value))
    elif not isinstance(value, Decimal):
        value = Decimal(value)
    if not value.is_finite():
        raise InvalidInputError(f"{name} must be a finite number, got {value}")
    return value


def require_non_negative(name: str, value: Decimal | int) -> Decimal:
    value = require_finite(name, value)
    if value < 0:
        raise InvalidInputError(f"{name} must not be negative, got {value}")
    return value


def require_positive_int(name: str, value: int) -> int:
    if isinstance(value, bool) or not isinstance(value, int):
        raise InvalidInputError(f"{name} must be an integer, got {value!r}")
    if value <= 0:
        raise InvalidInputError(f"{name} must be positive, got {value}")
    return value
