from datetime import date

import pytest

from fintrack.engine.dates import add_months, months_until, parse_year_month, whole_months_elapsed
from fintrack.engine.validation import InvalidInputError


class TestAddMonths:
    def test_clamps_to_month_end(self):
        assert add_months(date(2024, 1, 31), 1) == date(2024, 2, 29)
        assert add_months(date(2023, 1, 31), 1) == date(2023, 2, 28)

    def test_crosses_year(self):
        assert add_months(date(2024, 11, 15), 3) == date(2025, 2, 15)


class TestMonthCounts:
    def test_elapsed_floors(self):
        assert whole_months_elapsed(date(2024, 1, 1), date(2024, 6, 1)) == 4

    def test_elapsed_never_negative(self):
        assert whole_months_elapsed(date(2024, 6, 1), date(2024, 1, 1)) == 0

    def test_until_rounds_up(self):
        assert months_until(date(2026, 1, 15), date(2026, 2, 1)) == 1

    def test_until_past_is_negative(self):
        assert months_until(date(2026, 1, 15), date(2025, 1, 15)) < 0

    def test_until_same_day(self):
        assert months_until(date(2026, 1, 15), date(2026, 1, 15)) == 0


class TestParseYearMonth:
    def test_valid(self):
        assert parse_year_month("2024-06") == (2024, 6)

    def test_invalid(self):
        for key in ("2024", "2024-00", "2024-06-01", "abc-de"):
            with pytest.raises(InvalidInputError):
                parse_year_month(key)
