"""Unit tests for month arithmetic and forbidden days"""

import pytest
from datetime import date

from src.domain.pay_period import (
    add_months,
    first_day_of_next_month,
    skip_forbidden_day,
    subtract_months,
)


@pytest.mark.parametrize(
    "base, months, expected",
    [
        (date(2024, 5, 10), 1, date(2024, 6, 10)),
        (date(2024, 11, 15), 2, date(2025, 1, 15)),
        (date(2024, 1, 31), 1, date(2024, 2, 29)),
        (date(2023, 1, 31), 1, date(2023, 2, 28)),
        (date(2024, 3, 31), -1, date(2024, 2, 29)),
        (date(2024, 1, 10), -1, date(2023, 12, 10)),
        (date(2024, 5, 10), 0, date(2024, 5, 10)),
    ],
)
def test_add_months(base, months, expected):
    assert add_months(base, months) == expected


def test_subtract_months_is_negative_add():
    assert subtract_months(date(2024, 7, 10), 2) == date(2024, 5, 10)


def test_first_day_of_next_month_rolls_year():
    assert first_day_of_next_month(date(2024, 12, 31)) == date(2025, 1, 1)


class TestSkipForbiddenDay:

    def test_allowed_day_is_kept(self):
        assert skip_forbidden_day(date(2024, 5, 28), {29, 30, 31}) == date(2024, 5, 28)

    def test_forbidden_day_moves_to_first(self):
        assert skip_forbidden_day(date(2024, 1, 29), {29, 30, 31}) == date(2024, 2, 1)

    def test_empty_forbidden_set(self):
        assert skip_forbidden_day(date(2024, 5, 31), []) == date(2024, 5, 31)
