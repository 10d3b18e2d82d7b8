"""Calendar arithmetic for month-based pay periods"""

from calendar import monthrange
from datetime import date
from typing import Iterable


def add_months(base_date: date, months: int) -> date:
    """Shift a date by whole months, clamping to the last day of the month"""
    month_index = base_date.month - 1 + months
    year = base_date.year + (month_index // 12)
    month = month_index % 12 + 1
    day = min(base_date.day, monthrange(year, month)[1])
    return date(year, month, day)


def subtract_months(base_date: date, months: int) -> date:
    return add_months(base_date, -months)


def first_day_of_next_month(base_date: date) -> date:
    return add_months(base_date.replace(day=1), 1)


def skip_forbidden_day(anchor: date, forbidden_days: Iterable[int]) -> date:
    """Move an anchor that falls on a forbidden day to the 1st of next month"""
    if anchor.day in set(forbidden_days):
        return first_day_of_next_month(anchor)
    return anchor
