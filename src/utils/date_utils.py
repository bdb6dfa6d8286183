"""Calendar helpers for reporting periods."""

import calendar
from datetime import date


def month_bounds(year: int, month: int) -> tuple[date, date]:
    """Return the first and last calendar day of a month."""
    last_day = calendar.monthrange(year, month)[1]
    return date(year, month, 1), date(year, month, last_day)


def year_bounds(year: int) -> tuple[date, date]:
    """Return January 1st and December 31st of a year."""
    return date(year, 1, 1), date(year, 12, 31)


def previous_month(year: int, month: int) -> tuple[int, int]:
    """Return the (year, month) immediately before the given month."""
    if month == 1:
        return year - 1, 12
    return year, month - 1


def next_month(year: int, month: int) -> tuple[int, int]:
    """Return the (year, month) immediately after the given month."""
    if month == 12:
        return year + 1, 1
    return year, month + 1


__all__ = ["month_bounds", "year_bounds", "previous_month", "next_month"]
