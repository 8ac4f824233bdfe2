"""Calendar month boundary arithmetic in the input's own frame.

Every function keeps ``tzinfo`` untouched and never converts between zones:
an aware value is treated as wall-clock time in whatever zone it carries.
Month lengths come from calendar rollover, so February and leap years need
no special cases.
"""

from __future__ import annotations

import calendar
from datetime import datetime

from monthbounds.contracts import TICK, MonthBounds

__all__ = [
    "TICK",
    "add_months",
    "days_in_month",
    "end_of_month",
    "end_of_next_month",
    "end_of_previous_month",
    "month_bounds",
    "start_of_month",
    "start_of_next_month",
    "start_of_previous_month",
]


def start_of_month(dt: datetime) -> datetime:
    """Return the first day of ``dt``'s month at 00:00:00.000000."""
    return dt.replace(day=1, hour=0, minute=0, second=0, microsecond=0, fold=0)


def add_months(month_start: datetime, months: int) -> datetime:
    """Shift a start-of-month value by ``months`` calendar months, carrying years."""
    if month_start != start_of_month(month_start):
        raise ValueError("month_start must be the first instant of a month")
    year, month_index = divmod(month_start.year * 12 + month_start.month - 1 + months, 12)
    return month_start.replace(year=year, month=month_index + 1)


def start_of_next_month(dt: datetime) -> datetime:
    """Return the first instant of the month after ``dt``'s month."""
    return add_months(start_of_month(dt), 1)


def start_of_previous_month(dt: datetime) -> datetime:
    """Return the first instant of the month before ``dt``'s month."""
    return add_months(start_of_month(dt), -1)


def end_of_month(dt: datetime) -> datetime:
    """Return the last tick of ``dt``'s month, one microsecond before the next month starts.

    Built from the month's own length so December 9999 needs no year 10000.
    """
    last_day = calendar.monthrange(dt.year, dt.month)[1]
    return start_of_month(dt).replace(day=last_day, hour=23, minute=59, second=59, microsecond=999999)


def end_of_next_month(dt: datetime) -> datetime:
    """Return the last tick of the month after ``dt``'s month."""
    return end_of_month(start_of_next_month(dt))


def end_of_previous_month(dt: datetime) -> datetime:
    """Return the last tick of the month before ``dt``'s month."""
    return end_of_month(start_of_previous_month(dt))


def month_bounds(dt: datetime) -> MonthBounds:
    """Return the inclusive start/end pair of ``dt``'s month."""
    return MonthBounds(start=start_of_month(dt), end=end_of_month(dt))


def days_in_month(dt: datetime) -> int:
    """Return the number of calendar days in ``dt``'s month."""
    return calendar.monthrange(dt.year, dt.month)[1]
