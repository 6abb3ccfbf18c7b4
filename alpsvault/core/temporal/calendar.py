"""
Calendar arithmetic on naive local datetimes.

Ranges are inclusive: every ``end_of_*`` returns the last representable
microsecond of its unit.
"""

import calendar
from datetime import datetime, time, timedelta


def start_of_day(value: datetime) -> datetime:
    return datetime.combine(value.date(), time.min)


def end_of_day(value: datetime) -> datetime:
    return datetime.combine(value.date(), time.max)


def start_of_week(value: datetime, week_start: int = 0) -> datetime:
    """Start of the week containing ``value``; ``week_start`` 0 = Monday."""
    offset = (value.weekday() - week_start) % 7
    return start_of_day(value - timedelta(days=offset))


def end_of_week(value: datetime, week_start: int = 0) -> datetime:
    return end_of_day(start_of_week(value, week_start) + timedelta(days=6))


def start_of_month(value: datetime) -> datetime:
    return datetime(value.year, value.month, 1)


def end_of_month(value: datetime) -> datetime:
    last_day = calendar.monthrange(value.year, value.month)[1]
    return end_of_day(datetime(value.year, value.month, last_day))


def start_of_year(value: datetime) -> datetime:
    return datetime(value.year, 1, 1)


def end_of_year(value: datetime) -> datetime:
    return end_of_day(datetime(value.year, 12, 31))


def sub_months(value: datetime, months: int) -> datetime:
    """Shift back by whole months, clamping the day to the target month's length."""
    index = value.year * 12 + (value.month - 1) - months
    year, month = divmod(index, 12)
    month += 1
    day = min(value.day, calendar.monthrange(year, month)[1])
    return value.replace(year=year, month=month, day=day)


def sub_years(value: datetime, years: int) -> datetime:
    return sub_months(value, years * 12)
