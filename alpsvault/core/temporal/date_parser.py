"""
Natural-language date expressions.

``match_patterns`` recognises phrases such as "20240728", "May 21, 2002",
"last week", "last 3 days", "yesterday", "June" or "friday"; ``range_for``
turns one match into an inclusive ``(start, end)`` datetime pair.

Numbered relative periods ("last 3 weeks") are rolling windows ending today,
while bare relative periods ("last week") are the previous complete calendar
unit. Both behaviours are relied on by users and kept distinct.
"""

import re
from datetime import datetime, timedelta
from enum import Enum

from pydantic import BaseModel

from alpsvault.core.temporal.calendar import (
    end_of_day,
    end_of_month,
    end_of_week,
    end_of_year,
    start_of_day,
    start_of_month,
    start_of_week,
    start_of_year,
    sub_months,
    sub_years,
)
from alpsvault.utils.logger import get_logger

logger = get_logger(__name__)

DateRange = tuple[datetime, datetime]


class DatePatternType(str, Enum):
    """Recognised phrase families, most specific first."""

    YYYYMMDD = "yyyymmdd"
    YYYYMM = "yyyymm"
    MONTH_DAY_YEAR = "month_day_year"
    MONTH_YEAR = "month_year"
    YEAR_MONTH = "year_month"
    RELATIVE_NUMBERED_PERIOD = "relative_numbered_period"
    RELATIVE_PERIOD = "relative_period"
    RELATIVE_DAY = "relative_day"
    MONTH = "month"
    YEAR = "year"
    DAY_NAME = "day_name"


class DatePatternMatch(BaseModel):
    """One recognised phrase with its extracted components."""

    type: DatePatternType
    match: str
    year: int | None = None
    month: int | None = None
    day: int | None = None
    number: int | None = None
    # "day" | "week" | "month" | "year"
    period: str | None = None


MONTHS = {
    name: index
    for index, name in enumerate(
        ("jan", "feb", "mar", "apr", "may", "jun", "jul", "aug", "sep", "oct", "nov", "dec"),
        start=1,
    )
}
WEEKDAYS = {
    name: index
    for index, name in enumerate(("mon", "tue", "wed", "thu", "fri", "sat", "sun"))
}

_MONTH = (
    r"(?:January|February|March|April|May|June|July|August|September|October|November|December"
    r"|Jan|Feb|Mar|Apr|Jun|Jul|Aug|Sep|Oct|Nov|Dec)"
)
_YEAR = r"(?:19|20)\d{2}"
_DAY_NUMBER = r"(?:[12][0-9]|3[01]|[1-9])"
_DAY_NAME = (
    r"(?:Monday|Tuesday|Wednesday|Thursday|Friday|Saturday|Sunday"
    r"|Mon|Tue|Wed|Thu|Fri|Sat|Sun)"
)

_I = re.IGNORECASE
YYYYMMDD_PATTERN = re.compile(rf"({_YEAR})(0[1-9]|1[0-2])(0[1-9]|[12][0-9]|3[01])")
YYYYMM_PATTERN = re.compile(rf"({_YEAR})(0[1-9]|1[0-2])")
MONTH_DAY_YEAR_PATTERN = re.compile(rf"({_MONTH})\s+({_DAY_NUMBER}),?\s+({_YEAR})", _I)
MONTH_YEAR_PATTERN = re.compile(rf"({_MONTH})\s+({_YEAR})", _I)
YEAR_MONTH_PATTERN = re.compile(rf"({_YEAR})\s+({_MONTH})", _I)
NUMBERED_PERIOD_PATTERN = re.compile(r"last\s+(\d+)\s+(year|month|week|day)s?", _I)
PERIOD_PATTERN = re.compile(r"last\s+(week|month|year)", _I)
MONTH_PATTERN = re.compile(_MONTH, _I)
YEAR_PATTERN = re.compile(_YEAR)
DAY_NAME_PATTERN = re.compile(_DAY_NAME, _I)

RELATIVE_DAYS = (
    (re.compile(r"today", _I), 0),
    (re.compile(r"yesterday", _I), 1),
    (re.compile(r"(?:the\s+)?day\s+before\s+yesterday", _I), 2),
)


def month_number(name: str) -> int:
    return MONTHS[name[:3].lower()]


def match_patterns(text: str) -> list[DatePatternMatch] | None:
    """
    Every phrase family ``text`` satisfies as a whole.

    Args:
        text: Search text (surrounding whitespace ignored)

    Returns:
        Matches in specificity order, deduplicated by (type, match), or None
        when nothing is recognised
    """
    text = (text or "").strip()
    if not text:
        return None

    results: list[DatePatternMatch] = []

    def add(pattern_type: DatePatternType, **fields) -> None:
        results.append(DatePatternMatch(type=pattern_type, match=text, **fields))

    if m := YYYYMMDD_PATTERN.fullmatch(text):
        add(DatePatternType.YYYYMMDD, year=int(m[1]), month=int(m[2]), day=int(m[3]))

    if m := YYYYMM_PATTERN.fullmatch(text):
        add(DatePatternType.YYYYMM, year=int(m[1]), month=int(m[2]))

    if m := MONTH_DAY_YEAR_PATTERN.fullmatch(text):
        add(
            DatePatternType.MONTH_DAY_YEAR,
            month=month_number(m[1]),
            day=int(m[2]),
            year=int(m[3]),
        )

    if m := MONTH_YEAR_PATTERN.fullmatch(text):
        add(DatePatternType.MONTH_YEAR, month=month_number(m[1]), year=int(m[2]))

    if m := YEAR_MONTH_PATTERN.fullmatch(text):
        add(DatePatternType.YEAR_MONTH, year=int(m[1]), month=month_number(m[2]))

    if m := NUMBERED_PERIOD_PATTERN.fullmatch(text):
        add(DatePatternType.RELATIVE_NUMBERED_PERIOD, number=int(m[1]), period=m[2].lower())

    if m := PERIOD_PATTERN.fullmatch(text):
        add(DatePatternType.RELATIVE_PERIOD, period=m[1].lower())

    for pattern, days_ago in RELATIVE_DAYS:
        if pattern.fullmatch(text):
            add(DatePatternType.RELATIVE_DAY, number=days_ago)

    if MONTH_PATTERN.fullmatch(text):
        add(DatePatternType.MONTH, month=month_number(text))

    if YEAR_PATTERN.fullmatch(text):
        add(DatePatternType.YEAR, year=int(text))

    if DAY_NAME_PATTERN.fullmatch(text):
        add(DatePatternType.DAY_NAME, day=WEEKDAYS[text[:3].lower()])

    unique = list({(r.type, r.match): r for r in results}.values())
    return unique or None


def range_for(
    match: DatePatternMatch,
    now: datetime | None = None,
    week_start: int = 0,
) -> DateRange | None:
    """
    Inclusive datetime range for one match.

    Args:
        match: A result of ``match_patterns``
        now: Reference time (defaults to the current local time)
        week_start: First day of the week, 0 = Monday

    Returns:
        ``(start, end)``, or None for impossible dates such as "Feb 30, 2024"
    """
    now = now or datetime.now()
    try:
        return _compute_range(match, now, week_start)
    except (ValueError, OverflowError, TypeError) as e:
        logger.debug(f"No usable range for '{match.match}': {e}")
        return None


def _compute_range(match: DatePatternMatch, now: datetime, week_start: int) -> DateRange | None:
    kind = match.type

    if kind in (DatePatternType.YYYYMMDD, DatePatternType.MONTH_DAY_YEAR):
        day = datetime(match.year, match.month, match.day)
        return start_of_day(day), end_of_day(day)

    if kind in (
        DatePatternType.YYYYMM,
        DatePatternType.MONTH_YEAR,
        DatePatternType.YEAR_MONTH,
    ):
        month = datetime(match.year, match.month, 1)
        return start_of_month(month), end_of_month(month)

    if kind == DatePatternType.RELATIVE_DAY:
        day = now - timedelta(days=match.number)
        return start_of_day(day), end_of_day(day)

    if kind == DatePatternType.RELATIVE_PERIOD:
        if match.period == "week":
            last_week = now - timedelta(weeks=1)
            return start_of_week(last_week, week_start), end_of_week(last_week, week_start)
        if match.period == "month":
            last_month = sub_months(now, 1)
            return start_of_month(last_month), end_of_month(last_month)
        if match.period == "year":
            last_year = sub_years(now, 1)
            return start_of_year(last_year), end_of_year(last_year)
        return None

    if kind == DatePatternType.RELATIVE_NUMBERED_PERIOD:
        count = match.number
        if match.period == "year":
            start = sub_years(now, count)
        elif match.period == "month":
            start = sub_months(now, count)
        elif match.period == "week":
            start = now - timedelta(weeks=count)
        else:
            start = now - timedelta(days=count)
        return start_of_day(start), end_of_day(now)

    if kind == DatePatternType.MONTH:
        month = datetime(now.year, match.month, 1)
        return start_of_month(month), end_of_month(month)

    if kind == DatePatternType.YEAR:
        year = datetime(match.year, 1, 1)
        return start_of_year(year), end_of_year(year)

    if kind == DatePatternType.DAY_NAME:
        # Most recent occurrence, today included
        day = now - timedelta(days=(now.weekday() - match.day) % 7)
        return start_of_day(day), end_of_day(day)

    return None
