"""Date-range predicates used by the store's range queries.

Only the calendar date is consulted, so ``datetime`` values compare by their
date part and any time of day is ignored.
"""

from __future__ import annotations

from datetime import date
from typing import Callable, Dict, Tuple

from ..domain import Period

PeriodMatcher = Callable[[date, date], bool]


def iso_week(value: date) -> Tuple[int, int]:
    """Return the ISO-8601 ``(year, week)`` pair for ``value``."""

    calendar = value.isocalendar()
    return calendar[0], calendar[1]


def same_day(left: date, right: date) -> bool:
    return (left.year, left.month, left.day) == (right.year, right.month, right.day)


def same_iso_week(left: date, right: date) -> bool:
    return iso_week(left) == iso_week(right)


def same_month(left: date, right: date) -> bool:
    return (left.year, left.month) == (right.year, right.month)


MATCHERS: Dict[Period, PeriodMatcher] = {
    Period.DAY: same_day,
    Period.WEEK: same_iso_week,
    Period.MONTH: same_month,
}


def matcher_for(period: Period) -> PeriodMatcher:
    return MATCHERS[Period(period)]
