"""Resolution of extracted date expressions into calendar dates."""

from __future__ import annotations

import calendar
import logging
import re
from datetime import date, datetime, timedelta
from typing import Iterable, Optional

logger = logging.getLogger("task_classifier.date_resolver")

# Indexed like date.weekday(): Monday is 0.
_WEEKDAYS = ("monday", "tuesday", "wednesday", "thursday", "friday", "saturday", "sunday")
_MONTHS = ("jan", "feb", "mar", "apr", "may", "jun", "jul", "aug", "sep", "oct", "nov", "dec")

_NUMERIC_DATE = re.compile(r"^(\d{1,2})[/-](\d{1,2})[/-](\d{2,4})$", re.ASCII)
_MONTH_DATE = re.compile(
    r"^(jan|feb|mar|apr|may|jun|jul|aug|sep|oct|nov|dec)[a-z]*\s+(\d{1,2})(?:st|nd|rd|th)?(?:,?\s+(\d{4}))?$",
    re.ASCII,
)


def _last_day_of_month(year: int, month: int) -> date:
    return date(year, month, calendar.monthrange(year, month)[1])


def _rolled_date(year: int, month: int, day: int) -> date:
    # Out-of-range months and days carry over into the following month or year.
    first = date(year + (month - 1) // 12, (month - 1) % 12 + 1, 1)
    return first + timedelta(days=day - 1)


def _end_of_week(today: date) -> date:
    # Weeks start on Sunday, so a Sunday rolls over to the following Sunday.
    days_since_sunday = (today.weekday() + 1) % 7
    return today + timedelta(days=7 - days_since_sunday)


def _relative(lower: str, today: date) -> Optional[date]:
    if lower in ("today", "tonight"):
        return today
    if lower == "tomorrow":
        return today + timedelta(days=1)
    if lower == "this week":
        return _end_of_week(today)
    if lower == "next week":
        return _end_of_week(today) + timedelta(days=7)
    if lower == "this month":
        return _last_day_of_month(today.year, today.month)
    if lower == "next month":
        year, month = (today.year + 1, 1) if today.month == 12 else (today.year, today.month + 1)
        return _last_day_of_month(year, month)
    if lower in _WEEKDAYS:
        days_ahead = (_WEEKDAYS.index(lower) - today.weekday()) % 7 or 7
        return today + timedelta(days=days_ahead)
    return None


def _literal(raw: str, today: date) -> Optional[date]:
    lower = raw.lower()
    numeric = _NUMERIC_DATE.match(lower)
    if numeric:
        month, day, year = (int(part) for part in numeric.groups())
        if year < 100:
            year += 2000
        return _rolled_date(year, month, day)

    named = _MONTH_DATE.match(lower)
    if named:
        month = _MONTHS.index(named.group(1)) + 1
        year = int(named.group(3)) if named.group(3) else today.year
        return _rolled_date(year, month, int(named.group(2)))

    return datetime.fromisoformat(raw).date()


def resolve_date(expression: str, now: Optional[datetime] = None) -> Optional[date]:
    """Resolve one date expression relative to ``now``.

    Returns ``None`` when the expression carries no usable date, such as a bare
    clock time. Literal dates past the end of a month roll over, so
    ``2/30/2024`` is March 1st.
    """

    today = (now or datetime.now()).date()
    raw = expression.strip()
    lower = raw.lower()

    resolved = _relative(lower, today)
    if resolved is not None:
        return resolved

    try:
        return _literal(raw, today)
    except (ValueError, OverflowError):
        logger.debug("Skipping unresolvable date expression %r", expression)
        return None


def resolve_due_date(expressions: Iterable[str], now: Optional[datetime] = None) -> Optional[date]:
    """Return the earliest date among the resolvable ``expressions``, if any."""

    resolved = [value for value in (resolve_date(expr, now) for expr in expressions) if value is not None]
    return min(resolved, default=None)
