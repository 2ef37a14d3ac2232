"""
Calendar helpers for the month being viewed or edited.

Months are passed around as the ``date`` of their first day. Records are
stored under the human label of the month (``"October 2026"``) and the
month is carried in URLs as ``YYYY-MM``.
"""

import calendar
from datetime import date, datetime
from typing import Optional

MONTH_PARAM_FORMAT = "%Y-%m"
MONTH_LABEL_FORMAT = "%B %Y"


def first_of_month(value: date) -> date:
    return value.replace(day=1)


def days_in_month(value: date) -> int:
    """Number of days in the month containing ``value`` (28 to 31)."""
    return calendar.monthrange(value.year, value.month)[1]


def month_label(value: date) -> str:
    return value.strftime(MONTH_LABEL_FORMAT)


def month_param(value: date) -> str:
    return value.strftime(MONTH_PARAM_FORMAT)


def shift_month(value: date, months: int) -> date:
    index = value.year * 12 + (value.month - 1) + months
    return date(index // 12, index % 12 + 1, 1)


def parse_month(value: Optional[str], today: Optional[date] = None) -> date:
    """Read a ``YYYY-MM`` parameter, falling back to the current month."""
    fallback = first_of_month(today or date.today())
    if not value:
        return fallback
    try:
        return datetime.strptime(value.strip(), MONTH_PARAM_FORMAT).date()
    except ValueError:
        return fallback
