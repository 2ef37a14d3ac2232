"""
Reading user-entered amounts.

Limits are forgiving: anything that is not a non-negative number is saved
as 0, which means "no limit". Expense amounts use the strict parser and are
rejected instead.
"""

import logging
import math

from budget.models import PeriodLimits
from errors import ParseFailure

logger = logging.getLogger(__name__)


def parse_amount(text) -> float:
    """Parse a non-negative decimal amount or raise ParseFailure."""
    if text is None:
        raise ParseFailure("Amount is missing")
    raw = str(text).strip()
    if not raw:
        raise ParseFailure("Amount is empty")
    try:
        value = float(raw)
    except ValueError:
        raise ParseFailure(f"{raw!r} is not a number") from None
    if math.isnan(value) or math.isinf(value):
        raise ParseFailure(f"{raw!r} is not a finite number")
    if value < 0:
        raise ParseFailure(f"{raw!r} is negative")
    return value


def parse_limit(text) -> float:
    try:
        return parse_amount(text)
    except ParseFailure as e:
        logger.debug("Limit input treated as no limit: %s", e)
        return 0.0


def parse_limits(daily, monthly, yearly) -> PeriodLimits:
    return PeriodLimits(
        daily_limit=parse_limit(daily),
        monthly_limit=parse_limit(monthly),
        yearly_limit=parse_limit(yearly),
    )
