"""
Turns one month of day records into totals, averages and over-budget flags.

The period lens is applied to the month's raw totals:

- Daily divides by the number of days in the viewed month.
- Monthly divides by 12.
- Yearly uses the month's total as it is.

A limit of 0 means no limit is configured, so nothing is ever flagged
against it.
"""

from datetime import date
from typing import Iterable, Optional

from budget.models import (
    CATEGORIES,
    AggregationResult,
    ExpenseRecord,
    PeriodLimits,
    PeriodSelector,
)
from budget.periods import days_in_month


def category_totals(records: Iterable[ExpenseRecord]) -> dict[str, float]:
    """Raw per-category sums; keys outside CATEGORIES are ignored."""
    totals = {category: 0.0 for category in CATEGORIES}
    for record in records:
        for category in CATEGORIES:
            totals[category] += float(record.category_amounts.get(category, 0.0))
    return totals


def adjust(total: float, selector: PeriodSelector, days: int) -> float:
    if selector is PeriodSelector.DAILY:
        return total / days
    if selector is PeriodSelector.MONTHLY:
        return total / 12
    return total


def _exceeds(figure: float, limit: float) -> bool:
    return limit > 0 and figure > limit


def _ratio(figure: float, limit: float) -> float:
    return figure / limit if limit > 0 else 0.0


def aggregate(
    records: Iterable[ExpenseRecord],
    selector: PeriodSelector,
    limits: PeriodLimits,
    period: Optional[date] = None,
) -> AggregationResult:
    """
    Aggregate a month of records under ``selector``.

    ``period`` is any date inside the month the records belong to; it only
    decides the day count used by the Daily lens and defaults to today.
    """
    days = days_in_month(period or date.today())
    raw = category_totals(records)
    raw_overall = sum(raw.values())

    limit = limits.for_selector(selector)
    adjusted = {category: adjust(total, selector, days) for category, total in raw.items()}
    overall = adjust(raw_overall, selector, days)

    return AggregationResult(
        selector=selector,
        applicable_limit=limit,
        category_totals=adjusted,
        overall_adjusted=overall,
        overall_exceeded=_exceeds(overall, limit),
        category_exceeded={category: _exceeds(figure, limit) for category, figure in adjusted.items()},
        progress_ratio={category: _ratio(figure, limit) for category, figure in adjusted.items()},
        overall_progress=_ratio(overall, limit),
        raw_category_totals=raw,
        raw_overall=raw_overall,
    )
