from budget.models import (
    CATEGORIES,
    AggregationResult,
    ExpenseRecord,
    PeriodLimits,
    PeriodSelector,
)
from budget.aggregator import aggregate
from budget.limits import parse_amount, parse_limit, parse_limits
from budget.periods import days_in_month, month_label, parse_month, shift_month
from budget.state import LimitsState

__all__ = [
    "CATEGORIES",
    "AggregationResult",
    "ExpenseRecord",
    "PeriodLimits",
    "PeriodSelector",
    "aggregate",
    "parse_amount",
    "parse_limit",
    "parse_limits",
    "days_in_month",
    "month_label",
    "parse_month",
    "shift_month",
    "LimitsState",
]
