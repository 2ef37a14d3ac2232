from dataclasses import dataclass, field
from enum import Enum
from typing import Final, Optional

CATEGORIES: Final[tuple[str, ...]] = ("Grocery", "Travel", "Miscellaneous", "Savings")


class PeriodSelector(str, Enum):
    DAILY = "Daily"
    MONTHLY = "Monthly"
    YEARLY = "Yearly"

    @classmethod
    def from_value(cls, value, default=None):
        """Look a selector up by its label, case-insensitively."""
        if isinstance(value, cls):
            return value
        for selector in cls:
            if value and selector.value.lower() == str(value).strip().lower():
                return selector
        return default if default is not None else cls.DAILY


@dataclass
class ExpenseRecord:
    day: int
    category_amounts: dict[str, float] = field(default_factory=dict)
    notes: str = ""
    receipt_ref: Optional[str] = None

    def amount_for(self, category: str) -> float:
        return self.category_amounts.get(category, 0.0)


@dataclass(frozen=True)
class PeriodLimits:
    daily_limit: float = 0.0
    monthly_limit: float = 0.0
    yearly_limit: float = 0.0

    def for_selector(self, selector: PeriodSelector) -> float:
        if selector is PeriodSelector.DAILY:
            return self.daily_limit
        if selector is PeriodSelector.MONTHLY:
            return self.monthly_limit
        return self.yearly_limit


@dataclass(frozen=True)
class AggregationResult:
    selector: PeriodSelector
    applicable_limit: float
    category_totals: dict[str, float]
    overall_adjusted: float
    overall_exceeded: bool
    category_exceeded: dict[str, bool]
    progress_ratio: dict[str, float]
    overall_progress: float
    raw_category_totals: dict[str, float]
    raw_overall: float

    @property
    def bounded_progress_ratio(self) -> dict[str, float]:
        """Per-category ratios clamped to [0, 1] for fixed-width bars."""
        return {category: clamp_ratio(ratio) for category, ratio in self.progress_ratio.items()}

    @property
    def bounded_overall_progress(self) -> float:
        return clamp_ratio(self.overall_progress)

    @property
    def exceeded_categories(self) -> list[str]:
        return [category for category in CATEGORIES if self.category_exceeded.get(category)]


def clamp_ratio(ratio: float) -> float:
    return max(0.0, min(1.0, ratio))
