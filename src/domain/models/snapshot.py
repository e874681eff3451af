"""Domain models for computed budget snapshots."""

from dataclasses import dataclass
from datetime import date
from decimal import Decimal
from enum import Enum

from src.domain.constants import Category


class BudgetStatus(str, Enum):
    """Actual spend relative to the expected schedule."""

    AHEAD = "ahead"
    ONTRACK = "ontrack"
    BEHIND = "behind"


class PurchaseVerdict(str, Enum):
    """Affordability classification for a candidate purchase."""

    SAFE = "safe"
    RISKY = "risky"
    NOT_RECOMMENDED = "not_recommended"


@dataclass(frozen=True)
class PlannedItemPreview:
    """Planned item falling inside the lookahead window."""

    name: str
    amount: Decimal
    date: date


@dataclass(frozen=True)
class CategoryAmount:
    """Recent spend aggregated for one category."""

    category: Category
    amount: Decimal


@dataclass(frozen=True)
class BudgetSnapshot:
    """Point-in-time view of a semester budget.

    Attributes:
        safe_to_spend_this_week: Discretionary amount left for the week.
        remaining_funds_today: Funds plus accrued income minus actual spend.
        ahead_behind: Expected spend minus actual spend.
        status: Classification of ahead_behind within a 5% band.
        runway_date: Week start at which funds run out, None when funded.
        variable_weekly_total: Sum of weekly variable budgets.
        fixed_per_week: Monthly fixed costs converted to a weekly rate.
        planned_next_7_days: Planned items due within the next seven days.
        top_categories: Largest recent spending categories, descending.
        weeks_total: Number of weeks in the plan.
        weeks_elapsed: Completed weeks since the plan start.
        expected_spend_to_date: Scheduled spend up to today.
        actual_spend_to_date: Recorded non-income spend.
    """

    safe_to_spend_this_week: Decimal
    remaining_funds_today: Decimal
    ahead_behind: Decimal
    status: BudgetStatus
    runway_date: date | None
    variable_weekly_total: Decimal
    fixed_per_week: Decimal
    planned_next_7_days: tuple[PlannedItemPreview, ...]
    top_categories: tuple[CategoryAmount, ...]
    weeks_total: int
    weeks_elapsed: int
    expected_spend_to_date: Decimal
    actual_spend_to_date: Decimal


@dataclass(frozen=True)
class PurchaseEvaluation:
    """Result of checking a purchase against a snapshot."""

    verdict: PurchaseVerdict
    impact_on_safe_to_spend: Decimal
    impact_on_runway: str


__all__ = [
    "BudgetStatus",
    "PurchaseVerdict",
    "PlannedItemPreview",
    "CategoryAmount",
    "BudgetSnapshot",
    "PurchaseEvaluation",
]
