"""Weekly rates and period totals over plan inputs."""

from collections.abc import Iterable
from dataclasses import dataclass
from datetime import date, timedelta
from decimal import Decimal

from src.domain.constants import (
    TOP_CATEGORY_LIMIT,
    TOP_CATEGORY_WINDOW_DAYS,
    WEEKS_PER_MONTH,
    Category,
)
from src.domain.models import (
    CategoryAmount,
    PlanData,
    PlannedItemData,
    PlannedItemPreview,
    TransactionData,
)


@dataclass(frozen=True)
class WeeklyRates:
    """Recurring plan flows expressed per week."""

    income_per_week: Decimal
    fixed_per_week: Decimal
    variable_weekly_total: Decimal

    @property
    def weekly_burn(self) -> Decimal:
        """Return net weekly outflow before planned items."""
        return self.fixed_per_week + self.variable_weekly_total - self.income_per_week


def compute_weekly_rates(plan: PlanData) -> WeeklyRates:
    """Convert the plan's monthly and weekly figures to weekly rates."""
    monthly_income = plan.work_study_monthly + plan.other_income_monthly
    return WeeklyRates(
        income_per_week=monthly_income / WEEKS_PER_MONTH,
        fixed_per_week=plan.fixed_costs.total / WEEKS_PER_MONTH,
        variable_weekly_total=plan.variable_budgets.total,
    )


def is_spend(transaction: TransactionData) -> bool:
    """Return True for positive, non-income transactions."""
    return transaction.category != Category.INCOME and transaction.amount > 0


def sum_actual_spend(transactions: Iterable[TransactionData]) -> Decimal:
    """Sum all recorded spend."""
    return sum(
        (t.amount for t in transactions if is_spend(t)),
        Decimal("0"),
    )


def sum_income_from_transactions(
    transactions: Iterable[TransactionData],
) -> Decimal:
    """Sum income and negative transactions as absolute inflows."""
    return sum(
        (
            abs(t.amount)
            for t in transactions
            if t.category == Category.INCOME or t.amount < 0
        ),
        Decimal("0"),
    )


def sum_spend_between(
    transactions: Iterable[TransactionData],
    start: date,
    end: date,
) -> Decimal:
    """Sum spend dated within [start, end]."""
    return sum(
        (
            t.amount
            for t in transactions
            if is_spend(t) and start <= t.date <= end
        ),
        Decimal("0"),
    )


def sum_planned_items_to_date(
    planned_items: Iterable[PlannedItemData],
    today: date,
) -> Decimal:
    """Sum planned items dated on or before today."""
    return sum(
        (item.amount for item in planned_items if item.date <= today),
        Decimal("0"),
    )


def sum_future_planned_expenses(
    planned_items: Iterable[PlannedItemData],
    today: date,
) -> Decimal:
    """Sum planned items dated on or after today."""
    return sum(
        (item.amount for item in planned_items if item.date >= today),
        Decimal("0"),
    )


def sum_expected_spend_to_date(
    rates: WeeklyRates,
    weeks_elapsed: int,
    planned_items: Iterable[PlannedItemData],
    today: date,
) -> Decimal:
    """Return the spend the plan schedules up to today."""
    return (
        rates.fixed_per_week * weeks_elapsed
        + rates.variable_weekly_total * weeks_elapsed
        + sum_planned_items_to_date(planned_items, today)
    )


def planned_items_between(
    planned_items: Iterable[PlannedItemData],
    start: date,
    end: date,
) -> tuple[PlannedItemPreview, ...]:
    """Return planned items dated within [start, end], in input order."""
    return tuple(
        PlannedItemPreview(name=item.name, amount=item.amount, date=item.date)
        for item in planned_items
        if start <= item.date <= end
    )


def top_categories(
    transactions: Iterable[TransactionData],
    today: date,
    window_days: int = TOP_CATEGORY_WINDOW_DAYS,
    limit: int = TOP_CATEGORY_LIMIT,
) -> tuple[CategoryAmount, ...]:
    """Return the largest non-income categories of the trailing window.

    Args:
        transactions: Recorded transactions.
        today: Day the window ends on.
        window_days: Window length; transactions must be strictly after
            today minus this many days.
        limit: Maximum number of categories returned.

    Returns:
        tuple[CategoryAmount, ...]: Categories sorted by descending amount,
        ties kept in first-seen order.
    """
    window_start = today - timedelta(days=window_days)
    totals: dict[Category, Decimal] = {}
    for t in transactions:
        if t.date <= window_start or t.category == Category.INCOME:
            continue
        totals[t.category] = totals.get(t.category, Decimal("0")) + t.amount
    ranked = sorted(totals.items(), key=lambda item: item[1], reverse=True)
    return tuple(
        CategoryAmount(category=category, amount=amount)
        for category, amount in ranked[:limit]
    )


__all__ = [
    "WeeklyRates",
    "compute_weekly_rates",
    "is_spend",
    "sum_actual_spend",
    "sum_income_from_transactions",
    "sum_spend_between",
    "sum_planned_items_to_date",
    "sum_future_planned_expenses",
    "sum_expected_spend_to_date",
    "planned_items_between",
    "top_categories",
]
