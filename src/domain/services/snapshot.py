"""Snapshot engine producing the budget state for a given day.

The engine is a pure function of its inputs: it performs no I/O, keeps no
state between calls and does not validate its inputs. Callers are expected
to run ``validate_budget_inputs`` beforehand.
"""

from collections.abc import Sequence
from datetime import date, timedelta
from decimal import Decimal

from src.domain.constants import LOOKAHEAD_DAYS, STATUS_TOLERANCE
from src.domain.models import (
    BudgetSnapshot,
    BudgetStatus,
    PlanData,
    PlannedItemData,
    TransactionData,
)
from src.domain.services.cashflow import (
    compute_weekly_rates,
    planned_items_between,
    sum_actual_spend,
    sum_expected_spend_to_date,
    sum_future_planned_expenses,
    sum_income_from_transactions,
    sum_spend_between,
    top_categories,
)
from src.domain.services.runway import simulate_runway
from src.domain.services.time_windows import (
    calendar_week_bounds,
    compute_time_windows,
)


def classify_status(
    ahead_behind: Decimal,
    expected_spend_to_date: Decimal,
) -> BudgetStatus:
    """Classify actual versus expected spend within a 5% band.

    When nothing is expected yet both thresholds are zero, so any non-zero
    difference is classified as ahead or behind.
    """
    threshold = expected_spend_to_date * STATUS_TOLERANCE
    if ahead_behind > threshold:
        return BudgetStatus.AHEAD
    if ahead_behind < -threshold:
        return BudgetStatus.BEHIND
    return BudgetStatus.ONTRACK


def compute_weekly_discretionary_budget(
    remaining_funds_today: Decimal,
    future_planned_expenses: Decimal,
    fixed_per_week: Decimal,
    income_per_week: Decimal,
    remaining_weeks: int,
) -> Decimal:
    """Spread everything not yet committed evenly over the remaining weeks.

    Future planned items are reserved up front, so a large item lowers every
    remaining week rather than only the week it falls in.

    Args:
        remaining_funds_today: Funds available today.
        future_planned_expenses: Planned items dated today or later.
        fixed_per_week: Weekly fixed costs.
        income_per_week: Weekly recurring income.
        remaining_weeks: Weeks left in the plan, at least 1.

    Returns:
        Decimal: Weekly discretionary budget, never negative.
    """
    available = (
        remaining_funds_today
        - future_planned_expenses
        - fixed_per_week * remaining_weeks
        + income_per_week * remaining_weeks
    )
    return max(Decimal("0"), available / remaining_weeks)


def compute_budget_snapshot(
    plan: PlanData,
    transactions: Sequence[TransactionData],
    planned_items: Sequence[PlannedItemData],
    today: date,
) -> BudgetSnapshot:
    """Compute the budget snapshot of a plan on a given day.

    Args:
        plan: Semester plan.
        transactions: Recorded transactions in the positive-spend convention.
        planned_items: One-off planned items, past and future.
        today: Day the snapshot is computed for.

    Returns:
        BudgetSnapshot: Freshly computed snapshot.
    """
    windows = compute_time_windows(plan.start_date, plan.end_date, today)
    rates = compute_weekly_rates(plan)

    expected_spend_to_date = sum_expected_spend_to_date(
        rates,
        windows.weeks_elapsed,
        planned_items,
        today,
    )
    actual_spend_to_date = sum_actual_spend(transactions)
    income_accrued_to_date = (
        rates.income_per_week * windows.weeks_elapsed
        + sum_income_from_transactions(transactions)
    )

    total_available_funds = plan.starting_balance + plan.grants + plan.loans
    remaining_funds_today = (
        total_available_funds + income_accrued_to_date - actual_spend_to_date
    )

    ahead_behind = expected_spend_to_date - actual_spend_to_date
    status = classify_status(ahead_behind, expected_spend_to_date)

    week_start, week_end = calendar_week_bounds(today)
    this_week_spending = sum_spend_between(transactions, week_start, week_end)
    weekly_budget = compute_weekly_discretionary_budget(
        remaining_funds_today,
        sum_future_planned_expenses(planned_items, today),
        rates.fixed_per_week,
        rates.income_per_week,
        windows.remaining_weeks,
    )
    safe_to_spend = max(Decimal("0"), weekly_budget - this_week_spending)

    runway_date = simulate_runway(
        remaining_funds_today,
        today,
        plan.end_date,
        rates.fixed_per_week,
        rates.variable_weekly_total,
        rates.income_per_week,
        planned_items,
    )

    return BudgetSnapshot(
        safe_to_spend_this_week=safe_to_spend,
        remaining_funds_today=remaining_funds_today,
        ahead_behind=ahead_behind,
        status=status,
        runway_date=runway_date,
        variable_weekly_total=rates.variable_weekly_total,
        fixed_per_week=rates.fixed_per_week,
        planned_next_7_days=planned_items_between(
            planned_items,
            today,
            today + timedelta(days=LOOKAHEAD_DAYS),
        ),
        top_categories=top_categories(transactions, today),
        weeks_total=windows.weeks_total,
        weeks_elapsed=windows.weeks_elapsed,
        expected_spend_to_date=expected_spend_to_date,
        actual_spend_to_date=actual_spend_to_date,
    )


__all__ = [
    "classify_status",
    "compute_weekly_discretionary_budget",
    "compute_budget_snapshot",
]
