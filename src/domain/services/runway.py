"""Week-by-week depletion simulation for the funding runway."""

from collections.abc import Iterable
from datetime import date, timedelta
from decimal import Decimal

from src.domain.models import PlannedItemData


_WEEK = timedelta(days=7)


def count_simulation_weeks(today: date, end_date: date) -> int:
    """Return how many week starts fall within [today, end_date]."""
    if today > end_date:
        return 0
    return (end_date - today).days // 7 + 1


def simulate_runway(
    remaining_funds: Decimal,
    today: date,
    end_date: date,
    fixed_per_week: Decimal,
    variable_per_week: Decimal,
    income_per_week: Decimal,
    planned_items: Iterable[PlannedItemData],
) -> date | None:
    """Find the first week in which simulated funds reach zero.

    The simulation starts at ``today`` with ``remaining_funds`` and steps one
    week at a time while the week start is on or before ``end_date``. Each
    week subtracts the net weekly burn plus planned items dated in
    ``[week_start, week_start + 7 days)``. Only items strictly after today
    are simulated, since earlier ones are already reflected in the funds.

    Args:
        remaining_funds: Funds available today.
        today: First simulated week start.
        end_date: Last day of the plan.
        fixed_per_week: Weekly fixed costs.
        variable_per_week: Weekly variable budget.
        income_per_week: Weekly recurring income.
        planned_items: Planned items of the plan.

    Returns:
        date | None: Week start at which funds drop to zero or below, or None
        when the plan stays funded through its end date.
    """
    future_items = [item for item in planned_items if item.date > today]
    weekly_burn = fixed_per_week + variable_per_week - income_per_week
    funds = remaining_funds
    week_start = today
    for _ in range(count_simulation_weeks(today, end_date)):
        week_end = week_start + _WEEK
        items_this_week = sum(
            (
                item.amount
                for item in future_items
                if week_start <= item.date < week_end
            ),
            Decimal("0"),
        )
        funds -= weekly_burn + items_this_week
        if funds <= 0:
            return week_start
        week_start = week_end
    return None


__all__ = ["count_simulation_weeks", "simulate_runway"]
