"""Domain validation helpers."""

from collections.abc import Iterable
from dataclasses import fields
from logging import Logger

from src.domain.constants import Category
from src.domain.models import PlanData, PlannedItemData, TransactionData


_PLAN_AMOUNT_FIELDS = (
    "starting_balance",
    "grants",
    "loans",
    "work_study_monthly",
    "other_income_monthly",
)


def validate_budget_inputs(
    plan: PlanData,
    transactions: Iterable[TransactionData],
    planned_items: Iterable[PlannedItemData],
    logger: Logger,
) -> None:
    """Warn when inputs violate the engine's expectations.

    Nothing is raised or clamped: the values are reported so data-quality
    problems stay visible upstream.

    Args:
        plan: Semester plan.
        transactions: Recorded transactions.
        planned_items: Planned items.
        logger: Logger used for warnings.
    """
    if plan.end_date < plan.start_date:
        logger.warning(
            f"Plan ends before it starts: start={plan.start_date}, "
            f"end={plan.end_date}"
        )
    for name in _PLAN_AMOUNT_FIELDS:
        value = getattr(plan, name)
        if value < 0:
            logger.warning(f"Plan amount {name} is negative: {value}")
    for group in (plan.fixed_costs, plan.variable_budgets):
        for field in fields(group):
            value = getattr(group, field.name)
            if value < 0:
                logger.warning(
                    f"{type(group).__name__}.{field.name} is negative: {value}"
                )
    for transaction in transactions:
        if transaction.category != Category.INCOME and transaction.amount < 0:
            logger.warning(
                f"Negative {transaction.category.value} transaction on "
                f"{transaction.date} will be counted as income: "
                f"{transaction.amount}"
            )
    for item in planned_items:
        if item.amount < 0:
            logger.info(
                f"Planned item '{item.name}' on {item.date} is a credit: "
                f"{item.amount}"
            )


__all__ = ["validate_budget_inputs"]
