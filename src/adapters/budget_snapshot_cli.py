"""CLI adapter printing a user's budget snapshot.

Inputs come from the environment: BUDGET_USER_ID (required), BUDGET_TODAY
(optional ISO date) and PURCHASE_AMOUNT (optional amount to evaluate).
"""

from datetime import date
from decimal import Decimal
import os

from src.application.use_cases.evaluate_purchase import EvaluatePurchaseUseCase
from src.application.use_cases.get_budget_snapshot import (
    GetBudgetSnapshotUseCase,
)
from src.domain.constants import CATEGORY_LABELS
from src.infrastructure.container import build_budget_repository
from src.infrastructure.logging.logger import get_app_logger, get_usage_logger
from src.utils.decimal_utils import coerce_decimal


def _parse_date(value: str | None, logger) -> date | None:
    """Parse an ISO date string into a date.

    Args:
        value: Date string in YYYY-MM-DD format.
        logger: Logger used for warnings.

    Returns:
        date | None: Parsed date or None when invalid.
    """
    if not value:
        return None
    try:
        return date.fromisoformat(value)
    except ValueError:
        logger.warning(
            f"Invalid date '{value}'. Expected format YYYY-MM-DD."
        )
        return None


def _parse_amount(value: str | None, logger) -> Decimal | None:
    """Parse a purchase amount, ignoring invalid values."""
    if not value:
        return None
    try:
        return coerce_decimal(value)
    except ValueError:
        logger.warning(f"Invalid purchase amount '{value}'.")
        return None


def main() -> None:
    """Compute and print the snapshot, plus an optional purchase verdict."""
    logger = get_app_logger()
    user_id = os.getenv("BUDGET_USER_ID", "").strip()
    if not user_id:
        logger.warning("BUDGET_USER_ID is required to compute a snapshot.")
        return
    today = _parse_date(os.getenv("BUDGET_TODAY"), logger)
    amount = _parse_amount(os.getenv("PURCHASE_AMOUNT"), logger)

    repository = build_budget_repository()
    snapshot_use_case = GetBudgetSnapshotUseCase(
        budget_repository=repository,
        logger=logger,
    )
    get_usage_logger().info(f"budget_snapshot_cli user={user_id}")
    snapshot = snapshot_use_case.execute(user_id, today=today)
    if snapshot is None:
        print(f"No plan found for user {user_id}. Complete onboarding first.")
        return

    runway = snapshot.runway_date or "funded through semester end"
    print(
        f"Week {snapshot.weeks_elapsed} of {snapshot.weeks_total} "
        f"({snapshot.status.value})"
    )
    print(f"Safe to spend this week: {snapshot.safe_to_spend_this_week:.2f}")
    print(f"Remaining funds today: {snapshot.remaining_funds_today:.2f}")
    print(
        f"Expected vs actual spend: {snapshot.expected_spend_to_date:.2f} / "
        f"{snapshot.actual_spend_to_date:.2f}"
    )
    print(f"Runway: {runway}")
    for item in snapshot.planned_next_7_days:
        print(f"Upcoming: {item.name} on {item.date} ({item.amount:.2f})")
    for entry in snapshot.top_categories:
        print(f"{CATEGORY_LABELS[entry.category]}: {entry.amount:.2f}")

    if amount is None:
        return
    evaluation = EvaluatePurchaseUseCase(
        snapshot_use_case=snapshot_use_case,
        logger=logger,
    ).execute(user_id, amount, today=today)
    if evaluation is None:
        return
    print(
        f"Purchase {amount:.2f}: {evaluation.verdict.value} "
        f"(safe-to-spend after: {evaluation.impact_on_safe_to_spend:.2f}; "
        f"{evaluation.impact_on_runway})"
    )


if __name__ == "__main__":  # pragma: no cover
    main()
