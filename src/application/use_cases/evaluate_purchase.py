"""Use case to check whether a purchase fits the current budget."""

from datetime import date
from decimal import Decimal

from src.application.use_cases.get_budget_snapshot import (
    GetBudgetSnapshotUseCase,
)
from src.domain.models import PurchaseEvaluation
from src.domain.services.purchase import evaluate_purchase
from src.infrastructure.logging.logger import get_app_logger


class EvaluatePurchaseUseCase:
    """Evaluate a purchase against a freshly computed snapshot."""

    def __init__(
        self,
        snapshot_use_case: GetBudgetSnapshotUseCase,
        logger=None,
    ) -> None:
        """Initialize the use case.

        Args:
            snapshot_use_case: Use case producing the user's snapshot.
            logger: Optional logger compatible with logging.Logger-like API.
        """
        self._snapshot_use_case = snapshot_use_case
        self._logger = logger or get_app_logger()

    def execute(
        self,
        user_id: str,
        amount: Decimal,
        today: date | None = None,
    ) -> PurchaseEvaluation | None:
        """Return the verdict for a purchase, or None without a plan."""
        snapshot = self._snapshot_use_case.execute(user_id, today=today)
        if snapshot is None:
            return None
        evaluation = evaluate_purchase(amount, snapshot)
        self._logger.info(
            f"Purchase of {amount} evaluated as {evaluation.verdict.value}"
        )
        return evaluation


__all__ = ["EvaluatePurchaseUseCase", "PurchaseEvaluation"]
