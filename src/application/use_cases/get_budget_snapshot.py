"""Use case to compute a user's budget snapshot."""

from collections.abc import Callable
from datetime import date

from src.application.ports.budget_repository import BudgetRepositoryPort
from src.domain.models import BudgetInputs, BudgetSnapshot
from src.domain.services.snapshot import compute_budget_snapshot
from src.domain.services.validation import validate_budget_inputs
from src.infrastructure.logging.logger import get_app_logger


class GetBudgetSnapshotUseCase:
    """Load a user's plan data and run the snapshot engine on it."""

    def __init__(
        self,
        budget_repository: BudgetRepositoryPort,
        logger=None,
        clock: Callable[[], date] = date.today,
    ) -> None:
        """Initialize the use case.

        Args:
            budget_repository: Port providing stored budget data.
            logger: Optional logger compatible with logging.Logger-like API.
            clock: Callable returning the current day.
        """
        self._budget_repository = budget_repository
        self._logger = logger or get_app_logger()
        self._clock = clock

    def execute(
        self,
        user_id: str,
        today: date | None = None,
    ) -> BudgetSnapshot | None:
        """Return the snapshot of the user's latest plan.

        Args:
            user_id: Owner of the plan.
            today: Day to compute the snapshot for; defaults to the clock.

        Returns:
            BudgetSnapshot | None: Snapshot, or None when no plan exists.
        """
        inputs = self._budget_repository.fetch_budget_inputs(user_id)
        if inputs is None:
            self._logger.warning(f"No plan found for user {user_id}")
            return None
        return self.compute(inputs, today or self._clock())

    def compute(self, inputs: BudgetInputs, today: date) -> BudgetSnapshot:
        """Validate already loaded inputs and compute their snapshot."""
        self._logger.info(
            f"Computing snapshot for {today}: "
            f"{len(inputs.transactions)} transactions, "
            f"{len(inputs.planned_items)} planned items"
        )
        validate_budget_inputs(
            inputs.plan,
            inputs.transactions,
            inputs.planned_items,
            self._logger,
        )
        snapshot = compute_budget_snapshot(
            inputs.plan,
            inputs.transactions,
            inputs.planned_items,
            today,
        )
        self._logger.info(
            f"Snapshot computed: remaining={snapshot.remaining_funds_today}, "
            f"safe_to_spend={snapshot.safe_to_spend_this_week}, "
            f"status={snapshot.status.value}, runway={snapshot.runway_date}"
        )
        return snapshot


__all__ = ["GetBudgetSnapshotUseCase", "BudgetSnapshot"]
