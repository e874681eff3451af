"""Use case to build a user's financial health report."""

from collections.abc import Callable
from datetime import date

from src.application.ports.budget_repository import BudgetRepositoryPort
from src.application.use_cases.get_budget_snapshot import (
    GetBudgetSnapshotUseCase,
)
from src.domain.models import FinancialHealth
from src.domain.services.health import compute_financial_health
from src.infrastructure.logging.logger import get_app_logger


class GetFinancialHealthUseCase:
    """Combine income sources, emergency fund and snapshot into a report."""

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
        self._snapshot_use_case = GetBudgetSnapshotUseCase(
            budget_repository,
            logger=self._logger,
            clock=clock,
        )
        self._clock = clock

    def execute(
        self,
        user_id: str,
        today: date | None = None,
    ) -> FinancialHealth:
        """Return the financial health report.

        Users without a plan still get a report based on their income
        sources and emergency fund alone.

        Args:
            user_id: Owner of the data.
            today: Day to evaluate; defaults to the clock.

        Returns:
            FinancialHealth: Health report.
        """
        resolved_today = today or self._clock()
        inputs = self._budget_repository.fetch_budget_inputs(user_id)
        plan = None
        snapshot = None
        if inputs is not None:
            plan = inputs.plan
            snapshot = self._snapshot_use_case.compute(inputs, resolved_today)
        income_sources = self._budget_repository.fetch_income_sources(user_id)
        emergency_fund = self._budget_repository.fetch_emergency_fund(user_id)

        health = compute_financial_health(
            income_sources,
            emergency_fund,
            plan,
            snapshot,
        )
        self._logger.info(
            f"Financial health for user {user_id}: "
            f"score={health.health_score}, level={health.health_level.value}"
        )
        return health


__all__ = ["GetFinancialHealthUseCase", "FinancialHealth"]
