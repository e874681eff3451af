"""Port for reading a user's budget data."""

from typing import Protocol

from src.domain.models import BudgetInputs, EmergencyFund, IncomeSource


class BudgetRepositoryPort(Protocol):
    """Port exposing the stored plan, transactions and related records."""

    def fetch_budget_inputs(self, user_id: str) -> BudgetInputs | None:
        """Return the latest plan with its transactions and planned items.

        The three collections must come from one consistent read. None is
        returned when the user has no plan.
        """

    def fetch_income_sources(self, user_id: str) -> list[IncomeSource]:
        """Return the user's detailed income sources."""

    def fetch_emergency_fund(self, user_id: str) -> EmergencyFund | None:
        """Return the user's emergency fund, if one is set up."""


__all__ = ["BudgetRepositoryPort"]
