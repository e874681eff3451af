"""Tests for the composition root."""

from unittest.mock import MagicMock

from src.domain.services.categorization import AmountConvention
from src.infrastructure.budget_repository import SqlAlchemyBudgetRepository
from src.infrastructure.container import (
    build_budget_repository,
    build_database_adapter,
    build_import_transactions_use_case,
)
from src.infrastructure.db import SqlAlchemyDatabaseEngineAdapter
from src.infrastructure.settings import BudgetSettings


def test_build_database_adapter_uses_settings_url() -> None:
    """The adapter should be configured with the settings URL."""
    settings = BudgetSettings(
        db_url="sqlite://",
        amount_convention=AmountConvention.POSITIVE_SPEND,
    )

    adapter = build_database_adapter(settings)

    assert isinstance(adapter, SqlAlchemyDatabaseEngineAdapter)
    assert adapter._db_url == "sqlite://"


def test_build_budget_repository_wraps_port() -> None:
    """An explicit port should be passed to the repository."""
    db_port = MagicMock()

    repository = build_budget_repository(db_port=db_port)

    assert isinstance(repository, SqlAlchemyBudgetRepository)
    assert repository._db_port is db_port


def test_build_import_use_case_applies_convention() -> None:
    """The configured sign convention should reach the import use case."""
    settings = BudgetSettings(amount_convention=AmountConvention.NEGATIVE_SPEND)

    use_case = build_import_transactions_use_case(settings, logger=MagicMock())

    assert use_case._amount_convention is AmountConvention.NEGATIVE_SPEND
