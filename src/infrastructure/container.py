"""Composition root for wiring infrastructure adapters."""

from src.application.ports.budget_repository import BudgetRepositoryPort
from src.application.ports.database import DatabaseEnginePort
from src.application.use_cases.import_transactions import (
    ImportTransactionsUseCase,
)
from src.infrastructure.budget_repository import SqlAlchemyBudgetRepository
from src.infrastructure.db import SqlAlchemyDatabaseEngineAdapter
from src.infrastructure.settings import BudgetSettings


def build_database_adapter(
    settings: BudgetSettings | None = None,
) -> DatabaseEnginePort:
    """Return a database adapter configured from settings."""
    resolved_settings = settings or BudgetSettings.from_env()
    return SqlAlchemyDatabaseEngineAdapter(db_url=resolved_settings.db_url)


def build_budget_repository(
    db_port: DatabaseEnginePort | None = None,
) -> BudgetRepositoryPort:
    """Return the repository for stored budget data."""
    resolved_db = db_port or build_database_adapter()
    return SqlAlchemyBudgetRepository(resolved_db)


def build_import_transactions_use_case(
    settings: BudgetSettings | None = None,
    logger=None,
) -> ImportTransactionsUseCase:
    """Return the import use case using the configured amount convention."""
    resolved_settings = settings or BudgetSettings.from_env()
    return ImportTransactionsUseCase(
        logger=logger,
        amount_convention=resolved_settings.amount_convention,
    )


__all__ = [
    "build_database_adapter",
    "build_budget_repository",
    "build_import_transactions_use_case",
]
