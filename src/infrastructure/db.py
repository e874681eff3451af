"""Database infrastructure for the budget engine.

This module exposes concrete helpers to create SQLAlchemy engines connected
to the budget database. It belongs to the infrastructure layer because it
deals with external systems (PostgreSQL or SQLite).
"""

import os

import dotenv
from sqlalchemy import create_engine
from sqlalchemy.engine import Engine
from sqlalchemy.pool import QueuePool

from src.application.ports.database import DatabaseEnginePort


DB_URL_ENV = "BUDGET_DB_URL"


def _get_env_var(name: str) -> str:
    """Read an environment variable or raise a descriptive error.

    Args:
        name: Name of the environment variable to read.

    Returns:
        str: The raw value of the environment variable.

    Raises:
        RuntimeError: If the environment variable is missing or empty.
    """
    dotenv.load_dotenv()
    value = os.getenv(name)
    if not value:
        raise RuntimeError(f"Missing environment variable: {name}")
    return value


def _create_engine(db_url: str) -> Engine:
    """Create a configured SQLAlchemy engine for the budget database.

    Args:
        db_url: Fully qualified database URL (including driver and credentials)

    Returns:
        Engine: A SQLAlchemy engine instance with a small connection pool and
        health checks enabled.
    """
    return create_engine(
        db_url,
        poolclass=QueuePool,
        pool_size=5,
        max_overflow=5,
        pool_pre_ping=True,
        future=True,
    )


class SqlAlchemyDatabaseEngineAdapter(DatabaseEnginePort):
    """DatabaseEnginePort implementation backed by a SQLAlchemy engine.

    The engine is created on first use and owned by the adapter instance, so
    each composition root decides how many engines exist.
    """

    def __init__(self, db_url: str | None = None) -> None:
        """Initialize the adapter.

        Args:
            db_url: Database URL; read from BUDGET_DB_URL when omitted.
        """
        self._db_url = db_url
        self._engine: Engine | None = None

    def get_engine(self) -> Engine:
        """Get the engine for the budget database.

        Returns:
            Engine: Lazily initialized engine connected to the budget store.
        """
        if self._engine is None:
            db_url = self._db_url or _get_env_var(DB_URL_ENV)
            self._engine = _create_engine(db_url)
        return self._engine


__all__ = ["SqlAlchemyDatabaseEngineAdapter"]
