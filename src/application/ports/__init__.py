"""Application ports package."""

from .budget_repository import BudgetRepositoryPort
from .database import DatabaseEnginePort

__all__ = [
    "BudgetRepositoryPort",
    "DatabaseEnginePort",
]
