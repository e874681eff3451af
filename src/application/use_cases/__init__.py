"""Application use cases package."""

from .evaluate_purchase import EvaluatePurchaseUseCase, PurchaseEvaluation
from .get_budget_snapshot import BudgetSnapshot, GetBudgetSnapshotUseCase
from .get_financial_health import FinancialHealth, GetFinancialHealthUseCase
from .import_transactions import ImportedTransaction, ImportTransactionsUseCase

__all__ = [
    "GetBudgetSnapshotUseCase",
    "BudgetSnapshot",
    "EvaluatePurchaseUseCase",
    "PurchaseEvaluation",
    "GetFinancialHealthUseCase",
    "FinancialHealth",
    "ImportTransactionsUseCase",
    "ImportedTransaction",
]
