"""Domain package for business rules and core models."""

from .constants import CATEGORY_KEYWORDS, CATEGORY_LABELS, Category
from .models import (
    BudgetInputs,
    BudgetSnapshot,
    BudgetStatus,
    FixedCosts,
    PlanData,
    PlannedItemData,
    PurchaseEvaluation,
    PurchaseVerdict,
    TransactionData,
    VariableBudgets,
)
from .services import (
    categorize_transaction,
    compute_budget_snapshot,
    compute_financial_health,
    evaluate_purchase,
    normalize_amount,
    validate_budget_inputs,
)

__all__ = [
    "Category",
    "CATEGORY_KEYWORDS",
    "CATEGORY_LABELS",
    "BudgetInputs",
    "BudgetSnapshot",
    "BudgetStatus",
    "FixedCosts",
    "PlanData",
    "PlannedItemData",
    "PurchaseEvaluation",
    "PurchaseVerdict",
    "TransactionData",
    "VariableBudgets",
    "categorize_transaction",
    "compute_budget_snapshot",
    "compute_financial_health",
    "evaluate_purchase",
    "normalize_amount",
    "validate_budget_inputs",
]
