"""Domain models package."""

from .health import (
    EmergencyFund,
    EmergencyFundStatus,
    FinancialHealth,
    HealthLevel,
    IncomeFrequency,
    IncomeSource,
    IncomeType,
    LoanProjection,
)
from .plan import (
    BudgetInputs,
    FixedCosts,
    ImportedTransaction,
    PlanData,
    PlannedItemData,
    RawTransactionRow,
    TransactionData,
    VariableBudgets,
)
from .snapshot import (
    BudgetSnapshot,
    BudgetStatus,
    CategoryAmount,
    PlannedItemPreview,
    PurchaseEvaluation,
    PurchaseVerdict,
)

__all__ = [
    "BudgetInputs",
    "FixedCosts",
    "ImportedTransaction",
    "PlanData",
    "PlannedItemData",
    "RawTransactionRow",
    "TransactionData",
    "VariableBudgets",
    "BudgetSnapshot",
    "BudgetStatus",
    "CategoryAmount",
    "PlannedItemPreview",
    "PurchaseEvaluation",
    "PurchaseVerdict",
    "EmergencyFund",
    "EmergencyFundStatus",
    "FinancialHealth",
    "HealthLevel",
    "IncomeFrequency",
    "IncomeSource",
    "IncomeType",
    "LoanProjection",
]
