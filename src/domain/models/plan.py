"""Domain models for semester plan inputs."""

from dataclasses import dataclass
from datetime import date
from decimal import Decimal

from src.domain.constants import Category


@dataclass(frozen=True)
class FixedCosts:
    """Monthly fixed costs of a plan."""

    rent: Decimal
    utilities: Decimal
    subscriptions: Decimal
    transportation: Decimal

    @property
    def total(self) -> Decimal:
        """Return the sum of all monthly fixed costs."""
        return self.rent + self.utilities + self.subscriptions + self.transportation


@dataclass(frozen=True)
class VariableBudgets:
    """Weekly variable budgets of a plan."""

    groceries: Decimal
    dining: Decimal
    entertainment: Decimal
    misc: Decimal

    @property
    def total(self) -> Decimal:
        """Return the sum of all weekly variable budgets."""
        return self.groceries + self.dining + self.entertainment + self.misc


@dataclass(frozen=True)
class PlanData:
    """Semester-level financial plan.

    Attributes:
        start_date: First day of the semester.
        end_date: Last day of the semester.
        disbursement_date: Date aid is disbursed.
        starting_balance: Cash on hand at onboarding.
        grants: Grant and scholarship funding for the semester.
        loans: Loan funding for the semester.
        work_study_monthly: Monthly work-study income.
        other_income_monthly: Any other monthly income.
        fixed_costs: Monthly fixed costs.
        variable_budgets: Weekly variable budgets.
    """

    start_date: date
    end_date: date
    disbursement_date: date
    starting_balance: Decimal
    grants: Decimal
    loans: Decimal
    work_study_monthly: Decimal
    other_income_monthly: Decimal
    fixed_costs: FixedCosts
    variable_budgets: VariableBudgets


@dataclass(frozen=True)
class TransactionData:
    """Recorded money movement, positive amounts are spend."""

    date: date
    amount: Decimal
    category: Category


@dataclass(frozen=True)
class PlannedItemData:
    """One-off planned expense; negative amounts are credits."""

    name: str
    date: date
    amount: Decimal


@dataclass(frozen=True)
class BudgetInputs:
    """Point-in-time read of everything the snapshot engine needs."""

    plan: PlanData
    transactions: list[TransactionData]
    planned_items: list[PlannedItemData]


@dataclass(frozen=True)
class RawTransactionRow:
    """Uncategorized row handed over by a statement importer."""

    date: date
    description: str
    amount: Decimal


@dataclass(frozen=True)
class ImportedTransaction:
    """Normalized and categorized import row."""

    date: date
    description: str
    amount: Decimal
    category: Category

    def to_transaction_data(self) -> TransactionData:
        """Return the engine input for this row."""
        return TransactionData(
            date=self.date,
            amount=self.amount,
            category=self.category,
        )


__all__ = [
    "FixedCosts",
    "VariableBudgets",
    "PlanData",
    "TransactionData",
    "PlannedItemData",
    "BudgetInputs",
    "RawTransactionRow",
    "ImportedTransaction",
]
