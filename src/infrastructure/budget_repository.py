"""SQLAlchemy-backed repository for stored budget data."""

from collections.abc import Mapping
from dataclasses import fields
import json
from typing import Any, TypeVar

from sqlalchemy import text
from sqlalchemy.engine import Connection

from src.application.ports.budget_repository import BudgetRepositoryPort
from src.application.ports.database import DatabaseEnginePort
from src.domain.constants import Category
from src.domain.models import (
    BudgetInputs,
    EmergencyFund,
    FixedCosts,
    IncomeFrequency,
    IncomeSource,
    IncomeType,
    PlanData,
    PlannedItemData,
    TransactionData,
    VariableBudgets,
)
from src.utils.date_utils import coerce_date
from src.utils.decimal_utils import coerce_decimal


SELECT_PLAN_SQL = text(
    """
    SELECT start_date, end_date, disbursement_date, starting_balance,
           grants, loans, work_study_monthly, other_income_monthly,
           fixed_costs, variable_budgets
    FROM plans
    WHERE user_id = :user_id
    ORDER BY created_at DESC
    LIMIT 1
    """
)

SELECT_TRANSACTIONS_SQL = text(
    """
    SELECT date, amount, category
    FROM transactions
    WHERE user_id = :user_id
    ORDER BY date
    """
)

SELECT_PLANNED_ITEMS_SQL = text(
    """
    SELECT name, date, amount
    FROM planned_items
    WHERE user_id = :user_id
    ORDER BY date
    """
)

SELECT_INCOME_SOURCES_SQL = text(
    """
    SELECT type, name, amount, frequency, is_loan
    FROM income_sources
    WHERE user_id = :user_id
    ORDER BY name
    """
)

SELECT_EMERGENCY_FUND_SQL = text(
    """
    SELECT target_amount, current_amount, weekly_contribution
    FROM emergency_fund
    WHERE user_id = :user_id
    LIMIT 1
    """
)

_Group = TypeVar("_Group", FixedCosts, VariableBudgets)


def parse_amount_group(raw: Any, group_type: type[_Group]) -> _Group:
    """Deserialize a stored JSON blob into a fixed-field amount group.

    Args:
        raw: JSON text or an already decoded mapping.
        group_type: FixedCosts or VariableBudgets.

    Returns:
        FixedCosts | VariableBudgets: Parsed group with Decimal amounts.

    Raises:
        ValueError: If the blob is not a JSON object or misses fields.
    """
    payload = json.loads(raw) if isinstance(raw, (str, bytes)) else raw
    if not isinstance(payload, Mapping):
        raise ValueError(
            f"{group_type.__name__} must be a JSON object, got {type(payload).__name__}"
        )
    names = [field.name for field in fields(group_type)]
    missing = [name for name in names if payload.get(name) is None]
    if missing:
        raise ValueError(
            f"Missing {group_type.__name__} fields: {', '.join(missing)}"
        )
    return group_type(**{name: coerce_decimal(payload[name]) for name in names})


class SqlAlchemyBudgetRepository(BudgetRepositoryPort):
    """Repository backed by SQLAlchemy for plans and their records."""

    def __init__(self, db_port: DatabaseEnginePort) -> None:
        """Initialize the repository.

        Args:
            db_port: Port providing access to the budget engine.
        """
        self._db_port = db_port

    def fetch_budget_inputs(self, user_id: str) -> BudgetInputs | None:
        """Return the latest plan, transactions and planned items.

        All three reads share one transaction so they describe the same
        point in time.
        """
        engine = self._db_port.get_engine()
        with engine.connect() as conn, conn.begin():
            plan = self._fetch_plan(conn, user_id)
            if plan is None:
                return None
            transactions = self._fetch_transactions(conn, user_id)
            planned_items = self._fetch_planned_items(conn, user_id)
        return BudgetInputs(
            plan=plan,
            transactions=transactions,
            planned_items=planned_items,
        )

    def fetch_income_sources(self, user_id: str) -> list[IncomeSource]:
        engine = self._db_port.get_engine()
        with engine.connect() as conn:
            rows = conn.execute(
                SELECT_INCOME_SOURCES_SQL,
                {"user_id": user_id},
            ).all()
        return [
            IncomeSource(
                type=IncomeType(row.type),
                name=row.name,
                amount=coerce_decimal(row.amount),
                frequency=IncomeFrequency(row.frequency),
                is_loan=bool(row.is_loan),
            )
            for row in rows
        ]

    def fetch_emergency_fund(self, user_id: str) -> EmergencyFund | None:
        engine = self._db_port.get_engine()
        with engine.connect() as conn:
            row = conn.execute(
                SELECT_EMERGENCY_FUND_SQL,
                {"user_id": user_id},
            ).first()
        if row is None:
            return None
        return EmergencyFund(
            target_amount=coerce_decimal(row.target_amount),
            current_amount=coerce_decimal(row.current_amount),
            weekly_contribution=coerce_decimal(row.weekly_contribution),
        )

    @staticmethod
    def _fetch_plan(conn: Connection, user_id: str) -> PlanData | None:
        row = conn.execute(SELECT_PLAN_SQL, {"user_id": user_id}).first()
        if row is None:
            return None
        return PlanData(
            start_date=coerce_date(row.start_date),
            end_date=coerce_date(row.end_date),
            disbursement_date=coerce_date(row.disbursement_date),
            starting_balance=coerce_decimal(row.starting_balance),
            grants=coerce_decimal(row.grants),
            loans=coerce_decimal(row.loans),
            work_study_monthly=coerce_decimal(row.work_study_monthly),
            other_income_monthly=coerce_decimal(row.other_income_monthly),
            fixed_costs=parse_amount_group(row.fixed_costs, FixedCosts),
            variable_budgets=parse_amount_group(
                row.variable_budgets,
                VariableBudgets,
            ),
        )

    @staticmethod
    def _fetch_transactions(
        conn: Connection,
        user_id: str,
    ) -> list[TransactionData]:
        rows = conn.execute(SELECT_TRANSACTIONS_SQL, {"user_id": user_id}).all()
        return [
            TransactionData(
                date=coerce_date(row.date),
                amount=coerce_decimal(row.amount),
                category=Category(row.category),
            )
            for row in rows
        ]

    @staticmethod
    def _fetch_planned_items(
        conn: Connection,
        user_id: str,
    ) -> list[PlannedItemData]:
        rows = conn.execute(SELECT_PLANNED_ITEMS_SQL, {"user_id": user_id}).all()
        return [
            PlannedItemData(
                name=row.name,
                date=coerce_date(row.date),
                amount=coerce_decimal(row.amount),
            )
            for row in rows
        ]


__all__ = ["SqlAlchemyBudgetRepository", "parse_amount_group"]
