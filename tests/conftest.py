"""Shared fixtures for budget engine tests."""

from datetime import date, timedelta
from decimal import Decimal

import pytest

from src.domain.models import FixedCosts, PlanData, VariableBudgets


SEMESTER_START = date(2025, 1, 6)
SEMESTER_END = SEMESTER_START + timedelta(days=112)


def _zero_fixed() -> FixedCosts:
    return FixedCosts(
        rent=Decimal("0"),
        utilities=Decimal("0"),
        subscriptions=Decimal("0"),
        transportation=Decimal("0"),
    )


def _zero_variable() -> VariableBudgets:
    return VariableBudgets(
        groceries=Decimal("0"),
        dining=Decimal("0"),
        entertainment=Decimal("0"),
        misc=Decimal("0"),
    )


@pytest.fixture
def make_plan():
    """Return a factory for 16-week plans starting Monday 2025-01-06."""

    def _make_plan(**overrides) -> PlanData:
        values = {
            "start_date": SEMESTER_START,
            "end_date": SEMESTER_END,
            "disbursement_date": SEMESTER_START,
            "starting_balance": Decimal("2000"),
            "grants": Decimal("3500"),
            "loans": Decimal("2500"),
            "work_study_monthly": Decimal("600"),
            "other_income_monthly": Decimal("0"),
            "fixed_costs": _zero_fixed(),
            "variable_budgets": _zero_variable(),
        }
        values.update(overrides)
        return PlanData(**values)

    return _make_plan
