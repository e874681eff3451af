"""Domain services package."""

from .cashflow import WeeklyRates, compute_weekly_rates
from .categorization import (
    AmountConvention,
    categorize_transaction,
    normalize_amount,
)
from .health import compute_financial_health
from .purchase import evaluate_purchase
from .runway import simulate_runway
from .snapshot import compute_budget_snapshot
from .time_windows import (
    TimeWindows,
    calendar_week_bounds,
    compute_time_windows,
)
from .validation import validate_budget_inputs

__all__ = [
    "AmountConvention",
    "TimeWindows",
    "WeeklyRates",
    "calendar_week_bounds",
    "categorize_transaction",
    "compute_budget_snapshot",
    "compute_financial_health",
    "compute_time_windows",
    "compute_weekly_rates",
    "evaluate_purchase",
    "normalize_amount",
    "simulate_runway",
    "validate_budget_inputs",
]
