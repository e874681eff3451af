"""Week arithmetic for semester plans."""

from dataclasses import dataclass
from datetime import date, timedelta


@dataclass(frozen=True)
class TimeWindows:
    """Plan-relative week counts for a given day.

    Attributes:
        total_days: Plan length in days, at least 1.
        weeks_total: Plan length in weeks, rounded up.
        elapsed_days: Days since the plan start, at least 0.
        weeks_elapsed: Completed weeks, capped at weeks_total.
        remaining_weeks: Weeks left, at least 1.
    """

    total_days: int
    weeks_total: int
    elapsed_days: int
    weeks_elapsed: int
    remaining_weeks: int


def compute_time_windows(
    start_date: date,
    end_date: date,
    today: date,
) -> TimeWindows:
    """Derive week counts for a plan on a given day.

    Args:
        start_date: First day of the plan.
        end_date: Last day of the plan.
        today: Day the windows are evaluated on.

    Returns:
        TimeWindows: Floored and clamped week counts.
    """
    total_days = max(1, (end_date - start_date).days)
    weeks_total = -(-total_days // 7)
    elapsed_days = max(0, (today - start_date).days)
    weeks_elapsed = min(elapsed_days // 7, weeks_total)
    remaining_weeks = max(1, weeks_total - weeks_elapsed)
    return TimeWindows(
        total_days=total_days,
        weeks_total=weeks_total,
        elapsed_days=elapsed_days,
        weeks_elapsed=weeks_elapsed,
        remaining_weeks=remaining_weeks,
    )


def calendar_week_bounds(today: date) -> tuple[date, date]:
    """Return the Monday and Sunday of the ISO week containing today."""
    monday = today - timedelta(days=today.weekday())
    return monday, monday + timedelta(days=6)


__all__ = ["TimeWindows", "compute_time_windows", "calendar_week_bounds"]
