"""Tests for plan week arithmetic."""

from datetime import date, timedelta

from src.domain.services.time_windows import (
    calendar_week_bounds,
    compute_time_windows,
)


START = date(2025, 1, 6)


def test_sixteen_week_plan_at_start() -> None:
    """A 112-day plan has 16 weeks and none elapsed on day one."""
    windows = compute_time_windows(START, START + timedelta(days=112), START)

    assert windows.total_days == 112
    assert windows.weeks_total == 16
    assert windows.weeks_elapsed == 0
    assert windows.remaining_weeks == 16


def test_partial_week_rounds_total_up_and_elapsed_down() -> None:
    """Total weeks use ceiling, elapsed weeks use floor."""
    windows = compute_time_windows(
        START,
        START + timedelta(days=113),
        START + timedelta(days=20),
    )

    assert windows.weeks_total == 17
    assert windows.weeks_elapsed == 2
    assert windows.remaining_weeks == 15


def test_end_before_start_floors_total_days() -> None:
    """Inverted plans still have one day and one remaining week."""
    windows = compute_time_windows(START, START - timedelta(days=10), START)

    assert windows.total_days == 1
    assert windows.weeks_total == 1
    assert windows.remaining_weeks == 1


def test_after_end_clamps_elapsed_weeks() -> None:
    """Queries after the plan end report all weeks elapsed."""
    windows = compute_time_windows(
        START,
        START + timedelta(days=112),
        START + timedelta(days=200),
    )

    assert windows.elapsed_days == 200
    assert windows.weeks_elapsed == 16
    assert windows.remaining_weeks == 1


def test_before_start_has_no_elapsed_days() -> None:
    """Days before the plan start count as zero elapsed."""
    windows = compute_time_windows(
        START,
        START + timedelta(days=112),
        START - timedelta(days=5),
    )

    assert windows.elapsed_days == 0
    assert windows.weeks_elapsed == 0


def test_calendar_week_bounds_are_monday_to_sunday() -> None:
    """Every day of an ISO week maps to the same Monday and Sunday."""
    expected = (date(2025, 1, 6), date(2025, 1, 12))

    assert calendar_week_bounds(date(2025, 1, 6)) == expected
    assert calendar_week_bounds(date(2025, 1, 8)) == expected
    assert calendar_week_bounds(date(2025, 1, 12)) == expected
    assert calendar_week_bounds(date(2025, 1, 13))[0] == date(2025, 1, 13)
