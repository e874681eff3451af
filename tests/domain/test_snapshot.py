"""Tests for the snapshot engine."""

from datetime import date, timedelta
from decimal import Decimal

from src.domain.constants import Category
from src.domain.models import (
    BudgetStatus,
    FixedCosts,
    PlannedItemData,
    TransactionData,
    VariableBudgets,
)
from src.domain.services.snapshot import (
    classify_status,
    compute_budget_snapshot,
    compute_weekly_discretionary_budget,
)


START = date(2025, 1, 6)
MID_SEMESTER = date(2025, 1, 27)
TOLERANCE = Decimal("0.000001")


def _tx(day: date, amount: str, category: Category) -> TransactionData:
    return TransactionData(date=day, amount=Decimal(amount), category=category)


def _item(name: str, day: date, amount: str) -> PlannedItemData:
    return PlannedItemData(name=name, date=day, amount=Decimal(amount))


def _mid_semester_plan(make_plan, starting_balance: str = "1000"):
    return make_plan(
        starting_balance=Decimal(starting_balance),
        grants=Decimal("2000"),
        loans=Decimal("0"),
        work_study_monthly=Decimal("433"),
        fixed_costs=FixedCosts(
            rent=Decimal("866"),
            utilities=Decimal("0"),
            subscriptions=Decimal("0"),
            transportation=Decimal("0"),
        ),
        variable_budgets=VariableBudgets(
            groceries=Decimal("50"),
            dining=Decimal("30"),
            entertainment=Decimal("20"),
            misc=Decimal("0"),
        ),
    )


MID_TRANSACTIONS = [
    _tx(date(2025, 1, 10), "60", Category.GROCERIES),
    _tx(date(2025, 1, 15), "200", Category.INCOME),
    _tx(date(2025, 1, 20), "40", Category.DINING),
    _tx(date(2025, 1, 25), "866", Category.RENT),
    _tx(date(2025, 1, 27), "25", Category.ENTERTAINMENT),
]

MID_PLANNED = [
    _item("Concert", date(2025, 1, 24), "50"),
    _item("Textbook", date(2025, 2, 1), "80"),
    _item("Spring break", date(2025, 3, 10), "700"),
]


def test_start_of_semester_scenario(make_plan) -> None:
    """Week zero with no activity keeps all funds and stays on track."""
    snapshot = compute_budget_snapshot(make_plan(), [], [], START)

    income_per_week = Decimal("600") / Decimal("4.33")
    assert snapshot.weeks_total == 16
    assert snapshot.weeks_elapsed == 0
    assert snapshot.remaining_funds_today == Decimal("8000")
    assert snapshot.expected_spend_to_date == Decimal("0")
    assert snapshot.actual_spend_to_date == Decimal("0")
    assert snapshot.status is BudgetStatus.ONTRACK
    assert snapshot.runway_date is None
    assert abs(
        snapshot.safe_to_spend_this_week - (Decimal("500") + income_per_week)
    ) < TOLERANCE
    assert snapshot.planned_next_7_days == ()
    assert snapshot.top_categories == ()


def test_future_planned_item_lowers_every_week(make_plan) -> None:
    """A planned trip is spread across all remaining weeks at once."""
    plan = make_plan()
    trip = [_item("Trip", START + timedelta(days=30), "2000")]

    baseline = compute_budget_snapshot(plan, [], [], START)
    with_trip = compute_budget_snapshot(plan, [], trip, START)

    assert with_trip.safe_to_spend_this_week < baseline.safe_to_spend_this_week
    reduction = (
        baseline.safe_to_spend_this_week - with_trip.safe_to_spend_this_week
    )
    assert abs(reduction - Decimal("125")) < TOLERANCE
    assert with_trip.remaining_funds_today == baseline.remaining_funds_today


def test_mid_semester_scenario(make_plan) -> None:
    """All snapshot figures for a hand-computed mid-semester state."""
    plan = _mid_semester_plan(make_plan)

    snapshot = compute_budget_snapshot(
        plan,
        MID_TRANSACTIONS,
        MID_PLANNED,
        MID_SEMESTER,
    )

    assert snapshot.weeks_total == 16
    assert snapshot.weeks_elapsed == 3
    assert snapshot.fixed_per_week == Decimal("200")
    assert snapshot.variable_weekly_total == Decimal("100")
    assert snapshot.expected_spend_to_date == Decimal("950")
    assert snapshot.actual_spend_to_date == Decimal("991")
    assert snapshot.remaining_funds_today == Decimal("2509")
    assert snapshot.ahead_behind == Decimal("-41")
    assert snapshot.status is BudgetStatus.ONTRACK
    assert snapshot.safe_to_spend_this_week == Decimal("8")
    assert snapshot.runway_date == date(2025, 3, 24)
    assert [item.name for item in snapshot.planned_next_7_days] == ["Textbook"]
    assert [
        (entry.category, entry.amount) for entry in snapshot.top_categories
    ] == [
        (Category.RENT, Decimal("866")),
        (Category.DINING, Decimal("40")),
        (Category.ENTERTAINMENT, Decimal("25")),
    ]


def test_runway_is_consistent_with_forward_simulation(make_plan) -> None:
    """Funds are positive before the runway week and exhausted on it."""
    plan = _mid_semester_plan(make_plan)
    snapshot = compute_budget_snapshot(
        plan,
        MID_TRANSACTIONS,
        MID_PLANNED,
        MID_SEMESTER,
    )
    burn = (
        snapshot.fixed_per_week
        + snapshot.variable_weekly_total
        - Decimal("433") / Decimal("4.33")
    )

    funds = snapshot.remaining_funds_today
    week_start = MID_SEMESTER
    while week_start < snapshot.runway_date:
        funds -= burn + sum(
            (
                item.amount
                for item in MID_PLANNED
                if item.date > MID_SEMESTER
                and week_start <= item.date < week_start + timedelta(days=7)
            ),
            Decimal("0"),
        )
        assert funds > 0
        week_start += timedelta(days=7)
    funds -= burn

    assert week_start == snapshot.runway_date
    assert funds <= 0


def test_snapshot_is_idempotent(make_plan) -> None:
    """Identical inputs and day yield identical snapshots."""
    plan = _mid_semester_plan(make_plan)

    first = compute_budget_snapshot(
        plan, MID_TRANSACTIONS, MID_PLANNED, MID_SEMESTER
    )
    second = compute_budget_snapshot(
        plan, MID_TRANSACTIONS, MID_PLANNED, MID_SEMESTER
    )

    assert first == second


def test_higher_starting_balance_never_lowers_outputs(make_plan) -> None:
    """Remaining funds and safe-to-spend are monotonic in the balance."""
    lower = compute_budget_snapshot(
        _mid_semester_plan(make_plan, "1000"),
        MID_TRANSACTIONS,
        MID_PLANNED,
        MID_SEMESTER,
    )
    higher = compute_budget_snapshot(
        _mid_semester_plan(make_plan, "1650"),
        MID_TRANSACTIONS,
        MID_PLANNED,
        MID_SEMESTER,
    )

    assert higher.remaining_funds_today == lower.remaining_funds_today + 650
    assert higher.safe_to_spend_this_week == Decimal("58")
    assert higher.safe_to_spend_this_week >= lower.safe_to_spend_this_week


def test_overspending_floors_safe_to_spend_at_zero(make_plan) -> None:
    """Safe-to-spend never goes negative."""
    spend = [_tx(START, "9000", Category.TRAVEL)]

    snapshot = compute_budget_snapshot(make_plan(), spend, [], START)

    assert snapshot.remaining_funds_today == Decimal("-1000")
    assert snapshot.safe_to_spend_this_week == Decimal("0")
    assert snapshot.runway_date == START


def test_spend_at_week_zero_is_behind(make_plan) -> None:
    """With nothing expected yet any spend trips the behind status."""
    spend = [_tx(START, "10", Category.DINING)]

    snapshot = compute_budget_snapshot(make_plan(), spend, [], START)

    assert snapshot.expected_spend_to_date == Decimal("0")
    assert snapshot.status is BudgetStatus.BEHIND


def test_status_band_is_five_percent_exclusive() -> None:
    """The classification boundary itself stays on track."""
    expected = Decimal("200")

    assert classify_status(Decimal("10"), expected) is BudgetStatus.ONTRACK
    assert classify_status(Decimal("10.01"), expected) is BudgetStatus.AHEAD
    assert classify_status(Decimal("-10"), expected) is BudgetStatus.ONTRACK
    assert classify_status(Decimal("-10.01"), expected) is BudgetStatus.BEHIND


def test_zero_expected_classifies_any_difference() -> None:
    """Both thresholds collapse to zero when nothing is expected."""
    zero = Decimal("0")

    assert classify_status(zero, zero) is BudgetStatus.ONTRACK
    assert classify_status(Decimal("0.01"), zero) is BudgetStatus.AHEAD
    assert classify_status(Decimal("-0.01"), zero) is BudgetStatus.BEHIND


def test_weekly_discretionary_budget_never_negative() -> None:
    """Committed costs beyond available funds floor the budget at zero."""
    budget = compute_weekly_discretionary_budget(
        Decimal("100"),
        Decimal("500"),
        Decimal("50"),
        Decimal("0"),
        4,
    )

    assert budget == Decimal("0")


def test_after_semester_end_reports_full_elapsed(make_plan) -> None:
    """A plan queried after its end has one remaining week and no runway."""
    snapshot = compute_budget_snapshot(
        make_plan(),
        [],
        [],
        START + timedelta(days=200),
    )

    assert snapshot.weeks_elapsed == 16
    assert snapshot.runway_date is None


def test_inverted_plan_dates_do_not_crash(make_plan) -> None:
    """End before start degrades to a one-week plan."""
    plan = make_plan(end_date=START - timedelta(days=10))

    snapshot = compute_budget_snapshot(plan, [], [], START)

    assert snapshot.weeks_total == 1
    assert snapshot.safe_to_spend_this_week >= 0
