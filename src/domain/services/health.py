"""Financial health scoring from income sources and a budget snapshot."""

from collections.abc import Sequence
from decimal import ROUND_CEILING, ROUND_HALF_UP, Decimal

from src.domain.constants import WEEKS_PER_MONTH, WEEKS_PER_SEMESTER
from src.domain.models import (
    BudgetSnapshot,
    EmergencyFund,
    EmergencyFundStatus,
    FinancialHealth,
    HealthLevel,
    IncomeFrequency,
    IncomeSource,
    IncomeType,
    LoanProjection,
    PlanData,
)


MAX_TIPS = 3
MAX_MONTHS_TO_PAY_OFF = Decimal("120")
UNPAYABLE_MONTHS = Decimal("999")

_ZERO = Decimal("0")
_JOB_TYPES = (IncomeType.JOB, IncomeType.WORK_STUDY)


def _whole(value: Decimal) -> Decimal:
    return value.quantize(Decimal("1"), rounding=ROUND_HALF_UP)


def weekly_income_rate(amount: Decimal, frequency: IncomeFrequency) -> Decimal:
    """Return the weekly rate of a recurring income; one-time income is 0."""
    if frequency is IncomeFrequency.WEEKLY:
        return amount
    if frequency is IncomeFrequency.BIWEEKLY:
        return amount / 2
    if frequency is IncomeFrequency.MONTHLY:
        return amount / WEEKS_PER_MONTH
    if frequency is IncomeFrequency.SEMESTER:
        return amount / WEEKS_PER_SEMESTER
    return _ZERO


def semester_income_total(
    amount: Decimal,
    frequency: IncomeFrequency,
    weeks_remaining: int,
) -> Decimal:
    """Return what an income source pays over the remaining weeks."""
    if frequency in (IncomeFrequency.SEMESTER, IncomeFrequency.ONE_TIME):
        return amount
    return weekly_income_rate(amount, frequency) * weeks_remaining


def classify_emergency_fund(
    emergency_fund: EmergencyFund | None,
) -> EmergencyFundStatus:
    """Bucket emergency fund progress."""
    if emergency_fund is None:
        return EmergencyFundStatus.NONE
    percent = emergency_fund.percent_complete
    if percent >= 100:
        return EmergencyFundStatus.FUNDED
    if percent >= 50:
        return EmergencyFundStatus.PARTIAL
    if percent > 0 or emergency_fund.weekly_contribution > 0:
        return EmergencyFundStatus.BUILDING
    return EmergencyFundStatus.NONE


def compute_health_score(
    emergency_fund_percent: Decimal,
    loan_to_income_ratio: Decimal,
    net_weekly_cash_flow: Decimal,
    has_emergency_fund: bool,
) -> int:
    """Score financial health between 0 and 100.

    Args:
        emergency_fund_percent: Emergency fund progress percentage.
        loan_to_income_ratio: Loans divided by non-loan funding.
        net_weekly_cash_flow: Weekly income minus weekly expenses.
        has_emergency_fund: Whether an emergency fund is set up.

    Returns:
        int: Rounded and clamped score.
    """
    score = Decimal("50")
    if has_emergency_fund:
        score += min(Decimal("25"), emergency_fund_percent * Decimal("0.25"))
    if net_weekly_cash_flow > 0:
        score += min(Decimal("25"), net_weekly_cash_flow * Decimal("0.5"))
    else:
        score += max(Decimal("-25"), net_weekly_cash_flow * Decimal("0.5"))
    if loan_to_income_ratio < Decimal("0.3"):
        score += 10
    elif loan_to_income_ratio > Decimal("0.5"):
        score -= min(
            Decimal("25"),
            (loan_to_income_ratio - Decimal("0.5")) * 50,
        )
    return max(0, min(100, int(_whole(score))))


def classify_health_level(health_score: int) -> HealthLevel:
    """Map a health score to its band."""
    if health_score >= 80:
        return HealthLevel.EXCELLENT
    if health_score >= 60:
        return HealthLevel.GOOD
    if health_score >= 40:
        return HealthLevel.FAIR
    return HealthLevel.POOR


def project_loan_repayment(
    total_loans: Decimal,
    net_weekly_cash_flow: Decimal,
    weeks_remaining: int,
) -> LoanProjection | None:
    """Project how much of the loans the current cash flow can repay.

    Args:
        total_loans: Loan funding for the semester.
        net_weekly_cash_flow: Weekly income minus weekly expenses.
        weeks_remaining: Weeks left in the semester.

    Returns:
        LoanProjection | None: Projection, or None without loans.
    """
    if total_loans <= 0:
        return None
    projected_savings = max(_ZERO, net_weekly_cash_flow * weeks_remaining)
    percent_payable = projected_savings / total_loans * 100
    can_pay_back = projected_savings >= total_loans

    monthly_net_income = net_weekly_cash_flow * WEEKS_PER_MONTH
    if monthly_net_income > 0:
        months_to_pay_off = (
            ((total_loans - projected_savings) / monthly_net_income).quantize(
                Decimal("1"),
                rounding=ROUND_CEILING,
            )
            + Decimal(weeks_remaining) / WEEKS_PER_MONTH
        )
    else:
        months_to_pay_off = UNPAYABLE_MONTHS

    savings = _whole(projected_savings)
    percent = _whole(percent_payable)
    if can_pay_back:
        message = (
            f"Great news! At your current pace, you'll save ${savings} by "
            "semester end, enough to pay off all your loans this semester!"
        )
    elif percent_payable >= 50:
        message = (
            f"You're on track to save ${savings} by semester end. "
            f"That's {percent}% of your loan balance!"
        )
    elif percent_payable > 0:
        message = (
            f"At your current pace, you'll save ${savings} by semester end "
            f"({percent}% of your loans). Consider increasing income or "
            "reducing expenses."
        )
    else:
        message = (
            f"You've taken ${_whole(total_loans)} in loans this semester. "
            "Building positive cash flow will help you pay them back after "
            "graduation."
        )

    return LoanProjection(
        total_loan_amount=total_loans,
        projected_savings=projected_savings,
        can_pay_back_this_semester=can_pay_back,
        percent_payable=percent_payable,
        months_to_pay_off=min(months_to_pay_off, MAX_MONTHS_TO_PAY_OFF),
        message=message,
    )


def generate_tips(
    emergency_fund: EmergencyFund | None,
    total_loans: Decimal,
    net_weekly_cash_flow: Decimal,
    has_job_income: bool,
) -> tuple[str, ...]:
    """Return up to three tips, emergency fund first."""
    tips: list[str] = []

    if emergency_fund is None or emergency_fund.current_amount == 0:
        tips.append(
            "Start building an emergency fund! Even $25/week adds up to $400 "
            "by semester end."
        )
    elif emergency_fund.percent_complete < 50:
        remaining = emergency_fund.target_amount - emergency_fund.current_amount
        tips.append(
            f"You're {_whole(emergency_fund.percent_complete)}% to your "
            f"emergency fund goal! Just ${_whole(remaining)} to go."
        )
    elif emergency_fund.percent_complete >= 100:
        tips.append(
            "Your emergency fund is fully funded! Great job protecting "
            "yourself."
        )

    if total_loans > 0 and net_weekly_cash_flow > 0:
        tips.append(
            "You're saving money! Consider putting some toward loans to "
            "reduce future interest."
        )
    elif total_loans > 0:
        tips.append(
            "Track your loan interest rates and focus on paying the highest "
            "rates first after graduation."
        )

    if not has_job_income:
        tips.append(
            "Consider a part-time campus job for extra income. Even 10 "
            "hours/week helps!"
        )

    if net_weekly_cash_flow < 0:
        tips.append(
            "You're spending more than your income. Review your variable "
            "spending categories."
        )
    elif net_weekly_cash_flow > 100:
        tips.append(
            "Great cash flow! You're building financial runway for the future."
        )

    return tuple(tips[:MAX_TIPS])


def compute_financial_health(
    income_sources: Sequence[IncomeSource],
    emergency_fund: EmergencyFund | None,
    plan: PlanData | None,
    snapshot: BudgetSnapshot | None,
) -> FinancialHealth:
    """Build the financial health report.

    Plan-level grants, loans and monthly income are only used when the user
    has not recorded any detailed income sources.

    Args:
        income_sources: Detailed income sources.
        emergency_fund: Emergency fund state, if any.
        plan: Latest plan, if any.
        snapshot: Budget snapshot of the plan, if any.

    Returns:
        FinancialHealth: Aggregated report.
    """
    if snapshot is not None and snapshot.weeks_total:
        weeks_remaining = snapshot.weeks_total - snapshot.weeks_elapsed
    else:
        weeks_remaining = WEEKS_PER_SEMESTER

    totals = {income_type: _ZERO for income_type in IncomeType}
    weekly_rate = _ZERO
    for source in income_sources:
        totals[source.type] += semester_income_total(
            source.amount,
            source.frequency,
            weeks_remaining,
        )
        if source.type is not IncomeType.LOAN:
            weekly_rate += weekly_income_rate(source.amount, source.frequency)

    total_loans = totals[IncomeType.LOAN]
    total_grants = totals[IncomeType.GRANT]
    if not income_sources and plan is not None:
        total_grants += plan.grants
        total_loans += plan.loans
        weekly_rate += (
            plan.work_study_monthly + plan.other_income_monthly
        ) / WEEKS_PER_MONTH

    total_scholarships = totals[IncomeType.SCHOLARSHIP]
    total_job_income = totals[IncomeType.JOB] + totals[IncomeType.WORK_STUDY]
    total_family_support = totals[IncomeType.FAMILY]
    total_income = (
        total_grants + total_scholarships + total_job_income + total_family_support
    )

    if snapshot is not None:
        weekly_expense_rate = (
            snapshot.fixed_per_week + snapshot.variable_weekly_total
        )
    else:
        weekly_expense_rate = _ZERO
    net_weekly_cash_flow = weekly_rate - weekly_expense_rate

    loan_to_income_ratio = (
        total_loans / total_income if total_income > 0 else _ZERO
    )
    health_score = compute_health_score(
        emergency_fund.percent_complete if emergency_fund else _ZERO,
        loan_to_income_ratio,
        net_weekly_cash_flow,
        emergency_fund is not None,
    )
    has_job_income = any(source.type in _JOB_TYPES for source in income_sources)

    return FinancialHealth(
        total_loans=total_loans,
        total_grants=total_grants,
        total_scholarships=total_scholarships,
        total_job_income=total_job_income,
        total_family_support=total_family_support,
        total_income=total_income,
        emergency_fund_status=classify_emergency_fund(emergency_fund),
        emergency_fund=emergency_fund,
        loan_repayment_projection=project_loan_repayment(
            total_loans,
            net_weekly_cash_flow,
            weeks_remaining,
        ),
        weekly_income_rate=weekly_rate,
        weekly_expense_rate=weekly_expense_rate,
        net_weekly_cash_flow=net_weekly_cash_flow,
        health_score=health_score,
        health_level=classify_health_level(health_score),
        tips=generate_tips(
            emergency_fund,
            total_loans,
            net_weekly_cash_flow,
            has_job_income,
        ),
    )


__all__ = [
    "weekly_income_rate",
    "semester_income_total",
    "classify_emergency_fund",
    "compute_health_score",
    "classify_health_level",
    "project_loan_repayment",
    "generate_tips",
    "compute_financial_health",
]
