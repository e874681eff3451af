"""Domain models for income sources and financial health."""

from dataclasses import dataclass
from decimal import Decimal
from enum import Enum


class IncomeType(str, Enum):
    """Kind of funding behind an income source."""

    JOB = "job"
    SCHOLARSHIP = "scholarship"
    GRANT = "grant"
    LOAN = "loan"
    FAMILY = "family"
    WORK_STUDY = "work_study"
    OTHER = "other"


class IncomeFrequency(str, Enum):
    """How often an income source pays out."""

    ONE_TIME = "one_time"
    MONTHLY = "monthly"
    BIWEEKLY = "biweekly"
    WEEKLY = "weekly"
    SEMESTER = "semester"


class EmergencyFundStatus(str, Enum):
    """Progress bucket of the emergency fund."""

    NONE = "none"
    BUILDING = "building"
    PARTIAL = "partial"
    FUNDED = "funded"


class HealthLevel(str, Enum):
    """Qualitative band of the health score."""

    POOR = "poor"
    FAIR = "fair"
    GOOD = "good"
    EXCELLENT = "excellent"


@dataclass(frozen=True)
class IncomeSource:
    """Detailed income source recorded by the user."""

    type: IncomeType
    name: str
    amount: Decimal
    frequency: IncomeFrequency
    is_loan: bool = False


@dataclass(frozen=True)
class EmergencyFund:
    """Savings set aside for emergencies."""

    target_amount: Decimal
    current_amount: Decimal
    weekly_contribution: Decimal

    @property
    def percent_complete(self) -> Decimal:
        """Return progress toward the target as a percentage."""
        if self.target_amount <= 0:
            return Decimal("0")
        return self.current_amount / self.target_amount * 100


@dataclass(frozen=True)
class LoanProjection:
    """Projection of how much of the semester's loans can be repaid."""

    total_loan_amount: Decimal
    projected_savings: Decimal
    can_pay_back_this_semester: bool
    percent_payable: Decimal
    months_to_pay_off: Decimal
    message: str


@dataclass(frozen=True)
class FinancialHealth:
    """Aggregate financial health report.

    Attributes:
        total_loans: Loan funding for the remaining semester.
        total_grants: Grant funding for the remaining semester.
        total_scholarships: Scholarship funding for the remaining semester.
        total_job_income: Job and work-study income for the remaining semester.
        total_family_support: Family support for the remaining semester.
        total_income: Non-loan funding total.
        emergency_fund_status: Progress bucket of the emergency fund.
        emergency_fund: Emergency fund state, None when not set up.
        loan_repayment_projection: Loan projection, None without loans.
        weekly_income_rate: Recurring income per week.
        weekly_expense_rate: Fixed plus variable spend per week.
        net_weekly_cash_flow: Income rate minus expense rate.
        health_score: Score between 0 and 100.
        health_level: Band of the health score.
        tips: Up to three personalized tips.
    """

    total_loans: Decimal
    total_grants: Decimal
    total_scholarships: Decimal
    total_job_income: Decimal
    total_family_support: Decimal
    total_income: Decimal
    emergency_fund_status: EmergencyFundStatus
    emergency_fund: EmergencyFund | None
    loan_repayment_projection: LoanProjection | None
    weekly_income_rate: Decimal
    weekly_expense_rate: Decimal
    net_weekly_cash_flow: Decimal
    health_score: int
    health_level: HealthLevel
    tips: tuple[str, ...]


__all__ = [
    "IncomeType",
    "IncomeFrequency",
    "EmergencyFundStatus",
    "HealthLevel",
    "IncomeSource",
    "EmergencyFund",
    "LoanProjection",
    "FinancialHealth",
]
