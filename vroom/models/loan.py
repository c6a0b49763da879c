from dataclasses import dataclass, field
from datetime import date
from decimal import Decimal
from enum import Enum


class PaymentType(Enum):
    STANDARD = "standard"
    EXTRA = "extra"
    CUSTOM_SPLIT = "custom-split"


class ExtraPaymentFrequency(Enum):
    MONTHLY = "monthly"
    YEARLY = "yearly"
    ONE_TIME = "one-time"


@dataclass(frozen=True)
class LoanTerms:
    principal: Decimal  # Amount financed
    apr: Decimal  # Percent, e.g. Decimal("4.5")
    term_months: int
    start_date: date  # First payment falls one month after this


@dataclass(frozen=True)
class AmortizationScheduleEntry:
    payment_number: int  # 1-based
    payment_date: date
    payment_amount: Decimal
    principal_amount: Decimal
    interest_amount: Decimal
    remaining_balance: Decimal  # After this payment


@dataclass(frozen=True)
class AmortizationAnalysis:
    monthly_payment: Decimal
    total_interest: Decimal
    total_cost: Decimal  # Principal + total interest
    total_payments: int
    payoff_date: date
    schedule: list[AmortizationScheduleEntry] = field(default_factory=list)


@dataclass(frozen=True)
class PaymentBreakdown:
    payment_number: int
    payment_amount: Decimal
    principal_amount: Decimal
    interest_amount: Decimal
    remaining_balance: Decimal  # Theoretical, assumes on-schedule payments


@dataclass(frozen=True)
class ExtraPaymentImpact:
    original: AmortizationAnalysis
    adjusted: AmortizationAnalysis
    interest_savings: Decimal
    months_saved: int


@dataclass(frozen=True)
class RecordedPayment:
    """An actual payment reconciled against a loan's live balance."""
    payment_number: int
    payment_date: date
    payment_amount: Decimal
    principal_amount: Decimal
    interest_amount: Decimal
    remaining_balance: Decimal
    payment_type: PaymentType = PaymentType.STANDARD
    is_scheduled: bool = False
    is_paid_off: bool = False


@dataclass(frozen=True)
class YearlyLoanSummary:
    year: int
    principal: Decimal
    interest: Decimal
    payments: Decimal
    ending_balance: Decimal
