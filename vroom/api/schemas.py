"""Pydantic schemas for API request/response models."""

from datetime import date
from decimal import Decimal

from pydantic import BaseModel, Field


# ---- Request schemas ----

class LoanTermsRequest(BaseModel):
    # No field bounds here; validate_loan_terms owns the loan rules
    principal: Decimal = Field(..., description="Amount financed")
    apr: Decimal = Field(..., description="Annual percentage rate, e.g. 4.5 for 4.5%")
    term_months: int = Field(..., description="Number of monthly payments")
    start_date: date = Field(..., description="Loan start; first payment is one month later")


class ScheduleRequest(LoanTermsRequest):
    include_yearly_summary: bool = False


class BreakdownRequest(LoanTermsRequest):
    payment_number: int = Field(..., description="1-based payment index")


class PaymentRequest(BaseModel):
    """Record an actual payment against a loan's live state."""
    terms: LoanTermsRequest
    current_balance: Decimal = Field(..., ge=0)
    payments_made: int = Field(0, ge=0)
    payment_amount: Decimal = Field(..., gt=0)
    payment_date: date
    payment_type: str = "standard"


class ExtraPaymentRequest(LoanTermsRequest):
    extra_amount: Decimal = Field(..., ge=0)
    frequency: str = "monthly"


# ---- Response schemas ----

class ValidationResponse(BaseModel):
    valid: bool
    errors: list[str] = []


class ScheduleEntryResponse(BaseModel):
    payment_number: int
    payment_date: date
    payment_amount: Decimal
    principal_amount: Decimal
    interest_amount: Decimal
    remaining_balance: Decimal


class YearlySummaryResponse(BaseModel):
    year: int
    principal: Decimal
    interest: Decimal
    payments: Decimal
    ending_balance: Decimal


class AnalysisResponse(BaseModel):
    monthly_payment: Decimal
    total_interest: Decimal
    total_cost: Decimal
    total_payments: int
    payoff_date: date
    schedule: list[ScheduleEntryResponse]
    yearly_summary: list[YearlySummaryResponse] | None = None


class BreakdownResponse(BaseModel):
    payment_number: int
    payment_amount: Decimal
    principal_amount: Decimal
    interest_amount: Decimal
    remaining_balance: Decimal


class RecordedPaymentResponse(BaseModel):
    payment_number: int
    payment_date: date
    payment_amount: Decimal
    principal_amount: Decimal
    interest_amount: Decimal
    remaining_balance: Decimal
    payment_type: str
    is_scheduled: bool
    is_paid_off: bool


class ExtraPaymentImpactResponse(BaseModel):
    original_monthly_payment: Decimal
    original_total_interest: Decimal
    original_total_payments: int
    original_payoff_date: date
    new_total_interest: Decimal
    new_total_payments: int
    new_payoff_date: date
    interest_savings: Decimal
    months_saved: int
