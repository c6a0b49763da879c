"""Loan routes: validation, amortization schedules and payment breakdowns.

Stateless: callers send the loan terms (and live balance where needed) and
persist whatever they keep.
"""

import logging

from fastapi import APIRouter, HTTPException

from vroom.api.schemas import (
    AnalysisResponse,
    BreakdownRequest,
    BreakdownResponse,
    ExtraPaymentImpactResponse,
    ExtraPaymentRequest,
    LoanTermsRequest,
    PaymentRequest,
    RecordedPaymentResponse,
    ScheduleEntryResponse,
    ScheduleRequest,
    ValidationResponse,
    YearlySummaryResponse,
)
from vroom.engine.amortization import (
    calculate_extra_payment_impact,
    calculate_payment_breakdown,
    generate_amortization_schedule,
    to_currency,
    yearly_loan_summary,
)
from vroom.engine.loan_validation import validate_loan_terms
from vroom.engine.payments import apply_payment
from vroom.models.loan import (
    AmortizationAnalysis,
    ExtraPaymentFrequency,
    LoanTerms,
    PaymentType,
)

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/v1/loans", tags=["loans"])


def _to_terms(req: LoanTermsRequest) -> LoanTerms:
    return LoanTerms(
        principal=req.principal,
        apr=req.apr,
        term_months=req.term_months,
        start_date=req.start_date,
    )


def _validated_terms(req: LoanTermsRequest) -> LoanTerms:
    """Build LoanTerms, raising a 400 listing every violation."""
    terms = _to_terms(req)
    errors = validate_loan_terms(terms)
    if errors:
        logger.info("Rejected loan terms: %s", "; ".join(errors))
        raise HTTPException(
            status_code=400,
            detail={"message": "Invalid loan terms", "errors": errors},
        )
    return terms


def _analysis_to_response(
    analysis: AmortizationAnalysis,
    include_yearly_summary: bool = False,
) -> AnalysisResponse:
    """Convert engine analysis to API response, rounding to cents."""
    schedule = [
        ScheduleEntryResponse(
            payment_number=e.payment_number,
            payment_date=e.payment_date,
            payment_amount=to_currency(e.payment_amount),
            principal_amount=to_currency(e.principal_amount),
            interest_amount=to_currency(e.interest_amount),
            remaining_balance=to_currency(e.remaining_balance),
        )
        for e in analysis.schedule
    ]

    yearly = None
    if include_yearly_summary:
        yearly = [
            YearlySummaryResponse(
                year=y.year,
                principal=to_currency(y.principal),
                interest=to_currency(y.interest),
                payments=to_currency(y.payments),
                ending_balance=to_currency(y.ending_balance),
            )
            for y in yearly_loan_summary(analysis)
        ]

    return AnalysisResponse(
        monthly_payment=to_currency(analysis.monthly_payment),
        total_interest=to_currency(analysis.total_interest),
        total_cost=to_currency(analysis.total_cost),
        total_payments=analysis.total_payments,
        payoff_date=analysis.payoff_date,
        schedule=schedule,
        yearly_summary=yearly,
    )


@router.post("/validate", response_model=ValidationResponse)
async def validate(req: LoanTermsRequest):
    """Check loan terms without computing anything."""
    errors = validate_loan_terms(_to_terms(req))
    return ValidationResponse(valid=not errors, errors=errors)


@router.post("/schedule", response_model=AnalysisResponse)
async def schedule(req: ScheduleRequest):
    """Full amortization schedule with summary totals."""
    terms = _validated_terms(req)
    analysis = generate_amortization_schedule(terms)
    return _analysis_to_response(analysis, include_yearly_summary=req.include_yearly_summary)


@router.post("/breakdown", response_model=BreakdownResponse)
async def breakdown(req: BreakdownRequest):
    """Principal/interest split for one scheduled payment."""
    terms = _validated_terms(req)
    try:
        b = calculate_payment_breakdown(
            terms.principal, terms.apr, terms.term_months, req.payment_number
        )
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))

    return BreakdownResponse(
        payment_number=b.payment_number,
        payment_amount=to_currency(b.payment_amount),
        principal_amount=to_currency(b.principal_amount),
        interest_amount=to_currency(b.interest_amount),
        remaining_balance=to_currency(b.remaining_balance),
    )


@router.post("/payment", response_model=RecordedPaymentResponse, status_code=201)
async def record_payment(req: PaymentRequest):
    """Reconcile an actual payment against the loan's live balance."""
    terms = _validated_terms(req.terms)
    try:
        payment = apply_payment(
            terms,
            current_balance=req.current_balance,
            payments_made=req.payments_made,
            payment_amount=req.payment_amount,
            payment_date=req.payment_date,
            payment_type=PaymentType(req.payment_type),
        )
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))

    if payment.is_paid_off:
        logger.info("Loan paid off with payment %d on %s", payment.payment_number, payment.payment_date)

    return RecordedPaymentResponse(
        payment_number=payment.payment_number,
        payment_date=payment.payment_date,
        payment_amount=payment.payment_amount,
        principal_amount=payment.principal_amount,
        interest_amount=payment.interest_amount,
        remaining_balance=payment.remaining_balance,
        payment_type=payment.payment_type.value,
        is_scheduled=payment.is_scheduled,
        is_paid_off=payment.is_paid_off,
    )


@router.post("/extra-payment-impact", response_model=ExtraPaymentImpactResponse)
async def extra_payment_impact(req: ExtraPaymentRequest):
    """Interest and time saved by adding principal-only payments."""
    terms = _validated_terms(req)
    try:
        frequency = ExtraPaymentFrequency(req.frequency)
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))

    impact = calculate_extra_payment_impact(terms, req.extra_amount, frequency)
    original, adjusted = impact.original, impact.adjusted

    return ExtraPaymentImpactResponse(
        original_monthly_payment=to_currency(original.monthly_payment),
        original_total_interest=to_currency(original.total_interest),
        original_total_payments=original.total_payments,
        original_payoff_date=original.payoff_date,
        new_total_interest=to_currency(adjusted.total_interest),
        new_total_payments=adjusted.total_payments,
        new_payoff_date=adjusted.payoff_date,
        interest_savings=to_currency(impact.interest_savings),
        months_saved=impact.months_saved,
    )
