"""Reconcile an actual payment against a loan's live balance.

The theoretical breakdown assumes on-schedule payments. Real loans drift
(extra or partial payments), so the split is clamped to the amount actually
paid and the new balance is floored at zero.
"""

from datetime import date
from decimal import Decimal

from vroom.config import settings
from vroom.engine.amortization import ZERO, calculate_payment_breakdown, to_currency
from vroom.models.loan import LoanTerms, PaymentType, RecordedPayment


def apply_payment(
    terms: LoanTerms,
    current_balance: Decimal,
    payments_made: int,
    payment_amount: Decimal,
    payment_date: date,
    payment_type: PaymentType = PaymentType.STANDARD,
) -> RecordedPayment:
    """Build the stored payment row for the next payment on a loan.

    On a 0% loan the whole payment reduces the balance. Otherwise the split
    follows the scheduled breakdown whatever ``payment_type`` is, so an
    overpayment only retires the scheduled principal share.

    Raises:
        ValueError: if the loan term has no payments left.
    """
    payment_number = payments_made + 1
    if payment_number > terms.term_months:
        raise ValueError(
            f"Loan term of {terms.term_months} months has no payments remaining"
        )

    if terms.apr == 0:
        # No interest accrues, so the whole payment goes to principal
        principal_amount = payment_amount
        interest_amount = ZERO
    else:
        breakdown = calculate_payment_breakdown(
            terms.principal, terms.apr, terms.term_months, payment_number
        )
        principal_amount = min(breakdown.principal_amount, payment_amount)
        interest_amount = min(breakdown.interest_amount, payment_amount)
    remaining = max(ZERO, current_balance - principal_amount)

    return RecordedPayment(
        payment_number=payment_number,
        payment_date=payment_date,
        payment_amount=to_currency(payment_amount),
        principal_amount=to_currency(principal_amount),
        interest_amount=to_currency(interest_amount),
        remaining_balance=to_currency(remaining),
        payment_type=payment_type,
        is_scheduled=False,
        is_paid_off=remaining <= settings.paid_off_threshold,
    )
