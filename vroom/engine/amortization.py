"""Fixed-rate loan amortization and single-payment breakdowns.

Pure functions: Decimal in, dataclass out. No I/O.

Amounts carry full Decimal context precision between periods; round with
to_currency() only when presenting or storing a value. Callers are expected
to run validate_loan_terms() first; nothing here re-validates the terms.
"""

from collections.abc import Callable
from decimal import Decimal, ROUND_HALF_UP

from dateutil.relativedelta import relativedelta

from vroom.models.loan import (
    AmortizationAnalysis,
    AmortizationScheduleEntry,
    ExtraPaymentFrequency,
    ExtraPaymentImpact,
    LoanTerms,
    PaymentBreakdown,
    YearlyLoanSummary,
)

TWO_PLACES = Decimal("0.01")
ZERO = Decimal("0")


def to_currency(amount: Decimal) -> Decimal:
    """Round to cents. Presentation/storage boundary only."""
    return amount.quantize(TWO_PLACES, ROUND_HALF_UP)


def monthly_rate(apr: Decimal) -> Decimal:
    """Periodic rate for a percent APR (4.5 -> 0.00375)."""
    return Decimal(apr) / 100 / 12


def calculate_monthly_payment(principal: Decimal, apr: Decimal, term_months: int) -> Decimal:
    """Fixed monthly payment, unrounded."""
    principal = Decimal(principal)
    r = monthly_rate(apr)
    if r == 0:
        return principal / term_months

    # M = P * [r(1+r)^n] / [(1+r)^n - 1]
    factor = (1 + r) ** term_months
    return principal * r * factor / (factor - 1)


def _amortize(
    terms: LoanTerms,
    extra_principal: Callable[[int], Decimal] | None = None,
) -> AmortizationAnalysis:
    pmt = calculate_monthly_payment(terms.principal, terms.apr, terms.term_months)
    r = monthly_rate(terms.apr)

    schedule: list[AmortizationScheduleEntry] = []
    balance = Decimal(terms.principal)
    total_interest = ZERO

    for number in range(1, terms.term_months + 1):
        interest = balance * r
        extra = extra_principal(number) if extra_principal is not None else ZERO
        principal_paid = pmt - interest + extra
        payment = pmt + extra

        # The last payment takes whatever balance is left, so the loan closes at exactly zero
        if number == terms.term_months or principal_paid >= balance:
            principal_paid = balance
            payment = principal_paid + interest

        balance -= principal_paid
        total_interest += interest

        schedule.append(AmortizationScheduleEntry(
            payment_number=number,
            payment_date=terms.start_date + relativedelta(months=number),
            payment_amount=payment,
            principal_amount=principal_paid,
            interest_amount=interest,
            remaining_balance=balance,
        ))

        if balance == 0:
            break

    return AmortizationAnalysis(
        monthly_payment=pmt,
        total_interest=total_interest,
        total_cost=Decimal(terms.principal) + total_interest,
        total_payments=len(schedule),
        payoff_date=schedule[-1].payment_date if schedule else terms.start_date,
        schedule=schedule,
    )


def generate_amortization_schedule(terms: LoanTerms) -> AmortizationAnalysis:
    """Full payment-by-payment schedule for a fixed-rate loan.

    Produces exactly ``terms.term_months`` entries. Payment dates advance
    ``start_date`` by whole calendar months, clamping the day of month for
    short months (Jan 31 -> Feb 28/29).
    """
    return _amortize(terms)


def calculate_remaining_balance(
    principal: Decimal,
    apr: Decimal,
    term_months: int,
    payments_made: int,
) -> Decimal:
    """Balance left after ``payments_made`` on-schedule payments (closed form)."""
    principal = Decimal(principal)
    if payments_made >= term_months:
        return ZERO
    if payments_made <= 0:
        return principal

    pmt = calculate_monthly_payment(principal, apr, term_months)
    r = monthly_rate(apr)
    if r == 0:
        balance = principal - pmt * payments_made
    else:
        # B_k = P(1+r)^k - M[(1+r)^k - 1] / r
        growth = (1 + r) ** payments_made
        balance = principal * growth - pmt * (growth - 1) / r
    return max(ZERO, balance)


def calculate_payment_breakdown(
    principal: Decimal,
    apr: Decimal,
    term_months: int,
    payment_number: int,
) -> PaymentBreakdown:
    """Principal/interest split of one scheduled payment without building the schedule.

    Assumes every earlier payment was made exactly on schedule.

    Raises:
        ValueError: if ``payment_number`` is outside ``1..term_months``.
    """
    if not 1 <= payment_number <= term_months:
        raise ValueError(
            f"Payment number must be between 1 and {term_months}, got {payment_number}"
        )

    pmt = calculate_monthly_payment(principal, apr, term_months)
    balance_before = calculate_remaining_balance(principal, apr, term_months, payment_number - 1)

    interest = balance_before * monthly_rate(apr)
    principal_amount = min(pmt - interest, balance_before)

    return PaymentBreakdown(
        payment_number=payment_number,
        payment_amount=principal_amount + interest,
        principal_amount=principal_amount,
        interest_amount=interest,
        remaining_balance=max(ZERO, balance_before - principal_amount),
    )


def calculate_extra_payment_impact(
    terms: LoanTerms,
    extra_amount: Decimal,
    frequency: ExtraPaymentFrequency = ExtraPaymentFrequency.MONTHLY,
) -> ExtraPaymentImpact:
    """Compare the regular schedule with one that adds principal-only payments.

    monthly: extra with every payment. yearly: extra with every 12th payment.
    one-time: extra with the first payment only.
    """
    extra_amount = Decimal(extra_amount)
    if extra_amount < 0:
        raise ValueError("Extra payment amount cannot be negative")

    def extra_for(number: int) -> Decimal:
        if frequency is ExtraPaymentFrequency.MONTHLY:
            return extra_amount
        if frequency is ExtraPaymentFrequency.YEARLY:
            return extra_amount if number % 12 == 0 else ZERO
        return extra_amount if number == 1 else ZERO

    original = generate_amortization_schedule(terms)
    adjusted = _amortize(terms, extra_for)

    return ExtraPaymentImpact(
        original=original,
        adjusted=adjusted,
        interest_savings=original.total_interest - adjusted.total_interest,
        months_saved=original.total_payments - adjusted.total_payments,
    )


def yearly_loan_summary(analysis: AmortizationAnalysis) -> list[YearlyLoanSummary]:
    """Aggregate a schedule into loan years of 12 payments (last year may be short)."""
    yearly: list[YearlyLoanSummary] = []
    year_principal = ZERO
    year_interest = ZERO
    year_payments = ZERO

    for entry in analysis.schedule:
        year_principal += entry.principal_amount
        year_interest += entry.interest_amount
        year_payments += entry.payment_amount

        if entry.payment_number % 12 == 0 or entry.payment_number == len(analysis.schedule):
            yearly.append(YearlyLoanSummary(
                year=(entry.payment_number - 1) // 12 + 1,
                principal=year_principal,
                interest=year_interest,
                payments=year_payments,
                ending_balance=entry.remaining_balance,
            ))
            year_principal = ZERO
            year_interest = ZERO
            year_payments = ZERO

    return yearly
