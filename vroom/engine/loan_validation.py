"""Loan terms validation.

Pure function: every rule is checked and each violation contributes one
message, so callers can report all problems at once. Never raises.
"""

from datetime import date
from decimal import Decimal, InvalidOperation

from dateutil.relativedelta import relativedelta

from vroom.models.loan import LoanTerms

MIN_APR = Decimal("0")
MAX_APR = Decimal("50")  # Sanity bound, not a regulatory cap
MIN_TERM_MONTHS = 1
MAX_TERM_MONTHS = 600  # 50 years


def _finite_decimal(value) -> Decimal | None:
    """Coerce to a finite Decimal, or None if that is not possible."""
    if value is None or isinstance(value, bool):
        return None
    try:
        d = value if isinstance(value, Decimal) else Decimal(str(value))
    except (InvalidOperation, ValueError, TypeError):
        return None
    return d if d.is_finite() else None


def _has_room_for_term(start: date, term_months: int) -> bool:
    """True if every payment date up to ``term_months`` is representable."""
    try:
        start + relativedelta(months=term_months)
    except (ValueError, OverflowError):
        return False
    return True


def validate_loan_terms(terms: LoanTerms) -> list[str]:
    """Return human-readable violations; an empty list means the terms are valid."""
    errors: list[str] = []

    principal = _finite_decimal(terms.principal)
    if principal is None or principal <= 0:
        errors.append("Principal amount must be greater than 0")

    apr = _finite_decimal(terms.apr)
    if apr is None or apr < MIN_APR or apr > MAX_APR:
        errors.append(f"APR must be between {MIN_APR} and {MAX_APR}")

    term = terms.term_months
    term_valid = (
        isinstance(term, int)
        and not isinstance(term, bool)
        and MIN_TERM_MONTHS <= term <= MAX_TERM_MONTHS
    )
    if not term_valid:
        errors.append(f"Term must be between {MIN_TERM_MONTHS} and {MAX_TERM_MONTHS} months")

    if terms.start_date is None:
        errors.append("Start date is required")
    elif not isinstance(terms.start_date, date) or not _has_room_for_term(
        terms.start_date, term if term_valid else MAX_TERM_MONTHS
    ):
        errors.append("Start date must be a valid date")

    return errors
