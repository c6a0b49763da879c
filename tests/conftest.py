"""Canonical test fixtures used across loan tests.

Fixture: $20K car loan, 4.5% APR, 60 months, starting 2020-03-15.
"""

import pytest
from datetime import date
from decimal import Decimal

from vroom.models.loan import LoanTerms


@pytest.fixture
def car_loan() -> LoanTerms:
    """$20K at 4.5% over five years."""
    return LoanTerms(
        principal=Decimal("20000"),
        apr=Decimal("4.5"),
        term_months=60,
        start_date=date(2020, 3, 15),
    )


@pytest.fixture
def zero_apr_loan() -> LoanTerms:
    """Dealer 0% promo: $12K over 12 months."""
    return LoanTerms(
        principal=Decimal("12000"),
        apr=Decimal("0"),
        term_months=12,
        start_date=date(2023, 6, 1),
    )


@pytest.fixture
def long_loan() -> LoanTerms:
    """Worst case for accumulated error: 600 months at the APR ceiling."""
    return LoanTerms(
        principal=Decimal("87654.32"),
        apr=Decimal("50"),
        term_months=600,
        start_date=date(2000, 1, 31),
    )


@pytest.fixture
def car_loan_request() -> dict:
    return {
        "principal": "20000",
        "apr": "4.5",
        "term_months": 60,
        "start_date": "2020-03-15",
    }
