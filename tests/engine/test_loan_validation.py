from dataclasses import replace
from datetime import date
from decimal import Decimal

import pytest

from vroom.engine.loan_validation import validate_loan_terms
from vroom.models.loan import LoanTerms


class TestValidLoanTerms:
    def test_known_good_terms(self, car_loan):
        assert validate_loan_terms(car_loan) == []

    @pytest.mark.parametrize("apr", ["0", "50", "0.01", "49.99"])
    def test_apr_bounds_inclusive(self, car_loan, apr):
        assert validate_loan_terms(replace(car_loan, apr=Decimal(apr))) == []

    @pytest.mark.parametrize("term", [1, 600])
    def test_term_bounds_inclusive(self, car_loan, term):
        assert validate_loan_terms(replace(car_loan, term_months=term)) == []


class TestPrincipal:
    @pytest.mark.parametrize("principal", [Decimal("0"), Decimal("-500"), None, Decimal("NaN"), Decimal("Infinity")])
    def test_rejected(self, car_loan, principal):
        errors = validate_loan_terms(replace(car_loan, principal=principal))
        assert errors == ["Principal amount must be greater than 0"]


class TestAPR:
    @pytest.mark.parametrize("apr", [Decimal("-0.01"), Decimal("50.01"), Decimal("120"), None, Decimal("NaN")])
    def test_rejected(self, car_loan, apr):
        errors = validate_loan_terms(replace(car_loan, apr=apr))
        assert errors == ["APR must be between 0 and 50"]


class TestTerm:
    @pytest.mark.parametrize("term", [0, -12, 601, None, 12.5, True])
    def test_rejected(self, car_loan, term):
        errors = validate_loan_terms(replace(car_loan, term_months=term))
        assert errors == ["Term must be between 1 and 600 months"]


class TestStartDate:
    def test_missing(self, car_loan):
        errors = validate_loan_terms(replace(car_loan, start_date=None))
        assert errors == ["Start date is required"]

    def test_not_a_date(self, car_loan):
        errors = validate_loan_terms(replace(car_loan, start_date="2020-02-30"))
        assert errors == ["Start date must be a valid date"]

    def test_last_payment_past_calendar_end(self, car_loan):
        terms = replace(car_loan, term_months=12, start_date=date(9999, 6, 1))
        errors = validate_loan_terms(terms)
        assert errors == ["Start date must be a valid date"]

    def test_last_payment_on_final_calendar_year(self, car_loan):
        terms = replace(car_loan, term_months=12, start_date=date(9998, 12, 31))
        assert validate_loan_terms(terms) == []

    def test_late_start_checked_against_longest_term(self, car_loan):
        # An invalid term falls back to the 600-month ceiling for the date check
        terms = replace(car_loan, term_months=0, start_date=date(9990, 1, 1))
        errors = validate_loan_terms(terms)
        assert "Start date must be a valid date" in errors


class TestAllViolationsReported:
    def test_every_rule_runs(self):
        terms = LoanTerms(
            principal=Decimal("0"),
            apr=Decimal("-1"),
            term_months=0,
            start_date=None,
        )
        errors = validate_loan_terms(terms)
        assert len(errors) == 4

    def test_does_not_raise_on_garbage(self):
        terms = LoanTerms(principal="abc", apr=object(), term_months="60", start_date=date(2020, 1, 1))
        errors = validate_loan_terms(terms)
        assert len(errors) == 3
