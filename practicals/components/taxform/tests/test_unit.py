"""
Tax form component unit tests.
"""

from __future__ import annotations

from datetime import date, datetime

import pytest

from practicals.adapters.clock import FixedClock
from practicals.components.taxform import (
    TaxFormInput,
    format_currency,
    format_long_date,
    format_number_with_commas,
    run_calculate,
    validate_income_input,
)


@pytest.fixture
def clock() -> FixedClock:
    return FixedClock(datetime(2025, 3, 5, 10, 30))


class TestValidateIncomeInput:
    def test_plain_number(self) -> None:
        v = validate_income_input("50000", "Primary income")
        assert v.is_valid
        assert v.value == 50000

    def test_strips_dollar_and_commas(self) -> None:
        v = validate_income_input("$1,234.50", "Primary income")
        assert v.value == 1234.5

    def test_required(self) -> None:
        v = validate_income_input("   ", "Primary income")
        assert v.errors == ["Primary income is required"]

    def test_not_a_number(self) -> None:
        v = validate_income_input("lots", "Secondary income")
        assert v.errors == ["Secondary income must be a valid number"]

    def test_negative(self) -> None:
        v = validate_income_input("-5", "Primary income")
        assert v.errors == ["Primary income cannot be negative"]

    def test_maximum_is_inclusive(self) -> None:
        assert validate_income_input("999999999.99", "Primary income").is_valid
        v = validate_income_input("1000000000", "Primary income")
        assert v.errors == ["Primary income is too large (maximum: $999,999,999.99)"]


class TestFormatting:
    def test_currency(self) -> None:
        assert format_currency(1234.5) == "$1,234.50"
        assert format_currency(0) == "$0.00"

    def test_number_with_commas(self) -> None:
        assert format_number_with_commas(1234567.891) == "1,234,567.89"

    def test_long_date(self) -> None:
        assert format_long_date(date(2024, 12, 1)) == "December 1, 2024"


class TestRunCalculate:
    def test_totals_incomes(self, clock: FixedClock) -> None:
        out = run_calculate(
            TaxFormInput("$50,000", "12000.5", "  Salary ", "Freelance"),
            clock,
        )
        assert out.success
        assert out.result is not None
        assert out.result.total_income == 62000.5
        assert out.result.total_income_formatted == "$62,000.50"
        assert out.result.primary_source == "Salary"
        assert out.result.calculation_date == "March 5, 2025"
        assert out.form_data.primary_income == "50,000.00"

    def test_collects_all_errors(self, clock: FixedClock) -> None:
        out = run_calculate(TaxFormInput("", "-1", "", "Side job"), clock)
        assert not out.success
        assert out.errors == [
            "Primary income source description is required",
            "Primary income is required",
            "Secondary income cannot be negative",
        ]
        assert out.form_data.secondary_income == "-1"
        assert out.result is None
