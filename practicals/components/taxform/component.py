"""
Tax form component.

Validates two income figures and their sources, then reports the total.
All errors are collected; the sources are checked before the amounts.
"""

from __future__ import annotations

import math
from datetime import date

from practicals.core.ports.time import TimePort

from .models import FormData, IncomeSummary, IncomeValidation, TaxFormInput, TaxFormOutput

MAX_INCOME = 999_999_999.99


def validate_income_input(raw: str | None, field_name: str) -> IncomeValidation:
    """Parse an income amount, tolerating "$" and thousands separators."""
    if raw is None or not raw.strip():
        return IncomeValidation(is_valid=False, errors=[f"{field_name} is required"])

    cleaned = raw.replace("$", "").replace(",", "").strip()
    try:
        if not cleaned or "_" in cleaned:
            raise ValueError(cleaned)
        value = float(cleaned)
    except ValueError:
        value = math.nan

    if not math.isfinite(value):
        return IncomeValidation(is_valid=False, errors=[f"{field_name} must be a valid number"])
    if value < 0:
        return IncomeValidation(is_valid=False, errors=[f"{field_name} cannot be negative"])
    if value > MAX_INCOME:
        return IncomeValidation(
            is_valid=False,
            errors=[f"{field_name} is too large (maximum: $999,999,999.99)"],
        )
    return IncomeValidation(is_valid=True, value=value)


def format_currency(amount: float) -> str:
    return f"${amount:,.2f}"


def format_number_with_commas(amount: float) -> str:
    return f"{amount:,.2f}"


def format_long_date(d: date) -> str:
    """e.g. "March 5, 2025"."""
    return f"{d:%B} {d.day}, {d.year}"


def run_calculate(inp: TaxFormInput, time: TimePort) -> TaxFormOutput:
    form_data = FormData(
        primary_income=inp.primary_income or "",
        secondary_income=inp.secondary_income or "",
        primary_source=inp.primary_source or "",
        secondary_source=inp.secondary_source or "",
    )
    errors: list[str] = []

    if not form_data.primary_source.strip():
        errors.append("Primary income source description is required")
    if not form_data.secondary_source.strip():
        errors.append("Secondary income source description is required")

    primary = validate_income_input(inp.primary_income, "Primary income")
    errors.extend(primary.errors)
    secondary = validate_income_input(inp.secondary_income, "Secondary income")
    errors.extend(secondary.errors)

    if errors or primary.value is None or secondary.value is None:
        return TaxFormOutput(success=False, form_data=form_data, errors=errors)

    total = primary.value + secondary.value
    result = IncomeSummary(
        primary_income=primary.value,
        secondary_income=secondary.value,
        total_income=total,
        primary_income_formatted=format_currency(primary.value),
        secondary_income_formatted=format_currency(secondary.value),
        total_income_formatted=format_currency(total),
        primary_source=form_data.primary_source.strip(),
        secondary_source=form_data.secondary_source.strip(),
        calculation_date=format_long_date(time.now_local().date()),
    )
    # Echo the parsed amounts back in canonical form
    form_data = FormData(
        primary_income=format_number_with_commas(primary.value),
        secondary_income=format_number_with_commas(secondary.value),
        primary_source=form_data.primary_source,
        secondary_source=form_data.secondary_source,
    )
    return TaxFormOutput(success=True, form_data=form_data, result=result)
