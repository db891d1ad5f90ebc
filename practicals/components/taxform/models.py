"""
Tax form component models.

Two income amounts with their source descriptions, summed into a
formatted total.
"""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass(frozen=True)
class IncomeValidation:
    is_valid: bool
    errors: list[str] = field(default_factory=list)
    value: float | None = None


@dataclass(frozen=True)
class TaxFormInput:
    primary_income: str | None
    secondary_income: str | None
    primary_source: str | None
    secondary_source: str | None


@dataclass(frozen=True)
class IncomeSummary:
    primary_income: float
    secondary_income: float
    total_income: float
    primary_income_formatted: str
    secondary_income_formatted: str
    total_income_formatted: str
    primary_source: str
    secondary_source: str
    calculation_date: str


@dataclass(frozen=True)
class FormData:
    """Values echoed back into the form fields."""

    primary_income: str = ""
    secondary_income: str = ""
    primary_source: str = ""
    secondary_source: str = ""


@dataclass(frozen=True)
class TaxFormOutput:
    success: bool
    form_data: FormData
    result: IncomeSummary | None = None
    errors: list[str] = field(default_factory=list)
