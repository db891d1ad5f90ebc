"""Tax form component."""

from practicals.components.taxform.component import (
    MAX_INCOME,
    format_currency,
    format_long_date,
    format_number_with_commas,
    run_calculate,
    validate_income_input,
)
from practicals.components.taxform.models import (
    FormData,
    IncomeSummary,
    IncomeValidation,
    TaxFormInput,
    TaxFormOutput,
)

__all__ = [
    "run_calculate",
    "validate_income_input",
    "format_currency",
    "format_number_with_commas",
    "format_long_date",
    "MAX_INCOME",
    "FormData",
    "IncomeSummary",
    "IncomeValidation",
    "TaxFormInput",
    "TaxFormOutput",
]
