"""Tax form: two income sources summed and formatted."""

from fastapi import APIRouter, Depends, Form
from fastapi.responses import HTMLResponse, JSONResponse, RedirectResponse

from practicals.adapters.clock import SystemClock
from practicals.api.deps import get_clock
from practicals.api.html import escape_html, render_page
from practicals.api.schemas import TaxCalculateRequest, TaxResultResponse
from practicals.components.taxform import (
    FormData,
    TaxFormInput,
    TaxFormOutput,
    format_number_with_commas,
    run_calculate,
)

router = APIRouter()


def _field(label: str, name: str, value: str) -> str:
    return (
        f'<label for="{name}">{escape_html(label)}</label>'
        f'<input id="{name}" name="{name}" value="{escape_html(value)}" />'
    )


def _render(form: FormData, output: TaxFormOutput | None = None) -> str:
    block = ""
    if output is not None and output.result is not None:
        r = output.result
        block = f"""<div class="result">
        <h2>Income Summary</h2>
        <p>{escape_html(r.primary_source)}: {escape_html(r.primary_income_formatted)}</p>
        <p>{escape_html(r.secondary_source)}: {escape_html(r.secondary_income_formatted)}</p>
        <p class="total">Total Income: {escape_html(r.total_income_formatted)}</p>
        <p class="date">Calculated on {escape_html(r.calculation_date)}</p>
        <a href="/tax/reset">Start over</a>
    </div>"""
    elif output is not None:
        items = "".join(f"<li>{escape_html(e)}</li>" for e in output.errors)
        block = f'<div class="errors"><ul>{items}</ul></div>'

    body = f"""<h1>Tax Form</h1>
    {block}
    <form method="post" action="/tax/calculate">
        {_field("Primary income", "primaryIncome", form.primary_income)}
        {_field("Primary income source", "primarySource", form.primary_source)}
        {_field("Secondary income", "secondaryIncome", form.secondary_income)}
        {_field("Secondary income source", "secondarySource", form.secondary_source)}
        <button type="submit">Calculate Total</button>
    </form>"""
    return render_page("Tax Form", body)


@router.get("/", response_class=HTMLResponse)
def tax_form() -> HTMLResponse:
    return HTMLResponse(_render(FormData()))


@router.post("/calculate", response_class=HTMLResponse)
def calculate_form(
    primary_income: str = Form("", alias="primaryIncome"),
    secondary_income: str = Form("", alias="secondaryIncome"),
    primary_source: str = Form("", alias="primarySource"),
    secondary_source: str = Form("", alias="secondarySource"),
    clock: SystemClock = Depends(get_clock),
) -> HTMLResponse:
    output = run_calculate(
        TaxFormInput(primary_income, secondary_income, primary_source, secondary_source), clock
    )
    return HTMLResponse(_render(output.form_data, output))


@router.get("/reset")
def reset_form() -> RedirectResponse:
    return RedirectResponse(url="/tax/", status_code=302)


def _as_text(value: str | float | None) -> str | None:
    if isinstance(value, float):
        return format_number_with_commas(value)
    return value


@router.post("/api/calculate", response_model=TaxResultResponse)
def calculate_json(
    data: TaxCalculateRequest,
    clock: SystemClock = Depends(get_clock),
) -> TaxResultResponse | JSONResponse:
    output = run_calculate(
        TaxFormInput(
            primary_income=_as_text(data.primary_income),
            secondary_income=_as_text(data.secondary_income),
            primary_source=data.primary_source,
            secondary_source=data.secondary_source,
        ),
        clock,
    )
    if not output.success:
        return JSONResponse(status_code=400, content={"errors": output.errors})

    r = output.result
    assert r is not None
    return TaxResultResponse(
        primary_income=r.primary_income,
        secondary_income=r.secondary_income,
        total_income=r.total_income,
        primary_income_formatted=r.primary_income_formatted,
        secondary_income_formatted=r.secondary_income_formatted,
        total_income_formatted=r.total_income_formatted,
        primary_source=r.primary_source,
        secondary_source=r.secondary_source,
        calculation_date=r.calculation_date,
    )
