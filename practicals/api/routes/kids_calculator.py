"""Kids' calculator: an HTML form that posts back to itself, plus a JSON twin."""

from fastapi import APIRouter, Form
from fastapi.responses import HTMLResponse, JSONResponse

from practicals.api.html import escape_html, render_page
from practicals.api.schemas import KidsCalculateRequest, KidsCalculateResponse
from practicals.components.kids_calculator import (
    OPERATION_SYMBOLS,
    CalculateInput,
    CalculateOutput,
    format_number,
    run_calculate,
)

router = APIRouter()

_OPERATION_LABELS = {
    "add": "Add (+)",
    "subtract": "Subtract (-)",
    "multiply": "Multiply (×)",
    "divide": "Divide (÷)",
}


def _render(form: CalculateInput, output: CalculateOutput | None = None) -> str:
    options = "".join(
        f'<option value="{op}"{" selected" if op == form.operation else ""}>'
        f"{escape_html(_OPERATION_LABELS[op])}</option>"
        for op in OPERATION_SYMBOLS
    )
    block = ""
    if output is not None and output.success:
        block = (
            '<div class="result success"><h2>🎉 Great job!</h2>'
            f"<p>{escape_html(output.expression)}</p></div>"
        )
    elif output is not None:
        block = f'<div class="result error"><p>{escape_html(output.error or "")}</p></div>'

    body = f"""<h1>🧮 Kids Calculator</h1>
    <form method="post" action="/kids/calculate">
        <input name="number1" value="{escape_html(form.number1 or "")}" />
        <select name="operation"><option value="">Choose...</option>{options}</select>
        <input name="number2" value="{escape_html(form.number2 or "")}" />
        <button type="submit">Calculate</button>
    </form>
    {block}"""
    return render_page("Kids Calculator", body)


@router.get("/", response_class=HTMLResponse)
def calculator_form() -> HTMLResponse:
    return HTMLResponse(_render(CalculateInput(None, None, None)))


@router.post("/calculate", response_class=HTMLResponse)
def calculate_form(
    number1: str = Form(""),
    number2: str = Form(""),
    operation: str = Form(""),
) -> HTMLResponse:
    inp = CalculateInput(number1=number1.strip(), number2=number2.strip(), operation=operation)
    output = run_calculate(inp)
    # A successful calculation clears the form
    form = CalculateInput(None, None, None) if output.success else inp
    return HTMLResponse(_render(form, output))


def _as_text(value: str | float | None) -> str | None:
    if isinstance(value, float):
        return format_number(value)
    return value.strip() if value is not None else None


@router.post("/api/calculate", response_model=KidsCalculateResponse)
def calculate_json(data: KidsCalculateRequest) -> KidsCalculateResponse | JSONResponse:
    output = run_calculate(
        CalculateInput(
            number1=_as_text(data.number1),
            number2=_as_text(data.number2),
            operation=data.operation,
        )
    )
    if not output.success:
        return JSONResponse(status_code=400, content={"error": output.error})
    assert output.result is not None
    return KidsCalculateResponse(
        result=output.result, symbol=output.symbol, expression=output.expression
    )
