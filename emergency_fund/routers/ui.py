from pathlib import Path

from fastapi import APIRouter, Depends, Request, Form
from fastapi.responses import HTMLResponse
from fastapi.templating import Jinja2Templates

from emergency_fund.models.constants import QUOTE_LABELS, QUOTE_ORDER, QuoteName
from emergency_fund.services.fund_controller import FundController
from .deps import get_controller

router = APIRouter(tags=["ui"])

templates = Jinja2Templates(directory=str(Path(__file__).resolve().parent.parent / "templates"))


def _quote_options(controller: FundController):
    snapshot = controller.snapshot
    return [
        {
            "value": q.value,
            "label": QUOTE_LABELS[q],
            "venta": snapshot.rate_for(q),
            "selected": q == controller.inputs.quote,
        }
        for q in QUOTE_ORDER
    ]


def _render(request: Request, controller: FundController, errors=None):
    settings = request.app.state.settings
    context = {
        "version": settings.version,
        "app_name": settings.app_name,
        "form": controller.inputs,
        "quote_label": controller.inputs.quote_label,
        "quotes": _quote_options(controller),
        "result": controller.result,
        "calculated": controller.calculated,
        "can_submit": controller.can_submit,
        "message": controller.summary_message(),
        "errors": errors or [],
    }
    return templates.TemplateResponse(request, "fund_form.html", context)


def _apply_fields(controller: FundController, income: str, months: str) -> None:
    controller.update_field("income", income)
    controller.update_field("months", months)


@router.get("/ui", response_class=HTMLResponse)
async def ui_form(request: Request, controller: FundController = Depends(get_controller)):
    return _render(request, controller)


@router.post("/ui/calculate", response_class=HTMLResponse)
async def ui_calculate(
    request: Request,
    income: str = Form(""),
    months: str = Form(""),
    quote: QuoteName = Form(QuoteName.OFFICIAL),
    controller: FundController = Depends(get_controller),
):
    """Calculate button and Enter on either field both post here."""
    _apply_fields(controller, income, months)
    if quote != controller.inputs.quote:
        controller.select_quote(quote)
    errors = []
    if controller.can_submit:
        outcome = controller.submit()
        if outcome.reason == "rate_unavailable":
            errors.append("La cotización seleccionada todavía no está disponible.")
        elif outcome.reason == "invalid_input":
            errors.append("Ingresá valores numéricos válidos.")
    return _render(request, controller, errors)


@router.post("/ui/quote", response_class=HTMLResponse)
async def ui_select_quote(
    request: Request,
    quote: QuoteName = Form(...),
    income: str = Form(""),
    months: str = Form(""),
    controller: FundController = Depends(get_controller),
):
    _apply_fields(controller, income, months)
    controller.select_quote(quote)
    return _render(request, controller)


@router.post("/ui/clear", response_class=HTMLResponse)
async def ui_clear(request: Request, controller: FundController = Depends(get_controller)):
    controller.clear()
    return _render(request, controller)
