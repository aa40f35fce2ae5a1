from __future__ import annotations

import logging
from pathlib import Path
from typing import Any

from fastapi import APIRouter, HTTPException, Query, Request
from fastapi.responses import FileResponse, HTMLResponse
from fastapi.templating import Jinja2Templates

from slabtax.config import Settings, get_settings
from slabtax.core.formatting import format_inr
from slabtax.core.inputs import InvalidInput, parse_income
from slabtax.core.slabs import SCHEDULE_LABEL, SLABS, STANDARD_DEDUCTION, slab_summary
from slabtax.core.state import (
    EstimatorState,
    calculate,
    gross_income,
    toggle_info,
    with_income,
    with_salaried,
)
from slabtax.estimator import summarize_result

router = APIRouter(prefix="/ui", tags=["ui"])
logger = logging.getLogger("slabtax.ui")

UI_ROOT = Path(__file__).resolve().parent
TEMPLATES = Jinja2Templates(directory=str(UI_ROOT / "templates"))
STATIC_ROOT = UI_ROOT / "static"

PAGE_TITLE = "Indian Income Tax Calculator 2025"
DISCLAIMER = (
    "This calculator provides estimates only and should not be used for official tax filing purposes. "
    "Tax calculations can be complex and may vary based on individual circumstances, deductions, and "
    "exemptions. Please consult a tax professional or refer to the official Income Tax Department website "
    "for accurate tax assessment."
)
SLAB_NOTE = (
    "Note: This is a simplified representation of tax slabs. Actual tax calculation may vary based on "
    "various factors and deductions."
)
ACTION_CALCULATE = "calculate"
ACTION_TOGGLE_INFO = "toggle-info"


@router.get("/static/{path:path}", name="ui_static")
async def serve_ui_static(path: str) -> FileResponse:
    target_path = (STATIC_ROOT / path).resolve()
    try:
        target_path.relative_to(STATIC_ROOT.resolve())
    except ValueError as exc:
        raise HTTPException(status_code=404, detail="Static asset not found") from exc
    if not target_path.is_file():
        raise HTTPException(status_code=404, detail="Static asset not found")
    return FileResponse(target_path)


def _resolve_settings(request: Request) -> Settings:
    settings = getattr(request.app.state, "settings", None)
    if isinstance(settings, Settings):
        return settings
    return get_settings()


def _form_text(val: Any) -> str:
    if val is None:
        return ""
    return str(val)


def _state_from_form(form: Any) -> EstimatorState:
    state = EstimatorState(show_info=bool(form.get("show_info")))
    state = with_income(state, _form_text(form.get("income")).strip())
    return with_salaried(state, bool(form.get("salaried")))


def _page_context(state: EstimatorState, settings: Settings, error: str | None = None) -> dict[str, Any]:
    summary = None
    amount = gross_income(state)
    if state.result is not None and amount is not None:
        summary = summarize_result(state.result, amount, state.is_salaried)
    return {
        "title": PAGE_TITLE,
        "show_disclaimer": settings.show_disclaimer,
        "disclaimer": DISCLAIMER,
        "state": state,
        "summary": summary,
        "error": error,
        "standard_deduction": format_inr(STANDARD_DEDUCTION),
        "schedule": SCHEDULE_LABEL,
        "slab_lines": [slab_summary(slab) for slab in SLABS],
        "slab_note": SLAB_NOTE,
        "action_calculate": ACTION_CALCULATE,
        "action_toggle_info": ACTION_TOGGLE_INFO,
    }


@router.get("/", response_class=HTMLResponse)
def estimator_home(request: Request, info: bool = Query(False)) -> HTMLResponse:
    settings = _resolve_settings(request)
    state = EstimatorState(is_salaried=settings.default_salaried, show_info=info)
    return TEMPLATES.TemplateResponse(request, "index.html", _page_context(state, settings))


@router.post("/estimate", response_class=HTMLResponse)
async def submit_estimate(request: Request) -> HTMLResponse:
    settings = _resolve_settings(request)
    form = await request.form()
    state = _state_from_form(form)
    action = _form_text(form.get("action")) or ACTION_CALCULATE

    if action == ACTION_TOGGLE_INFO:
        if form.get("calculated"):
            state = calculate(state)
        state = toggle_info(state)
        return TEMPLATES.TemplateResponse(request, "index.html", _page_context(state, settings))

    try:
        parse_income(state.income_text)
    except InvalidInput as exc:
        logger.info("Rejected income input: %s", exc)
        context = _page_context(state, settings, error=str(exc))
        return TEMPLATES.TemplateResponse(request, "index.html", context, status_code=400)

    state = calculate(state)
    return TEMPLATES.TemplateResponse(request, "index.html", _page_context(state, settings))
