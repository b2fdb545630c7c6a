"""Server-rendered employee management page."""

from __future__ import annotations

import logging
from pathlib import Path

from fastapi import APIRouter, Depends, Form, HTTPException, Request, status
from fastapi.responses import HTMLResponse, RedirectResponse
from fastapi.templating import Jinja2Templates

from employee_desk.core.dependencies import get_employee_form
from employee_desk.core.urls import path_segment
from employee_desk.models.employee import EDITABLE_FIELDS
from employee_desk.services.employee_form import EmployeeForm, EmployeeNotFoundError, FormStateError

logger = logging.getLogger(__name__)

TEMPLATES_DIR = Path(__file__).resolve().parent.parent / "templates"

templates = Jinja2Templates(directory=str(TEMPLATES_DIR))
templates.env.filters["path_segment"] = path_segment

FIELD_INPUTS: list[tuple[str, str, str]] = [
    ("name", "text", "Name"),
    ("email", "email", "Email"),
    ("department", "text", "Department"),
    ("company", "text", "Company"),
    ("city", "text", "City"),
]

router = APIRouter(tags=["ui"])


def _back_to_page() -> RedirectResponse:
    return RedirectResponse("/", status_code=status.HTTP_303_SEE_OTHER)


@router.get("/", response_class=HTMLResponse)
async def employee_page(
    request: Request,
    form: EmployeeForm = Depends(get_employee_form),  # noqa: B008
):
    return templates.TemplateResponse(
        request,
        "employee_page.html",
        {"form": form.snapshot(), "fields": FIELD_INPUTS, "employees": form.employees},
    )


@router.post("/ui/submit")
async def submit_page_form(
    name: str = Form(""),
    email: str = Form(""),
    department: str = Form(""),
    company: str = Form(""),
    city: str = Form(""),
    form: EmployeeForm = Depends(get_employee_form),  # noqa: B008
):
    values = {"name": name, "email": email, "department": department, "company": company, "city": city}
    for field in EDITABLE_FIELDS:
        form.set_field(field, values[field])

    outcome = await form.submit()
    logger.info("Page form submitted (outcome=%s)", outcome.value)
    return _back_to_page()


@router.post("/ui/select/{employee_id:path}")
async def select_from_page(
    employee_id: str,
    form: EmployeeForm = Depends(get_employee_form),  # noqa: B008
):
    try:
        form.select(employee_id)
    except EmployeeNotFoundError as err:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"Employee with id '{employee_id}' not found",
        ) from err
    return _back_to_page()


@router.post("/ui/delete")
async def delete_from_page(form: EmployeeForm = Depends(get_employee_form)):  # noqa: B008
    try:
        await form.delete()
    except FormStateError as err:
        raise HTTPException(
            status_code=status.HTTP_409_CONFLICT,
            detail=str(err),
        ) from err
    return _back_to_page()
