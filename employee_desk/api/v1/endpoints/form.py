from __future__ import annotations

import logging

from fastapi import APIRouter, Depends, HTTPException, status

from employee_desk.core.dependencies import get_employee_form
from employee_desk.models.employee import EmployeeFieldsUpdate, FormActionResponse, FormView
from employee_desk.services.employee_form import EmployeeForm, EmployeeNotFoundError, FormStateError

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/form", tags=["form"])


@router.get("", response_model=FormView)
async def get_form(form: EmployeeForm = Depends(get_employee_form)):  # noqa: B008
    return form.snapshot()


@router.patch("", response_model=FormView)
async def update_fields(
    fields: EmployeeFieldsUpdate,
    form: EmployeeForm = Depends(get_employee_form),  # noqa: B008
):
    for field, value in fields.model_dump(exclude_none=True).items():
        form.set_field(field, value)
    return form.snapshot()


@router.post("/select/{employee_id:path}", response_model=FormView)
async def select_employee(
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
    return form.snapshot()


@router.post("/submit", response_model=FormActionResponse)
async def submit_form(form: EmployeeForm = Depends(get_employee_form)):  # noqa: B008
    outcome = await form.submit()
    logger.info("Form submitted (mode=%s outcome=%s)", form.mode.value, outcome.value)
    return FormActionResponse(outcome=outcome, form=form.snapshot())


@router.post("/delete", response_model=FormActionResponse)
async def delete_selected(form: EmployeeForm = Depends(get_employee_form)):  # noqa: B008
    try:
        outcome = await form.delete()
    except FormStateError as err:
        raise HTTPException(
            status_code=status.HTTP_409_CONFLICT,
            detail=str(err),
        ) from err
    return FormActionResponse(outcome=outcome, form=form.snapshot())
