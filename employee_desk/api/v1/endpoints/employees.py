from __future__ import annotations

import logging

from fastapi import APIRouter, Depends

from employee_desk.core.dependencies import get_employee_form
from employee_desk.models.employee import Employee
from employee_desk.services.employee_form import EmployeeForm

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/employees", tags=["employees"])


@router.get("", response_model=list[Employee])
async def list_employees(form: EmployeeForm = Depends(get_employee_form)):  # noqa: B008
    return form.employees


@router.post("/refresh", response_model=list[Employee])
async def refresh_employees(form: EmployeeForm = Depends(get_employee_form)):  # noqa: B008
    if not await form.load():
        logger.warning("Refresh failed, serving %d cached employees", len(form.employees))
    return form.employees
