from __future__ import annotations

from fastapi import HTTPException, Request, status

from employee_desk.services.employee_form import EmployeeForm


def get_employee_form(request: Request) -> EmployeeForm:
    form: EmployeeForm | None = getattr(request.app.state, "employee_form", None)
    if form is None:
        raise HTTPException(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            detail="Employee form not ready",
        )
    return form
