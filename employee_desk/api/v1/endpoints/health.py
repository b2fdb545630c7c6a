from __future__ import annotations

from fastapi import APIRouter, Depends

from employee_desk.core.config import settings
from employee_desk.core.dependencies import get_employee_form
from employee_desk.services.employee_form import EmployeeForm

router = APIRouter(prefix="/health", tags=["health"])


@router.get("")
async def health_check(form: EmployeeForm = Depends(get_employee_form)):  # noqa: B008
    services: dict[str, str] = {}

    try:
        if form.store.initialized:
            ok = await form.store.check_connection()
            services["employee_api"] = "ok" if ok else "error"
        else:
            services["employee_api"] = "not_configured"
    except Exception:
        services["employee_api"] = "error"

    all_ok = all(v in ("ok", "not_configured") for v in services.values())

    return {
        "status": "healthy" if all_ok else "degraded",
        "version": settings.APP_VERSION,
        "services": services,
    }


@router.get("/ready")
async def readiness_probe():
    return {"ready": True}
