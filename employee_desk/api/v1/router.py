from fastapi import APIRouter

from employee_desk.api.v1.endpoints import employees, form, health

api_router = APIRouter(prefix="/api/v1")
api_router.include_router(health.router)
api_router.include_router(employees.router)
api_router.include_router(form.router)
