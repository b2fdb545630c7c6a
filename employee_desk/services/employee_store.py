"""Employee list cache and the HTTP boundary to the employee backend."""

from __future__ import annotations

import asyncio
import logging
from typing import Any

import aiohttp
from pydantic import TypeAdapter

from employee_desk.core.config import Settings
from employee_desk.core.urls import path_segment
from employee_desk.models.employee import Employee

logger = logging.getLogger(__name__)

_EMPLOYEE_LIST = TypeAdapter(list[Employee])


class EmployeeStoreError(RuntimeError):
    pass


class EmployeeApiError(EmployeeStoreError):
    def __init__(self, method: str, path: str, status: int, body: str) -> None:
        super().__init__(f"{method} {path} failed: {status} - {body}")
        self.method = method
        self.path = path
        self.status = status


# Backend failures are logged and swallowed; callers only see a success flag.
# ValueError covers undecodable JSON and pydantic validation errors.
_BACKEND_ERRORS = (EmployeeStoreError, aiohttp.ClientError, asyncio.TimeoutError, ValueError)


class EmployeeStore:
    def __init__(self) -> None:
        self.employees: list[Employee] = []
        self.initialized = False
        self.base_url = ""
        self.timeout: float | None = None

    async def initialize(self, settings: Settings) -> None:
        if self.initialized:
            return

        if not settings.EMPLOYEE_API_BASE_URL:
            logger.warning("Employee API base URL missing, EmployeeStore not initialized")
            return

        self.base_url = settings.EMPLOYEE_API_BASE_URL.rstrip("/")
        self.timeout = settings.EMPLOYEE_API_TIMEOUT
        self.initialized = True
        logger.info("EmployeeStore initialized (base_url=%s)", self.base_url)

    async def close(self) -> None:
        self.initialized = False
        self.base_url = ""
        self.timeout = None

    def get(self, employee_id: str) -> Employee | None:
        for employee in self.employees:
            if employee.id == employee_id:
                return employee
        return None

    async def fetch_all(self) -> bool:
        """Replace the cached list with the backend's; keep the old one on failure."""
        try:
            data = await self._request("GET", "/employees")
            employees = _EMPLOYEE_LIST.validate_python(data)
        except _BACKEND_ERRORS:
            logger.exception("Error fetching employees")
            return False

        self.employees = employees
        logger.debug("Fetched %d employees", len(employees))
        return True

    async def create(self, draft: Employee) -> bool:
        try:
            await self._request("POST", "/employees", draft.to_payload())
        except _BACKEND_ERRORS:
            logger.exception("Error creating employee")
            return False

        await self.fetch_all()
        return True

    async def update(self, record: Employee) -> bool:
        if record.is_draft:
            logger.error("Refusing to update an employee without an id")
            return False

        try:
            await self._request("PUT", f"/employees/{path_segment(record.id)}", record.to_payload())
        except _BACKEND_ERRORS:
            logger.exception("Error updating employee %s", record.id)
            return False

        await self.fetch_all()
        return True

    async def delete(self, employee_id: str) -> bool:
        try:
            await self._request("DELETE", f"/employees/{path_segment(employee_id)}")
        except _BACKEND_ERRORS:
            logger.exception("Error deleting employee %s", employee_id)
            return False

        await self.fetch_all()
        return True

    async def check_connection(self) -> bool:
        if not self.initialized:
            return False
        try:
            await self._request("GET", "/employees")
            return True
        except Exception:
            logger.exception("Employee API connection check failed")
            return False

    async def _request(self, method: str, path: str, payload: dict[str, Any] | None = None) -> Any:
        if not self.initialized:
            raise EmployeeStoreError("EmployeeStore not initialized")

        url = f"{self.base_url}{path}"
        session_kwargs: dict[str, Any] = {}
        if self.timeout is not None:
            session_kwargs["timeout"] = aiohttp.ClientTimeout(total=self.timeout)

        async with aiohttp.ClientSession(**session_kwargs) as session:
            async with session.request(method, url, json=payload) as response:
                if not 200 <= response.status < 300:
                    error_text = await response.text()
                    raise EmployeeApiError(method, path, response.status, error_text)

                if response.content_type != "application/json":
                    return None
                return await response.json()
