from __future__ import annotations

from unittest.mock import AsyncMock, MagicMock

import pytest
from httpx import ASGITransport, AsyncClient
from starlette.testclient import TestClient

from employee_desk.core.dependencies import get_employee_form
from employee_desk.main import app
from employee_desk.models.employee import Employee
from employee_desk.services.employee_form import EmployeeForm
from employee_desk.services.employee_store import EmployeeStore

SAMPLE_BACKEND_DOCS = [
    {
        "_id": "1",
        "name": "X",
        "email": "x@acme.io",
        "department": "Eng",
        "company": "Acme",
        "city": "NYC",
        "__v": 0,
    },
    {
        "_id": "2",
        "name": "Jane Roe",
        "email": "jane.roe@acme.io",
        "department": "Sales",
        "company": "Acme",
        "city": "Boston",
        "__v": 0,
    },
]


@pytest.fixture(autouse=True)
def _offline_settings():
    from employee_desk.core.config import settings

    original_base_url = settings.EMPLOYEE_API_BASE_URL
    settings.EMPLOYEE_API_BASE_URL = ""
    yield
    settings.EMPLOYEE_API_BASE_URL = original_base_url


@pytest.fixture
def anyio_backend():
    return "asyncio"


@pytest.fixture
def fake_store() -> MagicMock:
    """A store whose backend calls succeed and which holds the sample list."""
    store = MagicMock(spec=EmployeeStore)
    store.employees = [Employee.model_validate(doc) for doc in SAMPLE_BACKEND_DOCS]
    store.initialized = True
    store.get.side_effect = lambda employee_id: next(
        (e for e in store.employees if e.id == employee_id), None
    )
    store.fetch_all = AsyncMock(return_value=True)
    store.create = AsyncMock(return_value=True)
    store.update = AsyncMock(return_value=True)
    store.delete = AsyncMock(return_value=True)
    store.check_connection = AsyncMock(return_value=True)
    return store


@pytest.fixture
def employee_form(fake_store) -> EmployeeForm:
    return EmployeeForm(fake_store)


@pytest.fixture
def client():
    with TestClient(app) as c:
        yield c
    app.dependency_overrides.clear()


@pytest.fixture
def form_client(employee_form):
    app.dependency_overrides[get_employee_form] = lambda: employee_form
    with TestClient(app) as c:
        yield c
    app.dependency_overrides.clear()


@pytest.fixture
async def async_client(employee_form):
    app.dependency_overrides[get_employee_form] = lambda: employee_form
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac
    app.dependency_overrides.clear()
