from __future__ import annotations

import logging
from contextlib import asynccontextmanager
from typing import AsyncIterator

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from employee_desk.api import ui
from employee_desk.api.v1.router import api_router
from employee_desk.core.config import settings
from employee_desk.services.employee_form import EmployeeForm
from employee_desk.services.employee_store import EmployeeStore

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(application: FastAPI) -> AsyncIterator[None]:
    logging.basicConfig(
        level=logging.DEBUG if settings.DEBUG else settings.LOG_LEVEL,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    store = EmployeeStore()
    await store.initialize(settings)
    form = EmployeeForm.from_settings(store, settings)
    application.state.employee_form = form

    if not await form.load():
        logger.warning("Initial employee fetch failed, starting with an empty list")
    yield
    await store.close()
    application.state.employee_form = None


app = FastAPI(
    title="Employee Desk",
    description="Employee record management UI",
    version=settings.APP_VERSION,
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(api_router)
app.include_router(ui.router)
