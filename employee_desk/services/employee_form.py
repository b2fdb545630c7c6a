"""Employee form state: one form that either creates a draft or edits a copy."""

from __future__ import annotations

import logging

from employee_desk.core.config import Settings
from employee_desk.models.employee import (
    EDITABLE_FIELDS,
    Creating,
    Editing,
    Employee,
    FormBinding,
    FormErrors,
    FormMode,
    FormView,
    SubmitOutcome,
)
from employee_desk.services.employee_store import EmployeeStore
from employee_desk.services.validation import validate_draft

logger = logging.getLogger(__name__)


class FormStateError(RuntimeError):
    pass


class EmployeeNotFoundError(LookupError):
    pass


class EmployeeForm:
    """Owns the form binding and validation errors; delegates I/O to the store."""

    def __init__(self, store: EmployeeStore, keep_draft_on_failure: bool = False) -> None:
        self.store = store
        self.keep_draft_on_failure = keep_draft_on_failure
        self.binding: FormBinding = Creating()
        self.errors = FormErrors()

    @classmethod
    def from_settings(cls, store: EmployeeStore, settings: Settings) -> EmployeeForm:
        return cls(store, keep_draft_on_failure=settings.FORM_KEEP_DRAFT_ON_FAILURE)

    @property
    def mode(self) -> FormMode:
        return self.binding.mode

    @property
    def record(self) -> Employee:
        return self.binding.record

    @property
    def employees(self) -> list[Employee]:
        return self.store.employees

    async def load(self) -> bool:
        return await self.store.fetch_all()

    def set_field(self, field: str, value: str) -> None:
        if field not in EDITABLE_FIELDS:
            raise ValueError(f"Unknown employee field: {field}")
        setattr(self.binding.record, field, value)

    def select(self, employee_id: str) -> Employee:
        employee = self.store.get(employee_id)
        if employee is None:
            raise EmployeeNotFoundError(employee_id)

        self.binding = Editing(
            record=employee.model_copy(deep=True),
            draft=self.binding.draft,
        )
        self.errors = FormErrors()
        return self.binding.record

    def validate(self) -> bool:
        # Edits are submitted as-is.
        if isinstance(self.binding, Editing):
            return True

        self.errors = validate_draft(self.binding.draft)
        return not self.errors.has_errors()

    async def submit(self) -> SubmitOutcome:
        if not self.validate():
            logger.debug("Submit blocked by validation errors")
            return SubmitOutcome.BLOCKED

        if isinstance(self.binding, Editing):
            return await self._submit_update(self.binding)
        return await self._submit_create(self.binding)

    async def delete(self) -> SubmitOutcome:
        binding = self.binding
        if not isinstance(binding, Editing):
            raise FormStateError("No employee selected")

        if not await self.store.delete(binding.record.id):
            return SubmitOutcome.FAILED

        if self.binding is binding:
            self.binding = Creating(draft=binding.draft)
        return SubmitOutcome.SAVED

    def snapshot(self) -> FormView:
        editing = isinstance(self.binding, Editing)
        return FormView(
            mode=self.mode,
            title="Edit Employee" if editing else "Add Employee",
            submit_label="Update" if editing else "Add",
            record=self.record.model_copy(deep=True),
            errors=FormErrors() if editing else self.errors.model_copy(),
            can_delete=editing,
        )

    async def _submit_create(self, binding: Creating) -> SubmitOutcome:
        created = await self.store.create(binding.draft)

        if created or not self.keep_draft_on_failure:
            # The binding may have changed while the request was in flight.
            if self.binding is binding:
                self.binding = Creating()

        return SubmitOutcome.SAVED if created else SubmitOutcome.FAILED

    async def _submit_update(self, binding: Editing) -> SubmitOutcome:
        if not await self.store.update(binding.record):
            return SubmitOutcome.FAILED

        if self.binding is binding:
            self.binding = Creating()
        return SubmitOutcome.SAVED
