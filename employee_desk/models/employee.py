"""Employee records and the form state bound to them."""

from __future__ import annotations

from enum import Enum
from typing import Annotated, Literal, Union

from pydantic import AliasChoices, BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel

EDITABLE_FIELDS: tuple[str, ...] = ("name", "email", "department", "company", "city")


class Employee(BaseModel):
    """An employee record as exchanged with the backend.

    The backend stores the identifier as ``_id``; ``id`` is accepted on input
    as well. Fields the backend adds on its own are kept and sent back on
    update.
    """

    model_config = ConfigDict(extra="allow", coerce_numbers_to_str=True)

    id: str | None = Field(
        default=None,
        validation_alias=AliasChoices("_id", "id"),
        serialization_alias="_id",
    )
    name: str = ""
    email: str = ""
    department: str = ""
    company: str = ""
    city: str = ""

    @field_validator(*EDITABLE_FIELDS, mode="before")
    @classmethod
    def _null_to_empty(cls, value):
        return "" if value is None else value

    @property
    def is_draft(self) -> bool:
        return not self.id

    def to_payload(self) -> dict:
        """Body for POST/PUT requests; drafts are sent without an id."""
        return self.model_dump(by_alias=True, exclude={"id"} if self.is_draft else None)


class FormErrors(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    name_error: str = ""
    email_error: str = ""
    department_error: str = ""
    company_error: str = ""
    city_error: str = ""

    def has_errors(self) -> bool:
        return any(self.model_dump().values())

    def for_field(self, field: str) -> str:
        return getattr(self, f"{field}_error")


class FormMode(str, Enum):
    CREATE = "create"
    EDIT = "edit"


class Creating(BaseModel):
    mode: Literal[FormMode.CREATE] = FormMode.CREATE
    draft: Employee = Field(default_factory=Employee)

    @property
    def record(self) -> Employee:
        return self.draft


class Editing(BaseModel):
    mode: Literal[FormMode.EDIT] = FormMode.EDIT
    record: Employee
    # create-mode draft parked while editing
    draft: Employee = Field(default_factory=Employee)


FormBinding = Annotated[Union[Creating, Editing], Field(discriminator="mode")]


class SubmitOutcome(str, Enum):
    BLOCKED = "blocked"
    SAVED = "saved"
    FAILED = "failed"


class FormView(BaseModel):
    """Render-ready snapshot of the form."""

    mode: FormMode
    title: str
    submit_label: str
    record: Employee
    errors: FormErrors
    can_delete: bool


class EmployeeFieldsUpdate(BaseModel):
    """Partial update of the editable fields."""

    name: str | None = None
    email: str | None = None
    department: str | None = None
    company: str | None = None
    city: str | None = None


class FormActionResponse(BaseModel):
    outcome: SubmitOutcome
    form: FormView
