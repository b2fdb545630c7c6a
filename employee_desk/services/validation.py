from __future__ import annotations

import re

from employee_desk.models.employee import Employee, FormErrors

EMAIL_PATTERN = re.compile(r"[A-Za-z0-9._%+-]+@[A-Za-z0-9.-]+\.[A-Za-z]{2,}")

_REQUIRED_MESSAGES: dict[str, str] = {
    "name": "Name is required",
    "email": "Email is required",
    "department": "Department is required",
    "company": "Company is required",
    "city": "City is required",
}

INVALID_EMAIL_MESSAGE = "Invalid email format"


def is_valid_email(value: str) -> bool:
    return EMAIL_PATTERN.fullmatch(value) is not None


def validate_draft(draft: Employee) -> FormErrors:
    """Check a draft before it is created.

    Every field is checked; the returned errors hold one message per failing
    field and an empty string for each passing one.
    """
    messages: dict[str, str] = {}

    for field, required_message in _REQUIRED_MESSAGES.items():
        value = getattr(draft, field)
        if not value:
            messages[f"{field}_error"] = required_message
        elif field == "email" and not is_valid_email(value):
            messages["email_error"] = INVALID_EMAIL_MESSAGE

    return FormErrors(**messages)
