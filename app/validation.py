"""
Form validation for the add-task and inscription pages.

Validators return ``(model, errors)``: a model instance when the form is
valid, otherwise ``None`` and a list of user-facing messages. Invalid
input never reaches a service.
"""

import re
from collections.abc import Mapping
from datetime import date

from app.models import Registration, Task, TaskStatus

EMAIL_PATTERN = re.compile(r"^[^@\s]+@[^@\s]+\.[^@\s]+$")


def validate_task_form(form: Mapping[str, str]) -> tuple[Task | None, list[str]]:
    """
    Validate add-task form data.

    Form Data:
        label: Task label (required)
        description: Task description (required)
        due_date: Optional ISO date (YYYY-MM-DD)
        status: Todo, Doing or Done (blank means Todo)

    Returns:
        Tuple of (task or None, error messages).
    """
    errors: list[str] = []

    label = (form.get("label") or "").strip()
    if not label:
        errors.append("Label is required.")

    description = (form.get("description") or "").strip()
    if not description:
        errors.append("Description is required.")

    status = TaskStatus.TODO
    raw_status = (form.get("status") or "").strip()
    if raw_status:
        try:
            status = TaskStatus(raw_status)
        except ValueError:
            valid_statuses = [s.value for s in TaskStatus]
            errors.append(f"Invalid status. Must be one of: {valid_statuses}")

    due_date = None
    raw_due_date = (form.get("due_date") or "").strip()
    if raw_due_date:
        try:
            due_date = date.fromisoformat(raw_due_date)
        except ValueError:
            errors.append("Invalid due date format. Use YYYY-MM-DD.")

    if errors:
        return None, errors
    return Task(label=label, description=description, due_date=due_date, status=status), []


def validate_registration_form(form: Mapping[str, str]) -> tuple[Registration | None, list[str]]:
    """Validate inscription form data (name, email, password all required)."""
    errors: list[str] = []

    name = (form.get("name") or "").strip()
    email = (form.get("email") or "").strip()
    password = form.get("password") or ""

    if not name:
        errors.append("Name is required.")
    if not email:
        errors.append("Email is required.")
    elif not EMAIL_PATTERN.match(email):
        errors.append("Email address is not valid.")
    if not password:
        errors.append("Password is required.")

    if errors:
        return None, errors
    return Registration(name=name, email=email, password=password), []
