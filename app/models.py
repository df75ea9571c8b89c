"""
Domain models for the task board.

Tasks never touch a database: they live inside the visitor's session as
JSON text, so each model knows how to turn itself into a JSON-ready
dictionary and back.
"""

from dataclasses import dataclass, field
from datetime import date
from enum import Enum
from typing import Any


class TaskStatus(str, Enum):
    """Enumeration of possible task statuses."""

    TODO = "Todo"
    DOING = "Doing"
    DONE = "Done"


@dataclass
class Task:
    """
    A single to-do item.

    Attributes:
        label: Short title of the task.
        description: Free-text description.
        due_date: Optional deadline (calendar date).
        status: Current status (Todo, Doing, Done).
    """

    label: str
    description: str
    due_date: date | None = None
    status: TaskStatus = TaskStatus.TODO

    def __post_init__(self) -> None:
        # Coerces plain strings and rejects anything outside the enum
        self.status = TaskStatus(self.status)

    def to_dict(self) -> dict[str, Any]:
        """
        Convert the task to a dictionary representation.

        Returns:
            Dictionary containing all task fields, JSON-serializable.
        """
        return {
            "label": self.label,
            "description": self.description,
            "due_date": self.due_date.isoformat() if self.due_date else None,
            "status": self.status.value,
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Task":
        """
        Build a task from the output of :meth:`to_dict`.

        Raises:
            ValueError: If a field is missing or has the wrong shape.
        """
        if not isinstance(data, dict):
            raise ValueError(f"Task payload must be an object, got {type(data).__name__}")
        try:
            label = data["label"]
            description = data["description"]
            status = data["status"]
        except KeyError as exc:
            raise ValueError(f"Task payload is missing {exc.args[0]!r}") from exc
        if not isinstance(label, str) or not isinstance(description, str):
            raise ValueError("Task label and description must be strings")

        raw_due_date = data.get("due_date")
        due_date = None
        if raw_due_date is not None:
            if not isinstance(raw_due_date, str):
                raise ValueError("Task due_date must be an ISO date string")
            due_date = date.fromisoformat(raw_due_date)

        return cls(label=label, description=description, due_date=due_date, status=status)


def decode_task_list(payload: Any) -> list[Task]:
    """
    Decode a stored task list payload.

    Args:
        payload: Value read back from the session (a list of dicts).

    Returns:
        The tasks, in stored order.

    Raises:
        ValueError: If the payload is not a list of task objects.
    """
    if not isinstance(payload, list):
        raise ValueError(f"Task list payload must be a list, got {type(payload).__name__}")
    return [Task.from_dict(item) for item in payload]


def encode_task_list(tasks: list[Task]) -> list[dict[str, Any]]:
    """Encode tasks into a JSON-ready list."""
    return [task.to_dict() for task in tasks]


@dataclass
class Registration:
    """Inscription form data. Only ``name`` outlives the request."""

    name: str
    email: str
    password: str = field(repr=False)
