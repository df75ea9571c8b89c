"""
Session-scoped task list.

Known limitation: ``add`` is a read-modify-write of the whole list, so two
concurrent requests from the same session can lose one of the additions.
"""

import logging
from collections.abc import MutableMapping
from typing import Any

from app.models import Task, decode_task_list, encode_task_list
from app.services.session_store import TODOS_KEY, SessionStore

logger = logging.getLogger(__name__)


class TaskRepository:
    """Reads and writes the ordered task list of the current session."""

    def __init__(self, store: SessionStore, key: str = TODOS_KEY):
        self._store = store
        self._key = key

    def get_all(self, session: MutableMapping[str, Any]) -> list[Task]:
        """
        Return the stored tasks in insertion order.

        A missing or undecodable list reads as empty; this never returns None.
        """
        payload = self._store.get_object(self._key, session)
        if payload is None:
            return []
        try:
            return decode_task_list(payload)
        except ValueError as exc:
            logger.warning("Discarding unreadable task list: %s", exc)
            return []

    def add(self, task: Task, session: MutableMapping[str, Any]) -> None:
        """Append ``task`` and write the whole list back."""
        tasks = self.get_all(session)
        tasks.append(task)
        self._store.set_object(self._key, encode_task_list(tasks), session)
        logger.info("Added task %r (%d in session)", task.label, len(tasks))
