"""
Append-only audit log of handled requests.

One ``ActionLogger`` is shared by every request thread in the process.
Its lock covers only the append (directory creation plus one write), so
lines never interleave while formatting stays outside the critical
section. Write failures are reported through :mod:`logging` and never
reach the caller.
"""

import logging
import os
import threading
from datetime import datetime
from pathlib import Path

logger = logging.getLogger(__name__)

ANONYMOUS_USER = "Anonymous"
TIMESTAMP_FORMAT = "%Y-%m-%d %H:%M:%S"


def format_log_entry(
    user_name: str | None,
    component_name: str,
    operation_name: str,
    timestamp: datetime | None = None,
) -> str:
    """
    Build one audit line (without the trailing newline).

    Example:
        ``[2026-01-01 10:00:00] | User: demo | Controller: Todo | Action: Index``
    """
    moment = (timestamp or datetime.now()).strftime(TIMESTAMP_FORMAT)
    return (
        f"[{moment}] | User: {user_name or ANONYMOUS_USER} "
        f"| Controller: {component_name} | Action: {operation_name}"
    )


class ActionLogger:
    """
    Thread-safe appender for the action log file.

    Args:
        log_dir: Directory holding the log file; created on first write.
        file_name: Log file name inside ``log_dir``.
    """

    def __init__(self, log_dir: str | os.PathLike, file_name: str = "actions.log"):
        self.log_dir = Path(log_dir)
        self.file_name = file_name
        self._lock = threading.Lock()

    @property
    def log_path(self) -> Path:
        return self.log_dir / self.file_name

    def log_action(self, user_name: str | None, component_name: str, operation_name: str) -> None:
        """Append one line for the given user, component and operation."""
        entry = format_log_entry(user_name, component_name, operation_name)
        self._append(entry + "\n")

    def _append(self, line: str) -> None:
        with self._lock:
            try:
                self.log_dir.mkdir(parents=True, exist_ok=True)
                with self.log_path.open("a", encoding="utf-8") as handle:
                    handle.write(line)
            except OSError as exc:
                logger.error("Logging error: %s", exc)
