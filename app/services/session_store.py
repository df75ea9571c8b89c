"""
Typed access to the per-visitor session mapping.

Session values come in two kinds: raw strings (``UserName``,
``IsConnected``) that are stored exactly as given, and objects
(``todos``) that are stored as canonical JSON text. A declared key is
bound to one kind; reading or writing it through the other path is a
programming error and raises :class:`SessionKeyKindError` immediately,
so a flag like ``IsConnected`` can never end up JSON-quoted.
"""

from __future__ import annotations

import json
import logging
from collections.abc import Mapping, MutableMapping
from enum import Enum
from typing import Any

logger = logging.getLogger(__name__)


class SessionKeyKind(str, Enum):
    """How a session value is encoded."""

    STRING = "string"
    OBJECT = "object"


USER_NAME_KEY = "UserName"
IS_CONNECTED_KEY = "IsConnected"
TODOS_KEY = "todos"

SESSION_KEY_KINDS: dict[str, SessionKeyKind] = {
    USER_NAME_KEY: SessionKeyKind.STRING,
    IS_CONNECTED_KEY: SessionKeyKind.STRING,
    TODOS_KEY: SessionKeyKind.OBJECT,
}


class SessionKeyKindError(TypeError):
    """Raised when a declared key is used through the wrong encoding path."""


class SessionStore:
    """
    Read and write session values by kind.

    The ``session`` argument of every method is any mutable mapping; inside
    a request it is :data:`flask.session`.

    Args:
        key_kinds: Declared key kinds. Undeclared keys may use either path.
    """

    def __init__(self, key_kinds: Mapping[str, SessionKeyKind] | None = None):
        self._key_kinds = dict(SESSION_KEY_KINDS if key_kinds is None else key_kinds)

    def _check_kind(self, key: str, kind: SessionKeyKind) -> None:
        declared = self._key_kinds.get(key)
        if declared is not None and declared is not kind:
            raise SessionKeyKindError(
                f"Session key '{key}' is declared as {declared.value}, "
                f"not {kind.value}"
            )

    def set_string(self, key: str, value: str, session: MutableMapping[str, Any]) -> None:
        """Store ``value`` verbatim under ``key``."""
        self._check_kind(key, SessionKeyKind.STRING)
        if not isinstance(value, str):
            raise TypeError(f"Session string value must be str, got {type(value).__name__}")
        session[key] = value

    def get_string(self, key: str, session: Mapping[str, Any]) -> str | None:
        """Return the raw string stored under ``key``, or None when absent."""
        self._check_kind(key, SessionKeyKind.STRING)
        value = session.get(key)
        if value is None:
            return None
        if not isinstance(value, str):
            logger.warning("Session key '%s' holds a non-string value; ignoring", key)
            return None
        return value

    def set_object(self, key: str, value: Any, session: MutableMapping[str, Any]) -> None:
        """Serialize ``value`` to canonical JSON text and store it under ``key``."""
        self._check_kind(key, SessionKeyKind.OBJECT)
        session[key] = json.dumps(value, sort_keys=True, separators=(",", ":"))

    def get_object(self, key: str, session: Mapping[str, Any]) -> Any | None:
        """
        Deserialize the JSON text stored under ``key``.

        Returns:
            The decoded value, or None when the key is absent or the stored
            text is not valid JSON.
        """
        self._check_kind(key, SessionKeyKind.OBJECT)
        text = session.get(key)
        if text is None:
            return None
        if not isinstance(text, str):
            logger.warning("Session key '%s' does not hold JSON text; ignoring", key)
            return None
        try:
            return json.loads(text)
        except ValueError:
            logger.warning("Session key '%s' holds undecodable JSON; ignoring", key)
            return None

