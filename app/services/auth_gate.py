"""
Presence-flag authentication.

A visitor counts as signed in only when the session's ``IsConnected``
value is exactly the string ``"True"``. No case folding and no boolean
parsing: a value that went through JSON encoding (``'"True"'``) is
rejected like any other.
"""

from __future__ import annotations

import logging
from collections.abc import MutableMapping
from typing import Any

from flask import redirect, url_for
from werkzeug.wrappers import Response

from app.services.session_store import IS_CONNECTED_KEY, USER_NAME_KEY, SessionStore

logger = logging.getLogger(__name__)

CONNECTED_FLAG = "True"
LOGIN_ENDPOINT = "auth.inscription"


class AuthGate:
    """Decide whether a session may reach authenticated-only handlers."""

    def __init__(self, store: SessionStore, login_endpoint: str = LOGIN_ENDPOINT):
        self._store = store
        self.login_endpoint = login_endpoint

    def is_authenticated(self, session: MutableMapping[str, Any]) -> bool:
        return self._store.get_string(IS_CONNECTED_KEY, session) == CONNECTED_FLAG

    def check(self, session: MutableMapping[str, Any]) -> Response | None:
        """
        Gate a request.

        Returns:
            None when the request may continue, otherwise a redirect to the
            inscription page.
        """
        if self.is_authenticated(session):
            return None
        logger.info("Unauthenticated request redirected to %s", self.login_endpoint)
        return redirect(url_for(self.login_endpoint))

    def sign_in(self, user_name: str, session: MutableMapping[str, Any]) -> None:
        """Record ``user_name`` and raise the connected flag."""
        self._store.set_string(USER_NAME_KEY, user_name, session)
        self._store.set_string(IS_CONNECTED_KEY, CONNECTED_FLAG, session)
        # Flask sessions honour PERMANENT_SESSION_LIFETIME only when permanent
        if hasattr(session, "permanent"):
            session.permanent = True
