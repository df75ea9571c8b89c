"""
Server-side in-memory session storage for Flask.

The browser only carries an opaque, random session id in the session
cookie; the session contents stay in this process. Records expire after
``PERMANENT_SESSION_LIFETIME`` without a request that saves them, which
gives the task list the lifetime of one idle-limited session.
"""

from __future__ import annotations

import copy
import logging
import secrets
import threading
from collections.abc import Callable
from datetime import datetime, timezone
from typing import Any

from flask import Flask, Request
from flask.sessions import SessionInterface, SessionMixin
from werkzeug.datastructures import CallbackDict
from werkzeug.wrappers import Response

logger = logging.getLogger(__name__)


class MemorySession(CallbackDict, SessionMixin):
    """Session dict that remembers its id and whether it was modified."""

    def __init__(self, initial: dict[str, Any] | None = None, sid: str = "", new: bool = False):
        def on_update(session):
            session.modified = True

        super().__init__(initial, on_update)
        self.sid = sid
        self.new = new
        self.modified = False


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class MemorySessionInterface(SessionInterface):
    """
    Keep session records in a process-local dictionary.

    Each record is stored with its expiry time. Every save pushes the
    saved record's deadline forward and sweeps all records whose deadline
    has passed, so abandoned sessions do not accumulate. Records are deep
    copied on load and save; the live session never shares mutable values
    (such as the ``_flashes`` list) with the stored record.

    Args:
        clock: Returns the current UTC time; replaceable in tests.
    """

    def __init__(self, clock: Callable[[], datetime] | None = None):
        self._records: dict[str, tuple[datetime, dict[str, Any]]] = {}
        self._lock = threading.Lock()
        self._clock = clock or _utcnow

    @staticmethod
    def _new_sid() -> str:
        return secrets.token_urlsafe(32)

    def _sweep_expired(self, now: datetime) -> None:
        # Caller holds self._lock
        expired = [sid for sid, (expires_at, _) in self._records.items() if expires_at <= now]
        for sid in expired:
            del self._records[sid]
        if expired:
            logger.info("Dropped %d expired session(s)", len(expired))

    def open_session(self, app: Flask, request: Request) -> MemorySession:
        sid = request.cookies.get(self.get_cookie_name(app))
        if sid:
            now = self._clock()
            with self._lock:
                record = self._records.get(sid)
                if record is not None and record[0] <= now:
                    del self._records[sid]
                    record = None
                data = copy.deepcopy(record[1]) if record is not None else None
            if data is not None:
                return MemorySession(data, sid=sid)
            logger.info("Session id not found or expired; starting a new session")
        return MemorySession(sid=self._new_sid(), new=True)

    def save_session(self, app: Flask, session: MemorySession, response: Response) -> None:
        name = self.get_cookie_name(app)
        domain = self.get_cookie_domain(app)
        path = self.get_cookie_path(app)
        now = self._clock()

        if not session:
            with self._lock:
                if session.modified:
                    self._records.pop(session.sid, None)
                self._sweep_expired(now)
            if session.modified:
                response.delete_cookie(name, domain=domain, path=path)
            return

        expires_at = now + app.permanent_session_lifetime
        snapshot = copy.deepcopy(dict(session))
        with self._lock:
            self._records[session.sid] = (expires_at, snapshot)
            self._sweep_expired(now)

        if not self.should_set_cookie(app, session):
            return

        response.set_cookie(
            name,
            session.sid,
            expires=self.get_expiration_time(app, session),
            httponly=self.get_cookie_httponly(app),
            domain=domain,
            path=path,
            secure=self.get_cookie_secure(app),
            samesite=self.get_cookie_samesite(app),
        )

    def session_count(self) -> int:
        """Number of stored records, expired or not."""
        with self._lock:
            return len(self._records)
