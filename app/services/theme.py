"""
Light/dark theme preference kept in a client cookie.

Nothing is stored server-side: the current theme is whatever the request's
``theme`` cookie says, and changing it means writing a new cookie on the
outgoing response.
"""

from __future__ import annotations

from datetime import datetime, timedelta, timezone
from enum import Enum

from flask import Request, Response

THEME_COOKIE_NAME = "theme"
COOKIE_EXPIRATION_DAYS = 30


class Theme(str, Enum):
    """The two supported UI themes."""

    LIGHT = "light"
    DARK = "dark"


DEFAULT_THEME = Theme.LIGHT


class ThemeResolver:
    """
    Resolve, toggle and persist the theme cookie.

    Args:
        secure: Whether the cookie should carry the ``Secure`` flag.
    """

    def __init__(self, secure: bool = False):
        self.secure = secure

    def get_current_theme(self, request: Request) -> Theme:
        """Return the request's theme, defaulting to light for absent or unknown values."""
        raw = request.cookies.get(THEME_COOKIE_NAME)
        try:
            return Theme(raw)
        except ValueError:
            return DEFAULT_THEME

    def toggle_theme(self, request: Request, response: Response) -> Theme:
        """Flip the current theme and persist it on ``response``."""
        current = self.get_current_theme(request)
        new_theme = Theme.DARK if current is Theme.LIGHT else Theme.LIGHT
        self.set_theme(response, new_theme)
        return new_theme

    def set_theme(self, response: Response, theme: Theme) -> None:
        """Write the theme cookie: 30-day expiry, HttpOnly, SameSite=Lax."""
        response.set_cookie(
            THEME_COOKIE_NAME,
            Theme(theme).value,
            expires=datetime.now(timezone.utc) + timedelta(days=COOKIE_EXPIRATION_DAYS),
            httponly=True,
            samesite="Lax",
            secure=self.secure,
        )
