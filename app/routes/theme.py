"""
Theme toggle route (entry point ``Theme``).

Routes:
    GET, POST /theme/toggle  - Flip the theme cookie and go back
"""

from flask import Blueprint, redirect, request

from app.pipeline import RequestPipeline
from app.services.theme import ThemeResolver


def create_theme_blueprint(pipeline: RequestPipeline, themes: ThemeResolver) -> Blueprint:
    """Build the theme blueprint mounted under ``/theme``."""
    theme_bp = Blueprint("theme", __name__, url_prefix="/theme")
    guard = pipeline.entry_point("Theme")

    @theme_bp.route("/toggle", methods=["GET", "POST"])
    @guard("Toggle")
    def toggle():
        """Flip the theme and redirect to the referring page, or ``/``."""
        response = redirect(request.referrer or "/")
        themes.toggle_theme(request, response)
        return response

    return theme_bp
