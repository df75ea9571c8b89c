"""
Inscription routes (entry point ``Auth``).

Routes:
    GET  /, /auth/inscription  - Inscription form
    POST /, /auth/inscription  - Sign in and go to the task list
"""

import logging

from flask import Blueprint, flash, redirect, render_template, request, session, url_for

from app.pipeline import RequestPipeline
from app.services.auth_gate import AuthGate
from app.validation import validate_registration_form

logger = logging.getLogger(__name__)


def create_auth_blueprint(pipeline: RequestPipeline, auth_gate: AuthGate) -> Blueprint:
    """
    Build the inscription blueprint.

    Args:
        pipeline: Request pipeline wrapping every handler.
        auth_gate: Gate used to sign the visitor in.

    Returns:
        Blueprint named ``auth``.
    """
    auth_bp = Blueprint("auth", __name__)
    guard = pipeline.entry_point("Auth")

    @auth_bp.route("/", methods=["GET"])
    @auth_bp.route("/auth/inscription", methods=["GET"])
    @guard("Inscription")
    def inscription():
        """Render the inscription form."""
        return render_template("auth/inscription.html", form={})

    @auth_bp.route("/", methods=["POST"])
    @auth_bp.route("/auth/inscription", methods=["POST"])
    @guard("Inscription")
    def inscription_submit():
        """
        Handle inscription form submission.

        Form Data:
            name: Display name (required)
            email: Email address (required)
            password: Password (required, not stored)

        Returns:
            Redirect to the task list on success, or the re-rendered form
            with a 400 status on validation errors.
        """
        registration, errors = validate_registration_form(request.form)
        if registration is None:
            for message in errors:
                flash(message, "error")
            form = {"name": request.form.get("name", ""), "email": request.form.get("email", "")}
            return render_template("auth/inscription.html", form=form), 400

        auth_gate.sign_in(registration.name, session)
        logger.info("Signed in %s", registration.name)
        return redirect(url_for("todo.index"))

    return auth_bp
