"""
Task list routes (entry point ``Todo``).

Every handler here sits behind the auth step, so unauthenticated visitors
are redirected to the inscription page before any handler code runs.

Routes:
    GET  /todo/, /todo/index  - Task list
    GET  /todo/add            - Empty add-task form
    POST /todo/add            - Validate and add a task
"""

import logging

from flask import Blueprint, flash, redirect, render_template, request, session, url_for

from app.models import TaskStatus
from app.pipeline import RequestPipeline
from app.services.task_repository import TaskRepository
from app.validation import validate_task_form

logger = logging.getLogger(__name__)


def create_todo_blueprint(pipeline: RequestPipeline, tasks: TaskRepository) -> Blueprint:
    """
    Build the task list blueprint.

    Args:
        pipeline: Request pipeline wrapping every handler.
        tasks: Session-scoped task repository.

    Returns:
        Blueprint named ``todo`` mounted under ``/todo``.
    """
    todo_bp = Blueprint("todo", __name__, url_prefix="/todo")
    guard = pipeline.entry_point("Todo")

    def _render_form(form: dict, status_code: int = 200):
        return (
            render_template("todo/add.html", form=form, statuses=TaskStatus),
            status_code,
        )

    @todo_bp.route("/index", methods=["GET"])
    @todo_bp.route("/", methods=["GET"])
    @guard("Index")
    def index():
        """Render the current session's tasks."""
        return render_template("todo/index.html", tasks=tasks.get_all(session))

    @todo_bp.route("/add", methods=["GET"])
    @guard("Add")
    def add():
        """Render the empty add-task form."""
        return _render_form({})

    @todo_bp.route("/add", methods=["POST"])
    @guard("Add")
    def add_submit():
        """
        Handle add-task form submission.

        Returns:
            Redirect to the task list on success, or the re-rendered form
            with a 400 status on validation errors.
        """
        task, errors = validate_task_form(request.form)
        if task is None:
            for message in errors:
                flash(message, "error")
            return _render_form(request.form.to_dict(), 400)

        tasks.add(task, session)
        flash("Task added.", "success")
        return redirect(url_for("todo.index"))

    return todo_bp
