"""
Flask application factory module.

This module creates and configures the Flask application using
the factory pattern, allowing for different configurations
(development, testing, production).

The factory builds every service once and passes the concrete
instances to the request pipeline and the blueprint factories; there is
no runtime lookup of dependencies.
"""

import logging
from typing import Any

from flask import Flask, g

from config import get_config

from app.pipeline import RequestPipeline
from app.services.action_logger import ActionLogger
from app.services.auth_gate import AuthGate
from app.services.session_store import SessionStore
from app.services.task_repository import TaskRepository
from app.services.theme import DEFAULT_THEME, ThemeResolver
from app.session_backend import MemorySessionInterface

# Configure logging
logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s"
)
logger = logging.getLogger(__name__)


def create_app(config_name: str | None = None, overrides: dict[str, Any] | None = None) -> Flask:
    """
    Create and configure the Flask application.

    Args:
        config_name: Configuration environment name.
                     If None, uses FLASK_ENV environment variable.
        overrides: Optional config values applied after the
                   configuration class (handy for tests).

    Returns:
        Configured Flask application instance.
    """
    app = Flask(__name__, instance_relative_config=True)

    # Load configuration
    config_class = get_config(config_name)
    app.config.from_object(config_class)
    if overrides:
        app.config.update(overrides)

    logger.info(f"Creating app with config: {config_class.__name__}")

    backend = app.config["SESSION_BACKEND"]
    if backend == "memory":
        app.session_interface = MemorySessionInterface()
    elif backend != "cookie":
        raise ValueError(f"Unknown SESSION_BACKEND '{backend}' (expected 'memory' or 'cookie')")

    # Build services
    store = SessionStore()
    tasks = TaskRepository(store)
    themes = ThemeResolver(secure=app.config["THEME_COOKIE_SECURE"])
    action_logger = ActionLogger(app.config["LOG_DIR"], app.config["LOG_FILE_NAME"])
    auth_gate = AuthGate(store)
    pipeline = RequestPipeline(
        store=store,
        auth_gate=auth_gate,
        theme_resolver=themes,
        action_logger=action_logger,
        entry_points=app.config["PIPELINE_ENTRY_POINTS"],
    )
    app.extensions["task_board"] = {
        "tasks": tasks,
        "action_logger": action_logger,
    }

    # Register blueprints
    from app.routes.auth import create_auth_blueprint
    from app.routes.theme import create_theme_blueprint
    from app.routes.todo import create_todo_blueprint

    app.register_blueprint(create_auth_blueprint(pipeline, auth_gate))
    app.register_blueprint(create_todo_blueprint(pipeline, tasks))
    app.register_blueprint(create_theme_blueprint(pipeline, themes))

    @app.context_processor
    def inject_theme() -> dict[str, str]:
        return {"theme": g.get("theme", DEFAULT_THEME.value)}

    return app
