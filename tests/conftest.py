"""
Shared pytest fixtures for the task board test suite.

This module contains fixtures that are shared across all test modules.
Fixtures follow the Arrange-Act-Assert (AAA) pattern and ensure
test isolation by providing a fresh application, session store and
action log for each test.

Key Concepts Demonstrated:
- Fixture scopes and fixture dependencies
- Test data factories with Faker
- Pre-seeding a session through the test client
- Per-test temporary log directories
"""

import os
from datetime import date, timedelta
from typing import Any

import pytest
from faker import Faker

# Set testing environment before importing app
os.environ["FLASK_ENV"] = "testing"

from app import create_app
from app.models import Task, TaskStatus
from app.services.session_store import SessionStore


# Initialize Faker for generating test data
fake = Faker()


# -----------------------------------------------------------------------------
# Application Fixtures
# -----------------------------------------------------------------------------

@pytest.fixture(scope="function")
def log_dir(tmp_path):
    """Directory that receives the action log of one test (not created up front)."""
    return tmp_path / "Logs"


@pytest.fixture(scope="function")
def app(log_dir):
    """
    Create an application instance for a single test.

    Function scope keeps the in-memory session records and the action log
    private to each test.

    Yields:
        Flask application instance configured for testing.
    """
    application = create_app("testing", {"LOG_DIR": str(log_dir)})
    yield application


@pytest.fixture(scope="function")
def client(app):
    """
    Create a test client for making HTTP requests.

    Args:
        app: Flask application fixture.

    Yields:
        Flask test client for making HTTP requests.
    """
    with app.test_client() as test_client:
        yield test_client


@pytest.fixture
def authenticated_client(client):
    """
    Test client whose session already carries the sign-in flags.

    Returns:
        Flask test client signed in as ``demo``.
    """
    with client.session_transaction() as sess:
        sess["UserName"] = "demo"
        sess["IsConnected"] = "True"
    return client


@pytest.fixture
def action_log(app):
    """
    Reader for the action log of the current app.

    Returns:
        Function returning the log lines (empty list if nothing was written).
    """
    log_path = app.extensions["task_board"]["action_logger"].log_path

    def _read() -> list[str]:
        if not log_path.exists():
            return []
        return log_path.read_text(encoding="utf-8").splitlines()

    return _read


@pytest.fixture
def store() -> SessionStore:
    """Session store with the default key declarations."""
    return SessionStore()


@pytest.fixture
def fake_session() -> dict[str, Any]:
    """A plain dict standing in for the Flask session."""
    return {}


# -----------------------------------------------------------------------------
# Test Data Factory Fixtures
# -----------------------------------------------------------------------------

@pytest.fixture
def task_factory():
    """
    Factory fixture for creating Task instances.

    Returns:
        Function that builds a Task with default or custom values.

    Example:
        def test_something(task_factory):
            task = task_factory(label="My Task")
            assert task.status is TaskStatus.TODO
    """

    def _create_task(
        label: str | None = None,
        description: str | None = None,
        due_date: date | None = None,
        status: TaskStatus = TaskStatus.TODO,
    ) -> Task:
        return Task(
            label=label or fake.sentence(nb_words=3),
            description=description or fake.sentence(nb_words=8),
            due_date=due_date,
            status=status,
        )

    return _create_task


@pytest.fixture
def valid_task_form() -> dict[str, str]:
    """
    Provide valid add-task form data.

    Returns:
        Dictionary with valid form field values.
    """
    return {
        "label": "Buy milk",
        "description": "2%",
        "due_date": (date.today() + timedelta(days=7)).isoformat(),
        "status": TaskStatus.TODO.value,
    }


@pytest.fixture
def valid_registration_form() -> dict[str, str]:
    """Provide valid inscription form data."""
    return {
        "name": fake.first_name(),
        "email": fake.email(),
        "password": fake.password(length=12),
    }
