"""
Unit tests for the AuthGate presence-flag check.

Key SDET Concepts Demonstrated:
- Parameterized negative testing of near-miss flag values
"""

import json

import pytest
from flask import session

from app.services.auth_gate import AuthGate
from app.services.session_store import IS_CONNECTED_KEY, USER_NAME_KEY

pytestmark = pytest.mark.unit


@pytest.fixture
def gate(store) -> AuthGate:
    return AuthGate(store)


def test_exact_true_flag_is_authenticated(gate, fake_session):
    fake_session[IS_CONNECTED_KEY] = "True"

    assert gate.is_authenticated(fake_session) is True


@pytest.mark.parametrize(
    "flag",
    ["", "true", "TRUE", "1", "yes", " True", "True ", json.dumps("True")],
)
def test_near_miss_flags_are_denied(gate, fake_session, flag):
    fake_session[IS_CONNECTED_KEY] = flag

    assert gate.is_authenticated(fake_session) is False


def test_absent_flag_is_denied(gate, fake_session):
    assert gate.is_authenticated(fake_session) is False


def test_check_redirects_to_inscription_when_denied(app, gate, fake_session):
    with app.test_request_context("/todo/"):
        response = gate.check(fake_session)

    assert response is not None
    assert response.status_code == 302
    assert response.headers["Location"].endswith("/auth/inscription")


def test_check_lets_authenticated_session_through(app, gate, fake_session):
    fake_session[IS_CONNECTED_KEY] = "True"

    with app.test_request_context("/todo/"):
        assert gate.check(fake_session) is None


def test_sign_in_writes_raw_strings(gate, fake_session):
    gate.sign_in("Amina", fake_session)

    assert fake_session[USER_NAME_KEY] == "Amina"
    assert fake_session[IS_CONNECTED_KEY] == "True"
    assert gate.is_authenticated(fake_session)


def test_sign_in_marks_flask_session_permanent(app, gate):
    with app.test_request_context("/"):
        assert session.permanent is False

        gate.sign_in("Amina", session)

        assert session.permanent is True
        assert gate.is_authenticated(session)
