"""
Request pipeline for the task board entry points.

Every entry point (``Auth``, ``Todo``, ``Theme``) runs a configured,
ordered chain of steps before its handler:

- ``auth``: the :class:`~app.services.auth_gate.AuthGate` check; may
  short-circuit with a redirect to the inscription page.
- ``theme``: resolves the theme cookie onto ``g.theme``.
- ``logging``: appends one line to the action log.

Each entry point's chain must be a subsequence of the canonical order
``auth, theme, logging``. Keeping logging after auth means a redirected
request is never logged and a handled one is logged exactly once.

The states a request passes through are recorded on ``g.pipeline_trail``::

    Received -> AuthChecked -> Themed -> Logged -> Handled -> Responded
    Received -> AuthChecked -> Responded            (auth denied)

Key Concepts Demonstrated:
- Explicit middleware chain instead of per-view ad-hoc decorators
- Configuration validated once at application start
- Dependency passing: the pipeline receives concrete services
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Mapping, Sequence
from enum import Enum
from functools import wraps
from typing import Any

from flask import g, make_response, request, session
from werkzeug.wrappers import Response

from app.services.action_logger import ActionLogger
from app.services.auth_gate import AuthGate
from app.services.session_store import USER_NAME_KEY, SessionStore
from app.services.theme import ThemeResolver

logger = logging.getLogger(__name__)


class PipelineStep(str, Enum):
    """Named pre-handler steps."""

    AUTH = "auth"
    THEME = "theme"
    LOGGING = "logging"


CANONICAL_ORDER: tuple[PipelineStep, ...] = (
    PipelineStep.AUTH,
    PipelineStep.THEME,
    PipelineStep.LOGGING,
)


class PipelineState(str, Enum):
    """Per-request pipeline states."""

    RECEIVED = "Received"
    AUTH_CHECKED = "AuthChecked"
    THEMED = "Themed"
    LOGGED = "Logged"
    HANDLED = "Handled"
    RESPONDED = "Responded"


_STATE_AFTER_STEP = {
    PipelineStep.AUTH: PipelineState.AUTH_CHECKED,
    PipelineStep.THEME: PipelineState.THEMED,
    PipelineStep.LOGGING: PipelineState.LOGGED,
}


class PipelineConfigError(ValueError):
    """Raised when an entry point's step chain is invalid."""


def parse_step_chain(entry_point: str, names: Sequence[str]) -> tuple[PipelineStep, ...]:
    """
    Validate one entry point's configured steps.

    Args:
        entry_point: Entry point name, used in error messages.
        names: Step names in run order.

    Returns:
        The steps as :class:`PipelineStep` members.

    Raises:
        PipelineConfigError: On an unknown or repeated step, or a step
            placed out of canonical order.
    """
    steps: list[PipelineStep] = []
    for name in names:
        try:
            step = PipelineStep(name)
        except ValueError as exc:
            raise PipelineConfigError(
                f"Unknown pipeline step '{name}' for entry point '{entry_point}'"
            ) from exc
        if step in steps:
            raise PipelineConfigError(
                f"Pipeline step '{name}' repeated for entry point '{entry_point}'"
            )
        steps.append(step)

    positions = [CANONICAL_ORDER.index(step) for step in steps]
    if positions != sorted(positions):
        expected = ", ".join(step.value for step in CANONICAL_ORDER)
        raise PipelineConfigError(
            f"Steps for entry point '{entry_point}' must follow the order: {expected}"
        )
    return tuple(steps)


class RequestPipeline:
    """
    Runs the configured step chain around view handlers.

    Args:
        store: Session store used to read the user name for logging.
        auth_gate: Gate consulted by the ``auth`` step.
        theme_resolver: Resolver consulted by the ``theme`` step.
        action_logger: Shared logger used by the ``logging`` step.
        entry_points: Mapping of entry point name to step names.
    """

    def __init__(
        self,
        store: SessionStore,
        auth_gate: AuthGate,
        theme_resolver: ThemeResolver,
        action_logger: ActionLogger,
        entry_points: Mapping[str, Sequence[str]],
    ):
        self.store = store
        self.auth_gate = auth_gate
        self.theme_resolver = theme_resolver
        self.action_logger = action_logger
        self._chains = {
            name: parse_step_chain(name, steps) for name, steps in entry_points.items()
        }

    @property
    def entry_points(self) -> dict[str, tuple[PipelineStep, ...]]:
        return dict(self._chains)

    def steps_for(self, entry_point: str) -> tuple[PipelineStep, ...]:
        try:
            return self._chains[entry_point]
        except KeyError as exc:
            raise PipelineConfigError(f"Entry point '{entry_point}' is not configured") from exc

    # -----------------------------------------------------------------------------
    # Steps
    # -----------------------------------------------------------------------------

    def _run_auth(self, entry_point: str, operation: str) -> Response | None:
        return self.auth_gate.check(session)

    def _run_theme(self, entry_point: str, operation: str) -> Response | None:
        g.theme = self.theme_resolver.get_current_theme(request).value
        return None

    def _run_logging(self, entry_point: str, operation: str) -> Response | None:
        user_name = self.store.get_string(USER_NAME_KEY, session)
        self.action_logger.log_action(user_name, entry_point, operation)
        return None

    def _step_runner(self, step: PipelineStep) -> Callable[[str, str], Response | None]:
        return {
            PipelineStep.AUTH: self._run_auth,
            PipelineStep.THEME: self._run_theme,
            PipelineStep.LOGGING: self._run_logging,
        }[step]

    # -----------------------------------------------------------------------------
    # Execution
    # -----------------------------------------------------------------------------

    def run(
        self,
        entry_point: str,
        operation: str,
        handler: Callable[..., Any],
        *args: Any,
        **kwargs: Any,
    ) -> Response:
        """
        Run the entry point's steps, then ``handler``.

        Must be called inside a request context.

        Returns:
            The short-circuit response of a step, or the handler's response.
        """
        trail: list[PipelineState] = [PipelineState.RECEIVED]
        g.pipeline_trail = trail

        for step in self.steps_for(entry_point):
            result = self._step_runner(step)(entry_point, operation)
            trail.append(_STATE_AFTER_STEP[step])
            if result is not None:
                logger.debug("%s.%s short-circuited by %s", entry_point, operation, step.value)
                trail.append(PipelineState.RESPONDED)
                return result

        response = make_response(handler(*args, **kwargs))
        trail.append(PipelineState.HANDLED)
        trail.append(PipelineState.RESPONDED)
        return response

    def entry_point(self, name: str) -> Callable[[str], Callable]:
        """
        Build a decorator factory for one entry point.

        Example:
            guard = pipeline.entry_point("Todo")

            @bp.route("/")
            @guard("Index")
            def index(): ...
        """
        self.steps_for(name)

        def guard(operation: str) -> Callable:
            def decorator(view_func: Callable) -> Callable:
                @wraps(view_func)
                def wrapper(*args, **kwargs):
                    return self.run(name, operation, view_func, *args, **kwargs)

                return wrapper

            return decorator

        return guard
