"""
Submission coordinator - Async submission lifecycle for the registration form.

Submission State Machine
========================

States:
- IDLE: Initial state, form is interactive
- PENDING: Account creation request is outstanding, submit is disabled
- SUCCEEDED: Account created, caller navigates to the login view
- FAILED: Request rejected or transport failed, form is interactive again

Transitions:
    IDLE/FAILED -> PENDING    (submit with all fields valid)
    PENDING -> SUCCEEDED      (2xx response)
    PENDING -> FAILED         (non-2xx response, network error, cancellation)

Submitting while PENDING or after SUCCEEDED is a no-op. Side effects
(navigation, toast) are returned as SubmissionOutcome values and left
to the caller.
"""

import logging
from collections.abc import Callable
from dataclasses import dataclass, field
from enum import Enum
from urllib.parse import urlencode

from .exceptions import FormInvalidError
from .form import FormStateController
from .ports import FailureKind, GatewayResult, RegistrationGateway, RegistrationRequest

logger = logging.getLogger(__name__)

DEFAULT_NETWORK_ERROR_MESSAGE = "Unable to reach the server, please try again"


class SubmissionStatus(str, Enum):
    """Lifecycle states of a form submission."""

    IDLE = "idle"
    PENDING = "pending"
    SUCCEEDED = "succeeded"
    FAILED = "failed"


@dataclass(frozen=True)
class SubmissionState:
    """Current submission status and the message of the last failure."""

    status: SubmissionStatus = SubmissionStatus.IDLE
    message: str | None = None

    @property
    def is_pending(self) -> bool:
        return self.status is SubmissionStatus.PENDING


@dataclass(frozen=True)
class Navigation:
    """Navigation request for the routing layer."""

    path: str
    params: dict[str, str] = field(default_factory=dict)

    @property
    def url(self) -> str:
        if not self.params:
            return self.path
        return f"{self.path}?{urlencode(self.params)}"


class OutcomeKind(str, Enum):
    """Action the caller takes after a submit call."""

    NAVIGATE = "navigate"
    NOTIFY = "notify"
    INVALID = "invalid"
    IGNORED = "ignored"


@dataclass(frozen=True)
class SubmissionOutcome:
    """
    What the caller must do after a submit call.

    - NAVIGATE: go to `navigation`
    - NOTIFY: show `message` as a transient notification
    - INVALID: show `errors` inline, nothing was sent
    - IGNORED: nothing to do (re-entrant submit or torn-down form)
    """

    kind: OutcomeKind
    navigation: Navigation | None = None
    message: str | None = None
    errors: dict[str, str] = field(default_factory=dict)


StateListener = Callable[[SubmissionState], None]


class SubmissionCoordinator:
    """
    Drives a single registration submission at a time.

    Owns the SubmissionState and the in-flight request. The form's
    field state stays with the FormStateController.
    """

    def __init__(
        self,
        form: FormStateController,
        gateway: RegistrationGateway,
        login_path: str = "/auth/login",
        redirect_param: str = "redirectFromRegister",
        network_error_message: str = DEFAULT_NETWORK_ERROR_MESSAGE,
    ) -> None:
        self.form = form
        self.gateway = gateway
        self.login_path = login_path
        self.redirect_param = redirect_param
        self.network_error_message = network_error_message
        self._state = SubmissionState()
        self._listeners: list[StateListener] = []
        self._disposed = False

    @property
    def state(self) -> SubmissionState:
        return self._state

    @property
    def is_pending(self) -> bool:
        return self._state.is_pending

    async def submit(self) -> SubmissionOutcome:
        """
        Validate the form and, if valid, create the account.

        The PENDING transition happens before the first await, so a second
        call made while the request is outstanding sees it and returns
        IGNORED without reaching the gateway. Failures never propagate;
        cancellation still does, after PENDING is cleared.

        Returns:
            SubmissionOutcome for the caller to act on
        """
        if self._disposed:
            logger.info("Submit ignored after dispose")
            return SubmissionOutcome(OutcomeKind.IGNORED)
        if self._state.status in (SubmissionStatus.PENDING, SubmissionStatus.SUCCEEDED):
            logger.debug("Submit ignored while %s", self._state.status.value)
            return SubmissionOutcome(OutcomeKind.IGNORED)

        try:
            request = self.form.build_request()
        except FormInvalidError as exc:
            logger.debug("Submit blocked by invalid fields: %s", sorted(exc.errors))
            return SubmissionOutcome(OutcomeKind.INVALID, errors=exc.errors)

        self._transition(SubmissionState(SubmissionStatus.PENDING))
        logger.info("Submitting registration for %s", request.email)

        result = GatewayResult.network("Submission cancelled")
        try:
            result = await self._send(request)
        finally:
            outcome = self._resolve(result)
        return outcome

    def login_link(self) -> Navigation:
        """Navigation for the "Already have an account?" link."""
        return Navigation(self.login_path)

    def dispose(self) -> None:
        """
        Detach the coordinator from its view.

        A request still in flight completes normally but its outcome is
        only logged.
        """
        self._disposed = True
        self._listeners.clear()

    def subscribe(self, listener: StateListener) -> Callable[[], None]:
        """
        Register a listener called on every state transition.

        Returns:
            Callable that removes the listener
        """
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    async def _send(self, request: RegistrationRequest) -> GatewayResult:
        try:
            return await self.gateway.create_account(request)
        except Exception:
            logger.exception("Registration gateway raised unexpectedly")
            return GatewayResult.network()

    def _resolve(self, result: GatewayResult) -> SubmissionOutcome:
        if result.ok:
            self._transition(SubmissionState(SubmissionStatus.SUCCEEDED))
            logger.info("Registration succeeded (status %s)", result.status_code)
            outcome = SubmissionOutcome(
                OutcomeKind.NAVIGATE,
                navigation=Navigation(self.login_path, {self.redirect_param: "true"}),
            )
        else:
            if result.failure is FailureKind.STRUCTURED and result.message:
                message = result.message
                logger.warning(
                    "Registration rejected (status %s): %s", result.status_code, message
                )
            else:
                message = self.network_error_message
                logger.warning("Registration request failed: %s", result.message or "no response")
            self._transition(SubmissionState(SubmissionStatus.FAILED, message))
            outcome = SubmissionOutcome(OutcomeKind.NOTIFY, message=message)

        if self._disposed:
            logger.info("Registration outcome %s dropped after dispose", outcome.kind.value)
            return SubmissionOutcome(OutcomeKind.IGNORED)
        return outcome

    def _transition(self, state: SubmissionState) -> None:
        self._state = state
        for listener in list(self._listeners):
            try:
                listener(state)
            except Exception:
                logger.exception("State listener failed on %s", state.status.value)
