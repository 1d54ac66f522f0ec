"""
Domain layer - Registration form core with zero framework imports.

This package holds field validation and the submission state machine.
It defines its own port interface for the account creation endpoint,
so transport adapters stay outside the core.
"""

from .exceptions import FormInvalidError, RegistrationFormError, SubmissionError, UnknownFieldError
from .form import FieldState, FormStateController
from .ports import FailureKind, GatewayResult, RegistrationGateway, RegistrationRequest
from .rules import FIELD_HINTS, RULES, FieldName, Rule, evaluate
from .submission import (
    Navigation,
    OutcomeKind,
    SubmissionCoordinator,
    SubmissionOutcome,
    SubmissionState,
    SubmissionStatus,
)

__all__ = [
    "FIELD_HINTS",
    "FailureKind",
    "FieldName",
    "FieldState",
    "FormInvalidError",
    "FormStateController",
    "GatewayResult",
    "Navigation",
    "OutcomeKind",
    "RULES",
    "RegistrationFormError",
    "RegistrationGateway",
    "RegistrationRequest",
    "Rule",
    "SubmissionCoordinator",
    "SubmissionError",
    "SubmissionOutcome",
    "SubmissionState",
    "SubmissionStatus",
    "UnknownFieldError",
    "evaluate",
]
