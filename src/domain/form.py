"""
Form state controller - Field values, dirty flags and validation errors.

The controller is the single owner of field state. Values are trimmed on
every change, validated immediately ("validate on change"), and fully
re-validated on submit. Listeners are notified after each field update
so a rendering layer can redraw without any UI runtime in the core.
"""

import logging
from collections.abc import Callable
from dataclasses import dataclass

from .exceptions import FormInvalidError, UnknownFieldError
from .ports import RegistrationRequest
from .rules import RULES, FieldName, evaluate

logger = logging.getLogger(__name__)

FieldListener = Callable[[FieldName, "FieldState"], None]


@dataclass
class FieldState:
    """Current state of one form field."""

    raw: str = ""
    value: str = ""
    dirty: bool = False
    error: str | None = None

    @property
    def valid(self) -> bool:
        return self.error is None


class FormStateController:
    """
    Holds and validates the registration form fields.

    Field names may be given as FieldName members or as their wire names
    ("username", "email", "password", "confirmPassword").
    """

    def __init__(self) -> None:
        self._fields: dict[FieldName, FieldState] = {name: FieldState() for name in FieldName}
        self._listeners: list[FieldListener] = []

    def set_field(self, name: FieldName | str, raw_value: str) -> str:
        """
        Store a new value for a field and validate it.

        Args:
            name: Field to update
            raw_value: Value as typed by the user

        Returns:
            The stored (trimmed) value

        Raises:
            UnknownFieldError: If name is not a registration field
        """
        field_name = self._resolve(name)
        state = self._fields[field_name]
        state.raw = raw_value
        state.value = raw_value.strip()
        state.dirty = True
        self.validate_field(field_name)
        return state.value

    def validate_field(self, name: FieldName | str) -> str | None:
        """
        Validate one field against its ordered rule list.

        Stores the outcome on the field and notifies listeners.

        Returns:
            First failing rule's message, or None if the field is valid
        """
        field_name = self._resolve(name)
        state = self._fields[field_name]
        state.error = evaluate(RULES[field_name], state.value, self.values)
        self._notify(field_name, state)
        return state.error

    def validate_all(self) -> bool:
        """Validate every field; True only if all of them pass."""
        results = [self.validate_field(name) for name in FieldName]
        valid = all(error is None for error in results)
        if not valid:
            logger.debug("Form has failing fields: %s", sorted(self.errors))
        return valid

    def value(self, name: FieldName | str) -> str:
        return self._fields[self._resolve(name)].value

    def error(self, name: FieldName | str) -> str | None:
        return self._fields[self._resolve(name)].error

    def field(self, name: FieldName | str) -> FieldState:
        return self._fields[self._resolve(name)]

    @property
    def values(self) -> dict[FieldName, str]:
        return {name: state.value for name, state in self._fields.items()}

    @property
    def errors(self) -> dict[str, str]:
        """Currently stored messages keyed by wire name, failing fields only."""
        return {
            name.value: state.error
            for name, state in self._fields.items()
            if state.error is not None
        }

    @property
    def is_valid(self) -> bool:
        return not self.errors

    def build_request(self) -> RegistrationRequest:
        """
        Build the registration payload from the current values.

        Re-validates every field first; the confirmation is never sent.

        Raises:
            FormInvalidError: If any field fails validation
        """
        if not self.validate_all():
            raise FormInvalidError(self.errors)
        return RegistrationRequest(
            username=self.value(FieldName.USERNAME),
            email=self.value(FieldName.EMAIL),
            password=self.value(FieldName.PASSWORD),
        )

    def reset(self) -> None:
        """Clear every value, flag and message."""
        for name in FieldName:
            self._fields[name] = FieldState()
            self._notify(name, self._fields[name])

    def subscribe(self, listener: FieldListener) -> Callable[[], None]:
        """
        Register a listener called after each field update.

        Returns:
            Callable that removes the listener
        """
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    def _notify(self, name: FieldName, state: FieldState) -> None:
        for listener in list(self._listeners):
            try:
                listener(name, state)
            except Exception:
                logger.exception("Field listener failed for %s", name.value)

    def _resolve(self, name: FieldName | str) -> FieldName:
        try:
            return FieldName(name)
        except ValueError:
            raise UnknownFieldError(name) from None
