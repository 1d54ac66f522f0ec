"""
Domain exceptions - Semantic error types for the registration form.

This module defines domain-specific exceptions that communicate
form and submission failures without leaking transport details.
"""


class RegistrationFormError(Exception):
    """Base class for registration form errors."""

    pass


class UnknownFieldError(RegistrationFormError):
    """Field name is not part of the registration form."""

    pass


class FormInvalidError(RegistrationFormError):
    """A request was built from a form with failing fields."""

    def __init__(self, errors: dict[str, str]) -> None:
        self.errors = errors
        super().__init__(", ".join(f"{name}: {message}" for name, message in errors.items()))


class SubmissionError(RegistrationFormError):
    """Account creation request could not be completed."""

    pass
