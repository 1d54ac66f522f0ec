"""
Validation rules - Ordered predicate/message pairs per form field.

Every field declares its rules as an explicit list. Rules are evaluated
in declared order and evaluation stops at the first failure, so only one
message is ever visible for a field.

Rule table
==========

username:
    required        -> "Username is required"
    allowed_chars   -> "Other special characters are not allowed"
email:
    required        -> "Email is required"
    university      -> "Please use your university email"
password:
    required        -> "Password is required"
    min_length      -> "Password is too short"
confirmPassword:
    required        -> "Confirm password is required"
    match_password  -> "Password not match"
"""

import re
from collections.abc import Callable, Mapping
from dataclasses import dataclass
from enum import Enum


class FieldName(str, Enum):
    """Registration form fields, valued by their wire/UI names."""

    USERNAME = "username"
    EMAIL = "email"
    PASSWORD = "password"
    CONFIRM_PASSWORD = "confirmPassword"


USERNAME_PATTERN = re.compile(r"[a-zA-Z0-9_]+")
# "@", anything, literal ".ac", then any number of ".<letters>" groups at the end.
# Zero groups is allowed so bare ".ac" domains pass; the dots are escaped on purpose.
UNIVERSITY_EMAIL_PATTERN = re.compile(r"@.*\.ac(?:\.[a-zA-Z]+)*$")
MIN_PASSWORD_LENGTH = 8

# Helper text displayed next to inputs
FIELD_HINTS: dict[FieldName, str] = {
    FieldName.USERNAME: "Allowed special character: _ (underscore)",
    FieldName.EMAIL: "Use your university email",
}


@dataclass(frozen=True)
class Rule:
    """
    A named check over a field value.

    `check` receives the field's trimmed value and a read-only view of
    all current form values (used by cross-field rules).
    """

    name: str
    check: Callable[[str, Mapping[FieldName, str]], bool]
    message: str


def required(message: str) -> Rule:
    return Rule("required", lambda value, _values: len(value) != 0, message)


RULES: dict[FieldName, list[Rule]] = {
    FieldName.USERNAME: [
        required("Username is required"),
        Rule(
            "allowed_chars",
            lambda value, _values: USERNAME_PATTERN.fullmatch(value) is not None,
            "Other special characters are not allowed",
        ),
    ],
    FieldName.EMAIL: [
        required("Email is required"),
        Rule(
            "university",
            lambda value, _values: UNIVERSITY_EMAIL_PATTERN.search(value) is not None,
            "Please use your university email",
        ),
    ],
    FieldName.PASSWORD: [
        required("Password is required"),
        Rule(
            "min_length",
            lambda value, _values: len(value) >= MIN_PASSWORD_LENGTH,
            "Password is too short",
        ),
    ],
    FieldName.CONFIRM_PASSWORD: [
        required("Confirm password is required"),
        Rule(
            "match_password",
            lambda value, values: value == values.get(FieldName.PASSWORD, ""),
            "Password not match",
        ),
    ],
}


def evaluate(rules: list[Rule], value: str, values: Mapping[FieldName, str]) -> str | None:
    """
    Run rules in order against a value.

    Args:
        rules: Ordered rule list for one field
        value: Trimmed field value
        values: Current values of every field

    Returns:
        Message of the first failing rule, or None if all pass
    """
    for rule in rules:
        if not rule.check(value, values):
            return rule.message
    return None
