"""
Unit tests for domain ports and exceptions.

Tests verify:
- The tagged GatewayResult and its constructors
- RegistrationRequest defaults
- Exceptions are properly structured
- Domain purity (zero framework imports)
"""

import dataclasses
import subprocess
from enum import Enum

import pytest

from src.domain.exceptions import (
    FormInvalidError,
    RegistrationFormError,
    SubmissionError,
    UnknownFieldError,
)
from src.domain.ports import FailureKind, GatewayResult, RegistrationGateway, RegistrationRequest
from tests.helpers import FakeGateway


class TestFailureKindEnum:
    """Tests for FailureKind enum."""

    def test_failure_kind_is_enum(self) -> None:
        assert issubclass(FailureKind, Enum)

    def test_failure_kind_values(self) -> None:
        assert FailureKind.STRUCTURED.value == "structured"
        assert FailureKind.NETWORK.value == "network"


class TestGatewayResult:
    """Tests for GatewayResult constructors."""

    def test_success(self) -> None:
        result = GatewayResult.success(201)
        assert result.ok is True
        assert result.status_code == 201
        assert result.failure is None
        assert result.message is None

    def test_structured(self) -> None:
        result = GatewayResult.structured(409, "Email already used")
        assert result.ok is False
        assert result.failure is FailureKind.STRUCTURED
        assert result.status_code == 409
        assert result.message == "Email already used"

    def test_network(self) -> None:
        result = GatewayResult.network()
        assert result.ok is False
        assert result.failure is FailureKind.NETWORK
        assert result.status_code is None

    def test_is_immutable(self) -> None:
        with pytest.raises(dataclasses.FrozenInstanceError):
            GatewayResult.success(200).status_code = 500  # type: ignore[misc]


class TestRegistrationRequest:
    """Tests for RegistrationRequest."""

    def test_is_valid_defaults_to_false(self) -> None:
        request = RegistrationRequest(username="jane", email="j@uni.ac.uk", password="secret123")
        assert request.is_valid is False

    def test_is_immutable(self) -> None:
        request = RegistrationRequest(username="jane", email="j@uni.ac.uk", password="secret123")
        with pytest.raises(dataclasses.FrozenInstanceError):
            request.username = "john"  # type: ignore[misc]


class TestRegistrationGatewayProtocol:
    """Tests for RegistrationGateway protocol."""

    def test_protocol_has_create_account(self) -> None:
        assert hasattr(RegistrationGateway, "create_account")

    def test_fake_gateway_satisfies_protocol(self) -> None:
        def accepts_gateway(g: RegistrationGateway) -> None:
            pass

        accepts_gateway(FakeGateway())


class TestExceptions:
    """Tests for domain exceptions."""

    @pytest.mark.parametrize("exc_type", [UnknownFieldError, FormInvalidError, SubmissionError])
    def test_inherit_from_base(self, exc_type: type) -> None:
        assert issubclass(exc_type, RegistrationFormError)

    def test_form_invalid_carries_errors(self) -> None:
        exc = FormInvalidError({"email": "Email is required"})
        assert exc.errors == {"email": "Email is required"}
        assert str(exc) == "email: Email is required"

    def test_unknown_field_message(self) -> None:
        with pytest.raises(RegistrationFormError, match="nickname"):
            raise UnknownFieldError("nickname")


class TestDomainPurity:
    """Tests for domain purity - zero framework imports."""

    @pytest.mark.parametrize("module", ["httpx", "pydantic", "fastapi"])
    def test_no_from_imports_in_domain(self, module: str) -> None:
        result = subprocess.run(
            ["grep", "-r", f"from {module}", "src/domain/"],
            capture_output=True,
            text=True,
        )
        assert result.returncode != 0, f"{module} import found: {result.stdout}"

    @pytest.mark.parametrize("module", ["httpx", "pydantic", "fastapi"])
    def test_no_plain_imports_in_domain(self, module: str) -> None:
        result = subprocess.run(
            ["grep", "-r", f"import {module}", "src/domain/"],
            capture_output=True,
            text=True,
        )
        assert result.returncode != 0, f"{module} import found: {result.stdout}"
