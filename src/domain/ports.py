"""
Port interfaces - Protocol definitions for infrastructure abstraction.

This module defines the interfaces (ports) that the form core requires
from infrastructure, and the tagged result the transport hands back.
Adapters implement these protocols.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Protocol


class FailureKind(Enum):
    """
    Failure classification for an account creation attempt.

    - STRUCTURED: the endpoint answered with a non-2xx status and a message
    - NETWORK: no usable response (connection error, timeout, bad payload)
    """

    STRUCTURED = "structured"
    NETWORK = "network"


@dataclass(frozen=True)
class RegistrationRequest:
    """Payload sent to the account creation endpoint, built once per submit."""

    username: str
    email: str
    password: str
    # Accounts are always created unverified
    is_valid: bool = False


@dataclass(frozen=True)
class GatewayResult:
    """
    Tagged outcome of a gateway call: Ok(status) or Err(kind, message).

    Consumers branch on `ok` and then on `failure`; no exception crosses
    the gateway boundary.
    """

    status_code: int | None = None
    failure: FailureKind | None = None
    message: str | None = None

    @property
    def ok(self) -> bool:
        return self.failure is None

    @classmethod
    def success(cls, status_code: int) -> "GatewayResult":
        return cls(status_code=status_code)

    @classmethod
    def structured(cls, status_code: int, message: str) -> "GatewayResult":
        return cls(status_code=status_code, failure=FailureKind.STRUCTURED, message=message)

    @classmethod
    def network(cls, message: str | None = None) -> "GatewayResult":
        return cls(failure=FailureKind.NETWORK, message=message)


class RegistrationGateway(Protocol):
    """Port interface for the remote account creation endpoint."""

    async def create_account(self, request: RegistrationRequest) -> GatewayResult:
        """
        Submit a registration request to the remote endpoint.

        Implementations must map every failure, structured or not,
        into a GatewayResult instead of raising.

        Args:
            request: Validated registration payload

        Returns:
            GatewayResult.success for any 2xx response, otherwise a failure
        """
        ...
