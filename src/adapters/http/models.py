"""
Wire models for the account creation endpoint.

Pydantic models for serializing the registration request body.
"""

from typing import Literal

from pydantic import BaseModel, ConfigDict, Field

from src.domain.ports import RegistrationRequest


class RegisterPayload(BaseModel):
    """JSON body of POST /register."""

    model_config = ConfigDict(populate_by_name=True, frozen=True)

    username: str
    email: str
    password: str
    is_valid: Literal[False] = Field(
        False, alias="isValid", description="Accounts are created unverified"
    )

    @classmethod
    def from_request(cls, request: RegistrationRequest) -> "RegisterPayload":
        return cls(username=request.username, email=request.email, password=request.password)

    def to_json(self) -> dict:
        return self.model_dump(by_alias=True)
