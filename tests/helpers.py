"""
Test helpers shared across unit and integration tests.

- FakeGateway: in-memory RegistrationGateway that records requests
- fill(): populate a form with valid values
- create_backend(): in-process FastAPI account creation endpoint
"""

import asyncio

from fastapi import FastAPI, HTTPException, Request
from fastapi.responses import JSONResponse, PlainTextResponse

from src.domain.form import FormStateController
from src.domain.ports import GatewayResult, RegistrationRequest
from src.domain.rules import FieldName

VALID_VALUES = {
    FieldName.USERNAME: "jane_doe",
    FieldName.EMAIL: "jane@uni.ac.uk",
    FieldName.PASSWORD: "correct-horse",
    FieldName.CONFIRM_PASSWORD: "correct-horse",
}


class FakeGateway:
    """
    Implements RegistrationGateway protocol in memory.

    When `blocking` is set, create_account waits until `release` is set,
    which keeps a submission PENDING for as long as a test needs.
    """

    def __init__(self, result: GatewayResult | None = None, blocking: bool = False) -> None:
        self.result = result or GatewayResult.success(201)
        self.requests: list[RegistrationRequest] = []
        self.release = asyncio.Event()
        if not blocking:
            self.release.set()

    async def create_account(self, request: RegistrationRequest) -> GatewayResult:
        self.requests.append(request)
        await self.release.wait()
        return self.result


def fill(form: FormStateController, **overrides: str) -> FormStateController:
    """Fill every field with valid values, replacing any given by wire name."""
    for name, value in VALID_VALUES.items():
        form.set_field(name, overrides.get(name.value, value))
    return form


def create_backend() -> FastAPI:
    """
    Stand-in account creation endpoint.

    Rejects by username: "taken" (JSON string), "detail" (HTTPException),
    "plain" (text body), "listy" (unexpected JSON). Everything else is
    created. Received requests are kept on app.state.received.
    """
    backend = FastAPI()
    backend.state.received = []

    @backend.post("/register", status_code=201)
    async def register(request: Request):
        body = await request.json()
        backend.state.received.append({"body": body, "headers": dict(request.headers)})
        username = body["username"]
        if username == "taken":
            return JSONResponse("Email already used", status_code=409)
        if username == "detail":
            raise HTTPException(status_code=400, detail="Username already used")
        if username == "plain":
            return PlainTextResponse("Service unavailable", status_code=503)
        if username == "listy":
            return JSONResponse(["unexpected"], status_code=422)
        return {"id": len(backend.state.received)}

    return backend
