"""
HTTP registration gateway adapter - Implements RegistrationGateway protocol.

This module posts registration requests to the remote account creation
endpoint with httpx and maps every response or transport failure into
the domain's tagged GatewayResult.
"""

import logging

import httpx

from src.adapters.http.models import RegisterPayload
from src.domain.exceptions import SubmissionError
from src.domain.ports import GatewayResult, RegistrationRequest

logger = logging.getLogger(__name__)


def extract_message(response: httpx.Response) -> str:
    """
    Extract the user-facing message from an error response.

    The endpoint answers with a plain message. Accepts a JSON string,
    a JSON object carrying "detail" or "message", or raw text.
    """
    try:
        body = response.json()
    except ValueError:
        return response.text.strip()

    if isinstance(body, str):
        return body
    if isinstance(body, dict):
        for key in ("detail", "message"):
            if isinstance(body.get(key), str):
                return body[key]
    return response.text.strip()


class HttpRegistrationGateway:
    """
    Implements RegistrationGateway protocol over HTTP.

    Uses structural subtyping - no explicit inheritance from Protocol.
    The client is owned by the caller; timeouts are whatever the client
    was configured with.
    """

    def __init__(self, client: httpx.AsyncClient, base_url: str, register_path: str = "/register"):
        self.client = client
        self.url = base_url.rstrip("/") + "/" + register_path.lstrip("/")

    async def create_account(self, request: RegistrationRequest) -> GatewayResult:
        """
        POST the registration payload and classify the response.

        Args:
            request: Validated registration request

        Returns:
            success for 2xx, structured failure for other statuses,
            network failure when no response could be obtained
        """
        try:
            response = await self._post(request)
        except SubmissionError as exc:
            logger.warning("Registration request to %s failed: %s", self.url, exc)
            return GatewayResult.network(str(exc))

        if response.is_success:
            return GatewayResult.success(response.status_code)
        return GatewayResult.structured(response.status_code, extract_message(response))

    async def _post(self, request: RegistrationRequest) -> httpx.Response:
        payload = RegisterPayload.from_request(request)
        try:
            return await self.client.post(self.url, json=payload.to_json())
        except httpx.HTTPError as exc:
            raise SubmissionError(f"{type(exc).__name__}: {exc}") from exc
