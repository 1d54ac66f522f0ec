"""
Dependency factories - Wire the form core to its adapters.

This module builds the httpx client, the HTTP gateway and the
controller/coordinator pair from application settings.
"""

import httpx

from src.adapters.http.gateway import HttpRegistrationGateway
from src.config.settings import Settings, get_settings
from src.domain.form import FormStateController
from src.domain.ports import RegistrationGateway
from src.domain.submission import SubmissionCoordinator


def get_http_client(settings: Settings | None = None) -> httpx.AsyncClient:
    """Create an async client; timeout is only overridden when configured."""
    settings = settings or get_settings()
    if settings.request_timeout is None:
        return httpx.AsyncClient()
    return httpx.AsyncClient(timeout=settings.request_timeout)


def get_registration_gateway(
    client: httpx.AsyncClient, settings: Settings | None = None
) -> HttpRegistrationGateway:
    settings = settings or get_settings()
    return HttpRegistrationGateway(client, settings.base_url, settings.register_path)


def get_submission_coordinator(
    gateway: RegistrationGateway,
    settings: Settings | None = None,
    form: FormStateController | None = None,
) -> SubmissionCoordinator:
    """
    Create a coordinator bound to a (new by default) form controller.

    Navigation targets and the fallback notification come from settings.
    """
    settings = settings or get_settings()
    return SubmissionCoordinator(
        form=form or FormStateController(),
        gateway=gateway,
        login_path=settings.login_path,
        redirect_param=settings.redirect_param,
        network_error_message=settings.network_error_message,
    )
