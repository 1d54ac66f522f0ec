"""HTTP adapters - Remote account creation endpoint."""

from .gateway import HttpRegistrationGateway, extract_message
from .models import RegisterPayload

__all__ = ["HttpRegistrationGateway", "RegisterPayload", "extract_message"]
