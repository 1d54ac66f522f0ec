"""
Shared test fixtures and configuration.

This module provides pytest fixtures for:
- Empty and pre-filled form controllers
- An in-memory RegistrationGateway
"""

import pytest

from src.domain.form import FormStateController
from tests.helpers import FakeGateway, fill


@pytest.fixture
def form() -> FormStateController:
    """Empty form controller."""
    return FormStateController()


@pytest.fixture
def valid_form() -> FormStateController:
    """Form controller with every field valid."""
    return fill(FormStateController())


@pytest.fixture
def gateway() -> FakeGateway:
    """Gateway that immediately reports a 201 Created."""
    return FakeGateway()
