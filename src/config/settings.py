"""
Application settings - pydantic-settings configuration.

This module defines the registration form configuration using
pydantic-settings for environment variable loading with defaults.
"""

from functools import lru_cache

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings with environment variable support."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
    )

    # Account creation endpoint
    base_url: str = "http://localhost:8080"
    register_path: str = "/register"
    request_timeout: float | None = None  # None keeps the httpx default

    # Navigation targets
    login_path: str = "/auth/login"
    redirect_param: str = "redirectFromRegister"

    # Shown when the endpoint gave no usable message
    network_error_message: str = "Unable to reach the server, please try again"


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
