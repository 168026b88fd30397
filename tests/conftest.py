"""Pytest configuration and shared fixtures."""

import logfire
import pytest

from src.core.config import Settings


@pytest.fixture(scope="session", autouse=True)
def quiet_logfire() -> None:
    """Configure Logfire so spans are recorded locally without console output."""
    logfire.configure(send_to_logfire=False, console=False)


@pytest.fixture
def test_settings() -> Settings:
    """Settings isolated from the environment and any .env file."""
    return Settings(_env_file=None, logfire_token=None)
