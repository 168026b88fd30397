"""Tests for configuration validation."""

import pytest
from pydantic import ValidationError

from src.core.config import Settings


def test_defaults() -> None:
    """Test default dashboard settings."""
    settings = Settings(_env_file=None)

    assert settings.dashboard_history_limit == 20
    assert settings.default_task_name == "Task"
    assert settings.unknown_user_name == "Unknown"
    assert settings.balance_tolerance == 1e-10


def test_settings_read_from_environment(monkeypatch) -> None:
    """Test that environment variables override defaults."""
    monkeypatch.setenv("DASHBOARD_HISTORY_LIMIT", "5")
    monkeypatch.setenv("DEFAULT_TASK_NAME", "Chore")

    settings = Settings(_env_file=None)

    assert settings.dashboard_history_limit == 5
    assert settings.default_task_name == "Chore"


def test_history_limit_must_be_positive() -> None:
    """Test that a zero history limit is rejected."""
    with pytest.raises(ValidationError, match="dashboard_history_limit"):
        Settings(_env_file=None, dashboard_history_limit=0)

