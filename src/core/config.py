"""Configuration management for the chore ledger."""

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Pydantic Logfire Configuration (optional)
    logfire_token: str | None = Field(default=None, description="Pydantic Logfire token for observability")
    environment: str = Field(default="development", description="Deployment environment reported to Logfire")

    # Dashboard Configuration
    dashboard_history_limit: int = Field(
        default=20, gt=0, description="Maximum number of tasks returned in the dashboard history"
    )
    default_task_name: str = Field(
        default="Task", description="Label used when a task has no resolvable catalog item"
    )
    unknown_user_name: str = Field(
        default="Unknown", description="Label used when a task doer is not part of the group roster"
    )

    # Balance Configuration
    balance_tolerance: float = Field(
        default=1e-10, gt=0, description="Tolerance when checking that group balances sum to zero"
    )


# Application Constants
class Constants:
    """Application-wide constants."""

    SERVICE_NAME: str = "chore-ledger"
    SERVICE_VERSION: str = "0.1.0"

    # Catalog templates
    TEMPLATE_CUSTOM: str = "custom"


def get_settings() -> Settings:
    """Get application settings (singleton pattern)."""
    return Settings()


# Global settings instance
settings = get_settings()
constants = Constants()
