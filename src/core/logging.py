"""Logging and observability configuration using Pydantic Logfire.

All modules should use Python's standard logging library (logging.getLogger(__name__)),
and Logfire will automatically capture and enrich these logs.

Standard usage:
    import logging
    logger = logging.getLogger(__name__)
    logger.info("Message", extra={"key": "value"})

Structured logging utilities:
    log_with_group_context(logger, "info", "Task created", group_id="g1", task_id="t1")
"""

import logging

import logfire

from src.core.config import Settings, constants, settings


def configure_logfire(app_settings: Settings | None = None) -> None:
    """Configure Pydantic Logfire with token from environment.

    Nothing is sent to Logfire unless a token is configured.
    """
    app_settings = app_settings or settings
    logfire.configure(
        token=app_settings.logfire_token,
        service_name=constants.SERVICE_NAME,
        service_version=constants.SERVICE_VERSION,
        environment=app_settings.environment,
        send_to_logfire="if-token-present",
    )

    logger = logging.getLogger(__name__)
    logger.info("Logfire configured successfully")


def span(name: str) -> logfire.LogfireSpan:
    """Create a custom span for service layer functions.

    Usage:
        with span("dashboard_service.get_group_dashboard"):
            # Your service logic here
            pass
    """
    return logfire.span(name)


def log_with_context(
    logger: logging.Logger,
    level: str,
    message: str,
    **context: object,
) -> None:
    """Log a message with structured context fields.

    Args:
        logger: Logger instance to use
        level: Log level ("debug", "info", "warning", "error", "critical")
        message: Log message
        **context: Additional context fields (group_id, task_id, operation_type, etc.)
    """
    log_method = getattr(logger, level.lower())
    log_method(message, extra=context)


def log_with_group_context(
    logger: logging.Logger,
    level: str,
    message: str,
    group_id: str | None = None,
    **extra: object,
) -> None:
    """Log a message with group context.

    Args:
        logger: Logger instance to use
        level: Log level ("debug", "info", "warning", "error", "critical")
        message: Log message
        group_id: Group ID to include in context
        **extra: Additional context fields
    """
    context = {"group_id": group_id, **extra} if group_id else extra
    log_with_context(logger, level, message, **context)
