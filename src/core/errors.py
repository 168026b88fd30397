"""Domain error types and classification into client-facing responses."""

from enum import Enum

from pydantic import BaseModel, ValidationError


class DomainError(Exception):
    """Base class for business rule violations."""


class TaskValueInvalidError(DomainError, ValueError):
    """Raised when a task is created with a negative point value."""

    def __init__(self, value: float) -> None:
        self.value = value
        super().__init__(f"Task value must be non-negative, received: {value}")


class TaskBeneficiariesEmptyError(DomainError, ValueError):
    """Raised when a task is created without any beneficiary."""

    def __init__(self) -> None:
        super().__init__("Task must have at least one beneficiary")


class EntityNotFoundError(DomainError, KeyError):
    """Raised when a referenced entity does not exist in the group."""

    def __init__(self, entity: str, entity_id: str) -> None:
        self.entity = entity
        self.entity_id = entity_id
        super().__init__(f"{entity} not found with id: {entity_id}")

    def __str__(self) -> str:
        # KeyError quotes its argument otherwise
        return str(self.args[0])


class ErrorSeverity(Enum):
    """Severity levels for errors."""

    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"


class ErrorCode:
    """Error codes for specific error conditions."""

    ERR_VALIDATION = "ERR_VALIDATION"
    ERR_ENTITY_NOT_FOUND = "ERR_ENTITY_NOT_FOUND"
    ERR_DOMAIN = "ERR_DOMAIN"
    ERR_UNKNOWN = "ERR_UNKNOWN"


class ErrorResponse(BaseModel):
    """Structured error response with user-friendly messaging."""

    code: str
    message: str
    suggestion: str
    severity: ErrorSeverity


def classify_error_with_response(exception: Exception) -> ErrorResponse:
    """Classify an error and return a structured response with recovery suggestions.

    Args:
        exception: The exception raised while handling a request

    Returns:
        ErrorResponse with code, message, suggestion, and severity
    """
    if isinstance(exception, EntityNotFoundError):
        return ErrorResponse(
            code=ErrorCode.ERR_ENTITY_NOT_FOUND,
            message=str(exception),
            suggestion=f"Check that the {exception.entity.lower()} belongs to this group.",
            severity=ErrorSeverity.LOW,
        )

    if isinstance(exception, ValidationError | TaskValueInvalidError | TaskBeneficiariesEmptyError):
        return ErrorResponse(
            code=ErrorCode.ERR_VALIDATION,
            message=_validation_message(exception),
            suggestion="Use a non-negative value and select at least one beneficiary.",
            severity=ErrorSeverity.LOW,
        )

    if isinstance(exception, DomainError):
        return ErrorResponse(
            code=ErrorCode.ERR_DOMAIN,
            message=str(exception),
            suggestion="Review the request and try again.",
            severity=ErrorSeverity.MEDIUM,
        )

    return ErrorResponse(
        code=ErrorCode.ERR_UNKNOWN,
        message="An unexpected error occurred.",
        suggestion="Please try again later. If the problem persists, contact support.",
        severity=ErrorSeverity.HIGH,
    )


def _validation_message(exception: Exception) -> str:
    """Return the first human-readable message of a validation failure."""
    if isinstance(exception, ValidationError):
        errors = exception.errors()
        if errors:
            return errors[0]["msg"]
    return str(exception)
