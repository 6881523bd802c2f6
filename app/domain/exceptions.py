"""Domain exceptions for the TaskDesk application.

Defines domain-level exceptions that represent business rule violations.
These exceptions are independent of infrastructure concerns. Presentation
layer maps them to HTTP responses in exception handlers.
"""

from typing import Any


class TaskDeskException(Exception):
    """Base exception for all TaskDesk application errors.

    All custom exceptions should inherit from this class to allow
    consistent error handling and logging. Presentation layer maps
    these to HTTP responses using message, error_code, and details.

    Attributes:
        message: Human-readable error description.
        error_code: Machine-readable error code.
        details: Additional error context (e.g. field, resource_id).
    """

    def __init__(
        self,
        message: str,
        error_code: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        """Initialize the exception.

        Args:
            message: Human-readable error description.
            error_code: Optional machine-readable code; defaults to class name.
            details: Optional dict of extra context.
        """
        self.message = message
        self.error_code = error_code or self.__class__.__name__
        self.details = details or {}
        super().__init__(self.message)

    def to_dict(self) -> dict[str, Any]:
        """Return the JSON body sent to clients ("msg" carries the message)."""
        return {
            "error": self.error_code,
            "msg": self.message,
            "details": self.details,
        }


class ValidationException(TaskDeskException):
    """Raised when input validation fails (e.g. missing field or invalid enum value)."""

    def __init__(self, message: str, field: str | None = None) -> None:
        """Initialize with message and optional field name.

        Args:
            message: Description of the validation failure.
            field: Optional field or attribute that failed validation.
        """
        details = {"field": field} if field else {}
        super().__init__(message, "VALIDATION_ERROR", details)


class AuthenticationException(TaskDeskException):
    """Raised when the request carries no valid credentials."""

    def __init__(self, message: str = "Not authenticated") -> None:
        super().__init__(message, "AUTHENTICATION_ERROR")


class NotAuthorizedException(TaskDeskException):
    """Raised when the caller is not the task owner or not a team member."""

    def __init__(
        self,
        message: str = "Not authorized",
        resource: str | None = None,
        resource_id: str | None = None,
    ) -> None:
        """Initialize with message and optional resource context.

        Args:
            message: Human-readable message returned to the client.
            resource: Optional resource type (e.g. 'task', 'team').
            resource_id: Optional id of the resource the caller tried to access.
        """
        details: dict[str, Any] = {}
        if resource:
            details["resource"] = resource
        if resource_id:
            details["resource_id"] = resource_id
        super().__init__(message, "NOT_AUTHORIZED", details)


class ResourceNotFoundException(TaskDeskException):
    """Raised when a referenced task or team does not exist."""

    def __init__(self, resource_type: str, resource_id: str) -> None:
        """Initialize with resource type and id.

        Args:
            resource_type: Type of resource (e.g. 'Task', 'Team').
            resource_id: The ID that was not found.
        """
        super().__init__(
            f"{resource_type} not found",
            "RESOURCE_NOT_FOUND",
            {"resource_type": resource_type, "resource_id": resource_id},
        )


class StoreUnavailableException(TaskDeskException):
    """Raised when an operation needs the document store but no client is configured."""

    def __init__(self) -> None:
        super().__init__(
            message="Document store is not configured.",
            error_code="SERVICE_UNAVAILABLE",
        )
