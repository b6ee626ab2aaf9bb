"""Domain exceptions for the photofeed application.

Defines domain-level exceptions that represent business rule violations.
These exceptions are independent of infrastructure concerns. Presentation
layer maps them to HTTP responses in exception handlers.
"""

from typing import Any


class PhotofeedException(Exception):
    """Base exception for all photofeed application errors.

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
        """Return the JSON body used by the exception handlers."""
        return {
            "error": self.error_code,
            "message": self.message,
            "details": self.details,
        }


class ValidationException(PhotofeedException):
    """Raised when input validation fails (e.g. limit out of range)."""

    def __init__(self, message: str, field: str | None = None) -> None:
        """Initialize with message and optional field name.

        Args:
            message: Description of the validation failure.
            field: Optional field or parameter that failed validation.
        """
        details = {"field": field} if field else {}
        super().__init__(message, "VALIDATION_ERROR", details)


class InvalidCursorException(ValidationException):
    """Raised when a pagination cursor is not a valid ISO-8601 timestamp.

    Never silently ignored: an ignored cursor would restart the listing
    from the first page and loop the client.
    """

    def __init__(self, cursor: str) -> None:
        super().__init__(
            "cursor must be an ISO-8601 timestamp",
            field="cursor",
        )
        self.error_code = "INVALID_CURSOR"
        self.details["cursor"] = cursor


class AuthenticationException(PhotofeedException):
    """Raised when authentication fails (e.g. invalid credentials or token)."""

    def __init__(self, message: str = "Authentication failed") -> None:
        super().__init__(message, "AUTHENTICATION_ERROR")


class AuthorizationException(PhotofeedException):
    """Raised when the user lacks permission for the operation."""

    def __init__(
        self,
        resource: str | None = None,
        action: str | None = None,
        message: str = "Permission denied",
    ) -> None:
        """Initialize with optional resource, action, and message.

        Args:
            resource: Optional resource type (e.g. 'comment', 'post').
            action: Optional action that was attempted (e.g. 'delete').
            message: Human-readable message; default used when resource/action omitted.
        """
        if resource and action:
            message = f"Permission denied: {action} on {resource}"
        details: dict[str, Any] = {}
        if resource:
            details["resource"] = resource
        if action:
            details["action"] = action
        super().__init__(message, "PERMISSION_DENIED", details)


class ResourceNotFoundException(PhotofeedException):
    """Raised when a requested resource is not found."""

    def __init__(self, resource_type: str, resource_id: str) -> None:
        """Initialize with resource type and id.

        Args:
            resource_type: Type of resource (e.g. 'user', 'post').
            resource_id: The id or username that was not found.
        """
        super().__init__(
            f"{resource_type} not found: {resource_id}",
            "RESOURCE_NOT_FOUND",
            {"resource_type": resource_type, "resource_id": resource_id},
        )


class ConflictException(PhotofeedException):
    """Raised when a write collides with existing state (e.g. duplicate report)."""

    def __init__(self, message: str, **details: Any) -> None:
        super().__init__(message, "CONFLICT", details)


class UserAlreadyExistsException(PhotofeedException):
    """Raised when registering a username or email that is already taken."""

    def __init__(self) -> None:
        super().__init__(
            "Username or email already registered",
            "USER_ALREADY_EXISTS",
            {},
        )


class DataAccessException(PhotofeedException):
    """Raised when the backing store fails during a read or write.

    Surfaced as 5xx. Not retried here; retry policy belongs to the
    database client configuration.
    """

    def __init__(self, operation: str, reason: str | None = None) -> None:
        details: dict[str, Any] = {"operation": operation}
        if reason:
            details["reason"] = reason
        super().__init__(
            f"Data access failed during {operation}",
            "DATA_ACCESS_ERROR",
            details,
        )


class SqlNotConfiguredException(PhotofeedException):
    """Raised when the SQL engine cannot be created (no DATABASE_URL)."""

    def __init__(self) -> None:
        super().__init__(
            message="This operation requires a SQL database that is not configured.",
            error_code="SERVICE_UNAVAILABLE",
        )
