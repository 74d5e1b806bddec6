"""Domain exceptions for the UniFriend API.

Defines domain-level exceptions that represent business rule violations.
These exceptions are independent of infrastructure concerns. Presentation
layer maps them to HTTP responses in exception handlers.
"""

from typing import Any


class UniFriendException(Exception):
    """Base exception for all UniFriend application errors.

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


class ValidationException(UniFriendException):
    """Raised when required input is missing or malformed."""

    def __init__(self, message: str, field: str | None = None) -> None:
        details = {"field": field} if field else {}
        super().__init__(message, "VALIDATION_ERROR", details)


class AuthenticationException(UniFriendException):
    """Raised when the bearer credential is missing, malformed, expired or rejected."""

    def __init__(self, message: str = "Authentication required.") -> None:
        super().__init__(message, "AUTHENTICATION_ERROR")


class AuthorizationException(UniFriendException):
    """Raised when an authenticated caller lacks the role or ownership required."""

    def __init__(
        self,
        message: str = "You do not have permission to access this resource.",
    ) -> None:
        super().__init__(message, "PERMISSION_DENIED")


class ResourceNotFoundException(UniFriendException):
    """Raised when a referenced entity does not exist."""

    def __init__(
        self,
        resource_type: str,
        resource_id: str | None = None,
        message: str | None = None,
    ) -> None:
        """Initialize with resource type and id.

        Args:
            resource_type: Human name of the resource (e.g. 'University').
            resource_id: The ID that was not found, when known.
            message: Override for the default "<type> not found." text.
        """
        details: dict[str, Any] = {"resource_type": resource_type}
        if resource_id is not None:
            details["resource_id"] = resource_id
        super().__init__(
            message or f"{resource_type} not found.",
            "RESOURCE_NOT_FOUND",
            details,
        )


class StoreUnavailableException(UniFriendException):
    """Raised when the document store has not been configured for this process."""

    def __init__(self) -> None:
        super().__init__(
            "Document store is not configured.",
            "INTERNAL_ERROR",
        )
