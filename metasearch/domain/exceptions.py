"""Domain exceptions for the metasearch application.

Defines application-level exceptions. They are independent of the HTTP
layer; the presentation layer maps them to responses in exception handlers.
"""

from typing import Any


class MetaSearchException(Exception):
    """Base exception for all metasearch errors.

    Presentation layer maps these to HTTP responses using message,
    error_code, and details.

    Attributes:
        message: Human-readable error description.
        error_code: Machine-readable error code.
        details: Additional error context (e.g. field, request parameters).
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
        """Return the JSON body used by the exception handler."""
        return {
            "error": self.error_code,
            "message": self.message,
            "details": self.details,
        }


class ValidationException(MetaSearchException):
    """Raised when request input is invalid (e.g. blank query, unknown facet)."""

    def __init__(self, message: str, field: str | None = None) -> None:
        """Initialize with message and optional field name.

        Args:
            message: Description of the validation failure.
            field: Optional input field that failed validation.
        """
        details = {"field": field} if field else {}
        super().__init__(message, "VALIDATION_ERROR", details)


class AuthenticationException(MetaSearchException):
    """Raised when the bearer token is missing or invalid."""

    def __init__(self, message: str = "Authentication failed") -> None:
        super().__init__(message, "AUTHENTICATION_ERROR")


class ResolverException(MetaSearchException):
    """Raised when a resolver's downstream call or response mapping fails.

    The underlying exception is chained as __cause__ (raise ... from exc).
    details carries the request parameters that were in flight.
    """

    def __init__(self, message: str, details: dict[str, Any] | None = None) -> None:
        super().__init__(message, "RESOLVER_ERROR", details)


class EntityClientException(MetaSearchException):
    """Raised by the entity service client on transport or non-2xx responses."""

    def __init__(
        self,
        action: str,
        reason: str,
        status_code: int | None = None,
    ) -> None:
        """Initialize with the failed action and reason.

        Args:
            action: Entity service action (e.g. 'search', 'batchGet').
            reason: Human-readable failure reason.
            status_code: HTTP status when the service answered, else None.
        """
        details: dict[str, Any] = {"action": action, "reason": reason}
        if status_code is not None:
            details["status_code"] = status_code
        super().__init__(
            f"Entity service call '{action}' failed: {reason}",
            "ENTITY_SERVICE_ERROR",
            details,
        )
