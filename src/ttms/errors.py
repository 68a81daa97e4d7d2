from abc import ABC
from typing import ClassVar


class UserError(ABC, Exception):
    """Base class for user-related errors.

    All errors that inherit from UserError will have their messages
    displayed to the user. These errors should not contain any
    sensitive information.
    """

    status_code: ClassVar[int] = 400
    error_type: ClassVar[str] = "bad_request"


class ValidationError(UserError):
    """Raised when user input fails validation."""

    status_code = 400
    error_type = "validation_error"


class AuthenticationError(UserError):
    """Raised when authentication fails."""

    status_code = 401
    error_type = "authentication_error"

    def __init__(self, message: str = "Authentication failed") -> None:
        super().__init__(message)


class NotFoundError(UserError):
    """Raised when a requested resource is not found."""

    status_code = 404
    error_type = "not_found"

    def __init__(self, message: str = "Document not found") -> None:
        super().__init__(message)


class ConflictError(UserError):
    """Raised when a resource with the same unique key already exists."""

    status_code = 409
    error_type = "conflict"

    def __init__(self, message: str = "Resource already exists") -> None:
        super().__init__(message)


class InternalError(UserError):
    """Raised when an operation fails for reasons the client cannot fix.

    The message is generic; the underlying cause is only logged.
    """

    status_code = 500
    error_type = "internal_server_error"

    def __init__(self, message: str = "Internal Server Error") -> None:
        super().__init__(message)


class ConfigurationError(Exception):
    """Raised at startup when required configuration is missing or invalid."""
