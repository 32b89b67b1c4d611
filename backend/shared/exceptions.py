"""
Base exception classes for the BMS Hub backend.

Each module should define its own exceptions that inherit from these bases.
Every base carries the HTTP status it maps to, so the API layer can turn
any of them into a response without knowing the concrete subclass.
"""

from typing import Optional, Any


class BmsHubError(Exception):
    """
    Base exception for all BMS Hub errors.

    All custom exceptions should inherit from this class.
    """

    status_code: int = 500

    def __init__(
        self,
        message: str,
        code: Optional[str] = None,
        details: Optional[dict[str, Any]] = None,
    ):
        super().__init__(message)
        self.message = message
        self.code = code or self.__class__.__name__
        self.details = details or {}

    def to_dict(self) -> dict[str, Any]:
        """Convert exception to a dictionary for API responses."""
        return {
            "success": False,
            "message": self.message,
            "error": self.code,
            "details": self.details,
        }


class NotFoundError(BmsHubError):
    """Resource not found, or an update/delete affected zero documents."""

    status_code = 404


class ValidationError(BmsHubError):
    """Input validation failed."""

    status_code = 400


class ConflictError(BmsHubError):
    """The request conflicts with the current state of a resource."""

    status_code = 409


class AuthenticationError(BmsHubError):
    """Authentication failed (missing credentials)."""

    status_code = 401


class AuthorizationError(BmsHubError):
    """Authorization failed (rejected or mismatched credentials)."""

    status_code = 403


class ExternalServiceError(BmsHubError):
    """Error communicating with an external service."""

    def __init__(
        self,
        message: str,
        service: str,
        code: Optional[str] = None,
        details: Optional[dict[str, Any]] = None,
    ):
        super().__init__(message, code, details)
        self.service = service
        self.details["service"] = service
