"""
Identity verification exceptions.

A missing credential is an authentication failure (401). A credential
that was presented but rejected is treated as forbidden (403).
"""

from shared.exceptions import AuthenticationError, AuthorizationError


class MissingTokenError(AuthenticationError):
    """Raised when no bearer token is provided."""

    def __init__(self, message: str = "unauthorized access"):
        super().__init__(message, code="MISSING_TOKEN")


class VerifierNotConfiguredError(AuthenticationError):
    """Raised when the verifier has no secret to check tokens against."""

    def __init__(self):
        super().__init__(
            "Server authentication not configured",
            code="AUTH_NOT_CONFIGURED",
        )


class InvalidTokenError(AuthorizationError):
    """Raised when a bearer token is invalid or malformed."""

    def __init__(self, reason: str = "Invalid authentication token"):
        super().__init__(
            "forbidden access",
            code="INVALID_TOKEN",
            details={"reason": reason},
        )


class ExpiredTokenError(AuthorizationError):
    """Raised when a bearer token has expired."""

    def __init__(self):
        super().__init__(
            "forbidden access",
            code="TOKEN_EXPIRED",
            details={"reason": "Authentication token has expired"},
        )


class EmailMismatchError(AuthorizationError):
    """Raised when a caller asks for data belonging to another email."""

    def __init__(self, requested: str, verified: str):
        super().__init__(
            "forbidden access",
            code="EMAIL_MISMATCH",
            details={"requested_email": requested, "verified_email": verified},
        )
