"""
API-level response models shared by every router.
"""

from .errors import ErrorResponse, ValidationErrorResponse

__all__ = ["ErrorResponse", "ValidationErrorResponse"]
