"""
Shared infrastructure for BMS Hub backend.

This package contains cross-cutting concerns that are used by multiple modules:
- config: Centralized settings management
- database: Supabase client factory
- store: Document store adapter (collections over Supabase tables)
- exceptions: Base exception classes

Note: Business logic should NOT go here. This is for infrastructure only.
"""

from .config import Settings, get_settings
from .database import get_supabase_client, open_document_store, reset_client_cache
from .exceptions import (
    BmsHubError,
    NotFoundError,
    ValidationError,
    ConflictError,
    AuthenticationError,
    AuthorizationError,
    ExternalServiceError,
)
from .models import AuthenticatedUser
from .store import (
    Collection,
    DocumentStore,
    DuplicateDocumentError,
    InvalidIdentifierError,
    Ne,
    StoreError,
    parse_document_id,
)

__all__ = [
    "Settings",
    "get_settings",
    "get_supabase_client",
    "open_document_store",
    "reset_client_cache",
    "BmsHubError",
    "NotFoundError",
    "ValidationError",
    "ConflictError",
    "AuthenticationError",
    "AuthorizationError",
    "ExternalServiceError",
    "AuthenticatedUser",
    "Collection",
    "DocumentStore",
    "DuplicateDocumentError",
    "InvalidIdentifierError",
    "Ne",
    "StoreError",
    "parse_document_id",
]
