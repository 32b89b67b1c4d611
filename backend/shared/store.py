"""
Document store adapter.

Exposes collection-scoped find/insert/update/delete operations over the
Supabase (PostgREST) API, one table per logical collection. Every
operation touches a single request to the store; there are no
multi-document transactions.

Callers never see PostgREST query builders: filters are plain equality
maps, with ``Ne(value)`` marking a "not equal" condition.
"""

import logging
import uuid
from dataclasses import dataclass
from datetime import date, datetime
from decimal import Decimal
from typing import Any, Optional

import httpx
from postgrest.exceptions import APIError
from supabase import Client

from .exceptions import ConflictError, ExternalServiceError, ValidationError

logger = logging.getLogger(__name__)

COLLECTIONS = (
    "apartments",
    "users",
    "agreements",
    "coupons",
    "payments",
    "members",
    "announcements",
)

# Postgres unique_violation
UNIQUE_VIOLATION = "23505"


@dataclass(frozen=True)
class Ne:
    """Filter value meaning "field is not equal to ``value``"."""

    value: Any


Filter = dict[str, Any]


class StoreError(ExternalServiceError):
    """Raised when the document store call itself fails."""

    def __init__(self, message: str, collection: str, operation: str):
        super().__init__(
            message,
            service="document_store",
            code="STORE_ERROR",
            details={"collection": collection, "operation": operation},
        )


class DuplicateDocumentError(ConflictError):
    """Raised when an insert or update violates a uniqueness constraint."""

    def __init__(self, collection: str, detail: Optional[str] = None):
        super().__init__(
            f"Duplicate document in {collection}",
            code="DUPLICATE_DOCUMENT",
            details={"collection": collection, "detail": detail},
        )


class InvalidIdentifierError(ValidationError):
    """Raised when a document identifier is malformed."""

    def __init__(self, value: str, label: str = "document"):
        super().__init__(
            f"Invalid {label} ID",
            code="INVALID_ID",
            details={"id": value},
        )


def parse_document_id(value: Optional[str], label: str = "document") -> str:
    """
    Validate a store-generated identifier.

    Args:
        value: Raw identifier from a path or body
        label: Entity name used in the error message (e.g., "agreement")

    Returns:
        The identifier in canonical UUID form

    Raises:
        InvalidIdentifierError: If the value is not a valid UUID
    """
    if not value:
        raise InvalidIdentifierError(str(value), label)
    try:
        return str(uuid.UUID(str(value)))
    except ValueError:
        raise InvalidIdentifierError(str(value), label)


def _encode(value: Any) -> Any:
    """Convert Python values to JSON-safe values for PostgREST."""
    if isinstance(value, datetime):
        return value.isoformat()
    if isinstance(value, date):
        return value.isoformat()
    if isinstance(value, Decimal):
        return float(value)
    if isinstance(value, dict):
        return {k: _encode(v) for k, v in value.items()}
    if isinstance(value, (list, tuple)):
        return [_encode(v) for v in value]
    return value


class Collection:
    """
    A single logical collection (one Supabase table).

    ``update_one`` and ``delete_one`` apply to every row matching the
    filter; callers always filter by ``id`` or another unique key.
    """

    def __init__(self, client: Client, name: str):
        self._client = client
        self.name = name

    def find_one(self, filter: Filter) -> Optional[dict[str, Any]]:
        query = self._apply_filter(self._table().select("*"), filter).limit(1)
        result = self._execute(query, "find_one")
        return result.data[0] if result.data else None

    def find_many(
        self,
        filter: Optional[Filter] = None,
        sort: Optional[str] = None,
        descending: bool = False,
        limit: Optional[int] = None,
    ) -> list[dict[str, Any]]:
        query = self._apply_filter(self._table().select("*"), filter or {})
        if sort:
            query = query.order(sort, desc=descending)
        if limit is not None:
            query = query.limit(limit)
        result = self._execute(query, "find_many")
        return list(result.data or [])

    def insert_one(self, document: dict[str, Any]) -> str:
        """Insert a document and return its store-generated id."""
        query = self._table().insert(_encode(document))
        result = self._execute(query, "insert_one")
        return str(result.data[0]["id"])

    def update_one(self, filter: Filter, patch: dict[str, Any]) -> int:
        """Apply ``patch`` and return the number of documents modified."""
        query = self._apply_filter(self._table().update(_encode(patch)), filter)
        result = self._execute(query, "update_one")
        return len(result.data or [])

    def delete_one(self, filter: Filter) -> int:
        """Delete matching documents and return how many were removed."""
        query = self._apply_filter(self._table().delete(), filter)
        result = self._execute(query, "delete_one")
        return len(result.data or [])

    def _table(self):
        return self._client.table(self.name)

    @staticmethod
    def _apply_filter(query, filter: Filter):
        for field, value in filter.items():
            if isinstance(value, Ne):
                query = query.neq(field, _encode(value.value))
            elif value is None:
                query = query.is_(field, "null")
            else:
                query = query.eq(field, _encode(value))
        return query

    def _execute(self, query, operation: str):
        try:
            return query.execute()
        except APIError as e:
            if e.code == UNIQUE_VIOLATION:
                raise DuplicateDocumentError(self.name, e.message)
            logger.error("Store %s on %s failed: %s", operation, self.name, e.message)
            raise StoreError(e.message or str(e), self.name, operation) from e
        except httpx.HTTPError as e:
            logger.error("Store %s on %s failed: %s", operation, self.name, e)
            raise StoreError(str(e), self.name, operation) from e


class DocumentStore:
    """
    Process-scoped handle over the document store.

    Created once when the application starts and released on shutdown;
    repositories receive it explicitly instead of reaching for a global.
    """

    def __init__(self, client: Client):
        self._client = client
        self._collections: dict[str, Collection] = {}
        self._closed = False

    def collection(self, name: str) -> Collection:
        """Get a collection by name."""
        if self._closed:
            raise RuntimeError("Document store handle has been closed")
        if name not in COLLECTIONS:
            raise KeyError(f"Unknown collection: {name}")
        if name not in self._collections:
            self._collections[name] = Collection(self._client, name)
        return self._collections[name]

    def ping(self) -> bool:
        """Check that the store answers a trivial query."""
        try:
            self.collection("users").find_many(limit=1)
            return True
        except (StoreError, RuntimeError):
            return False

    def close(self) -> None:
        """Release the handle. Further collection access raises."""
        self._collections.clear()
        self._closed = True
