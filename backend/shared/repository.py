"""
Base repository class for document store access.

Provides a common abstraction layer for all repositories, encapsulating
collection access and the shared dict-to-model mapping.
"""

from typing import Any, Generic, Optional, TypeVar

from pydantic import BaseModel

from .store import Collection, DocumentStore, Filter


T = TypeVar("T", bound=BaseModel)


class BaseRepository(Generic[T]):
    """
    Base class for all repositories.

    Provides common functionality for collection operations:
    - Collection access via self._collection
    - Mapping of stored documents to the repository's Pydantic model

    Subclasses set ``collection_name`` and ``model`` and add
    domain-specific queries on top of the generic helpers.

    Example:
        class CouponRepository(BaseRepository[Coupon]):
            collection_name = "coupons"
            model = Coupon
    """

    collection_name: str = ""
    model: type[T]

    def __init__(self, store: DocumentStore) -> None:
        """
        Initialize the repository with a document store handle.

        Args:
            store: Process-scoped document store handle.
        """
        self._store = store
        self._collection: Collection = store.collection(self.collection_name)

    def get_by_id(self, document_id: str) -> Optional[T]:
        """Get a document by its id, or None if it doesn't exist."""
        return self._find_one({"id": document_id})

    def list_all(self, sort: Optional[str] = None, descending: bool = False) -> list[T]:
        """List every document in the collection."""
        return self._find_many({}, sort=sort, descending=descending)

    def insert(self, data: dict[str, Any]) -> str:
        """Insert a document and return its generated id."""
        return self._collection.insert_one(data)

    def delete_by_id(self, document_id: str) -> int:
        """Delete a document by id. Returns the deleted count."""
        return self._collection.delete_one({"id": document_id})

    def _find_one(self, filter: Filter) -> Optional[T]:
        data = self._collection.find_one(filter)
        if data is None:
            return None
        return self._map(data)

    def _find_many(
        self,
        filter: Filter,
        sort: Optional[str] = None,
        descending: bool = False,
    ) -> list[T]:
        rows = self._collection.find_many(filter, sort=sort, descending=descending)
        return [self._map(row) for row in rows]

    def _map(self, data: dict[str, Any]) -> T:
        """Map a stored document to the repository's model."""
        return self.model.model_validate(data)
