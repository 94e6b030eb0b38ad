"""
Base repository pattern implementation for MongoDB collections.

This module provides a generic repository over a single ``pymongo``
collection. Concrete repositories extend it with their domain operations and
keep every query a single round trip to the server.
"""

from typing import Any, Dict, Generic, List, Optional, Sequence, Tuple, Type, TypeVar
from bson import ObjectId
from pymongo.collection import Collection
import logging

from portals.exceptions import InvalidInputError
from portals.models.base import DocumentModel

# Type variable for the model
T = TypeVar('T', bound=DocumentModel)

SortSpec = Sequence[Tuple[str, int]]

logger = logging.getLogger(__name__)

def parse_object_id(value: str) -> ObjectId:
    """
    Convert a hex string into an ObjectId.

    Raises:
        InvalidInputError: If ``value`` is not a valid 24-character hex id
    """
    if not isinstance(value, str) or not ObjectId.is_valid(value):
        raise InvalidInputError(f"Invalid ObjectId format: {value!r}")
    return ObjectId(value)

class BaseRepository(Generic[T]):
    """
    Generic repository for a MongoDB collection.

    Attributes:
        collection (Collection): The backing collection
        model (Type[T]): Document model used to decode results
    """

    def __init__(self, collection: Collection, model: Type[T]):
        """
        Initialize the repository with a collection and model class.

        Args:
            collection (Collection): pymongo collection
            model (Type[T]): ``DocumentModel`` subclass
        """
        self.collection = collection
        self.model = model

    def find(
        self,
        filters: Optional[Dict[str, Any]] = None,
        sort: Optional[SortSpec] = None,
        skip: int = 0,
        limit: int = 0
    ) -> List[T]:
        """
        Find records matching ``filters``.

        Args:
            filters: MongoDB filter document; ``None`` matches everything
            sort: List of ``(field, direction)`` pairs
            skip: Number of records to skip
            limit: Maximum number of records to return, 0 for no limit

        Returns:
            List[T]: Decoded records
        """
        cursor = self.collection.find(filters or {})
        if sort:
            cursor = cursor.sort(list(sort))
        if skip:
            cursor = cursor.skip(skip)
        if limit:
            cursor = cursor.limit(limit)
        return [self.model.from_document(doc) for doc in cursor]

    def find_one(self, filters: Dict[str, Any]) -> Optional[T]:
        """Return the first record matching ``filters`` or ``None``."""
        document = self.collection.find_one(filters)
        return self.model.from_document(document) if document else None

    def insert(self, item: T) -> T:
        """
        Insert a record and return it with its assigned id.

        Errors raised by the driver, including unique index violations,
        propagate to the caller.
        """
        result = self.collection.insert_one(item.to_document())
        return item.model_copy(update={"id": str(result.inserted_id)})

    def delete_one(self, filters: Dict[str, Any]) -> bool:
        """
        Delete the first record matching ``filters``.

        Returns:
            bool: True if a record was removed, False if none matched
        """
        result = self.collection.delete_one(filters)
        return result.deleted_count > 0

    def count(self, filters: Optional[Dict[str, Any]] = None) -> int:
        return self.collection.count_documents(filters or {})
