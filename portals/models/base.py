"""
Base document model for MongoDB records.

Every stored record is represented by a pydantic model deriving from
``DocumentModel``. Subclasses declare ``document_keys`` to map their Python
attribute names to the camelCase keys used in the collections and get
``to_document``/``from_document`` for free.

Usage:
    from portals.models.base import DocumentModel

    class Course(DocumentModel):
        title: str
"""

from datetime import date, datetime, time
from typing import Any, ClassVar, Dict, Optional

from bson import ObjectId
from pydantic import BaseModel

from portals.exceptions import InvalidInputError

DATE_FORMAT = "%Y-%m-%d"


def parse_date(raw: str) -> date:
    """
    Parse a ``YYYY-MM-DD`` date.

    Raises:
        InvalidInputError: If the string is not a valid date
    """
    try:
        return datetime.strptime(raw.strip(), DATE_FORMAT).date()
    except ValueError:
        raise InvalidInputError("Invalid date format.")


def date_to_datetime(value: date) -> datetime:
    """BSON has no date-only type, so calendar dates are stored at midnight."""
    return datetime.combine(value, time.min)


def datetime_to_date(value: Any) -> Any:
    if isinstance(value, datetime):
        return value.date()
    return value


class DocumentModel(BaseModel):
    """
    Base class for records stored in a MongoDB collection.

    Attributes:
        id (Optional[str]): Hex string of the store-assigned ``_id``; ``None``
            until the record has been inserted
    """

    document_keys: ClassVar[Dict[str, str]] = {}

    id: Optional[str] = None

    def to_document(self) -> Dict[str, Any]:
        """Convert to a MongoDB document. ``id`` becomes ``_id`` when set."""
        document: Dict[str, Any] = {}
        if self.id is not None:
            document["_id"] = ObjectId(self.id)
        for field_name, value in self.model_dump(exclude={"id"}).items():
            if isinstance(value, date) and not isinstance(value, datetime):
                value = date_to_datetime(value)
            document[self.document_keys.get(field_name, field_name)] = value
        return document

    @classmethod
    def from_document(cls, document: Dict[str, Any]):
        """Build the model from a MongoDB document."""
        reverse_map = {key: name for name, key in cls.document_keys.items()}
        values: Dict[str, Any] = {}
        for key, value in document.items():
            if key == "_id":
                values["id"] = str(value)
                continue
            field_name = reverse_map.get(key, key)
            if field_name in cls.model_fields:
                values[field_name] = datetime_to_date(value)
        return cls(**values)
