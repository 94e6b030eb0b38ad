from datetime import date
from typing import ClassVar, Dict, List

from pydantic import Field

from portals.models.base import DocumentModel

class Employee(DocumentModel):
    """
    An employee record in the ``employees`` collection.

    ``email`` is the business key and is unique across the collection.

    Attributes:
        id (Optional[str]): Store-assigned ObjectId as a hex string
        name (str): Full name
        email (str): Unique work email
        department (str): Department name, used for statistics
        skills (List[str]): Ordered skill tags, may be empty
        joining_date (date): Calendar date the employee joined,
            stored as ``joiningDate``
    """
    document_keys: ClassVar[Dict[str, str]] = {"joining_date": "joiningDate"}

    name: str
    email: str
    department: str
    skills: List[str] = Field(default_factory=list)
    joining_date: date

    def __str__(self):
        return (
            f"Employee(id={self.id}, name='{self.name}', email='{self.email}', "
            f"department='{self.department}', skills={self.skills}, "
            f"joiningDate={self.joining_date.isoformat()})"
        )
