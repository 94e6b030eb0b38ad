"""
Pydantic models for employee requests.
"""

from datetime import date
from typing import Any, Dict, List, Optional
from pydantic import BaseModel, Field, field_validator

from portals.models.base import date_to_datetime
from portals.models.employee import Employee

class EmployeeCreate(BaseModel):
    """Model for adding a new employee"""
    name: str
    email: str = Field(min_length=1)
    department: str
    skills: List[str] = Field(default_factory=list)
    joining_date: date

    @field_validator("email")
    @classmethod
    def email_not_blank(cls, value: str) -> str:
        value = value.strip()
        if not value:
            raise ValueError("email must not be blank")
        return value

    def to_employee(self) -> Employee:
        return Employee(**self.model_dump())

class EmployeeUpdate(BaseModel):
    """
    Partial update for an employee.

    A field is part of the update only when it was explicitly given a
    non-null value; every other field is left untouched in the store.
    ``email`` is the lookup key and cannot be patched.
    """
    name: Optional[str] = None
    department: Optional[str] = None
    skills: Optional[List[str]] = None
    joining_date: Optional[date] = None

    def is_empty(self) -> bool:
        return not self.to_set_fields()

    def to_set_fields(self) -> Dict[str, Any]:
        """Return the ``$set`` payload keyed by document field names."""
        changes = self.model_dump(exclude_unset=True, exclude_none=True)
        document = {}
        for field_name, value in changes.items():
            if isinstance(value, date):
                value = date_to_datetime(value)
            document[Employee.document_keys.get(field_name, field_name)] = value
        return document
