"""
Models for the student enrollment portal.

Enrollments come in two shapes. An *embedded* enrollment stores copies of the
student and course documents at the time of enrollment, so later edits to the
student are not reflected. A *referenced* enrollment stores only the two
ObjectIds and is resolved against the ``students`` and ``courses`` collections
whenever it is read.
"""

from enum import Enum
from typing import Optional

from pydantic import BaseModel

from portals.models.base import DocumentModel

class EnrollmentType(str, Enum):
    EMBEDDED = "embedded"
    REFERENCED = "referenced"

class Student(DocumentModel):
    name: str
    email: str

class Course(DocumentModel):
    title: str
    description: str = ""

class EnrollmentView(BaseModel):
    """
    An enrollment with its student and course resolved.

    ``student`` or ``course`` is ``None`` when a referenced document no
    longer exists.
    """
    id: str
    type: EnrollmentType
    student: Optional[Student] = None
    course: Optional[Course] = None
