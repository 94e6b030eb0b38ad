"""
Pydantic models for student enrollment requests.
"""

from pydantic import BaseModel, Field

from portals.models.enrollment import EnrollmentType

class StudentCreate(BaseModel):
    name: str = Field(min_length=1)
    email: str

class StudentRename(BaseModel):
    name: str = Field(min_length=1)

class CourseCreate(BaseModel):
    title: str = Field(min_length=1)
    description: str = ""

class EnrollmentCreate(BaseModel):
    student_id: str
    course_id: str
    type: EnrollmentType = EnrollmentType.REFERENCED
