"""
This package contains Pydantic models for request validation.
"""

from portals.schemas.employee import EmployeeCreate, EmployeeUpdate
from portals.schemas.account import AccountCreate, AmountRequest
from portals.schemas.enrollment import (
    CourseCreate,
    EnrollmentCreate,
    StudentCreate,
    StudentRename
)

__all__ = [
    'EmployeeCreate',
    'EmployeeUpdate',
    'AccountCreate',
    'AmountRequest',
    'StudentCreate',
    'StudentRename',
    'CourseCreate',
    'EnrollmentCreate'
]
