"""
This package contains the document models stored in MongoDB.
"""

from portals.models.employee import Employee
from portals.models.account import Account
from portals.models.enrollment import Course, EnrollmentType, EnrollmentView, Student

__all__ = ['Employee', 'Account', 'Student', 'Course', 'EnrollmentType', 'EnrollmentView']
