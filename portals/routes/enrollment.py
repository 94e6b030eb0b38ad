"""
Router for student enrollment endpoints.
This module handles API routes for:
- Creating and listing students and courses
- Adding embedded or referenced enrollments
- Listing enrollments with students and courses resolved
- Renaming students
- Creating the student name index
"""

from fastapi import APIRouter, Depends, status

from portals.database.mongo import get_enrollment_repository
from portals.repositories.enrollment import EnrollmentRepository
from portals.schemas.enrollment import CourseCreate, EnrollmentCreate, StudentCreate, StudentRename
from portals.utils.api_response import json_success

router = APIRouter(
    prefix="/api/enrollment",
    tags=["enrollment"]
)

@router.post("/students")
def insert_student(
    student: StudentCreate,
    repository: EnrollmentRepository = Depends(get_enrollment_repository)
):
    """Insert a student"""
    stored = repository.insert_student(student.name, student.email)
    return json_success(
        data=stored.model_dump(mode="json"),
        message=f"Inserted student: {stored.name}",
        status_code=status.HTTP_201_CREATED
    )

@router.get("/students")
def list_students(repository: EnrollmentRepository = Depends(get_enrollment_repository)):
    """List all students"""
    return json_success(data=[s.model_dump(mode="json") for s in repository.list_students()])

@router.patch("/students/{student_id}")
def update_student_name(
    student_id: str,
    request: StudentRename,
    repository: EnrollmentRepository = Depends(get_enrollment_repository)
):
    """Rename a student; embedded enrollments keep the old name"""
    repository.update_student_name(student_id, request.name)
    return json_success(message="Student's name updated.")

@router.post("/students/indexes/name")
def create_student_name_index(repository: EnrollmentRepository = Depends(get_enrollment_repository)):
    """Create an ascending index on the student name"""
    index_name = repository.create_student_name_index()
    return json_success(data={"index": index_name}, status_code=status.HTTP_201_CREATED)

@router.post("/courses")
def insert_course(
    course: CourseCreate,
    repository: EnrollmentRepository = Depends(get_enrollment_repository)
):
    """Insert a course"""
    stored = repository.insert_course(course.title, course.description)
    return json_success(
        data=stored.model_dump(mode="json"),
        message=f"Inserted course: {stored.title}",
        status_code=status.HTTP_201_CREATED
    )

@router.get("/courses")
def list_courses(repository: EnrollmentRepository = Depends(get_enrollment_repository)):
    """List all courses"""
    return json_success(data=[c.model_dump(mode="json") for c in repository.list_courses()])

@router.post("/enrollments")
def add_enrollment(
    enrollment: EnrollmentCreate,
    repository: EnrollmentRepository = Depends(get_enrollment_repository)
):
    """Enroll a student in a course"""
    view = repository.add_enrollment(enrollment.student_id, enrollment.course_id, enrollment.type)
    return json_success(
        data=view.model_dump(mode="json"),
        message=f"Added {view.type.value} enrollment.",
        status_code=status.HTTP_201_CREATED
    )

@router.get("/enrollments")
def list_enrollments(repository: EnrollmentRepository = Depends(get_enrollment_repository)):
    """List enrollments with students and courses resolved"""
    return json_success(data=[e.model_dump(mode="json") for e in repository.list_enrollments()])
