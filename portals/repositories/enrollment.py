"""
Student enrollment repository.

Works on three collections of the enrollment database: ``students``,
``courses`` and ``enrollments``. Enrollments are stored either embedded
(copies of both documents) or referenced (both ObjectIds), see
``portals.models.enrollment``.
"""

import logging
from typing import Any, Dict, List, Optional

from pymongo import ASCENDING
from pymongo.database import Database

from portals.exceptions import CourseNotFoundError, InvalidInputError, StudentNotFoundError
from portals.models.enrollment import Course, EnrollmentType, EnrollmentView, Student
from portals.repositories.base import BaseRepository, parse_object_id

logger = logging.getLogger(__name__)

STUDENTS_COLLECTION = "students"
COURSES_COLLECTION = "courses"
ENROLLMENTS_COLLECTION = "enrollments"

class EnrollmentRepository:
    """
    Repository for students, courses and their enrollments.

    Attributes:
        students (BaseRepository[Student]): Student records
        courses (BaseRepository[Course]): Course records
        enrollments (Collection): Raw enrollment documents
    """

    def __init__(self, db: Database):
        self.db = db
        self.students = BaseRepository(db[STUDENTS_COLLECTION], Student)
        self.courses = BaseRepository(db[COURSES_COLLECTION], Course)
        self.enrollments = db[ENROLLMENTS_COLLECTION]

    def insert_student(self, name: str, email: str) -> Student:
        student = self.students.insert(Student(name=name, email=email))
        logger.info(f"Inserted student: {name}")
        return student

    def insert_course(self, title: str, description: str = "") -> Course:
        course = self.courses.insert(Course(title=title, description=description))
        logger.info(f"Inserted course: {title}")
        return course

    def list_students(self) -> List[Student]:
        return self.students.find()

    def list_courses(self) -> List[Course]:
        return self.courses.find()

    def add_enrollment(self, student_id: str, course_id: str, enrollment_type: Any) -> EnrollmentView:
        """
        Enroll a student in a course.

        Args:
            student_id: ObjectId hex string of the student
            course_id: ObjectId hex string of the course
            enrollment_type: ``EnrollmentType`` or its string value

        Returns:
            EnrollmentView: The new enrollment, resolved

        Raises:
            InvalidInputError: On a malformed id or unknown enrollment type
            StudentNotFoundError: If the student does not exist
            CourseNotFoundError: If the course does not exist
        """
        try:
            enrollment_type = EnrollmentType(enrollment_type)
        except ValueError:
            raise InvalidInputError(f"Invalid enrollment type: {enrollment_type!r}")

        student_oid = parse_object_id(student_id)
        course_oid = parse_object_id(course_id)

        student_doc = self.students.collection.find_one({"_id": student_oid})
        if student_doc is None:
            raise StudentNotFoundError(f"No student found with ID: {student_id}")
        course_doc = self.courses.collection.find_one({"_id": course_oid})
        if course_doc is None:
            raise CourseNotFoundError(f"No course found with ID: {course_id}")

        if enrollment_type is EnrollmentType.EMBEDDED:
            document = {"type": enrollment_type.value, "student": student_doc, "course": course_doc}
        else:
            document = {"type": enrollment_type.value, "student": student_oid, "course": course_oid}

        result = self.enrollments.insert_one(document)
        logger.info(f"Added {enrollment_type.value} enrollment {result.inserted_id}")
        return EnrollmentView(
            id=str(result.inserted_id),
            type=enrollment_type,
            student=Student.from_document(student_doc),
            course=Course.from_document(course_doc)
        )

    def _resolve(self, document: Dict[str, Any]) -> EnrollmentView:
        enrollment_type = EnrollmentType(document["type"])
        student: Optional[Student]
        course: Optional[Course]
        if enrollment_type is EnrollmentType.EMBEDDED:
            student = Student.from_document(document["student"])
            course = Course.from_document(document["course"])
        else:
            # Looked up live, so renames show up immediately
            student = self.students.find_one({"_id": document["student"]})
            course = self.courses.find_one({"_id": document["course"]})
        return EnrollmentView(id=str(document["_id"]), type=enrollment_type, student=student, course=course)

    def list_enrollments(self) -> List[EnrollmentView]:
        """Return every enrollment with its student and course resolved."""
        return [self._resolve(doc) for doc in self.enrollments.find()]

    def update_student_name(self, student_id: str, name: str) -> None:
        """
        Rename a student.

        Embedded enrollments keep the name they were created with.

        Raises:
            InvalidInputError: On a malformed id or blank name
            StudentNotFoundError: If the student does not exist
        """
        if not name or not name.strip():
            raise InvalidInputError("Student name must not be blank.")
        result = self.students.collection.update_one(
            {"_id": parse_object_id(student_id)},
            {"$set": {"name": name}}
        )
        if result.matched_count == 0:
            raise StudentNotFoundError(f"No student found with ID: {student_id}")
        logger.info(f"Student {student_id} renamed")

    def create_student_name_index(self) -> str:
        """Create an ascending index on ``students.name``. Returns its name."""
        index_name = self.students.collection.create_index([("name", ASCENDING)])
        logger.info(f"Created index {index_name} on students")
        return index_name
