"""Student Enrollment Management console."""

from typing import Optional, Sequence

from portals.cli.base import ConsoleMenu
from portals.models.enrollment import EnrollmentType, EnrollmentView
from portals.repositories.enrollment import EnrollmentRepository


class EnrollmentConsole(ConsoleMenu):
    title = "Menu"
    exit_message = "Exiting application. Goodbye!"

    def __init__(self, repository: EnrollmentRepository, **kwargs):
        super().__init__(**kwargs)
        self.repository = repository

    def options(self):
        return [
            ("1", "Insert a student", self.insert_student),
            ("2", "Insert a course", self.insert_course),
            ("3", "Add enrollment (choose embedded or referenced)", self.add_enrollment),
            ("4", "Query and print all enrollments", self.print_enrollments),
            ("5", "Update a student's name", self.update_student_name),
            ("6", "Create index on students.name", self.create_student_name_index),
            ("7", "Exit", None),
        ]

    def _choose(self, items: Sequence, prompt: str) -> Optional[int]:
        """Ask for a 1-based position in ``items``; ``None`` if out of range."""
        choice = self.ask_int(prompt)
        if choice < 1 or choice > len(items):
            return None
        return choice - 1

    def insert_student(self) -> None:
        student = self.repository.insert_student(self.ask("Enter student name: "), self.ask("Enter student email: "))
        self.say(f"Inserted student: {student.name}")

    def insert_course(self) -> None:
        course = self.repository.insert_course(self.ask("Enter course title: "), self.ask("Enter course description: "))
        self.say(f"Inserted course: {course.title}")

    def add_enrollment(self) -> None:
        students = self.repository.list_students()
        courses = self.repository.list_courses()
        if not students or not courses:
            self.say("Need at least one student and one course to add enrollment.")
            return

        self.say("Choose student:")
        for i, student in enumerate(students, start=1):
            self.say(f"{i}. {student.name} (email: {student.email})")
        student_index = self._choose(students, "Select student number: ")
        if student_index is None:
            self.say("Invalid student selection.")
            return

        self.say("Choose course:")
        for i, course in enumerate(courses, start=1):
            self.say(f"{i}. {course.title} - {course.description}")
        course_index = self._choose(courses, "Select course number: ")
        if course_index is None:
            self.say("Invalid course selection.")
            return

        self.say("Enrollment type:")
        self.say("1. Embedded")
        self.say("2. Referenced")
        kinds = {"1": EnrollmentType.EMBEDDED, "2": EnrollmentType.REFERENCED}
        kind = kinds.get(self.ask("Select enrollment type (1 or 2): "))
        if kind is None:
            self.say("Invalid enrollment type selection.")
            return

        self.repository.add_enrollment(students[student_index].id, courses[course_index].id, kind)
        self.say(f"Added {kind.value} enrollment.")

    def _describe(self, enrollment: EnrollmentView) -> None:
        self.say()
        self.say(f"Type: {enrollment.type.value}")
        student = enrollment.student.model_dump_json() if enrollment.student else "Not found"
        course = enrollment.course.model_dump_json() if enrollment.course else "Not found"
        self.say(f"Student ({enrollment.type.value}): {student}")
        self.say(f"Course ({enrollment.type.value}): {course}")

    def print_enrollments(self) -> None:
        enrollments = self.repository.list_enrollments()
        if not enrollments:
            self.say("No enrollments found.")
            return
        self.say("=== Enrollment Details ===")
        for enrollment in enrollments:
            self._describe(enrollment)

    def update_student_name(self) -> None:
        students = self.repository.list_students()
        if not students:
            self.say("No students found.")
            return

        self.say("Students:")
        for i, student in enumerate(students, start=1):
            self.say(f"{i}. {student.name} (email: {student.email})")
        index = self._choose(students, "Select student number to update: ")
        if index is None:
            self.say("Invalid selection.")
            return

        selected = students[index]
        self.repository.update_student_name(selected.id, self.ask(f"Enter new name for {selected.name}: "))
        self.say("Student's name updated.")
        self.say()
        self.say("Note:")
        self.say("- Referenced enrollments reflect this change immediately because they fetch student data live.")
        self.say("- Embedded enrollments still show the old name unless you update them manually.")
        self.print_enrollments()

    def create_student_name_index(self) -> None:
        self.repository.create_student_name_index()
        self.say("Created ascending index on 'name' field in students collection.")
