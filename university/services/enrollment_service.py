"""
Enrollment Service

Enrollment commands and queries by course code and student ID. The manager keeps
no roster of its own: every operation resolves to the ``Course`` roster, so the
capacity rule applies and the two views can never diverge.
"""

from collections.abc import Iterable

import structlog

from university.domain.academic import Course, University
from university.domain.exceptions import EnrollmentError
from university.domain.people import Student

logger = structlog.get_logger(__name__)


class EnrollmentManager:
    """
    Registry of courses and students addressed by code and ID.

    Usage:
        manager = EnrollmentManager.from_university(university, students)
        manager.enroll_student("CS101", "S123")
        manager.get_enrollment_count("CS101")
    """

    def __init__(self) -> None:
        self._courses: dict[str, Course] = {}
        self._students: dict[str, Student] = {}

    @classmethod
    def from_university(
        cls, university: University, students: Iterable[Student] = ()
    ) -> "EnrollmentManager":
        """
        Build a manager over every course of ``university``.

        Students already on a roster are registered too.
        """
        manager = cls()
        for course in university.courses():
            # First course with a code wins, as in University.find_course.
            if manager.get_course(course.code) is None:
                manager.register_course(course)
            for student in course.roster:
                manager.register_student(student)
        for student in students:
            manager.register_student(student)
        return manager

    def register_course(self, course: Course) -> None:
        self._courses[course.code] = course

    def register_student(self, student: Student) -> None:
        self._students[student.id] = student

    def get_course(self, course_code: str) -> Course | None:
        return self._courses.get(course_code)

    def enroll_student(self, course_code: str, student_id: str) -> None:
        """
        Enroll a registered student in a registered course.

        Raises:
            EnrollmentError: If either is unknown or the course is full
        """
        course = self._courses.get(course_code)
        if course is None:
            raise EnrollmentError(
                f"Unknown course: {course_code}", context={"course_code": course_code}
            )
        student = self._students.get(student_id)
        if student is None:
            raise EnrollmentError(
                f"Unknown student: {student_id}", context={"student_id": student_id}
            )
        course.enroll_student(student)

    def drop_student(self, course_code: str, student_id: str) -> None:
        """Remove every occurrence of ``student_id``; unknown courses are ignored."""
        course = self._courses.get(course_code)
        if course is None:
            logger.debug("Drop ignored for unknown course", course_code=course_code)
            return
        course.drop_student(student_id)

    def get_enrollment_count(self, course_code: str) -> int:
        course = self._courses.get(course_code)
        return course.enrollment_count if course is not None else 0

    def get_enrolled_students(self, course_code: str) -> list[str]:
        course = self._courses.get(course_code)
        return course.enrolled_ids if course is not None else []
