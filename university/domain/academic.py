"""
Academic Domain Models

Course, Department and University records. Holders keep shared references, so a
course mutated after being added to a department is seen the same way through
the department and the university.
"""

from collections.abc import Iterator

import structlog
from pydantic import Field, field_validator, model_validator

from university.config import get_settings
from university.domain.base import Record
from university.domain.exceptions import EnrollmentError
from university.domain.people import Professor, Student, format_number

logger = structlog.get_logger(__name__)


def _default_max_students() -> int:
    return get_settings().course_max_students


class Course(Record):
    """
    Course offering with an optional instructor and a capacity-bounded roster.

    The roster is the single authoritative enrollment record for the course.
    """

    code: str
    title: str
    credits: int
    description: str = ""
    instructor: Professor | None = None
    roster: list[Student] = Field(default_factory=list)
    max_students: int = Field(default_factory=_default_max_students, ge=1)

    @field_validator("credits")
    @classmethod
    def validate_credits(cls, v: int) -> int:
        if v <= 0:
            raise ValueError("Credits must be positive.")
        return v

    @model_validator(mode="after")
    def validate_capacity(self) -> "Course":
        if len(self.roster) > self.max_students:
            raise ValueError(
                f"Roster of {len(self.roster)} exceeds capacity of {self.max_students}"
            )
        return self

    @property
    def enrollment_count(self) -> int:
        return len(self.roster)

    @property
    def enrolled_ids(self) -> list[str]:
        """Student IDs in roster order."""
        return [student.id for student in self.roster]

    def is_full(self) -> bool:
        """Check if the course is at capacity."""
        return len(self.roster) >= self.max_students

    def set_instructor(self, professor: Professor | None) -> None:
        """Replace the instructor unconditionally."""
        self.instructor = professor
        logger.debug(
            "Instructor set",
            course_code=self.code,
            professor_id=professor.id if professor else None,
        )

    def enroll_student(self, student: Student) -> None:
        """
        Append a student to the roster.

        The same student may be enrolled more than once.

        Raises:
            EnrollmentError: If the roster is already at capacity
        """
        if self.is_full():
            raise EnrollmentError(
                f"Course is full: {self.code}",
                context={"course_code": self.code, "max_students": self.max_students},
            )
        self.roster.append(student)
        logger.info("Student enrolled", course_code=self.code, student_id=student.id)

    def drop_student(self, student_id: str) -> int:
        """
        Remove every roster entry for ``student_id``, keeping the order of the rest.

        Returns:
            int: Number of entries removed
        """
        before = len(self.roster)
        self.roster[:] = [student for student in self.roster if student.id != student_id]
        removed = before - len(self.roster)
        if removed:
            logger.info(
                "Student dropped", course_code=self.code, student_id=student_id, removed=removed
            )
        return removed

    def display_course(self) -> str:
        return f"Course Code: {self.code}, Title: {self.title}, Credits: {self.credits}"


class Department(Record):
    """Groups professors and courses under a name."""

    name: str
    location: str = ""
    budget: float = 0.0
    professors: list[Professor] = Field(default_factory=list)
    courses: list[Course] = Field(default_factory=list)

    def add_professor(self, professor: Professor) -> None:
        self.professors.append(professor)

    def add_course(self, course: Course) -> None:
        self.courses.append(course)

    def find_course(self, code: str) -> Course | None:
        return next((course for course in self.courses if course.code == code), None)

    def list_professors(self) -> str:
        """Concatenated details of every professor, in insertion order."""
        return "\n".join(professor.display_details() for professor in self.professors)

    def display_department(self) -> str:
        return (
            f"Department: {self.name}, Location: {self.location}, "
            f"Budget: ${format_number(self.budget)}"
        )


class University(Record):
    """Aggregates departments."""

    name: str = "University"
    departments: list[Department] = Field(default_factory=list)

    def add_department(self, department: Department) -> None:
        self.departments.append(department)

    def courses(self) -> Iterator[Course]:
        for department in self.departments:
            yield from department.courses

    def professors(self) -> Iterator[Professor]:
        for department in self.departments:
            yield from department.professors

    def find_course(self, code: str) -> Course | None:
        """First course with ``code`` across all departments."""
        return next((course for course in self.courses() if course.code == code), None)
