"""
Grade Book

Mapping from student ID to a numeric grade (0-100) with aggregate queries.
"""

import math

import structlog
from pydantic import Field

from university.config import get_settings
from university.domain.base import Record
from university.domain.exceptions import GradeError

logger = structlog.get_logger(__name__)

MIN_GRADE = 0.0
MAX_GRADE = 100.0


class GradeBook(Record):
    """Grades keyed by student ID. Re-adding a grade overwrites it."""

    grades: dict[str, float] = Field(default_factory=dict)

    def __len__(self) -> int:
        return len(self.grades)

    def add_grade(self, student_id: str, grade: float) -> None:
        """
        Insert or overwrite the grade for ``student_id``.

        Raises:
            GradeError: If the grade is NaN or outside 0-100
        """
        if math.isnan(grade) or grade < MIN_GRADE or grade > MAX_GRADE:
            raise GradeError(
                f"Invalid grade entry: {grade:f}",
                context={"student_id": student_id, "grade": grade},
            )
        self.grades[student_id] = grade
        logger.debug("Grade recorded", student_id=student_id, grade=grade)

    def get_grade(self, student_id: str) -> float | None:
        return self.grades.get(student_id)

    def calculate_average_grade(self) -> float:
        """Arithmetic mean of all grades, 0.0 when the book is empty."""
        if not self.grades:
            return 0.0
        return sum(self.grades.values()) / len(self.grades)

    def get_highest_grade(self) -> float | None:
        """Highest grade, or None when the book is empty."""
        if not self.grades:
            return None
        return max(self.grades.values())

    def get_failing_students(self, pass_grade: float | None = None) -> list[str]:
        """
        Student IDs whose grade is strictly below ``pass_grade``.

        Args:
            pass_grade: Threshold (defaults to ``settings.default_pass_grade``)

        Returns:
            list[str]: IDs in ascending order
        """
        if pass_grade is None:
            pass_grade = get_settings().default_pass_grade
        return sorted(
            student_id for student_id, grade in self.grades.items() if grade < pass_grade
        )
