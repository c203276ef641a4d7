"""
People Hierarchy

Person → Student → UndergraduateStudent / GraduateStudent
Person → Professor → AssistantProfessor / AssociateProfessor / FullProfessor

Every variant extends ``details_lines`` by calling its parent first and appending
its own line, and overrides ``calculate_payment`` with a fixed schedule.
People are immutable once constructed; use ``replace`` for a revalidated copy.
"""

from abc import ABC, abstractmethod
from typing import ClassVar

import structlog
from pydantic import ConfigDict, field_validator

from university.domain.base import Record
from university.domain.exceptions import PaymentError

logger = structlog.get_logger(__name__)

MIN_AGE = 1
MAX_AGE = 120
MIN_GPA = 0.0
MAX_GPA = 4.0


def format_number(value: float) -> str:
    """Render a number in ``%g`` form (``3.5``, ``12000``)."""
    return f"{value:g}"


class Person(Record, ABC):
    """
    Abstract base class for all people in the university.

    Identity and contact data shared by students and professors.
    """

    model_config = ConfigDict(frozen=True)

    name: str
    age: int
    id: str
    contact: str

    @field_validator("name")
    @classmethod
    def validate_name(cls, v: str) -> str:
        if not v:
            raise ValueError("Name cannot be empty.")
        return v

    @field_validator("age")
    @classmethod
    def validate_age(cls, v: int) -> int:
        if v < MIN_AGE or v > MAX_AGE:
            raise ValueError("Invalid age.")
        return v

    @field_validator("id")
    @classmethod
    def validate_id(cls, v: str) -> str:
        if not v:
            raise ValueError("Invalid ID provided")
        return v

    @field_validator("contact")
    @classmethod
    def validate_contact(cls, v: str) -> str:
        if "@" not in v:
            raise ValueError("Invalid contact info")
        return v

    def details_lines(self) -> list[str]:
        """Rendering lines, most general first."""
        return [f"Name: {self.name}, Age: {self.age}, ID: {self.id}, Contact: {self.contact}"]

    def display_details(self) -> str:
        """Multi-line textual rendering of this person."""
        return "\n".join(self.details_lines())

    @abstractmethod
    def calculate_payment(self) -> float:
        """
        Payment owed to (professors) or by (students) this person.

        Returns:
            float: Fixed amount for the concrete variant
        """


class Student(Person):
    """Enrolled learner paying the base tuition."""

    TUITION: ClassVar[float] = 10000.0

    enrollment_date: str
    program: str
    gpa: float

    def details_lines(self) -> list[str]:
        lines = super().details_lines()
        lines.append(f"Program: {self.program}, GPA: {format_number(self.gpa)}")
        return lines

    def calculate_payment(self) -> float:
        """
        Tuition for this student.

        Raises:
            PaymentError: If the GPA is outside 0.0-4.0
        """
        if self.gpa < MIN_GPA or self.gpa > MAX_GPA:
            raise PaymentError(
                "Invalid GPA for payment calculation",
                context={"student_id": self.id, "gpa": self.gpa},
            )
        return self.TUITION


class UndergraduateStudent(Student):
    TUITION: ClassVar[float] = 12000.0

    major: str
    minor: str
    expected_graduation: str

    def details_lines(self) -> list[str]:
        lines = super().details_lines()
        lines.append(
            f"Major: {self.major}, Minor: {self.minor}, Grad Date: {self.expected_graduation}"
        )
        return lines


class GraduateStudent(Student):
    TUITION: ClassVar[float] = 8000.0

    research_topic: str
    advisor: str
    thesis_title: str

    def details_lines(self) -> list[str]:
        lines = super().details_lines()
        lines.append(
            f"Research: {self.research_topic}, Advisor: {self.advisor}, "
            f"Thesis: {self.thesis_title}"
        )
        return lines

    def add_taship(self, hours: float) -> str:
        """
        Log teaching-assistant hours. No state is recorded.

        Returns:
            str: Confirmation line
        """
        message = f"TAship: {format_number(hours)} hrs logged."
        logger.info("TA hours logged", student_id=self.id, hours=hours)
        return message


class Professor(Person, ABC):
    """Teaching staff. Concrete ranks fix the salary."""

    SALARY: ClassVar[float]

    department: str
    specialization: str
    hire_date: str

    def details_lines(self) -> list[str]:
        lines = super().details_lines()
        lines.append(
            f"Dept: {self.department}, Specialization: {self.specialization}, "
            f"Hire Date: {self.hire_date}"
        )
        return lines


class AssistantProfessor(Professor):
    SALARY: ClassVar[float] = 50000.0

    def calculate_payment(self) -> float:
        return self.SALARY


class AssociateProfessor(Professor):
    SALARY: ClassVar[float] = 65000.0

    def calculate_payment(self) -> float:
        return self.SALARY


class FullProfessor(Professor):
    SALARY: ClassVar[float] = 80000.0

    def calculate_payment(self) -> float:
        return self.SALARY
