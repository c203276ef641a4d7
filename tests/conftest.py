"""Shared fixtures for the university records tests."""

from __future__ import annotations

import pytest
import structlog

from university.config import get_settings
from university.domain import (
    AssistantProfessor,
    AssociateProfessor,
    Course,
    FullProfessor,
    GraduateStudent,
    UndergraduateStudent,
)


@pytest.fixture(autouse=True)
def _reset_global_state():
    yield
    structlog.reset_defaults()
    get_settings.cache_clear()


@pytest.fixture
def undergrad() -> UndergraduateStudent:
    return UndergraduateStudent(
        name="Alice", age=20, id="S123", contact="alice@email.com",
        enrollment_date="2022", program="CS", gpa=3.5,
        major="CS", minor="Math", expected_graduation="2025",
    )


@pytest.fixture
def grad() -> GraduateStudent:
    return GraduateStudent(
        name="Bob", age=25, id="S124", contact="bob@email.com",
        enrollment_date="2021", program="Physics", gpa=3.8,
        research_topic="Quantum", advisor="Dr. Smith", thesis_title="Dark Matter",
    )


@pytest.fixture
def professor_fields() -> dict:
    return {
        "age": 40,
        "contact": "prof@email.com",
        "department": "Science",
        "specialization": "Biology",
        "hire_date": "2015",
    }


@pytest.fixture
def assistant(professor_fields) -> AssistantProfessor:
    return AssistantProfessor(name="Dr. Jane", id="P123", **professor_fields)


@pytest.fixture
def associate(professor_fields) -> AssociateProfessor:
    return AssociateProfessor(name="Dr. Lee", id="P124", **professor_fields)


@pytest.fixture
def full_professor(professor_fields) -> FullProfessor:
    return FullProfessor(name="Dr. Smith", id="P125", **professor_fields)


@pytest.fixture
def course() -> Course:
    return Course(code="CS101", title="Intro to CS", credits=3, description="Basics of programming")


def make_undergrad(student_id: str) -> UndergraduateStudent:
    return UndergraduateStudent(
        name=f"Student {student_id}", age=19, id=student_id, contact=f"{student_id}@email.com",
        enrollment_date="2023", program="CS", gpa=3.0,
        major="CS", minor="Math", expected_graduation="2027",
    )


@pytest.fixture
def student_factory():
    return make_undergrad
