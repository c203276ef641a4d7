"""
University Domain Models

Composition Relationships:
- Course references a Professor (instructor) and Students (roster)
- Department aggregates Professors and Courses
- University aggregates Departments
- Schedule maps course codes to ScheduleSlots
"""

from university.domain.academic import Course, Department, University
from university.domain.base import Record
from university.domain.exceptions import (
    EnrollmentError,
    ErrorCode,
    GradeError,
    PaymentError,
    UniversitySystemError,
    ValidationError,
)
from university.domain.facilities import Classroom, Schedule, ScheduleSlot
from university.domain.gradebook import GradeBook
from university.domain.people import (
    AssistantProfessor,
    AssociateProfessor,
    FullProfessor,
    GraduateStudent,
    Person,
    Professor,
    Student,
    UndergraduateStudent,
)

__all__ = [
    # Base
    "Record",
    # People
    "Person",
    "Student",
    "UndergraduateStudent",
    "GraduateStudent",
    "Professor",
    "AssistantProfessor",
    "AssociateProfessor",
    "FullProfessor",
    # Academic
    "Course",
    "Department",
    "University",
    "GradeBook",
    # Facilities
    "Classroom",
    "Schedule",
    "ScheduleSlot",
    # Exceptions
    "ErrorCode",
    "UniversitySystemError",
    "ValidationError",
    "EnrollmentError",
    "GradeError",
    "PaymentError",
]
