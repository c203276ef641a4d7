"""
University System Demo

Builds the sample roster, wires the records together and prints the results.
Any domain error is reported on stderr and appended to the error log; the
process still exits with status 0.
"""

import sys
from typing import TextIO

import structlog

from university.domain import (
    AssistantProfessor,
    AssociateProfessor,
    Course,
    Department,
    FullProfessor,
    GradeBook,
    GraduateStudent,
    Person,
    Student,
    UndergraduateStudent,
    University,
    UniversitySystemError,
)
from university.domain.people import format_number
from university.logging_config import configure_logging
from university.services import EnrollmentManager, ErrorLog

logger = structlog.get_logger(__name__)

SEPARATOR = "------------------"


def build_people() -> tuple[list[Student], list[Person]]:
    """Sample students and professors."""
    alice = UndergraduateStudent(
        name="Alice", age=20, id="S123", contact="alice@email.com",
        enrollment_date="2022", program="CS", gpa=3.5,
        major="CS", minor="Math", expected_graduation="2025",
    )
    bob = GraduateStudent(
        name="Bob", age=25, id="S124", contact="bob@email.com",
        enrollment_date="2021", program="Physics", gpa=3.8,
        research_topic="Quantum", advisor="Dr. Smith", thesis_title="Dark Matter",
    )
    jane = AssistantProfessor(
        name="Dr. Jane", age=40, id="P123", contact="jane@email.com",
        department="Science", specialization="Biology", hire_date="2015",
    )
    lee = AssociateProfessor(
        name="Dr. Lee", age=50, id="P124", contact="lee@email.com",
        department="CS", specialization="AI", hire_date="2005",
    )
    smith = FullProfessor(
        name="Dr. Smith", age=58, id="P125", contact="smith@email.com",
        department="Physics", specialization="Quantum Mechanics", hire_date="1998",
    )
    return [alice, bob], [alice, bob, jane, lee, smith]


def build_university(students: list[Student], people: list[Person]) -> University:
    """Wire professors, one course and one department into a university."""
    professors = [person for person in people if not isinstance(person, Student)]

    department = Department(name="Computer Science")
    for professor in professors:
        department.add_professor(professor)

    course = Course(code="CS101", title="Intro to CS", credits=3, description="Basics of programming")
    course.set_instructor(professors[0])
    course.enroll_student(students[0])
    department.add_course(course)

    university = University()
    university.add_department(department)
    return university


def run_demo(out: TextIO) -> None:
    """Scripted sequence; raises on the first domain error."""
    students, people = build_people()
    university = build_university(students, people)

    for person in people:
        print(person.display_details(), file=out)
        print(f"Payment: ${format_number(person.calculate_payment())}", file=out)
        print(SEPARATOR, file=out)

    bob = students[1]
    if isinstance(bob, GraduateStudent):
        print(bob.add_taship(10), file=out)

    gradebook = GradeBook()
    gradebook.add_grade("S123", 90)
    gradebook.add_grade("S124", 45)
    print(f"Average Grade: {format_number(gradebook.calculate_average_grade())}", file=out)
    highest = gradebook.get_highest_grade()
    print(f"Highest Grade: {format_number(highest) if highest is not None else 'n/a'}", file=out)
    for student_id in gradebook.get_failing_students():
        print(f"Failing: {student_id}", file=out)

    manager = EnrollmentManager.from_university(university, students)
    manager.enroll_student("CS101", "S124")
    print(f"Enrollment in CS101: {manager.get_enrollment_count('CS101')}", file=out)

    print("University System Initialized.", file=out)


def main() -> int:
    """Run the demo, reporting and logging any domain error."""
    configure_logging()
    logger.info("Starting university demo")

    try:
        run_demo(sys.stdout)
    except UniversitySystemError as e:
        print(f"Error: {e}", file=sys.stderr)
        ErrorLog().log_error(str(e))
        logger.info("Demo aborted", error_code=e.error_code.value)

    return 0


def run() -> None:
    sys.exit(main())


if __name__ == "__main__":
    run()
