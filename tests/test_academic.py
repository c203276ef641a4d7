"""Tests for Course, Department and University records."""

from __future__ import annotations

import pytest

from university.domain import (
    Course,
    Department,
    EnrollmentError,
    ErrorCode,
    University,
    UniversitySystemError,
    ValidationError,
)


class TestCourse:
    @pytest.mark.parametrize("credits", [0, -3])
    def test_non_positive_credits_rejected(self, credits):
        with pytest.raises(ValidationError, match="Credits must be positive."):
            Course(code="CS101", title="Intro", credits=credits, description="")

    def test_default_capacity_is_thirty(self, course):
        assert course.max_students == 30
        assert course.instructor is None
        assert course.roster == []

    def test_set_instructor_replaces(self, course, assistant, associate):
        course.set_instructor(assistant)
        course.set_instructor(associate)
        assert course.instructor is associate

    def test_roster_keeps_references(self, course, undergrad):
        course.enroll_student(undergrad)
        assert course.roster[0] is undergrad

    def test_duplicate_enrollment_is_allowed(self, course, undergrad):
        course.enroll_student(undergrad)
        course.enroll_student(undergrad)
        assert course.enrolled_ids == ["S123", "S123"]

    def test_thirty_first_enrollment_fails(self, course, student_factory):
        for i in range(30):
            course.enroll_student(student_factory(f"S{i:03d}"))
        assert course.is_full()

        with pytest.raises(EnrollmentError) as exc_info:
            course.enroll_student(student_factory("S999"))

        assert str(exc_info.value) == "Enrollment Error: Course is full: CS101"
        assert exc_info.value.error_code is ErrorCode.ENROLLMENT_ERROR
        assert course.enrollment_count == 30

    def test_custom_capacity(self, student_factory):
        small = Course(code="CS500", title="Seminar", credits=1, max_students=1)
        small.enroll_student(student_factory("S1"))
        with pytest.raises(EnrollmentError):
            small.enroll_student(student_factory("S2"))

    def test_drop_removes_all_occurrences_in_order(self, course, student_factory):
        s1, s2, s3 = (student_factory(sid) for sid in ("S1", "S2", "S3"))
        for student in (s1, s2, s3, s2):
            course.enroll_student(student)

        assert course.drop_student("S2") == 2
        assert course.enrolled_ids == ["S1", "S3"]
        assert course.drop_student("S404") == 0

    def test_constructing_over_capacity_roster_fails(self, student_factory):
        students = [student_factory(f"S{i:03d}") for i in range(31)]
        with pytest.raises(ValidationError, match="Roster of 31 exceeds capacity of 30"):
            Course(code="CS101", title="Intro", credits=3, roster=students)

    def test_full_roster_at_construction_is_allowed(self, student_factory):
        students = [student_factory(f"S{i:03d}") for i in range(30)]
        assert Course(code="CS101", title="Intro", credits=3, roster=students).is_full()

    def test_shrinking_capacity_below_roster_fails(self, course, student_factory):
        for i in range(5):
            course.enroll_student(student_factory(f"S{i}"))

        with pytest.raises(ValidationError, match="exceeds capacity"):
            course.max_students = 2

        assert course.max_students == 30
        assert course.enrollment_count == 5
        course.max_students = 5
        assert course.is_full()

    @pytest.mark.parametrize("field, value", [("credits", 0), ("max_students", 0)])
    def test_invalid_assignment_raises_domain_error(self, course, field, value):
        before = getattr(course, field)
        with pytest.raises(ValidationError) as exc_info:
            setattr(course, field, value)
        assert isinstance(exc_info.value, UniversitySystemError)
        assert exc_info.value.context["record_type"] == "Course"
        assert getattr(course, field) == before

    def test_display_course(self, course):
        assert course.display_course() == "Course Code: CS101, Title: Intro to CS, Credits: 3"


class TestDepartment:
    def test_add_professor_and_list(self, assistant, associate):
        department = Department(name="Computer Science")
        department.add_professor(assistant)
        department.add_professor(associate)

        listing = department.list_professors().splitlines()
        assert listing[0].startswith("Name: Dr. Jane")
        assert listing[2].startswith("Name: Dr. Lee")

    def test_display_department(self):
        department = Department(name="Mathematics", location="Building B", budget=85000.0)
        assert department.display_department() == (
            "Department: Mathematics, Location: Building B, Budget: $85000"
        )

    def test_course_mutations_visible_through_department(self, course, undergrad, grad):
        # Courses are shared, not copied, when added to a department.
        department = Department(name="Computer Science")
        department.add_course(course)
        course.enroll_student(undergrad)
        course.enroll_student(grad)

        held = department.find_course("CS101")
        assert held is course
        assert held.enrollment_count == 2
        assert department.find_course("MATH202") is None


class TestUniversity:
    def test_aggregates_departments(self, course, assistant, undergrad):
        cs = Department(name="Computer Science")
        cs.add_professor(assistant)
        math = Department(name="Mathematics")
        math.add_course(Course(code="MATH202", title="Linear Algebra", credits=4))

        university = University()
        university.add_department(cs)
        university.add_department(math)
        cs.add_course(course)
        course.enroll_student(undergrad)

        assert [c.code for c in university.courses()] == ["CS101", "MATH202"]
        assert list(university.professors()) == [assistant]
        assert university.find_course("CS101").enrolled_ids == ["S123"]
        assert university.find_course("BIO100") is None
