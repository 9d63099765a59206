"""Tests of the data model."""

import datetime

import numpy as np
import pytest

import studyplan
from studyplan import Assignment, Assignments, Course, GradeCategory, Priority, Status


# GradeCategory / Course ---------------------------------------------------------------


def test_category_weight_must_be_a_percentage():
    with pytest.raises(ValueError):
        GradeCategory("Homework", -5)

    with pytest.raises(ValueError):
        GradeCategory("Homework", 101)


def test_category_name_cannot_be_empty():
    with pytest.raises(ValueError):
        GradeCategory("", 50)


def test_course_categories_accept_several_formats():
    # when
    course = Course(
        1,
        "Algebra",
        "MATH 1",
        3,
        grade_categories=[
            GradeCategory("Homework", 30),
            {"name": "Midterm", "weight": 30},
            ("Final", 40),
        ],
    )

    # then
    assert course.grade_categories == (
        GradeCategory("Homework", 30),
        GradeCategory("Midterm", 30),
        GradeCategory("Final", 40),
    )
    assert course.category_names == ["Homework", "Midterm", "Final"]


def test_course_category_weights_must_sum_to_100():
    with pytest.raises(ValueError):
        Course(1, "Algebra", "MATH 1", 3, grade_categories=[("Homework", 30), ("Final", 40)])


def test_course_category_weights_may_be_partial_if_allowed():
    course = Course(
        1,
        "Algebra",
        "MATH 1",
        3,
        grade_categories=[("Homework", 30), ("Final", 40)],
        allow_partial_weights=True,
    )
    assert sum(c.weight for c in course.grade_categories) == 70


def test_course_weights_that_sum_to_100_up_to_rounding_are_accepted():
    Course(1, "Algebra", "MATH 1", 3, grade_categories=[(str(i), 100 / 3) for i in range(3)])


def test_course_category_names_must_be_unique():
    with pytest.raises(ValueError):
        Course(1, "Algebra", "MATH 1", 3, grade_categories=[("Homework", 50), ("Homework", 50)])


def test_course_categories_cannot_be_a_string():
    with pytest.raises(TypeError):
        Course(1, "Algebra", "MATH 1", 3, grade_categories="Homework")


def test_course_without_categories_is_allowed():
    assert Course(1, "Algebra", "MATH 1", 3).grade_categories == ()


@pytest.mark.parametrize("credits", [0, -3, 2.5, True])
def test_course_credits_must_be_a_positive_integer(credits):
    with pytest.raises(ValueError):
        Course(1, "Algebra", "MATH 1", credits)


def test_course_is_graded_when_it_has_a_current_grade():
    assert not Course(1, "Algebra", "MATH 1", 3).graded
    assert Course(1, "Algebra", "MATH 1", 3, current_grade=81.5).graded


# Assignment ---------------------------------------------------------------------------


def test_assignment_converts_strings_at_the_boundary():
    # when
    assignment = Assignment(
        1, 2, "Essay", "2024-10-05T23:59:00", "Essays", priority="high", status="in-progress"
    )

    # then
    assert assignment.due_date == datetime.date(2024, 10, 5)
    assert assignment.priority is Priority.HIGH
    assert assignment.status is Status.IN_PROGRESS
    assert not assignment.completed
    assert not assignment.graded


def test_assignment_with_unknown_status_raises():
    with pytest.raises(ValueError):
        Assignment(1, 2, "Essay", "2024-10-05", status="done")


def test_assignment_with_unknown_priority_raises():
    with pytest.raises(ValueError):
        Assignment(1, 2, "Essay", "2024-10-05", priority="urgent")


def test_assignment_grade_must_be_a_percentage():
    with pytest.raises(ValueError):
        Assignment(1, 2, "Essay", "2024-10-05", grade=100.5)

    with pytest.raises(ValueError):
        Assignment(1, 2, "Essay", "2024-10-05", grade=-1)


def test_assignment_with_malformed_due_date_raises_invalid_date():
    with pytest.raises(studyplan.InvalidDate):
        Assignment(1, 2, "Essay", "the day after tomorrow")


def test_assignments_are_immutable():
    assignment = Assignment(1, 2, "Essay", "2024-10-05")
    with pytest.raises(AttributeError):
        assignment.grade = 90


def test_priority_rank():
    assert Priority.LOW.rank < Priority.MEDIUM.rank < Priority.HIGH.rank


# Assignments --------------------------------------------------------------------------

EXAMPLE = Assignments(
    [
        Assignment(1, 1, "HW 1", "2024-09-01", "Homework", status="completed", grade=90),
        Assignment(2, 1, "HW 2", "2024-09-08", "Homework"),
        Assignment(3, 2, "Lab 1", "2024-09-02", "Labs", status="completed", grade=75),
        Assignment(4, 2, "Lab 2", "2024-09-09", "Labs", status="in-progress"),
    ]
)


def test_assignments_filters():
    assert [a.id for a in EXAMPLE.for_course(2)] == [3, 4]
    assert [a.id for a in EXAMPLE.in_category("Homework")] == [1, 2]
    assert [a.id for a in EXAMPLE.graded()] == [1, 3]
    assert [a.id for a in EXAMPLE.ungraded()] == [2, 4]
    assert [a.id for a in EXAMPLE.with_status("in-progress")] == [4]


def test_assignments_filters_return_assignments():
    assert isinstance(EXAMPLE.graded(), Assignments)
    assert isinstance(EXAMPLE[1:], Assignments)


def test_assignments_with_unknown_status_raises():
    with pytest.raises(ValueError):
        EXAMPLE.with_status("finished")


def test_assignments_group_by():
    # when
    groups = EXAMPLE.group_by(lambda a: a.course_id)

    # then
    assert list(groups) == [1, 2]
    assert groups[1] == [EXAMPLE[0], EXAMPLE[1]]
    assert groups[2] == [EXAMPLE[2], EXAMPLE[3]]


def test_assignments_add():
    combined = EXAMPLE[:1] + EXAMPLE[3:]
    assert [a.id for a in combined] == [1, 4]


def test_assignments_to_frame():
    # when
    table = EXAMPLE.to_frame()

    # then
    assert list(table.index) == [1, 2, 3, 4]
    assert table.loc[3, "category"] == "Labs"
    assert table.loc[1, "grade"] == 90
    assert np.isnan(table.loc[2, "grade"])
