from .course import (
    Course,
    GradeCategory,
    DEFAULT_CATEGORIES,
    make_categories,
    validate_categories,
)
from .assignments import Assignment, Assignments, Priority, Status
from .sessions import ClassSession

__all__ = [
    "Course",
    "GradeCategory",
    "DEFAULT_CATEGORIES",
    "make_categories",
    "validate_categories",
    "Assignment",
    "Assignments",
    "Priority",
    "Status",
    "ClassSession",
]
