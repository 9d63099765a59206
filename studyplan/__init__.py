"""A package for planning coursework and computing grades and GPA."""

from .core import (
    Course,
    GradeCategory,
    DEFAULT_CATEGORIES,
    Assignment,
    Assignments,
    Priority,
    Status,
    ClassSession,
)

from .errors import InvalidDate, NotFound

from .scales import (
    DEFAULT_SCALE,
    GRADE_POINTS,
    letter_grade,
    grade_point,
    map_scores_to_letter_grades,
    map_scores_to_grade_points,
)

from .grading import GradingOptions, course_grade, with_current_grades
from .statistics import gpa
from .store import Store, CourseStore, AssignmentStore, ClassStore
from .planner import Planner, PlannerOptions

from . import agenda
from . import dates
from . import grading
from . import io
from . import scales
from . import schedule
from . import statistics

__all__ = [
    "Course",
    "GradeCategory",
    "DEFAULT_CATEGORIES",
    "Assignment",
    "Assignments",
    "Priority",
    "Status",
    "ClassSession",
    "InvalidDate",
    "NotFound",
    "DEFAULT_SCALE",
    "GRADE_POINTS",
    "letter_grade",
    "grade_point",
    "map_scores_to_letter_grades",
    "map_scores_to_grade_points",
    "GradingOptions",
    "course_grade",
    "with_current_grades",
    "gpa",
    "Store",
    "CourseStore",
    "AssignmentStore",
    "ClassStore",
    "Planner",
    "PlannerOptions",
    "agenda",
    "dates",
    "grading",
    "io",
    "scales",
    "schedule",
    "statistics",
]
