"""Summaries across courses: GPA, credits, and progress tables."""

import typing

import numpy as np
import pandas as pd

from .core import Assignments, Course, Status
from .scales import VALID_LETTERS, map_scores_to_grade_points, map_scores_to_letter_grades

_PROGRESS_COLUMNS = (
    "code",
    "credits",
    "grade",
    "assignments",
    "graded",
    "completed",
    "pending",
    "average score",
)


def graded_courses(courses: typing.Iterable[Course]) -> typing.List[Course]:
    """Only those courses which have a current grade."""
    return [c for c in courses if c.current_grade is not None]


def total_credits(courses: typing.Iterable[Course]) -> int:
    """The number of credits across all courses, graded or not."""
    return sum(c.credits for c in courses)


def gpa(courses: typing.Iterable[Course], scale=None) -> float:
    """Compute the credit-weighted grade point average.

    Each graded course contributes the grade point of its current grade,
    weighted by its credits. Courses without a current grade are left out
    entirely: neither their points nor their credits are counted.

    Parameters
    ----------
    courses : Iterable[Course]
        Courses whose :attr:`~studyplan.core.Course.current_grade` has been
        computed, e.g. by :func:`studyplan.grading.with_current_grades`.
    scale : OrderedDict
        The scale used to find each course's letter grade. Default:
        :attr:`studyplan.scales.DEFAULT_SCALE`.

    Returns
    -------
    float
        The GPA on the 4.0 scale. 0 if there are no graded courses.

    """
    graded = graded_courses(courses)
    if not graded:
        return 0.0

    grades = pd.Series([c.current_grade for c in graded], dtype=float)
    credits = pd.Series([c.credits for c in graded], dtype=float)

    total_credits = credits.sum()
    if total_credits <= 0:
        return 0.0

    points = map_scores_to_grade_points(grades, scale=scale)
    return float((points * credits).sum() / total_credits)


def letter_grade_distribution(courses: typing.Iterable[Course], scale=None) -> pd.Series:
    """Counts the frequency of each letter grade among the graded courses.

    Returns
    -------
    pd.Series
        The count of each letter grade. The letters are guaranteed to be in
        order, from highest to lowest.

    """
    grades = pd.Series([c.current_grade for c in graded_courses(courses)], dtype=float)
    letters = map_scores_to_letter_grades(grades, scale=scale)

    counts = letters.value_counts().reindex(VALID_LETTERS)
    counts.index.name = "Letter"
    counts.name = "Frequency"
    return counts.fillna(0).astype(int)


def course_progress(courses: typing.Iterable[Course], assignments) -> pd.DataFrame:
    """Compute a table summarizing progress in each course.

    Parameters
    ----------
    courses : Iterable[Course]
        The courses, with current grades attached.
    assignments : Iterable[Assignment]
        All assignments; each is matched to its course by ``course_id``.

    Returns
    -------
    pd.DataFrame
        A table indexed by course id with columns ``code``, ``credits``,
        ``grade``, ``letter``, ``assignments`` (number of assignments),
        ``graded``, ``completed``, ``pending``, ``average score`` (the plain
        mean of the graded assignments, ignoring category weights) and
        ``progress`` (fraction of assignments graded; 0 when there are
        none).

    """
    courses = list(courses)
    by_course = Assignments(assignments).group_by(lambda a: a.course_id)

    rows = []
    for course in courses:
        mine = by_course.get(course.id, Assignments())
        graded = mine.graded()
        rows.append(
            {
                "code": course.code,
                "credits": course.credits,
                "grade": course.current_grade,
                "assignments": len(mine),
                "graded": len(graded),
                "completed": len(mine.with_status(Status.COMPLETED)),
                "pending": len(mine.with_status(Status.PENDING)),
                "average score": (
                    np.mean([a.grade for a in graded]) if graded else np.nan
                ),
            }
        )

    table = pd.DataFrame(
        rows,
        columns=list(_PROGRESS_COLUMNS),
        index=pd.Index([c.id for c in courses], name="id"),
    )

    table["grade"] = table["grade"].astype(float)
    table["average score"] = table["average score"].astype(float)
    table["letter"] = map_scores_to_letter_grades(table["grade"])
    table["progress"] = (
        table["graded"].astype(float) / table["assignments"].astype(float)
    ).fillna(0.0)

    return table[["code", "credits", "grade", "letter", *_PROGRESS_COLUMNS[3:], "progress"]]
