"""Computing course grades from assignment scores and category weights."""

import dataclasses
import logging
import typing

import numpy as np
import pandas as pd

from .core import Assignment, Assignments, Course, GradeCategory, make_categories

logger = logging.getLogger(__name__)

UNCATEGORIZED = "Uncategorized"


# GradingOptions -----------------------------------------------------------------------


@dataclasses.dataclass
class GradingOptions:
    """Configures how course grades are computed.

    Attributes
    ----------
    uncategorized_weight : Optional[float]
        What to do with graded assignments whose category does not match any
        of the course's categories. If `None`, they are left out of the course
        grade and a warning is logged. Otherwise, they are pooled into an
        ``"Uncategorized"`` category carrying this weight (in percentage
        points). If the course already has a category of that name, they are
        pooled into it instead. Default: `None`.

    """

    uncategorized_weight: typing.Optional[float] = None


# private helper functions -------------------------------------------------------------


def _graded_table(assignments) -> pd.DataFrame:
    """A (category, grade) table of the graded assignments."""
    graded = [a for a in assignments if a.grade is not None]
    return pd.DataFrame(
        {
            "category": pd.Series([a.category for a in graded], dtype=object),
            "grade": pd.Series([a.grade for a in graded], dtype=float),
        }
    )


def _pool_uncategorized(assignments, categories, weight):
    names = {c.name for c in categories}

    if UNCATEGORIZED not in names:
        categories = categories + (GradeCategory(UNCATEGORIZED, weight),)

    assignments = [
        a if a.category in names else dataclasses.replace(a, category=UNCATEGORIZED)
        for a in assignments
    ]
    return assignments, categories


# public functions ---------------------------------------------------------------------


def category_averages(assignments, categories) -> pd.Series:
    """The average grade earned in each category.

    Parameters
    ----------
    assignments : Iterable[Assignment]
        The course's assignments. Ungraded assignments are ignored.
    categories : Sequence[GradeCategory]
        The course's categories. Also accepts the formats understood by
        :func:`studyplan.core.make_categories`.

    Returns
    -------
    pandas.Series
        A series indexed by category name, in the order of `categories`,
        containing the mean grade of the graded assignments in each category.
        Categories without any graded assignments are `NaN`.

    """
    categories = make_categories(categories)
    table = _graded_table(assignments)

    means = table.groupby("category")["grade"].mean()
    averages = means.reindex([c.name for c in categories]).astype(float)
    averages.name = "average"
    return averages


def unmatched_assignments(assignments, categories) -> Assignments:
    """The graded assignments whose category is not one of `categories`.

    These assignments do not count towards the course grade unless
    :attr:`GradingOptions.uncategorized_weight` is set.

    """
    names = {c.name for c in make_categories(categories)}
    return Assignments(
        a for a in assignments if a.grade is not None and a.category not in names
    )


def course_grade(
    assignments: typing.Iterable[Assignment],
    categories,
    opts: typing.Optional[GradingOptions] = None,
) -> typing.Optional[float]:
    """Compute a course's grade as a percentage.

    Each category's score is the mean grade of its graded assignments. The
    course grade is the weighted mean of the category scores, where only
    those categories with at least one graded assignment take part. That is,
    the result is renormalized by the weight actually represented: a course
    graded only in a category worth 35% reports the score in that category,
    not 35% of it.

    Parameters
    ----------
    assignments : Iterable[Assignment]
        The course's assignments.
    categories : Sequence[GradeCategory]
        The course's weighted categories. Assignments are matched to
        categories by name.
    opts : Optional[GradingOptions]
        Default: ``GradingOptions()``.

    Returns
    -------
    Optional[float]
        The course grade, or `None` if either input is empty or nothing has
        been graded in any category.

    Example
    -------
    With categories ``Homework`` (20) and ``Final`` (80), a homework average
    of 90 and a final average of 70 give ``(90 * .2 + 70 * .8) / 1 == 74``.

    """
    opts = opts if opts is not None else GradingOptions()
    assignments = list(assignments)
    categories = make_categories(categories)

    if not assignments or not categories:
        return None

    unmatched = unmatched_assignments(assignments, categories)
    if unmatched:
        if opts.uncategorized_weight is None:
            logger.warning(
                "Graded assignments %s match no category in %s; they do not "
                "count towards the course grade.",
                [a.title for a in unmatched],
                [c.name for c in categories],
            )
        else:
            assignments, categories = _pool_uncategorized(
                assignments, categories, opts.uncategorized_weight
            )

    averages = category_averages(assignments, categories).to_numpy()
    weights = np.array([c.weight for c in categories], dtype=float) / 100

    used = ~np.isnan(averages)
    total_weight = weights[used].sum()

    if total_weight == 0:
        return None

    return float((averages[used] * weights[used]).sum() / total_weight)


def with_current_grades(
    courses: typing.Iterable[Course],
    assignments: typing.Iterable[Assignment],
    opts: typing.Optional[GradingOptions] = None,
) -> typing.List[Course]:
    """Attach freshly computed grades to copies of the courses.

    Each course's :attr:`~studyplan.core.Course.current_grade` is recomputed
    with :func:`course_grade` from those assignments whose ``course_id`` is the
    course's id. Any grade already set on a course is discarded. The inputs
    are not modified.

    Returns
    -------
    list[Course]
        New course instances, in the same order as `courses`.

    """
    by_course = Assignments(assignments).group_by(lambda a: a.course_id)

    return [
        dataclasses.replace(
            course,
            current_grade=course_grade(
                by_course.get(course.id, []), course.grade_categories, opts=opts
            ),
        )
        for course in courses
    ]
