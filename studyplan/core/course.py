"""Courses and the weighted grading categories they are graded by."""

import collections.abc
import dataclasses
import math
import typing


# GradeCategory ------------------------------------------------------------------------


@dataclasses.dataclass(frozen=True)
class GradeCategory:
    """A named, weighted bucket of assignments, such as "Homework".

    Attributes
    ----------
    name : str
        The category name. Assignments belong to the category whose name
        matches their ``category`` attribute exactly.
    weight : float
        The category's share of the course grade, in percentage points.

    Raises
    ------
    ValueError
        If the name is empty or the weight is not between 0 and 100.

    """

    name: str
    weight: float

    def __post_init__(self):
        if not self.name:
            raise ValueError("Grade category names cannot be empty.")

        if not 0 <= self.weight <= 100:
            raise ValueError(
                f"Weight of category '{self.name}' must be between 0 and 100."
            )


DEFAULT_CATEGORIES = (
    GradeCategory("Homework", 20),
    GradeCategory("Quizzes", 15),
    GradeCategory("Midterm", 25),
    GradeCategory("Final", 40),
)
"""The categories given to a new course when none are provided."""


def _make_category(c):
    """Accepts a GradeCategory, a ``{name, weight}`` dict, or a (name, weight) pair."""
    if isinstance(c, GradeCategory):
        return c

    if isinstance(c, collections.abc.Mapping):
        return GradeCategory(c["name"], c["weight"])

    if isinstance(c, collections.abc.Collection) and len(c) == 2:
        name, weight = c
        return GradeCategory(name, weight)

    raise TypeError(f"Unexpected type for a grade category: {c!r}.")


def make_categories(value) -> typing.Tuple[GradeCategory, ...]:
    """Build a tuple of categories from any of the accepted formats.

    Example
    -------
    >>> make_categories([("Homework", 40), {"name": "Final", "weight": 60}])
    (GradeCategory(name='Homework', weight=40), GradeCategory(name='Final', weight=60))

    """
    if isinstance(value, (str, bytes)):
        raise TypeError("Grade categories must be a collection, not a string.")
    return tuple(_make_category(c) for c in value)


def validate_categories(categories, allow_partial_weights=False):
    """Check that a course's categories are well-formed.

    Parameters
    ----------
    categories : Sequence[GradeCategory]
        The categories to check.
    allow_partial_weights : bool
        If `False`, the weights must sum to 100. Default: `False`.

    Raises
    ------
    ValueError
        If two categories share a name, or if the weights do not sum to 100
        and `allow_partial_weights` is not set.

    """
    names = [c.name for c in categories]
    duplicates = {n for n in names if names.count(n) > 1}
    if duplicates:
        raise ValueError(f"Duplicate grade category names: {sorted(duplicates)}.")

    if categories and not allow_partial_weights:
        total = sum(c.weight for c in categories)
        if not math.isclose(total, 100):
            raise ValueError(
                f"Grade category weights must sum to 100, not {total}, unless "
                "'allow_partial_weights' is enabled."
            )


# Course -------------------------------------------------------------------------------


@dataclasses.dataclass(frozen=True)
class Course:
    """A course the student is enrolled in.

    Attributes
    ----------
    id : int
        Identifier, assigned by the store.
    name : str
    code : str
        Short course code, e.g. ``"CS 101"``.
    credits : int
        Number of credit hours. Must be positive.
    instructor : str
    color : str
        Display color. Not used in any computation.
    semester : str
    grade_categories : tuple[GradeCategory]
        The weighted categories the course is graded by, in order. Can be
        given as a list of :class:`GradeCategory`, of ``{"name", "weight"}``
        dictionaries, or of ``(name, weight)`` pairs.
    current_grade : Optional[float]
        The course grade as a percentage, or `None` if nothing has been
        graded yet. This is derived from the course's assignments by
        :func:`studyplan.grading.with_current_grades`; it is never the source
        of truth.
    allow_partial_weights : bool
        Whether the category weights may sum to something other than 100.

    Raises
    ------
    ValueError
        If the credits are not a positive integer, or the categories are
        invalid (see :func:`validate_categories`).

    """

    id: int
    name: str
    code: str
    credits: int
    instructor: str = ""
    color: str = "#4F46E5"
    semester: str = "Fall 2024"
    grade_categories: typing.Tuple[GradeCategory, ...] = ()
    current_grade: typing.Optional[float] = None
    allow_partial_weights: bool = dataclasses.field(default=False, repr=False)

    def __post_init__(self):
        if (
            not isinstance(self.credits, int)
            or isinstance(self.credits, bool)
            or self.credits <= 0
        ):
            raise ValueError(f"Credits must be a positive integer, not {self.credits!r}.")

        categories = make_categories(self.grade_categories)
        validate_categories(categories, self.allow_partial_weights)
        object.__setattr__(self, "grade_categories", categories)

    @property
    def category_names(self) -> typing.List[str]:
        return [c.name for c in self.grade_categories]

    @property
    def graded(self) -> bool:
        """Whether a grade has been computed for this course."""
        return self.current_grade is not None
