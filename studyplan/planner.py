"""The planner: stores, grades, and agenda in one place."""

import dataclasses
import pathlib
import typing

import pandas as pd

from . import agenda, schedule, statistics
from .core import Assignments, Course, Status
from .errors import NotFound
from .grading import GradingOptions, with_current_grades
from .io import seed
from .store import AssignmentStore, ClassStore, CourseStore


# PlannerOptions -----------------------------------------------------------------------


@dataclasses.dataclass
class PlannerOptions:
    """Configures the behavior of a :class:`Planner`.

    Attributes
    ----------
    upcoming_window_days : int
        How many days ahead :meth:`Planner.upcoming` looks. Default: 7.
    grading : GradingOptions
        Options used when computing course grades.

    """

    upcoming_window_days: int = 7
    grading: GradingOptions = dataclasses.field(default_factory=GradingOptions)


# Planner ==============================================================================


class Planner:
    """Brings together a student's courses, assignments, and class schedule.

    The planner does not keep any grades of its own. Every time course grades
    are asked for, they are computed afresh from the assignments currently in
    the store, so they can never be out of date.

    Parameters
    ----------
    courses : CourseStore
    assignments : AssignmentStore
    classes : Optional[ClassStore]
        Default: an empty store.
    opts : Optional[PlannerOptions]
        Default: ``PlannerOptions()``.

    Example
    -------
    >>> planner = Planner.from_seed("path/to/seed/")
    >>> planner.gpa()
    3.42

    """

    def __init__(
        self,
        courses: CourseStore,
        assignments: AssignmentStore,
        classes: typing.Optional[ClassStore] = None,
        opts: typing.Optional[PlannerOptions] = None,
    ):
        self.course_store = courses
        self.assignment_store = assignments
        self.class_store = classes if classes is not None else ClassStore()
        self.opts = opts if opts is not None else PlannerOptions()

    def __repr__(self):
        return (
            f"<{self.__class__.__name__} object with "
            f"{len(self.course_store)} courses, "
            f"{len(self.assignment_store)} assignments "
            f"and {len(self.class_store)} classes>"
        )

    @classmethod
    def from_seed(cls, directory, opts=None, allow_partial_weights=False):
        """Create a planner from a directory of seed files.

        The directory should contain ``courses.json`` and ``assignments.json``.
        ``classes.json`` is optional. See :mod:`studyplan.io.seed`.

        """
        directory = pathlib.Path(directory)

        courses = CourseStore(
            seed.read_courses(
                directory / "courses.json", allow_partial_weights=allow_partial_weights
            )
        )
        assignments = AssignmentStore(
            seed.read_assignments(directory / "assignments.json"), courses=courses
        )

        classes_path = directory / "classes.json"
        if classes_path.exists():
            classes = ClassStore(seed.read_classes(classes_path), courses=courses)
        else:
            classes = ClassStore(courses=courses)

        return cls(courses, assignments, classes, opts=opts)

    # grades ---------------------------------------------------------------------------

    @property
    def assignments(self) -> Assignments:
        """All assignments, as a snapshot."""
        return Assignments(self.assignment_store.get_all())

    def courses(self) -> typing.List[Course]:
        """All courses, with their current grades computed from the assignments."""
        return with_current_grades(
            self.course_store.get_all(),
            self.assignment_store.get_all(),
            opts=self.opts.grading,
        )

    def gpa(self) -> float:
        """The credit-weighted GPA of the graded courses."""
        return statistics.gpa(self.courses())

    def total_credits(self) -> int:
        """Credits across all courses, graded or not."""
        return statistics.total_credits(self.course_store.get_all())

    def progress(self) -> pd.DataFrame:
        """A per-course progress table. See :func:`studyplan.statistics.course_progress`."""
        return statistics.course_progress(self.courses(), self.assignments)

    # agenda ---------------------------------------------------------------------------

    def upcoming(self, now=None) -> Assignments:
        """Unfinished assignments due within the configured window."""
        return agenda.upcoming(
            self.assignments, days=self.opts.upcoming_window_days, now=now
        )

    def overdue(self, now=None) -> Assignments:
        return agenda.overdue(self.assignments, now=now)

    def todays_sessions(self, now=None):
        return schedule.todays_sessions(self.class_store.get_all(), now=now)

    # updating assignments -------------------------------------------------------------

    def record_grade(self, assignment_id: int, grade: float):
        """Record the grade earned on an assignment.

        Parameters
        ----------
        assignment_id : int
        grade : float
            A percentage between 0 and 100.

        Returns
        -------
        Assignment
            The updated assignment.

        Raises
        ------
        NotFound
            If there is no such assignment.
        ValueError
            If the grade is not between 0 and 100.

        """
        grade = float(grade)
        if not 0 <= grade <= 100:
            raise ValueError(f"Grade must be between 0 and 100, not {grade}.")
        return self.assignment_store.update(assignment_id, grade=grade)

    def toggle_status(self, assignment_id: int):
        """Mark a completed assignment as pending, and anything else as completed.

        Raises
        ------
        NotFound
            If there is no such assignment.

        """
        assignment = self.assignment_store.get_by_id(assignment_id)
        if assignment is None:
            raise NotFound("Assignment", assignment_id)

        new_status = Status.PENDING if assignment.completed else Status.COMPLETED
        return self.assignment_store.update(assignment_id, status=new_status)
