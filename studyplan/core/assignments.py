"""Assignments and collections of assignments."""

from collections.abc import Sequence
import dataclasses
import datetime
import enum
import typing

import pandas as pd

from ..dates import to_date


# enumerations -------------------------------------------------------------------------


class Priority(str, enum.Enum):
    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"

    @property
    def rank(self) -> int:
        """Higher is more urgent."""
        return {"low": 1, "medium": 2, "high": 3}[self.value]


class Status(str, enum.Enum):
    PENDING = "pending"
    IN_PROGRESS = "in-progress"
    COMPLETED = "completed"


# Assignment ---------------------------------------------------------------------------


@dataclasses.dataclass(frozen=True)
class Assignment:
    """A piece of coursework.

    Attributes
    ----------
    id : int
        Identifier, assigned by the store.
    course_id : int
        The id of the course the assignment belongs to.
    title : str
    due_date : datetime.date
        Strings and timestamps are converted to a calendar date.
    category : str
        The name of the grade category the assignment counts towards. This
        is matched against the course's category names exactly.
    priority : Priority
        Can also be given as its string value, e.g. ``"high"``.
    status : Status
        Can also be given as its string value, e.g. ``"in-progress"``.
    grade : Optional[float]
        The score as a percentage between 0 and 100, or `None` if ungraded.
    description : Optional[str]

    Raises
    ------
    ValueError
        If the priority or status is not recognized, or the grade is outside
        of [0, 100].
    InvalidDate
        If the due date cannot be interpreted.

    """

    id: int
    course_id: int
    title: str
    due_date: datetime.date
    category: str = "Homework"
    priority: Priority = Priority.MEDIUM
    status: Status = Status.PENDING
    grade: typing.Optional[float] = None
    description: typing.Optional[str] = None

    def __post_init__(self):
        object.__setattr__(self, "due_date", to_date(self.due_date))
        object.__setattr__(self, "priority", Priority(self.priority))
        object.__setattr__(self, "status", Status(self.status))

        if self.grade is not None and not 0 <= self.grade <= 100:
            raise ValueError(f"Grade must be between 0 and 100, not {self.grade!r}.")

    @property
    def graded(self) -> bool:
        return self.grade is not None

    @property
    def completed(self) -> bool:
        return self.status is Status.COMPLETED


# Assignments --------------------------------------------------------------------------


class Assignments(Sequence[Assignment]):
    """A sequence of assignments.

    Behaves essentially like a standard Python list of :class:`Assignment`
    instances, but has some additional methods which make it faster to pick
    out the assignments of interest.

    """

    def __init__(self, assignments: typing.Iterable[Assignment] = ()):
        self._assignments = list(assignments)

    def __contains__(self, element):
        return element in self._assignments

    def __len__(self):
        return len(self._assignments)

    def __iter__(self):
        return iter(self._assignments)

    def __eq__(self, other):
        return list(self) == list(other)

    def __add__(self, other):
        """Concatenates :class:`Assignments`."""
        return Assignments(self._assignments + list(other))

    def __getitem__(self, index):
        if isinstance(index, slice):
            return self.__class__(self._assignments[index])
        return self._assignments[index]

    def __repr__(self):
        return f"Assignments(titles={[a.title for a in self._assignments]})"

    def _repr_pretty_(self, p, cycle):
        p.text("Assignments(titles=[\n")
        for assignment in self._assignments:
            p.text(f"  {assignment.title!r}\n")
        p.text("])")

    def for_course(self, course_id: int) -> "Assignments":
        """Only those assignments belonging to the course."""
        return self.__class__(a for a in self if a.course_id == course_id)

    def in_category(self, name: str) -> "Assignments":
        """Only those assignments whose category is exactly `name`."""
        return self.__class__(a for a in self if a.category == name)

    def graded(self) -> "Assignments":
        """Only those assignments which have a grade."""
        return self.__class__(a for a in self if a.graded)

    def ungraded(self) -> "Assignments":
        return self.__class__(a for a in self if not a.graded)

    def with_status(self, status) -> "Assignments":
        """Only those assignments with the given status.

        Parameters
        ----------
        status : Status or str
            The status to keep, e.g. ``"completed"``.

        Raises
        ------
        ValueError
            If the status is not recognized.

        """
        status = Status(status)
        return self.__class__(a for a in self if a.status is status)

    def group_by(
        self, to_key: typing.Callable[[Assignment], typing.Hashable]
    ) -> typing.Dict[typing.Hashable, "Assignments"]:
        """Group the assignments according to a key function.

        Parameters
        ----------
        to_key : Callable[[Assignment], Hashable]
            A function which accepts an assignment and returns the key under
            which it is grouped.

        Returns
        -------
        dict[Hashable, Assignments]
            A dictionary mapping keys to collections of assignments, in order
            of first appearance.

        Example
        -------
        >>> assignments.group_by(lambda a: a.course_id)
        {1: Assignments(titles=['Essay 1', 'Quiz 1']), 2: Assignments(titles=['Lab 1'])}

        """
        dct = {}
        for assignment in self:
            key = to_key(assignment)
            if key not in dct:
                dct[key] = []
            dct[key].append(assignment)

        return {key: self.__class__(value) for key, value in dct.items()}

    def to_frame(self) -> pd.DataFrame:
        """A table with one row per assignment, indexed by id."""
        columns = [f.name for f in dataclasses.fields(Assignment)]
        records = [dataclasses.asdict(a) for a in self]
        table = pd.DataFrame.from_records(records, columns=columns)
        table["grade"] = table["grade"].astype(float)
        return table.set_index("id")
