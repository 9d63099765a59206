"""Selecting and ordering assignments for display."""

import typing

from .core import Assignment, Assignments, Status
from .dates import days_until_due, is_overdue

SORT_KEYS = ("due_date", "course", "priority", "status", "title")


def upcoming(assignments, days=7, now=None) -> Assignments:
    """Unfinished assignments due between today and `days` days from now.

    Parameters
    ----------
    assignments : Iterable[Assignment]
    days : int
        How far ahead to look, inclusive. Default: 7.
    now : Optional
        The reference time. Default: the current local time.

    Returns
    -------
    Assignments
        Sorted by due date, soonest first.

    """
    selected = [
        a
        for a in assignments
        if not a.completed and 0 <= days_until_due(a.due_date, now=now) <= days
    ]
    return Assignments(sorted(selected, key=lambda a: a.due_date))


def overdue(assignments, now=None) -> Assignments:
    """Unfinished assignments whose due date has passed."""
    return Assignments(
        a for a in assignments if not a.completed and is_overdue(a.due_date, now=now)
    )


def gradable(assignments) -> Assignments:
    """Completed assignments that have not yet received a grade."""
    return Assignments(a for a in assignments if a.completed and not a.graded)


def search(assignments, query: str = "", status=None) -> Assignments:
    """Filter assignments by text and status.

    Parameters
    ----------
    query : str
        Kept if it appears, case-insensitively, in the title or description.
        The empty string matches everything.
    status : Optional[Status or str]
        If given, only assignments with this status are kept.

    """
    query = query.lower()

    def matches(a: Assignment):
        if status is not None and a.status is not Status(status):
            return False
        return query in a.title.lower() or query in (a.description or "").lower()

    return Assignments(a for a in assignments if matches(a))


def status_counts(assignments) -> typing.Dict[str, int]:
    """The number of assignments in total (``"all"``) and with each status."""
    assignments = list(assignments)
    counts = {"all": len(assignments)}
    for status in Status:
        counts[status.value] = sum(1 for a in assignments if a.status is status)
    return counts


def sort_assignments(assignments, by="due_date", ascending=True, courses=None) -> Assignments:
    """Order assignments for display.

    Parameters
    ----------
    by : str
        One of ``"due_date"``, ``"course"`` (by course name),
        ``"priority"`` (low < medium < high), ``"status"``, or ``"title"``.
        Default: ``"due_date"``.
    ascending : bool
        Default: `True`.
    courses : Optional[Iterable[Course]]
        Needed to sort by course name. Assignments whose course is unknown
        sort as if the name were empty.

    Raises
    ------
    ValueError
        If `by` is not a known sort key.

    """
    if by not in SORT_KEYS:
        raise ValueError(f"Cannot sort by '{by}'. Must be one of {SORT_KEYS}.")

    names = {c.id: c.name for c in (courses or [])}

    keys = {
        "due_date": lambda a: a.due_date,
        "course": lambda a: names.get(a.course_id, ""),
        "priority": lambda a: a.priority.rank,
        "status": lambda a: a.status.value,
        "title": lambda a: a.title,
    }

    return Assignments(sorted(assignments, key=keys[by], reverse=not ascending))
