"""Queries over the weekly class schedule."""

import typing

import pandas as pd

from .core import ClassSession
from .dates import day_of_week


def sessions_on(sessions, day: int) -> typing.List[ClassSession]:
    """The sessions meeting on a day of the week (0 is Sunday), earliest first."""
    return sorted(
        (s for s in sessions if s.day_of_week == day), key=lambda s: s.start_time
    )


def todays_sessions(sessions, now=None) -> typing.List[ClassSession]:
    """The sessions meeting today, earliest first."""
    today = day_of_week(now if now is not None else pd.Timestamp.now())
    return sessions_on(sessions, today)


def session_at(sessions, day: int, hour: int) -> typing.Optional[ClassSession]:
    """The session in progress during an hour slot of the weekly grid, if any.

    A session occupies every hour from the hour it starts in up to, but not
    including, the hour it ends in, and always the hour it starts in. If
    sessions overlap, the one starting earliest is returned.

    """
    for session in sessions_on(sessions, day):
        if session.occupies(day, hour):
            return session
    return None
