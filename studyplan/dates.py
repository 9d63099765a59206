"""Due-date status: overdue checks, countdowns, and display labels.

Every function accepts an optional ``now`` argument. If it is omitted, the
current local time is used. Comparisons are made at whole-day granularity:
both the date in question and ``now`` are truncated to midnight first, so the
time of day never changes the outcome.

Dates can be given as :class:`datetime.date`, :class:`datetime.datetime`,
:class:`pandas.Timestamp`, or ISO-formatted strings. Timezone information is
discarded; the wall-clock date is what counts.

"""

import dataclasses
import datetime

import pandas as pd

from .errors import InvalidDate


# private helper functions -------------------------------------------------------------


def _today(now=None) -> pd.Timestamp:
    if now is None:
        now = pd.Timestamp.now()
    return to_timestamp(now).normalize()


def _start_of_week(day: pd.Timestamp) -> pd.Timestamp:
    """The Sunday on or before `day`."""
    return day - pd.Timedelta(days=day_of_week(day))


# parsing ------------------------------------------------------------------------------


def to_timestamp(value) -> pd.Timestamp:
    """Interpret a value as a timezone-naive timestamp.

    Raises
    ------
    InvalidDate
        If the value cannot be interpreted as a date.

    """
    if isinstance(value, datetime.time):
        raise InvalidDate(f"Expected a date, got a time of day: {value!r}.")

    try:
        timestamp = pd.Timestamp(value)
    except (ValueError, TypeError) as exc:
        raise InvalidDate(f"Cannot interpret {value!r} as a date.") from exc

    if pd.isna(timestamp):
        raise InvalidDate(f"Cannot interpret {value!r} as a date.")

    if timestamp.tzinfo is not None:
        timestamp = timestamp.tz_localize(None)

    return timestamp


def to_date(value) -> datetime.date:
    """Interpret a value as a calendar date."""
    return to_timestamp(value).date()


def parse_time(value) -> datetime.time:
    """Interpret a value such as ``"14:30"`` as a time of day.

    Raises
    ------
    InvalidDate
        If the value is not a valid time of day.

    """
    if isinstance(value, datetime.time):
        return value

    if isinstance(value, datetime.datetime):
        return value.time()

    if not isinstance(value, str):
        raise InvalidDate(f"Cannot interpret {value!r} as a time of day.")

    return to_timestamp(f"2000-01-01T{value.strip()}").time()


def day_of_week(date) -> int:
    """The day of the week as an integer, where 0 is Sunday and 6 is Saturday."""
    return (to_timestamp(date).dayofweek + 1) % 7


# status -------------------------------------------------------------------------------


def is_overdue(date, now=None) -> bool:
    """Whether the date is on a calendar day before today.

    A date falling on today is never overdue, whatever the time of day.

    Parameters
    ----------
    date
        The due date.
    now : Optional
        The reference time. Default: the current local time.

    Returns
    -------
    bool

    Raises
    ------
    InvalidDate
        If `date` cannot be interpreted as a date.

    """
    return to_timestamp(date).normalize() < _today(now)


def days_until_due(date, now=None) -> int:
    """The signed number of calendar days from today until the date.

    Both the date and ``now`` are truncated to midnight before taking the
    difference. Something due today is 0 days away, tomorrow is 1, and
    yesterday is -1.

    Raises
    ------
    InvalidDate
        If `date` cannot be interpreted as a date.

    """
    return int((to_timestamp(date).normalize() - _today(now)).days)


# display ------------------------------------------------------------------------------


def date_label(date, now=None) -> str:
    """A short human-readable label for a date relative to today.

    Returns ``"Today"`` or ``"Tomorrow"`` where they apply. Otherwise, if the
    date falls within the current week (Sunday through Saturday), the full
    name of the weekday is used, e.g. ``"Thursday"``. Anything else is
    labeled by month and day, e.g. ``"Oct 05"``.

    Raises
    ------
    InvalidDate
        If `date` cannot be interpreted as a date.

    """
    day = to_timestamp(date).normalize()
    today = _today(now)

    delta = (day - today).days
    if delta == 0:
        return "Today"
    if delta == 1:
        return "Tomorrow"

    week_start = _start_of_week(today)
    if week_start <= day < week_start + pd.Timedelta(days=7):
        return day.strftime("%A")

    return day.strftime("%b %d")


def format_date(date, fmt="%b %d") -> str:
    """Format a date using a :func:`~datetime.datetime.strftime` format string."""
    return to_timestamp(date).strftime(fmt)


def format_time(time) -> str:
    """Format a time of day on the 12-hour clock, e.g. ``"2:05 PM"``."""
    time = parse_time(time)
    hour = time.hour % 12 or 12
    suffix = "AM" if time.hour < 12 else "PM"
    return f"{hour}:{time.minute:02d} {suffix}"


@dataclasses.dataclass(frozen=True)
class WeekDay:
    """One day of the current week, as shown in a weekly calendar."""

    date: str
    label: str
    full_label: str
    day_number: int
    is_today: bool


def week_days(now=None) -> list:
    """The seven days of the current week, starting on Sunday.

    Returns
    -------
    list[WeekDay]

    """
    today = _today(now)
    start = _start_of_week(today)

    days = []
    for offset in range(7):
        day = start + pd.Timedelta(days=offset)
        days.append(
            WeekDay(
                date=day.strftime("%Y-%m-%d"),
                label=day.strftime("%a"),
                full_label=day.strftime("%A"),
                day_number=day.day,
                is_today=day == today,
            )
        )
    return days
