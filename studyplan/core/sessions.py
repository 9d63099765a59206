"""Recurring weekly class meetings."""

import dataclasses

from ..dates import parse_time

DAY_NAMES = (
    "Sunday",
    "Monday",
    "Tuesday",
    "Wednesday",
    "Thursday",
    "Friday",
    "Saturday",
)


@dataclasses.dataclass(frozen=True)
class ClassSession:
    """A class that meets once a week at a fixed time.

    Attributes
    ----------
    id : int
        Identifier, assigned by the store.
    course_id : int
    day_of_week : int
        0 is Sunday, 6 is Saturday.
    start_time : str
        Normalized to ``"HH:MM"``, so that sessions sort by start time as
        strings.
    end_time : str
        Normalized to ``"HH:MM"``. Must come after the start time.
    location : str
    type : str
        E.g., ``"Lecture"``, ``"Lab"``, ``"Discussion"``.

    Raises
    ------
    ValueError
        If the day is out of range or the session does not end after it
        starts.
    InvalidDate
        If a time cannot be interpreted.

    """

    id: int
    course_id: int
    day_of_week: int
    start_time: str
    end_time: str
    location: str = ""
    type: str = "Lecture"

    def __post_init__(self):
        if self.day_of_week not in range(7):
            raise ValueError(
                f"Day of week must be between 0 (Sunday) and 6, not {self.day_of_week!r}."
            )

        start = parse_time(self.start_time)
        end = parse_time(self.end_time)
        if end <= start:
            raise ValueError(f"Session ends ({end}) before it starts ({start}).")

        object.__setattr__(self, "start_time", start.strftime("%H:%M"))
        object.__setattr__(self, "end_time", end.strftime("%H:%M"))

    @property
    def day_name(self) -> str:
        return DAY_NAMES[self.day_of_week]

    @property
    def start_hour(self) -> int:
        return parse_time(self.start_time).hour

    @property
    def end_hour(self) -> int:
        return parse_time(self.end_time).hour

    def occupies(self, day_of_week: int, hour: int) -> bool:
        """Whether the session is in progress during the given hour slot.

        A session always occupies the slot it starts in, even if it ends
        within the same hour.

        """
        last = max(self.end_hour, self.start_hour + 1)
        return self.day_of_week == day_of_week and self.start_hour <= hour < last
