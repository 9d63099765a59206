import pandas as pd
import pytest

import studyplan
from studyplan import ClassSession, schedule

SESSIONS = [
    ClassSession(1, 1, 1, "09:00", "10:30", location="Hall B"),
    ClassSession(2, 1, 3, "14:00", "16:00", type="Lab"),
    ClassSession(3, 2, 1, "08:00", "08:50"),
    ClassSession(4, 3, 5, "11:00", "12:00"),
]


# ClassSession -------------------------------------------------------------------------


def test_session_times_are_normalized():
    session = ClassSession(1, 1, 2, "09:05:00", "10:00")
    assert session.start_time == "09:05"
    assert session.end_time == "10:00"


def test_session_day_name():
    assert SESSIONS[0].day_name == "Monday"
    assert ClassSession(9, 1, 0, "09:00", "10:00").day_name == "Sunday"


def test_session_must_end_after_it_starts():
    with pytest.raises(ValueError):
        ClassSession(1, 1, 1, "10:00", "09:00")

    with pytest.raises(ValueError):
        ClassSession(1, 1, 1, "10:00", "10:00")


def test_session_day_must_be_in_range():
    with pytest.raises(ValueError):
        ClassSession(1, 1, 7, "09:00", "10:00")


def test_session_with_malformed_time_raises_invalid_date():
    with pytest.raises(studyplan.InvalidDate):
        ClassSession(1, 1, 1, "nine", "10:00")


# queries ------------------------------------------------------------------------------


def test_sessions_on_are_sorted_by_start_time():
    assert [s.id for s in schedule.sessions_on(SESSIONS, 1)] == [3, 1]
    assert schedule.sessions_on(SESSIONS, 6) == []


def test_todays_sessions():
    monday = pd.Timestamp("2024-10-14 07:00")
    sunday = pd.Timestamp("2024-10-13 07:00")

    assert [s.id for s in schedule.todays_sessions(SESSIONS, now=monday)] == [3, 1]
    assert schedule.todays_sessions(SESSIONS, now=sunday) == []


def test_session_at_covers_start_hour_up_to_end_hour():
    assert schedule.session_at(SESSIONS, 3, 14).id == 2
    assert schedule.session_at(SESSIONS, 3, 15).id == 2
    assert schedule.session_at(SESSIONS, 3, 16) is None
    assert schedule.session_at(SESSIONS, 3, 13) is None


def test_session_within_a_single_hour_occupies_its_starting_slot():
    # given
    sessions = [ClassSession(1, 1, 1, "10:00", "10:45")]

    # then
    assert schedule.session_at(sessions, 1, 10).id == 1
    assert schedule.session_at(sessions, 1, 11) is None


def test_session_ending_mid_hour_does_not_occupy_its_ending_slot():
    sessions = [ClassSession(1, 1, 1, "09:00", "10:30")]
    assert schedule.session_at(sessions, 1, 9).id == 1
    assert schedule.session_at(sessions, 1, 10) is None


def test_session_at_returns_none_on_other_days():
    assert schedule.session_at(SESSIONS, 2, 14) is None
