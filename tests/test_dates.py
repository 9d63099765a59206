import datetime

import pandas as pd
import pytest

import studyplan
from studyplan import dates

# a wednesday afternoon. the week runs from sunday 2024-10-13 to saturday 2024-10-19
NOW = pd.Timestamp("2024-10-16 15:30")


# is_overdue ---------------------------------------------------------------------------


def test_today_is_never_overdue():
    assert not dates.is_overdue("2024-10-16", now=NOW)
    assert not dates.is_overdue("2024-10-16 00:00:01", now="2024-10-16 23:59")


def test_yesterday_is_overdue():
    assert dates.is_overdue("2024-10-15", now=NOW)
    assert dates.is_overdue(datetime.date(2024, 10, 15), now=NOW)


def test_future_is_not_overdue():
    assert not dates.is_overdue("2024-10-17", now=NOW)


def test_timezone_is_dropped_in_favor_of_the_wall_clock_date():
    due = pd.Timestamp("2024-10-15 23:00", tz="UTC")
    assert dates.is_overdue(due, now=NOW)


def test_is_overdue_defaults_to_the_current_time():
    yesterday = pd.Timestamp.now().normalize() - pd.Timedelta(days=1)
    assert dates.is_overdue(yesterday)
    assert not dates.is_overdue(pd.Timestamp.now())


# days_until_due -----------------------------------------------------------------------


def test_days_until_due():
    assert dates.days_until_due("2024-10-16", now=NOW) == 0
    assert dates.days_until_due("2024-10-17", now=NOW) == 1
    assert dates.days_until_due("2024-10-15", now=NOW) == -1
    assert dates.days_until_due(datetime.date(2024, 10, 26), now=NOW) == 10


def test_days_until_due_ignores_time_of_day():
    # given
    late_tonight = "2024-10-16 23:59"
    early_tomorrow = "2024-10-17 00:01"

    # when / then
    assert dates.days_until_due(late_tonight, now="2024-10-16 00:01") == 0
    assert dates.days_until_due(early_tomorrow, now="2024-10-16 23:59") == 1


def test_days_until_due_returns_an_int():
    assert isinstance(dates.days_until_due("2024-11-01", now=NOW), int)


# date_label ---------------------------------------------------------------------------


def test_date_label_today_and_tomorrow():
    assert dates.date_label("2024-10-16", now=NOW) == "Today"
    assert dates.date_label("2024-10-17 08:00", now=NOW) == "Tomorrow"


def test_date_label_uses_weekday_within_the_current_week():
    assert dates.date_label("2024-10-18", now=NOW) == "Friday"
    assert dates.date_label("2024-10-19", now=NOW) == "Saturday"
    assert dates.date_label("2024-10-13", now=NOW) == "Sunday"


def test_date_label_uses_month_and_day_outside_the_current_week():
    assert dates.date_label("2024-10-20", now=NOW) == "Oct 20"
    assert dates.date_label("2024-10-12", now=NOW) == "Oct 12"
    assert dates.date_label("2024-10-05", now=NOW) == "Oct 05"


def test_date_label_tomorrow_takes_precedence_across_the_week_boundary():
    saturday = pd.Timestamp("2024-10-19 12:00")
    assert dates.date_label("2024-10-20", now=saturday) == "Tomorrow"


# formatting ---------------------------------------------------------------------------


def test_format_date():
    assert dates.format_date(datetime.date(2024, 10, 5)) == "Oct 05"
    assert dates.format_date("2024-10-05", fmt="%Y/%m/%d") == "2024/10/05"


def test_format_time():
    assert dates.format_time("14:05") == "2:05 PM"
    assert dates.format_time("00:30") == "12:30 AM"
    assert dates.format_time("12:00") == "12:00 PM"
    assert dates.format_time(datetime.time(9, 0)) == "9:00 AM"


# week_days ----------------------------------------------------------------------------


def test_week_days_starts_on_sunday():
    # when
    days = dates.week_days(now=NOW)

    # then
    assert len(days) == 7
    assert days[0].date == "2024-10-13"
    assert days[0].label == "Sun"
    assert days[0].full_label == "Sunday"
    assert days[-1].date == "2024-10-19"
    assert [d.day_number for d in days] == list(range(13, 20))


def test_week_days_marks_today():
    days = dates.week_days(now=NOW)
    assert [d.is_today for d in days] == [False, False, False, True, False, False, False]


def test_day_of_week_counts_from_sunday():
    assert dates.day_of_week("2024-10-13") == 0
    assert dates.day_of_week("2024-10-14") == 1
    assert dates.day_of_week("2024-10-19") == 6


# errors -------------------------------------------------------------------------------


@pytest.mark.parametrize("value", ["not a date", "2024-13-45", None, "", [1, 2]])
def test_malformed_dates_raise_invalid_date(value):
    with pytest.raises(studyplan.InvalidDate):
        dates.is_overdue(value, now=NOW)

    with pytest.raises(studyplan.InvalidDate):
        dates.days_until_due(value, now=NOW)

    with pytest.raises(studyplan.InvalidDate):
        dates.date_label(value, now=NOW)


def test_invalid_date_is_a_value_error():
    with pytest.raises(ValueError):
        dates.format_date("yesterday-ish")


def test_malformed_times_raise_invalid_date():
    with pytest.raises(studyplan.InvalidDate):
        dates.format_time("25:99")

    with pytest.raises(studyplan.InvalidDate):
        dates.format_time(930)


def test_a_time_of_day_is_not_a_date():
    with pytest.raises(studyplan.InvalidDate):
        dates.is_overdue(datetime.time(9, 30), now=NOW)
