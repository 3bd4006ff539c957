# /tests/test_calendar_service.py

from datetime import date, datetime
from types import SimpleNamespace

import pytest
from unittest.mock import MagicMock

from app.db.models.school_models import Day
from app.models.calendar_model import ScheduleOwner
from app.services import calendar_service
from app.services.calendar_service import EventCalendar


# --- Date-selection bridge ---

def test_single_date_pushes_the_iso_day():
    assert calendar_service.date_query_for(date(2024, 3, 5)) == "?date=2024-03-05"


def test_datetime_uses_its_own_calendar_day():
    late_evening = datetime(2024, 3, 5, 23, 30)
    assert calendar_service.date_query_for(late_evening) == "?date=2024-03-05"


def test_range_and_empty_selections_push_nothing():
    assert calendar_service.date_query_for((date(2024, 3, 5), date(2024, 3, 9))) is None
    assert calendar_service.date_query_for(None) is None


def test_event_calendar_bridges_initial_and_single_selections():
    navigate = MagicMock()
    calendar = EventCalendar(navigate, today=date(2024, 3, 1))

    calendar.mount()
    calendar.change(date(2024, 3, 7))
    calendar.change((date(2024, 3, 7), date(2024, 3, 8)))

    assert [c.args[0] for c in navigate.call_args_list] == ["?date=2024-03-01", "?date=2024-03-07"]
    assert calendar.value == (date(2024, 3, 7), date(2024, 3, 8))


# --- Query parameter handling ---

@pytest.mark.parametrize("raw, expected", [
    (None, None),
    ("2024-05-01", "2024-05-01"),
    (["2024-05-01", "2024-06-01"], "2024-05-01"),
    ([], None),
])
def test_normalize_date_param(raw, expected):
    assert calendar_service.normalize_date_param(raw) == expected


def test_parse_date_param_defaults_to_today():
    assert calendar_service.parse_date_param(None, today=date(2024, 1, 2)) == date(2024, 1, 2)


def test_parse_date_param_rejects_garbage():
    with pytest.raises(ValueError):
        calendar_service.parse_date_param("tomorrow")


def test_events_are_fetched_for_the_whole_day(mock_db_service):
    mock_db_service.get_events_between.return_value = [
        SimpleNamespace(
            id=1, title="Sports day", description=None,
            start_time=datetime(2024, 5, 1, 9), end_time=datetime(2024, 5, 1, 15), class_id=None,
        )
    ]

    events = calendar_service.get_events_for_date(date(2024, 5, 1), mock_db_service)

    mock_db_service.get_events_between.assert_called_once_with(datetime(2024, 5, 1), datetime(2024, 5, 2))
    assert events[0].title == "Sports day"


# --- Weekly schedule ---

def _lesson(name, day, start, end):
    return SimpleNamespace(name=name, day=day, start_time=start, end_time=end)


def test_schedule_moves_lessons_onto_the_current_week():
    lessons = [
        _lesson("Math", Day.WEDNESDAY, datetime(2023, 1, 4, 8, 0), datetime(2023, 1, 4, 9, 0)),
        _lesson("Art", Day.MONDAY, datetime(2023, 1, 2, 10, 0), datetime(2023, 1, 2, 11, 30)),
    ]
    # Thursday 2024-05-16 -> week starting Monday 2024-05-13.
    schedule = calendar_service.adjust_schedule_to_current_week(lessons, today=date(2024, 5, 16))

    assert [(e.title, e.start, e.end) for e in schedule] == [
        ("Art", datetime(2024, 5, 13, 10, 0), datetime(2024, 5, 13, 11, 30)),
        ("Math", datetime(2024, 5, 15, 8, 0), datetime(2024, 5, 15, 9, 0)),
    ]


def test_schedule_on_a_weekend_shows_the_coming_week():
    lessons = [_lesson("Math", Day.FRIDAY, datetime(2023, 1, 6, 8), datetime(2023, 1, 6, 9))]
    schedule = calendar_service.adjust_schedule_to_current_week(lessons, today=date(2024, 5, 18))
    assert schedule[0].start == datetime(2024, 5, 24, 8)


def test_get_schedule_picks_the_owner_query(mock_db_service):
    mock_db_service.get_lessons_for_teacher.return_value = []
    mock_db_service.get_lessons_for_class.return_value = []

    calendar_service.get_schedule(ScheduleOwner.TEACHER, "t1", mock_db_service)
    calendar_service.get_schedule("classId", "3", mock_db_service)

    mock_db_service.get_lessons_for_teacher.assert_called_once_with("t1")
    mock_db_service.get_lessons_for_class.assert_called_once_with(3)
