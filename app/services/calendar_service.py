# /app/services/calendar_service.py

"""
Calendar helpers.

`EventCalendar` bridges a date picker to the page URL: picking a single day
pushes `?date=YYYY-MM-DD` so the server-rendered event list can follow it.
Range selections are not bridged. The read side normalises that query
parameter, lists the events of the chosen day and lays out the weekly
lesson schedule on the current week.
"""

from datetime import date, datetime, time, timedelta
from typing import Callable, List, Optional, Sequence, Tuple, Union

from ..core.app_logger import get_logger
from ..db.models.school_models import Day
from ..models.calendar_model import EventItem, ScheduleEntry, ScheduleOwner
from .database_service import DatabaseService

log = get_logger("services.calendar")

DATE_PARAM = "date"

DateValue = Union[date, datetime, None]
CalendarValue = Union[DateValue, Tuple[DateValue, DateValue]]


# --- Date-selection bridge ---

def date_query_for(value: CalendarValue) -> Optional[str]:
    """
    The query string to push for a calendar value, or None when nothing should
    be pushed (no selection, or a range given as a pair).
    """
    if isinstance(value, datetime):
        value = value.date()
    if isinstance(value, date):
        return f"?{DATE_PARAM}={value.isoformat()}"
    return None


class EventCalendar:
    """
    Holds the picker's current value and reports single-day selections to
    `navigate`. Navigation is fire-and-forget: the return value is ignored.
    """

    def __init__(self, navigate: Callable[[str], object], today: Optional[date] = None):
        self.navigate = navigate
        self.value: CalendarValue = today or date.today()

    def _bridge(self) -> None:
        query = date_query_for(self.value)
        if query is not None:
            self.navigate(query)

    def mount(self) -> None:
        """Reports the initial value, as the picker does when first shown."""
        self._bridge()

    def change(self, value: CalendarValue) -> None:
        self.value = value
        self._bridge()


# --- Event list ---

def normalize_date_param(value: Union[str, Sequence[str], None]) -> Optional[str]:
    """A repeated `date` parameter arrives as a list; only the first one counts."""
    if value is None or isinstance(value, str):
        return value
    return value[0] if len(value) else None


def parse_date_param(value: Optional[str], today: Optional[date] = None) -> date:
    """
    Parses the `date` parameter. A missing value means today; a malformed one
    raises ValueError.
    """
    if not value:
        return today or date.today()
    try:
        return date.fromisoformat(value.strip()[:10])
    except ValueError:
        raise ValueError(f"Invalid date parameter: {value!r}. Expected YYYY-MM-DD.")


def get_events_for_date(day: date, db: DatabaseService) -> List[EventItem]:
    start = datetime.combine(day, time.min)
    end = start + timedelta(days=1)
    events = db.get_events_between(start, end)
    return [
        EventItem(
            id=e.id,
            title=e.title,
            description=e.description,
            startTime=e.start_time,
            endTime=e.end_time,
            classId=e.class_id,
        )
        for e in events
    ]


# --- Weekly schedule ---

_DAY_OFFSETS = {day: index for index, day in enumerate(Day)}


def _start_of_week(today: date) -> date:
    return today - timedelta(days=today.weekday())


def adjust_schedule_to_current_week(lessons: List, today: Optional[date] = None) -> List[ScheduleEntry]:
    """
    Moves each lesson onto the same weekday of the current week, keeping its
    start and end time of day. Weekend dates roll forward to the next week.
    """
    today = today or date.today()
    if today.weekday() >= 5:
        today = today + timedelta(days=7 - today.weekday())
    monday = _start_of_week(today)

    schedule = []
    for lesson in lessons:
        weekday_offset = _DAY_OFFSETS.get(lesson.day, lesson.start_time.weekday())
        lesson_day = monday + timedelta(days=weekday_offset)
        schedule.append(ScheduleEntry(
            title=lesson.name,
            start=datetime.combine(lesson_day, lesson.start_time.time()),
            end=datetime.combine(lesson_day, lesson.end_time.time()),
        ))
    return sorted(schedule, key=lambda entry: entry.start)


def get_schedule(
    owner: Union[ScheduleOwner, str],
    owner_id: Union[int, str],
    db: DatabaseService,
    today: Optional[date] = None,
) -> List[ScheduleEntry]:
    """Lessons of a teacher or a class, laid out on the current week."""
    owner = ScheduleOwner(owner)
    if owner == ScheduleOwner.TEACHER:
        lessons = db.get_lessons_for_teacher(str(owner_id))
    else:
        lessons = db.get_lessons_for_class(int(owner_id))
    log.debug("Building schedule for %s=%s from %d lessons", owner.value, owner_id, len(lessons))
    return adjust_schedule_to_current_week(lessons, today=today)
