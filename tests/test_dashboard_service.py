# /tests/test_dashboard_service.py

from datetime import date, datetime
from types import SimpleNamespace

import pytest

from app.db.models.school_models import Day
from app.models.calendar_model import ScheduleOwner
from app.models.principal_model import Principal, Role
from app.services import dashboard_service


@pytest.fixture
def announcement_rows():
    return [
        SimpleNamespace(id=1, title="Trip", description="Zoo", date=datetime(2024, 5, 2), class_id=1),
        SimpleNamespace(id=2, title="Holiday", description=None, date=datetime(2024, 5, 1), class_id=None),
    ]


def test_student_page_resolves_class_and_schedule(mock_db_service, announcement_rows):
    mock_db_service.get_classes_by_student_email.return_value = [SimpleNamespace(id=1, name="1A")]
    mock_db_service.get_lessons_for_class.return_value = [
        SimpleNamespace(name="Math", day=Day.MONDAY, start_time=datetime(2023, 1, 2, 8), end_time=datetime(2023, 1, 2, 9)),
    ]
    mock_db_service.get_class_ids_for_student.return_value = [1]
    mock_db_service.get_latest_announcements.return_value = announcement_rows
    principal = Principal(id="s1", email="ann@school.test", role=Role.STUDENT)

    page = dashboard_service.get_student_page(principal, mock_db_service, today=date(2024, 5, 15))

    assert page.classId == 1
    assert page.className == "1A"
    assert page.schedule[0].start == datetime(2024, 5, 13, 8)
    assert [a.id for a in page.announcements] == [1, 2]
    mock_db_service.get_classes_by_student_email.assert_called_once_with("ann@school.test")


def test_student_page_without_email_has_no_class(mock_db_service):
    mock_db_service.get_latest_announcements.return_value = []
    mock_db_service.get_class_ids_for_student.return_value = []
    principal = Principal(id="s1", role=Role.STUDENT)

    page = dashboard_service.get_student_page(principal, mock_db_service)

    assert page.classId is None and page.className is None
    assert page.schedule == []
    mock_db_service.get_classes_by_student_email.assert_not_called()


def test_student_page_with_unknown_email(mock_db_service):
    mock_db_service.get_classes_by_student_email.return_value = []
    mock_db_service.get_latest_announcements.return_value = []
    mock_db_service.get_class_ids_for_student.return_value = []

    page = dashboard_service.get_student_page(Principal(id="x", email="nobody@school.test", role=Role.STUDENT), mock_db_service)

    assert page.classId is None
    mock_db_service.get_lessons_for_class.assert_not_called()


@pytest.mark.parametrize("role, lookup, expected", [
    (Role.TEACHER, "get_class_ids_for_teacher", [3]),
    (Role.STUDENT, "get_class_ids_for_student", [3]),
    (Role.PARENT, "get_class_ids_for_parent", [3]),
])
def test_announcements_are_scoped_by_role(mock_db_service, role, lookup, expected):
    getattr(mock_db_service, lookup).return_value = [3]
    mock_db_service.get_latest_announcements.return_value = []

    dashboard_service.get_announcements(Principal(id="u1", role=role), mock_db_service, limit=3)

    getattr(mock_db_service, lookup).assert_called_once_with("u1")
    mock_db_service.get_latest_announcements.assert_called_once_with(expected, 3)


def test_admin_sees_every_announcement(mock_db_service):
    mock_db_service.get_latest_announcements.return_value = []
    dashboard_service.get_announcements(Principal(id="a1", role=Role.ADMIN), mock_db_service, limit=5)
    mock_db_service.get_latest_announcements.assert_called_once_with(None, 5)


def test_principal_without_role_only_sees_school_wide(mock_db_service):
    mock_db_service.get_latest_announcements.return_value = []
    dashboard_service.get_announcements(Principal(id="u1"), mock_db_service, limit=3)
    mock_db_service.get_latest_announcements.assert_called_once_with([], 3)


def test_student_page_asks_for_the_class_schedule(mocker, mock_db_service):
    mock_get_schedule = mocker.patch("app.services.calendar_service.get_schedule", return_value=[])
    mock_db_service.get_classes_by_student_email.return_value = [SimpleNamespace(id=4, name="3C")]
    mock_db_service.get_class_ids_for_student.return_value = [4]
    mock_db_service.get_latest_announcements.return_value = []
    today = date(2024, 5, 15)

    page = dashboard_service.get_student_page(Principal(id="s9", email="dee@school.test", role=Role.STUDENT), mock_db_service, today=today)

    assert page.className == "3C"
    mock_get_schedule.assert_called_once_with(ScheduleOwner.CLASS, 4, mock_db_service, today=today)
