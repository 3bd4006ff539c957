# /tests/test_form_container_service.py

import pytest

from app.models.form_model import FormAction, FormTable
from app.models.principal_model import Principal, Role
from app.services.form_container_service import LessonScope, get_related_data, lesson_scope_for

TABLES_WITH_RULES = [
    FormTable.SUBJECT, FormTable.CLASS, FormTable.TEACHER, FormTable.STUDENT,
    FormTable.EXAM, FormTable.LESSON, FormTable.ANNOUNCEMENT, FormTable.EVENT,
    FormTable.ASSIGNMENT, FormTable.RESULT,
]


@pytest.mark.parametrize("table", list(FormTable))
def test_delete_action_fetches_nothing(table, mock_db_service):
    """Delete confirmations never need dropdown data."""
    related = get_related_data(table, FormAction.DELETE, mock_db_service, LessonScope(teacher_id="t1"))
    assert related == {}
    assert mock_db_service.method_calls == []


@pytest.mark.parametrize("table", [FormTable.PARENT, FormTable.ATTENDANCE])
def test_tables_without_rules_return_empty_mapping(table, mock_db_service):
    assert get_related_data(table, FormAction.CREATE, mock_db_service) == {}
    assert mock_db_service.method_calls == []


@pytest.mark.parametrize("table", TABLES_WITH_RULES)
def test_create_and_update_produce_the_same_relations(table, mock_db_service):
    mock_db_service.get_classes_full.return_value = []
    created = get_related_data(table, "create", mock_db_service)
    updated = get_related_data(table, "update", mock_db_service)
    assert created.keys() == updated.keys()
    assert created


def test_relation_names_per_table(mock_db_service):
    mock_db_service.get_classes_full.return_value = []
    expected = {
        FormTable.SUBJECT: {"teachers"},
        FormTable.CLASS: {"teachers", "grades"},
        FormTable.TEACHER: {"subjects"},
        FormTable.STUDENT: {"classes", "grades"},
        FormTable.EXAM: {"lessons", "classes"},
        FormTable.LESSON: {"subjects", "classes", "teachers"},
        FormTable.ANNOUNCEMENT: {"classes"},
        FormTable.EVENT: {"classes"},
        FormTable.ASSIGNMENT: {"lessons", "classes"},
        FormTable.RESULT: {"classes", "students", "exams", "assignments"},
    }
    for table, relations in expected.items():
        assert set(get_related_data(table, FormAction.CREATE, mock_db_service)) == relations


def test_lesson_scope_for_teacher_is_restricted(teacher_principal):
    scope = lesson_scope_for(teacher_principal)
    assert scope.teacher_id == "t1"
    assert scope.is_restricted


@pytest.mark.parametrize("role", [Role.ADMIN, Role.STUDENT, Role.PARENT, None])
def test_lesson_scope_for_other_roles_is_open(role):
    scope = lesson_scope_for(Principal(id="u1", role=role))
    assert scope.teacher_id is None
    assert not scope.is_restricted


def test_teacher_scope_is_passed_to_lesson_queries(mock_db_service, teacher_principal):
    scope = lesson_scope_for(teacher_principal)

    get_related_data(FormTable.EXAM, FormAction.CREATE, mock_db_service, scope)
    mock_db_service.get_lesson_options.assert_called_with(teacher_id="t1")

    get_related_data(FormTable.RESULT, FormAction.UPDATE, mock_db_service, scope)
    mock_db_service.get_exam_options.assert_called_with(teacher_id="t1")
    mock_db_service.get_assignment_options.assert_called_with(teacher_id="t1")


def test_unscoped_lesson_queries_for_admin(mock_db_service, admin_principal):
    scope = lesson_scope_for(admin_principal)
    get_related_data(FormTable.ASSIGNMENT, FormAction.CREATE, mock_db_service, scope)
    mock_db_service.get_lesson_options.assert_called_once_with(teacher_id=None)


def test_student_form_classes_carry_roster_counts(mock_db_service):
    mock_db_service.get_classes_full.return_value = [
        {"id": 1, "name": "1A", "capacity": 20, "supervisorId": "t1", "gradeId": 1},
        {"id": 2, "name": "2B", "capacity": 25, "supervisorId": None, "gradeId": 2},
    ]
    mock_db_service.get_student_options.return_value = [
        {"id": "s1", "name": "Ann", "surname": "Lee", "classId": 1},
        {"id": "s2", "name": "Bo", "surname": "Kim", "classId": 1},
    ]
    mock_db_service.get_grade_options.return_value = [{"id": 1, "level": 1}]

    related = get_related_data(FormTable.STUDENT, FormAction.CREATE, mock_db_service)

    counts = {c["id"]: c["_count"]["students"] for c in related["classes"]}
    assert counts == {1: 2, 2: 0}
    assert related["grades"] == [{"id": 1, "level": 1}]


def test_query_failure_propagates(mock_db_service):
    mock_db_service.get_teacher_options.side_effect = RuntimeError("connection lost")
    with pytest.raises(RuntimeError):
        get_related_data(FormTable.SUBJECT, FormAction.CREATE, mock_db_service)


def test_unknown_table_is_rejected(mock_db_service):
    with pytest.raises(ValueError):
        get_related_data("janitor", FormAction.CREATE, mock_db_service)
