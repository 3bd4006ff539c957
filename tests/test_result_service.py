# /tests/test_result_service.py

from types import SimpleNamespace

import pytest

from app.models.result_model import ResultSchema
from app.services import result_service


@pytest.fixture
def exam_payload():
    return ResultSchema(studentId="s1", examId=10, score=95)


def test_create_result_writes_one_row(mock_db_service, exam_payload):
    mock_db_service.add_result.return_value = SimpleNamespace(id=1)

    state = result_service.create_result(exam_payload, mock_db_service)

    assert state.success and not state.error
    mock_db_service.add_result.assert_called_once_with(
        {"score": 95, "student_id": "s1", "exam_id": 10, "assignment_id": None}
    )


def test_create_result_reports_persistence_errors(mocker, mock_db_service, exam_payload):
    mock_log = mocker.patch.object(result_service, "log")
    mock_db_service.add_result.side_effect = RuntimeError("unique violation")

    state = result_service.create_result(exam_payload, mock_db_service)

    assert not state.success
    assert state.error
    mock_log.exception.assert_called_once()


def test_delete_result_logs_the_traceback_on_failure(mocker, mock_db_service):
    mock_log = mocker.patch.object(result_service, "log")
    mock_db_service.delete_result.side_effect = RuntimeError("connection reset")

    assert result_service.delete_result(3, mock_db_service).error
    mock_log.exception.assert_called_once_with("Failed to delete result %s", 3)


def test_update_result_clears_the_replaced_assessment(mock_db_service):
    """Switching a result from an exam to an assignment must null the exam column."""
    payload = ResultSchema(id=3, studentId="s1", assignmentId=20, score=70)
    mock_db_service.update_result.return_value = SimpleNamespace(id=3)

    state = result_service.update_result(payload, mock_db_service)

    assert state.success
    mock_db_service.update_result.assert_called_once_with(
        3, {"score": 70, "student_id": "s1", "exam_id": None, "assignment_id": 20}
    )


def test_update_result_without_id_fails(mock_db_service, exam_payload):
    state = result_service.update_result(exam_payload, mock_db_service)
    assert state.error
    mock_db_service.update_result.assert_not_called()


def test_update_missing_result_fails(mock_db_service):
    mock_db_service.update_result.return_value = None
    state = result_service.update_result(ResultSchema(id=404, studentId="s1", examId=1, score=1), mock_db_service)
    assert state.error


def test_delete_result(mock_db_service):
    mock_db_service.delete_result.return_value = True
    assert result_service.delete_result(3, mock_db_service).success

    mock_db_service.delete_result.return_value = False
    assert result_service.delete_result(4, mock_db_service).error


@pytest.mark.parametrize("payload", [
    {"studentId": "s1", "score": 1},
    {"studentId": "s1", "score": 1, "examId": 1, "assignmentId": 2},
    {"studentId": "", "score": 1, "examId": 1},
    {"studentId": "s1", "score": -1, "examId": 1},
])
def test_schema_rejects_invalid_payloads(payload):
    with pytest.raises(ValueError):
        ResultSchema.model_validate(payload)
