# /app/services/result_service.py

"""
Server actions for results. Each one performs a single write and reports a
plain `ActionState`; persistence errors are logged and turned into
`error=True` so the form can show its generic failure message.
"""

from typing import Dict

from ..core.app_logger import get_logger
from ..models.result_model import ActionState, ResultSchema
from .database_service import DatabaseService

log = get_logger("services.result")


def _to_record(payload: ResultSchema) -> Dict:
    """Maps the form payload onto result columns. Both assessment ids are always written."""
    assessment = payload.assessment
    return {
        "score": payload.score,
        "student_id": payload.studentId,
        "exam_id": assessment.id if assessment.kind == "exam" else None,
        "assignment_id": assessment.id if assessment.kind == "assignment" else None,
    }


def create_result(payload: ResultSchema, db: DatabaseService) -> ActionState:
    try:
        new_result = db.add_result(_to_record(payload))
        log.info("Created result %s for student %s", new_result.id, payload.studentId)
        return ActionState(success=True, error=False)
    except Exception:
        log.exception("Failed to create result for student %s", payload.studentId)
        return ActionState(success=False, error=True)


def update_result(payload: ResultSchema, db: DatabaseService) -> ActionState:
    if payload.id is None:
        log.warning("Update result called without an id")
        return ActionState(success=False, error=True)
    try:
        updated = db.update_result(payload.id, _to_record(payload))
        if updated is None:
            log.warning("Result %s not found for update", payload.id)
            return ActionState(success=False, error=True)
        log.info("Updated result %s", payload.id)
        return ActionState(success=True, error=False)
    except Exception:
        log.exception("Failed to update result %s", payload.id)
        return ActionState(success=False, error=True)


def delete_result(result_id: int, db: DatabaseService) -> ActionState:
    try:
        was_deleted = db.delete_result(result_id)
    except Exception:
        log.exception("Failed to delete result %s", result_id)
        return ActionState(success=False, error=True)
    if not was_deleted:
        log.warning("Result %s not found for delete", result_id)
        return ActionState(success=False, error=True)
    log.info("Deleted result %s", result_id)
    return ActionState(success=True, error=False)
