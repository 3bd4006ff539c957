# /app/services/form_container_service.py

"""
This service prefetches the related lookup rows a form modal needs for its
dropdowns. Given a table and an action type it issues the smallest set of
read queries for that form and returns them keyed by relation name.

Role scoping is passed in explicitly as a `LessonScope` rather than read from
the session, so the prefetch can be exercised without an identity provider.
"""

from dataclasses import dataclass
from typing import Any, Callable, Dict, List, Optional, Union

import pandas as pd

from ..core.app_logger import get_logger
from ..models.form_model import FormAction, FormTable
from ..models.principal_model import Principal, Role
from .database_service import DatabaseService

log = get_logger("services.form_container")

RelatedData = Dict[str, List[Dict[str, Any]]]


@dataclass(frozen=True)
class LessonScope:
    """
    Which lessons a caller may see. `teacher_id=None` means every lesson;
    otherwise only the lessons that teacher teaches (and the exams and
    assignments set in them).
    """
    teacher_id: Optional[str] = None

    @property
    def is_restricted(self) -> bool:
        return self.teacher_id is not None


def lesson_scope_for(principal: Optional[Principal]) -> LessonScope:
    """Teachers are limited to their own lessons; every other role is not."""
    if principal is not None and principal.role == Role.TEACHER:
        return LessonScope(teacher_id=principal.id)
    return LessonScope()


# --- Per-table specialists ---

def _subject_data(db: DatabaseService, scope: LessonScope) -> RelatedData:
    return {"teachers": db.get_teacher_options()}


def _class_data(db: DatabaseService, scope: LessonScope) -> RelatedData:
    return {"teachers": db.get_teacher_options(), "grades": db.get_grade_options()}


def _teacher_data(db: DatabaseService, scope: LessonScope) -> RelatedData:
    return {"subjects": db.get_subject_options()}


def _classes_with_student_counts(db: DatabaseService) -> List[Dict]:
    """Every class row, annotated with `_count.students` like an ORM include would."""
    classes = db.get_classes_full()
    if not classes:
        return []

    students_df = pd.DataFrame(db.get_student_options())
    student_counts = {}
    if not students_df.empty and "classId" in students_df.columns:
        student_counts = students_df.groupby("classId").size().to_dict()

    return [
        {**cls, "_count": {"students": int(student_counts.get(cls["id"], 0))}}
        for cls in classes
    ]


def _student_data(db: DatabaseService, scope: LessonScope) -> RelatedData:
    return {"classes": _classes_with_student_counts(db), "grades": db.get_grade_options()}


def _lesson_scoped_data(db: DatabaseService, scope: LessonScope) -> RelatedData:
    # Shared by the exam and assignment forms: both pick a lesson.
    return {
        "lessons": db.get_lesson_options(teacher_id=scope.teacher_id),
        "classes": db.get_class_options(),
    }


def _lesson_data(db: DatabaseService, scope: LessonScope) -> RelatedData:
    return {
        "subjects": db.get_subject_options(),
        "classes": db.get_class_options(),
        "teachers": db.get_teacher_options(),
    }


def _class_only_data(db: DatabaseService, scope: LessonScope) -> RelatedData:
    return {"classes": db.get_class_options()}


def _result_data(db: DatabaseService, scope: LessonScope) -> RelatedData:
    return {
        "classes": db.get_class_options(),
        "students": db.get_student_options(),
        "exams": db.get_exam_options(teacher_id=scope.teacher_id),
        "assignments": db.get_assignment_options(teacher_id=scope.teacher_id),
    }


_PREFETCHERS: Dict[FormTable, Callable[[DatabaseService, LessonScope], RelatedData]] = {
    FormTable.SUBJECT: _subject_data,
    FormTable.CLASS: _class_data,
    FormTable.TEACHER: _teacher_data,
    FormTable.STUDENT: _student_data,
    FormTable.EXAM: _lesson_scoped_data,
    FormTable.LESSON: _lesson_data,
    FormTable.ANNOUNCEMENT: _class_only_data,
    FormTable.EVENT: _class_only_data,
    FormTable.ASSIGNMENT: _lesson_scoped_data,
    FormTable.RESULT: _result_data,
}


# --- Core Public Function ---

def get_related_data(
    table: Union[FormTable, str],
    action_type: Union[FormAction, str],
    db: DatabaseService,
    scope: Optional[LessonScope] = None,
) -> RelatedData:
    """
    Returns the lookup rows for one form, keyed by relation name.

    Delete confirmations and tables without a rule (parent, attendance) get
    an empty mapping and issue no queries. Query errors are not caught: they
    surface as a failure of the enclosing request.
    """
    table = FormTable(table)
    action_type = FormAction(action_type)
    scope = scope or LessonScope()

    if action_type == FormAction.DELETE:
        return {}

    prefetch = _PREFETCHERS.get(table)
    if prefetch is None:
        return {}

    log.debug("Prefetching related data for %s/%s (teacher scope: %s)", table.value, action_type.value, scope.teacher_id)
    return prefetch(db, scope)
