# /app/services/database_service.py

from datetime import datetime
from typing import List, Dict, Optional, Generator
from sqlalchemy.orm import Session
from fastapi import Depends

# --- Core Database Setup ---
from app.db.database import get_db

# --- Repository Imports ---
from .database_helpers.school_repository_sql import SchoolRepositorySQL


class DatabaseService:
    def __init__(self, db_session: Session):
        """
        Initializes the DatabaseService on top of a request-scoped session.
        Services only ever talk to this facade, never to the repository.
        """
        if db_session is None:
            raise ValueError("A database session is required.")
        self.school_repo = SchoolRepositorySQL(db_session)

    # --- LOOKUP PROJECTIONS (DELEGATED) ---
    def get_teacher_options(self) -> List[Dict]: return self.school_repo.get_teacher_options()
    def get_grade_options(self) -> List[Dict]: return self.school_repo.get_grade_options()
    def get_subject_options(self) -> List[Dict]: return self.school_repo.get_subject_options()
    def get_class_options(self) -> List[Dict]: return self.school_repo.get_class_options()
    def get_classes_full(self) -> List[Dict]: return self.school_repo.get_classes_full()
    def get_student_options(self) -> List[Dict]: return self.school_repo.get_student_options()
    def get_lesson_options(self, teacher_id: Optional[str] = None) -> List[Dict]: return self.school_repo.get_lesson_options(teacher_id=teacher_id)
    def get_exam_options(self, teacher_id: Optional[str] = None) -> List[Dict]: return self.school_repo.get_exam_options(teacher_id=teacher_id)
    def get_assignment_options(self, teacher_id: Optional[str] = None) -> List[Dict]: return self.school_repo.get_assignment_options(teacher_id=teacher_id)

    # --- RESULT METHODS (DELEGATED) ---
    def add_result(self, result_record: Dict): return self.school_repo.add_result(result_record)
    def update_result(self, result_id: int, result_update_data: Dict): return self.school_repo.update_result(result_id, result_update_data)
    def delete_result(self, result_id: int) -> bool: return self.school_repo.delete_result(result_id)

    # --- PAGE & CALENDAR METHODS (DELEGATED) ---
    def get_classes_by_student_email(self, email: str) -> List: return self.school_repo.get_classes_by_student_email(email)
    def get_lessons_for_teacher(self, teacher_id: str) -> List: return self.school_repo.get_lessons_for_teacher(teacher_id)
    def get_lessons_for_class(self, class_id: int) -> List: return self.school_repo.get_lessons_for_class(class_id)
    def get_events_between(self, start: datetime, end: datetime) -> List: return self.school_repo.get_events_between(start, end)
    def get_latest_announcements(self, class_ids: Optional[List[int]], limit: int) -> List: return self.school_repo.get_latest_announcements(class_ids, limit)
    def get_class_ids_for_teacher(self, teacher_id: str) -> List[int]: return self.school_repo.get_class_ids_for_teacher(teacher_id)
    def get_class_ids_for_student(self, student_id: str) -> List[int]: return self.school_repo.get_class_ids_for_student(student_id)
    def get_class_ids_for_parent(self, parent_id: str) -> List[int]: return self.school_repo.get_class_ids_for_parent(parent_id)


# --- DEPENDENCY PROVIDER ---
def get_db_service(db: Session = Depends(get_db)) -> Generator[DatabaseService, None, None]:
    """
    FastAPI dependency that provides a DatabaseService bound to the request's
    session.
    """
    yield DatabaseService(db_session=db)
