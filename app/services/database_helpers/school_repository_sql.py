# /app/services/database_helpers/school_repository_sql.py

"""
This module contains the raw SQLAlchemy queries for the school tables. It is
the only place that talks to the database.

Lookup queries return plain dictionaries holding just the projected columns,
keyed the way the forms expect them (camelCase). Queries that feed read views
return the ORM objects themselves.
"""

from datetime import datetime
from typing import List, Dict, Optional

from sqlalchemy import or_
from sqlalchemy.orm import Session

from app.db.models.school_models import (
    Grade, Teacher, Subject, Class, Student, Lesson, Exam, Assignment, Result,
    Event, Announcement,
)


class SchoolRepositorySQL:
    def __init__(self, db_session: Session):
        self.db = db_session

    # --- Lookup projections for form dropdowns ---

    def get_teacher_options(self) -> List[Dict]:
        rows = self.db.query(Teacher.id, Teacher.name, Teacher.surname).all()
        return [{"id": r.id, "name": r.name, "surname": r.surname} for r in rows]

    def get_grade_options(self) -> List[Dict]:
        rows = self.db.query(Grade.id, Grade.level).all()
        return [{"id": r.id, "level": r.level} for r in rows]

    def get_subject_options(self) -> List[Dict]:
        rows = self.db.query(Subject.id, Subject.name).all()
        return [{"id": r.id, "name": r.name} for r in rows]

    def get_class_options(self) -> List[Dict]:
        rows = self.db.query(Class.id, Class.name).all()
        return [{"id": r.id, "name": r.name} for r in rows]

    def get_classes_full(self) -> List[Dict]:
        """All class columns, without the derived roster count."""
        rows = self.db.query(Class).all()
        return [
            {
                "id": c.id,
                "name": c.name,
                "capacity": c.capacity,
                "supervisorId": c.supervisor_id,
                "gradeId": c.grade_id,
            }
            for c in rows
        ]

    def get_student_options(self) -> List[Dict]:
        rows = self.db.query(Student.id, Student.name, Student.surname, Student.class_id).all()
        return [
            {"id": r.id, "name": r.name, "surname": r.surname, "classId": r.class_id}
            for r in rows
        ]

    def get_lesson_options(self, teacher_id: Optional[str] = None) -> List[Dict]:
        """Lessons, restricted to one teacher's own when `teacher_id` is given."""
        query = self.db.query(Lesson.id, Lesson.name, Lesson.class_id)
        if teacher_id is not None:
            query = query.filter(Lesson.teacher_id == teacher_id)
        return [{"id": r.id, "name": r.name, "classId": r.class_id} for r in query.all()]

    def get_exam_options(self, teacher_id: Optional[str] = None) -> List[Dict]:
        """Exams with the class of their lesson, optionally limited to one teacher's lessons."""
        query = self.db.query(Exam.id, Exam.title, Lesson.class_id).join(Lesson, Exam.lesson_id == Lesson.id)
        if teacher_id is not None:
            query = query.filter(Lesson.teacher_id == teacher_id)
        return [{"id": r.id, "title": r.title, "classId": r.class_id} for r in query.all()]

    def get_assignment_options(self, teacher_id: Optional[str] = None) -> List[Dict]:
        """Assignments with the class of their lesson, optionally limited to one teacher's lessons."""
        query = (
            self.db.query(Assignment.id, Assignment.title, Lesson.class_id)
            .join(Lesson, Assignment.lesson_id == Lesson.id)
        )
        if teacher_id is not None:
            query = query.filter(Lesson.teacher_id == teacher_id)
        return [{"id": r.id, "title": r.title, "classId": r.class_id} for r in query.all()]

    # --- Result Methods ---

    def get_result_by_id(self, result_id: int) -> Optional[Result]:
        return self.db.query(Result).filter(Result.id == result_id).first()

    def add_result(self, record: Dict) -> Result:
        new_result = Result(**record)
        self.db.add(new_result)
        self.db.commit()
        self.db.refresh(new_result)
        return new_result

    def update_result(self, result_id: int, data: Dict) -> Optional[Result]:
        db_result = self.get_result_by_id(result_id)
        if db_result:
            for key, value in data.items():
                setattr(db_result, key, value)
            self.db.commit()
            self.db.refresh(db_result)
        return db_result

    def delete_result(self, result_id: int) -> bool:
        db_result = self.get_result_by_id(result_id)
        if db_result:
            self.db.delete(db_result)
            self.db.commit()
            return True
        return False

    # --- Page & calendar queries ---

    def get_classes_by_student_email(self, email: str) -> List[Class]:
        """Classes that have a student with this email on their roster."""
        return (
            self.db.query(Class)
            .join(Student, Student.class_id == Class.id)
            .filter(Student.email == email)
            .all()
        )

    def get_lessons_for_teacher(self, teacher_id: str) -> List[Lesson]:
        return self.db.query(Lesson).filter(Lesson.teacher_id == teacher_id).all()

    def get_lessons_for_class(self, class_id: int) -> List[Lesson]:
        return self.db.query(Lesson).filter(Lesson.class_id == class_id).all()

    def get_events_between(self, start: datetime, end: datetime) -> List[Event]:
        """Events starting in the half-open window [start, end)."""
        return (
            self.db.query(Event)
            .filter(Event.start_time >= start, Event.start_time < end)
            .order_by(Event.start_time.asc())
            .all()
        )

    def get_latest_announcements(self, class_ids: Optional[List[int]], limit: int) -> List[Announcement]:
        """
        Newest announcements first. `class_ids=None` means every announcement;
        otherwise school-wide ones plus those of the listed classes.
        """
        query = self.db.query(Announcement)
        if class_ids is not None:
            query = query.filter(
                or_(Announcement.class_id.is_(None), Announcement.class_id.in_(class_ids))
            )
        return query.order_by(Announcement.date.desc()).limit(limit).all()

    def get_class_ids_for_teacher(self, teacher_id: str) -> List[int]:
        rows = self.db.query(Lesson.class_id).filter(Lesson.teacher_id == teacher_id).distinct().all()
        return [r.class_id for r in rows]

    def get_class_ids_for_student(self, student_id: str) -> List[int]:
        rows = self.db.query(Student.class_id).filter(Student.id == student_id).all()
        return [r.class_id for r in rows]

    def get_class_ids_for_parent(self, parent_id: str) -> List[int]:
        rows = self.db.query(Student.class_id).filter(Student.parent_id == parent_id).distinct().all()
        return [r.class_id for r in rows]
