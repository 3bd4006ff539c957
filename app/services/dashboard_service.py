# /app/services/dashboard_service.py

# --- Core Imports ---
from datetime import date
from typing import List, Optional

from ..core import config
from ..core.app_logger import get_logger
from ..models.calendar_model import ScheduleOwner
from ..models.dashboard_model import AnnouncementItem, StudentPage
from ..models.principal_model import Principal, Role
from . import calendar_service
from .database_service import DatabaseService

log = get_logger("services.dashboard")


def _announcement_class_ids(principal: Principal, db: DatabaseService) -> Optional[List[int]]:
    """
    The classes whose announcements a principal sees on top of the
    school-wide ones. None means no restriction.
    """
    if principal.role == Role.ADMIN:
        return None
    if principal.role == Role.TEACHER:
        return db.get_class_ids_for_teacher(principal.id)
    if principal.role == Role.STUDENT:
        return db.get_class_ids_for_student(principal.id)
    if principal.role == Role.PARENT:
        return db.get_class_ids_for_parent(principal.id)
    # Without a role claim only school-wide announcements are shown.
    return []


def get_announcements(principal: Principal, db: DatabaseService, limit: Optional[int] = None) -> List[AnnouncementItem]:
    """The latest announcements visible to the principal, newest first."""
    class_ids = _announcement_class_ids(principal, db)
    rows = db.get_latest_announcements(class_ids, limit or config.ANNOUNCEMENT_LIMIT)
    return [
        AnnouncementItem(
            id=a.id,
            title=a.title,
            description=a.description,
            date=a.date,
            classId=a.class_id,
        )
        for a in rows
    ]


def get_student_page(principal: Principal, db: DatabaseService, today: Optional[date] = None) -> StudentPage:
    """
    Assembles the student dashboard: the class of the student whose email the
    principal carries, that class's weekly schedule and the announcements.

    A principal without an email claim gets no class and an empty schedule.
    If several classes match, the first one is used.
    """
    student_class = None
    if principal.email:
        classes = db.get_classes_by_student_email(principal.email)
        student_class = classes[0] if classes else None
    else:
        log.info("Principal %s has no email claim; student class not resolved", principal.id)

    schedule = []
    if student_class is not None:
        schedule = calendar_service.get_schedule(ScheduleOwner.CLASS, student_class.id, db, today=today)

    return StudentPage(
        classId=student_class.id if student_class else None,
        className=student_class.name if student_class else None,
        schedule=schedule,
        announcements=get_announcements(principal, db),
    )
