# /app/models/dashboard_model.py

# --- Core Imports ---
from datetime import datetime
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field

from .calendar_model import ScheduleEntry

# --- Model Definitions ---

class AnnouncementItem(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    title: str
    description: Optional[str] = None
    date: datetime
    classId: Optional[int] = None


class StudentPage(BaseModel):
    """
    Defines the data contract for the student dashboard. The left column shows
    the weekly schedule of the student's class, the right column the latest
    announcements.
    """

    classId: Optional[int] = Field(
        default=None,
        description="The student's class, or null when it cannot be resolved.",
    )
    className: Optional[str] = Field(default=None, examples=["1A"])
    schedule: List[ScheduleEntry] = Field(default_factory=list)
    announcements: List[AnnouncementItem] = Field(default_factory=list)
