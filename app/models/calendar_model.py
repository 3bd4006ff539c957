# /app/models/calendar_model.py

from datetime import datetime
from enum import Enum
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field


class ScheduleOwner(str, Enum):
    TEACHER = "teacherId"
    CLASS = "classId"


class ScheduleEntry(BaseModel):
    """A lesson placed on the current week, ready for a week-view calendar."""
    title: str
    start: datetime
    end: datetime


class EventItem(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    title: str
    description: Optional[str] = None
    startTime: datetime
    endTime: datetime
    classId: Optional[int] = None


class EventListResponse(BaseModel):
    date: str = Field(..., description="The selected day in YYYY-MM-DD form.")
    events: List[EventItem]
