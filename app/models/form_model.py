# /app/models/form_model.py

"""
Contracts for the form modal endpoints: which table a form edits, which
action it performs, and the related lookup rows used to fill its dropdowns.
"""

from enum import Enum
from typing import Any, Dict, List, Optional, Union

from pydantic import BaseModel, Field


class FormTable(str, Enum):
    TEACHER = "teacher"
    STUDENT = "student"
    PARENT = "parent"
    SUBJECT = "subject"
    CLASS = "class"
    LESSON = "lesson"
    EXAM = "exam"
    ASSIGNMENT = "assignment"
    RESULT = "result"
    ATTENDANCE = "attendance"
    EVENT = "event"
    ANNOUNCEMENT = "announcement"


class FormAction(str, Enum):
    CREATE = "create"
    UPDATE = "update"
    DELETE = "delete"


class FormContainerResponse(BaseModel):
    table: FormTable
    type: FormAction
    id: Optional[Union[int, str]] = None
    relatedData: Dict[str, List[Dict[str, Any]]] = Field(default_factory=dict)
