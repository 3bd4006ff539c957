# /app/models/result_model.py

from enum import Enum
from typing import Annotated, Any, Dict, List, Literal, Optional, Union

from pydantic import BaseModel, ConfigDict, Field, model_validator


# --- Assessment reference (tagged variant) ---

class AssessmentType(str, Enum):
    EXAM = "exam"
    ASSIGNMENT = "assignment"


class ExamRef(BaseModel):
    kind: Literal["exam"] = "exam"
    id: int


class AssignmentRef(BaseModel):
    kind: Literal["assignment"] = "assignment"
    id: int


# A result points at exactly one of these.
Assessment = Annotated[Union[ExamRef, AssignmentRef], Field(discriminator="kind")]


# --- Payload schema ---

class ResultSchema(BaseModel):
    """
    The payload a create/update result action receives. Field names follow
    the form's wire format.
    """
    model_config = ConfigDict(from_attributes=True)

    id: Optional[int] = Field(default=None, description="Present on update only.")
    score: int = Field(..., ge=0, description="The score achieved.")
    studentId: str = Field(..., min_length=1, description="Student is required!")
    examId: Optional[int] = Field(default=None)
    assignmentId: Optional[int] = Field(default=None)

    @model_validator(mode="after")
    def exactly_one_assessment(self):
        if self.examId is None and self.assignmentId is None:
            raise ValueError("Either an exam or an assignment is required!")
        if self.examId is not None and self.assignmentId is not None:
            raise ValueError("A result can reference an exam or an assignment, not both!")
        return self

    @property
    def assessment(self) -> Assessment:
        if self.examId is not None:
            return ExamRef(id=self.examId)
        return AssignmentRef(id=self.assignmentId)


class ActionState(BaseModel):
    """What every server action reports back to the form."""
    success: bool = False
    error: bool = False


# --- Rendered form contract ---

class SelectOption(BaseModel):
    value: Union[int, str]
    label: str


class FieldView(BaseModel):
    """One rendered form control."""
    name: str
    label: str
    kind: Literal["select", "input"] = "select"
    value: Optional[Union[int, float, str]] = None
    options: List[SelectOption] = Field(default_factory=list)
    placeholder: Optional[str] = None
    disabled: bool = False
    hidden: bool = False
    error: Optional[str] = None


class ResultFormInput(BaseModel):
    """Request body for rendering the result form in a given state."""
    type: Literal["create", "update"] = "create"
    data: Optional[Dict[str, Any]] = None
    relatedData: Optional[Dict[str, List[Dict[str, Any]]]] = None
    classId: Optional[Union[int, str]] = None
    assessmentType: Optional[AssessmentType] = None


class ResultFormView(BaseModel):
    title: str
    submitLabel: str
    fields: List[FieldView]
    message: Optional[str] = None
