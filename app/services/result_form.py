# /app/services/result_form.py

"""
State machine behind the create/update result modal.

The form keeps a selected class, an assessment type and the values the user
picked. The exam, assignment and student dropdowns are derived from the
prefetched related data by filtering on the selected class. Switching the
assessment type drops an assessment of the other kind, so a submitted payload
can never carry both an exam and an assignment.

Changing the class does not reset the student or assessment already picked,
even when they no longer belong to the new class.
"""

from typing import Any, Callable, Dict, List, Optional, Union

from pydantic import ValidationError

from ..core.app_logger import get_logger
from ..models.result_model import (
    ActionState, Assessment, AssessmentType, AssignmentRef, ExamRef, FieldView, ResultFormInput,
    ResultFormView, ResultSchema, SelectOption,
)

log = get_logger("services.result_form")

CLASS_FIRST_PLACEHOLDER = "Select a class first"
GENERIC_ERROR_MESSAGE = "Something went wrong!"

ResultAction = Callable[[ResultSchema], ActionState]


def _parse_class_id(value: Union[int, str, None]) -> Optional[int]:
    if value is None or value == "":
        return None
    if isinstance(value, int):
        return value
    return int(str(value).strip())


def _parse_assessment_id(value: Union[int, str]) -> int:
    if isinstance(value, int):
        return value
    return int(str(value).strip())


def _validation_messages(exc: ValidationError) -> Dict[str, str]:
    """Flattens pydantic errors into one message per form field."""
    messages: Dict[str, str] = {}
    for error in exc.errors():
        loc = error.get("loc") or ()
        # Model-level errors concern the assessment reference; the form shows
        # them under the exam field.
        field = str(loc[0]) if loc else "examId"
        message = error.get("msg", "Invalid value")
        if message.startswith("Value error, "):
            message = message[len("Value error, "):]
        messages.setdefault(field, message)
    return messages


class ResultForm:
    def __init__(
        self,
        type: str = "create",
        related_data: Optional[Dict[str, List[Dict[str, Any]]]] = None,
        data: Optional[Dict[str, Any]] = None,
    ):
        if type not in ("create", "update"):
            raise ValueError(f"Unsupported result form type: {type}")
        self.type = type
        self.data = data

        related_data = related_data or {}
        self.classes = related_data.get("classes") or []
        self.students = related_data.get("students") or []
        self.exams = related_data.get("exams") or []
        self.assignments = related_data.get("assignments") or []

        self.selected_class_id: Optional[int] = None
        self.assessment_type: Optional[AssessmentType] = None
        self.assessment: Optional[Assessment] = None
        self.student_id: Optional[str] = None
        self.score: Any = None
        self.result_id: Optional[int] = None

        self.errors: Dict[str, str] = {}
        self.state = ActionState()
        self.is_open = True
        self.message: Optional[str] = None

        if data:
            self._load_existing(data)

    def _load_existing(self, data: Dict[str, Any]) -> None:
        """Seeds the state from an existing result when editing."""
        self.result_id = data.get("id")
        self.student_id = data.get("studentId")
        self.score = data.get("score")

        exam_id = data.get("examId")
        assignment_id = data.get("assignmentId")
        if exam_id:
            exam_id = _parse_assessment_id(exam_id)
            self.assessment_type = AssessmentType.EXAM
            self.assessment = ExamRef(id=exam_id)
            match = next((e for e in self.exams if e.get("id") == exam_id), None)
            if match:
                self.selected_class_id = match.get("classId")
        elif assignment_id:
            assignment_id = _parse_assessment_id(assignment_id)
            self.assessment_type = AssessmentType.ASSIGNMENT
            self.assessment = AssignmentRef(id=assignment_id)
            match = next((a for a in self.assignments if a.get("id") == assignment_id), None)
            if match:
                self.selected_class_id = match.get("classId")

    @classmethod
    def from_input(cls, form_input: ResultFormInput, related_data: Dict[str, List[Dict[str, Any]]]) -> "ResultForm":
        """Rebuilds a form and replays the class and type selections of a request."""
        form = cls(type=form_input.type, related_data=related_data, data=form_input.data)
        if form_input.classId is not None:
            form.select_class(form_input.classId)
        if form_input.assessmentType is not None:
            form.set_assessment_type(form_input.assessmentType)
        return form

    # --- User interactions ---

    def select_class(self, value: Union[int, str, None]) -> None:
        self.selected_class_id = _parse_class_id(value)

    def set_assessment_type(self, value: Union[AssessmentType, str, None]) -> None:
        kind = AssessmentType(value) if value else None
        if self.assessment is not None and (kind is None or self.assessment.kind != kind.value):
            self.assessment = None
        self.assessment_type = kind

    def select_exam(self, exam_id: Union[int, str]) -> None:
        if self.assessment_type != AssessmentType.EXAM:
            raise ValueError("Choose the exam assessment type before picking an exam.")
        self.assessment = ExamRef(id=_parse_assessment_id(exam_id))

    def select_assignment(self, assignment_id: Union[int, str]) -> None:
        if self.assessment_type != AssessmentType.ASSIGNMENT:
            raise ValueError("Choose the assignment assessment type before picking an assignment.")
        self.assessment = AssignmentRef(id=_parse_assessment_id(assignment_id))

    def select_student(self, student_id: Optional[str]) -> None:
        self.student_id = student_id or None

    def set_score(self, value: Any) -> None:
        self.score = value

    # --- Derived option lists ---

    def _by_selected_class(self, rows: List[Dict[str, Any]]) -> List[Dict[str, Any]]:
        if not self.selected_class_id:
            return rows
        return [row for row in rows if row.get("classId") == self.selected_class_id]

    @property
    def filtered_students(self) -> List[Dict[str, Any]]:
        return self._by_selected_class(self.students)

    @property
    def filtered_exams(self) -> List[Dict[str, Any]]:
        return self._by_selected_class(self.exams)

    @property
    def filtered_assignments(self) -> List[Dict[str, Any]]:
        return self._by_selected_class(self.assignments)

    # --- Rendering ---

    def _dependent_placeholder(self, label: str) -> str:
        return label if self.selected_class_id else CLASS_FIRST_PLACEHOLDER

    def fields(self) -> List[FieldView]:
        has_class = bool(self.selected_class_id)
        views = [
            FieldView(
                name="classId",
                label="Class",
                value=self.selected_class_id,
                placeholder="Select a class",
                options=[SelectOption(value=c["id"], label=c["name"]) for c in self.classes],
            ),
            FieldView(
                name="assessmentType",
                label="Assessment Type",
                value=self.assessment_type.value if self.assessment_type else None,
                placeholder="Select type",
                options=[
                    SelectOption(value=AssessmentType.EXAM.value, label="Exam"),
                    SelectOption(value=AssessmentType.ASSIGNMENT.value, label="Assignment"),
                ],
                error=self.errors.get("examId"),
            ),
        ]

        if self.assessment_type == AssessmentType.EXAM:
            views.append(FieldView(
                name="examId",
                label="Exam",
                value=self.assessment.id if isinstance(self.assessment, ExamRef) else None,
                placeholder=self._dependent_placeholder("Select an exam"),
                options=[SelectOption(value=e["id"], label=e["title"]) for e in self.filtered_exams],
                disabled=not has_class,
                error=self.errors.get("examId"),
            ))
        elif self.assessment_type == AssessmentType.ASSIGNMENT:
            views.append(FieldView(
                name="assignmentId",
                label="Assignment",
                value=self.assessment.id if isinstance(self.assessment, AssignmentRef) else None,
                placeholder=self._dependent_placeholder("Select an assignment"),
                options=[SelectOption(value=a["id"], label=a["title"]) for a in self.filtered_assignments],
                disabled=not has_class,
                error=self.errors.get("assignmentId"),
            ))

        views.append(FieldView(
            name="studentId",
            label="Student",
            value=self.student_id,
            placeholder=self._dependent_placeholder("Select a student"),
            options=[
                SelectOption(value=s["id"], label=f"{s['name']} {s['surname']}")
                for s in self.filtered_students
            ],
            disabled=not has_class,
            error=self.errors.get("studentId"),
        ))
        views.append(FieldView(
            name="score",
            label="Score",
            kind="input",
            value=self.score,
            error=self.errors.get("score"),
        ))
        if self.data:
            views.append(FieldView(
                name="id",
                label="Id",
                kind="input",
                value=self.result_id,
                hidden=True,
                error=self.errors.get("id"),
            ))
        return views

    def view(self) -> ResultFormView:
        is_create = self.type == "create"
        return ResultFormView(
            title="Create a new result" if is_create else "Update the result",
            submitLabel="Create" if is_create else "Update",
            fields=self.fields(),
            message=self.message,
        )

    # --- Submission ---

    def build_payload(self) -> Dict[str, Any]:
        """The values sent to the server action. The assessment type is UI-only and never included."""
        payload: Dict[str, Any] = {
            "studentId": self.student_id,
            "score": self.score,
        }
        if isinstance(self.assessment, ExamRef):
            payload["examId"] = self.assessment.id
        elif isinstance(self.assessment, AssignmentRef):
            payload["assignmentId"] = self.assessment.id
        if self.data and self.result_id is not None:
            payload["id"] = self.result_id
        return {k: v for k, v in payload.items() if v is not None}

    def submit(self, action: ResultAction, on_success: Optional[Callable[[], None]] = None) -> ActionState:
        """
        Validates the payload and calls `action` once. Validation failures are
        kept in `errors` and the action is not called. On success the form
        closes and `on_success` (the page refresh) runs.
        """
        try:
            payload = ResultSchema.model_validate(self.build_payload())
        except ValidationError as e:
            self.errors = _validation_messages(e)
            log.debug("Result form blocked by validation errors: %s", self.errors)
            return self.state
        self.errors = {}

        self.state = action(payload)
        if self.state.success:
            self.message = f"Result has been {'created' if self.type == 'create' else 'updated'}!"
            self.is_open = False
            if on_success is not None:
                on_success()
        elif self.state.error:
            self.message = GENERIC_ERROR_MESSAGE
        return self.state
