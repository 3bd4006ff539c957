# /app/routers/forms_router.py

from typing import Optional

from fastapi import APIRouter, Depends, HTTPException, status

from ..core.app_logger import get_logger
from ..core.deps import get_current_principal
from ..models.form_model import FormAction, FormContainerResponse, FormTable
from ..models.principal_model import Principal
from ..models.result_model import ResultFormInput, ResultFormView
from ..services import form_container_service
from ..services.database_service import DatabaseService, get_db_service
from ..services.result_form import ResultForm

log = get_logger("routers.forms")

router = APIRouter()


@router.post(
    "/result/view",
    response_model=ResultFormView,
    summary="Render the Result Form",
    description="Renders the result form's fields for a class and assessment type selection.",
)
def render_result_form(
    form_input: ResultFormInput,
    principal: Principal = Depends(get_current_principal),
    db: DatabaseService = Depends(get_db_service),
):
    related_data = form_input.relatedData
    if related_data is None:
        scope = form_container_service.lesson_scope_for(principal)
        related_data = form_container_service.get_related_data(FormTable.RESULT, form_input.type, db, scope)
    try:
        form = ResultForm.from_input(form_input, related_data)
    except ValueError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))
    return form.view()


@router.get(
    "/{table}/{type}",
    response_model=FormContainerResponse,
    summary="Get Related Data for a Form Modal",
)
def get_form_container(
    table: FormTable,
    type: FormAction,
    id: Optional[str] = None,
    principal: Principal = Depends(get_current_principal),
    db: DatabaseService = Depends(get_db_service),
):
    """
    Prefetches the lookup rows the form needs for its dropdowns. Teachers only
    see their own lessons and the assessments set in them.
    """
    scope = form_container_service.lesson_scope_for(principal)
    try:
        related_data = form_container_service.get_related_data(table, type, db, scope)
    except Exception as e:
        log.error("Prefetch failed for %s/%s: %s", table.value, type.value, e)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="An error occurred while loading the form data.",
        )
    return FormContainerResponse(table=table, type=type, id=id, relatedData=related_data)
