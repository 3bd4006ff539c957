# /app/routers/results_router.py

from fastapi import APIRouter, Depends, Response, status

from ..core.deps import require_roles
from ..models.principal_model import Principal, Role
from ..models.result_model import ActionState, ResultSchema
from ..services import result_service
from ..services.database_service import DatabaseService, get_db_service

router = APIRouter()

# Results are written by staff only.
staff_only = require_roles(Role.ADMIN, Role.TEACHER)


@router.post("", response_model=ActionState, summary="Create a Result")
def create_result(
    payload: ResultSchema,
    response: Response,
    principal: Principal = Depends(staff_only),
    db: DatabaseService = Depends(get_db_service),
):
    state = result_service.create_result(payload, db)
    if state.success:
        response.status_code = status.HTTP_201_CREATED
    return state


@router.put("/{result_id}", response_model=ActionState, summary="Update a Result")
def update_result(
    result_id: int,
    payload: ResultSchema,
    principal: Principal = Depends(staff_only),
    db: DatabaseService = Depends(get_db_service),
):
    # The path wins over an id in the body.
    payload = payload.model_copy(update={"id": result_id})
    return result_service.update_result(payload, db)


@router.delete("/{result_id}", response_model=ActionState, summary="Delete a Result")
def delete_result(
    result_id: int,
    principal: Principal = Depends(staff_only),
    db: DatabaseService = Depends(get_db_service),
):
    return result_service.delete_result(result_id, db)
