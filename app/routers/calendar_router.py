# /app/routers/calendar_router.py

from typing import List

from fastapi import APIRouter, Depends, HTTPException, Request, status

from ..core.deps import get_current_principal
from ..models.calendar_model import EventListResponse, ScheduleEntry, ScheduleOwner
from ..models.principal_model import Principal
from ..services import calendar_service
from ..services.database_service import DatabaseService, get_db_service

router = APIRouter()


@router.get(
    "/events",
    response_model=EventListResponse,
    summary="Get Events for a Day",
    description="Lists the events of the day given by the `date` query parameter (today when absent).",
)
def get_events(
    request: Request,
    principal: Principal = Depends(get_current_principal),
    db: DatabaseService = Depends(get_db_service),
):
    # Read the raw values so a repeated `date` parameter is handled too.
    raw_date = calendar_service.normalize_date_param(request.query_params.getlist(calendar_service.DATE_PARAM))
    try:
        day = calendar_service.parse_date_param(raw_date)
    except ValueError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))
    events = calendar_service.get_events_for_date(day, db)
    return EventListResponse(date=day.isoformat(), events=events)


@router.get(
    "/schedule",
    response_model=List[ScheduleEntry],
    summary="Get the Weekly Schedule",
)
def get_schedule(
    type: ScheduleOwner,
    id: str,
    principal: Principal = Depends(get_current_principal),
    db: DatabaseService = Depends(get_db_service),
):
    try:
        return calendar_service.get_schedule(type, id, db)
    except ValueError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))
