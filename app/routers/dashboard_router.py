# /app/routers/dashboard_router.py

# --- Core FastAPI Imports ---
from typing import List

from fastapi import APIRouter, Depends

# --- Service and Model Imports ---
from ..core.deps import get_current_principal
from ..models.dashboard_model import AnnouncementItem, StudentPage
from ..models.principal_model import Principal
from ..services import dashboard_service
from ..services.database_service import DatabaseService, get_db_service

router = APIRouter()


@router.get(
    "/student",
    response_model=StudentPage,
    summary="Get the Student Dashboard",
    description="The signed-in student's class, its weekly schedule and the latest announcements.",
)
def get_student_dashboard(
    principal: Principal = Depends(get_current_principal),
    db: DatabaseService = Depends(get_db_service),
):
    return dashboard_service.get_student_page(principal=principal, db=db)


@router.get(
    "/announcements",
    response_model=List[AnnouncementItem],
    summary="Get the Latest Announcements",
)
def get_announcements(
    principal: Principal = Depends(get_current_principal),
    db: DatabaseService = Depends(get_db_service),
):
    return dashboard_service.get_announcements(principal=principal, db=db)
