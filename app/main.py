# /app/main.py

# --- Core FastAPI Imports ---
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from contextlib import asynccontextmanager

# --- Application-specific Imports ---
from .core import config
from .core.app_logger import setup_logging
from .db import base  # noqa: F401  (registers every model on the metadata)
from .db.database import engine
from .routers import (
    forms_router,
    results_router,
    calendar_router,
    dashboard_router,
)

log = setup_logging()

# --- Application Lifecycle Management ---
@asynccontextmanager
async def lifespan(app: FastAPI):
    # Runs once at startup. Schema changes in production go through Alembic;
    # this only fills in missing tables for local SQLite databases.
    if config.DATABASE_URL.startswith("sqlite"):
        base.Base.metadata.create_all(bind=engine)
    log.info("School backend started")
    yield

# --- FastAPI Application Instance Creation ---
app = FastAPI(
    title="School Management API",
    description="Role-based dashboards, form lookups and calendars for the school management app.",
    version="1.0.0",
    lifespan=lifespan
)

# --- Middleware Configuration ---
app.add_middleware(
    CORSMiddleware,
    allow_origins=config.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# --- API Router Inclusion ---
app.include_router(forms_router.router, prefix="/api/forms", tags=["Forms"])
app.include_router(results_router.router, prefix="/api/results", tags=["Results"])
app.include_router(calendar_router.router, prefix="/api/calendar", tags=["Calendar"])
app.include_router(dashboard_router.router, prefix="/api/dashboard", tags=["Dashboard"])

# --- Root / Health Check Endpoint ---
@app.get("/", tags=["Health Check"])
async def read_root():
    """A simple health check endpoint to confirm the API is online."""
    return {"status": "School backend is running!", "version": app.version}
