# /app/core/config.py

"""
Runtime configuration, read once from the environment.

Every value has a default suitable for local development so the API can be
started without any environment set up.
"""

import os

# The database URL. Production deployments point this at PostgreSQL.
DATABASE_URL = os.getenv("DATABASE_URL", "sqlite:///./school.db")

# Root log level for the application logger.
LOG_LEVEL = os.getenv("SCHOOL_LOG_LEVEL", "INFO").upper()

# How many announcements the dashboard widget shows.
ANNOUNCEMENT_LIMIT = int(os.getenv("ANNOUNCEMENT_LIMIT", "3"))

# Comma separated list of allowed CORS origins.
CORS_ORIGINS = [o.strip() for o in os.getenv("CORS_ORIGINS", "*").split(",") if o.strip()]

# Headers set by the identity gateway in front of the API.
PRINCIPAL_ID_HEADER = os.getenv("PRINCIPAL_ID_HEADER", "X-User-Id")
PRINCIPAL_EMAIL_HEADER = os.getenv("PRINCIPAL_EMAIL_HEADER", "X-User-Email")
PRINCIPAL_ROLE_HEADER = os.getenv("PRINCIPAL_ROLE_HEADER", "X-User-Role")
