# /app/db/base.py

# Central registry for all SQLAlchemy models. Importing them here makes sure
# the metadata knows every table when Alembic or `create_all` runs.

from .base_class import Base

from .models.school_models import (
    Grade,
    Teacher,
    Subject,
    Class,
    Parent,
    Student,
    Lesson,
    Exam,
    Assignment,
    Result,
    Event,
    Announcement,
)
