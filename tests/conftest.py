# /tests/conftest.py

import pytest
from unittest.mock import MagicMock
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from app.db.base import Base
from app.models.principal_model import Principal, Role


@pytest.fixture
def mock_db_service():
    """Provides a mock of the DatabaseService for dependency injection."""
    return MagicMock()


@pytest.fixture
def sql_session():
    """A fresh in-memory SQLite database with every table created."""
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    Base.metadata.create_all(bind=engine)
    TestingSession = sessionmaker(autocommit=False, autoflush=False, bind=engine)
    session = TestingSession()
    try:
        yield session
    finally:
        session.close()
        Base.metadata.drop_all(bind=engine)


@pytest.fixture
def teacher_principal():
    return Principal(id="t1", email="tara@school.test", role=Role.TEACHER)


@pytest.fixture
def admin_principal():
    return Principal(id="a1", email="admin@school.test", role=Role.ADMIN)


@pytest.fixture
def result_related_data():
    """Lookup rows for the result form: two classes with their students and assessments."""
    return {
        "classes": [{"id": 1, "name": "1A"}, {"id": 2, "name": "2B"}],
        "students": [
            {"id": "s1", "name": "Ann", "surname": "Lee", "classId": 1},
            {"id": "s2", "name": "Bo", "surname": "Kim", "classId": 2},
            {"id": "s3", "name": "Cy", "surname": "Ode", "classId": 1},
        ],
        "exams": [
            {"id": 10, "title": "Math", "classId": 1},
            {"id": 11, "title": "Physics", "classId": 2},
        ],
        "assignments": [
            {"id": 20, "title": "Essay", "classId": 1},
            {"id": 21, "title": "Lab report", "classId": 2},
        ],
    }
