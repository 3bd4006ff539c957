# /app/models/principal_model.py

from enum import Enum
from typing import Optional

from pydantic import BaseModel, Field


class Role(str, Enum):
    ADMIN = "admin"
    TEACHER = "teacher"
    STUDENT = "student"
    PARENT = "parent"


class Principal(BaseModel):
    """
    The authenticated user making a request, as reported by the identity
    provider. Email and role claims are optional and may be missing.
    """
    id: str = Field(..., description="The identity provider's user id.")
    email: Optional[str] = Field(default=None)
    role: Optional[Role] = Field(default=None)
