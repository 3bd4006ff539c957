# /app/db/base_class.py

from sqlalchemy.orm import declared_attr

from .database import Base as _DeclarativeBase


class Base(_DeclarativeBase):
    """
    Abstract base for every model. Table names default to the lowercase,
    pluralised class name (e.g. `Lesson` -> `lessons`).
    """
    __abstract__ = True

    @declared_attr
    def __tablename__(cls) -> str:
        return cls.__name__.lower() + "s"
