from sqlalchemy import Column, String
from ..db.database import Base
import uuid


def generate_uuid() -> str:
    return str(uuid.uuid4())


class UUIDBaseModel(Base):
    """Base model with UUID primary key"""
    __abstract__ = True

    id = Column(String(36), primary_key=True, default=generate_uuid)


def normalize_id(value: str) -> str:
    """Canonical lower-case form of a UUID, other strings are returned unchanged"""
    try:
        return str(uuid.UUID(value))
    except ValueError:
        return value
