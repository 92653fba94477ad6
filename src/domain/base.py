"""Shared base for SQLModel domain entities"""

import uuid
from sqlmodel import SQLModel


def generate_uuid() -> str:
    """Return a new random identifier as a 32 character hex string"""
    return uuid.uuid4().hex


class BaseModel(SQLModel):
    """Base class for all persisted domain entities"""
    pass
