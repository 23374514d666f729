"""Shared base for domain entities"""

import uuid
from sqlmodel import SQLModel


def generate_uuid() -> str:
    """Generate a string UUID4 used as primary key"""
    return str(uuid.uuid4())


class BaseModel(SQLModel):
    """Base class for all SQLModel domain entities"""
    pass
