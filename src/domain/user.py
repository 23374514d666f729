"""User Domain Entity

Dashboard users who sign in with email and password.
"""

from sqlmodel import Field, Column
from sqlalchemy import String
from src.domain.base import BaseModel, generate_uuid


class User(BaseModel, table=True):
    """
    User - Dashboard account

    Domain Rules:
    - email is unique
    - password holds a werkzeug password hash, never the plain text
    """

    __tablename__ = "users"

    id: str = Field(
        default_factory=generate_uuid,
        sa_column=Column(String(36), primary_key=True),
        description="Unique user identifier (UUID)"
    )

    name: str = Field(
        sa_column=Column(String(255), nullable=False),
        description="Display name"
    )

    email: str = Field(
        sa_column=Column(String(255), nullable=False, unique=True),
        description="Sign-in email (unique)"
    )

    password: str = Field(
        sa_column=Column(String(255), nullable=False),
        description="Password hash"
    )
