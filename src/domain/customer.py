"""Customer Domain Entity

Customers that invoices are billed to.
"""

from typing import Optional
from sqlmodel import Field, Column
from sqlalchemy import String
from src.domain.base import BaseModel, generate_uuid


class Customer(BaseModel, table=True):
    """Customer - Billing counterpart referenced by invoices"""

    __tablename__ = "customers"

    id: str = Field(
        default_factory=generate_uuid,
        sa_column=Column(String(36), primary_key=True),
        description="Unique customer identifier (UUID)"
    )

    name: str = Field(
        sa_column=Column(String(255), nullable=False),
        description="Customer display name"
    )

    email: str = Field(
        sa_column=Column(String(255), nullable=False),
        description="Customer contact email"
    )

    image_url: Optional[str] = Field(
        default=None,
        sa_column=Column(String(255), nullable=True),
        description="Avatar shown next to the customer"
    )
