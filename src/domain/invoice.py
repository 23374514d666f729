"""Invoice Domain Entity

Invoices billed to customers and shown on the dashboard.
"""

import datetime
from enum import Enum
from sqlmodel import Field, Column, Index
from sqlalchemy import CheckConstraint, Date, Enum as SAEnum, ForeignKey, Integer, String
from src.domain.base import BaseModel, generate_uuid


class InvoiceStatus(str, Enum):
    """Invoice status types"""
    PENDING = "pending"
    PAID = "paid"


class Invoice(BaseModel, table=True):
    """
    Invoice - Amount owed by a customer

    Domain Rules:
    - amount is stored in minor units (cents) and is always > 0
    - status is either pending or paid
    - customer_id references an existing customer and is never empty
    - id and date are assigned at creation and never updated
    """

    __tablename__ = "invoices"
    __table_args__ = (
        CheckConstraint('amount > 0', name='amount_positive'),
        Index('ix_invoices_customer_id', 'customer_id'),
        Index('ix_invoices_status', 'status'),
    )

    id: str = Field(
        default_factory=generate_uuid,
        sa_column=Column(String(36), primary_key=True),
        description="Unique invoice identifier (UUID)"
    )

    customer_id: str = Field(
        sa_column=Column(String(36), ForeignKey("customers.id"), nullable=False),
        description="Customer the invoice is billed to"
    )

    amount: int = Field(
        sa_column=Column(Integer, nullable=False),
        description="Invoice amount in minor units (cents)"
    )

    status: InvoiceStatus = Field(
        sa_column=Column(
            SAEnum(
                InvoiceStatus,
                name="invoice_status",
                native_enum=False,
                values_callable=lambda statuses: [s.value for s in statuses],
            ),
            nullable=False,
        ),
        description="Invoice status (pending, paid)"
    )

    date: datetime.date = Field(
        sa_column=Column(Date, nullable=False),
        description="Creation date (no time component)"
    )

    class Config:
        """SQLModel configuration"""
        json_schema_extra = {
            "example": {
                "id": "3958dc9e-712f-4377-85e9-fec4b6a6442a",
                "customer_id": "d6e15727-9fe1-4961-8c5b-ea44a9bd81aa",
                "amount": 15795,
                "status": "pending",
                "date": "2022-12-06",
            }
        }
