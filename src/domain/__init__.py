from .base import BaseModel, generate_uuid
from .customer import Customer
from .invoice import Invoice, InvoiceStatus
from .user import User

__all__ = [
    "BaseModel",
    "generate_uuid",
    "Customer",
    "Invoice",
    "InvoiceStatus",
    "User",
]
