from .invoice_repository import SqlAlchemyInvoiceRepository
from .user_repository import SqlAlchemyUserRepository

__all__ = [
    "SqlAlchemyInvoiceRepository",
    "SqlAlchemyUserRepository",
]
