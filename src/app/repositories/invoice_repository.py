"""Invoice Repository Interface

Defines the contract for invoice persistence operations.
"""

from abc import ABC, abstractmethod
from typing import List
from src.domain.invoice import Invoice, InvoiceStatus


class InvoiceRepository(ABC):
    """
    Repository interface for Invoice persistence

    Each mutating method issues exactly one statement. Committing is left
    to the caller's UnitOfWork.
    """

    @abstractmethod
    async def create(self, invoice: Invoice) -> Invoice:
        """
        Insert a new invoice

        Args:
            invoice: Invoice entity to persist

        Returns:
            Created Invoice with generated ID
        """
        pass

    @abstractmethod
    async def list_all(self, limit: int = 100, offset: int = 0) -> List[Invoice]:
        """
        Retrieve invoices, newest first

        Args:
            limit: Maximum number of invoices to return
            offset: Offset for pagination

        Returns:
            List of invoices
        """
        pass

    @abstractmethod
    async def update(
        self,
        invoice_id: str,
        customer_id: str,
        amount: int,
        status: InvoiceStatus,
    ) -> int:
        """
        Update the editable fields of an invoice

        id and date are never written.

        Args:
            invoice_id: Invoice to update
            customer_id: New customer reference
            amount: New amount in minor units
            status: New status

        Returns:
            Number of rows matched
        """
        pass

    @abstractmethod
    async def delete(self, invoice_id: str) -> int:
        """
        Hard-delete an invoice

        Args:
            invoice_id: Invoice to delete

        Returns:
            Number of rows deleted (0 if it did not exist)
        """
        pass
