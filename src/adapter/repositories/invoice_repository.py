"""SQLAlchemy Invoice Repository Implementation

Implements invoice persistence using SQLAlchemy async session.
"""

from typing import List
from sqlalchemy import delete, update
from sqlmodel import select
from sqlmodel.ext.asyncio.session import AsyncSession
from src.app.repositories.invoice_repository import InvoiceRepository
from src.domain.invoice import Invoice, InvoiceStatus


class SqlAlchemyInvoiceRepository(InvoiceRepository):
    """
    SQLAlchemy implementation of InvoiceRepository

    Uses async session for database operations.
    """

    def __init__(self, session: AsyncSession):
        self.session = session

    async def create(self, invoice: Invoice) -> Invoice:
        self.session.add(invoice)
        await self.session.flush()
        await self.session.refresh(invoice)
        return invoice

    async def list_all(self, limit: int = 100, offset: int = 0) -> List[Invoice]:
        statement = (
            select(Invoice)
            .order_by(Invoice.date.desc(), Invoice.id)
            .limit(limit)
            .offset(offset)
        )
        result = await self.session.execute(statement)
        return list(result.scalars().all())

    async def update(
        self,
        invoice_id: str,
        customer_id: str,
        amount: int,
        status: InvoiceStatus,
    ) -> int:
        """
        Update customer, amount and status with a single UPDATE statement

        The statement names only the editable columns, so id and date are
        left untouched regardless of what the caller submitted.
        """
        statement = (
            update(Invoice)
            .where(Invoice.id == invoice_id)
            .values(customer_id=customer_id, amount=amount, status=status)
        )
        result = await self.session.execute(statement)
        return result.rowcount

    async def delete(self, invoice_id: str) -> int:
        statement = delete(Invoice).where(Invoice.id == invoice_id)
        result = await self.session.execute(statement)
        return result.rowcount
