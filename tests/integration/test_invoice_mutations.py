"""Integration tests for the invoice mutation use cases

Runs the pipelines against a real schema to check what actually lands in
the invoices table.
"""

import pytest
from sqlmodel import select
from sqlmodel.ext.asyncio.session import AsyncSession

from src.adapter.repositories.invoice_repository import SqlAlchemyInvoiceRepository
from src.adapter.services.page_cache import InMemoryPageCache
from src.adapter.services.unit_of_work import SqlAlchemyUnitOfWork
from src.app.use_cases.invoices.create_invoice import CreateInvoice, utc_today
from src.app.use_cases.invoices.delete_invoice import DeleteInvoice
from src.app.use_cases.invoices.update_invoice import UpdateInvoice
from src.domain.invoice import Invoice, InvoiceStatus


async def fetch_invoices(session: AsyncSession):
    statement = select(Invoice).execution_options(populate_existing=True)
    result = await session.execute(statement)
    return list(result.scalars().all())


def build(use_case_cls, session: AsyncSession, page_cache: InMemoryPageCache):
    return use_case_cls(
        SqlAlchemyUnitOfWork(session),
        SqlAlchemyInvoiceRepository(session),
        page_cache,
    )


@pytest.mark.asyncio
class TestInvoiceMutationsIntegration:
    """Integration tests with real database"""

    async def test_create_then_update_round_trip(self, db_session, customer):
        """
        Given: A customer
        When: An invoice for 19.99 is created, then marked paid
        Then: 1999 cents are stored and only the status changes
        """
        # Arrange
        page_cache = InMemoryPageCache()

        # Act - create
        created = await build(CreateInvoice, db_session, page_cache).execute(
            {"customerId": customer.id, "amount": "19.99", "status": "pending"}
        )

        # Assert - create
        assert created.is_ok()
        [invoice] = await fetch_invoices(db_session)
        assert invoice.amount == 1999
        assert invoice.status == InvoiceStatus.PENDING
        assert invoice.date == utc_today()
        invoice_id, invoice_date = invoice.id, invoice.date

        # Act - update status only
        updated = await build(UpdateInvoice, db_session, page_cache).execute(
            invoice_id,
            {
                "customerId": customer.id,
                "amount": "19.99",
                "status": "paid",
                "date": "1999-12-31",
                "id": "forged",
            },
        )

        # Assert - update
        assert updated.is_ok()
        [invoice] = await fetch_invoices(db_session)
        assert invoice.id == invoice_id
        assert invoice.date == invoice_date
        assert invoice.amount == 1999
        assert invoice.customer_id == customer.id
        assert invoice.status == InvoiceStatus.PAID

    async def test_invalid_form_writes_nothing(self, db_session, customer):
        # Act
        result = await build(CreateInvoice, db_session, InMemoryPageCache()).execute(
            {"customerId": "", "amount": "50", "status": "pending"}
        )

        # Assert
        assert result.error.details.keys() == {"customerId"}
        assert await fetch_invoices(db_session) == []

    async def test_unknown_customer_is_database_error(self, db_session, customer):
        """Test that a foreign key violation is reported as a database error"""
        # Act
        result = await build(CreateInvoice, db_session, InMemoryPageCache()).execute(
            {"customerId": "no-such-customer", "amount": "50", "status": "pending"}
        )

        # Assert
        assert result.is_err()
        assert result.error.message == "Database Error: Failed to Create Invoice."
        assert await fetch_invoices(db_session) == []

    async def test_delete_is_idempotent(self, db_session, customer):
        # Arrange
        page_cache = InMemoryPageCache()
        await build(CreateInvoice, db_session, page_cache).execute(
            {"customerId": customer.id, "amount": "10", "status": "paid"}
        )
        [invoice] = await fetch_invoices(db_session)
        delete_invoice = build(DeleteInvoice, db_session, page_cache)

        # Act
        first = await delete_invoice.execute(invoice.id)
        second = await delete_invoice.execute(invoice.id)

        # Assert
        assert first.value.message == "Deleted Invoice."
        assert second.value.message == "Deleted Invoice."
        assert await fetch_invoices(db_session) == []

    async def test_successful_write_invalidates_page(self, db_session, customer):
        # Arrange
        page_cache = InMemoryPageCache()
        await page_cache.set("/dashboard/invoices", "[]")

        # Act
        await build(CreateInvoice, db_session, page_cache).execute(
            {"customerId": customer.id, "amount": "10", "status": "paid"}
        )

        # Assert
        assert await page_cache.get("/dashboard/invoices") is None

    async def test_failed_write_keeps_page(self, db_session, customer):
        # Arrange
        page_cache = InMemoryPageCache()
        await page_cache.set("/dashboard/invoices", "[]")

        # Act
        await build(CreateInvoice, db_session, page_cache).execute(
            {"customerId": "no-such-customer", "amount": "10", "status": "paid"}
        )

        # Assert
        assert await page_cache.get("/dashboard/invoices") == "[]"
