"""CreateInvoice Use Case

Creates an invoice from the dashboard's create form.
"""

import datetime
import logging
from typing import Any, Callable, Mapping
from libs.result import Result
from src.app.services.unit_of_work import UnitOfWork
from src.app.services.page_cache import PageCache
from src.app.repositories.invoice_repository import InvoiceRepository
from src.domain.invoice import Invoice
from .dtos import INVOICES_PATH, RedirectDTO
from .pipeline import InvoiceMutation
from .schemas import InvoiceForm

logger = logging.getLogger(__name__)


def utc_today() -> datetime.date:
    return datetime.datetime.now(datetime.timezone.utc).date()


class CreateInvoice(InvoiceMutation):
    """
    Use Case: Create invoice from form fields

    Business Rules:
    1. customerId, amount and status are validated together
    2. amount is stored in cents
    3. date is today's UTC calendar date, never taken from the form

    Flow:
    1. Validate form
    2. INSERT invoice
    3. Commit transaction
    4. Invalidate invoices page
    5. Redirect to invoices page
    """

    action = "Create"

    def __init__(
        self,
        uow: UnitOfWork,
        invoice_repo: InvoiceRepository,
        page_cache: PageCache,
        invoices_path: str = INVOICES_PATH,
        today: Callable[[], datetime.date] = utc_today,
    ):
        super().__init__(uow, invoice_repo, page_cache, invoices_path)
        self.today = today

    async def execute(self, form_data: Mapping[str, Any]) -> Result[RedirectDTO]:
        """
        Execute invoice creation

        Args:
            form_data: Raw form fields (customerId, amount, status)

        Returns:
            Result[RedirectDTO]: Redirect to the invoices page or error
        """
        return await self._submit(form_data, self._insert)

    async def _insert(self, form: InvoiceForm) -> None:
        invoice = Invoice(
            customer_id=form.customer_id,
            amount=form.amount_in_cents,
            status=form.status,
            date=self.today(),
        )
        created = await self.invoice_repo.create(invoice)
        logger.info(f"Created invoice {created.id} for customer {created.customer_id}")
