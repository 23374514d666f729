"""UpdateInvoice Use Case

Applies the dashboard's edit form to an existing invoice.
"""

import logging
from typing import Any, Mapping
from libs.result import Result
from .dtos import RedirectDTO
from .pipeline import InvoiceMutation
from .schemas import InvoiceForm

logger = logging.getLogger(__name__)


class UpdateInvoice(InvoiceMutation):
    """
    Use Case: Update customer, amount and status of an invoice

    id and date are never changed, whatever the form contains. Updating
    an id that no longer exists matches no row and still redirects.
    """

    action = "Update"

    async def execute(self, invoice_id: str, form_data: Mapping[str, Any]) -> Result[RedirectDTO]:
        """
        Execute invoice update

        Args:
            invoice_id: Invoice to update
            form_data: Raw form fields (customerId, amount, status)

        Returns:
            Result[RedirectDTO]: Redirect to the invoices page or error
        """

        async def write(form: InvoiceForm) -> None:
            matched = await self.invoice_repo.update(
                invoice_id,
                customer_id=form.customer_id,
                amount=form.amount_in_cents,
                status=form.status,
            )
            if not matched:
                logger.warning(f"Update matched no invoice with id {invoice_id}")

        return await self._submit(form_data, write)
