"""DeleteInvoice Use Case"""

import logging
from libs.result import Result, Return
from .dtos import MessageDTO
from .pipeline import InvoiceMutation

logger = logging.getLogger(__name__)


class DeleteInvoice(InvoiceMutation):
    """
    Use Case: Hard-delete an invoice

    There is no form to validate. Deleting an id that is already gone
    deletes nothing and still succeeds, so repeated submissions are safe.
    Database failures come back as an error Result, never raised.
    """

    action = "Delete"

    async def execute(self, invoice_id: str) -> Result[MessageDTO]:
        deleted = 0

        async def write() -> None:
            nonlocal deleted
            deleted = await self.invoice_repo.delete(invoice_id)

        error = await self._commit(write)
        if error:
            return Return.err(error)

        if deleted:
            logger.info(f"Deleted invoice {invoice_id}")
        else:
            logger.info(f"Invoice {invoice_id} already deleted")
        return Return.ok(MessageDTO(message="Deleted Invoice."))
