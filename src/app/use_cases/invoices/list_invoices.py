"""ListInvoices Use Case

Renders the invoices page, serving it from the page cache when possible.
"""

import logging
from typing import List
from pydantic import TypeAdapter
from libs.result import Result, Return
from src.app.services.page_cache import PageCache
from src.app.repositories.invoice_repository import InvoiceRepository
from .dtos import INVOICES_PATH, InvoiceResponseDTO

logger = logging.getLogger(__name__)

_invoice_list = TypeAdapter(List[InvoiceResponseDTO])


class ListInvoices:
    def __init__(
        self,
        invoice_repo: InvoiceRepository,
        page_cache: PageCache,
        invoices_path: str = INVOICES_PATH,
    ):
        self.invoice_repo = invoice_repo
        self.page_cache = page_cache
        self.invoices_path = invoices_path

    async def execute(self) -> Result[str]:
        """
        Return the rendered invoices page as JSON

        Returns:
            Result[str]: Cached rendering, or a fresh one that is cached
        """
        cached = await self.page_cache.get(self.invoices_path)
        if cached is not None:
            return Return.ok(cached)

        invoices = await self.invoice_repo.list_all()
        rendered = _invoice_list.dump_json(
            [InvoiceResponseDTO.model_validate(invoice) for invoice in invoices]
        ).decode()

        await self.page_cache.set(self.invoices_path, rendered)
        logger.debug(f"Rendered {len(invoices)} invoices for {self.invoices_path}")
        return Return.ok(rendered)
