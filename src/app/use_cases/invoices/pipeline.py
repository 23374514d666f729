"""Invoice mutation pipeline

Shared sequence for every write on the invoices table:
validate -> coerce -> persist -> invalidate -> redirect.
"""

import logging
from typing import Any, Awaitable, Callable, Mapping, Optional
from sqlalchemy.exc import SQLAlchemyError
from libs.result import Result, Return, Error
from src.app.services.unit_of_work import UnitOfWork
from src.app.services.page_cache import PageCache
from src.app.repositories.invoice_repository import InvoiceRepository
from .dtos import INVOICES_PATH, PERSISTENCE_FAILED, VALIDATION_FAILED, RedirectDTO
from .schemas import InvoiceForm, parse_invoice_form

logger = logging.getLogger(__name__)


class InvoiceMutation:
    """
    Base for invoice write use cases

    Failure handling:
    - Invalid form: VALIDATION_FAILED with per-field details, storage untouched
    - SQLAlchemyError while writing: rollback, PERSISTENCE_FAILED, no retry
    - Anything else propagates to the caller unchanged

    The page cache for the invoices path is invalidated only after the
    write has been committed, and exactly once per successful write.
    """

    action = ""

    def __init__(
        self,
        uow: UnitOfWork,
        invoice_repo: InvoiceRepository,
        page_cache: PageCache,
        invoices_path: str = INVOICES_PATH,
    ):
        self.uow = uow
        self.invoice_repo = invoice_repo
        self.page_cache = page_cache
        self.invoices_path = invoices_path

    async def _submit(
        self,
        form_data: Mapping[str, Any],
        write: Callable[[InvoiceForm], Awaitable[Any]],
    ) -> Result[RedirectDTO]:
        validated = parse_invoice_form(form_data)
        if validated.is_err():
            logger.info(
                f"{self.action} invoice rejected, invalid fields: "
                f"{sorted(validated.error.details)}"
            )
            return Return.err(
                Error(
                    code=VALIDATION_FAILED,
                    message=f"Missing Fields. Failed to {self.action} Invoice.",
                    details=validated.error.details,
                )
            )

        form = validated.value
        error = await self._commit(lambda: write(form))
        if error:
            return Return.err(error)

        return Return.ok(RedirectDTO(location=self.invoices_path))

    async def _commit(self, write: Callable[[], Awaitable[Any]]) -> Optional[Error]:
        """Run one write, commit it, then invalidate the invoices page"""
        try:
            await write()
            await self.uow.commit()
        except SQLAlchemyError as e:
            await self.uow.rollback()
            logger.error(f"{self.action} invoice failed: {e}")
            return Error(
                code=PERSISTENCE_FAILED,
                message=f"Database Error: Failed to {self.action} Invoice.",
                reason=str(e),
            )

        await self.page_cache.invalidate(self.invoices_path)
        return None
