"""Invoice API Routes

Form handlers behind the dashboard's invoice pages.
"""

from fastapi import APIRouter, Depends, Request, status
from fastapi.responses import RedirectResponse, Response
from sqlmodel.ext.asyncio.session import AsyncSession

from config import ApplicationConfig
from libs.result import Error
from src.app.services.page_cache import PageCache
from src.app.services.unit_of_work import UnitOfWork
from src.app.use_cases.invoices.dtos import VALIDATION_FAILED, FormState, MessageDTO
from src.app.use_cases.invoices.create_invoice import CreateInvoice
from src.app.use_cases.invoices.update_invoice import UpdateInvoice
from src.app.use_cases.invoices.delete_invoice import DeleteInvoice
from src.app.use_cases.invoices.list_invoices import ListInvoices
from src.adapter.repositories.invoice_repository import SqlAlchemyInvoiceRepository
from src.depends import get_page_cache, get_session, get_unit_of_work
from src.api.error import ClientError

INVOICES_PATH = ApplicationConfig.INVOICES_PATH

router = APIRouter(prefix=INVOICES_PATH, tags=["Invoices"])

FORM_ERROR_RESPONSES = {
    422: {
        "model": FormState,
        "description": "Missing or invalid form fields",
        "content": {
            "application/json": {
                "example": {
                    "errors": {"amount": ["Please enter an amount greater than $0."]},
                    "message": "Missing Fields. Failed to Create Invoice."
                }
            }
        }
    },
    500: {
        "model": FormState,
        "description": "Database error",
        "content": {
            "application/json": {
                "example": {
                    "errors": {},
                    "message": "Database Error: Failed to Create Invoice."
                }
            }
        }
    }
}


def raise_form_error(error: Error):
    if error.code == VALIDATION_FAILED:
        raise ClientError(error, status_code=status.HTTP_422_UNPROCESSABLE_ENTITY)
    raise ClientError(error, status_code=status.HTTP_500_INTERNAL_SERVER_ERROR)


@router.get("", status_code=status.HTTP_200_OK)
async def list_invoices(
    session: AsyncSession = Depends(get_session),
    page_cache: PageCache = Depends(get_page_cache),
):
    """
    Render the invoices page.

    The rendering is cached and reused until an invoice mutation
    invalidates it.
    """
    use_case = ListInvoices(SqlAlchemyInvoiceRepository(session), page_cache, INVOICES_PATH)
    result = await use_case.execute()
    return Response(content=result.value, media_type="application/json")


@router.post(
    "/create",
    status_code=status.HTTP_303_SEE_OTHER,
    responses=FORM_ERROR_RESPONSES,
)
async def create_invoice(
    request: Request,
    session: AsyncSession = Depends(get_session),
    uow: UnitOfWork = Depends(get_unit_of_work),
    page_cache: PageCache = Depends(get_page_cache),
):
    """
    Create an invoice from the create form.

    **Form fields:**
    - `customerId` (required): Customer to bill
    - `amount` (required): Amount in dollars, greater than 0
    - `status` (required): `pending` or `paid`

    **Returns:**
    - 303: Invoice created, redirect to the invoices page
    - 422: Field errors to show on the form
    - 500: Database error
    """
    form_data = await request.form()

    use_case = CreateInvoice(
        uow,
        SqlAlchemyInvoiceRepository(session),
        page_cache,
        INVOICES_PATH,
    )
    result = await use_case.execute(form_data)

    if result.is_err():
        raise_form_error(result.error)

    return RedirectResponse(result.value.location, status_code=status.HTTP_303_SEE_OTHER)


@router.post(
    "/{invoice_id}/edit",
    status_code=status.HTTP_303_SEE_OTHER,
    responses=FORM_ERROR_RESPONSES,
)
async def update_invoice(
    invoice_id: str,
    request: Request,
    session: AsyncSession = Depends(get_session),
    uow: UnitOfWork = Depends(get_unit_of_work),
    page_cache: PageCache = Depends(get_page_cache),
):
    """
    Update an invoice from the edit form.

    Only customer, amount and status change. The invoice id and date
    are kept even if the form submits them.

    **Returns:**
    - 303: Invoice updated, redirect to the invoices page
    - 422: Field errors to show on the form
    - 500: Database error
    """
    form_data = await request.form()

    use_case = UpdateInvoice(
        uow,
        SqlAlchemyInvoiceRepository(session),
        page_cache,
        INVOICES_PATH,
    )
    result = await use_case.execute(invoice_id, form_data)

    if result.is_err():
        raise_form_error(result.error)

    return RedirectResponse(result.value.location, status_code=status.HTTP_303_SEE_OTHER)


@router.post(
    "/{invoice_id}/delete",
    response_model=MessageDTO,
    status_code=status.HTTP_200_OK,
    responses={500: FORM_ERROR_RESPONSES[500]},
)
async def delete_invoice(
    invoice_id: str,
    session: AsyncSession = Depends(get_session),
    uow: UnitOfWork = Depends(get_unit_of_work),
    page_cache: PageCache = Depends(get_page_cache),
):
    """
    Delete an invoice.

    Deleting an invoice that no longer exists also succeeds.
    """
    use_case = DeleteInvoice(
        uow,
        SqlAlchemyInvoiceRepository(session),
        page_cache,
        INVOICES_PATH,
    )
    result = await use_case.execute(invoice_id)

    if result.is_err():
        raise_form_error(result.error)

    return result.value
