"""API error handling

Use case errors are raised as ClientError from routes and rendered as the
form state ({errors, message}) the dashboard forms display.
"""

from fastapi import Request, status
from fastapi.responses import JSONResponse
from libs.result import Error
from src.app.use_cases.invoices.dtos import FormState


class ClientError(Exception):
    def __init__(self, error: Error, status_code: int = status.HTTP_400_BAD_REQUEST):
        super().__init__(error.message)
        self.error = error
        self.status_code = status_code


async def client_error_handler(request: Request, exc: ClientError) -> JSONResponse:
    return JSONResponse(
        status_code=exc.status_code,
        content=FormState.from_error(exc.error).model_dump(),
    )
