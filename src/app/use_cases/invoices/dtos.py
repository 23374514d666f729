"""Data Transfer Objects for Invoice Use Cases"""

import datetime
from typing import Dict, List, Optional
from pydantic import BaseModel, ConfigDict, Field
from libs.result import Error
from src.domain.invoice import InvoiceStatus

INVOICES_PATH = "/dashboard/invoices"

VALIDATION_FAILED = "VALIDATION_FAILED"
PERSISTENCE_FAILED = "PERSISTENCE_FAILED"


class RedirectDTO(BaseModel):
    """Navigation target returned by a successful form mutation"""

    location: str = Field(
        ...,
        description="Path the client is sent to"
    )


class MessageDTO(BaseModel):
    """Confirmation returned by mutations that do not redirect"""

    message: str


class FormState(BaseModel):
    """
    State rendered back to an invoice form

    Built fresh for every response so no two requests share an errors
    mapping.
    """

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "errors": {"customerId": ["Please select a customer."]},
                "message": "Missing Fields. Failed to Create Invoice.",
            }
        }
    )

    errors: Dict[str, List[str]] = Field(
        default_factory=dict,
        description="Messages per form field"
    )

    message: Optional[str] = Field(
        default=None,
        description="Summary banner message"
    )

    @classmethod
    def from_error(cls, error: Error) -> "FormState":
        return cls(errors=dict(error.details), message=error.message)


class InvoiceResponseDTO(BaseModel):
    """Invoice row as rendered on the invoices page"""

    model_config = ConfigDict(from_attributes=True)

    id: str
    customer_id: str
    amount: int = Field(
        ...,
        description="Amount in minor units (cents)"
    )
    status: InvoiceStatus
    date: datetime.date
