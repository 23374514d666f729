"""Invoice form validation

Declarative rules for the raw string fields submitted by the invoice
create and edit forms.
"""

from decimal import Decimal, InvalidOperation, ROUND_HALF_UP, localcontext
from typing import Any, Dict, List, Mapping
from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator
from pydantic_core import PydanticCustomError
from libs.result import Error, Result, Return
from src.domain.invoice import InvoiceStatus

CUSTOMER_MESSAGE = "Please select a customer."
AMOUNT_MESSAGE = "Please enter an amount greater than $0."
STATUS_MESSAGE = "Please select an invoice status."
AMOUNT_TOO_LARGE_MESSAGE = "Please enter an amount no greater than $21,474,836.47."

# Upper bound of the SQL INTEGER amount column
MAX_AMOUNT_IN_CENTS = 2**31 - 1
MAX_AMOUNT = Decimal(MAX_AMOUNT_IN_CENTS) / 100

_CENT = Decimal("1")


def to_minor_units(amount: Decimal) -> int:
    """Convert a major-unit amount to integer cents, rounding half up"""
    digits = amount.as_tuple().digits
    with localcontext() as ctx:
        # Exact for any finite amount, however many digits it carries
        ctx.prec = max(ctx.prec, len(digits) + 3, amount.adjusted() + 4)
        return int((amount * 100).quantize(_CENT, rounding=ROUND_HALF_UP))


class InvoiceForm(BaseModel):
    """
    Coerced invoice form fields

    Fields default to None and are validated anyway, so a missing field
    reports its own message instead of a generic "Field required".
    id, date and any other submitted key are ignored.
    """

    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    customer_id: str = Field(default=None, alias="customerId", validate_default=True)
    amount: Decimal = Field(default=None, validate_default=True)
    status: InvoiceStatus = Field(default=None, validate_default=True)

    @field_validator("customer_id", mode="before")
    @classmethod
    def validate_customer_id(cls, v: Any) -> str:
        if not isinstance(v, str) or not v.strip():
            raise PydanticCustomError("invalid_type", CUSTOMER_MESSAGE)
        return v.strip()

    @field_validator("amount", mode="before")
    @classmethod
    def coerce_amount(cls, v: Any) -> Decimal:
        if isinstance(v, (int, float, Decimal)) and not isinstance(v, bool):
            raw = str(v)
        elif isinstance(v, str):
            raw = v.strip() or "0"
        elif v is None:
            raw = "0"
        else:
            raise PydanticCustomError("invalid_type", AMOUNT_MESSAGE)

        try:
            value = Decimal(raw)
        except InvalidOperation:
            raise PydanticCustomError("invalid_type", AMOUNT_MESSAGE)

        if not value.is_finite():
            raise PydanticCustomError("invalid_type", AMOUNT_MESSAGE)
        if value > MAX_AMOUNT:
            raise PydanticCustomError("too_big", AMOUNT_TOO_LARGE_MESSAGE)
        if value <= 0 or to_minor_units(value) <= 0:
            raise PydanticCustomError("too_small", AMOUNT_MESSAGE)
        return value

    @field_validator("status", mode="before")
    @classmethod
    def validate_status(cls, v: Any) -> InvoiceStatus:
        if isinstance(v, InvoiceStatus):
            return v
        if isinstance(v, str):
            for status in InvoiceStatus:
                if v == status.value:
                    return status
        raise PydanticCustomError("invalid_type", STATUS_MESSAGE)

    @property
    def amount_in_cents(self) -> int:
        return to_minor_units(self.amount)


def flatten_errors(exc: ValidationError) -> Dict[str, List[str]]:
    """Group validation messages by form field name, in reported order"""
    field_errors: Dict[str, List[str]] = {}
    for error in exc.errors():
        field = str(error["loc"][0]) if error["loc"] else "__root__"
        field_errors.setdefault(field, []).append(error["msg"])
    return field_errors


def parse_invoice_form(form_data: Mapping[str, Any]) -> Result[InvoiceForm]:
    """
    Validate raw form fields in a single pass

    Every failing field is reported, not just the first one.

    Args:
        form_data: Submitted form fields (customerId, amount, status)

    Returns:
        Result[InvoiceForm]: Coerced fields, or an Error whose details map
        each failing field to its messages
    """
    try:
        form = InvoiceForm.model_validate(
            {key: form_data.get(key) for key in ("customerId", "amount", "status")}
        )
    except ValidationError as e:
        return Return.err(
            Error(
                code="INVALID_FORM",
                message="Invalid invoice form",
                details=flatten_errors(e),
            )
        )
    return Return.ok(form)
