"""Unit tests for invoice form validation"""

from decimal import Decimal

from src.app.use_cases.invoices.schemas import (
    AMOUNT_MESSAGE,
    AMOUNT_TOO_LARGE_MESSAGE,
    CUSTOMER_MESSAGE,
    STATUS_MESSAGE,
    parse_invoice_form,
    to_minor_units,
)
from src.domain.invoice import InvoiceStatus


class TestValidForm:
    """Test coercion of valid submissions"""

    def test_valid_form_is_coerced(self):
        # Act
        result = parse_invoice_form(
            {"customerId": "cust_1", "amount": "19.99", "status": "pending"}
        )

        # Assert
        assert result.is_ok()
        form = result.value
        assert form.customer_id == "cust_1"
        assert form.amount == Decimal("19.99")
        assert form.amount_in_cents == 1999
        assert form.status == InvoiceStatus.PENDING

    def test_paid_status_accepted(self):
        result = parse_invoice_form({"customerId": "c", "amount": "5", "status": "paid"})

        assert result.is_ok()
        assert result.value.status == InvoiceStatus.PAID

    def test_id_and_date_are_ignored(self):
        """id and date are never taken from user input"""
        result = parse_invoice_form(
            {
                "id": "forged-id",
                "date": "1999-01-01",
                "customerId": "c",
                "amount": "10",
                "status": "paid",
            }
        )

        assert result.is_ok()
        dumped = result.value.model_dump()
        assert "id" not in dumped
        assert "date" not in dumped


class TestInvalidForm:
    """Test field-level failures"""

    def test_empty_customer(self):
        result = parse_invoice_form({"customerId": "", "amount": "50", "status": "pending"})

        assert result.is_err()
        assert result.error.details == {"customerId": [CUSTOMER_MESSAGE]}

    def test_missing_customer(self):
        result = parse_invoice_form({"amount": "50", "status": "pending"})

        assert result.error.details == {"customerId": [CUSTOMER_MESSAGE]}

    def test_zero_amount(self):
        result = parse_invoice_form({"customerId": "c", "amount": "0", "status": "pending"})

        assert result.error.details == {"amount": [AMOUNT_MESSAGE]}

    def test_negative_amount(self):
        result = parse_invoice_form({"customerId": "c", "amount": "-3", "status": "pending"})

        assert result.error.details == {"amount": [AMOUNT_MESSAGE]}

    def test_non_numeric_amount(self):
        result = parse_invoice_form({"customerId": "c", "amount": "abc", "status": "pending"})

        assert result.error.details == {"amount": [AMOUNT_MESSAGE]}

    def test_blank_amount(self):
        result = parse_invoice_form({"customerId": "c", "amount": "", "status": "pending"})

        assert result.error.details == {"amount": [AMOUNT_MESSAGE]}

    def test_amount_rounding_to_zero_cents(self):
        """Stored amount must stay > 0 in minor units"""
        result = parse_invoice_form({"customerId": "c", "amount": "0.001", "status": "paid"})

        assert result.error.details == {"amount": [AMOUNT_MESSAGE]}

    def test_amount_beyond_column_range(self):
        """Oversized amounts are field errors, not decimal exceptions"""
        for amount in ("1e30", "9" * 27, "21474836.48"):
            result = parse_invoice_form({"customerId": "c", "amount": amount, "status": "paid"})

            assert result.is_err()
            assert result.error.details == {"amount": [AMOUNT_TOO_LARGE_MESSAGE]}

    def test_largest_amount_accepted(self):
        result = parse_invoice_form(
            {"customerId": "c", "amount": "21474836.47", "status": "paid"}
        )

        assert result.is_ok()
        assert result.value.amount_in_cents == 2**31 - 1

    def test_unknown_status(self):
        result = parse_invoice_form({"customerId": "c", "amount": "10", "status": "unknown"})

        assert result.error.details == {"status": [STATUS_MESSAGE]}

    def test_status_is_case_sensitive(self):
        result = parse_invoice_form({"customerId": "c", "amount": "10", "status": "PAID"})

        assert result.error.details == {"status": [STATUS_MESSAGE]}

    def test_all_failures_reported_together(self):
        """Validation does not stop at the first failing field"""
        result = parse_invoice_form({})

        assert result.is_err()
        assert result.error.details == {
            "customerId": [CUSTOMER_MESSAGE],
            "amount": [AMOUNT_MESSAGE],
            "status": [STATUS_MESSAGE],
        }


class TestMinorUnits:
    def test_exact_conversion(self):
        assert to_minor_units(Decimal("19.99")) == 1999
        assert to_minor_units(Decimal("50")) == 5000

    def test_half_cent_rounds_up(self):
        assert to_minor_units(Decimal("10.005")) == 1001

    def test_many_digits_convert_exactly(self):
        assert to_minor_units(Decimal("9" * 27)) == int("9" * 27) * 100
        assert to_minor_units(Decimal("1e30")) == 10**32
