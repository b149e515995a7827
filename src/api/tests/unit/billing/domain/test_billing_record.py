"""Unit tests for BillingRecord aggregate."""

from decimal import Decimal

import pytest

from billing.domain import BillingField, BillingRecord


class TestBillingRecordCreation:
    """Tests for BillingRecord construction."""

    def test_creates_clean(self, make_invoice):
        record = make_invoice("INV-1")

        assert record.balance == Decimal("100")
        assert record.is_active is True
        assert record.has_changes is False
        assert record.model_version == "billing-record/1.0"

    @pytest.mark.parametrize("customer_id", ["", "  ", None])
    def test_rejects_blank_customer_id(self, customer_id):
        with pytest.raises(ValueError, match="CustomerId"):
            BillingRecord(customer_id=customer_id, invoice_id="INV-1")

    def test_rejects_blank_invoice_id(self):
        with pytest.raises(ValueError, match="InvoiceId"):
            BillingRecord(customer_id="C100", invoice_id=" ")

    def test_rejects_negative_balance(self):
        with pytest.raises(ValueError, match="Balance cannot be negative"):
            BillingRecord(customer_id="C100", invoice_id="INV-1", balance=Decimal("-5"))

    def test_placeholder_has_zero_balance(self):
        record = BillingRecord.placeholder()

        assert record.customer_id == "C000"
        assert record.invoice_id.startswith("INV-")
        assert record.balance == Decimal("0")


class TestUpdateBalance:
    """Tests for BillingRecord.update_balance()."""

    def test_records_balance_change(self, make_invoice):
        record = make_invoice("INV-1")

        record.update_balance(Decimal("60"))

        assert record.balance == Decimal("60")
        assert record.get_changes() == (BillingField.BALANCE,)

    def test_repeated_changes_recorded_once(self, make_invoice):
        record = make_invoice("INV-1")

        record.update_balance(Decimal("60"))
        record.update_balance(Decimal("20"))

        assert record.get_changes() == ("balance",)

    def test_same_balance_is_noop(self, make_invoice):
        record = make_invoice("INV-1")

        record.update_balance(Decimal("100.00"))

        assert record.has_changes is False

    def test_zero_is_allowed(self, make_invoice):
        record = make_invoice("INV-1")

        record.update_balance(Decimal("0"))

        assert record.balance == Decimal("0")

    def test_negative_rejected(self, make_invoice):
        record = make_invoice("INV-1")

        with pytest.raises(ValueError, match="negative"):
            record.update_balance(Decimal("-0.01"))

        assert record.has_changes is False


class TestLifecycle:
    """Tests for activate() and deactivate()."""

    def test_deactivate_records_is_active(self, make_invoice):
        record = make_invoice("INV-1")

        record.deactivate()

        assert record.is_active is False
        assert record.get_changes() == (BillingField.IS_ACTIVE,)

    def test_activate_inactive_record(self, make_invoice):
        record = make_invoice("INV-1", is_active=False)

        record.activate()

        assert record.is_active is True
        assert record.get_changes() == (BillingField.IS_ACTIVE,)

    def test_clear_changes(self, make_invoice):
        record = make_invoice("INV-1")
        record.deactivate()

        record.clear_changes()

        assert record.has_changes is False
