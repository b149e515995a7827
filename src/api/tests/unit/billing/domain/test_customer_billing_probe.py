"""Unit tests for CustomerBilling domain probe."""

from decimal import Decimal
from unittest.mock import MagicMock

import structlog

from billing.domain.observability import (
    CustomerBillingProbe,
    DefaultCustomerBillingProbe,
)


class TestDefaultCustomerBillingProbeInit:
    def test_creates_with_default_logger(self):
        probe = DefaultCustomerBillingProbe()

        assert probe._logger is not None

    def test_creates_with_custom_logger(self):
        custom_logger = structlog.get_logger()
        probe = DefaultCustomerBillingProbe(logger=custom_logger)

        assert probe._logger is custom_logger

    def test_is_usable_as_protocol(self):
        probe: CustomerBillingProbe = DefaultCustomerBillingProbe()

        probe.invoice_closed(customer_id="C100", invoice_id="INV-1")


class TestCustomerBillingProbeLogging:
    """Tests for structured log output."""

    def test_logs_payment_applied_at_info_level(self):
        mock_logger = MagicMock()
        probe = DefaultCustomerBillingProbe(logger=mock_logger)

        probe.payment_applied(
            customer_id="C100",
            invoice_id="INV-1",
            amount=Decimal("40.00"),
            previous_balance=Decimal("100.00"),
            new_balance=Decimal("60.00"),
        )

        mock_logger.info.assert_called_once()
        call_args = mock_logger.info.call_args
        assert call_args[0][0] == "payment_applied"
        assert call_args[1]["invoice_id"] == "INV-1"
        assert call_args[1]["amount"] == "40.00"
        assert call_args[1]["new_balance"] == "60.00"

    def test_logs_invoice_reactivated(self):
        mock_logger = MagicMock()
        probe = DefaultCustomerBillingProbe(logger=mock_logger)

        probe.invoice_reactivated(customer_id="C100", invoice_id="INV-2")

        mock_logger.info.assert_called_once_with(
            "invoice_reactivated", customer_id="C100", invoice_id="INV-2"
        )

    def test_logs_integrity_violation_at_warning_level(self):
        mock_logger = MagicMock()
        probe = DefaultCustomerBillingProbe(logger=mock_logger)

        probe.integrity_violated(
            customer_id="C100", invoice_id="INV-9", reason="customer_mismatch"
        )

        mock_logger.warning.assert_called_once_with(
            "billing_integrity_violated",
            customer_id="C100",
            invoice_id="INV-9",
            reason="customer_mismatch",
        )
        mock_logger.info.assert_not_called()
