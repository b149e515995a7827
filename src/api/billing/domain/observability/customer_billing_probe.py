"""Observability probes for CustomerBilling aggregate.

Domain probes for customer billing following the Domain Oriented
Observability pattern. Probes emit structured logs with domain-specific
context for payments and invoice lifecycle changes.

See: https://martinfowler.com/articles/domain-oriented-observability.html
"""

from __future__ import annotations

from decimal import Decimal
from typing import Protocol

import structlog


class CustomerBillingProbe(Protocol):
    """Protocol for customer billing aggregate observability probes."""

    def payment_applied(
        self,
        customer_id: str,
        invoice_id: str,
        amount: Decimal,
        previous_balance: Decimal,
        new_balance: Decimal,
    ) -> None:
        """Probe emitted when a payment is applied to an invoice.

        Args:
            customer_id: The owning customer
            invoice_id: The invoice paid against
            amount: The payment amount as requested
            previous_balance: Balance before the payment
            new_balance: Balance after clamping at zero
        """
        ...

    def invoice_closed(self, customer_id: str, invoice_id: str) -> None:
        """Probe emitted when a payment settles an invoice in full."""
        ...

    def invoice_reactivated(self, customer_id: str, invoice_id: str) -> None:
        """Probe emitted when an invoice is reactivated."""
        ...

    def integrity_violated(
        self,
        customer_id: str,
        invoice_id: str,
        reason: str,
    ) -> None:
        """Probe emitted when a billing record fails referential validation."""
        ...


class DefaultCustomerBillingProbe:
    """Default implementation of CustomerBillingProbe using structlog."""

    def __init__(
        self,
        logger: structlog.stdlib.BoundLogger | None = None,
    ) -> None:
        self._logger = logger or structlog.get_logger()

    def payment_applied(
        self,
        customer_id: str,
        invoice_id: str,
        amount: Decimal,
        previous_balance: Decimal,
        new_balance: Decimal,
    ) -> None:
        """Log payment with structured context."""
        self._logger.info(
            "payment_applied",
            customer_id=customer_id,
            invoice_id=invoice_id,
            amount=str(amount),
            previous_balance=str(previous_balance),
            new_balance=str(new_balance),
        )

    def invoice_closed(self, customer_id: str, invoice_id: str) -> None:
        """Log invoice settlement."""
        self._logger.info(
            "invoice_closed",
            customer_id=customer_id,
            invoice_id=invoice_id,
        )

    def invoice_reactivated(self, customer_id: str, invoice_id: str) -> None:
        """Log invoice reactivation."""
        self._logger.info(
            "invoice_reactivated",
            customer_id=customer_id,
            invoice_id=invoice_id,
        )

    def integrity_violated(
        self,
        customer_id: str,
        invoice_id: str,
        reason: str,
    ) -> None:
        """Log referential integrity failure as a warning."""
        self._logger.warning(
            "billing_integrity_violated",
            customer_id=customer_id,
            invoice_id=invoice_id,
            reason=reason,
        )
