"""CustomerBilling aggregate for Billing context."""

from __future__ import annotations

from dataclasses import dataclass, field
from decimal import Decimal

from billing.domain.aggregates.billing_record import BillingRecord
from billing.domain.exceptions import InvoiceNotFoundError
from billing.domain.observability import (
    CustomerBillingProbe,
    DefaultCustomerBillingProbe,
)
from customers.domain import CustomerRecord
from shared_kernel.addressing import PostalAddress
from shared_kernel.canonical import ReferentialIntegrityError

ZERO = Decimal("0")


@dataclass
class CustomerBilling:
    """Customer together with the invoices issued to them.

    The aggregate has no identity of its own and is rebuilt per use case.
    Validation of individual fields is delegated to the owned records; the
    aggregate enforces that every invoice belongs to its customer.

    Business rules:
    - Every billing record's customer_id equals the customer's id
    - A payment never drives a balance below zero
    - An invoice paid down to zero is closed (deactivated)
    """

    customer: CustomerRecord
    billing_records: list[BillingRecord]
    _probe: CustomerBillingProbe = field(
        default_factory=DefaultCustomerBillingProbe,
        repr=False,
        compare=False,
    )

    def __post_init__(self) -> None:
        """Require both parts, copy the records, then validate."""
        if self.customer is None:
            raise ValueError("Customer is required")
        if self.billing_records is None:
            raise ValueError("Billing records are required")

        self.billing_records = list(self.billing_records)
        self.validate()

    @property
    def address(self) -> PostalAddress:
        """The address billing uses: the customer's billing address."""
        return self.customer.billing_address

    @property
    def has_changes(self) -> bool:
        return self.customer.has_changes or any(
            record.has_changes for record in self.billing_records
        )

    def get_open_balance(self) -> Decimal:
        """Sum the balances of active invoices."""
        return sum(
            (record.balance for record in self.billing_records if record.is_active),
            start=ZERO,
        )

    def get_active_invoices(self) -> list[BillingRecord]:
        return [record for record in self.billing_records if record.is_active]

    def get_inactive_invoices(self) -> list[BillingRecord]:
        return [record for record in self.billing_records if not record.is_active]

    def get_invoice(self, invoice_id: str) -> BillingRecord | None:
        """Return the first invoice with the given id, or None."""
        for record in self.billing_records:
            if record.invoice_id == invoice_id:
                return record
        return None

    def update_address(
        self, street: str, city: str, state: str, postal_code: str
    ) -> None:
        """Update the customer's billing address."""
        self.customer.update_billing_address(street, city, state, postal_code)

    def apply_payment(self, invoice_id: str, amount: Decimal) -> None:
        """Apply a payment against an invoice.

        Overpayment clamps the balance at zero; no credit is kept. An invoice
        whose balance reaches zero is deactivated.

        Args:
            invoice_id: The invoice to pay against
            amount: Payment amount, must be positive

        Raises:
            InvoiceNotFoundError: If the invoice is not part of this aggregate
            ValueError: If amount is zero or negative
        """
        record = self._require_invoice(invoice_id)

        if amount <= 0:
            raise ValueError("Payment amount must be positive.")

        previous_balance = record.balance
        new_balance = max(ZERO, previous_balance - amount)
        record.update_balance(new_balance)

        self._probe.payment_applied(
            customer_id=self.customer.id,
            invoice_id=invoice_id,
            amount=amount,
            previous_balance=previous_balance,
            new_balance=new_balance,
        )

        if new_balance == ZERO and record.is_active:
            record.deactivate()
            self._probe.invoice_closed(
                customer_id=self.customer.id,
                invoice_id=invoice_id,
            )

    def reactivate_invoice(self, invoice_id: str) -> None:
        """Reopen an invoice. Reopening an active invoice is a no-op.

        Raises:
            InvoiceNotFoundError: If the invoice is not part of this aggregate
        """
        record = self._require_invoice(invoice_id)
        if record.is_active:
            return
        record.activate()
        self._probe.invoice_reactivated(
            customer_id=self.customer.id,
            invoice_id=invoice_id,
        )

    def validate(self) -> None:
        """Check addresses and that every invoice belongs to the customer.

        Raises:
            MissingAddressError: If the customer lacks an address
            ValueError: If an address is malformed
            ReferentialIntegrityError: If a record has no customer_id or a
                different one
        """
        self.customer.validate_addresses()

        for record in self.billing_records:
            if not record.customer_id or not record.customer_id.strip():
                self._probe.integrity_violated(
                    customer_id=self.customer.id,
                    invoice_id=record.invoice_id,
                    reason="missing_customer_id",
                )
                raise ReferentialIntegrityError(
                    f"Billing record {record.invoice_id} is missing CustomerId.",
                    record_id=record.invoice_id,
                    customer_id=self.customer.id,
                )
            if record.customer_id != self.customer.id:
                self._probe.integrity_violated(
                    customer_id=self.customer.id,
                    invoice_id=record.invoice_id,
                    reason="customer_mismatch",
                )
                raise ReferentialIntegrityError(
                    f"Billing record {record.invoice_id} does not belong to "
                    f"customer {self.customer.id}.",
                    record_id=record.invoice_id,
                    customer_id=self.customer.id,
                )

    def _require_invoice(self, invoice_id: str) -> BillingRecord:
        record = self.get_invoice(invoice_id)
        if record is None:
            raise InvoiceNotFoundError(invoice_id)
        return record

    def __str__(self) -> str:
        return (
            f"{self.customer.name} ({self.customer.email}) | "
            f"{len(self.billing_records)} invoices, "
            f"open balance {self.get_open_balance():.2f}"
        )
