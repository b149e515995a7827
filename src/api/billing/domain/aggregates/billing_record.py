"""BillingRecord aggregate for Billing context."""

from __future__ import annotations

from dataclasses import dataclass, field
from decimal import Decimal
from typing import ClassVar

from ulid import ULID

from billing.domain.value_objects import BillingField
from shared_kernel.canonical import ChangeSet

PLACEHOLDER_CUSTOMER_ID = "C000"


@dataclass
class BillingRecord:
    """Canonical invoice record.

    customer_id and invoice_id identify the record and are not changed after
    construction. The balance is never negative.
    """

    model_version: ClassVar[str] = "billing-record/1.0"

    customer_id: str
    invoice_id: str
    balance: Decimal = Decimal("0")
    is_active: bool = True
    _changes: ChangeSet[BillingField] = field(
        default_factory=ChangeSet, repr=False, compare=False
    )

    def __post_init__(self) -> None:
        """Validate business rules after initialization."""
        if not self.customer_id or not self.customer_id.strip():
            raise ValueError("CustomerId cannot be null or empty.")
        if not self.invoice_id or not self.invoice_id.strip():
            raise ValueError("InvoiceId cannot be null or empty.")
        if self.balance < 0:
            raise ValueError("Balance cannot be negative.")

    @classmethod
    def placeholder(cls) -> BillingRecord:
        """Create a zero-balance record with a generated invoice id."""
        return cls(
            customer_id=PLACEHOLDER_CUSTOMER_ID,
            invoice_id=f"INV-{ULID()}",
        )

    @property
    def has_changes(self) -> bool:
        return bool(self._changes)

    def get_changes(self) -> tuple[BillingField, ...]:
        """Return changed fields in the order they first changed."""
        return self._changes.snapshot()

    def clear_changes(self) -> None:
        self._changes.clear()

    def update_balance(self, new_balance: Decimal) -> None:
        """Set the outstanding balance.

        Raises:
            ValueError: If the balance is negative
        """
        if new_balance < 0:
            raise ValueError("Balance cannot be negative.")
        if new_balance != self.balance:
            self.balance = new_balance
            self._changes.record(BillingField.BALANCE)

    def activate(self) -> None:
        if not self.is_active:
            self.is_active = True
            self._changes.record(BillingField.IS_ACTIVE)

    def deactivate(self) -> None:
        if self.is_active:
            self.is_active = False
            self._changes.record(BillingField.IS_ACTIVE)

    def __str__(self) -> str:
        return (
            f"{self.invoice_id} | Customer: {self.customer_id} | "
            f"Balance: {self.balance:.2f} | Active: {self.is_active}"
        )
