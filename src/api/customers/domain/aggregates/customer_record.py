"""CustomerRecord aggregate for Customers context."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import ClassVar

from ulid import ULID

from customers.domain.value_objects import CustomerField
from shared_kernel.addressing import LocationAccessExtension, PostalAddress
from shared_kernel.canonical import (
    ChangeSet,
    MissingAddressError,
    replace_if_changed,
)

PLACEHOLDER_TEXT = "TBD"
PLACEHOLDER_STATE = "NA"
PLACEHOLDER_POSTAL_CODE = "00000"


def _require_text(value: str | None, label: str) -> None:
    if value is None or not value.strip():
        raise ValueError(f"{label} cannot be null or empty.")


@dataclass
class CustomerRecord:
    """Canonical customer record.

    The record exclusively owns its addresses and its delivery access.
    Addresses are immutable and are replaced wholesale; delivery access is
    replaced only when a freshly built candidate differs from the current one.

    Business rules:
    - id, name and email are never blank
    - billing and shipping addresses are always present and valid
    - every effective mutation records its field in the change set, once
    """

    model_version: ClassVar[str] = "customer-record/1.0"

    id: str
    name: str
    email: str
    billing_address: PostalAddress
    shipping_address: PostalAddress
    delivery_access: LocationAccessExtension | None
    is_active: bool = True
    _changes: ChangeSet[CustomerField] = field(
        default_factory=ChangeSet, repr=False, compare=False
    )

    def __post_init__(self) -> None:
        """Validate business rules after initialization."""
        _require_text(self.id, "Id")
        _require_text(self.name, "Name")
        _require_text(self.email, "Email")

        if self.billing_address is None:
            raise ValueError("Billing address is required.")
        if self.shipping_address is None:
            raise ValueError("Shipping address is required.")
        if self.delivery_access is None:
            raise ValueError(f"Customer {self.id} requires delivery access.")

        self.validate_addresses()

    @classmethod
    def placeholder(cls) -> CustomerRecord:
        """Create a record filled with placeholder values.

        Intended for deserialization and assembly scenarios where the real
        values are applied afterwards. The id is generated.
        """
        customer_id = f"C{ULID()}"
        address = PostalAddress(
            street=PLACEHOLDER_TEXT,
            city=PLACEHOLDER_TEXT,
            state=PLACEHOLDER_STATE,
            postal_code=PLACEHOLDER_POSTAL_CODE,
        )
        return cls(
            id=customer_id,
            name=PLACEHOLDER_TEXT,
            email=PLACEHOLDER_TEXT,
            billing_address=address,
            shipping_address=address,
            delivery_access=LocationAccessExtension(customer_id),
        )

    @property
    def has_changes(self) -> bool:
        return bool(self._changes)

    def get_changes(self) -> tuple[CustomerField, ...]:
        """Return changed fields in the order they first changed."""
        return self._changes.snapshot()

    def clear_changes(self) -> None:
        self._changes.clear()

    def change_name(self, new_name: str) -> None:
        """Rename the customer.

        Raises:
            ValueError: If the name is blank
        """
        if not new_name or not new_name.strip():
            raise ValueError("Name cannot be empty.")
        if new_name != self.name:
            self.name = new_name
            self._changes.record(CustomerField.NAME)

    def change_email(self, new_email: str) -> None:
        """Change the contact email.

        Raises:
            ValueError: If the email is blank
        """
        if not new_email or not new_email.strip():
            raise ValueError("Email cannot be empty.")
        if new_email != self.email:
            self.email = new_email
            self._changes.record(CustomerField.EMAIL)

    def update_billing_address(
        self, street: str, city: str, state: str, postal_code: str
    ) -> None:
        """Replace the billing address if the new one differs.

        Raises:
            ValueError: If the new address is invalid
        """
        candidate = PostalAddress(street, city, state, postal_code)
        self.billing_address, changed = replace_if_changed(
            self.billing_address, candidate
        )
        if changed:
            self._changes.record(CustomerField.BILLING_ADDRESS)

    def update_shipping_address(
        self, street: str, city: str, state: str, postal_code: str
    ) -> None:
        """Replace the shipping address if the new one differs.

        Raises:
            ValueError: If the new address is invalid
        """
        candidate = PostalAddress(street, city, state, postal_code)
        self.shipping_address, changed = replace_if_changed(
            self.shipping_address, candidate
        )
        if changed:
            self._changes.record(CustomerField.SHIPPING_ADDRESS)

    def attach_delivery_access(self, access: LocationAccessExtension | None) -> None:
        """Attach or detach delivery access without recording a change.

        Used when assembling a record from stored parts.
        """
        self.delivery_access = access

    def update_delivery_access(
        self,
        parent_id: str | None,
        instructions: str | None,
        access_code: str | None,
        window_start: str | None,
        window_end: str | None,
        contact_name: str | None,
        contact_phone: str | None,
    ) -> None:
        """Replace delivery access when the described state differs.

        A full candidate is built and compared with the current extension.
        If nothing differs the existing instance is kept.
        """
        candidate = LocationAccessExtension.build(
            parent_id,
            instructions,
            access_code,
            window_start,
            window_end,
            contact_name,
            contact_phone,
        )
        self.delivery_access, changed = replace_if_changed(
            self.delivery_access, candidate
        )
        if changed:
            self._changes.record(CustomerField.DELIVERY_ACCESS)

    def validate_addresses(self) -> None:
        """Check that both addresses are present and valid.

        Raises:
            MissingAddressError: If either address is absent
            ValueError: If either address fails its own validation
        """
        if self.billing_address is None:
            raise MissingAddressError("Billing address missing.", "billing")
        if self.shipping_address is None:
            raise MissingAddressError("Shipping address missing.", "shipping")
        self.billing_address.validate()
        self.shipping_address.validate()

    def activate(self) -> None:
        if not self.is_active:
            self.is_active = True
            self._changes.record(CustomerField.IS_ACTIVE)

    def deactivate(self) -> None:
        if self.is_active:
            self.is_active = False
            self._changes.record(CustomerField.IS_ACTIVE)

    def __str__(self) -> str:
        return (
            f"{self.name} ({self.email}) | Billing: {self.billing_address} | "
            f"Shipping: {self.shipping_address}"
        )
