"""ShipmentRecord aggregate for Shipping context."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from typing import ClassVar

from shared_kernel.addressing import LocationAccessExtension, PostalAddress
from shared_kernel.canonical import ChangeSet, replace_if_changed
from shipping.domain.value_objects import ShipmentField


@dataclass
class ShipmentRecord:
    """Canonical shipment record.

    A shipment created without a delivery address carries the unspecified
    placeholder address until one is set. Delivery access is optional.
    """

    model_version: ClassVar[str] = "shipment-record/1.0"

    customer_id: str
    shipment_id: str
    tracking_number: str
    carrier: str
    ship_date: datetime
    delivery_address: PostalAddress | None = None
    delivery_access: LocationAccessExtension | None = None
    delivered: bool = False
    is_active: bool = True
    _changes: ChangeSet[ShipmentField] = field(
        default_factory=ChangeSet, repr=False, compare=False
    )

    def __post_init__(self) -> None:
        """Validate required identifiers and default the address."""
        for value, label in (
            (self.customer_id, "CustomerId"),
            (self.shipment_id, "ShipmentId"),
            (self.tracking_number, "Tracking number"),
            (self.carrier, "Carrier"),
        ):
            if not value or not value.strip():
                raise ValueError(f"{label} required")

        if self.delivery_address is None:
            self.delivery_address = PostalAddress.unspecified()

    @property
    def has_changes(self) -> bool:
        return bool(self._changes)

    def get_changes(self) -> tuple[ShipmentField, ...]:
        """Return changed fields in the order they first changed."""
        return self._changes.snapshot()

    def clear_changes(self) -> None:
        self._changes.clear()

    def update_carrier(self, new_carrier: str) -> None:
        """Change the carrier.

        Raises:
            ValueError: If the carrier is blank
        """
        if not new_carrier or not new_carrier.strip():
            raise ValueError("Carrier cannot be empty.")
        if new_carrier != self.carrier:
            self.carrier = new_carrier
            self._changes.record(ShipmentField.CARRIER)

    def update_tracking(self, new_tracking: str) -> None:
        if new_tracking != self.tracking_number:
            self.tracking_number = new_tracking
            self._changes.record(ShipmentField.TRACKING_NUMBER)

    def update_delivery_address(
        self, street: str, city: str, state: str, postal_code: str
    ) -> None:
        """Replace the delivery address if the new one differs.

        Raises:
            ValueError: If the new address is invalid
        """
        candidate = PostalAddress(street, city, state, postal_code)
        self.delivery_address, changed = replace_if_changed(
            self.delivery_address, candidate
        )
        if changed:
            self._changes.record(ShipmentField.DELIVERY_ADDRESS)

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

        Same reconstruct-then-compare strategy as CustomerRecord.
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
            self._changes.record(ShipmentField.DELIVERY_ACCESS)

    def mark_delivered(self) -> None:
        if not self.delivered:
            self.delivered = True
            self._changes.record(ShipmentField.DELIVERED)

    def activate(self) -> None:
        if not self.is_active:
            self.is_active = True
            self._changes.record(ShipmentField.IS_ACTIVE)

    def deactivate(self) -> None:
        if self.is_active:
            self.is_active = False
            self._changes.record(ShipmentField.IS_ACTIVE)

    def __str__(self) -> str:
        return (
            f"{self.shipment_id} | {self.carrier} | {self.tracking_number} | "
            f"Delivered: {self.delivered} | Active: {self.is_active}"
        )
