"""CustomerShipping aggregate for Shipping context."""

from __future__ import annotations

from dataclasses import dataclass, field

from customers.domain import CustomerRecord
from shared_kernel.addressing import LocationAccessExtension, PostalAddress
from shared_kernel.canonical import ReferentialIntegrityError
from shipping.domain.aggregates.shipment_record import ShipmentRecord
from shipping.domain.exceptions import ShipmentNotFoundError
from shipping.domain.observability import (
    CustomerShippingProbe,
    DefaultCustomerShippingProbe,
)


@dataclass
class CustomerShipping:
    """Customer together with the shipments sent to them.

    Unlike CustomerBilling, a missing shipment collection is accepted and
    treated as empty, and referential validation only runs on demand.

    Customer-level edits (shipping address, name, delivery access) are
    delegated to the owned CustomerRecord.
    """

    customer: CustomerRecord
    shipments: list[ShipmentRecord] = field(default_factory=list)
    _probe: CustomerShippingProbe = field(
        default_factory=DefaultCustomerShippingProbe,
        repr=False,
        compare=False,
    )

    def __post_init__(self) -> None:
        if self.customer is None:
            raise ValueError("Customer is required")
        # None is accepted and treated as no shipments
        self.shipments = list(self.shipments) if self.shipments is not None else []

    @property
    def address(self) -> PostalAddress:
        """The address shipping uses: the customer's shipping address."""
        return self.customer.shipping_address

    @property
    def delivery_access(self) -> LocationAccessExtension | None:
        return self.customer.delivery_access

    @property
    def has_changes(self) -> bool:
        return self.customer.has_changes or any(
            shipment.has_changes for shipment in self.shipments
        )

    def get_delivered(self) -> list[ShipmentRecord]:
        return [shipment for shipment in self.shipments if shipment.delivered]

    def get_in_transit(self) -> list[ShipmentRecord]:
        return [shipment for shipment in self.shipments if not shipment.delivered]

    def get_shipment(self, shipment_id: str) -> ShipmentRecord | None:
        """Return the first shipment with the given id, or None."""
        for shipment in self.shipments:
            if shipment.shipment_id == shipment_id:
                return shipment
        return None

    def mark_shipment_delivered(self, shipment_id: str) -> None:
        """Mark a shipment as delivered.

        Raises:
            ShipmentNotFoundError: If the shipment is not part of this aggregate
        """
        shipment = self.get_shipment(shipment_id)
        if shipment is None:
            raise ShipmentNotFoundError(shipment_id)

        if shipment.delivered:
            return

        shipment.mark_delivered()
        self._probe.shipment_delivered(
            customer_id=self.customer.id,
            shipment_id=shipment_id,
            carrier=shipment.carrier,
            tracking_number=shipment.tracking_number,
        )

    def update_address(
        self, street: str, city: str, state: str, postal_code: str
    ) -> None:
        """Update the customer's shipping address."""
        self.customer.update_shipping_address(street, city, state, postal_code)

    def update_customer_name(self, new_name: str) -> None:
        self.customer.change_name(new_name)

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
        """Update the customer's delivery access."""
        self.customer.update_delivery_access(
            parent_id,
            instructions,
            access_code,
            window_start,
            window_end,
            contact_name,
            contact_phone,
        )

    def activate_access(self) -> None:
        """Activate the customer's delivery access, if any."""
        access = self.customer.delivery_access
        if access is None or access.is_active:
            return
        access.activate()
        self._probe.delivery_access_toggled(
            customer_id=self.customer.id, is_active=True
        )

    def deactivate_access(self) -> None:
        """Deactivate the customer's delivery access, if any."""
        access = self.customer.delivery_access
        if access is None or not access.is_active:
            return
        access.deactivate()
        self._probe.delivery_access_toggled(
            customer_id=self.customer.id, is_active=False
        )

    def validate(self) -> None:
        """Check addresses and that every shipment belongs to the customer.

        Raises:
            MissingAddressError: If the customer lacks an address
            ValueError: If an address is malformed
            ReferentialIntegrityError: If a shipment has no customer_id or a
                different one
        """
        self.customer.validate_addresses()

        for shipment in self.shipments:
            if not shipment.customer_id or not shipment.customer_id.strip():
                self._probe.integrity_violated(
                    customer_id=self.customer.id,
                    shipment_id=shipment.shipment_id,
                    reason="missing_customer_id",
                )
                raise ReferentialIntegrityError(
                    f"Shipment {shipment.shipment_id} is missing CustomerId.",
                    record_id=shipment.shipment_id,
                    customer_id=self.customer.id,
                )
            if shipment.customer_id != self.customer.id:
                self._probe.integrity_violated(
                    customer_id=self.customer.id,
                    shipment_id=shipment.shipment_id,
                    reason="customer_mismatch",
                )
                raise ReferentialIntegrityError(
                    f"Shipment {shipment.shipment_id} does not belong to "
                    f"customer {self.customer.id}.",
                    record_id=shipment.shipment_id,
                    customer_id=self.customer.id,
                )

    def __str__(self) -> str:
        access = self.customer.delivery_access
        instructions = access.instructions if access is not None else None
        return (
            f"{self.customer.name} ({self.customer.email}) | "
            f"{len(self.get_delivered())}/{len(self.shipments)} delivered | "
            f"Address: {self.customer.shipping_address} | "
            f"Access: {instructions or 'None'}"
        )
