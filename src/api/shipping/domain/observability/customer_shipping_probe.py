"""Observability probes for CustomerShipping aggregate.

Probes emit structured logs for delivery state and delivery-access
lifecycle changes.

See: https://martinfowler.com/articles/domain-oriented-observability.html
"""

from __future__ import annotations

from typing import Protocol

import structlog


class CustomerShippingProbe(Protocol):
    """Protocol for customer shipping aggregate observability probes."""

    def shipment_delivered(
        self,
        customer_id: str,
        shipment_id: str,
        carrier: str,
        tracking_number: str,
    ) -> None:
        """Probe emitted when a shipment is marked delivered.

        Args:
            customer_id: The owning customer
            shipment_id: The delivered shipment
            carrier: Carrier that handled the shipment
            tracking_number: Carrier tracking number
        """
        ...

    def delivery_access_toggled(self, customer_id: str, is_active: bool) -> None:
        """Probe emitted when the customer's delivery access is (de)activated."""
        ...

    def integrity_violated(
        self,
        customer_id: str,
        shipment_id: str,
        reason: str,
    ) -> None:
        """Probe emitted when a shipment fails referential validation."""
        ...


class DefaultCustomerShippingProbe:
    """Default implementation of CustomerShippingProbe using structlog."""

    def __init__(
        self,
        logger: structlog.stdlib.BoundLogger | None = None,
    ) -> None:
        self._logger = logger or structlog.get_logger()

    def shipment_delivered(
        self,
        customer_id: str,
        shipment_id: str,
        carrier: str,
        tracking_number: str,
    ) -> None:
        """Log delivery with structured context."""
        self._logger.info(
            "shipment_delivered",
            customer_id=customer_id,
            shipment_id=shipment_id,
            carrier=carrier,
            tracking_number=tracking_number,
        )

    def delivery_access_toggled(self, customer_id: str, is_active: bool) -> None:
        """Log delivery access activation state."""
        self._logger.info(
            "delivery_access_toggled",
            customer_id=customer_id,
            is_active=is_active,
        )

    def integrity_violated(
        self,
        customer_id: str,
        shipment_id: str,
        reason: str,
    ) -> None:
        """Log referential integrity failure as a warning."""
        self._logger.warning(
            "shipping_integrity_violated",
            customer_id=customer_id,
            shipment_id=shipment_id,
            reason=reason,
        )
