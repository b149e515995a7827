"""Domain aggregates for Shipping context."""

from shipping.domain.aggregates.customer_shipping import CustomerShipping
from shipping.domain.aggregates.shipment_record import ShipmentRecord

__all__ = [
    "CustomerShipping",
    "ShipmentRecord",
]
