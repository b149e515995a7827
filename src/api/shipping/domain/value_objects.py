"""Value objects for the Shipping domain."""

from __future__ import annotations

from enum import StrEnum


class ShipmentField(StrEnum):
    """Change-tracking tags for ShipmentRecord fields."""

    CARRIER = "carrier"
    TRACKING_NUMBER = "tracking_number"
    DELIVERY_ADDRESS = "delivery_address"
    DELIVERY_ACCESS = "delivery_access"
    DELIVERED = "delivered"
    IS_ACTIVE = "is_active"
