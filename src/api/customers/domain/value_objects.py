"""Value objects for the Customers domain."""

from __future__ import annotations

from enum import StrEnum


class CustomerField(StrEnum):
    """Change-tracking tags for CustomerRecord fields."""

    NAME = "name"
    EMAIL = "email"
    BILLING_ADDRESS = "billing_address"
    SHIPPING_ADDRESS = "shipping_address"
    DELIVERY_ACCESS = "delivery_access"
    IS_ACTIVE = "is_active"
