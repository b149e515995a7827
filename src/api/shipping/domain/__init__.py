"""Domain layer for the Shipping context."""

from shipping.domain.aggregates import CustomerShipping, ShipmentRecord
from shipping.domain.exceptions import ShipmentNotFoundError
from shipping.domain.value_objects import ShipmentField

__all__ = [
    "CustomerShipping",
    "ShipmentField",
    "ShipmentNotFoundError",
    "ShipmentRecord",
]
