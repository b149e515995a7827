"""Domain-Oriented Observability for Shipping domain layer."""

from shipping.domain.observability.customer_shipping_probe import (
    CustomerShippingProbe,
    DefaultCustomerShippingProbe,
)

__all__ = [
    "CustomerShippingProbe",
    "DefaultCustomerShippingProbe",
]
