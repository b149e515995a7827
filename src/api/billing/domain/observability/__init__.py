"""Domain-Oriented Observability for Billing domain layer."""

from billing.domain.observability.customer_billing_probe import (
    CustomerBillingProbe,
    DefaultCustomerBillingProbe,
)

__all__ = [
    "CustomerBillingProbe",
    "DefaultCustomerBillingProbe",
]
