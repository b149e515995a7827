"""Domain layer for the Billing context."""

from billing.domain.aggregates import BillingRecord, CustomerBilling
from billing.domain.exceptions import InvoiceNotFoundError
from billing.domain.value_objects import BillingField

__all__ = [
    "BillingField",
    "BillingRecord",
    "CustomerBilling",
    "InvoiceNotFoundError",
]
