"""Domain aggregates for Billing context."""

from billing.domain.aggregates.billing_record import BillingRecord
from billing.domain.aggregates.customer_billing import CustomerBilling

__all__ = [
    "BillingRecord",
    "CustomerBilling",
]
