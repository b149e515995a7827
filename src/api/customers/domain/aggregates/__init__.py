"""Domain aggregates for Customers context."""

from customers.domain.aggregates.customer_record import CustomerRecord

__all__ = [
    "CustomerRecord",
]
