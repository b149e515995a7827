"""Domain layer for the Customers context."""

from customers.domain.aggregates import CustomerRecord
from customers.domain.value_objects import CustomerField

__all__ = [
    "CustomerField",
    "CustomerRecord",
]
