"""Addressing value objects shared by customers, billing and shipping."""

from shared_kernel.addressing.location_access import (
    UNASSIGNED_PARENT_ID,
    LocationAccessExtension,
)
from shared_kernel.addressing.value_objects import PostalAddress

__all__ = [
    "LocationAccessExtension",
    "PostalAddress",
    "UNASSIGNED_PARENT_ID",
]
