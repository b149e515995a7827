"""Value objects for the Billing domain."""

from __future__ import annotations

from enum import StrEnum


class BillingField(StrEnum):
    """Change-tracking tags for BillingRecord fields."""

    BALANCE = "balance"
    IS_ACTIVE = "is_active"
