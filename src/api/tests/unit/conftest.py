"""Unit test fixtures for the canonical model."""

from decimal import Decimal

import pytest
import structlog

from billing.domain import BillingRecord
from customers.domain import CustomerRecord
from infrastructure.logging import configure_logging
from infrastructure.settings import Settings
from shared_kernel.addressing import LocationAccessExtension, PostalAddress


@pytest.fixture(autouse=True, scope="session")
def _logging():
    """Configure structlog for the test session, keeping info events quiet."""
    configure_logging(Settings(_env_file=None, log_level="warning"))
    yield
    structlog.reset_defaults()


@pytest.fixture
def billing_address():
    """Provide a valid billing address."""
    return PostalAddress("100 Main St", "Springfield", "IL", "62701")


@pytest.fixture
def shipping_address():
    """Provide a valid shipping address."""
    return PostalAddress("42 Dock Rd", "Portland", "OR", "97201")


@pytest.fixture
def customer(billing_address, shipping_address):
    """Provide a clean customer record with delivery access."""
    return CustomerRecord(
        id="C100",
        name="Acme Corp",
        email="ap@acme.test",
        billing_address=billing_address,
        shipping_address=shipping_address,
        delivery_access=LocationAccessExtension.rehydrate(
            parent_id="C100",
            instructions="Leave at loading dock",
            access_code="4321",
            window_start="08:00",
            window_end="17:00",
            contact_name="Dana",
            contact_phone="555-0100",
            is_active=True,
        ),
    )


@pytest.fixture
def make_invoice():
    """Factory for billing records owned by customer C100."""

    def _make(
        invoice_id: str,
        balance: str = "100",
        is_active: bool = True,
        customer_id: str = "C100",
    ) -> BillingRecord:
        return BillingRecord(
            customer_id=customer_id,
            invoice_id=invoice_id,
            balance=Decimal(balance),
            is_active=is_active,
        )

    return _make
