"""Pytest configuration and fixtures."""

from datetime import date
from decimal import Decimal

import pytest

from atm_model.models.base import Address
from atm_model.models.banking import Account, Card, Customer, CustomerStatus


@pytest.fixture
def seed() -> int:
    """Fixed seed for reproducible tests."""
    return 42


@pytest.fixture
def sample_address() -> Address:
    """Sample fully populated address."""
    return Address(
        street_address="42 Elm Street",
        city="Springfield",
        state="IL",
        zipcode="62704",
        country="US",
    )


@pytest.fixture
def sample_card() -> Card:
    """Sample card expiring well in the future."""
    return Card(
        card_number="4111111111111111",
        customer_name="Jane Doe",
        card_expiry=date(2099, 12, 31),
        pin="0427",
    )


@pytest.fixture
def sample_account() -> Account:
    """Sample account with a consistent balance pair."""
    return Account("12345", Decimal("100.00"), Decimal("150.00"))


@pytest.fixture
def sample_customer(sample_address: Address) -> Customer:
    """Sample customer without card or account."""
    return Customer(
        name="Jane Doe",
        email="jane@example.com",
        phone="555-1000",
        address=sample_address,
        status=CustomerStatus.ACTIVE,
    )
