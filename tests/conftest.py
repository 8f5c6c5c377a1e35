"""Pytest configuration and fixtures for backend-domain tests."""

from datetime import date, datetime, timezone
from unittest.mock import AsyncMock, MagicMock

import pytest

from backend_domain.config.settings import get_settings
from backend_domain.core.shared import ConflictRetryPolicy
from backend_domain.core.value_objects import Address
from backend_domain.infrastructure import InMemoryDomainEventDispatcher, UnitOfWork
from backend_domain.platform.customers.core.entities import Customer
from backend_domain.platform.customers.infrastructure import InMemoryCustomerRepository
from backend_domain.platform.mfa.infrastructure import InMemoryMfaMethodRepository


@pytest.fixture(autouse=True)
def clear_settings_cache():
    """Each test sees settings built from its own environment."""
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def adult_birth_date():
    """Date of birth thirty years ago."""
    today = datetime.now(timezone.utc).date()
    return date(today.year - 30, 1, 1)


@pytest.fixture
def minor_birth_date():
    """Date of birth ten years ago."""
    today = datetime.now(timezone.utc).date()
    return date(today.year - 10, 1, 1)


@pytest.fixture
def sample_address():
    return Address(street="Valiasr St. 12", city="Tehran", postal_code="1969833111", country="Iran")


@pytest.fixture
def pending_customer():
    """Freshly registered customer (status Pending, version 1)."""
    return Customer.create("user-1", "Sara", "Ahmadi", created_by="admin")


@pytest.fixture
def active_customer(adult_birth_date):
    """Active adult customer with email and mobile number; events drained."""
    customer = Customer.create("user-2", "Ali", "Rezaei", created_by="admin")
    customer.set_date_of_birth(adult_birth_date, "admin")
    customer.set_email("ali@acme-corp.com", "admin")
    customer.set_mobile_number("09121234567", "admin")
    customer.activate("admin")
    customer.meta.pull_events()
    return customer


@pytest.fixture
def deleted_customer(pending_customer):
    pending_customer.delete("admin", "requested by user")
    pending_customer.meta.pull_events()
    return pending_customer


@pytest.fixture
def dispatcher():
    return InMemoryDomainEventDispatcher()


@pytest.fixture
def customer_repository():
    return InMemoryCustomerRepository()


@pytest.fixture
def mfa_repository():
    return InMemoryMfaMethodRepository()


@pytest.fixture
def customer_unit_of_work(customer_repository, dispatcher):
    return UnitOfWork([customer_repository], dispatcher)


@pytest.fixture
def mfa_unit_of_work(mfa_repository, dispatcher):
    return UnitOfWork([mfa_repository], dispatcher)


@pytest.fixture
def no_delay_retry_policy():
    return ConflictRetryPolicy(max_attempts=3, initial_delay_ms=0)


@pytest.fixture
def frozen_now():
    return datetime(2025, 1, 15, 12, 0, tzinfo=timezone.utc)


@pytest.fixture
def mock_connection():
    """Mock asyncpg connection."""
    conn = AsyncMock()
    conn.fetchrow = AsyncMock()
    conn.fetch = AsyncMock()
    conn.fetchval = AsyncMock()
    conn.execute = AsyncMock(return_value="INSERT 0 1")

    transaction = MagicMock()
    transaction.__aenter__ = AsyncMock(return_value=None)
    transaction.__aexit__ = AsyncMock(return_value=False)
    conn.transaction = MagicMock(return_value=transaction)
    return conn


@pytest.fixture
def mock_pool(mock_connection):
    """Mock asyncpg pool whose acquire() yields ``mock_connection``."""
    acquire_context = MagicMock()
    acquire_context.__aenter__ = AsyncMock(return_value=mock_connection)
    acquire_context.__aexit__ = AsyncMock(return_value=False)

    pool = MagicMock()
    pool.acquire = MagicMock(return_value=acquire_context)
    return pool
