"""Tests for the asyncpg customer repository against a mocked pool."""

import pytest

from backend_domain.core.exceptions import ConcurrencyConflictError
from backend_domain.core.specifications import Specification
from backend_domain.platform.customers.core import CustomerStatus
from backend_domain.platform.customers.core.specifications import customers_by_status
from backend_domain.platform.customers.infrastructure import AsyncpgCustomerRepository


@pytest.fixture
def repository(mock_pool):
    return AsyncpgCustomerRepository(mock_pool)


def row_for(repository, customer):
    """Database row equivalent of ``customer`` as asyncpg would return it."""
    row = repository._aggregate_to_row(customer)
    row["id"] = customer.id.value
    row["version"] = customer.version
    return row


class TestAsyncpgCustomerRepositoryReads:
    """Test reads and row mapping."""

    @pytest.mark.asyncio
    async def test_get_by_id(self, repository, mock_connection, active_customer, sample_address):
        active_customer.set_primary_address(sample_address, "admin")
        mock_connection.fetchrow.return_value = row_for(repository, active_customer)

        customer = await repository.get_by_id(active_customer.id)

        query, customer_id = mock_connection.fetchrow.call_args.args
        assert query == "SELECT * FROM domain.customers WHERE id = $1"
        assert customer_id == active_customer.id.value
        assert customer == active_customer
        assert customer.customer_status is CustomerStatus.ACTIVE
        assert customer.email.value == "ali@acme-corp.com"
        assert customer.primary_address == sample_address
        assert customer.meta.persisted_version == 6
        assert not customer.meta.is_dirty

    @pytest.mark.asyncio
    async def test_get_by_id_missing(self, repository, mock_connection, pending_customer):
        mock_connection.fetchrow.return_value = None
        assert await repository.get_by_id(pending_customer.id) is None

    @pytest.mark.asyncio
    async def test_find_translates_specification(self, repository, mock_connection, active_customer):
        mock_connection.fetch.return_value = [row_for(repository, active_customer)]
        spec = customers_by_status(CustomerStatus.ACTIVE).add_order_by("last_name").apply_paging(0, 10)

        customers = await repository.find(spec)

        query, *params = mock_connection.fetch.call_args.args
        assert query == (
            "SELECT * FROM domain.customers WHERE (customer_status = $1 AND is_deleted = $2) "
            "ORDER BY last_name ASC NULLS FIRST OFFSET $3 LIMIT $4"
        )
        assert params == ["active", False, 0, 10]
        assert customers == [active_customer]

    @pytest.mark.asyncio
    async def test_count_ignores_paging(self, repository, mock_connection):
        mock_connection.fetchval.return_value = 42

        total = await repository.count(Specification().apply_paging(0, 5))

        assert total == 42
        mock_connection.fetchval.assert_awaited_once_with("SELECT COUNT(*) FROM domain.customers WHERE TRUE")

    @pytest.mark.asyncio
    async def test_get_by_application_user_id(self, repository, mock_connection, active_customer):
        mock_connection.fetch.return_value = [row_for(repository, active_customer)]

        customer = await repository.get_by_application_user_id("user-2")

        query, *params = mock_connection.fetch.call_args.args
        assert "application_user_id = $1" in query
        assert query.endswith("OFFSET $2 LIMIT $3")
        assert params == ["user-2", 0, 1]
        assert customer == active_customer


class TestAsyncpgCustomerRepositoryWrites:
    """Test inserts, compare-and-swap updates and conflicts."""

    @pytest.mark.asyncio
    async def test_insert_new_customer(self, repository, mock_connection, pending_customer):
        await repository.add(pending_customer)

        saved = await repository.save_changes()

        query, *values = mock_connection.execute.call_args.args
        assert query.startswith("INSERT INTO domain.customers (id, application_user_id, ")
        assert query.count("$") == len(values)
        assert values[0] == pending_customer.id.value
        assert values[-1] == 1
        mock_connection.transaction.assert_called_once()
        assert saved == [pending_customer]
        assert pending_customer.meta.persisted_version == 1

    @pytest.mark.asyncio
    async def test_update_checks_loaded_version(self, repository, mock_connection, active_customer):
        active_customer.meta.mark_persisted()
        active_customer.suspend("admin", "review")
        mock_connection.execute.return_value = "UPDATE 1"
        await repository.update(active_customer)

        await repository.save_changes()

        query, *values = mock_connection.execute.call_args.args
        assert query.startswith("UPDATE domain.customers SET application_user_id = $2, ")
        assert query.endswith("WHERE id = $1 AND version = $" + str(len(values)))
        assert values[0] == active_customer.id.value
        assert values[-2:] == [6, 5]
        assert active_customer.meta.persisted_version == 6

    @pytest.mark.asyncio
    async def test_stale_update_raises_conflict(self, repository, mock_connection, active_customer):
        active_customer.meta.mark_persisted()
        active_customer.block("admin")
        mock_connection.execute.return_value = "UPDATE 0"
        mock_connection.fetchval.return_value = 7
        await repository.update(active_customer)

        with pytest.raises(ConcurrencyConflictError) as exc_info:
            await repository.save_changes()

        assert exc_info.value.expected_version == 5
        assert exc_info.value.actual_version == 7
        assert active_customer.meta.persisted_version == 5
        assert repository.tracked_aggregates() == [active_customer]

    @pytest.mark.asyncio
    async def test_nothing_staged(self, repository, mock_pool):
        assert await repository.save_changes() == []
        mock_pool.acquire.assert_not_called()
