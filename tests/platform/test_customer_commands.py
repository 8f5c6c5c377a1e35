"""Tests for customer command and query handlers over the in-memory repository."""

from unittest.mock import AsyncMock, patch

import pytest

from backend_domain.core.exceptions import (
    BusinessRuleViolationError,
    ConcurrencyConflictError,
    DomainValidationError,
    DuplicateResourceError,
)
from backend_domain.core.shared import ConflictRetryPolicy
from backend_domain.core.value_objects import CustomerId
from backend_domain.platform.customers.application.commands import (
    ChangeCustomerStatusCommand,
    ChangeCustomerStatusCommandHandler,
    CustomerStatusAction,
    RegisterCustomerCommand,
    RegisterCustomerCommandHandler,
    UpdateCustomerContactInfoCommand,
    UpdateCustomerContactInfoCommandHandler,
)
from backend_domain.platform.customers.application.queries import (
    ListCustomersQuery,
    ListCustomersQueryHandler,
    ValidateCustomerOperationQuery,
    ValidateCustomerOperationQueryHandler,
)
from backend_domain.platform.customers.core import (
    Customer,
    CustomerNotFoundError,
    CustomerOperation,
    CustomerRegisteredEvent,
    CustomerStatus,
    CustomerStatusChangedEvent,
)
from backend_domain.platform.customers.core.specifications import (
    active_customers,
    customer_by_email,
    premium_customers,
)


async def persist(repository, customer):
    """Stage and save ``customer`` directly through the repository."""
    if customer.meta.is_new:
        await repository.add(customer)
    else:
        await repository.update(customer)
    await repository.save_changes()
    customer.meta.pull_events()
    return customer


class TestRegisterCustomer:
    """Test RegisterCustomerCommandHandler."""

    @pytest.mark.asyncio
    async def test_register_persists_and_dispatches(self, customer_repository, customer_unit_of_work, dispatcher):
        received = []
        dispatcher.register(CustomerRegisteredEvent, received.append)
        handler = RegisterCustomerCommandHandler(customer_repository, customer_unit_of_work)

        customer = await handler.execute(RegisterCustomerCommand("user-9", "Nima", "Sadeghi", created_by="admin"))

        stored = await customer_repository.get_by_id(customer.id)
        assert stored.customer_status is CustomerStatus.PENDING
        assert stored.version == 1
        assert not customer.meta.is_new
        assert [event.customer_id for event in received] == [customer.id]

    @pytest.mark.asyncio
    async def test_duplicate_application_user(self, customer_repository, customer_unit_of_work, pending_customer):
        await persist(customer_repository, pending_customer)
        handler = RegisterCustomerCommandHandler(customer_repository, customer_unit_of_work)

        with pytest.raises(DuplicateResourceError) as exc_info:
            await handler.execute(RegisterCustomerCommand("user-1", "Sara", "Ahmadi"))

        assert exc_info.value.error_code == "CUSTOMER_ALREADY_EXISTS"
        assert len(customer_repository.store) == 1

    @pytest.mark.asyncio
    async def test_invalid_name(self, customer_repository, customer_unit_of_work):
        handler = RegisterCustomerCommandHandler(customer_repository, customer_unit_of_work)
        with pytest.raises(DomainValidationError):
            await handler.execute(RegisterCustomerCommand("user-9", "", "Sadeghi"))
        assert len(customer_repository.store) == 0


class TestChangeCustomerStatus:
    """Test ChangeCustomerStatusCommandHandler."""

    @pytest.mark.asyncio
    async def test_activate(self, customer_repository, customer_unit_of_work, pending_customer, no_delay_retry_policy):
        await persist(customer_repository, pending_customer)
        handler = ChangeCustomerStatusCommandHandler(customer_repository, customer_unit_of_work, no_delay_retry_policy)

        result = await handler.execute(
            ChangeCustomerStatusCommand(pending_customer.id, CustomerStatusAction.ACTIVATE, "admin")
        )

        assert result.changed
        assert isinstance(result.events[0], CustomerStatusChangedEvent)
        stored = await customer_repository.get_by_id(pending_customer.id)
        assert stored.customer_status is CustomerStatus.ACTIVE
        assert stored.version == 2

    @pytest.mark.asyncio
    async def test_repeated_activation_is_a_no_op(self, customer_repository, customer_unit_of_work, active_customer):
        await persist(customer_repository, active_customer)
        handler = ChangeCustomerStatusCommandHandler(customer_repository, customer_unit_of_work)

        result = await handler.execute(ChangeCustomerStatusCommand(active_customer.id, "activate", "admin"))

        assert not result.changed
        assert (await customer_repository.get_by_id(active_customer.id)).version == 5

    @pytest.mark.asyncio
    async def test_delete(self, customer_repository, customer_unit_of_work, active_customer):
        await persist(customer_repository, active_customer)
        handler = ChangeCustomerStatusCommandHandler(customer_repository, customer_unit_of_work)

        await handler.execute(
            ChangeCustomerStatusCommand(active_customer.id, CustomerStatusAction.DELETE, "admin", "closed")
        )

        stored = await customer_repository.get_by_id(active_customer.id)
        assert stored.is_deleted
        assert stored.meta.deleted_by == "admin"

    @pytest.mark.asyncio
    async def test_rule_violation_is_logged_and_raised(self, customer_repository, customer_unit_of_work, active_customer):
        await persist(customer_repository, active_customer)
        handler = ChangeCustomerStatusCommandHandler(customer_repository, customer_unit_of_work)

        with patch("backend_domain.platform.customers.application.commands.change_customer_status.logger") as logger:
            with pytest.raises(BusinessRuleViolationError):
                await handler.execute(
                    ChangeCustomerStatusCommand(active_customer.id, CustomerStatusAction.UPGRADE_TO_PREMIUM, "admin")
                )

        logger.warning.assert_called_once()
        assert customer_repository.tracked_aggregates() == []
        assert (await customer_repository.get_by_id(active_customer.id)).customer_status is CustomerStatus.ACTIVE

    @pytest.mark.asyncio
    async def test_missing_customer(self, customer_repository, customer_unit_of_work):
        handler = ChangeCustomerStatusCommandHandler(customer_repository, customer_unit_of_work)
        with pytest.raises(CustomerNotFoundError):
            await handler.execute(
                ChangeCustomerStatusCommand(CustomerId.generate(), CustomerStatusAction.ACTIVATE, "admin")
            )

    @pytest.mark.asyncio
    async def test_conflict_is_retried_on_fresh_copy(
        self, customer_repository, customer_unit_of_work, active_customer, no_delay_retry_policy
    ):
        """Test a concurrent write between load and save triggers one re-read."""
        await persist(customer_repository, active_customer)
        load = customer_repository.get_by_id

        async def load_then_interfere(customer_id):
            customer = await load(customer_id)
            if get_by_id.await_count == 1:
                rival = await load(customer_id)
                rival.change_name("Ali", "Mohammadi", "other-admin")
                customer_repository.store.write(rival)
            return customer

        get_by_id = AsyncMock(side_effect=load_then_interfere)
        customer_repository.get_by_id = get_by_id
        handler = ChangeCustomerStatusCommandHandler(customer_repository, customer_unit_of_work, no_delay_retry_policy)

        result = await handler.execute(
            ChangeCustomerStatusCommand(active_customer.id, CustomerStatusAction.SUSPEND, "admin", "review")
        )

        assert get_by_id.await_count == 2
        stored = await load(active_customer.id)
        assert stored.customer_status is CustomerStatus.SUSPENDED
        assert stored.last_name == "Mohammadi"
        assert stored.version == 7
        assert result.customer.version == 7

    @pytest.mark.asyncio
    async def test_conflict_gives_up(self, customer_repository, customer_unit_of_work, active_customer):
        await persist(customer_repository, active_customer)
        load = customer_repository.get_by_id

        async def always_interfere(customer_id):
            customer = await load(customer_id)
            rival = await load(customer_id)
            rival.set_tax_id("rival", "other-admin")
            customer_repository.store.write(rival)
            return customer

        customer_repository.get_by_id = AsyncMock(side_effect=always_interfere)
        handler = ChangeCustomerStatusCommandHandler(
            customer_repository, customer_unit_of_work, ConflictRetryPolicy(max_attempts=2)
        )

        with pytest.raises(ConcurrencyConflictError):
            await handler.execute(ChangeCustomerStatusCommand(active_customer.id, CustomerStatusAction.BLOCK, "admin"))

        assert customer_repository.get_by_id.await_count == 2


class TestUpdateCustomerContactInfo:
    """Test UpdateCustomerContactInfoCommandHandler."""

    @pytest.mark.asyncio
    async def test_only_given_fields_change(self, customer_repository, customer_unit_of_work, active_customer):
        await persist(customer_repository, active_customer)
        handler = UpdateCustomerContactInfoCommandHandler(customer_repository, customer_unit_of_work)

        await handler.execute(
            UpdateCustomerContactInfoCommand(active_customer.id, "admin", phone_number="021-8877-6655")
        )

        stored = await customer_repository.get_by_id(active_customer.id)
        assert stored.phone_number.value == "+982188776655"
        assert stored.email.value == "ali@acme-corp.com"
        assert stored.mobile_number.value == "+989121234567"
        assert stored.version == 6

    @pytest.mark.asyncio
    async def test_nothing_to_change(self, customer_repository, customer_unit_of_work, active_customer):
        await persist(customer_repository, active_customer)
        handler = UpdateCustomerContactInfoCommandHandler(customer_repository, customer_unit_of_work)

        customer = await handler.execute(UpdateCustomerContactInfoCommand(active_customer.id, "admin"))

        assert customer.version == 5

    @pytest.mark.asyncio
    async def test_invalid_phone_number(self, customer_repository, customer_unit_of_work, active_customer):
        await persist(customer_repository, active_customer)
        handler = UpdateCustomerContactInfoCommandHandler(customer_repository, customer_unit_of_work)

        with pytest.raises(DomainValidationError):
            await handler.execute(UpdateCustomerContactInfoCommand(active_customer.id, "admin", mobile_number="123"))

        assert (await customer_repository.get_by_id(active_customer.id)).version == 5


class TestCustomerQueries:
    """Test query handlers and customer specifications."""

    @pytest.mark.asyncio
    async def test_validate_operation(self, customer_repository, pending_customer):
        await persist(customer_repository, pending_customer)
        handler = ValidateCustomerOperationQueryHandler(customer_repository)

        result = await handler.execute(
            ValidateCustomerOperationQuery(pending_customer.id, CustomerOperation.PLACE_ORDER)
        )

        assert not result.is_valid
        assert len(result.broken_rules) == 3
        assert result.message.startswith("Order placement validation failed: ")

    @pytest.mark.asyncio
    async def test_validate_operation_passes(self, customer_repository, active_customer):
        await persist(customer_repository, active_customer)
        handler = ValidateCustomerOperationQueryHandler(customer_repository)

        result = await handler.execute(ValidateCustomerOperationQuery(active_customer.id, "sms_notification"))

        assert result.is_valid
        assert result.broken_rules == []
        assert result.message == ""

    @pytest.mark.asyncio
    async def test_list_customers_pages_by_last_name(self, customer_repository):
        for index, last_name in enumerate(["Zand", "Amini", "Karimi", "Bahrami"]):
            await persist(customer_repository, Customer.create(f"user-{index}", "Test", last_name))
        handler = ListCustomersQueryHandler(customer_repository)

        page = await handler.execute(ListCustomersQuery(page=1, page_size=3))

        assert [customer.last_name for customer in page.items] == ["Amini", "Bahrami", "Karimi"]
        assert page.total == 4
        assert page.total_pages == 2
        assert page.has_next

    @pytest.mark.asyncio
    async def test_list_customers_by_status(self, customer_repository, active_customer, pending_customer):
        await persist(customer_repository, active_customer)
        await persist(customer_repository, pending_customer)
        handler = ListCustomersQueryHandler(customer_repository)

        page = await handler.execute(ListCustomersQuery(status=CustomerStatus.ACTIVE))

        assert [customer.id for customer in page.items] == [active_customer.id]
        assert not page.has_next

    @pytest.mark.asyncio
    async def test_list_customers_rejects_large_pages(self, customer_repository):
        with pytest.raises(DomainValidationError):
            await ListCustomersQueryHandler(customer_repository).execute(ListCustomersQuery(page_size=500))

    @pytest.mark.asyncio
    async def test_specifications(self, customer_repository, active_customer, deleted_customer):
        await persist(customer_repository, active_customer)
        await persist(customer_repository, deleted_customer)

        assert [c.id for c in await customer_repository.find(active_customers())] == [active_customer.id]
        assert (await customer_repository.find_one(customer_by_email("ALI@acme-corp.com"))).id == active_customer.id
        assert await customer_repository.count(premium_customers()) == 0
        assert (await customer_repository.get_by_application_user_id("user-2")).id == active_customer.id
