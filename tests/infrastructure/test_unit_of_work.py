"""Tests for the unit of work."""

from unittest.mock import AsyncMock, MagicMock, patch

import pytest

from backend_domain.core.exceptions import ConcurrencyConflictError
from backend_domain.core.events import DomainEvent
from backend_domain.infrastructure import UnitOfWork
from backend_domain.platform.customers.core import (
    Customer,
    CustomerNameChangedEvent,
    CustomerRegisteredEvent,
    CustomerStatusChangedEvent,
)
from backend_domain.platform.mfa.core import MfaMethod


class TestUnitOfWorkCommit:
    """Test saving and event dispatch."""

    @pytest.mark.asyncio
    async def test_events_dispatched_in_raise_order(self, customer_repository, customer_unit_of_work, dispatcher):
        """Test events from several aggregates arrive ordered by sequence."""
        received = []
        dispatcher.register(DomainEvent, received.append)
        first = Customer.create("user-1", "Sara", "Ahmadi")
        second = Customer.create("user-2", "Ali", "Rezaei")
        second.activate("admin")
        first.change_name("Zahra", "Ahmadi", "admin")

        await customer_repository.add(first)
        await customer_repository.add(second)
        events = await customer_unit_of_work.commit()

        assert [type(event) for event in received] == [
            CustomerRegisteredEvent,
            CustomerRegisteredEvent,
            CustomerStatusChangedEvent,
            CustomerNameChangedEvent,
        ]
        assert received == events
        assert [event.sequence for event in events] == sorted(event.sequence for event in events)

    @pytest.mark.asyncio
    async def test_events_dispatched_exactly_once(self, customer_repository, customer_unit_of_work, dispatcher):
        received = []
        dispatcher.register(DomainEvent, received.append)
        customer = Customer.create("user-1", "Sara", "Ahmadi")
        await customer_repository.add(customer)

        await customer_unit_of_work.commit()
        assert await customer_unit_of_work.commit() == []

        assert len(received) == 1
        assert customer.meta.pending_events == ()

    @pytest.mark.asyncio
    async def test_multiple_repositories(self, customer_repository, mfa_repository, dispatcher):
        unit_of_work = UnitOfWork([customer_repository, mfa_repository], dispatcher)
        customer = Customer.create("user-1", "Sara", "Ahmadi")
        method = MfaMethod.create_totp("user-1")
        method.enable()
        await customer_repository.add(customer)
        await mfa_repository.add(method)

        events = await unit_of_work.commit()

        assert len(events) == 2
        assert len(customer_repository.store) == 1
        assert len(mfa_repository.store) == 1

    @pytest.mark.asyncio
    async def test_conflict_dispatches_nothing(self, customer_repository, customer_unit_of_work, dispatcher, pending_customer):
        handler = MagicMock()
        dispatcher.register(DomainEvent, handler)
        await customer_repository.add(pending_customer)
        await customer_repository.save_changes()
        stale = await customer_repository.get_by_id(pending_customer.id)
        fresh = await customer_repository.get_by_id(pending_customer.id)
        fresh.activate("admin")
        await customer_repository.update(fresh)
        await customer_repository.save_changes()

        stale.block("admin")
        await customer_repository.update(stale)
        with pytest.raises(ConcurrencyConflictError):
            await customer_unit_of_work.commit()

        handler.assert_not_called()
        assert len(stale.meta.pending_events) == 1

    @pytest.mark.asyncio
    async def test_later_conflict_still_dispatches_saved_events(self, customer_repository, mfa_repository, dispatcher):
        """Test events of repositories saved before a conflict are not lost."""
        received = []
        dispatcher.register(DomainEvent, received.append)
        unit_of_work = UnitOfWork([customer_repository, mfa_repository], dispatcher)

        method = MfaMethod.create_totp("user-1")
        await mfa_repository.add(method)
        await mfa_repository.save_changes()
        stale = await mfa_repository.get_by_id(method.id)
        fresh = await mfa_repository.get_by_id(method.id)
        fresh.enable()
        await mfa_repository.update(fresh)
        await mfa_repository.save_changes()

        customer = Customer.create("user-1", "Sara", "Ahmadi")
        await customer_repository.add(customer)
        stale.enable()
        await mfa_repository.update(stale)

        with pytest.raises(ConcurrencyConflictError):
            await unit_of_work.commit()

        assert [type(event) for event in received] == [CustomerRegisteredEvent]
        assert customer.meta.pending_events == ()
        assert await customer_repository.get_by_id(customer.id) is not None
        assert len(stale.meta.pending_events) == 1

    @pytest.mark.asyncio
    async def test_failing_handler_does_not_undo_commit(self, customer_repository, customer_unit_of_work, dispatcher):
        """Test a handler error is logged and the save stands."""
        dispatcher.register(CustomerRegisteredEvent, MagicMock(side_effect=RuntimeError("mail server down")))
        later_handler = MagicMock()
        dispatcher.register(CustomerRegisteredEvent, later_handler)
        customer = Customer.create("user-1", "Sara", "Ahmadi")
        await customer_repository.add(customer)

        with patch("backend_domain.infrastructure.unit_of_work.logger") as logger:
            events = await customer_unit_of_work.commit()

        assert len(events) == 1
        later_handler.assert_called_once_with(events[0])
        logger.warning.assert_called_once()
        assert await customer_repository.get_by_id(customer.id) is not None

    @pytest.mark.asyncio
    async def test_dispatcher_crash_is_logged(self, customer_repository):
        dispatcher = MagicMock()
        dispatcher.dispatch = AsyncMock(side_effect=RuntimeError("broker unavailable"))
        unit_of_work = UnitOfWork([customer_repository], dispatcher)
        await customer_repository.add(Customer.create("user-1", "Sara", "Ahmadi"))

        with patch("backend_domain.infrastructure.unit_of_work.logger") as logger:
            events = await unit_of_work.commit()

        assert len(events) == 1
        logger.exception.assert_called_once()

    @pytest.mark.asyncio
    async def test_commit_without_dispatcher(self, customer_repository):
        unit_of_work = UnitOfWork([customer_repository])
        await customer_repository.add(Customer.create("user-1", "Sara", "Ahmadi"))
        assert len(await unit_of_work.commit()) == 1


class TestUnitOfWorkContext:
    """Test rollback behaviour of the async context manager."""

    @pytest.mark.asyncio
    async def test_exception_rolls_back(self, customer_repository, customer_unit_of_work, pending_customer):
        with pytest.raises(ValueError):
            async with customer_unit_of_work:
                await customer_repository.add(pending_customer)
                raise ValueError("abort")

        assert customer_repository.tracked_aggregates() == []

    @pytest.mark.asyncio
    async def test_clean_exit_keeps_staging(self, customer_repository, customer_unit_of_work, pending_customer):
        async with customer_unit_of_work as unit_of_work:
            await customer_repository.add(pending_customer)

        assert unit_of_work is customer_unit_of_work
        assert customer_repository.tracked_aggregates() == [pending_customer]

    @pytest.mark.asyncio
    async def test_rollback(self, customer_repository, customer_unit_of_work, pending_customer):
        await customer_repository.add(pending_customer)
        await customer_unit_of_work.rollback()
        assert customer_repository.tracked_aggregates() == []
