"""
Integration tests for the ticket repositories against a real database

The decrement is a single conditional UPDATE, so concurrent decreases never
drive the quantity below zero and never lose an update.
"""

import asyncio
from decimal import Decimal

import pytest

from src.platform.database.orm_db_setting import Database
from src.platform.exception.exceptions import DomainError
from src.platform.types.uuid7 import generate_uuid7
from src.service.inventory.app.command.adjust_ticket_quantity_use_case import (
    AdjustTicketQuantityUseCase,
)
from src.service.inventory.domain.entity.ticket_entity import Ticket
from src.service.inventory.driven_adapter.repo.ticket_command_repo_impl import (
    TicketCommandRepoImpl,
)
from src.service.inventory.driven_adapter.repo.ticket_query_repo_impl import TicketQueryRepoImpl
from test.shared.utils import insert_event


@pytest.fixture
def command_repo(database: Database) -> TicketCommandRepoImpl:
    return TicketCommandRepoImpl(session_factory=database.session)


@pytest.fixture
def query_repo(database: Database) -> TicketQueryRepoImpl:
    return TicketQueryRepoImpl(session_factory=database.session)


@pytest.fixture
def adjust_use_case(
    command_repo: TicketCommandRepoImpl, query_repo: TicketQueryRepoImpl
) -> AdjustTicketQuantityUseCase:
    return AdjustTicketQuantityUseCase(
        ticket_command_repo=command_repo, ticket_query_repo=query_repo
    )


async def _create_ticket(
    database: Database, command_repo: TicketCommandRepoImpl, *, quantity: int
) -> Ticket:
    event = await insert_event(database.engine, title='PyCon')
    return await command_repo.create(
        ticket=Ticket.create(
            name='General Admission',
            price=Decimal('29.99'),
            quantity=quantity,
            event_id=event.id,
        )
    )


@pytest.mark.integration
class TestTicketCommandRepo:
    @pytest.mark.asyncio
    async def test_decrease_only_when_sufficient(
        self, database: Database, command_repo: TicketCommandRepoImpl
    ):
        ticket = await _create_ticket(database, command_repo, quantity=100)

        decreased = await command_repo.decrease_quantity_if_sufficient(
            ticket_id=ticket.id, amount=30
        )
        rejected = await command_repo.decrease_quantity_if_sufficient(
            ticket_id=ticket.id, amount=80
        )

        assert decreased is not None and decreased.quantity == 70
        assert rejected is None

    @pytest.mark.asyncio
    async def test_decrease_to_exactly_zero(
        self, database: Database, command_repo: TicketCommandRepoImpl
    ):
        ticket = await _create_ticket(database, command_repo, quantity=5)

        decreased = await command_repo.decrease_quantity_if_sufficient(
            ticket_id=ticket.id, amount=5
        )

        assert decreased is not None and decreased.quantity == 0

    @pytest.mark.asyncio
    async def test_update_set_and_increase(
        self, database: Database, command_repo: TicketCommandRepoImpl
    ):
        ticket = await _create_ticket(database, command_repo, quantity=10)

        renamed = await command_repo.update(ticket_id=ticket.id, changes={'name': 'Early Bird'})
        reset = await command_repo.set_quantity(ticket_id=ticket.id, quantity=3)
        increased = await command_repo.increase_quantity(ticket_id=ticket.id, amount=4)

        assert renamed is not None and renamed.name == 'Early Bird'
        assert renamed.quantity == 10
        assert reset is not None and reset.quantity == 3
        assert increased is not None and increased.quantity == 7

    @pytest.mark.asyncio
    async def test_writes_on_missing_ticket_return_none(self, command_repo: TicketCommandRepoImpl):
        missing_id = generate_uuid7()

        assert await command_repo.update(ticket_id=missing_id, changes={}) is None
        assert await command_repo.set_quantity(ticket_id=missing_id, quantity=1) is None
        assert await command_repo.increase_quantity(ticket_id=missing_id, amount=1) is None
        assert await command_repo.delete(ticket_id=missing_id) is False


@pytest.mark.integration
class TestConcurrentDecrease:
    @pytest.mark.asyncio
    async def test_concurrent_decreases_never_oversell(
        self,
        database: Database,
        command_repo: TicketCommandRepoImpl,
        query_repo: TicketQueryRepoImpl,
        adjust_use_case: AdjustTicketQuantityUseCase,
    ):
        # Given: 10 tickets and 15 buyers of one ticket each
        ticket = await _create_ticket(database, command_repo, quantity=10)

        # When
        results = await asyncio.gather(
            *(adjust_use_case.decrease(ticket_id=ticket.id, amount=1) for _ in range(15)),
            return_exceptions=True,
        )

        # Then
        applied = [result for result in results if isinstance(result, Ticket)]
        rejected = [result for result in results if isinstance(result, DomainError)]
        assert len(applied) == 10
        assert len(rejected) == 5

        final = await query_repo.get_by_id(ticket_id=ticket.id)
        assert final is not None and final.quantity == 0

    @pytest.mark.asyncio
    async def test_concurrent_increases_are_not_lost(
        self,
        database: Database,
        command_repo: TicketCommandRepoImpl,
        query_repo: TicketQueryRepoImpl,
        adjust_use_case: AdjustTicketQuantityUseCase,
    ):
        ticket = await _create_ticket(database, command_repo, quantity=0)

        await asyncio.gather(
            *(adjust_use_case.increase(ticket_id=ticket.id, amount=2) for _ in range(10))
        )

        final = await query_repo.get_by_id(ticket_id=ticket.id)
        assert final is not None and final.quantity == 20


@pytest.mark.integration
class TestTicketQueryRepo:
    @pytest.mark.asyncio
    async def test_list_filters(
        self,
        database: Database,
        command_repo: TicketCommandRepoImpl,
        query_repo: TicketQueryRepoImpl,
    ):
        event = await insert_event(database.engine, title='PyCon')
        available = await command_repo.create(
            ticket=Ticket.create(name='GA', price=Decimal('10'), quantity=5, event_id=event.id)
        )
        sold_out = await command_repo.create(
            ticket=Ticket.create(name='VIP', price=Decimal('50'), quantity=0, event_id=event.id)
        )

        by_event = await query_repo.list_tickets(event_id=event.id)
        available_only = await query_repo.list_tickets(event_id=event.id, available_only=True)

        assert {ticket.id for ticket in by_event} == {available.id, sold_out.id}
        assert [ticket.id for ticket in available_only] == [available.id]
