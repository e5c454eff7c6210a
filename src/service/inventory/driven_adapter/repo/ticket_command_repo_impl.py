from typing import Any, AsyncContextManager, Callable, Optional
from uuid import UUID

from sqlalchemy import delete, update
from sqlalchemy.exc import DataError, IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.sql import Update

from src.platform.exception.exceptions import DomainError, NotFoundError
from src.platform.logging.loguru_io import Logger
from src.service.inventory.app.interface.i_ticket_command_repo import ITicketCommandRepo
from src.service.inventory.domain.entity.ticket_entity import MAX_TICKET_QUANTITY, Ticket
from src.service.inventory.driven_adapter.model.ticket_model import TicketModel
from src.service.inventory.driven_adapter.repo.ticket_mapper import ticket_model_to_entity


UPDATABLE_FIELDS = frozenset({'name', 'price', 'quantity', 'event_id'})


def is_missing_event(error: IntegrityError) -> bool:
    # PostgreSQL names the constraint, SQLite only says "FOREIGN KEY constraint failed"
    message = str(error.orig).lower()
    return 'fk_ticket_event_id_event' in message or 'foreign key constraint' in message


def missing_event_error(event_id: Optional[UUID]) -> NotFoundError:
    return NotFoundError(f'Event with ID {event_id} not found')


def out_of_range_error(error: DataError) -> DomainError:
    Logger.base.warning(f'⛔ [INVENTORY] Value rejected by storage: {error.orig}')
    return DomainError('Ticket value is out of range')


class TicketCommandRepoImpl(ITicketCommandRepo):
    """
    Ticket writes. Each mutation is one `UPDATE ... RETURNING` statement, so the
    check and the write are evaluated by the database in a single step.
    """

    def __init__(self, session_factory: Callable[..., AsyncContextManager[AsyncSession]]) -> None:
        self.session_factory = session_factory

    @Logger.io
    async def create(self, *, ticket: Ticket) -> Ticket:
        async with self.session_factory() as session:
            ticket_model = TicketModel(
                id=ticket.id,
                name=ticket.name,
                price=ticket.price,
                quantity=ticket.quantity,
                event_id=ticket.event_id,
            )
            session.add(ticket_model)
            try:
                await session.commit()
            except IntegrityError as e:
                await session.rollback()
                if is_missing_event(e):
                    raise missing_event_error(ticket.event_id) from e
                raise
            except DataError as e:
                await session.rollback()
                raise out_of_range_error(e) from e

            await session.refresh(ticket_model)

            return ticket_model_to_entity(ticket_model)

    @Logger.io
    async def update(self, *, ticket_id: UUID, changes: dict[str, Any]) -> Optional[Ticket]:
        values = {k: v for k, v in changes.items() if k in UPDATABLE_FIELDS and v is not None}
        stmt = update(TicketModel).where(TicketModel.id == ticket_id)
        if values:
            stmt = stmt.values(**values)
        else:
            # Nothing to change, still touch the row so existence is checked atomically
            stmt = stmt.values(quantity=TicketModel.quantity)
        return await self._execute_returning(stmt, event_id=values.get('event_id'))

    @Logger.io
    async def set_quantity(self, *, ticket_id: UUID, quantity: int) -> Optional[Ticket]:
        stmt = update(TicketModel).where(TicketModel.id == ticket_id).values(quantity=quantity)
        return await self._execute_returning(stmt)

    @Logger.io
    async def decrease_quantity_if_sufficient(
        self, *, ticket_id: UUID, amount: int
    ) -> Optional[Ticket]:
        stmt = (
            update(TicketModel)
            .where(TicketModel.id == ticket_id, TicketModel.quantity >= amount)
            .values(quantity=TicketModel.quantity - amount)
        )
        return await self._execute_returning(stmt)

    @Logger.io
    async def increase_quantity(self, *, ticket_id: UUID, amount: int) -> Optional[Ticket]:
        stmt = (
            update(TicketModel)
            .where(
                TicketModel.id == ticket_id,
                TicketModel.quantity <= MAX_TICKET_QUANTITY - amount,
            )
            .values(quantity=TicketModel.quantity + amount)
        )
        return await self._execute_returning(stmt)

    @Logger.io
    async def delete(self, *, ticket_id: UUID) -> bool:
        async with self.session_factory() as session:
            result = await session.execute(
                delete(TicketModel)
                .where(TicketModel.id == ticket_id)
                .returning(TicketModel.id)
                .execution_options(synchronize_session=False)
            )
            deleted_id = result.scalar_one_or_none()
            await session.commit()
            return deleted_id is not None

    async def _execute_returning(
        self, stmt: Update, *, event_id: Optional[UUID] = None
    ) -> Optional[Ticket]:
        async with self.session_factory() as session:
            try:
                result = await session.execute(
                    stmt.returning(TicketModel).execution_options(synchronize_session=False)
                )
                ticket_model = result.scalar_one_or_none()
                await session.commit()
            except IntegrityError as e:
                await session.rollback()
                if is_missing_event(e):
                    raise missing_event_error(event_id) from e
                raise
            except DataError as e:
                await session.rollback()
                raise out_of_range_error(e) from e

            if not ticket_model:
                return None

            return ticket_model_to_entity(ticket_model)
