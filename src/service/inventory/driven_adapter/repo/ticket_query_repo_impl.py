from typing import AsyncContextManager, Callable, List, Optional
from uuid import UUID

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from src.platform.logging.loguru_io import Logger
from src.service.inventory.app.interface.i_ticket_query_repo import ITicketQueryRepo
from src.service.inventory.domain.entity.ticket_entity import Ticket
from src.service.inventory.driven_adapter.model.ticket_model import TicketModel
from src.service.inventory.driven_adapter.repo.ticket_mapper import ticket_model_to_entity


class TicketQueryRepoImpl(ITicketQueryRepo):
    def __init__(self, session_factory: Callable[..., AsyncContextManager[AsyncSession]]) -> None:
        self.session_factory = session_factory

    @Logger.io
    async def get_by_id(self, *, ticket_id: UUID) -> Optional[Ticket]:
        async with self.session_factory() as session:
            result = await session.execute(select(TicketModel).where(TicketModel.id == ticket_id))
            ticket_model = result.scalar_one_or_none()

            if not ticket_model:
                return None

            return ticket_model_to_entity(ticket_model)

    @Logger.io
    async def list_tickets(
        self, *, event_id: Optional[UUID] = None, available_only: bool = False
    ) -> List[Ticket]:
        stmt = select(TicketModel)
        if event_id is not None:
            stmt = stmt.where(TicketModel.event_id == event_id)
        if available_only:
            stmt = stmt.where(TicketModel.quantity > 0)
        stmt = stmt.order_by(TicketModel.created_at, TicketModel.id)

        async with self.session_factory() as session:
            result = await session.execute(stmt)
            return [ticket_model_to_entity(model) for model in result.scalars().all()]
