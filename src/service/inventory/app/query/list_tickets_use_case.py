from typing import List, Optional, Self
from uuid import UUID

from dependency_injector.wiring import Provide, inject
from fastapi import Depends

from src.platform.config.di import Container
from src.platform.logging.loguru_io import Logger
from src.service.inventory.app.interface.i_ticket_query_repo import ITicketQueryRepo
from src.service.inventory.domain.entity.ticket_entity import Ticket


class ListTicketsUseCase:
    def __init__(self, *, ticket_query_repo: ITicketQueryRepo) -> None:
        self.ticket_query_repo = ticket_query_repo

    @classmethod
    @inject
    def depends(
        cls,
        ticket_query_repo: ITicketQueryRepo = Depends(Provide[Container.ticket_query_repo]),
    ) -> Self:
        return cls(ticket_query_repo=ticket_query_repo)

    @Logger.io
    async def find_all(
        self, *, event_id: Optional[UUID] = None, available: bool = False
    ) -> List[Ticket]:
        return await self.ticket_query_repo.list_tickets(event_id=event_id, available_only=available)

    @Logger.io
    async def find_by_event_id(self, *, event_id: UUID) -> List[Ticket]:
        return await self.ticket_query_repo.list_tickets(event_id=event_id)

    @Logger.io
    async def find_available(self) -> List[Ticket]:
        return await self.ticket_query_repo.list_tickets(available_only=True)

    @Logger.io
    async def find_available_by_event_id(self, *, event_id: UUID) -> List[Ticket]:
        return await self.ticket_query_repo.list_tickets(event_id=event_id, available_only=True)
