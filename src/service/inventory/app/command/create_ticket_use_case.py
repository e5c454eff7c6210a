from decimal import Decimal
from typing import Self
from uuid import UUID

from dependency_injector.wiring import Provide, inject
from fastapi import Depends

from src.platform.config.di import Container
from src.platform.logging.loguru_io import Logger
from src.service.inventory.app.interface.i_ticket_command_repo import ITicketCommandRepo
from src.service.inventory.domain.entity.ticket_entity import Ticket


class CreateTicketUseCase:
    """
    Create a ticket tier with its initial allocation.

    The owning event is not resolved here, callers that need that guarantee check it first.
    """

    def __init__(self, *, ticket_command_repo: ITicketCommandRepo) -> None:
        self.ticket_command_repo = ticket_command_repo

    @classmethod
    @inject
    def depends(
        cls,
        ticket_command_repo: ITicketCommandRepo = Depends(Provide[Container.ticket_command_repo]),
    ) -> Self:
        return cls(ticket_command_repo=ticket_command_repo)

    @Logger.io
    async def create(
        self, *, name: str, price: Decimal, quantity: int, event_id: UUID
    ) -> Ticket:
        ticket = Ticket.create(name=name, price=price, quantity=quantity, event_id=event_id)
        created = await self.ticket_command_repo.create(ticket=ticket)

        Logger.base.info(
            f'🎫 [INVENTORY] Created ticket {created.id} for event {event_id} (quantity={quantity})'
        )
        return created
