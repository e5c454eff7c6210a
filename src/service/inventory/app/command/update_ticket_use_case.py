from typing import Any, Self
from uuid import UUID

from dependency_injector.wiring import Provide, inject
from fastapi import Depends

from src.platform.config.di import Container
from src.platform.exception.exceptions import NotFoundError
from src.platform.logging.loguru_io import Logger
from src.service.inventory.app.interface.i_ticket_command_repo import ITicketCommandRepo
from src.service.inventory.domain.entity.ticket_entity import Ticket


class UpdateTicketUseCase:
    """Partial updates and absolute quantity replacement."""

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
    async def update(self, *, ticket_id: UUID, changes: dict[str, Any]) -> Ticket:
        Ticket.validate_changes(changes)

        ticket = await self.ticket_command_repo.update(ticket_id=ticket_id, changes=changes)
        if not ticket:
            raise NotFoundError(f'Ticket with ID {ticket_id} not found')

        return ticket

    @Logger.io
    async def update_quantity(self, *, ticket_id: UUID, quantity: int) -> Ticket:
        Ticket.validate_quantity(quantity)

        ticket = await self.ticket_command_repo.set_quantity(ticket_id=ticket_id, quantity=quantity)
        if not ticket:
            raise NotFoundError(f'Ticket with ID {ticket_id} not found')

        return ticket
