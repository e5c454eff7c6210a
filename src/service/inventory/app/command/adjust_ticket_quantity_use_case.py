from typing import Self
from uuid import UUID

from dependency_injector.wiring import Provide, inject
from fastapi import Depends

from src.platform.config.di import Container
from src.platform.exception.exceptions import NotFoundError
from src.platform.logging.loguru_io import Logger
from src.platform.metrics.registration_metrics import metrics
from src.service.inventory.app.interface.i_ticket_command_repo import ITicketCommandRepo
from src.service.inventory.app.interface.i_ticket_query_repo import ITicketQueryRepo
from src.service.inventory.domain.entity.ticket_entity import Ticket


# One initial guarded write plus one retry when a concurrent increase raced the re-read
DECREASE_ATTEMPTS = 2


class AdjustTicketQuantityUseCase:
    """
    Relative inventory adjustments.

    Decrease is a conditional decrement executed by the store in one statement
    ("subtract only if quantity >= amount"), so concurrent decreases can neither
    oversell nor lose updates. When the guard rejects the write, the ticket is
    re-read to report why: missing ticket or insufficient quantity. If the re-read
    shows enough stock (a concurrent increase landed in between), the guarded
    write is retried once so the reported remaining count matches the rejection.
    An increase is guarded the same way against the quantity column limit.
    """

    def __init__(
        self,
        *,
        ticket_command_repo: ITicketCommandRepo,
        ticket_query_repo: ITicketQueryRepo,
    ) -> None:
        self.ticket_command_repo = ticket_command_repo
        self.ticket_query_repo = ticket_query_repo

    @classmethod
    @inject
    def depends(
        cls,
        ticket_command_repo: ITicketCommandRepo = Depends(Provide[Container.ticket_command_repo]),
        ticket_query_repo: ITicketQueryRepo = Depends(Provide[Container.ticket_query_repo]),
    ) -> Self:
        return cls(ticket_command_repo=ticket_command_repo, ticket_query_repo=ticket_query_repo)

    @Logger.io
    async def decrease(self, *, ticket_id: UUID, amount: int) -> Ticket:
        Ticket.validate_adjustment_amount(amount)

        for attempt in range(DECREASE_ATTEMPTS):
            ticket = await self.ticket_command_repo.decrease_quantity_if_sufficient(
                ticket_id=ticket_id, amount=amount
            )
            if ticket:
                metrics.record_inventory_adjustment(
                    direction='decrease', result='applied', amount=amount
                )
                return ticket

            current = await self.ticket_query_repo.get_by_id(ticket_id=ticket_id)
            if not current:
                metrics.record_inventory_adjustment(
                    direction='decrease', result='rejected', amount=amount
                )
                raise NotFoundError(f'Ticket with ID {ticket_id} not found')
            if current.quantity < amount:
                break

            # Stock was replenished between the guarded write and the re-read
            Logger.base.info(
                f'🔁 [INVENTORY] Retrying decrease of {amount} on ticket {ticket_id} '
                f'(attempt {attempt + 1}, {current.quantity} now remaining)'
            )

        metrics.record_inventory_adjustment(direction='decrease', result='rejected', amount=amount)
        Logger.base.warning(
            f'⛔ [INVENTORY] Rejected decrease of {amount} on ticket {ticket_id}, '
            f'{current.quantity} remaining'
        )
        raise Ticket.insufficient_quantity_error(current.quantity)

    @Logger.io
    async def increase(self, *, ticket_id: UUID, amount: int) -> Ticket:
        Ticket.validate_adjustment_amount(amount)

        ticket = await self.ticket_command_repo.increase_quantity(
            ticket_id=ticket_id, amount=amount
        )
        if ticket:
            metrics.record_inventory_adjustment(
                direction='increase', result='applied', amount=amount
            )
            return ticket

        metrics.record_inventory_adjustment(direction='increase', result='rejected', amount=amount)
        current = await self.ticket_query_repo.get_by_id(ticket_id=ticket_id)
        if not current:
            raise NotFoundError(f'Ticket with ID {ticket_id} not found')

        Logger.base.warning(
            f'⛔ [INVENTORY] Rejected increase of {amount} on ticket {ticket_id}, '
            f'{current.quantity} already allocated'
        )
        raise Ticket.quantity_limit_error()
