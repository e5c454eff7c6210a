from typing import List, Optional
from uuid import UUID

from fastapi import APIRouter, Depends, status

from src.platform.logging.loguru_io import Logger
from src.service.inventory.app.command.adjust_ticket_quantity_use_case import (
    AdjustTicketQuantityUseCase,
)
from src.service.inventory.app.command.create_ticket_use_case import CreateTicketUseCase
from src.service.inventory.app.command.delete_ticket_use_case import DeleteTicketUseCase
from src.service.inventory.app.command.update_ticket_use_case import UpdateTicketUseCase
from src.service.inventory.app.query.get_ticket_use_case import GetTicketUseCase
from src.service.inventory.app.query.list_tickets_use_case import ListTicketsUseCase
from src.service.inventory.driving_adapter.http_controller.schema.ticket_schema import (
    TicketAmountRequest,
    TicketCreateRequest,
    TicketDeleteResponse,
    TicketQuantityRequest,
    TicketResponse,
    TicketUpdateRequest,
)
from src.service.shared_kernel.domain.entity.user_entity import UserEntity
from src.service.shared_kernel.driving_adapter.auth.role_auth import (
    get_current_user,
    require_admin,
)


router = APIRouter()


@router.post('', status_code=status.HTTP_201_CREATED)
@Logger.io
async def create_ticket(
    request: TicketCreateRequest,
    current_user: UserEntity = Depends(require_admin),
    use_case: CreateTicketUseCase = Depends(CreateTicketUseCase.depends),
) -> TicketResponse:
    ticket = await use_case.create(
        name=request.name,
        price=request.price,
        quantity=request.quantity,
        event_id=request.event_id,
    )
    return TicketResponse.model_validate(ticket)


@router.get('', response_model=List[TicketResponse])
@Logger.io
async def list_tickets(
    event_id: Optional[UUID] = None,
    available: bool = False,
    current_user: UserEntity = Depends(get_current_user),
    use_case: ListTicketsUseCase = Depends(ListTicketsUseCase.depends),
) -> List[TicketResponse]:
    tickets = await use_case.find_all(event_id=event_id, available=available)
    return [TicketResponse.model_validate(ticket) for ticket in tickets]


# Static paths are declared before /{ticket_id} so they are not parsed as ids
@router.get('/available', response_model=List[TicketResponse])
@Logger.io
async def list_available_tickets(
    current_user: UserEntity = Depends(get_current_user),
    use_case: ListTicketsUseCase = Depends(ListTicketsUseCase.depends),
) -> List[TicketResponse]:
    tickets = await use_case.find_available()
    return [TicketResponse.model_validate(ticket) for ticket in tickets]


@router.get('/event/{event_id}', response_model=List[TicketResponse])
@Logger.io
async def list_event_tickets(
    event_id: UUID,
    current_user: UserEntity = Depends(get_current_user),
    use_case: ListTicketsUseCase = Depends(ListTicketsUseCase.depends),
) -> List[TicketResponse]:
    tickets = await use_case.find_by_event_id(event_id=event_id)
    return [TicketResponse.model_validate(ticket) for ticket in tickets]


@router.get('/event/{event_id}/available', response_model=List[TicketResponse])
@Logger.io
async def list_available_event_tickets(
    event_id: UUID,
    current_user: UserEntity = Depends(get_current_user),
    use_case: ListTicketsUseCase = Depends(ListTicketsUseCase.depends),
) -> List[TicketResponse]:
    tickets = await use_case.find_available_by_event_id(event_id=event_id)
    return [TicketResponse.model_validate(ticket) for ticket in tickets]


@router.get('/{ticket_id}')
@Logger.io
async def get_ticket(
    ticket_id: UUID,
    current_user: UserEntity = Depends(get_current_user),
    use_case: GetTicketUseCase = Depends(GetTicketUseCase.depends),
) -> TicketResponse:
    ticket = await use_case.get_by_id(ticket_id=ticket_id)
    return TicketResponse.model_validate(ticket)


@router.patch('/{ticket_id}')
@Logger.io
async def update_ticket(
    ticket_id: UUID,
    request: TicketUpdateRequest,
    current_user: UserEntity = Depends(require_admin),
    use_case: UpdateTicketUseCase = Depends(UpdateTicketUseCase.depends),
) -> TicketResponse:
    ticket = await use_case.update(
        ticket_id=ticket_id, changes=request.model_dump(exclude_unset=True)
    )
    return TicketResponse.model_validate(ticket)


@router.patch('/{ticket_id}/quantity')
@Logger.io
async def update_ticket_quantity(
    ticket_id: UUID,
    request: TicketQuantityRequest,
    current_user: UserEntity = Depends(require_admin),
    use_case: UpdateTicketUseCase = Depends(UpdateTicketUseCase.depends),
) -> TicketResponse:
    ticket = await use_case.update_quantity(ticket_id=ticket_id, quantity=request.quantity)
    return TicketResponse.model_validate(ticket)


@router.patch('/{ticket_id}/decrease')
@Logger.io
async def decrease_ticket_quantity(
    ticket_id: UUID,
    request: TicketAmountRequest,
    current_user: UserEntity = Depends(require_admin),
    use_case: AdjustTicketQuantityUseCase = Depends(AdjustTicketQuantityUseCase.depends),
) -> TicketResponse:
    ticket = await use_case.decrease(ticket_id=ticket_id, amount=request.amount)
    return TicketResponse.model_validate(ticket)


@router.patch('/{ticket_id}/increase')
@Logger.io
async def increase_ticket_quantity(
    ticket_id: UUID,
    request: TicketAmountRequest,
    current_user: UserEntity = Depends(require_admin),
    use_case: AdjustTicketQuantityUseCase = Depends(AdjustTicketQuantityUseCase.depends),
) -> TicketResponse:
    ticket = await use_case.increase(ticket_id=ticket_id, amount=request.amount)
    return TicketResponse.model_validate(ticket)


@router.delete('/{ticket_id}', status_code=status.HTTP_200_OK)
@Logger.io
async def delete_ticket(
    ticket_id: UUID,
    current_user: UserEntity = Depends(require_admin),
    use_case: DeleteTicketUseCase = Depends(DeleteTicketUseCase.depends),
) -> TicketDeleteResponse:
    await use_case.delete(ticket_id=ticket_id)
    return TicketDeleteResponse(message='Ticket successfully deleted')
