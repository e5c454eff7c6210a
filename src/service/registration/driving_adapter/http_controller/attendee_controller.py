from decimal import Decimal
from typing import List
from uuid import UUID

from fastapi import APIRouter, Depends, Response, status

from src.platform.exception.exceptions import ForbiddenError
from src.platform.logging.loguru_io import Logger
from src.service.registration.app.command.delete_attendee_use_case import DeleteAttendeeUseCase
from src.service.registration.app.command.register_attendee_use_case import (
    RegisterAttendeeUseCase,
)
from src.service.registration.app.command.update_attendee_use_case import UpdateAttendeeUseCase
from src.service.registration.app.query.get_attendee_use_case import GetAttendeeUseCase
from src.service.registration.app.query.get_event_attendance_stats_use_case import (
    GetEventAttendanceStatsUseCase,
)
from src.service.registration.app.query.list_attendees_use_case import ListAttendeesUseCase
from src.service.registration.domain.enum.attendance_status import AttendanceStatus
from src.service.registration.driving_adapter.http_controller.schema.attendee_schema import (
    AttendanceStatsResponse,
    AttendeeCreateRequest,
    AttendeePaymentRequest,
    AttendeeResponse,
    AttendeeSelfRegisterRequest,
    AttendeeStatusRequest,
    AttendeeUpdateRequest,
)
from src.service.shared_kernel.domain.entity.user_entity import UserEntity
from src.service.shared_kernel.driving_adapter.auth.role_auth import (
    RoleAuthStrategy,
    require_admin,
    require_user_or_admin,
)


router = APIRouter()


@router.post('', status_code=status.HTTP_201_CREATED)
@Logger.io
async def create_attendee(
    request: AttendeeCreateRequest,
    current_user: UserEntity = Depends(require_admin),
    use_case: RegisterAttendeeUseCase = Depends(RegisterAttendeeUseCase.depends),
) -> AttendeeResponse:
    attendee = await use_case.create(
        user_id=request.user_id,
        event_id=request.event_id,
        status=request.status,
        notes=request.notes,
        is_paid=request.is_paid,
        payment_amount=request.payment_amount,
    )
    return AttendeeResponse.model_validate(attendee)


@router.post('/register', status_code=status.HTTP_201_CREATED)
@Logger.io
async def register_for_event(
    request: AttendeeSelfRegisterRequest,
    current_user: UserEntity = Depends(require_user_or_admin),
    use_case: RegisterAttendeeUseCase = Depends(RegisterAttendeeUseCase.depends),
) -> AttendeeResponse:
    target_user_id = request.user_id or current_user.id
    if not RoleAuthStrategy.can_register_on_behalf_of(current_user, target_user_id=target_user_id):
        raise ForbiddenError('You can only register yourself for an event')

    attendee = await use_case.create(
        user_id=target_user_id,
        event_id=request.event_id,
        status=AttendanceStatus.REGISTERED,
        is_paid=False,
        payment_amount=Decimal('0'),
    )
    return AttendeeResponse.model_validate(attendee)


@router.get('', response_model=List[AttendeeResponse])
@Logger.io
async def list_attendees(
    current_user: UserEntity = Depends(require_admin),
    use_case: ListAttendeesUseCase = Depends(ListAttendeesUseCase.depends),
) -> List[AttendeeResponse]:
    attendees = await use_case.find_all()
    return [AttendeeResponse.model_validate(attendee) for attendee in attendees]


# Static paths are declared before /{attendee_id} so they are not parsed as ids
@router.get('/event/{event_id}', response_model=List[AttendeeResponse])
@Logger.io
async def list_event_attendees(
    event_id: UUID,
    current_user: UserEntity = Depends(require_admin),
    use_case: ListAttendeesUseCase = Depends(ListAttendeesUseCase.depends),
) -> List[AttendeeResponse]:
    attendees = await use_case.find_by_event_id(event_id=event_id)
    return [AttendeeResponse.model_validate(attendee) for attendee in attendees]


@router.get('/event/{event_id}/stats')
@Logger.io
async def get_event_attendance_stats(
    event_id: UUID,
    current_user: UserEntity = Depends(require_admin),
    use_case: GetEventAttendanceStatsUseCase = Depends(GetEventAttendanceStatsUseCase.depends),
) -> AttendanceStatsResponse:
    stats = await use_case.get_stats(event_id=event_id)
    return AttendanceStatsResponse.model_validate(stats)


@router.get('/user/{user_id}', response_model=List[AttendeeResponse])
@Logger.io
async def list_user_registrations(
    user_id: UUID,
    current_user: UserEntity = Depends(require_admin),
    use_case: ListAttendeesUseCase = Depends(ListAttendeesUseCase.depends),
) -> List[AttendeeResponse]:
    attendees = await use_case.find_by_user_id(user_id=user_id)
    return [AttendeeResponse.model_validate(attendee) for attendee in attendees]


@router.get('/{attendee_id}')
@Logger.io
async def get_attendee(
    attendee_id: UUID,
    current_user: UserEntity = Depends(require_admin),
    use_case: GetAttendeeUseCase = Depends(GetAttendeeUseCase.depends),
) -> AttendeeResponse:
    attendee = await use_case.get_by_id(attendee_id=attendee_id)
    return AttendeeResponse.model_validate(attendee)


@router.put('/{attendee_id}')
@Logger.io
async def update_attendee(
    attendee_id: UUID,
    request: AttendeeUpdateRequest,
    current_user: UserEntity = Depends(require_admin),
    use_case: UpdateAttendeeUseCase = Depends(UpdateAttendeeUseCase.depends),
) -> AttendeeResponse:
    attendee = await use_case.update(
        attendee_id=attendee_id, changes=request.model_dump(exclude_unset=True)
    )
    return AttendeeResponse.model_validate(attendee)


@router.put('/{attendee_id}/status')
@Logger.io
async def update_attendee_status(
    attendee_id: UUID,
    request: AttendeeStatusRequest,
    current_user: UserEntity = Depends(require_admin),
    use_case: UpdateAttendeeUseCase = Depends(UpdateAttendeeUseCase.depends),
) -> AttendeeResponse:
    attendee = await use_case.update_status(attendee_id=attendee_id, status=request.status)
    return AttendeeResponse.model_validate(attendee)


@router.put('/{attendee_id}/payment')
@Logger.io
async def mark_attendee_as_paid(
    attendee_id: UUID,
    request: AttendeePaymentRequest,
    current_user: UserEntity = Depends(require_admin),
    use_case: UpdateAttendeeUseCase = Depends(UpdateAttendeeUseCase.depends),
) -> AttendeeResponse:
    attendee = await use_case.mark_as_paid(attendee_id=attendee_id, amount=request.amount)
    return AttendeeResponse.model_validate(attendee)


@router.delete('/{attendee_id}', status_code=status.HTTP_204_NO_CONTENT)
@Logger.io
async def delete_attendee(
    attendee_id: UUID,
    current_user: UserEntity = Depends(require_admin),
    use_case: DeleteAttendeeUseCase = Depends(DeleteAttendeeUseCase.depends),
) -> Response:
    await use_case.delete(attendee_id=attendee_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
