from decimal import Decimal
from typing import Any, Self
from uuid import UUID

from dependency_injector.wiring import Provide, inject
from fastapi import Depends

from src.platform.config.di import Container
from src.platform.exception.exceptions import NotFoundError
from src.platform.logging.loguru_io import Logger
from src.platform.metrics.registration_metrics import metrics
from src.service.registration.app.interface.i_attendee_command_repo import IAttendeeCommandRepo
from src.service.registration.domain.entity.attendee_entity import Attendee
from src.service.registration.domain.enum.attendance_status import AttendanceStatus


class UpdateAttendeeUseCase:
    """
    Partial update, status overwrite and payment marking.

    Each operation is a single conditional UPDATE: a missing attendee surfaces as
    NotFound and nothing is written.
    """

    def __init__(self, *, attendee_command_repo: IAttendeeCommandRepo) -> None:
        self.attendee_command_repo = attendee_command_repo

    @classmethod
    @inject
    def depends(
        cls,
        attendee_command_repo: IAttendeeCommandRepo = Depends(
            Provide[Container.attendee_command_repo]
        ),
    ) -> Self:
        return cls(attendee_command_repo=attendee_command_repo)

    @Logger.io
    async def update(self, *, attendee_id: UUID, changes: dict[str, Any]) -> Attendee:
        Attendee.validate_changes(changes)
        return await self._apply(attendee_id=attendee_id, changes=changes)

    @Logger.io
    async def update_status(self, *, attendee_id: UUID, status: AttendanceStatus) -> Attendee:
        attendee = await self._apply(attendee_id=attendee_id, changes={'status': status})
        metrics.record_status_change(status=status.value)
        return attendee

    @Logger.io
    async def mark_as_paid(self, *, attendee_id: UUID, amount: Decimal) -> Attendee:
        return await self._apply(attendee_id=attendee_id, changes=Attendee.payment_changes(amount))

    async def _apply(self, *, attendee_id: UUID, changes: dict[str, Any]) -> Attendee:
        attendee = await self.attendee_command_repo.update(attendee_id=attendee_id, changes=changes)
        if not attendee:
            raise NotFoundError(f'Attendee with ID {attendee_id} not found')
        return attendee
