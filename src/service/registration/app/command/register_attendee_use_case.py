from decimal import Decimal
from typing import Optional, Self
from uuid import UUID

import anyio
from dependency_injector.wiring import Provide, inject
from fastapi import Depends

from src.platform.config.di import Container
from src.platform.exception.exceptions import ConflictError, NotFoundError
from src.platform.logging.loguru_io import Logger
from src.platform.metrics.registration_metrics import metrics
from src.service.registration.app.interface.i_attendee_command_repo import IAttendeeCommandRepo
from src.service.registration.domain.entity.attendee_entity import Attendee
from src.service.registration.domain.enum.attendance_status import AttendanceStatus
from src.service.shared_kernel.app.interface.i_event_catalog import IEventCatalog
from src.service.shared_kernel.app.interface.i_user_directory import IUserDirectory
from src.service.shared_kernel.domain.entity.event_entity import EventEntity
from src.service.shared_kernel.domain.entity.user_entity import UserEntity


class RegisterAttendeeUseCase:
    """
    Register a user for an event.

    Flow:
    1. Resolve the user and the event concurrently (NotFound if either is missing)
    2. Insert the attendee; the (user_id, event_id) unique constraint turns a
       duplicate into ConflictError, so two racing requests cannot both succeed
    """

    def __init__(
        self,
        *,
        attendee_command_repo: IAttendeeCommandRepo,
        user_directory: IUserDirectory,
        event_catalog: IEventCatalog,
    ) -> None:
        self.attendee_command_repo = attendee_command_repo
        self.user_directory = user_directory
        self.event_catalog = event_catalog

    @classmethod
    @inject
    def depends(
        cls,
        attendee_command_repo: IAttendeeCommandRepo = Depends(
            Provide[Container.attendee_command_repo]
        ),
        user_directory: IUserDirectory = Depends(Provide[Container.user_directory]),
        event_catalog: IEventCatalog = Depends(Provide[Container.event_catalog]),
    ) -> Self:
        return cls(
            attendee_command_repo=attendee_command_repo,
            user_directory=user_directory,
            event_catalog=event_catalog,
        )

    @Logger.io
    async def create(
        self,
        *,
        user_id: UUID,
        event_id: UUID,
        status: Optional[AttendanceStatus] = None,
        notes: Optional[str] = None,
        is_paid: Optional[bool] = None,
        payment_amount: Optional[Decimal] = None,
    ) -> Attendee:
        attendee = Attendee.register(
            user_id=user_id,
            event_id=event_id,
            status=status,
            notes=notes,
            is_paid=is_paid,
            payment_amount=payment_amount,
        )

        try:
            await self._ensure_references_exist(user_id=user_id, event_id=event_id)
        except NotFoundError:
            metrics.record_registration(result='not_found')
            raise

        try:
            created = await self.attendee_command_repo.create(attendee=attendee)
        except ConflictError:
            metrics.record_registration(result='duplicate')
            raise

        metrics.record_registration(result='created')
        return created

    async def _ensure_references_exist(self, *, user_id: UUID, event_id: UUID) -> None:
        user: Optional[UserEntity] = None
        event: Optional[EventEntity] = None

        async def _load_user() -> None:
            nonlocal user
            user = await self.user_directory.get_by_id(user_id=user_id)

        async def _load_event() -> None:
            nonlocal event
            event = await self.event_catalog.get_by_id(event_id=event_id)

        async with anyio.create_task_group() as tg:
            tg.start_soon(_load_user)
            tg.start_soon(_load_event)

        UserEntity.validate_user_exists(user, user_id=user_id)
        EventEntity.validate_event_exists(event, event_id=event_id)
