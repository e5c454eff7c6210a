from typing import Self
from uuid import UUID

from dependency_injector.wiring import Provide, inject
from fastapi import Depends

from src.platform.config.di import Container
from src.platform.exception.exceptions import NotFoundError
from src.platform.logging.loguru_io import Logger
from src.service.registration.app.interface.i_attendee_command_repo import IAttendeeCommandRepo


class DeleteAttendeeUseCase:
    """Cancel a registration by removing it. Ticket inventory is left untouched."""

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
    async def delete(self, *, attendee_id: UUID) -> None:
        deleted = await self.attendee_command_repo.delete(attendee_id=attendee_id)
        if not deleted:
            raise NotFoundError(f'Attendee with ID {attendee_id} not found')

        Logger.base.info(f'🗑️  [REGISTRATION] Deleted attendee {attendee_id}')
