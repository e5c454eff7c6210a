from typing import Self
from uuid import UUID

from dependency_injector.wiring import Provide, inject
from fastapi import Depends

from src.platform.config.di import Container
from src.platform.exception.exceptions import NotFoundError
from src.platform.logging.loguru_io import Logger
from src.service.registration.app.interface.i_attendee_query_repo import IAttendeeQueryRepo
from src.service.registration.domain.entity.attendee_entity import Attendee


class GetAttendeeUseCase:
    def __init__(self, *, attendee_query_repo: IAttendeeQueryRepo) -> None:
        self.attendee_query_repo = attendee_query_repo

    @classmethod
    @inject
    def depends(
        cls,
        attendee_query_repo: IAttendeeQueryRepo = Depends(Provide[Container.attendee_query_repo]),
    ) -> Self:
        return cls(attendee_query_repo=attendee_query_repo)

    @Logger.io
    async def get_by_id(self, *, attendee_id: UUID) -> Attendee:
        attendee = await self.attendee_query_repo.get_by_id(attendee_id=attendee_id)
        if not attendee:
            raise NotFoundError(f'Attendee with ID {attendee_id} not found')
        return attendee
