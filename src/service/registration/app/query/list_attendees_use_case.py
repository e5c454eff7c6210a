from typing import List, Self
from uuid import UUID

from dependency_injector.wiring import Provide, inject
from fastapi import Depends

from src.platform.config.di import Container
from src.platform.logging.loguru_io import Logger
from src.service.registration.app.interface.i_attendee_query_repo import IAttendeeQueryRepo
from src.service.registration.domain.entity.attendee_entity import Attendee
from src.service.shared_kernel.app.interface.i_event_catalog import IEventCatalog
from src.service.shared_kernel.app.interface.i_user_directory import IUserDirectory
from src.service.shared_kernel.domain.entity.event_entity import EventEntity
from src.service.shared_kernel.domain.entity.user_entity import UserEntity


class ListAttendeesUseCase:
    """Scoped listings verify the parent first; an empty list is a valid answer."""

    def __init__(
        self,
        *,
        attendee_query_repo: IAttendeeQueryRepo,
        user_directory: IUserDirectory,
        event_catalog: IEventCatalog,
    ) -> None:
        self.attendee_query_repo = attendee_query_repo
        self.user_directory = user_directory
        self.event_catalog = event_catalog

    @classmethod
    @inject
    def depends(
        cls,
        attendee_query_repo: IAttendeeQueryRepo = Depends(Provide[Container.attendee_query_repo]),
        user_directory: IUserDirectory = Depends(Provide[Container.user_directory]),
        event_catalog: IEventCatalog = Depends(Provide[Container.event_catalog]),
    ) -> Self:
        return cls(
            attendee_query_repo=attendee_query_repo,
            user_directory=user_directory,
            event_catalog=event_catalog,
        )

    @Logger.io
    async def find_all(self) -> List[Attendee]:
        return await self.attendee_query_repo.list_all()

    @Logger.io
    async def find_by_event_id(self, *, event_id: UUID) -> List[Attendee]:
        event = await self.event_catalog.get_by_id(event_id=event_id)
        EventEntity.validate_event_exists(event, event_id=event_id)
        return await self.attendee_query_repo.list_by_event(event_id=event_id)

    @Logger.io
    async def find_by_user_id(self, *, user_id: UUID) -> List[Attendee]:
        user = await self.user_directory.get_by_id(user_id=user_id)
        UserEntity.validate_user_exists(user, user_id=user_id)
        return await self.attendee_query_repo.list_by_user(user_id=user_id)
