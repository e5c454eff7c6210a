from typing import Self
from uuid import UUID

from dependency_injector.wiring import Provide, inject
from fastapi import Depends

from src.platform.config.di import Container
from src.platform.logging.loguru_io import Logger
from src.service.registration.app.interface.i_attendee_query_repo import IAttendeeQueryRepo
from src.service.registration.domain.value_object.attendance_stats import AttendanceStats
from src.service.shared_kernel.app.interface.i_event_catalog import IEventCatalog
from src.service.shared_kernel.domain.entity.event_entity import EventEntity


class GetEventAttendanceStatsUseCase:
    def __init__(
        self, *, attendee_query_repo: IAttendeeQueryRepo, event_catalog: IEventCatalog
    ) -> None:
        self.attendee_query_repo = attendee_query_repo
        self.event_catalog = event_catalog

    @classmethod
    @inject
    def depends(
        cls,
        attendee_query_repo: IAttendeeQueryRepo = Depends(Provide[Container.attendee_query_repo]),
        event_catalog: IEventCatalog = Depends(Provide[Container.event_catalog]),
    ) -> Self:
        return cls(attendee_query_repo=attendee_query_repo, event_catalog=event_catalog)

    @Logger.io
    async def get_stats(self, *, event_id: UUID) -> AttendanceStats:
        event = await self.event_catalog.get_by_id(event_id=event_id)
        EventEntity.validate_event_exists(event, event_id=event_id)

        attendees = await self.attendee_query_repo.list_by_event(event_id=event_id)
        return AttendanceStats.from_statuses(attendee.status for attendee in attendees)
