from typing import AsyncContextManager, Callable, List, Optional
from uuid import UUID

from sqlalchemy import Select, select
from sqlalchemy.ext.asyncio import AsyncSession

from src.platform.logging.loguru_io import Logger
from src.service.registration.app.interface.i_attendee_query_repo import IAttendeeQueryRepo
from src.service.registration.domain.entity.attendee_entity import Attendee
from src.service.registration.driven_adapter.model.attendee_model import AttendeeModel
from src.service.registration.driven_adapter.repo.attendee_mapper import attendee_model_to_entity


class AttendeeQueryRepoImpl(IAttendeeQueryRepo):
    def __init__(self, session_factory: Callable[..., AsyncContextManager[AsyncSession]]) -> None:
        self.session_factory = session_factory

    @Logger.io
    async def get_by_id(self, *, attendee_id: UUID) -> Optional[Attendee]:
        async with self.session_factory() as session:
            result = await session.execute(
                select(AttendeeModel).where(AttendeeModel.id == attendee_id)
            )
            attendee_model = result.scalar_one_or_none()

            if not attendee_model:
                return None

            return attendee_model_to_entity(attendee_model)

    @Logger.io
    async def list_all(self) -> List[Attendee]:
        return await self._list(select(AttendeeModel))

    @Logger.io
    async def list_by_event(self, *, event_id: UUID) -> List[Attendee]:
        return await self._list(select(AttendeeModel).where(AttendeeModel.event_id == event_id))

    @Logger.io
    async def list_by_user(self, *, user_id: UUID) -> List[Attendee]:
        return await self._list(select(AttendeeModel).where(AttendeeModel.user_id == user_id))

    async def _list(self, stmt: Select) -> List[Attendee]:
        async with self.session_factory() as session:
            result = await session.execute(
                stmt.order_by(AttendeeModel.created_at, AttendeeModel.id)
            )
            return [attendee_model_to_entity(model) for model in result.scalars().all()]
