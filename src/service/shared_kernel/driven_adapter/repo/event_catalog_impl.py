from typing import AsyncContextManager, Callable, Optional
from uuid import UUID

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from src.platform.logging.loguru_io import Logger
from src.service.shared_kernel.app.interface.i_event_catalog import IEventCatalog
from src.service.shared_kernel.domain.entity.event_entity import EventEntity
from src.service.shared_kernel.driven_adapter.model.event_model import EventModel


class EventCatalogImpl(IEventCatalog):
    def __init__(self, session_factory: Callable[..., AsyncContextManager[AsyncSession]]) -> None:
        self.session_factory = session_factory

    @Logger.io
    async def get_by_id(self, *, event_id: UUID) -> Optional[EventEntity]:
        async with self.session_factory() as session:
            result = await session.execute(select(EventModel).where(EventModel.id == event_id))
            event_model = result.scalar_one_or_none()

            if not event_model:
                return None

            return EventEntity(
                id=event_model.id,
                title=event_model.title,
                description=event_model.description,
                start_date=event_model.start_date,
                end_date=event_model.end_date,
                created_at=event_model.created_at,
            )
