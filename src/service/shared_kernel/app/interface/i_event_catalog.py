from abc import ABC, abstractmethod
from typing import Optional
from uuid import UUID

from src.service.shared_kernel.domain.entity.event_entity import EventEntity


class IEventCatalog(ABC):
    """Lookup-by-id view of the event catalog (read-only here)."""

    @abstractmethod
    async def get_by_id(self, *, event_id: UUID) -> Optional[EventEntity]:
        pass
