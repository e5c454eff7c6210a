from abc import ABC, abstractmethod
from typing import List, Optional
from uuid import UUID

from src.service.registration.domain.entity.attendee_entity import Attendee


class IAttendeeQueryRepo(ABC):
    @abstractmethod
    async def get_by_id(self, *, attendee_id: UUID) -> Optional[Attendee]:
        pass

    @abstractmethod
    async def list_all(self) -> List[Attendee]:
        pass

    @abstractmethod
    async def list_by_event(self, *, event_id: UUID) -> List[Attendee]:
        pass

    @abstractmethod
    async def list_by_user(self, *, user_id: UUID) -> List[Attendee]:
        pass
