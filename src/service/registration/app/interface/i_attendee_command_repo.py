from abc import ABC, abstractmethod
from typing import Any, Optional
from uuid import UUID

from src.service.registration.domain.entity.attendee_entity import Attendee


class IAttendeeCommandRepo(ABC):
    @abstractmethod
    async def create(self, *, attendee: Attendee) -> Attendee:
        """
        Insert a registration in one statement.

        Raises ConflictError when a registration for (user_id, event_id) already exists;
        nothing is written in that case.
        """
        pass

    @abstractmethod
    async def update(self, *, attendee_id: UUID, changes: dict[str, Any]) -> Optional[Attendee]:
        """Apply a partial update, returns None when the attendee does not exist."""
        pass

    @abstractmethod
    async def delete(self, *, attendee_id: UUID) -> bool:
        pass
