from abc import ABC, abstractmethod
from typing import List, Optional
from uuid import UUID

from src.service.inventory.domain.entity.ticket_entity import Ticket


class ITicketQueryRepo(ABC):
    @abstractmethod
    async def get_by_id(self, *, ticket_id: UUID) -> Optional[Ticket]:
        pass

    @abstractmethod
    async def list_tickets(
        self, *, event_id: Optional[UUID] = None, available_only: bool = False
    ) -> List[Ticket]:
        """List tickets, optionally scoped to one event and/or to quantity > 0."""
        pass
