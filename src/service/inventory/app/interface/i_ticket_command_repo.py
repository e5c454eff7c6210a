from abc import ABC, abstractmethod
from typing import Any, Optional
from uuid import UUID

from src.service.inventory.domain.entity.ticket_entity import Ticket


class ITicketCommandRepo(ABC):
    """
    Every quantity mutation is a single statement. Methods return None when the
    target row does not exist (or when a decrease or increase guard rejected the write).
    """

    @abstractmethod
    async def create(self, *, ticket: Ticket) -> Ticket:
        pass

    @abstractmethod
    async def update(self, *, ticket_id: UUID, changes: dict[str, Any]) -> Optional[Ticket]:
        pass

    @abstractmethod
    async def set_quantity(self, *, ticket_id: UUID, quantity: int) -> Optional[Ticket]:
        pass

    @abstractmethod
    async def decrease_quantity_if_sufficient(
        self, *, ticket_id: UUID, amount: int
    ) -> Optional[Ticket]:
        """Subtract `amount` only if quantity >= amount, atomically."""
        pass

    @abstractmethod
    async def increase_quantity(self, *, ticket_id: UUID, amount: int) -> Optional[Ticket]:
        """Add `amount` only if the result stays within the quantity column range, atomically."""
        pass

    @abstractmethod
    async def delete(self, *, ticket_id: UUID) -> bool:
        pass
