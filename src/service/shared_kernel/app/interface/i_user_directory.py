from abc import ABC, abstractmethod
from typing import Optional
from uuid import UUID

from src.service.shared_kernel.domain.entity.user_entity import UserEntity


class IUserDirectory(ABC):
    """Lookup-by-id view of the user directory (read-only here)."""

    @abstractmethod
    async def get_by_id(self, *, user_id: UUID) -> Optional[UserEntity]:
        pass
