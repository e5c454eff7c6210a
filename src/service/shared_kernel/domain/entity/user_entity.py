from datetime import datetime
from typing import Optional
from uuid import UUID

import attrs

from src.platform.exception.exceptions import ForbiddenError, NotFoundError
from src.service.shared_kernel.domain.enum.user_role import UserRole


@attrs.define
class UserEntity:
    """Read-only view of a user owned by the user directory."""

    id: UUID
    email: str = ''
    name: str = ''
    role: UserRole = UserRole.USER
    is_active: bool = True
    created_at: Optional[datetime] = None

    def validate_active(self) -> None:
        if not self.is_active:
            raise ForbiddenError('User is inactive')

    @property
    def is_admin(self) -> bool:
        return self.role == UserRole.ADMIN

    @staticmethod
    def validate_user_exists(user: Optional['UserEntity'], *, user_id: UUID) -> 'UserEntity':
        if not user:
            raise NotFoundError(f'User with ID {user_id} not found')
        return user
