from typing import Optional
from uuid import UUID

from dependency_injector.wiring import Provide, inject
from fastapi import Depends
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer

from src.platform.config.di import Container
from src.platform.exception.exceptions import ForbiddenError
from src.service.shared_kernel.domain.entity.user_entity import UserEntity
from src.service.shared_kernel.domain.enum.user_role import UserRole
from src.service.shared_kernel.driving_adapter.auth.jwt_auth import JwtAuth


bearer_scheme = HTTPBearer(auto_error=False)


class RoleAuthStrategy:
    @staticmethod
    def is_admin(user: UserEntity) -> bool:
        return user.role == UserRole.ADMIN

    @staticmethod
    def can_self_register(user: UserEntity) -> bool:
        return user.role in (UserRole.USER, UserRole.ADMIN)

    @staticmethod
    def can_register_on_behalf_of(user: UserEntity, *, target_user_id: UUID) -> bool:
        return user.role == UserRole.ADMIN or user.id == target_user_id


@inject
async def get_current_user(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(bearer_scheme),
    jwt_auth: JwtAuth = Depends(Provide[Container.jwt_auth]),
) -> UserEntity:
    token = credentials.credentials if credentials else None
    return jwt_auth.get_current_user_info_from_jwt(token)


async def require_admin(current_user: UserEntity = Depends(get_current_user)) -> UserEntity:
    if not RoleAuthStrategy.is_admin(current_user):
        raise ForbiddenError('Only admins can perform this action')
    return current_user


async def require_user_or_admin(
    current_user: UserEntity = Depends(get_current_user),
) -> UserEntity:
    if not RoleAuthStrategy.can_self_register(current_user):
        raise ForbiddenError("You don't have permission to perform this action")
    return current_user
