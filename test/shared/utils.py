from typing import Any, Dict

from sqlalchemy.ext.asyncio import AsyncEngine, async_sessionmaker, create_async_engine

from src.platform.config.core_setting import settings
from src.platform.database.orm_db_setting import Base
from src.platform.types.uuid7 import generate_uuid7
from src.service.shared_kernel.domain.entity.event_entity import EventEntity
from src.service.shared_kernel.domain.entity.user_entity import UserEntity
from src.service.shared_kernel.domain.enum.user_role import UserRole
from src.service.shared_kernel.driven_adapter.model.event_model import EventModel
from src.service.shared_kernel.driven_adapter.model.user_model import UserModel
from src.service.shared_kernel.driving_adapter.auth.jwt_auth import JwtAuth


def create_test_engine() -> AsyncEngine:
    return create_async_engine(settings.DATABASE_URL_ASYNC, connect_args={'timeout': 30})


async def insert_user(
    engine: AsyncEngine, *, name: str, role: UserRole = UserRole.USER, is_active: bool = True
) -> UserEntity:
    user_id = generate_uuid7()
    email = f'{user_id.hex}@example.com'
    async with async_sessionmaker(engine)() as session:
        session.add(
            UserModel(id=user_id, email=email, name=name, role=role.value, is_active=is_active)
        )
        await session.commit()
    return UserEntity(id=user_id, email=email, name=name, role=role, is_active=is_active)


async def insert_event(engine: AsyncEngine, *, title: str) -> EventEntity:
    event_id = generate_uuid7()
    async with async_sessionmaker(engine)() as session:
        session.add(EventModel(id=event_id, title=title))
        await session.commit()
    return EventEntity(id=event_id, title=title)


async def clear_all_tables(engine: AsyncEngine) -> None:
    async with engine.begin() as conn:
        for table in reversed(Base.metadata.sorted_tables):
            await conn.execute(table.delete())


def auth_headers(user: UserEntity) -> Dict[str, str]:
    token = JwtAuth().create_jwt_token(user)
    return {'Authorization': f'Bearer {token}'}


def assert_response_status(response: Any, expected_status: int, message: str | None = None):
    response_text = getattr(response, 'text', getattr(response, 'content', 'N/A'))
    assert response.status_code == expected_status, (
        message or f'Expected {expected_status}, got {response.status_code}: {response_text}'
    )
