#!/usr/bin/env python3
"""
Database Seed Script
Populate local development data

Features:
1. Create Users - one admin and one regular user (the user directory is owned elsewhere,
   rows are inserted directly)
2. Create Event - one catalog event
3. Create Tickets - ticket tiers through CreateTicketUseCase
4. Print bearer tokens for both users

Notes:
- Run `alembic upgrade head` first
"""

import asyncio
from dataclasses import dataclass
from decimal import Decimal

from sqlalchemy import func, select

from src.platform.config.di import container
from src.platform.database.orm_db_setting import dispose_engine, get_session_maker
from src.platform.types.uuid7 import generate_uuid7
from src.service.inventory.app.command.create_ticket_use_case import CreateTicketUseCase
from src.service.inventory.driven_adapter.model.ticket_model import TicketModel
from src.service.registration.driven_adapter.model.attendee_model import AttendeeModel
from src.service.shared_kernel.domain.entity.user_entity import UserEntity
from src.service.shared_kernel.domain.enum.user_role import UserRole
from src.service.shared_kernel.driven_adapter.model.event_model import EventModel
from src.service.shared_kernel.driven_adapter.model.user_model import UserModel


@dataclass
class UserConfig:
    """User seed configuration"""

    email: str
    name: str
    role: UserRole


@dataclass
class TicketConfig:
    name: str
    price: Decimal
    quantity: int


TEST_USERS = [
    UserConfig(email='admin@example.com', name='init admin', role=UserRole.ADMIN),
    UserConfig(email='user@example.com', name='init user', role=UserRole.USER),
]

TEST_TICKETS = [
    TicketConfig(name='General Admission', price=Decimal('29.99'), quantity=100),
    TicketConfig(name='VIP', price=Decimal('99.00'), quantity=20),
]


async def create_users() -> list[UserEntity]:
    print(f'👥 Creating {len(TEST_USERS)} users...')
    users = []
    async with get_session_maker()() as session:
        for config in TEST_USERS:
            user_id = generate_uuid7()
            session.add(
                UserModel(
                    id=user_id,
                    email=config.email,
                    name=config.name,
                    role=config.role.value,
                    is_active=True,
                )
            )
            users.append(
                UserEntity(id=user_id, email=config.email, name=config.name, role=config.role)
            )
            print(f'   ✅ Created {config.role}: ID={user_id}, Email={config.email}')
        await session.commit()
    return users


async def create_event() -> EventModel:
    print('🎪 Creating initial event...')
    async with get_session_maker()() as session:
        event = EventModel(id=generate_uuid7(), title='PyCon Taiwan', description='Seed event')
        session.add(event)
        await session.commit()
    print(f'   ✅ Created event: ID={event.id}, Title={event.title}')
    return event


async def create_tickets(event: EventModel) -> None:
    print(f'🎫 Creating {len(TEST_TICKETS)} ticket tiers...')
    use_case = CreateTicketUseCase(ticket_command_repo=container.ticket_command_repo())
    for config in TEST_TICKETS:
        ticket = await use_case.create(
            name=config.name, price=config.price, quantity=config.quantity, event_id=event.id
        )
        print(f'   ✅ Created ticket: ID={ticket.id}, Name={ticket.name}, Qty={ticket.quantity}')


async def verify_data() -> None:
    print('🔍 Verifying seeded data...')
    async with get_session_maker()() as session:
        for model in (UserModel, EventModel, TicketModel, AttendeeModel):
            count = await session.scalar(select(func.count()).select_from(model))
            print(f'   {model.__tablename__.capitalize()} count: {count}')


async def main() -> None:
    print('🌱 Starting data seeding...')
    print('=' * 50)

    try:
        users = await create_users()
        print()
        event = await create_event()
        print()
        await create_tickets(event)
        print()
        await verify_data()

        print()
        print('=' * 50)
        print('🌱 Data seeding completed!')
        print('🔑 Bearer tokens:')
        jwt_auth = container.jwt_auth()
        for user in users:
            print(f'   {user.role}: {jwt_auth.create_jwt_token(user)}')
    except Exception as e:
        print(f'❌ Seeding failed: {e}')
        raise
    finally:
        await dispose_engine()


if __name__ == '__main__':
    asyncio.run(main())
