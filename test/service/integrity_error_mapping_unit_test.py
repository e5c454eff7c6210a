"""
Storage errors raised by PostgreSQL or SQLite must surface as domain errors
(404 / 409 / 400), never as an unhandled 500.
"""

from contextlib import asynccontextmanager
from decimal import Decimal
from unittest.mock import AsyncMock, MagicMock

import pytest
from sqlalchemy.exc import DataError, IntegrityError

from src.platform.exception.exceptions import ConflictError, DomainError, NotFoundError
from src.platform.types.uuid7 import generate_uuid7
from src.service.inventory.domain.entity.ticket_entity import Ticket
from src.service.inventory.driven_adapter.repo.ticket_command_repo_impl import (
    TicketCommandRepoImpl,
    is_missing_event,
)
from src.service.registration.domain.entity.attendee_entity import Attendee
from src.service.registration.driven_adapter.repo.attendee_command_repo_impl import (
    AttendeeCommandRepoImpl,
    is_duplicate_registration,
)


PG_TICKET_EVENT_FK = (
    'insert or update on table "ticket" violates foreign key constraint '
    '"fk_ticket_event_id_event"'
)
PG_ATTENDEE_USER_FK = (
    'insert or update on table "attendee" violates foreign key constraint '
    '"fk_attendee_user_id_user"'
)


def _integrity_error(message: str) -> IntegrityError:
    return IntegrityError('INSERT ...', {}, Exception(message))


def _failing_session(error: Exception) -> MagicMock:
    session = MagicMock()
    session.execute = AsyncMock(side_effect=error)
    session.commit = AsyncMock(side_effect=error)
    session.rollback = AsyncMock()
    return session


def _session_factory(session: MagicMock):
    @asynccontextmanager
    async def factory():
        yield session

    return factory


@pytest.mark.unit
class TestIntegrityErrorMapping:
    @pytest.mark.parametrize(
        'message',
        [
            'duplicate key value violates unique constraint "uq_attendee_user_event"',
            'UNIQUE constraint failed: attendee.user_id, attendee.event_id',
        ],
    )
    def test_duplicate_registration_detected(self, message):
        assert is_duplicate_registration(_integrity_error(message))

    def test_other_unique_violation_is_not_a_duplicate_registration(self):
        assert not is_duplicate_registration(
            _integrity_error('UNIQUE constraint failed: attendee.id')
        )

    @pytest.mark.parametrize('message', [PG_TICKET_EVENT_FK, 'FOREIGN KEY constraint failed'])
    def test_missing_event_detected(self, message):
        assert is_missing_event(_integrity_error(message))

    def test_check_violation_is_not_a_missing_event(self):
        assert not is_missing_event(
            _integrity_error('CHECK constraint failed: ck_ticket_quantity_non_negative')
        )


@pytest.mark.unit
class TestTicketCommandRepoErrorMapping:
    @pytest.mark.asyncio
    async def test_update_to_unknown_event_is_not_found(self):
        # Given: the store rejects the new event_id through its foreign key
        session = _failing_session(_integrity_error(PG_TICKET_EVENT_FK))
        repo = TicketCommandRepoImpl(session_factory=_session_factory(session))
        event_id = generate_uuid7()

        # When
        with pytest.raises(NotFoundError) as exc_info:
            await repo.update(ticket_id=generate_uuid7(), changes={'event_id': event_id})

        # Then
        assert exc_info.value.message == f'Event with ID {event_id} not found'
        session.rollback.assert_awaited_once()

    @pytest.mark.asyncio
    async def test_create_with_unknown_event_is_not_found(self):
        session = _failing_session(_integrity_error(PG_TICKET_EVENT_FK))
        repo = TicketCommandRepoImpl(session_factory=_session_factory(session))
        ticket = Ticket.create(
            name='VIP', price=Decimal('10'), quantity=5, event_id=generate_uuid7()
        )

        with pytest.raises(NotFoundError) as exc_info:
            await repo.create(ticket=ticket)

        assert exc_info.value.message == f'Event with ID {ticket.event_id} not found'

    @pytest.mark.asyncio
    async def test_numeric_overflow_is_bad_request(self):
        session = _failing_session(
            DataError('UPDATE ...', {}, Exception('integer out of range'))
        )
        repo = TicketCommandRepoImpl(session_factory=_session_factory(session))

        with pytest.raises(DomainError) as exc_info:
            await repo.set_quantity(ticket_id=generate_uuid7(), quantity=5)

        assert exc_info.value.status_code == 400
        session.rollback.assert_awaited_once()

    @pytest.mark.asyncio
    async def test_unrelated_integrity_error_propagates(self):
        session = _failing_session(
            _integrity_error('CHECK constraint failed: ck_ticket_quantity_non_negative')
        )
        repo = TicketCommandRepoImpl(session_factory=_session_factory(session))

        with pytest.raises(IntegrityError):
            await repo.set_quantity(ticket_id=generate_uuid7(), quantity=5)


@pytest.mark.unit
class TestAttendeeCommandRepoErrorMapping:
    def _attendee(self) -> Attendee:
        return Attendee.register(user_id=generate_uuid7(), event_id=generate_uuid7())

    @pytest.mark.asyncio
    async def test_user_deleted_before_insert_is_not_found(self):
        session = _failing_session(_integrity_error(PG_ATTENDEE_USER_FK))
        repo = AttendeeCommandRepoImpl(session_factory=_session_factory(session))
        attendee = self._attendee()

        with pytest.raises(NotFoundError) as exc_info:
            await repo.create(attendee=attendee)

        assert exc_info.value.message == f'User with ID {attendee.user_id} not found'

    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        'message',
        [
            'insert or update on table "attendee" violates foreign key constraint '
            '"fk_attendee_event_id_event"',
            'FOREIGN KEY constraint failed',
        ],
    )
    async def test_event_deleted_before_insert_is_not_found(self, message):
        session = _failing_session(_integrity_error(message))
        repo = AttendeeCommandRepoImpl(session_factory=_session_factory(session))
        attendee = self._attendee()

        with pytest.raises(NotFoundError) as exc_info:
            await repo.create(attendee=attendee)

        assert exc_info.value.message == f'Event with ID {attendee.event_id} not found'

    @pytest.mark.asyncio
    async def test_duplicate_insert_is_conflict(self):
        session = _failing_session(
            _integrity_error(
                'duplicate key value violates unique constraint "uq_attendee_user_event"'
            )
        )
        repo = AttendeeCommandRepoImpl(session_factory=_session_factory(session))

        with pytest.raises(ConflictError):
            await repo.create(attendee=self._attendee())
