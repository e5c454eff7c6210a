from typing import Any, AsyncContextManager, Callable, Optional
from uuid import UUID

from sqlalchemy import delete, update
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from src.platform.exception.exceptions import ConflictError, NotFoundError
from src.platform.logging.loguru_io import Logger
from src.service.registration.app.interface.i_attendee_command_repo import IAttendeeCommandRepo
from src.service.registration.domain.entity.attendee_entity import (
    DUPLICATE_REGISTRATION_MESSAGE,
    Attendee,
)
from src.service.registration.driven_adapter.model.attendee_model import (
    ATTENDEE_USER_EVENT_UNIQUE,
    AttendeeModel,
)
from src.service.registration.driven_adapter.repo.attendee_mapper import attendee_model_to_entity


UPDATABLE_FIELDS = frozenset({'status', 'notes', 'is_paid', 'payment_amount'})
NULLABLE_FIELDS = frozenset({'notes', 'payment_amount'})


def is_duplicate_registration(error: IntegrityError) -> bool:
    # PostgreSQL names the constraint, SQLite reports "UNIQUE constraint failed: attendee.user_id, ..."
    message = str(error.orig).lower()
    return ATTENDEE_USER_EVENT_UNIQUE in message or (
        'unique constraint' in message and 'attendee.user_id' in message
    )


def missing_reference_error(error: IntegrityError, attendee: Attendee) -> Optional[NotFoundError]:
    # The user or event can disappear between the existence check and the insert
    message = str(error.orig).lower()
    if 'fk_attendee_user_id_user' in message:
        return NotFoundError(f'User with ID {attendee.user_id} not found')
    if 'fk_attendee_event_id_event' in message or 'foreign key constraint' in message:
        return NotFoundError(f'Event with ID {attendee.event_id} not found')
    return None


class AttendeeCommandRepoImpl(IAttendeeCommandRepo):
    def __init__(self, session_factory: Callable[..., AsyncContextManager[AsyncSession]]) -> None:
        self.session_factory = session_factory

    @Logger.io
    async def create(self, *, attendee: Attendee) -> Attendee:
        async with self.session_factory() as session:
            attendee_model = AttendeeModel(
                id=attendee.id,
                user_id=attendee.user_id,
                event_id=attendee.event_id,
                status=attendee.status.value,
                notes=attendee.notes,
                is_paid=attendee.is_paid,
                payment_amount=attendee.payment_amount,
            )
            session.add(attendee_model)
            try:
                await session.commit()
            except IntegrityError as e:
                await session.rollback()
                if is_duplicate_registration(e):
                    raise ConflictError(DUPLICATE_REGISTRATION_MESSAGE) from e
                missing = missing_reference_error(e, attendee)
                if missing:
                    raise missing from e
                raise

            await session.refresh(attendee_model)
            Logger.base.info(
                f'📝 [REGISTRATION] Attendee {attendee_model.id} created '
                f'(user={attendee.user_id}, event={attendee.event_id})'
            )
            return attendee_model_to_entity(attendee_model)

    @Logger.io
    async def update(self, *, attendee_id: UUID, changes: dict[str, Any]) -> Optional[Attendee]:
        values = {
            field: value
            for field, value in changes.items()
            if field in UPDATABLE_FIELDS and (value is not None or field in NULLABLE_FIELDS)
        }
        if 'status' in values:
            values['status'] = str(values['status'])

        stmt = update(AttendeeModel).where(AttendeeModel.id == attendee_id)
        # An empty change set still runs the statement so existence is checked in one step
        stmt = stmt.values(**values) if values else stmt.values(status=AttendeeModel.status)

        async with self.session_factory() as session:
            result = await session.execute(
                stmt.returning(AttendeeModel).execution_options(synchronize_session=False)
            )
            attendee_model = result.scalar_one_or_none()
            await session.commit()

            if not attendee_model:
                return None

            return attendee_model_to_entity(attendee_model)

    @Logger.io
    async def delete(self, *, attendee_id: UUID) -> bool:
        async with self.session_factory() as session:
            result = await session.execute(
                delete(AttendeeModel)
                .where(AttendeeModel.id == attendee_id)
                .returning(AttendeeModel.id)
                .execution_options(synchronize_session=False)
            )
            deleted_id = result.scalar_one_or_none()
            await session.commit()
            return deleted_id is not None
