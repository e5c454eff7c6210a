"""
Unit tests for UpdateAttendeeUseCase and DeleteAttendeeUseCase
"""

from decimal import Decimal
from unittest.mock import AsyncMock

import pytest

from src.platform.exception.exceptions import DomainError, NotFoundError
from src.platform.types.uuid7 import generate_uuid7
from src.service.registration.app.command.delete_attendee_use_case import DeleteAttendeeUseCase
from src.service.registration.app.command.update_attendee_use_case import UpdateAttendeeUseCase
from src.service.registration.domain.entity.attendee_entity import Attendee
from src.service.registration.domain.enum.attendance_status import AttendanceStatus


def _make_attendee(**overrides) -> Attendee:
    attendee = Attendee.register(user_id=generate_uuid7(), event_id=generate_uuid7())
    for key, value in overrides.items():
        setattr(attendee, key, value)
    return attendee


@pytest.mark.unit
class TestUpdateAttendeeUseCase:
    @pytest.fixture
    def mock_attendee_command_repo(self) -> AsyncMock:
        repo = AsyncMock()
        repo.update = AsyncMock(return_value=_make_attendee())
        return repo

    @pytest.fixture
    def use_case(self, mock_attendee_command_repo: AsyncMock) -> UpdateAttendeeUseCase:
        return UpdateAttendeeUseCase(attendee_command_repo=mock_attendee_command_repo)

    @pytest.mark.asyncio
    async def test_update_passes_partial_changes(
        self, use_case: UpdateAttendeeUseCase, mock_attendee_command_repo: AsyncMock
    ):
        attendee_id = generate_uuid7()

        await use_case.update(attendee_id=attendee_id, changes={'notes': 'Late arrival'})

        mock_attendee_command_repo.update.assert_awaited_once_with(
            attendee_id=attendee_id, changes={'notes': 'Late arrival'}
        )

    @pytest.mark.asyncio
    async def test_update_rejects_negative_payment_without_writing(
        self, use_case: UpdateAttendeeUseCase, mock_attendee_command_repo: AsyncMock
    ):
        with pytest.raises(DomainError):
            await use_case.update(
                attendee_id=generate_uuid7(), changes={'payment_amount': Decimal('-1')}
            )

        mock_attendee_command_repo.update.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_update_missing_attendee_is_not_found(
        self, use_case: UpdateAttendeeUseCase, mock_attendee_command_repo: AsyncMock
    ):
        mock_attendee_command_repo.update.return_value = None
        attendee_id = generate_uuid7()

        with pytest.raises(NotFoundError) as exc_info:
            await use_case.update(attendee_id=attendee_id, changes={'notes': 'x'})

        assert exc_info.value.status_code == 404
        assert exc_info.value.message == f'Attendee with ID {attendee_id} not found'

    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        'current, target',
        [
            (AttendanceStatus.ATTENDED, AttendanceStatus.REGISTERED),
            (AttendanceStatus.CANCELLED, AttendanceStatus.ATTENDED),
            (AttendanceStatus.NO_SHOW, AttendanceStatus.CONFIRMED),
        ],
    )
    async def test_any_status_can_be_overwritten_by_any_other(
        self,
        use_case: UpdateAttendeeUseCase,
        mock_attendee_command_repo: AsyncMock,
        current: AttendanceStatus,
        target: AttendanceStatus,
    ):
        # Given
        existing = _make_attendee(status=current)
        mock_attendee_command_repo.update.return_value = _make_attendee(
            id=existing.id, status=target
        )

        # When
        attendee = await use_case.update_status(attendee_id=existing.id, status=target)

        # Then
        assert attendee.status == target
        mock_attendee_command_repo.update.assert_awaited_once_with(
            attendee_id=existing.id, changes={'status': target}
        )

    @pytest.mark.asyncio
    async def test_update_status_missing_attendee_is_not_found(
        self, use_case: UpdateAttendeeUseCase, mock_attendee_command_repo: AsyncMock
    ):
        mock_attendee_command_repo.update.return_value = None

        with pytest.raises(NotFoundError):
            await use_case.update_status(
                attendee_id=generate_uuid7(), status=AttendanceStatus.CONFIRMED
            )

    @pytest.mark.asyncio
    async def test_mark_as_paid_is_idempotent(
        self, use_case: UpdateAttendeeUseCase, mock_attendee_command_repo: AsyncMock
    ):
        attendee_id = generate_uuid7()

        await use_case.mark_as_paid(attendee_id=attendee_id, amount=Decimal('50'))
        await use_case.mark_as_paid(attendee_id=attendee_id, amount=Decimal('50'))

        first, second = mock_attendee_command_repo.update.await_args_list
        assert first.kwargs == second.kwargs
        assert first.kwargs['changes'] == {'is_paid': True, 'payment_amount': Decimal('50')}

    @pytest.mark.asyncio
    async def test_mark_as_paid_rejects_negative_amount(
        self, use_case: UpdateAttendeeUseCase, mock_attendee_command_repo: AsyncMock
    ):
        with pytest.raises(DomainError) as exc_info:
            await use_case.mark_as_paid(attendee_id=generate_uuid7(), amount=Decimal('-5'))

        assert exc_info.value.message == 'Payment amount cannot be negative'
        mock_attendee_command_repo.update.assert_not_awaited()


@pytest.mark.unit
class TestDeleteAttendeeUseCase:
    @pytest.fixture
    def mock_attendee_command_repo(self) -> AsyncMock:
        repo = AsyncMock()
        repo.delete = AsyncMock(return_value=True)
        return repo

    @pytest.fixture
    def use_case(self, mock_attendee_command_repo: AsyncMock) -> DeleteAttendeeUseCase:
        return DeleteAttendeeUseCase(attendee_command_repo=mock_attendee_command_repo)

    @pytest.mark.asyncio
    async def test_delete_existing_attendee(
        self, use_case: DeleteAttendeeUseCase, mock_attendee_command_repo: AsyncMock
    ):
        attendee_id = generate_uuid7()

        await use_case.delete(attendee_id=attendee_id)

        mock_attendee_command_repo.delete.assert_awaited_once_with(attendee_id=attendee_id)

    @pytest.mark.asyncio
    async def test_delete_missing_attendee_is_not_found(
        self, use_case: DeleteAttendeeUseCase, mock_attendee_command_repo: AsyncMock
    ):
        mock_attendee_command_repo.delete.return_value = False

        with pytest.raises(NotFoundError):
            await use_case.delete(attendee_id=generate_uuid7())
