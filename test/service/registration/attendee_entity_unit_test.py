"""
Unit tests for the Attendee entity and AttendanceStats value object

Covers:
- Registration defaults
- Payment validation and idempotent payment changes
- Per-event stats counting
"""

from decimal import Decimal

import pytest

from src.platform.exception.exceptions import DomainError
from src.platform.types.uuid7 import generate_uuid7
from src.service.registration.domain.entity.attendee_entity import Attendee
from src.service.registration.domain.enum.attendance_status import AttendanceStatus
from src.service.registration.domain.value_object.attendance_stats import AttendanceStats


@pytest.mark.unit
class TestAttendeeRegister:
    def test_register_applies_defaults(self):
        # When
        attendee = Attendee.register(user_id=generate_uuid7(), event_id=generate_uuid7())

        # Then
        assert attendee.id is not None
        assert attendee.status == AttendanceStatus.REGISTERED
        assert attendee.is_paid is False
        assert attendee.payment_amount is None
        assert attendee.notes is None

    def test_register_keeps_explicit_values(self):
        attendee = Attendee.register(
            user_id=generate_uuid7(),
            event_id=generate_uuid7(),
            status=AttendanceStatus.CONFIRMED,
            notes='VIP',
            is_paid=True,
            payment_amount=Decimal('49.99'),
        )

        assert attendee.status == AttendanceStatus.CONFIRMED
        assert attendee.notes == 'VIP'
        assert attendee.is_paid is True
        assert attendee.payment_amount == Decimal('49.99')

    def test_register_rejects_negative_payment(self):
        with pytest.raises(DomainError) as exc_info:
            Attendee.register(
                user_id=generate_uuid7(),
                event_id=generate_uuid7(),
                payment_amount=Decimal('-1'),
            )

        assert exc_info.value.status_code == 400
        assert exc_info.value.message == 'Payment amount cannot be negative'

    def test_ids_are_uuid7(self):
        attendee = Attendee.register(user_id=generate_uuid7(), event_id=generate_uuid7())

        assert attendee.id is not None
        assert attendee.id.version == 7


@pytest.mark.unit
class TestAttendeeChanges:
    def test_payment_changes_overwrite_instead_of_accumulating(self):
        first = Attendee.payment_changes(Decimal('50'))
        second = Attendee.payment_changes(Decimal('50'))

        assert first == second == {'is_paid': True, 'payment_amount': Decimal('50')}

    def test_payment_changes_accept_zero(self):
        assert Attendee.payment_changes(Decimal('0'))['payment_amount'] == Decimal('0')

    def test_payment_changes_reject_negative_amount(self):
        with pytest.raises(DomainError):
            Attendee.payment_changes(Decimal('-0.01'))

    def test_validate_changes_allows_paid_without_amount(self):
        # No cross-field rule between is_paid and payment_amount
        Attendee.validate_changes({'is_paid': True})

    def test_validate_changes_rejects_negative_amount(self):
        with pytest.raises(DomainError):
            Attendee.validate_changes({'payment_amount': Decimal('-5')})


@pytest.mark.unit
class TestAttendanceStats:
    def test_counts_each_status(self):
        # Given: registered, confirmed, confirmed, attended, cancelled, no_show
        statuses = [
            AttendanceStatus.REGISTERED,
            AttendanceStatus.CONFIRMED,
            AttendanceStatus.CONFIRMED,
            AttendanceStatus.ATTENDED,
            AttendanceStatus.CANCELLED,
            AttendanceStatus.NO_SHOW,
        ]

        # When
        stats = AttendanceStats.from_statuses(statuses)

        # Then
        assert stats == AttendanceStats(
            total=6, confirmed=2, attended=1, cancelled=1, no_show=1
        )

    def test_registered_only_counts_toward_total(self):
        stats = AttendanceStats.from_statuses([AttendanceStatus.REGISTERED] * 3)

        assert stats.total == 3
        assert stats.confirmed == stats.attended == stats.cancelled == stats.no_show == 0

    def test_empty_event_has_zero_counts(self):
        assert AttendanceStats.from_statuses([]) == AttendanceStats()
