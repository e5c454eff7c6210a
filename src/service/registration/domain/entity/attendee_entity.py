from datetime import datetime
from decimal import Decimal
from typing import Any, Optional
from uuid import UUID

import attrs

from src.platform.exception.exceptions import DomainError
from src.platform.types.uuid7 import generate_uuid7
from src.service.registration.domain.enum.attendance_status import AttendanceStatus


DUPLICATE_REGISTRATION_MESSAGE = 'User is already registered for this event'


@attrs.define
class Attendee:
    """One user's registration for one event. At most one exists per (user_id, event_id)."""

    user_id: UUID
    event_id: UUID
    status: AttendanceStatus = AttendanceStatus.REGISTERED
    notes: Optional[str] = None
    is_paid: bool = False
    payment_amount: Optional[Decimal] = None
    id: Optional[UUID] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    @classmethod
    def register(
        cls,
        *,
        user_id: UUID,
        event_id: UUID,
        status: Optional[AttendanceStatus] = None,
        notes: Optional[str] = None,
        is_paid: Optional[bool] = None,
        payment_amount: Optional[Decimal] = None,
    ) -> 'Attendee':
        cls.validate_payment_amount(payment_amount)
        return cls(
            id=generate_uuid7(),
            user_id=user_id,
            event_id=event_id,
            status=status or AttendanceStatus.REGISTERED,
            notes=notes,
            is_paid=bool(is_paid),
            payment_amount=payment_amount,
        )

    @staticmethod
    def validate_payment_amount(amount: Optional[Decimal]) -> None:
        if amount is not None and amount < 0:
            raise DomainError('Payment amount cannot be negative')

    @classmethod
    def validate_changes(cls, changes: dict[str, Any]) -> None:
        # Partial merge, no cross-field rules (is_paid without an amount is allowed)
        cls.validate_payment_amount(changes.get('payment_amount'))

    @classmethod
    def payment_changes(cls, amount: Decimal) -> dict[str, Any]:
        """Overwrite, never accumulate: repeated calls with the same amount are idempotent."""
        cls.validate_payment_amount(amount)
        return {'is_paid': True, 'payment_amount': amount}
