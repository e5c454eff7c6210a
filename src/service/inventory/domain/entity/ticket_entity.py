from datetime import datetime
from decimal import Decimal
from typing import Any, Optional
from uuid import UUID

import attrs

from src.platform.exception.exceptions import DomainError
from src.platform.types.uuid7 import generate_uuid7


# Column bounds: quantity is a 32-bit INTEGER, price is NUMERIC(10, 2)
MAX_TICKET_QUANTITY = 2**31 - 1
MAX_TICKET_PRICE = Decimal('99999999.99')
QUANTITY_LIMIT_MESSAGE = f'Ticket quantity cannot exceed {MAX_TICKET_QUANTITY}'


@attrs.define
class Ticket:
    """
    A priced allocation tier of one event (e.g. "General Admission").

    `quantity` is the remaining allocation: zero means sold out, never negative.
    """

    name: str
    price: Decimal
    quantity: int
    event_id: UUID
    id: Optional[UUID] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    @classmethod
    def create(cls, *, name: str, price: Decimal, quantity: int, event_id: UUID) -> 'Ticket':
        cls.validate_price(price)
        cls.validate_quantity(quantity)
        return cls(
            id=generate_uuid7(),
            name=name,
            price=price,
            quantity=quantity,
            event_id=event_id,
        )

    @property
    def is_available(self) -> bool:
        return self.quantity > 0

    @staticmethod
    def validate_price(price: Decimal) -> None:
        if price < 0:
            raise DomainError('Ticket price cannot be negative')
        if price > MAX_TICKET_PRICE:
            raise DomainError(f'Ticket price cannot exceed {MAX_TICKET_PRICE}')

    @staticmethod
    def validate_quantity(quantity: int) -> None:
        if quantity < 0:
            raise DomainError('Ticket quantity cannot be negative')
        if quantity > MAX_TICKET_QUANTITY:
            raise DomainError(QUANTITY_LIMIT_MESSAGE)

    @staticmethod
    def validate_adjustment_amount(amount: int) -> None:
        if amount <= 0:
            raise DomainError('Amount must be greater than 0')
        if amount > MAX_TICKET_QUANTITY:
            raise DomainError(f'Amount cannot exceed {MAX_TICKET_QUANTITY}')

    @classmethod
    def validate_changes(cls, changes: dict[str, Any]) -> None:
        """Re-check the range rules for whichever fields a partial update carries."""
        if changes.get('price') is not None:
            cls.validate_price(changes['price'])
        if changes.get('quantity') is not None:
            cls.validate_quantity(changes['quantity'])

    @staticmethod
    def quantity_limit_error() -> DomainError:
        return DomainError(QUANTITY_LIMIT_MESSAGE)

    @staticmethod
    def insufficient_quantity_error(remaining: int) -> DomainError:
        return DomainError(f'Not enough tickets available. Only {remaining} tickets remaining')
