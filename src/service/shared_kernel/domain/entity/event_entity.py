from datetime import datetime
from typing import Optional
from uuid import UUID

import attrs

from src.platform.exception.exceptions import NotFoundError


@attrs.define
class EventEntity:
    """Read-only view of a catalog event. Registration and inventory only need its identity."""

    id: UUID
    title: str = ''
    description: Optional[str] = None
    start_date: Optional[datetime] = None
    end_date: Optional[datetime] = None
    created_at: Optional[datetime] = None

    @staticmethod
    def validate_event_exists(event: Optional['EventEntity'], *, event_id: UUID) -> 'EventEntity':
        if not event:
            raise NotFoundError(f'Event with ID {event_id} not found')
        return event
