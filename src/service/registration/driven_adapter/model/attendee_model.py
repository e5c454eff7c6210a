from datetime import datetime
from decimal import Decimal
from typing import Optional
from uuid import UUID

from sqlalchemy import (
    Boolean,
    DateTime,
    ForeignKey,
    Numeric,
    String,
    Text,
    UniqueConstraint,
    Uuid,
)
from sqlalchemy.orm import Mapped, mapped_column
from sqlalchemy.sql import func

from src.platform.database.db_setting import Base


ATTENDEE_USER_EVENT_UNIQUE = 'uq_attendee_user_event'


class AttendeeModel(Base):
    __tablename__ = 'attendee'
    __table_args__ = (
        UniqueConstraint('user_id', 'event_id', name=ATTENDEE_USER_EVENT_UNIQUE),
    )

    id: Mapped[UUID] = mapped_column(Uuid, primary_key=True)  # UUID7
    user_id: Mapped[UUID] = mapped_column(
        Uuid, ForeignKey('user.id', ondelete='CASCADE'), nullable=False, index=True
    )
    event_id: Mapped[UUID] = mapped_column(
        Uuid, ForeignKey('event.id', ondelete='CASCADE'), nullable=False, index=True
    )
    status: Mapped[str] = mapped_column(String(20), default='registered', nullable=False)
    notes: Mapped[Optional[str]] = mapped_column(Text, nullable=True)
    is_paid: Mapped[bool] = mapped_column(Boolean, default=False, nullable=False)
    payment_amount: Mapped[Optional[Decimal]] = mapped_column(Numeric(10, 2), nullable=True)
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), server_default=func.now(), nullable=False
    )
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), server_default=func.now(), onupdate=func.now(), nullable=False
    )

    def __repr__(self):
        return (
            f'<AttendeeModel(id={self.id}, user_id={self.user_id}, '
            f'event_id={self.event_id}, status={self.status})>'
        )
