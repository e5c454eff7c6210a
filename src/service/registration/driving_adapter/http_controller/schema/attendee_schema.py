from datetime import datetime
from decimal import Decimal
from typing import Optional
from uuid import UUID

from pydantic import BaseModel, ConfigDict

from src.service.registration.domain.enum.attendance_status import AttendanceStatus


class AttendeeCreateRequest(BaseModel):
    user_id: UUID
    event_id: UUID
    status: Optional[AttendanceStatus] = None
    notes: Optional[str] = None
    is_paid: Optional[bool] = None
    payment_amount: Optional[Decimal] = None

    model_config = ConfigDict(
        json_schema_extra={
            'example': {
                'user_id': '0192f4d2-7b10-7c44-8a21-3e5f6a7b8c90',
                'event_id': '0192f4d2-8c1e-7a3b-9f00-5c2d1e6b7a10',
                'status': 'registered',
                'notes': 'VIP guest',
            }
        }
    )


class AttendeeSelfRegisterRequest(BaseModel):
    event_id: UUID
    user_id: Optional[UUID] = None  # defaults to the caller

    model_config = ConfigDict(
        json_schema_extra={'example': {'event_id': '0192f4d2-8c1e-7a3b-9f00-5c2d1e6b7a10'}}
    )


class AttendeeUpdateRequest(BaseModel):
    status: Optional[AttendanceStatus] = None
    notes: Optional[str] = None
    is_paid: Optional[bool] = None
    payment_amount: Optional[Decimal] = None

    model_config = ConfigDict(
        json_schema_extra={'example': {'notes': 'Arrives late', 'is_paid': True}}
    )


class AttendeeStatusRequest(BaseModel):
    status: AttendanceStatus

    model_config = ConfigDict(json_schema_extra={'example': {'status': 'confirmed'}})


class AttendeePaymentRequest(BaseModel):
    amount: Decimal

    model_config = ConfigDict(json_schema_extra={'example': {'amount': 49.99}})


class AttendeeResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: UUID
    user_id: UUID
    event_id: UUID
    status: AttendanceStatus
    notes: Optional[str] = None
    is_paid: bool
    payment_amount: Optional[float] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None


class AttendanceStatsResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    total: int
    confirmed: int
    attended: int
    cancelled: int
    no_show: int
