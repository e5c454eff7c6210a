from datetime import datetime
from decimal import Decimal
from typing import Optional
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field


class TicketCreateRequest(BaseModel):
    # price/quantity sign is checked by the domain so the caller gets its message
    name: str = Field(min_length=1, max_length=100)
    price: Decimal
    quantity: int
    event_id: UUID

    model_config = ConfigDict(
        json_schema_extra={
            'example': {
                'name': 'General Admission',
                'price': 29.99,
                'quantity': 100,
                'event_id': '0192f4d2-8c1e-7a3b-9f00-5c2d1e6b7a10',
            }
        }
    )


class TicketUpdateRequest(BaseModel):
    name: Optional[str] = Field(default=None, min_length=1, max_length=100)
    price: Optional[Decimal] = None
    quantity: Optional[int] = None
    event_id: Optional[UUID] = None

    model_config = ConfigDict(json_schema_extra={'example': {'price': 34.5, 'quantity': 80}})


class TicketQuantityRequest(BaseModel):
    quantity: int

    model_config = ConfigDict(json_schema_extra={'example': {'quantity': 50}})


class TicketAmountRequest(BaseModel):
    amount: int

    model_config = ConfigDict(json_schema_extra={'example': {'amount': 2}})


class TicketResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: UUID
    name: str
    price: float
    quantity: int
    event_id: UUID
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None


class TicketDeleteResponse(BaseModel):
    message: str
