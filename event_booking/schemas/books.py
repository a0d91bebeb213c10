from decimal import Decimal
from typing import Optional

from pydantic import BaseModel

from event_booking.models.forms import FieldErrorCode, FormField
from event_booking.models.state import BookingStage
from event_booking.schemas.events import EventOut


class FieldValueIn(BaseModel):
    value: str


class FieldErrorOut(BaseModel):
    code: FieldErrorCode
    message: str

    class Config:
        from_attributes = True


class FormOut(BaseModel):
    values: dict[FormField, str]
    errors: dict[FormField, FieldErrorOut]
    touched: dict[FormField, bool]


class BookingOut(BaseModel):
    user_name: str
    email: str
    user_department: str
    event_id: int
    event_name: str
    tickets_booked: int
    total_amount: Decimal

    class Config:
        from_attributes = True


class BookingViewOut(BaseModel):
    stage: BookingStage
    selected_event: Optional[EventOut] = None
    form: FormOut
    estimated_total: Optional[Decimal] = None
    departments: list[str]


class BookingRejectedOut(BaseModel):
    detail: str
    errors: dict[FormField, FieldErrorOut]
