from decimal import Decimal

from pydantic import BaseModel


class EventOut(BaseModel):
    id: int
    event_name: str
    department: str
    event_date: str
    event_time: str
    venue: str
    ticket_price: Decimal
    available_tickets: int
    is_available: bool
    is_low_availability: bool

    class Config:
        from_attributes = True


class EventListItemOut(EventOut):
    is_selected: bool = False
