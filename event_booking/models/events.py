from dataclasses import dataclass
from decimal import Decimal

LOW_AVAILABILITY_THRESHOLD = 10


@dataclass(frozen=True)
class Event:
    id: int
    event_name: str
    department: str
    event_date: str
    event_time: str
    venue: str
    ticket_price: Decimal
    available_tickets: int

    def __post_init__(self) -> None:
        if self.ticket_price <= 0:
            raise ValueError("Ticket price must be positive")
        if self.available_tickets < 0:
            raise ValueError("Available tickets cannot be negative")

    @property
    def is_available(self) -> bool:
        return self.available_tickets > 0

    @property
    def is_low_availability(self) -> bool:
        return self.available_tickets < LOW_AVAILABILITY_THRESHOLD
