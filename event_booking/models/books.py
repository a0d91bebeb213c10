from dataclasses import dataclass
from decimal import Decimal


@dataclass(frozen=True)
class Booking:
    """Confirmed ticket purchase; event name is a snapshot taken at submission."""

    user_name: str
    email: str
    user_department: str
    event_id: int
    event_name: str
    tickets_booked: int
    total_amount: Decimal

    def __post_init__(self) -> None:
        if self.tickets_booked <= 0:
            raise ValueError("A booking needs at least one ticket")
