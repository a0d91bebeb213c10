from event_booking.core.config import get_currency
from event_booking.models.books import Booking


def render_receipt(booking: Booking, currency: str | None = None) -> str:
    """Plain-text booking summary for printing."""
    currency = currency if currency is not None else get_currency()
    lines = [
        "Booking Confirmed!",
        "",
        f"Name:              {booking.user_name}",
        f"Email:             {booking.email}",
        f"Department:        {booking.user_department}",
        f"Event:             {booking.event_name}",
        f"Number of Tickets: {booking.tickets_booked}",
        f"Total Amount Paid: {currency}{booking.total_amount}",
        "",
        "Please present this confirmation at the venue entrance.",
        "All tickets are non-refundable.",
    ]
    return "\n".join(lines) + "\n"
