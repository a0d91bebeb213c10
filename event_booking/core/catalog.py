from decimal import Decimal

from event_booking.models.events import Event

DEPARTMENTS: tuple[str, ...] = (
    "Computer Science",
    "Mechanical Engineering",
    "Electronics & Communication",
    "Civil Engineering",
    "Electrical Engineering",
    "Information Technology",
    "Chemical Engineering",
    "Biotechnology",
)


def initial_events() -> tuple[Event, ...]:
    """Seed inventory loaded at startup."""
    return (
        Event(
            id=1,
            event_name="Inter-Department Cricket Championship",
            department="Computer Science",
            event_date="2026-03-15",
            event_time="10:00 AM",
            venue="University Cricket Ground",
            ticket_price=Decimal("150"),
            available_tickets=50,
        ),
        Event(
            id=2,
            event_name="Basketball Tournament Finals",
            department="Mechanical Engineering",
            event_date="2026-03-20",
            event_time="02:00 PM",
            venue="Indoor Sports Complex",
            ticket_price=Decimal("100"),
            available_tickets=75,
        ),
        Event(
            id=3,
            event_name="Badminton Singles Championship",
            department="Electronics & Communication",
            event_date="2026-03-25",
            event_time="09:00 AM",
            venue="Main Auditorium Court",
            ticket_price=Decimal("80"),
            available_tickets=40,
        ),
        Event(
            id=4,
            event_name="Football League - Quarterfinals",
            department="Civil Engineering",
            event_date="2026-03-28",
            event_time="04:00 PM",
            venue="Main Football Stadium",
            ticket_price=Decimal("120"),
            available_tickets=100,
        ),
    )
