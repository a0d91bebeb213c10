import enum
from dataclasses import dataclass, field

from event_booking.models.books import Booking
from event_booking.models.events import Event
from event_booking.models.forms import FormState


class BookingStage(str, enum.Enum):
    NO_EVENT_SELECTED = "NO_EVENT_SELECTED"
    EVENT_SELECTED = "EVENT_SELECTED"
    SUMMARY_SHOWN = "SUMMARY_SHOWN"


@dataclass(frozen=True)
class AppState:
    """Everything the booking screen needs.

    The selected event is held by id only and always looked up in ``events``,
    so inventory changes are visible through the selection without copying.
    """

    events: tuple[Event, ...]
    selected_event_id: int | None = None
    last_booking: Booking | None = None
    show_summary: bool = False
    form: FormState = field(default_factory=FormState)

    def find_event(self, event_id: int) -> Event | None:
        for event in self.events:
            if event.id == event_id:
                return event
        return None

    @property
    def selected_event(self) -> Event | None:
        if self.selected_event_id is None:
            return None
        return self.find_event(self.selected_event_id)

    @property
    def stage(self) -> BookingStage:
        if self.show_summary and self.last_booking is not None:
            return BookingStage.SUMMARY_SHOWN
        if self.selected_event_id is not None:
            return BookingStage.EVENT_SELECTED
        return BookingStage.NO_EVENT_SELECTED
