import enum
from dataclasses import replace

from event_booking.core.logger import logger
from event_booking.models.books import Booking
from event_booking.models.forms import FormField
from event_booking.models.state import AppState, BookingStage
from event_booking.services import forms
from event_booking.services.validation import parse_ticket_count


class ErrorCode(str, enum.Enum):
    EVENT_NOT_FOUND = "EVENT_NOT_FOUND"
    INVALID_TRANSITION = "INVALID_TRANSITION"


class BookingDomainError(Exception):
    code: ErrorCode

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class EventNotFoundError(BookingDomainError):
    code = ErrorCode.EVENT_NOT_FOUND

    def __init__(self, event_id: int):
        super().__init__("Event not found")
        self.event_id = event_id


class InvalidTransitionError(BookingDomainError):
    code = ErrorCode.INVALID_TRANSITION

    def __init__(self, action: str, stage: BookingStage):
        super().__init__(f"Cannot {action} while in {stage.value}")
        self.action = action
        self.stage = stage


def _require_stage(state: AppState, action: str, *allowed: BookingStage) -> None:
    if state.stage not in allowed:
        raise InvalidTransitionError(action, state.stage)


def select_event(state: AppState, event_id: int) -> AppState:
    """Select an event from any stage; a shown summary is dismissed."""
    if state.find_event(event_id) is None:
        raise EventNotFoundError(event_id)
    return replace(state, selected_event_id=event_id, show_summary=False)


def change_field(state: AppState, form_field: FormField, value: str) -> AppState:
    _require_stage(state, "edit the form", BookingStage.EVENT_SELECTED)
    return replace(state, form=forms.change_field(state.form, form_field, value))


def blur_field(state: AppState, form_field: FormField) -> AppState:
    _require_stage(state, "validate a field", BookingStage.EVENT_SELECTED)
    return replace(state, form=forms.blur_field(state.form, form_field, state.selected_event))


def reset_form(state: AppState) -> AppState:
    _require_stage(state, "reset the form", BookingStage.EVENT_SELECTED)
    return replace(state, form=forms.reset_form())


def submit_booking(state: AppState) -> AppState:
    """
    Validate the whole form and, if it passes, confirm the booking.

    On failure every field is marked touched so all errors show, and nothing
    else changes. On success the booking is recorded, the event's inventory is
    reduced by the tickets booked, the form is cleared and the summary shown.
    """
    _require_stage(state, "submit a booking", BookingStage.EVENT_SELECTED)
    event = state.selected_event
    if event is None:
        raise EventNotFoundError(state.selected_event_id)

    form, passed = forms.validate_form(forms.touch_all(state.form), event)
    if not passed:
        logger.info(
            "Booking for event %s rejected: %s",
            event.id,
            ", ".join(f.value for f in form.errors),
        )
        return replace(state, form=form)

    tickets = parse_ticket_count(form.value(FormField.NUMBER_OF_TICKETS))
    booking = Booking(
        user_name=form.value(FormField.USER_NAME),
        email=form.value(FormField.EMAIL),
        user_department=form.value(FormField.USER_DEPARTMENT),
        event_id=event.id,
        event_name=event.event_name,
        tickets_booked=tickets,
        total_amount=event.ticket_price * tickets,
    )
    events = tuple(
        replace(e, available_tickets=e.available_tickets - tickets) if e.id == event.id else e
        for e in state.events
    )
    logger.info(
        "Booked %s tickets for event %s (%s left)",
        tickets,
        event.id,
        event.available_tickets - tickets,
    )
    return replace(
        state,
        events=events,
        last_booking=booking,
        show_summary=True,
        form=forms.reset_form(),
    )


def close_summary(state: AppState) -> AppState:
    """Leave the summary and go back to the event list with nothing selected."""
    _require_stage(state, "close the summary", BookingStage.SUMMARY_SHOWN)
    return replace(state, selected_event_id=None, show_summary=False)


def current_booking(state: AppState) -> Booking:
    _require_stage(state, "view the summary", BookingStage.SUMMARY_SHOWN)
    booking = state.last_booking
    if booking is None:
        raise InvalidTransitionError("view the summary", state.stage)
    return booking
