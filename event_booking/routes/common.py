from fastapi import HTTPException

from event_booking.core.catalog import DEPARTMENTS
from event_booking.core.store import BookingStore
from event_booking.models.forms import FieldError, FormField
from event_booking.models.state import AppState
from event_booking.schemas.books import BookingViewOut, FieldErrorOut, FormOut
from event_booking.schemas.events import EventOut
from event_booking.services.bookings import BookingDomainError, EventNotFoundError
from event_booking.services.forms import estimated_total


def raise_http_error(error: BookingDomainError):
    status_code = 404 if isinstance(error, EventNotFoundError) else 409
    raise HTTPException(status_code=status_code, detail=error.message)


def errors_out(errors: dict[FormField, FieldError]) -> dict[FormField, FieldErrorOut]:
    return {f: FieldErrorOut.model_validate(err) for f, err in errors.items()}


def booking_view(state: AppState) -> BookingViewOut:
    event = state.selected_event
    return BookingViewOut(
        stage=state.stage,
        selected_event=EventOut.model_validate(event) if event is not None else None,
        form=FormOut(
            values=dict(state.form.values),
            errors=errors_out(state.form.visible_errors),
            touched={f: state.form.is_touched(f) for f in FormField},
        ),
        estimated_total=estimated_total(state.form, event),
        departments=list(DEPARTMENTS),
    )


def dispatch(store: BookingStore, action, *args) -> AppState:
    try:
        return store.dispatch(action, *args)
    except BookingDomainError as e:
        raise_http_error(e)
