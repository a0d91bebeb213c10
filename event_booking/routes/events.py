from fastapi import APIRouter, Depends

from event_booking.core.catalog import DEPARTMENTS
from event_booking.core.store import BookingStore, get_store
from event_booking.routes.common import booking_view, raise_http_error
from event_booking.schemas.books import BookingViewOut
from event_booking.schemas.events import EventListItemOut, EventOut
from event_booking.services.bookings import BookingDomainError, EventNotFoundError, select_event

router = APIRouter(tags=["events"])


@router.get("/events", response_model=list[EventListItemOut])
def list_events(store: BookingStore = Depends(get_store)):
    state = store.state
    return [
        EventListItemOut.model_validate(event).model_copy(
            update={"is_selected": event.id == state.selected_event_id}
        )
        for event in state.events
    ]


@router.get("/events/{event_id}", response_model=EventOut)
def get_event(event_id: int, store: BookingStore = Depends(get_store)):
    event = store.state.find_event(event_id)
    if event is None:
        raise_http_error(EventNotFoundError(event_id))
    return EventOut.model_validate(event)


@router.post("/events/{event_id}/select", response_model=BookingViewOut)
def choose_event(event_id: int, store: BookingStore = Depends(get_store)):
    try:
        state = store.dispatch(select_event, event_id)
    except BookingDomainError as e:
        raise_http_error(e)
    return booking_view(state)


@router.get("/departments", response_model=list[str])
def list_departments():
    return list(DEPARTMENTS)
