from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse, PlainTextResponse

from event_booking.core.store import BookingStore, get_store
from event_booking.models.forms import FormField
from event_booking.models.state import BookingStage
from event_booking.routes.common import booking_view, dispatch, errors_out, raise_http_error
from event_booking.schemas.books import BookingOut, BookingRejectedOut, BookingViewOut, FieldValueIn
from event_booking.services import bookings
from event_booking.services.bookings import BookingDomainError
from event_booking.services.receipts import render_receipt

router = APIRouter(prefix="/booking", tags=["bookings"])


@router.get("", response_model=BookingViewOut)
def get_booking_view(store: BookingStore = Depends(get_store)):
    return booking_view(store.state)


@router.put("/form/{form_field}", response_model=BookingViewOut)
def change_field(form_field: FormField, payload: FieldValueIn, store: BookingStore = Depends(get_store)):
    return booking_view(dispatch(store, bookings.change_field, form_field, payload.value))


@router.post("/form/{form_field}/blur", response_model=BookingViewOut)
def blur_field(form_field: FormField, store: BookingStore = Depends(get_store)):
    return booking_view(dispatch(store, bookings.blur_field, form_field))


@router.post("", response_model=BookingOut, status_code=201)
def submit_booking(store: BookingStore = Depends(get_store)):
    state = dispatch(store, bookings.submit_booking)
    if state.stage != BookingStage.SUMMARY_SHOWN:
        rejected = BookingRejectedOut(
            detail="Booking form has errors",
            errors=errors_out(state.form.errors),
        )
        return JSONResponse(status_code=422, content=rejected.model_dump(mode="json"))
    return BookingOut.model_validate(state.last_booking)


@router.post("/reset", response_model=BookingViewOut)
def reset_form(store: BookingStore = Depends(get_store)):
    return booking_view(dispatch(store, bookings.reset_form))


@router.get("/summary", response_model=BookingOut)
def get_summary(store: BookingStore = Depends(get_store)):
    try:
        booking = bookings.current_booking(store.state)
    except BookingDomainError as e:
        raise_http_error(e)
    return BookingOut.model_validate(booking)


@router.post("/summary/close", response_model=BookingViewOut)
def close_summary(store: BookingStore = Depends(get_store)):
    return booking_view(dispatch(store, bookings.close_summary))


@router.get("/summary/print", response_class=PlainTextResponse)
def print_summary(store: BookingStore = Depends(get_store)):
    try:
        booking = bookings.current_booking(store.state)
    except BookingDomainError as e:
        raise_http_error(e)
    return render_receipt(booking)
