"""
Test the booking state machine and the inventory transition.
"""
from decimal import Decimal

import pytest

from event_booking.core.store import BookingStore
from event_booking.models.forms import FieldErrorCode, FormField
from event_booking.models.state import AppState, BookingStage
from event_booking.services import bookings
from event_booking.services.bookings import (
    ErrorCode,
    EventNotFoundError,
    InvalidTransitionError,
)
from event_booking.services.receipts import render_receipt


class TestSelectEvent:
    def test_select_from_nothing(self, initial_state: AppState):
        state = bookings.select_event(initial_state, 2)
        assert state.stage == BookingStage.EVENT_SELECTED
        assert state.selected_event.id == 2

    def test_select_unknown_event(self, initial_state: AppState):
        with pytest.raises(EventNotFoundError) as exc:
            bookings.select_event(initial_state, 99)
        assert exc.value.code == ErrorCode.EVENT_NOT_FOUND

    def test_switching_events_keeps_form_values(self, selected_state: AppState, fill_form):
        state = fill_form(selected_state, user_name="Asha")
        state = bookings.select_event(state, 4)
        assert state.selected_event.id == 4
        assert state.form.value(FormField.USER_NAME) == "Asha"

    def test_select_from_summary_hides_summary(self, selected_state, valid_values, fill_form):
        state = bookings.submit_booking(fill_form(selected_state, **valid_values))
        assert state.stage == BookingStage.SUMMARY_SHOWN

        state = bookings.select_event(state, 3)
        assert state.stage == BookingStage.EVENT_SELECTED
        assert not state.show_summary
        assert state.last_booking is not None


class TestSubmitBooking:
    def test_successful_booking(self, selected_state, valid_values, fill_form):
        state = bookings.submit_booking(fill_form(selected_state, **valid_values))

        booking = state.last_booking
        assert state.stage == BookingStage.SUMMARY_SHOWN
        assert booking.tickets_booked == 3
        assert booking.total_amount == Decimal("450")
        assert booking.event_id == 1
        assert booking.event_name == "Inter-Department Cricket Championship"
        assert booking.user_name == "Asha Rao"
        assert state.find_event(1).available_tickets == 47
        assert state.selected_event.available_tickets == 47

    def test_other_events_unchanged(self, initial_state, selected_state, valid_values, fill_form):
        state = bookings.submit_booking(fill_form(selected_state, **valid_values))
        assert state.events[1:] == initial_state.events[1:]

    def test_form_cleared_after_success(self, selected_state, valid_values, fill_form):
        state = bookings.submit_booking(fill_form(selected_state, **valid_values))
        assert state.form.is_empty

    def test_booking_every_remaining_ticket(self, selected_state, valid_values, fill_form):
        valid_values["number_of_tickets"] = "50"
        state = bookings.submit_booking(fill_form(selected_state, **valid_values))
        assert state.find_event(1).available_tickets == 0
        assert not state.find_event(1).is_available

    def test_exceeding_inventory_is_rejected(self, selected_state, valid_values, fill_form):
        valid_values["number_of_tickets"] = "51"
        before = fill_form(selected_state, **valid_values)
        state = bookings.submit_booking(before)

        assert state.stage == BookingStage.EVENT_SELECTED
        assert state.form.errors[FormField.NUMBER_OF_TICKETS].code == FieldErrorCode.EXCEEDS_AVAILABILITY
        assert state.events == before.events
        assert state.last_booking is None

    def test_failed_submit_touches_every_field(self, selected_state, fill_form):
        state = bookings.submit_booking(fill_form(selected_state, user_name="Asha"))

        assert all(state.form.is_touched(f) for f in FormField)
        assert set(state.form.visible_errors) == {
            FormField.EMAIL,
            FormField.USER_DEPARTMENT,
            FormField.NUMBER_OF_TICKETS,
        }
        assert state.form.value(FormField.USER_NAME) == "Asha"

    def test_second_booking_sees_reduced_inventory(self, selected_state, valid_values, fill_form):
        valid_values["number_of_tickets"] = "30"
        state = bookings.submit_booking(fill_form(selected_state, **valid_values))
        state = bookings.select_event(bookings.close_summary(state), 1)
        state = bookings.submit_booking(fill_form(state, **valid_values))

        assert state.form.errors[FormField.NUMBER_OF_TICKETS].message == "Only 20 tickets available"
        assert state.find_event(1).available_tickets == 20

    def test_submit_without_selection(self, initial_state):
        with pytest.raises(InvalidTransitionError) as exc:
            bookings.submit_booking(initial_state)
        assert exc.value.stage == BookingStage.NO_EVENT_SELECTED


class TestFormActions:
    def test_edits_need_a_selected_event(self, initial_state):
        with pytest.raises(InvalidTransitionError):
            bookings.change_field(initial_state, FormField.EMAIL, "a@b.co")
        with pytest.raises(InvalidTransitionError):
            bookings.blur_field(initial_state, FormField.EMAIL)

    def test_blur_uses_selected_event_inventory(self, selected_state):
        state = bookings.change_field(selected_state, FormField.NUMBER_OF_TICKETS, "60")
        state = bookings.blur_field(state, FormField.NUMBER_OF_TICKETS)
        assert state.form.visible_errors[FormField.NUMBER_OF_TICKETS].code == FieldErrorCode.EXCEEDS_AVAILABILITY

    def test_reset_keeps_selection(self, selected_state, valid_values, fill_form):
        state = bookings.blur_field(fill_form(selected_state, **valid_values), FormField.EMAIL)
        state = bookings.reset_form(state)

        assert state.form.is_empty
        assert state.stage == BookingStage.EVENT_SELECTED
        assert state.selected_event_id == 1

    def test_reset_needs_a_selected_event(self, initial_state):
        with pytest.raises(InvalidTransitionError):
            bookings.reset_form(initial_state)


class TestCloseSummary:
    def test_close_returns_to_list_with_inventory_kept(self, selected_state, valid_values, fill_form):
        state = bookings.submit_booking(fill_form(selected_state, **valid_values))
        state = bookings.close_summary(state)

        assert state.stage == BookingStage.NO_EVENT_SELECTED
        assert state.selected_event_id is None
        assert state.find_event(1).available_tickets == 47

    def test_close_without_summary(self, selected_state):
        with pytest.raises(InvalidTransitionError):
            bookings.close_summary(selected_state)

    def test_current_booking_only_in_summary(self, selected_state):
        with pytest.raises(InvalidTransitionError):
            bookings.current_booking(selected_state)


class TestBookingStore:
    def test_dispatch_keeps_new_state(self, store: BookingStore):
        store.dispatch(bookings.select_event, 4)
        assert store.state.selected_event_id == 4

    def test_failed_dispatch_keeps_old_state(self, store: BookingStore):
        before = store.state
        with pytest.raises(InvalidTransitionError):
            store.dispatch(bookings.close_summary)
        assert store.state is before


class TestReceipt:
    def test_receipt_lists_booking(self, selected_state, valid_values, fill_form):
        state = bookings.submit_booking(fill_form(selected_state, **valid_values))
        receipt = render_receipt(state.last_booking, currency="Rs.")

        assert "Booking Confirmed!" in receipt
        assert "Asha Rao" in receipt
        assert "Number of Tickets: 3" in receipt
        assert "Total Amount Paid: Rs.450" in receipt
