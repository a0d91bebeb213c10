import pytest
from fastapi.testclient import TestClient

from event_booking.core.catalog import initial_events
from event_booking.core.store import BookingStore, get_store
from event_booking.main import app
from event_booking.models.forms import FormField
from event_booking.models.state import AppState
from event_booking.services import bookings


@pytest.fixture
def initial_state() -> AppState:
    return AppState(events=initial_events())


@pytest.fixture
def selected_state(initial_state: AppState) -> AppState:
    """Cricket championship selected: 50 tickets at 150 each."""
    return bookings.select_event(initial_state, 1)


@pytest.fixture
def fill_form():
    def _fill(state: AppState, **values: str) -> AppState:
        for name, value in values.items():
            state = bookings.change_field(state, FormField(name), value)
        return state

    return _fill


@pytest.fixture
def valid_values() -> dict[str, str]:
    return {
        "user_name": "Asha Rao",
        "email": "asha@uni.edu",
        "user_department": "Civil Engineering",
        "number_of_tickets": "3",
    }


@pytest.fixture
def store() -> BookingStore:
    return BookingStore()


@pytest.fixture
def client(store: BookingStore):
    app.dependency_overrides[get_store] = lambda: store
    with TestClient(app) as test_client:
        yield test_client
    app.dependency_overrides.clear()
