import threading
from typing import Callable

from event_booking.core.catalog import initial_events
from event_booking.core.logger import logger
from event_booking.models.state import AppState


class BookingStore:
    """Holds the current AppState and applies transitions to it one at a time."""

    def __init__(self, state: AppState | None = None):
        self._state = state if state is not None else AppState(events=initial_events())
        self._lock = threading.Lock()

    @property
    def state(self) -> AppState:
        return self._state

    def dispatch(self, action: Callable[..., AppState], *args) -> AppState:
        """Apply ``action(state, *args)`` and keep the result.

        If the action raises, the current state is left as it was.
        """
        with self._lock:
            before = self._state
            after = action(before, *args)
            self._state = after
        logger.info(
            "%s: %s -> %s", action.__name__, before.stage.value, after.stage.value
        )
        return after


_store = BookingStore()


def get_store() -> BookingStore:
    return _store
