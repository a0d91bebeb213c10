from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from event_booking.core.config import get_cors_origins
from event_booking.core.logger import logger
from event_booking.routes import bookings, events

app = FastAPI(title="Department Sports Event Booking")

app.add_middleware(
    CORSMiddleware,
    allow_origins=get_cors_origins(),
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(events.router)
app.include_router(bookings.router)

logger.info("Event booking service ready")
