import os

LOG_LEVEL = os.getenv("EVENT_BOOKING_LOG_LEVEL", "INFO").upper()
CORS_ORIGINS = os.getenv("EVENT_BOOKING_CORS_ORIGINS", "*")
CURRENCY = os.getenv("EVENT_BOOKING_CURRENCY", "₹")


def get_cors_origins() -> list[str]:
    return [origin.strip() for origin in CORS_ORIGINS.split(",") if origin.strip()]


def get_currency() -> str:
    return CURRENCY
