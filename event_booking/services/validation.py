"""
Field validation rules for the booking form.

Each rule takes the current form values and the selected event (or None)
and returns a FieldError, or None when the field is valid.
"""
import re
from typing import Callable, Mapping

from event_booking.core.catalog import DEPARTMENTS
from event_booking.models.events import Event
from event_booking.models.forms import FieldError, FieldErrorCode, FormField

# Deliberately permissive: something@something.something with no whitespace.
EMAIL_PATTERN = re.compile(r"[^\s@]+@[^\s@]+\.[^\s@]+")
TICKET_COUNT_PATTERN = re.compile(r"[0-9]+")
MAX_TICKET_DIGITS = 18

Values = Mapping[FormField, str]
Rule = Callable[[Values, Event | None], FieldError | None]


def is_valid_email(email: str) -> bool:
    return EMAIL_PATTERN.fullmatch(email) is not None


def _significant_digits(raw: str) -> str | None:
    """Digits of a non-negative integer without leading zeros ("" for zero)."""
    digits = raw.strip()
    if not TICKET_COUNT_PATTERN.fullmatch(digits):
        return None
    return digits.lstrip("0")


def parse_ticket_count(raw: str) -> int | None:
    """Return the ticket count as a positive int, or None if it isn't one.

    Counts longer than MAX_TICKET_DIGITS are not converted and give None.
    """
    digits = _significant_digits(raw)
    if not digits or len(digits) > MAX_TICKET_DIGITS:
        return None
    return int(digits)


def exceeds_availability(raw: str, event: Event) -> bool:
    """Compare a positive count against the event's inventory without converting huge values."""
    digits = _significant_digits(raw) or ""
    available = str(event.available_tickets)
    if len(digits) != len(available):
        return len(digits) > len(available)
    return digits > available


def validate_user_name(values: Values, event: Event | None = None) -> FieldError | None:
    if not values.get(FormField.USER_NAME, "").strip():
        return FieldError(FieldErrorCode.REQUIRED, "Name is required")
    return None


def validate_email(values: Values, event: Event | None = None) -> FieldError | None:
    email = values.get(FormField.EMAIL, "")
    if not email.strip():
        return FieldError(FieldErrorCode.REQUIRED, "Email is required")
    if not is_valid_email(email):
        return FieldError(FieldErrorCode.INVALID_FORMAT, "Please enter a valid email address")
    return None


def validate_user_department(values: Values, event: Event | None = None) -> FieldError | None:
    if values.get(FormField.USER_DEPARTMENT, "") not in DEPARTMENTS:
        return FieldError(FieldErrorCode.REQUIRED, "Department is required")
    return None


def validate_number_of_tickets(values: Values, event: Event | None = None) -> FieldError | None:
    raw = values.get(FormField.NUMBER_OF_TICKETS, "")
    if not raw.strip():
        return FieldError(FieldErrorCode.REQUIRED, "Number of tickets is required")

    digits = _significant_digits(raw)
    if not digits:
        return FieldError(FieldErrorCode.NOT_POSITIVE_INTEGER, "Please enter a positive number")
    if event is not None and exceeds_availability(raw, event):
        return FieldError(
            FieldErrorCode.EXCEEDS_AVAILABILITY,
            f"Only {event.available_tickets} tickets available",
        )
    return None


RULES: dict[FormField, Rule] = {
    FormField.USER_NAME: validate_user_name,
    FormField.EMAIL: validate_email,
    FormField.USER_DEPARTMENT: validate_user_department,
    FormField.NUMBER_OF_TICKETS: validate_number_of_tickets,
}


def validate_field(form_field: FormField, values: Values, event: Event | None) -> FieldError | None:
    return RULES[form_field](values, event)


def validate_all(values: Values, event: Event | None) -> dict[FormField, FieldError]:
    """Errors for every invalid field; an empty dict means the form passes."""
    errors = {}
    for form_field, rule in RULES.items():
        error = rule(values, event)
        if error is not None:
            errors[form_field] = error
    return errors
