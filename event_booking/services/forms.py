from decimal import Decimal

from event_booking.models.events import Event
from event_booking.models.forms import FieldError, FormField, FormState
from event_booking.services.validation import parse_ticket_count, validate_all, validate_field


def change_field(form: FormState, form_field: FormField, value: str) -> FormState:
    """Set a field's value and drop its error until it is validated again."""
    values = {**form.values, form_field: value}
    errors = {f: err for f, err in form.errors.items() if f != form_field}
    return FormState(values=values, errors=errors, touched=dict(form.touched))


def blur_field(form: FormState, form_field: FormField, event: Event | None) -> FormState:
    """Mark one field touched and recompute only that field's error."""
    errors = {f: err for f, err in form.errors.items() if f != form_field}
    error = validate_field(form_field, form.values, event)
    if error is not None:
        errors[form_field] = error
    touched = {**form.touched, form_field: True}
    return FormState(values=dict(form.values), errors=errors, touched=touched)


def touch_all(form: FormState) -> FormState:
    touched = {f: True for f in FormField}
    return FormState(values=dict(form.values), errors=dict(form.errors), touched=touched)


def validate_form(form: FormState, event: Event | None) -> tuple[FormState, bool]:
    """Recompute every field's error at once; returns the new form and whether it passed."""
    errors: dict[FormField, FieldError] = validate_all(form.values, event)
    validated = FormState(values=dict(form.values), errors=errors, touched=dict(form.touched))
    return validated, not errors


def reset_form() -> FormState:
    return FormState()


def estimated_total(form: FormState, event: Event | None) -> Decimal | None:
    """Running total for the current ticket count, if it can be shown."""
    if event is None or FormField.NUMBER_OF_TICKETS in form.errors:
        return None
    count = parse_ticket_count(form.value(FormField.NUMBER_OF_TICKETS))
    if count is None:
        return None
    return event.ticket_price * count
