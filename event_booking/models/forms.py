import enum
from dataclasses import dataclass, field


class FormField(str, enum.Enum):
    USER_NAME = "user_name"
    EMAIL = "email"
    USER_DEPARTMENT = "user_department"
    NUMBER_OF_TICKETS = "number_of_tickets"


class FieldErrorCode(str, enum.Enum):
    REQUIRED = "REQUIRED"
    INVALID_FORMAT = "INVALID_FORMAT"
    NOT_POSITIVE_INTEGER = "NOT_POSITIVE_INTEGER"
    EXCEEDS_AVAILABILITY = "EXCEEDS_AVAILABILITY"


@dataclass(frozen=True)
class FieldError:
    code: FieldErrorCode
    message: str


def _empty_values() -> dict[FormField, str]:
    return {f: "" for f in FormField}


@dataclass(frozen=True)
class FormState:
    """Field values plus per-field errors and touched flags.

    An error is only shown to the user once its field has been touched.
    """

    values: dict[FormField, str] = field(default_factory=_empty_values)
    errors: dict[FormField, FieldError] = field(default_factory=dict)
    touched: dict[FormField, bool] = field(default_factory=dict)

    def value(self, form_field: FormField) -> str:
        return self.values.get(form_field, "")

    def is_touched(self, form_field: FormField) -> bool:
        return self.touched.get(form_field, False)

    @property
    def visible_errors(self) -> dict[FormField, FieldError]:
        return {f: err for f, err in self.errors.items() if self.is_touched(f)}

    @property
    def is_empty(self) -> bool:
        return (
            not any(self.values.values())
            and not self.errors
            and not any(self.touched.values())
        )
