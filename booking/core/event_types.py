"""Event type input rules.

Raw input arrives from forms or JSON bodies, so durations may be strings or
floats. ``validate_event_type`` coerces and checks every field and returns
all problems together rather than stopping at the first one.
"""

from collections.abc import Mapping
from dataclasses import asdict, dataclass

from booking.core.validation import ValidationResult, ValidationViolation

MIN_NAME_LENGTH = 2
MAX_DURATION_MINUTES = 60 * 12

NAME_TOO_SHORT_MESSAGE = f"Event name must be at least {MIN_NAME_LENGTH} characters."
DURATION_NOT_INTEGER_MESSAGE = "Duration must be a whole number of minutes."
DURATION_NOT_POSITIVE_MESSAGE = "Duration must be greater than 0."
DURATION_TOO_LARGE_MESSAGE = f"Duration must be less than 12 hours ({MAX_DURATION_MINUTES} minutes)."
IS_ACTIVE_NOT_BOOL_MESSAGE = "Active flag must be true or false."
DESCRIPTION_NOT_TEXT_MESSAGE = "Description must be text."


@dataclass(frozen=True)
class EventTypeData:
    name: str
    duration_minutes: int
    description: str | None = None
    is_active: bool = True

    def to_dict(self) -> dict:
        return asdict(self)


def coerce_duration(value) -> int:
    """Convert ints, integral floats and numeric strings to an int.

    Raises ``ValueError`` for anything that is not a whole number. An empty
    string counts as zero.
    """
    if isinstance(value, bool) or value is None:
        raise ValueError(DURATION_NOT_INTEGER_MESSAGE)
    if isinstance(value, int):
        return value
    if isinstance(value, str):
        value = value.strip()
        if not value:
            return 0
        try:
            return int(value)
        except ValueError:
            pass
        try:
            value = float(value)
        except ValueError as exc:
            raise ValueError(DURATION_NOT_INTEGER_MESSAGE) from exc
    if isinstance(value, float) and value.is_integer():
        return int(value)
    raise ValueError(DURATION_NOT_INTEGER_MESSAGE)


def _normalize_description(value) -> str | None:
    if value is None:
        return None
    normalized = value.strip()
    return normalized or None


def validate_event_type(raw: Mapping) -> ValidationResult[EventTypeData]:
    violations: list[ValidationViolation] = []

    name = raw.get("name")
    name = name.strip() if isinstance(name, str) else ""
    if len(name) < MIN_NAME_LENGTH:
        violations.append(ValidationViolation(None, "name", NAME_TOO_SHORT_MESSAGE))

    duration_minutes = None
    try:
        duration_minutes = coerce_duration(raw.get("duration_minutes"))
    except ValueError as exc:
        violations.append(ValidationViolation(None, "duration_minutes", str(exc)))
    else:
        if duration_minutes <= 0:
            violations.append(ValidationViolation(None, "duration_minutes", DURATION_NOT_POSITIVE_MESSAGE))
        elif duration_minutes > MAX_DURATION_MINUTES:
            violations.append(ValidationViolation(None, "duration_minutes", DURATION_TOO_LARGE_MESSAGE))

    description = raw.get("description")
    if description is not None and not isinstance(description, str):
        violations.append(ValidationViolation(None, "description", DESCRIPTION_NOT_TEXT_MESSAGE))

    is_active = raw.get("is_active")
    if is_active is None:
        is_active = True
    elif not isinstance(is_active, bool):
        violations.append(ValidationViolation(None, "is_active", IS_ACTIVE_NOT_BOOL_MESSAGE))

    if violations:
        return ValidationResult.failure(violations)

    return ValidationResult.success(
        EventTypeData(
            name=name,
            description=_normalize_description(description),
            duration_minutes=duration_minutes,
            is_active=is_active,
        )
    )
