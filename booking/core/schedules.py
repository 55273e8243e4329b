from collections.abc import Mapping
from dataclasses import dataclass, field

from booking.core.availability import AvailabilityInterval, validate_raw_availabilities
from booking.core.formatters import UNKNOWN_TIMEZONE_MESSAGE, is_valid_timezone
from booking.core.validation import ValidationResult, ValidationViolation

TIMEZONE_REQUIRED_MESSAGE = "Required"
AVAILABILITIES_NOT_LIST_MESSAGE = "Availabilities must be a list."


@dataclass(frozen=True)
class ScheduleData:
    """A validated timezone plus the full availability set that replaces the stored one."""
    timezone: str
    availabilities: tuple[AvailabilityInterval, ...] = field(default_factory=tuple)


def validate_schedule(raw: Mapping) -> ValidationResult[ScheduleData]:
    violations: list[ValidationViolation] = []

    timezone_name = raw.get("timezone")
    if timezone_name is not None and not isinstance(timezone_name, str):
        violations.append(ValidationViolation(None, "timezone", UNKNOWN_TIMEZONE_MESSAGE))
        timezone_name = None
    elif not (timezone_name or "").strip():
        violations.append(ValidationViolation(None, "timezone", TIMEZONE_REQUIRED_MESSAGE))
    elif not is_valid_timezone(timezone_name.strip()):
        violations.append(ValidationViolation(None, "timezone", UNKNOWN_TIMEZONE_MESSAGE))

    raw_availabilities = raw.get("availabilities")
    if raw_availabilities is None:
        raw_availabilities = []

    if isinstance(raw_availabilities, (list, tuple)):
        availabilities = validate_raw_availabilities(raw_availabilities)
        violations.extend(availabilities.violations)
    else:
        violations.append(ValidationViolation(None, "availabilities", AVAILABILITIES_NOT_LIST_MESSAGE))

    if violations:
        return ValidationResult.failure(violations)

    return ValidationResult.success(
        ScheduleData(timezone=timezone_name.strip(), availabilities=tuple(availabilities.value))
    )
