"""
Weekly availability intervals and the rules that keep a schedule's set consistent.
"""

from collections.abc import Iterable, Mapping, Sequence
from dataclasses import dataclass
from enum import Enum

from booking.core.exceptions import FormatError
from booking.core.time_of_day import TimeOfDay
from booking.core.validation import ValidationResult, ValidationViolation

OVERLAP_MESSAGE = "Availability overlaps with another"
INVERTED_MESSAGE = "End time must be after start time"
INVALID_DAY_MESSAGE = "Invalid day of week"
INVALID_AVAILABILITY_MESSAGE = "Availability must be an object with day_of_week, start_time and end_time"


class DayOfWeek(str, Enum):
    MONDAY = "monday"
    TUESDAY = "tuesday"
    WEDNESDAY = "wednesday"
    THURSDAY = "thursday"
    FRIDAY = "friday"
    SATURDAY = "saturday"
    SUNDAY = "sunday"

    @classmethod
    def parse(cls, value) -> "DayOfWeek":
        if isinstance(value, cls):
            return value
        if isinstance(value, str):
            value = value.strip().lower()
        try:
            return cls(value)
        except ValueError as exc:
            raise FormatError(INVALID_DAY_MESSAGE) from exc

    @property
    def position(self) -> int:
        return DAYS_OF_WEEK_IN_ORDER.index(self)


DAYS_OF_WEEK_IN_ORDER = tuple(DayOfWeek)


@dataclass(frozen=True)
class AvailabilityInterval:
    """
    A single time window on one weekday.

    Intervals are plain values; they only gain identity through the schedule
    that owns them. Windows that wrap past midnight are not representable.
    """
    day_of_week: DayOfWeek
    start: TimeOfDay
    end: TimeOfDay

    @classmethod
    def from_raw(cls, day_of_week, start_time, end_time) -> "AvailabilityInterval":
        return cls(
            day_of_week=DayOfWeek.parse(day_of_week),
            start=TimeOfDay.parse(start_time),
            end=TimeOfDay.parse(end_time),
        )

    def is_valid(self) -> bool:
        return self.start.to_minutes() < self.end.to_minutes()

    def overlaps(self, other: "AvailabilityInterval") -> bool:
        """Same-day open-interval overlap; intervals that only touch do not overlap."""
        return (
            self.day_of_week == other.day_of_week
            and self.start.to_minutes() < other.end.to_minutes()
            and self.end.to_minutes() > other.start.to_minutes()
        )

    def to_dict(self) -> dict:
        return {
            "day_of_week": self.day_of_week.value,
            "start_time": str(self.start),
            "end_time": str(self.end),
        }


def validate_availability_set(intervals: Sequence[AvailabilityInterval]) -> ValidationResult[None]:
    """Check every candidate for same-day overlaps and inverted bounds.

    All candidates are checked and every violation is returned; the input
    sequence is left untouched.
    """
    violations: list[ValidationViolation] = []

    for index, candidate in enumerate(intervals):
        overlaps = any(
            other_index != index and candidate.overlaps(other)
            for other_index, other in enumerate(intervals)
        )
        if overlaps:
            violations.append(ValidationViolation(index, "start_time", OVERLAP_MESSAGE))

        if not candidate.is_valid():
            violations.append(ValidationViolation(index, "end_time", INVERTED_MESSAGE))

    if violations:
        return ValidationResult.failure(violations)
    return ValidationResult.success()


def parse_availability_set(raw_items: Iterable[Mapping]) -> ValidationResult[list[AvailabilityInterval]]:
    """Turn raw ``{day_of_week, start_time, end_time}`` mappings into intervals."""
    intervals: list[AvailabilityInterval] = []
    violations: list[ValidationViolation] = []

    for index, item in enumerate(raw_items):
        if not isinstance(item, Mapping):
            violations.append(ValidationViolation(index, "availability", INVALID_AVAILABILITY_MESSAGE))
            continue

        parsed = {}
        for field_name, parser in (
            ("day_of_week", DayOfWeek.parse),
            ("start_time", TimeOfDay.parse),
            ("end_time", TimeOfDay.parse),
        ):
            try:
                parsed[field_name] = parser(item.get(field_name))
            except FormatError as exc:
                violations.append(ValidationViolation(index, field_name, str(exc)))

        if len(parsed) == 3:
            intervals.append(
                AvailabilityInterval(
                    day_of_week=parsed["day_of_week"],
                    start=parsed["start_time"],
                    end=parsed["end_time"],
                )
            )

    if violations:
        return ValidationResult.failure(violations)
    return ValidationResult.success(intervals)


def validate_raw_availabilities(raw_items: Iterable[Mapping]) -> ValidationResult[list[AvailabilityInterval]]:
    parsed = parse_availability_set(raw_items)
    if not parsed.ok:
        return parsed

    checked = validate_availability_set(parsed.value)
    if not checked.ok:
        return ValidationResult.failure(checked.violations)
    return parsed


def sort_for_display(intervals: Iterable[AvailabilityInterval]) -> list[AvailabilityInterval]:
    return sorted(intervals, key=lambda interval: (interval.start, interval.day_of_week.position, interval.end))
