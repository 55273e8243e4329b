"""Wall-clock time of day with minute granularity."""

import re
from dataclasses import dataclass

from booking.core.exceptions import FormatError

TIME_PATTERN = re.compile(r"([01][0-9]|2[0-3]):([0-5][0-9])")
TIME_FORMAT_MESSAGE = "Time must be in the format HH:MM"


@dataclass(frozen=True, order=True)
class TimeOfDay:
    """
    A 24-hour clock time between 00:00 and 23:59.

    Invariant: 0 <= hour <= 23 and 0 <= minute <= 59. Ordering follows
    minutes since midnight.
    """
    hour: int
    minute: int

    def __post_init__(self):
        if not 0 <= self.hour <= 23 or not 0 <= self.minute <= 59:
            raise FormatError(TIME_FORMAT_MESSAGE)

    @classmethod
    def parse(cls, value: str) -> "TimeOfDay":
        """Parse a zero-padded ``HH:MM`` string such as ``09:15``."""
        if not isinstance(value, str):
            raise FormatError(TIME_FORMAT_MESSAGE)

        match = TIME_PATTERN.fullmatch(value)
        if match is None:
            raise FormatError(TIME_FORMAT_MESSAGE)

        return cls(hour=int(match.group(1)), minute=int(match.group(2)))

    def to_minutes(self) -> int:
        return self.hour * 60 + self.minute

    def __str__(self) -> str:
        return f"{self.hour:02d}:{self.minute:02d}"
