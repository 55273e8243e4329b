from datetime import datetime, timezone

import pytz

from booking.core.exceptions import FormatError

UNKNOWN_TIMEZONE_MESSAGE = "Unknown timezone"


def format_duration(duration_minutes: int) -> str:
    """Render a duration like ``1 hr 30 mins``, ``2 hrs`` or ``45 mins``."""
    hours, minutes = divmod(duration_minutes, 60)

    hours_label = f"{hours} hr{'s' if hours != 1 else ''}" if hours > 0 else ""
    minutes_label = f"{minutes} min{'s' if minutes != 1 else ''}" if minutes > 0 else ""

    if hours == 0:
        return minutes_label
    if minutes == 0:
        return hours_label
    return f"{hours_label} {minutes_label}"


def is_valid_timezone(name: str | None) -> bool:
    return bool(name) and name in pytz.all_timezones_set


def get_timezone(name: str) -> pytz.BaseTzInfo:
    try:
        return pytz.timezone(name)
    except pytz.UnknownTimeZoneError as exc:
        raise FormatError(UNKNOWN_TIMEZONE_MESSAGE) from exc


def format_timezone_offset(name: str, now: datetime | None = None) -> str:
    """Short UTC offset label for a zone at ``now``, e.g. ``+2`` or ``-5:30``.

    Offsets come from the tz database, so daylight saving rules in effect at
    ``now`` are respected.
    """
    if not is_valid_timezone(name):
        raise FormatError(UNKNOWN_TIMEZONE_MESSAGE)

    instant = now or datetime.now(timezone.utc)
    if instant.tzinfo is None:
        instant = instant.replace(tzinfo=timezone.utc)

    offset = instant.astimezone(get_timezone(name)).utcoffset()
    total_minutes = int(offset.total_seconds() // 60)
    sign = "-" if total_minutes < 0 else "+"
    hours, minutes = divmod(abs(total_minutes), 60)

    if minutes:
        return f"{sign}{hours}:{minutes:02d}"
    return f"{sign}{hours}"


def list_timezone_options(now: datetime | None = None) -> list[dict]:
    instant = now or datetime.now(timezone.utc)
    return [
        {"timezone": name, "offset": format_timezone_offset(name, instant)}
        for name in pytz.common_timezones
    ]
