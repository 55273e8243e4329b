from datetime import datetime, timezone

import pytest

from booking.core.exceptions import FormatError
from booking.core.formatters import (
    format_duration,
    format_timezone_offset,
    is_valid_timezone,
    list_timezone_options,
)

WINTER = datetime(2025, 1, 15, 12, 0, tzinfo=timezone.utc)
SUMMER = datetime(2025, 7, 15, 12, 0, tzinfo=timezone.utc)


@pytest.mark.parametrize(
    ('minutes', 'expected'),
    [
        (1, '1 min'),
        (45, '45 mins'),
        (60, '1 hr'),
        (61, '1 hr 1 min'),
        (90, '1 hr 30 mins'),
        (120, '2 hrs'),
        (150, '2 hrs 30 mins'),
        (720, '12 hrs'),
    ],
)
def test_format_duration(minutes: int, expected: str) -> None:
    assert format_duration(minutes) == expected


@pytest.mark.parametrize(
    ('name', 'instant', 'expected'),
    [
        ('UTC', WINTER, '+0'),
        ('Europe/Berlin', WINTER, '+1'),
        ('Europe/Berlin', SUMMER, '+2'),
        ('America/New_York', WINTER, '-5'),
        ('America/New_York', SUMMER, '-4'),
        ('Asia/Kolkata', WINTER, '+5:30'),
        ('Asia/Kathmandu', WINTER, '+5:45'),
        ('America/St_Johns', WINTER, '-3:30'),
    ],
)
def test_format_timezone_offset_follows_daylight_saving_rules(name: str, instant: datetime, expected: str) -> None:
    assert format_timezone_offset(name, instant) == expected


def test_format_timezone_offset_treats_naive_instants_as_utc() -> None:
    assert format_timezone_offset('Europe/Berlin', datetime(2025, 7, 15, 12, 0)) == '+2'


@pytest.mark.parametrize('name', ['Mars/Olympus_Mons', '', None])
def test_format_timezone_offset_rejects_unknown_zones(name) -> None:
    with pytest.raises(FormatError):
        format_timezone_offset(name)


def test_is_valid_timezone() -> None:
    assert is_valid_timezone('America/Chicago')
    assert not is_valid_timezone('America/Nowhere')
    assert not is_valid_timezone(None)


def test_list_timezone_options_pairs_zones_with_offsets() -> None:
    options = list_timezone_options(WINTER)

    assert {'timezone': 'UTC', 'offset': '+0'} in options
    assert {'timezone': 'Asia/Kolkata', 'offset': '+5:30'} in options
