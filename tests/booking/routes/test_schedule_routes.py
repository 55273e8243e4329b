import pytest

from booking.core.availability import INVERTED_MESSAGE, OVERLAP_MESSAGE
from booking.core.exceptions import NotFoundOrUnauthorized, ViolationError
from booking.routes.schedule_routes import (
    ScheduleRequest,
    delete_schedule,
    get_schedule,
    list_timezones,
    save_schedule,
)


def test_get_schedule_before_first_save_is_not_found(db_session) -> None:
    with pytest.raises(NotFoundOrUnauthorized):
        get_schedule(owner_id='owner-1', db=db_session)


def test_save_schedule_returns_availabilities_in_display_order(db_session) -> None:
    response = save_schedule(
        data=ScheduleRequest(
            timezone='Asia/Kolkata',
            availabilities=[
                {'day_of_week': 'tuesday', 'start_time': '13:00', 'end_time': '17:00'},
                {'day_of_week': 'monday', 'start_time': '09:00', 'end_time': '12:00'},
            ],
        ),
        owner_id='owner-1',
        db=db_session,
    )

    assert response.timezone == 'Asia/Kolkata'
    assert response.timezone_offset == '+5:30'
    assert [(item.day_of_week, item.start_time, item.end_time) for item in response.availabilities] == [
        ('monday', '09:00', '12:00'),
        ('tuesday', '13:00', '17:00'),
    ]
    assert get_schedule(owner_id='owner-1', db=db_session).id == response.id


def test_save_schedule_rejects_overlaps_and_inversions_together(db_session) -> None:
    with pytest.raises(ViolationError) as exception_info:
        save_schedule(
            data=ScheduleRequest(
                timezone='UTC',
                availabilities=[
                    {'day_of_week': 'monday', 'start_time': '09:00', 'end_time': '10:00'},
                    {'day_of_week': 'monday', 'start_time': '09:30', 'end_time': '10:30'},
                    {'day_of_week': 'friday', 'start_time': '17:00', 'end_time': '09:00'},
                ],
            ),
            owner_id='owner-1',
            db=db_session,
        )

    assert [violation.to_dict() for violation in exception_info.value.violations] == [
        {'index': 0, 'field': 'start_time', 'message': OVERLAP_MESSAGE},
        {'index': 1, 'field': 'start_time', 'message': OVERLAP_MESSAGE},
        {'index': 2, 'field': 'end_time', 'message': INVERTED_MESSAGE},
    ]

    with pytest.raises(NotFoundOrUnauthorized):
        get_schedule(owner_id='owner-1', db=db_session)


def test_delete_schedule_removes_it(db_session) -> None:
    save_schedule(data=ScheduleRequest(timezone='UTC'), owner_id='owner-1', db=db_session)

    delete_schedule(owner_id='owner-1', db=db_session)

    with pytest.raises(NotFoundOrUnauthorized):
        get_schedule(owner_id='owner-1', db=db_session)


def test_list_timezones_includes_offsets() -> None:
    options = {option.timezone: option.offset for option in list_timezones()}

    assert options['Asia/Kathmandu'] == '+5:45'
    assert 'Europe/Berlin' in options
