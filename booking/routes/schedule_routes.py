from datetime import datetime
from typing import Any

from fastapi import APIRouter, Depends, status
from pydantic import BaseModel
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from booking.auth.dependencies import get_current_owner
from booking.core.availability import sort_for_display
from booking.core.exceptions import NotFoundOrUnauthorized
from booking.core.formatters import format_timezone_offset, list_timezone_options
from booking.core.schedules import validate_schedule
from booking.database import get_db
from booking.models.schedule import Schedule
from booking.repositories.schedules import ScheduleRepository
from booking.routes.errors import database_unavailable

router = APIRouter(tags=['schedule'])


class ScheduleRequest(BaseModel):
    timezone: Any = None
    availabilities: Any = None


class AvailabilityResponse(BaseModel):
    day_of_week: str
    start_time: str
    end_time: str


class ScheduleResponse(BaseModel):
    id: str
    timezone: str
    timezone_offset: str
    availabilities: list[AvailabilityResponse]
    updated_at: datetime


class TimezoneOptionResponse(BaseModel):
    timezone: str
    offset: str


def to_schedule_response(schedule: Schedule) -> ScheduleResponse:
    intervals = sort_for_display(availability.to_interval() for availability in schedule.availabilities)
    return ScheduleResponse(
        id=schedule.id,
        timezone=schedule.timezone,
        timezone_offset=format_timezone_offset(schedule.timezone),
        availabilities=[AvailabilityResponse(**interval.to_dict()) for interval in intervals],
        updated_at=schedule.updated_at,
    )


@router.get('/timezones', response_model=list[TimezoneOptionResponse])
def list_timezones():
    return [TimezoneOptionResponse(**option) for option in list_timezone_options()]


@router.get('', response_model=ScheduleResponse)
def get_schedule(
    owner_id: str = Depends(get_current_owner),
    db: Session = Depends(get_db),
):
    try:
        schedule = ScheduleRepository(db).load(owner_id)
    except SQLAlchemyError as exc:
        raise database_unavailable(exc) from exc

    if schedule is None:
        raise NotFoundOrUnauthorized('Schedule not found.')

    return to_schedule_response(schedule)


@router.put('', response_model=ScheduleResponse)
def save_schedule(
    data: ScheduleRequest,
    owner_id: str = Depends(get_current_owner),
    db: Session = Depends(get_db),
):
    schedule_data = validate_schedule(data.model_dump()).unwrap()

    try:
        return to_schedule_response(ScheduleRepository(db).save(owner_id, schedule_data))
    except SQLAlchemyError as exc:
        db.rollback()
        raise database_unavailable(exc) from exc


@router.delete('', status_code=status.HTTP_204_NO_CONTENT)
def delete_schedule(
    owner_id: str = Depends(get_current_owner),
    db: Session = Depends(get_db),
):
    try:
        ScheduleRepository(db).delete_for_owner(owner_id)
    except SQLAlchemyError as exc:
        db.rollback()
        raise database_unavailable(exc) from exc
