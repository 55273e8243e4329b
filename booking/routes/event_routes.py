from datetime import datetime
from typing import Any

from fastapi import APIRouter, Depends, status
from pydantic import BaseModel
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from booking.auth.dependencies import get_current_owner
from booking.core.event_types import validate_event_type
from booking.core.formatters import format_duration
from booking.database import get_db
from booking.models.event import EventType
from booking.repositories.events import EventRepository
from booking.routes.errors import database_unavailable

router = APIRouter(tags=['events'])


class EventTypeRequest(BaseModel):
    name: Any = None
    description: Any = None
    duration_minutes: Any = None
    is_active: Any = None


class EventTypeResponse(BaseModel):
    id: str
    name: str
    description: str | None = None
    duration_minutes: int
    duration_label: str
    is_active: bool
    created_at: datetime
    updated_at: datetime


def to_event_response(event_type: EventType) -> EventTypeResponse:
    return EventTypeResponse(
        id=event_type.id,
        name=event_type.name,
        description=event_type.description,
        duration_minutes=event_type.duration_minutes,
        duration_label=format_duration(event_type.duration_minutes),
        is_active=event_type.is_active,
        created_at=event_type.created_at,
        updated_at=event_type.updated_at,
    )


@router.get('', response_model=list[EventTypeResponse])
def list_events(
    owner_id: str = Depends(get_current_owner),
    db: Session = Depends(get_db),
):
    try:
        return [to_event_response(event_type) for event_type in EventRepository(db).list_for_owner(owner_id)]
    except SQLAlchemyError as exc:
        raise database_unavailable(exc) from exc


@router.post('', response_model=EventTypeResponse, status_code=status.HTTP_201_CREATED)
def create_event(
    data: EventTypeRequest,
    owner_id: str = Depends(get_current_owner),
    db: Session = Depends(get_db),
):
    event_data = validate_event_type(data.model_dump()).unwrap()

    try:
        return to_event_response(EventRepository(db).create(owner_id, event_data))
    except SQLAlchemyError as exc:
        db.rollback()
        raise database_unavailable(exc) from exc


@router.get('/{event_id}', response_model=EventTypeResponse)
def get_event(
    event_id: str,
    owner_id: str = Depends(get_current_owner),
    db: Session = Depends(get_db),
):
    try:
        return to_event_response(EventRepository(db).get(owner_id, event_id))
    except SQLAlchemyError as exc:
        raise database_unavailable(exc) from exc


@router.put('/{event_id}', response_model=EventTypeResponse)
def update_event(
    event_id: str,
    data: EventTypeRequest,
    owner_id: str = Depends(get_current_owner),
    db: Session = Depends(get_db),
):
    event_data = validate_event_type(data.model_dump()).unwrap()

    try:
        return to_event_response(EventRepository(db).update(owner_id, event_id, event_data))
    except SQLAlchemyError as exc:
        db.rollback()
        raise database_unavailable(exc) from exc


@router.delete('/{event_id}', status_code=status.HTTP_204_NO_CONTENT)
def delete_event(
    event_id: str,
    owner_id: str = Depends(get_current_owner),
    db: Session = Depends(get_db),
):
    try:
        EventRepository(db).delete(owner_id, event_id)
    except SQLAlchemyError as exc:
        db.rollback()
        raise database_unavailable(exc) from exc
