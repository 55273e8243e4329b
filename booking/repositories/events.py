import logging
from dataclasses import dataclass

from sqlalchemy.orm import Session

from booking.core.event_types import EventTypeData
from booking.core.exceptions import NotFoundOrUnauthorized
from booking.models.event import EventType, utcnow

logger = logging.getLogger(__name__)


@dataclass(slots=True)
class EventRepository:
    """Event type persistence, always filtered to the acting owner."""
    db: Session

    def _owned(self, owner_id: str, event_id: str):
        return self.db.query(EventType).filter(
            EventType.id == event_id,
            EventType.owner_id == owner_id,
        )

    def list_for_owner(self, owner_id: str) -> list[EventType]:
        return (
            self.db.query(EventType)
            .filter(EventType.owner_id == owner_id)
            .order_by(EventType.name.asc(), EventType.created_at.asc())
            .all()
        )

    def get(self, owner_id: str, event_id: str) -> EventType:
        event_type = self._owned(owner_id, event_id).first()
        if event_type is None:
            raise NotFoundOrUnauthorized("Event not found or you do not have permission to access it.")
        return event_type

    def create(self, owner_id: str, data: EventTypeData) -> EventType:
        event_type = EventType(owner_id=owner_id, **data.to_dict())
        self.db.add(event_type)
        self.db.commit()
        self.db.refresh(event_type)

        logger.info("Created event type %s for owner %s", event_type.id, owner_id)
        return event_type

    def update(self, owner_id: str, event_id: str, data: EventTypeData) -> EventType:
        row_count = self._owned(owner_id, event_id).update(
            {**data.to_dict(), "updated_at": utcnow()},
            synchronize_session=False,
        )
        if row_count == 0:
            self.db.rollback()
            raise NotFoundOrUnauthorized("Event not found or you do not have permission to update it.")

        self.db.commit()
        logger.info("Updated event type %s for owner %s", event_id, owner_id)
        return self.get(owner_id, event_id)

    def delete(self, owner_id: str, event_id: str) -> None:
        row_count = self._owned(owner_id, event_id).delete(synchronize_session=False)
        if row_count == 0:
            self.db.rollback()
            raise NotFoundOrUnauthorized("Event not found or you do not have permission to delete it.")

        self.db.commit()
        logger.info("Deleted event type %s for owner %s", event_id, owner_id)
