import logging
from dataclasses import dataclass

from sqlalchemy.orm import Session

from booking.core.exceptions import NotFoundOrUnauthorized
from booking.core.schedules import ScheduleData
from booking.models.event import utcnow
from booking.models.schedule import Schedule, ScheduleAvailability

logger = logging.getLogger(__name__)


@dataclass(slots=True)
class ScheduleRepository:
    """One schedule per owner; saves replace the whole availability set."""
    db: Session

    def load(self, owner_id: str) -> Schedule | None:
        return self.db.query(Schedule).filter(Schedule.owner_id == owner_id).first()

    def save(self, owner_id: str, data: ScheduleData) -> Schedule:
        schedule = self.load(owner_id)
        if schedule is None:
            schedule = Schedule(owner_id=owner_id, timezone=data.timezone)
            self.db.add(schedule)
            created = True
        else:
            schedule.timezone = data.timezone
            schedule.updated_at = utcnow()
            created = False

        schedule.availabilities = [
            ScheduleAvailability(
                day_of_week=interval.day_of_week,
                start_time=str(interval.start),
                end_time=str(interval.end),
            )
            for interval in data.availabilities
        ]
        self.db.commit()
        self.db.refresh(schedule)

        logger.info(
            "%s schedule %s for owner %s with %d availabilities",
            "Created" if created else "Replaced",
            schedule.id,
            owner_id,
            len(data.availabilities),
        )
        return schedule

    def delete_for_owner(self, owner_id: str) -> None:
        schedule = self.load(owner_id)
        if schedule is None:
            raise NotFoundOrUnauthorized("Schedule not found.")

        self.db.delete(schedule)
        self.db.commit()
        logger.info("Deleted schedule for owner %s", owner_id)
