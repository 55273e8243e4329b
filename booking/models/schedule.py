"""Schedule and availability model definitions."""

from sqlalchemy import Column, DateTime, Enum, ForeignKey, String
from sqlalchemy.orm import relationship

from booking.core.availability import AvailabilityInterval, DayOfWeek
from booking.database import Base
from booking.models.event import new_id, utcnow


class Schedule(Base):
    """A user's timezone and weekly availability; one per owner."""
    __tablename__ = "schedules"

    id = Column(String(36), primary_key=True, default=new_id)
    owner_id = Column(String, nullable=False, unique=True)
    timezone = Column(String, nullable=False)
    created_at = Column(DateTime(timezone=True), nullable=False, default=utcnow)
    updated_at = Column(DateTime(timezone=True), nullable=False, default=utcnow, onupdate=utcnow)

    availabilities = relationship(
        "ScheduleAvailability",
        back_populates="schedule",
        cascade="all, delete-orphan",
        passive_deletes=True,
    )


class ScheduleAvailability(Base):
    """A single weekday time window stored as HH:MM text."""
    __tablename__ = "schedule_availabilities"

    id = Column(String(36), primary_key=True, default=new_id)
    schedule_id = Column(
        String(36),
        ForeignKey("schedules.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    start_time = Column(String(5), nullable=False)
    end_time = Column(String(5), nullable=False)
    day_of_week = Column(
        Enum(DayOfWeek, name="day", values_callable=lambda days: [day.value for day in days]),
        nullable=False,
    )

    schedule = relationship("Schedule", back_populates="availabilities")

    def to_interval(self) -> AvailabilityInterval:
        return AvailabilityInterval.from_raw(self.day_of_week, self.start_time, self.end_time)
