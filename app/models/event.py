import enum

from sqlalchemy import JSON, Column, DateTime, ForeignKey, Index, Integer, Numeric, String, Text, UniqueConstraint
from sqlalchemy.orm import relationship

from app.database import Base
from app.models.mixins import TimestampMixin, UUIDPrimaryKeyMixin


class EventStatus(str, enum.Enum):
    draft = "draft"
    published = "published"
    archived = "archived"
    cancelled = "cancelled"


class Event(UUIDPrimaryKeyMixin, TimestampMixin, Base):
    __tablename__ = "events"

    slug = Column(String, unique=True, nullable=False)
    start_date = Column(DateTime(timezone=True), nullable=False)
    end_date = Column(DateTime(timezone=True), nullable=True)
    location = Column(String, nullable=True)
    max_attendees = Column(Integer, nullable=True)
    price = Column(Numeric(10, 2, asdecimal=False), nullable=True)
    currency = Column(String(3), nullable=True)
    registration_url = Column(String, nullable=True)
    status = Column(String(20), nullable=False, default=EventStatus.draft.value)

    translations = relationship(
        "EventTranslation",
        back_populates="event",
        cascade="all, delete-orphan",
        passive_deletes=True,
    )

    __table_args__ = (
        Index("idx_events_start_date", "start_date"),
        Index("idx_events_status", "status"),
    )


class EventTranslation(UUIDPrimaryKeyMixin, TimestampMixin, Base):
    __tablename__ = "event_translations"

    event_id = Column(String(36), ForeignKey("events.id", ondelete="CASCADE"), nullable=False, index=True)
    language = Column(String(2), nullable=False)

    title = Column(String, nullable=False)
    description = Column(Text, nullable=True)
    category = Column(String, nullable=True)
    tags = Column(JSON(none_as_null=True), nullable=True)

    event = relationship("Event", back_populates="translations")

    __table_args__ = (
        UniqueConstraint("event_id", "language", name="uq_event_translation_language"),
        Index("idx_event_translations_language", "language"),
    )
