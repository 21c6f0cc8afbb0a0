"""SQLAlchemy models for the events collection and its member list."""

from sqlalchemy import Column, DateTime, ForeignKey, Integer, String
from sqlalchemy.orm import relationship

from chapterhub.infrastructure.database import Base

from .feed_item import FeedItemColumns


class EventMemberModel(Base):
    """Membership of a user in an event, keeping the assignment order."""

    __tablename__ = "event_member"

    event_id = Column(
        String(32),
        ForeignKey("event.id", ondelete="CASCADE"),
        primary_key=True,
    )
    user_id = Column(String(128), primary_key=True, index=True)
    position = Column(Integer, nullable=False, default=0)


class EventModel(FeedItemColumns, Base):
    """Database representation of an event."""

    __tablename__ = "event"

    start_date = Column(DateTime(), nullable=False, index=True)
    end_date = Column(DateTime(), nullable=False)
    location = Column(String(255), nullable=True)
    required_members = Column(Integer, nullable=True)

    members = relationship(
        EventMemberModel,
        cascade="all, delete-orphan",
        passive_deletes=True,
        order_by=EventMemberModel.position,
        lazy="selectin",
    )


__all__ = ["EventMemberModel", "EventModel"]
