"""SQLAlchemy model for scheduled push reminders."""

from sqlalchemy import Boolean, Column, DateTime, String, Text
from sqlalchemy.sql import expression

from chapterhub.infrastructure.database import Base

from .feed_item import new_record_id


class NotificationModel(Base):
    """Database representation for pending and delivered reminders."""

    __tablename__ = "notification"

    id = Column(String(32), primary_key=True, default=new_record_id)
    event_id = Column(String(32), nullable=False, index=True)
    title = Column(String(200), nullable=False)
    body = Column(Text, nullable=False)
    scheduled_time = Column(DateTime(), nullable=False, index=True)
    sent = Column(
        Boolean,
        nullable=False,
        default=False,
        server_default=expression.false(),
        index=True,
    )


__all__ = ["NotificationModel"]
