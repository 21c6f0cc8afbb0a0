"""SQLAlchemy model for the announcements collection."""

from chapterhub.infrastructure.database import Base

from .feed_item import FeedItemColumns


class AnnouncementModel(FeedItemColumns, Base):
    """Database representation of an announcement."""

    __tablename__ = "announcement"


__all__ = ["AnnouncementModel"]
