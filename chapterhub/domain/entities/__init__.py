"""Domain entities exposed by the application."""

from .feed_item import (
    Announcement,
    Channel,
    Event,
    FeedItem,
    FeedItemBase,
    FeedItemKind,
    Task,
    TaskStatus,
)
from .notification import NotificationRecord
from .user import ExecRole, User, UserStatus

__all__ = [
    "Announcement",
    "Channel",
    "Event",
    "ExecRole",
    "FeedItem",
    "FeedItemBase",
    "FeedItemKind",
    "NotificationRecord",
    "Task",
    "TaskStatus",
    "User",
    "UserStatus",
]
