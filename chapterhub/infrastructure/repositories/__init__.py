"""Repository implementations for infrastructure layer."""

from .feed_item_repository import FeedItemRepository
from .notification_repository import NotificationRepository
from .user_repository import UserRepository

__all__ = [
    "FeedItemRepository",
    "NotificationRepository",
    "UserRepository",
]
