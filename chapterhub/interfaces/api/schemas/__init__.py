from .feed import (
    AnnouncementCreate,
    AnnouncementRead,
    EventCreate,
    EventRead,
    FeedItemRead,
    FeedItemUpdate,
    ItemCreatedResponse,
    TaskCreate,
    TaskRead,
)
from .notification import SweepReportRead
from .user import UserCreate, UserFullNameRead, UserRead, UserUpdate

__all__ = [
    "AnnouncementCreate",
    "AnnouncementRead",
    "EventCreate",
    "EventRead",
    "FeedItemRead",
    "FeedItemUpdate",
    "ItemCreatedResponse",
    "SweepReportRead",
    "TaskCreate",
    "TaskRead",
    "UserCreate",
    "UserFullNameRead",
    "UserRead",
    "UserUpdate",
]
