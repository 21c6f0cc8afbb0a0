"""ORM models used by the application infrastructure."""

from .announcement import AnnouncementModel
from .event import EventMemberModel, EventModel
from .notification import NotificationModel
from .task import TaskMemberModel, TaskModel
from .user import UserModel

__all__ = [
    "AnnouncementModel",
    "EventMemberModel",
    "EventModel",
    "NotificationModel",
    "TaskMemberModel",
    "TaskModel",
    "UserModel",
]
