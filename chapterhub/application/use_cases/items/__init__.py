"""Use cases creating, updating and deleting feed items."""

from .create_announcement import create_announcement
from .create_event import create_event
from .create_task import create_task
from .delete_item import delete_item
from .update_item import update_item

__all__ = [
    "create_announcement",
    "create_event",
    "create_task",
    "delete_item",
    "update_item",
]
