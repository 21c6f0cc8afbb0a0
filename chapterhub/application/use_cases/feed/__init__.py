"""Use cases reading the feed, the calendar and assigned tasks."""

from .get_events import get_events
from .get_feed_items import DEFAULT_PAGE_SIZE, get_feed_items
from .get_tasks import get_tasks

__all__ = ["DEFAULT_PAGE_SIZE", "get_events", "get_feed_items", "get_tasks"]
