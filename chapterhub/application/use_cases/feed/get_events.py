"""Use case listing events for a calendar range."""

from __future__ import annotations

import logging
from datetime import datetime

from sqlalchemy.orm import Session

from chapterhub.domain.entities import Event
from chapterhub.infrastructure.cache import EventRangeCache
from chapterhub.infrastructure.repositories import FeedItemRepository

logger = logging.getLogger(__name__)


def get_events(
    session: Session,
    cache: EventRangeCache,
    *,
    start: datetime,
    end: datetime,
    force_refresh: bool = False,
) -> list[Event]:
    """Return events starting within ``[start, end]`` ordered by start date.

    Results are cached under the exact bounds; ``force_refresh`` re-queries and
    overwrites only that entry.
    """

    key = cache.make_key(start, end)
    if not force_refresh:
        cached = cache.get(key)
        if cached is not None:
            logger.debug("Returning cached events for %s", key)
            return cached

    events = FeedItemRepository(session).list_events_starting_between(start, end)
    logger.debug("Fetched %d events for %s", len(events), key)
    return cache.store(key, events)


__all__ = ["get_events"]
