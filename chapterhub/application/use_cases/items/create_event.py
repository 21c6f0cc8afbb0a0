"""Use case for creating events and scheduling their reminder."""

from __future__ import annotations

import logging
from collections.abc import Sequence
from datetime import datetime

from sqlalchemy.orm import Session

from chapterhub.application.use_cases.notifications import schedule_event_reminder
from chapterhub.domain.entities import Channel, Event
from chapterhub.domain.exceptions import StoreUnavailableError
from chapterhub.infrastructure.cache import FeedCache
from chapterhub.infrastructure.repositories import FeedItemRepository

logger = logging.getLogger(__name__)


def create_event(
    session: Session,
    feed_cache: FeedCache,
    *,
    author_id: str,
    title: str,
    description: str,
    channel: Channel | str,
    start_date: datetime,
    end_date: datetime,
    location: str | None = None,
    required_members: int | None = None,
    assigned_members: Sequence[str] = (),
    created_at: datetime | None = None,
    now: datetime | None = None,
) -> str:
    """Store a new event, then schedule its reminder.

    The calendar range cache is left untouched; callers refresh it explicitly.
    A reminder that cannot be written is logged and lost, the event stays.
    """

    event = Event(
        id=None,
        author_id=author_id,
        title=title,
        description=description,
        channel=channel,
        created_at=created_at,
        updated_at=created_at,
        start_date=start_date,
        end_date=end_date,
        location=location,
        required_members=required_members,
        assigned_members=list(assigned_members),
    )
    saved = FeedItemRepository(session).create(event)
    logger.info("Created events record %s", saved.id)
    feed_cache.invalidate()

    try:
        schedule_event_reminder(session, event=saved, now=now)
    except StoreUnavailableError:
        logger.exception("Could not schedule reminder for event %s", saved.id)
    return saved.id
