"""Use case for publishing announcements."""

from __future__ import annotations

import logging
from datetime import datetime

from sqlalchemy.orm import Session

from chapterhub.domain.entities import Announcement, Channel
from chapterhub.infrastructure.cache import FeedCache
from chapterhub.infrastructure.repositories import FeedItemRepository

logger = logging.getLogger(__name__)


def create_announcement(
    session: Session,
    feed_cache: FeedCache,
    *,
    author_id: str,
    title: str,
    description: str,
    channel: Channel | str,
    created_at: datetime | None = None,
) -> str:
    """Store a new announcement and return its identifier."""

    announcement = Announcement(
        id=None,
        author_id=author_id,
        title=title,
        description=description,
        channel=channel,
        created_at=created_at,
        updated_at=created_at,
    )
    saved = FeedItemRepository(session).create(announcement)
    logger.info("Created announcements record %s", saved.id)
    feed_cache.invalidate()
    return saved.id
