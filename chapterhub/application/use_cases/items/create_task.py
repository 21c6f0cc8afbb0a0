"""Use case for creating tasks."""

from __future__ import annotations

import logging
from collections.abc import Sequence
from datetime import datetime

from sqlalchemy.orm import Session

from chapterhub.domain.entities import Channel, Task, TaskStatus
from chapterhub.infrastructure.cache import FeedCache
from chapterhub.infrastructure.repositories import FeedItemRepository

logger = logging.getLogger(__name__)


def create_task(
    session: Session,
    feed_cache: FeedCache,
    *,
    author_id: str,
    title: str,
    description: str,
    channel: Channel | str,
    deadline: datetime | None = None,
    status: TaskStatus | str = TaskStatus.PENDING,
    assigned_members: Sequence[str] = (),
    created_at: datetime | None = None,
) -> str:
    """Store a new task and return its identifier."""

    task = Task(
        id=None,
        author_id=author_id,
        title=title,
        description=description,
        channel=channel,
        created_at=created_at,
        updated_at=created_at,
        deadline=deadline,
        status=status,
        assigned_members=list(assigned_members),
    )
    saved = FeedItemRepository(session).create(task)
    logger.info("Created tasks record %s", saved.id)
    feed_cache.invalidate()
    return saved.id
