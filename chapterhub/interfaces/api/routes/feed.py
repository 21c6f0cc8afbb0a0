"""Routes reading the aggregated feed, the calendar and assigned tasks."""

from __future__ import annotations

from datetime import datetime

from fastapi import APIRouter, Depends, HTTPException, Query, Response, status
from sqlalchemy.orm import Session, sessionmaker

from chapterhub.application.use_cases.feed import get_events, get_feed_items, get_tasks
from chapterhub.config import Settings
from chapterhub.domain.entities import Channel, FeedItemKind, TaskStatus
from chapterhub.infrastructure.cache import EventRangeCache, FeedCache
from chapterhub.interfaces.api.dependencies import (
    get_app_settings,
    get_db,
    get_event_cache,
    get_feed_cache,
    get_session_factory,
)
from chapterhub.interfaces.api.schemas import EventRead, FeedItemRead, TaskRead
from chapterhub.utils import ensure_utc

from .helpers import event_to_read_model, task_to_read_model, to_read_model

router = APIRouter(tags=["feed"])


@router.get("/feed", response_model=list[FeedItemRead])
async def read_feed(
    channels: list[Channel] | None = Query(default=None),
    kind: FeedItemKind | None = Query(default=None),
    page_size: int | None = Query(default=None, ge=1, le=200),
    force_refresh: bool = False,
    session_factory: sessionmaker[Session] = Depends(get_session_factory),
    feed_cache: FeedCache = Depends(get_feed_cache),
    settings: Settings = Depends(get_app_settings),
):
    """Return the newest announcements, events and tasks across channels."""

    items = await get_feed_items(
        session_factory,
        feed_cache,
        channels=channels or list(Channel),
        item_kind=kind,
        page_size=page_size or settings.feed_page_size,
        force_refresh=force_refresh,
        timeout=settings.store_timeout_seconds,
    )
    return [to_read_model(item) for item in items]


@router.post("/feed/cache/clear", status_code=status.HTTP_204_NO_CONTENT)
def clear_caches(
    feed_cache: FeedCache = Depends(get_feed_cache),
    event_cache: EventRangeCache = Depends(get_event_cache),
) -> Response:
    """Discard the cached feed and every cached calendar range."""

    feed_cache.invalidate()
    event_cache.clear()
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.get("/events", response_model=list[EventRead])
def read_events(
    start: datetime,
    end: datetime,
    force_refresh: bool = False,
    db: Session = Depends(get_db),
    event_cache: EventRangeCache = Depends(get_event_cache),
):
    """Return events starting between ``start`` and ``end``.

    Bounds without an offset are read as UTC.
    """

    start, end = ensure_utc(start), ensure_utc(end)
    if start > end:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="start must not be after end",
        )
    events = get_events(db, event_cache, start=start, end=end, force_refresh=force_refresh)
    return [event_to_read_model(event) for event in events]


@router.get("/users/{user_id}/tasks", response_model=list[TaskRead])
def read_user_tasks(
    user_id: str,
    status_filter: TaskStatus | None = Query(default=None, alias="status"),
    db: Session = Depends(get_db),
):
    """Return the tasks assigned to ``user_id`` ordered by deadline."""

    tasks = get_tasks(db, user_id=user_id, status=status_filter)
    return [task_to_read_model(task) for task in tasks]
