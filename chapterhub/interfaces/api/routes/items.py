"""Routes creating, updating and deleting feed items."""

from __future__ import annotations

from fastapi import APIRouter, Depends, HTTPException, Response, status
from sqlalchemy.orm import Session

from chapterhub.application.use_cases.items import (
    create_announcement as create_announcement_uc,
    create_event as create_event_uc,
    create_task as create_task_uc,
    delete_item as delete_item_uc,
    update_item as update_item_uc,
)
from chapterhub.domain.exceptions import RecordNotFoundError
from chapterhub.infrastructure.cache import FeedCache
from chapterhub.interfaces.api.dependencies import get_db, get_feed_cache
from chapterhub.interfaces.api.schemas import (
    AnnouncementCreate,
    EventCreate,
    FeedItemRead,
    FeedItemUpdate,
    ItemCreatedResponse,
    TaskCreate,
)

from .helpers import parse_kind, to_read_model

router = APIRouter(tags=["items"])


@router.post(
    "/announcements",
    response_model=ItemCreatedResponse,
    status_code=status.HTTP_201_CREATED,
)
def create_announcement(
    payload: AnnouncementCreate,
    db: Session = Depends(get_db),
    feed_cache: FeedCache = Depends(get_feed_cache),
):
    item_id = create_announcement_uc(db, feed_cache, **payload.model_dump())
    return ItemCreatedResponse(id=item_id)


@router.post(
    "/events",
    response_model=ItemCreatedResponse,
    status_code=status.HTTP_201_CREATED,
)
def create_event(
    payload: EventCreate,
    db: Session = Depends(get_db),
    feed_cache: FeedCache = Depends(get_feed_cache),
):
    """Create an event and schedule its reminder."""

    try:
        item_id = create_event_uc(db, feed_cache, **payload.model_dump())
    except ValueError as exc:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(exc)) from exc
    return ItemCreatedResponse(id=item_id)


@router.post(
    "/tasks",
    response_model=ItemCreatedResponse,
    status_code=status.HTTP_201_CREATED,
)
def create_task(
    payload: TaskCreate,
    db: Session = Depends(get_db),
    feed_cache: FeedCache = Depends(get_feed_cache),
):
    item_id = create_task_uc(db, feed_cache, **payload.model_dump())
    return ItemCreatedResponse(id=item_id)


@router.patch("/items/{kind}/{item_id}", response_model=FeedItemRead)
def update_item(
    kind: str,
    item_id: str,
    payload: FeedItemUpdate,
    db: Session = Depends(get_db),
):
    """Apply a partial update; cached feeds are left as they are."""

    item_kind = parse_kind(kind)
    try:
        item = update_item_uc(db, item_kind, item_id, payload.model_dump(exclude_unset=True))
    except RecordNotFoundError as exc:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(exc)) from exc
    except ValueError as exc:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(exc)) from exc
    return to_read_model(item)


@router.delete("/items/{kind}/{item_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_item(
    kind: str,
    item_id: str,
    db: Session = Depends(get_db),
    feed_cache: FeedCache = Depends(get_feed_cache),
) -> Response:
    """Delete the item and drop the cached feed so the next read is fresh."""

    item_kind = parse_kind(kind)
    try:
        delete_item_uc(db, item_kind, item_id)
    except RecordNotFoundError as exc:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(exc)) from exc
    feed_cache.invalidate()
    return Response(status_code=status.HTTP_204_NO_CONTENT)
