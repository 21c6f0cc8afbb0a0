"""Conversions shared by the API routes."""

from fastapi import HTTPException, status

from chapterhub.domain.entities import Event, FeedItem, FeedItemKind, Task
from chapterhub.interfaces.api.schemas import AnnouncementRead, EventRead, TaskRead

_READ_MODELS = {
    FeedItemKind.ANNOUNCEMENT: AnnouncementRead,
    FeedItemKind.EVENT: EventRead,
    FeedItemKind.TASK: TaskRead,
}


def to_read_model(item: FeedItem) -> AnnouncementRead | EventRead | TaskRead:
    return _READ_MODELS[item.kind].model_validate(item)


def event_to_read_model(event: Event) -> EventRead:
    return EventRead.model_validate(event)


def task_to_read_model(task: Task) -> TaskRead:
    return TaskRead.model_validate(task)


def parse_kind(value: str) -> FeedItemKind:
    """Resolve a path parameter into a kind or answer with 404."""

    try:
        return FeedItemKind.parse(value)
    except ValueError as exc:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(exc)) from exc
