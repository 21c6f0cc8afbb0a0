"""Persistence helpers for announcements, events and tasks."""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from datetime import datetime

from sqlalchemy.orm import Session

from chapterhub.domain.entities import (
    Announcement,
    Channel,
    Event,
    FeedItem,
    FeedItemKind,
    Task,
    TaskStatus,
)
from chapterhub.domain.exceptions import RecordNotFoundError
from chapterhub.infrastructure.database import store_operation
from chapterhub.infrastructure.models import (
    AnnouncementModel,
    EventMemberModel,
    EventModel,
    TaskMemberModel,
    TaskModel,
)
from chapterhub.utils import ensure_utc, ensure_utc_naive, now_utc

_MODELS = {
    FeedItemKind.ANNOUNCEMENT: AnnouncementModel,
    FeedItemKind.EVENT: EventModel,
    FeedItemKind.TASK: TaskModel,
}
_MEMBER_MODELS = {
    FeedItemKind.EVENT: EventMemberModel,
    FeedItemKind.TASK: TaskMemberModel,
}


class FeedItemRepository:
    """Provide CRUD and query operations for every feed item collection."""

    def __init__(self, session: Session) -> None:
        self.session = session

    @store_operation("feed item listing")
    def list_recent(
        self,
        kind: FeedItemKind,
        *,
        channels: Iterable[Channel | str],
        limit: int | None = 20,
    ) -> list[FeedItem]:
        """Return the newest items of ``kind`` published to any of ``channels``."""

        model_cls = _MODELS[kind]
        channel_values = sorted({Channel(channel).value for channel in channels})
        query = (
            self.session.query(model_cls)
            .filter(model_cls.channel.in_(channel_values))
            .order_by(model_cls.created_at.desc(), model_cls.id.desc())
        )
        if limit is not None:
            query = query.limit(limit)
        return [self._to_entity(kind, model) for model in query.all()]

    @store_operation("event range query")
    def list_events_starting_between(self, start: datetime, end: datetime) -> list[Event]:
        query = (
            self.session.query(EventModel)
            .filter(EventModel.start_date >= ensure_utc_naive(start))
            .filter(EventModel.start_date <= ensure_utc_naive(end))
            .order_by(EventModel.start_date.asc(), EventModel.id.asc())
        )
        return [self._to_entity(FeedItemKind.EVENT, model) for model in query.all()]

    @store_operation("task query")
    def list_tasks_for_member(
        self, user_id: str, *, status: TaskStatus | str | None = None
    ) -> list[Task]:
        query = (
            self.session.query(TaskModel)
            .join(TaskMemberModel, TaskMemberModel.task_id == TaskModel.id)
            .filter(TaskMemberModel.user_id == user_id)
        )
        if status is not None:
            query = query.filter(TaskModel.status == TaskStatus(status).value)
        query = query.order_by(
            TaskModel.deadline.is_(None), TaskModel.deadline.asc(), TaskModel.id.asc()
        )
        return [self._to_entity(FeedItemKind.TASK, model) for model in query.all()]

    @store_operation("item lookup")
    def get(self, kind: FeedItemKind, item_id: str) -> FeedItem | None:
        model = self.session.get(_MODELS[kind], item_id)
        return self._to_entity(kind, model) if model else None

    @store_operation("item create")
    def create(self, item: FeedItem) -> FeedItem:
        model = _MODELS[item.kind]()
        self._apply_entity_to_model(model, item, include_creation_fields=True)
        self.session.add(model)
        self.session.commit()
        self.session.refresh(model)
        return self._to_entity(item.kind, model)

    @store_operation("item update")
    def update(self, item: FeedItem) -> FeedItem:
        if item.id is None:
            raise ValueError("Item id is required for updates")
        model = self.session.get(_MODELS[item.kind], item.id)
        if model is None:
            raise RecordNotFoundError(item.kind.collection, item.id)
        self._apply_entity_to_model(model, item, include_creation_fields=False)
        self.session.add(model)
        self.session.commit()
        self.session.refresh(model)
        return self._to_entity(item.kind, model)

    @store_operation("item delete")
    def delete(self, kind: FeedItemKind, item_id: str) -> None:
        model = self.session.get(_MODELS[kind], item_id)
        if model is None:
            raise RecordNotFoundError(kind.collection, item_id)
        self.session.delete(model)
        self.session.commit()

    @staticmethod
    def _apply_entity_to_model(model, item: FeedItem, *, include_creation_fields: bool) -> None:
        now = ensure_utc_naive(now_utc())
        if include_creation_fields:
            if item.id is not None:
                model.id = item.id
            model.author_id = item.author_id
            model.created_at = ensure_utc_naive(item.created_at) or now
        model.title = item.title
        model.description = item.description or ""
        model.channel = Channel(item.channel).value
        model.updated_at = ensure_utc_naive(item.updated_at) or now

        if isinstance(item, Event):
            model.start_date = ensure_utc_naive(item.start_date)
            model.end_date = ensure_utc_naive(item.end_date)
            model.location = item.location
            model.required_members = item.required_members
        elif isinstance(item, Task):
            model.deadline = ensure_utc_naive(item.deadline)
            model.status = TaskStatus(item.status).value

        member_model = _MEMBER_MODELS.get(item.kind)
        if member_model is not None:
            model.members = _sync_members(model.members, member_model, item.assigned_members)

    @staticmethod
    def _to_entity(kind: FeedItemKind, model) -> FeedItem:
        common = {
            "id": model.id,
            "author_id": model.author_id,
            "title": model.title,
            "description": model.description or "",
            "channel": model.channel,
            "created_at": ensure_utc(model.created_at),
            "updated_at": ensure_utc(model.updated_at),
        }
        if kind is FeedItemKind.EVENT:
            return Event(
                **common,
                start_date=ensure_utc(model.start_date),
                end_date=ensure_utc(model.end_date),
                location=model.location,
                required_members=model.required_members,
                assigned_members=[member.user_id for member in model.members],
            )
        if kind is FeedItemKind.TASK:
            return Task(
                **common,
                deadline=ensure_utc(model.deadline),
                status=model.status,
                assigned_members=[member.user_id for member in model.members],
            )
        return Announcement(**common)


def _sync_members(current: Sequence, member_model, user_ids: Iterable[str]) -> list:
    """Return member rows matching ``user_ids`` in order, reusing existing rows."""

    existing = {member.user_id: member for member in current}
    members = []
    seen: set[str] = set()
    for user_id in user_ids:
        if not user_id or user_id in seen:
            continue
        seen.add(user_id)
        member = existing.get(user_id) or member_model(user_id=user_id)
        member.position = len(members)
        members.append(member)
    return members


__all__ = ["FeedItemRepository"]
