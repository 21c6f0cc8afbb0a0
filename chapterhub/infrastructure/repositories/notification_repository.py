"""Persistence helpers for scheduled reminder records."""

from __future__ import annotations

from collections.abc import Sequence
from datetime import datetime

from sqlalchemy import false
from sqlalchemy.orm import Session

from chapterhub.domain.entities import NotificationRecord
from chapterhub.infrastructure.database import store_operation
from chapterhub.infrastructure.models import NotificationModel
from chapterhub.utils import ensure_utc, ensure_utc_naive


class NotificationRepository:
    """Provide create, due-query and mark operations for reminders."""

    def __init__(self, session: Session) -> None:
        self.session = session

    @store_operation("notification create")
    def create(self, notification: NotificationRecord) -> NotificationRecord:
        model = NotificationModel()
        model.event_id = notification.event_id
        model.title = notification.title
        model.body = notification.body
        model.scheduled_time = ensure_utc_naive(notification.scheduled_time)
        model.sent = notification.sent
        self.session.add(model)
        self.session.commit()
        self.session.refresh(model)
        return self._to_entity(model)

    @store_operation("due notification query")
    def list_due(self, now: datetime, *, limit: int | None = 100) -> Sequence[NotificationRecord]:
        """Return unsent reminders whose scheduled time is at or before ``now``."""

        query = (
            self.session.query(NotificationModel)
            .filter(NotificationModel.scheduled_time <= ensure_utc_naive(now))
            .filter(NotificationModel.sent == false())
            .order_by(NotificationModel.scheduled_time.asc(), NotificationModel.id.asc())
        )
        if limit is not None:
            query = query.limit(limit)
        return [self._to_entity(model) for model in query.all()]

    @store_operation("notification listing")
    def list_for_event(self, event_id: str) -> Sequence[NotificationRecord]:
        query = (
            self.session.query(NotificationModel)
            .filter(NotificationModel.event_id == event_id)
            .order_by(NotificationModel.scheduled_time.asc())
        )
        return [self._to_entity(model) for model in query.all()]

    @store_operation("notification mark sent")
    def mark_sent(self, notification_id: str) -> bool:
        """Flip ``sent`` to true, returning ``False`` when it was already set."""

        updated = (
            self.session.query(NotificationModel)
            .filter(
                NotificationModel.id == notification_id,
                NotificationModel.sent == false(),
            )
            .update({NotificationModel.sent: True}, synchronize_session=False)
        )
        self.session.commit()
        return bool(updated)

    @staticmethod
    def _to_entity(model: NotificationModel) -> NotificationRecord:
        return NotificationRecord(
            id=model.id,
            event_id=model.event_id,
            title=model.title,
            body=model.body,
            scheduled_time=ensure_utc(model.scheduled_time),
            sent=bool(model.sent),
        )


__all__ = ["NotificationRepository"]
