"""Use case scheduling the reminder sent ahead of an event."""

from __future__ import annotations

import logging
from datetime import datetime, timedelta

from sqlalchemy.orm import Session

from chapterhub.domain.entities import Event, NotificationRecord
from chapterhub.infrastructure.repositories import NotificationRepository
from chapterhub.utils import ensure_utc, now_utc

logger = logging.getLogger(__name__)

REMINDER_LEAD_TIME = timedelta(minutes=30)


def _reminder_body(title: str, lead_time: timedelta) -> str:
    minutes = int(lead_time.total_seconds() // 60)
    return f'Event "{title}" starts in {minutes} minutes!'


def schedule_event_reminder(
    session: Session,
    *,
    event: Event,
    now: datetime | None = None,
    lead_time: timedelta = REMINDER_LEAD_TIME,
) -> NotificationRecord | None:
    """Persist a pending reminder ``lead_time`` before ``event`` starts.

    Events starting within ``lead_time`` of ``now`` (or already started) get no
    reminder. A failed write is not retried.
    """

    if event.id is None:
        raise ValueError("Event must be persisted before scheduling a reminder")

    current_time = ensure_utc(now) or now_utc()
    reminder_time = ensure_utc(event.start_date) - lead_time
    if reminder_time <= current_time:
        logger.debug(
            "Skipping reminder for event %s starting at %s",
            event.id,
            event.start_date.isoformat(),
        )
        return None

    record = NotificationRepository(session).create(
        NotificationRecord(
            id=None,
            event_id=event.id,
            title=event.title,
            body=_reminder_body(event.title, lead_time),
            scheduled_time=reminder_time,
            sent=False,
        )
    )
    logger.info(
        "Scheduled reminder %s for event %s at %s",
        record.id,
        event.id,
        reminder_time.isoformat(),
    )
    return record


__all__ = ["REMINDER_LEAD_TIME", "schedule_event_reminder"]
