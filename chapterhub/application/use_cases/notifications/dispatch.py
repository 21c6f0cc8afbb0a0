"""Periodic delivery of due event reminders."""

from __future__ import annotations

import logging
import threading
from dataclasses import dataclass
from datetime import datetime
from typing import Protocol

from sqlalchemy.orm import Session, sessionmaker

from chapterhub.domain.entities import Event, FeedItemKind, NotificationRecord
from chapterhub.domain.exceptions import PushDeliveryFailedError
from chapterhub.infrastructure.repositories import (
    FeedItemRepository,
    NotificationRepository,
)
from chapterhub.infrastructure.user_directory import UserDirectory
from chapterhub.utils import ensure_utc, now_utc

logger = logging.getLogger(__name__)

DEFAULT_BATCH_SIZE = 100


class PushSender(Protocol):
    def send(self, token: str, title: str, body: str) -> str | None:
        ...


@dataclass
class SweepReport:
    """Counters describing what a dispatcher sweep did."""

    processed: int = 0
    already_sent: int = 0
    pushes_sent: int = 0
    pushes_failed: int = 0
    recipients_without_token: int = 0


class NotificationDispatcher:
    """Deliver due reminders to every assigned member of their event.

    Records are marked sent only after all of their recipients were attempted.
    A crash between sending and marking re-sends the whole record on the next
    sweep. Sweeps of one dispatcher are serialized, so the scheduled job and
    an on-demand sweep never fan out the same record. Running several
    dispatchers against the same store can deliver a record twice; marking
    itself is conditional, so a record is never marked by two sweeps.
    """

    def __init__(
        self,
        session_factory: sessionmaker[Session],
        user_directory: UserDirectory,
        push_client: PushSender,
        *,
        batch_size: int = DEFAULT_BATCH_SIZE,
    ) -> None:
        self._session_factory = session_factory
        self._user_directory = user_directory
        self._push_client = push_client
        self._batch_size = batch_size
        self._sweep_lock = threading.Lock()

    def sweep(self, now: datetime | None = None) -> SweepReport:
        with self._sweep_lock:
            return self._sweep(now)

    def _sweep(self, now: datetime | None) -> SweepReport:
        current_time = ensure_utc(now) or now_utc()
        report = SweepReport()

        with self._session_factory() as session:
            notifications = NotificationRepository(session)
            items = FeedItemRepository(session)
            due = notifications.list_due(current_time, limit=self._batch_size)
            logger.info("Found %d due notifications", len(due))

            for record in due:
                event = items.get(FeedItemKind.EVENT, record.event_id)
                if event is None:
                    logger.warning(
                        "Event %s for notification %s no longer exists",
                        record.event_id,
                        record.id,
                    )
                else:
                    self._fan_out(record, event, report)

                if notifications.mark_sent(record.id):
                    report.processed += 1
                else:
                    report.already_sent += 1

        logger.info(
            "Dispatch sweep finished: %d processed, %d pushes sent, %d failed",
            report.processed,
            report.pushes_sent,
            report.pushes_failed,
        )
        return report

    def _fan_out(self, record: NotificationRecord, event: Event, report: SweepReport) -> None:
        for user_id in event.assigned_members:
            user = self._user_directory.get_user(user_id)
            if user is None or not user.push_token:
                report.recipients_without_token += 1
                continue
            try:
                self._push_client.send(user.push_token, record.title, record.body)
            except PushDeliveryFailedError as exc:
                report.pushes_failed += 1
                logger.warning(
                    "Push for notification %s to user %s failed: %s",
                    record.id,
                    user_id,
                    exc,
                )
                continue
            report.pushes_sent += 1


__all__ = ["DEFAULT_BATCH_SIZE", "NotificationDispatcher", "PushSender", "SweepReport"]
