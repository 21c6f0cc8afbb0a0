"""Background scheduling of the notification dispatcher sweep."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from apscheduler.schedulers.background import BackgroundScheduler
from apscheduler.triggers.interval import IntervalTrigger

if TYPE_CHECKING:
    from chapterhub.application.use_cases.notifications import NotificationDispatcher

logger = logging.getLogger(__name__)

DISPATCH_JOB_ID = "notification-dispatch"


def run_scheduled_sweep(dispatcher: "NotificationDispatcher") -> None:
    """Run one sweep, logging failures so the next tick still runs."""

    try:
        dispatcher.sweep()
    except Exception:
        logger.exception("Notification dispatch sweep failed")


def start_dispatch_scheduler(
    dispatcher: "NotificationDispatcher", *, interval_seconds: float
) -> BackgroundScheduler:
    """Start a background scheduler running the dispatcher every interval."""

    scheduler = BackgroundScheduler(timezone="UTC")
    scheduler.add_job(
        func=run_scheduled_sweep,
        trigger=IntervalTrigger(seconds=interval_seconds, timezone="UTC"),
        args=[dispatcher],
        id=DISPATCH_JOB_ID,
        name="Notification dispatcher sweep",
        max_instances=1,
        coalesce=True,
        replace_existing=True,
    )
    scheduler.start()
    logger.info("Notification dispatcher scheduled every %s seconds", interval_seconds)
    return scheduler


__all__ = ["DISPATCH_JOB_ID", "run_scheduled_sweep", "start_dispatch_scheduler"]
