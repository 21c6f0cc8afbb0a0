"""Public helpers for scheduling and dispatching event reminders."""

from .dispatch import (
    DEFAULT_BATCH_SIZE,
    NotificationDispatcher,
    PushSender,
    SweepReport,
)
from .schedule_reminder import REMINDER_LEAD_TIME, schedule_event_reminder

__all__ = [
    "DEFAULT_BATCH_SIZE",
    "NotificationDispatcher",
    "PushSender",
    "REMINDER_LEAD_TIME",
    "SweepReport",
    "schedule_event_reminder",
]
