"""Domain entity representing a scheduled push reminder."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime


@dataclass
class NotificationRecord:
    """Pending or delivered reminder tied to an event."""

    id: str | None
    event_id: str
    title: str
    body: str
    scheduled_time: datetime
    sent: bool = False


__all__ = ["NotificationRecord"]
