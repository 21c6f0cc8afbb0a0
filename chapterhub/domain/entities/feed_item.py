"""Domain entities for the items surfaced in the aggregated feed."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from typing import ClassVar, Union

from chapterhub.utils import ensure_utc


class Channel(str, Enum):
    """Fixed partitions a feed item can be published to."""

    GENERAL = "general"
    EXECUTIVE = "executive"
    SOCIAL = "social"
    ACADEMIC = "academic"
    PHILANTHROPY = "philanthropy"


class TaskStatus(str, Enum):
    """Progress states of a task."""

    PENDING = "pending"
    IN_PROGRESS = "in-progress"
    COMPLETED = "completed"


class FeedItemKind(str, Enum):
    """Tag identifying which variant of :data:`FeedItem` a record is."""

    ANNOUNCEMENT = "announcement"
    EVENT = "event"
    TASK = "task"

    @property
    def collection(self) -> str:
        """Return the name of the collection storing items of this kind."""

        return f"{self.value}s"

    @classmethod
    def parse(cls, value: "FeedItemKind | str") -> "FeedItemKind":
        """Resolve a kind from its tag (``task``) or collection name (``tasks``)."""

        if isinstance(value, cls):
            return value
        normalized = str(value).strip().lower()
        for kind in cls:
            if normalized in (kind.value, kind.collection):
                return kind
        msg = f"Unknown feed item kind '{value}'"
        raise ValueError(msg)


@dataclass(kw_only=True)
class FeedItemBase:
    """Attributes shared by every feed item variant."""

    kind: ClassVar[FeedItemKind]

    id: str | None
    author_id: str
    title: str
    description: str
    channel: Channel
    created_at: datetime | None = None
    updated_at: datetime | None = None

    def __post_init__(self) -> None:
        self.channel = Channel(self.channel)


@dataclass(kw_only=True)
class Announcement(FeedItemBase):
    """Plain message published to a channel."""

    kind: ClassVar[FeedItemKind] = FeedItemKind.ANNOUNCEMENT


@dataclass(kw_only=True)
class Event(FeedItemBase):
    """Scheduled gathering with optional assigned members."""

    kind: ClassVar[FeedItemKind] = FeedItemKind.EVENT

    start_date: datetime
    end_date: datetime
    location: str | None = None
    required_members: int | None = None
    assigned_members: list[str] = field(default_factory=list)

    def __post_init__(self) -> None:
        super().__post_init__()
        if ensure_utc(self.start_date) > ensure_utc(self.end_date):
            msg = "Event start date must not be after its end date"
            raise ValueError(msg)
        self.assigned_members = list(self.assigned_members)


@dataclass(kw_only=True)
class Task(FeedItemBase):
    """Unit of work with an optional deadline."""

    kind: ClassVar[FeedItemKind] = FeedItemKind.TASK

    deadline: datetime | None = None
    status: TaskStatus = TaskStatus.PENDING
    assigned_members: list[str] = field(default_factory=list)

    def __post_init__(self) -> None:
        super().__post_init__()
        self.status = TaskStatus(self.status)
        self.assigned_members = list(self.assigned_members)


FeedItem = Union[Announcement, Event, Task]


__all__ = [
    "Announcement",
    "Channel",
    "Event",
    "FeedItem",
    "FeedItemBase",
    "FeedItemKind",
    "Task",
    "TaskStatus",
]
