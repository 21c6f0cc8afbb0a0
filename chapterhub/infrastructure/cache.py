"""Process-local caches for feed and calendar reads.

Each cache owns its own lock and is handed to the use cases that read or
invalidate it. Entries live until they are invalidated or the process exits.
"""

from __future__ import annotations

import threading
from collections.abc import Iterable, Sequence
from dataclasses import dataclass
from datetime import datetime

from chapterhub.domain.entities import Channel, Event, FeedItem, FeedItemKind
from chapterhub.utils import isoformat_utc


@dataclass(frozen=True)
class FeedQuery:
    """Parameters of a feed request."""

    channels: frozenset[Channel]
    item_kind: FeedItemKind | None
    page_size: int

    @classmethod
    def build(
        cls,
        channels: Iterable[Channel | str],
        item_kind: FeedItemKind | str | None,
        page_size: int,
    ) -> "FeedQuery":
        kind = FeedItemKind.parse(item_kind) if item_kind is not None else None
        return cls(frozenset(Channel(channel) for channel in channels), kind, page_size)


class FeedCache:
    """Single slot holding the most recently computed feed.

    By default the slot is served for any request, whatever its parameters.
    With ``keyed=True`` a hit additionally requires the same :class:`FeedQuery`.

    Every :meth:`invalidate` bumps :attr:`generation`. A fetch started before
    an invalidation passes the generation it read to :meth:`store`, which then
    drops the stale result.
    """

    def __init__(self, *, keyed: bool = False) -> None:
        self.keyed = keyed
        self._lock = threading.Lock()
        self._entry: tuple[FeedQuery, list[FeedItem]] | None = None
        self._generation = 0

    def get(self, query: FeedQuery) -> list[FeedItem] | None:
        with self._lock:
            if self._entry is None:
                return None
            cached_query, items = self._entry
            if self.keyed and cached_query != query:
                return None
            return items

    @property
    def generation(self) -> int:
        with self._lock:
            return self._generation

    def store(
        self, query: FeedQuery, items: list[FeedItem], generation: int | None = None
    ) -> bool:
        """Cache ``items`` unless the cache was invalidated since ``generation``."""

        with self._lock:
            if generation is not None and generation != self._generation:
                return False
            self._entry = (query, items)
            return True

    def invalidate(self) -> None:
        """Discard the cached feed entirely."""

        with self._lock:
            self._entry = None
            self._generation += 1

    @property
    def is_populated(self) -> bool:
        with self._lock:
            return self._entry is not None


EventRangeKey = tuple[str, str]


class EventRangeCache:
    """Events keyed by the exact ``(start, end)`` bounds they were queried with."""

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._entries: dict[EventRangeKey, list[Event]] = {}

    @staticmethod
    def make_key(start: datetime, end: datetime) -> EventRangeKey:
        return (isoformat_utc(start), isoformat_utc(end))

    def get(self, key: EventRangeKey) -> list[Event] | None:
        with self._lock:
            return self._entries.get(key)

    def store(self, key: EventRangeKey, events: Sequence[Event]) -> list[Event]:
        stored = list(events)
        with self._lock:
            self._entries[key] = stored
        return stored

    def clear(self) -> None:
        """Drop every cached range."""

        with self._lock:
            self._entries.clear()

    def __len__(self) -> int:
        with self._lock:
            return len(self._entries)


__all__ = ["EventRangeCache", "EventRangeKey", "FeedCache", "FeedQuery"]
