"""Use case aggregating the three item collections into a single feed."""

from __future__ import annotations

import asyncio
import logging
from collections.abc import Iterable
from functools import partial

import anyio
import anyio.to_thread
from sqlalchemy.orm import Session, sessionmaker

from chapterhub.domain.entities import Channel, FeedItem, FeedItemKind
from chapterhub.domain.exceptions import StoreUnavailableError
from chapterhub.infrastructure.cache import FeedCache, FeedQuery
from chapterhub.infrastructure.repositories import FeedItemRepository

logger = logging.getLogger(__name__)

DEFAULT_PAGE_SIZE = 20


def _fetch_collection(
    session_factory: sessionmaker[Session],
    kind: FeedItemKind,
    channels: frozenset[Channel],
    page_size: int,
) -> list[FeedItem]:
    with session_factory() as session:
        return FeedItemRepository(session).list_recent(kind, channels=channels, limit=page_size)


async def get_feed_items(
    session_factory: sessionmaker[Session],
    cache: FeedCache,
    *,
    channels: Iterable[Channel | str],
    item_kind: FeedItemKind | str | None = None,
    page_size: int = DEFAULT_PAGE_SIZE,
    force_refresh: bool = False,
    timeout: float | None = None,
) -> list[FeedItem]:
    """Return the newest items across collections, newest first.

    Each collection is queried concurrently with its own session and capped at
    ``page_size``; the merged result is sorted and truncated to ``page_size``
    again. When one kind dominates the recent history this can return fewer
    items of the other kinds than a global query would.

    A cached feed is returned as-is unless ``force_refresh`` is set. Unless the
    cache is keyed, the cached feed is served regardless of ``channels``,
    ``item_kind`` and ``page_size``.
    """

    if page_size < 1:
        raise ValueError("page_size must be at least 1")
    query = FeedQuery.build(channels, item_kind, page_size)

    if not force_refresh:
        cached = cache.get(query)
        if cached is not None:
            logger.debug("Returning cached feed items")
            return cached

    generation = cache.generation
    kinds = [query.item_kind] if query.item_kind else list(FeedItemKind)
    logger.debug("Fetching feed items from %s", ", ".join(kind.collection for kind in kinds))

    try:
        with anyio.fail_after(timeout):
            results = await asyncio.gather(
                *(
                    anyio.to_thread.run_sync(
                        partial(
                            _fetch_collection,
                            session_factory,
                            kind,
                            query.channels,
                            page_size,
                        ),
                        abandon_on_cancel=True,
                    )
                    for kind in kinds
                )
            )
    except TimeoutError as exc:
        raise StoreUnavailableError("feed aggregation", "timed out") from exc

    merged = [item for collection in results for item in collection]
    logger.info("Fetched %d feed documents", len(merged))
    merged.sort(key=lambda item: item.created_at, reverse=True)
    feed_items = merged[:page_size]

    if not cache.store(query, feed_items, generation):
        logger.debug("Feed cache invalidated during fetch; result not cached")
    return feed_items


__all__ = ["DEFAULT_PAGE_SIZE", "get_feed_items"]
